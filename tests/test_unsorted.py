import logging
import math

import numpy as np
import pytest

from mergestats import Unsorted, median, mode

NAN = float("nan")


def test_median_stream() -> None:
    assert median(iter([3, 5, 7, 9])) == 6.0
    assert median(iter([3, 5, 7])) == 5.0


def test_median_floats() -> None:
    assert median([3.0, 5.0, 7.0, 9.0]) == 6.0
    assert median([9.0, 3.0, 7.0]) == 7.0
    assert median([4.0]) == 4.0


def test_median_empty_is_absent() -> None:
    assert median([]) is None
    assert Unsorted().median() is None


def test_median_matches_numpy(sample) -> None:
    assert median(sample) == pytest.approx(np.median(sample))
    assert median(sample[:-1]) == pytest.approx(np.median(sample[:-1]))


@pytest.mark.parametrize(
    "values, expected",
    [
        ([3, 5, 7, 9], None),
        ([3, 3, 3, 3], 3),
        ([3, 3, 3, 4], 3),
        ([4, 3, 3, 3], 3),
        ([1, 1, 2, 3, 3], None),   # run length 2 shared by 1 and 3
        ([5], 5),
        ([], None),
    ],
)
def test_mode_stream(values, expected) -> None:
    assert mode(iter(values)) == expected


def test_mode_floats() -> None:
    assert mode([3.0, 5.0, 7.0, 9.0]) is None
    assert mode([3.0, 3.0, 3.0, 3.0]) == 3.0
    assert mode([3.0, 3.0, 3.0, 4.0]) == 3.0
    assert mode([4.0, 3.0, 3.0, 3.0]) == 3.0
    assert mode([1.0, 1.0, 2.0, 3.0, 3.0]) is None


def test_mode_zero_is_not_absent() -> None:
    assert mode([0, 0, 1]) == 0


def test_nan_sorts_last() -> None:
    assert median([1.0, NAN, 3.0]) == 3.0
    assert mode([2.0, 1.0, 2.0]) == 2.0
    assert math.isnan(mode([NAN, 1.0, NAN]))


def test_cardinality() -> None:
    assert Unsorted.from_iter([1, 1, 2, 3, 3, 3]).cardinality() == 3
    assert Unsorted.from_iter([NAN, 1.0, float("nan")]).cardinality() == 2
    assert Unsorted().cardinality() == 0


def test_cardinality_agrees_with_mode_on_incomparable_values() -> None:
    buf = Unsorted.from_iter([frozenset({1}), frozenset({2})])
    assert buf.cardinality() == 2
    assert buf.mode() is None

    buf.add(frozenset({2}))
    assert buf.cardinality() == 2
    assert buf.mode() == frozenset({2})


def _sorts(caplog) -> int:
    return sum(1 for r in caplog.records if r.getMessage().startswith("Sorting"))


@pytest.fixture
def sort_log(caplog):
    with caplog.at_level(logging.DEBUG, logger="mergestats.core.unsorted"):
        yield caplog


def test_merge_is_lazy_and_matches_concatenation(sort_log) -> None:
    left = Unsorted.from_iter([9, 1])
    right = Unsorted.from_iter([5, 3, 7])
    left.median()
    assert _sorts(sort_log) == 1

    left.merge(right)
    assert _sorts(sort_log) == 1
    assert len(left) == 5
    assert left.median() == 5.0
    assert _sorts(sort_log) == 2
    assert "Sorting 5 buffered values" in sort_log.text
    assert left.median() == median([9, 1, 5, 3, 7])
    assert len(right) == 3


def test_repeated_queries_do_not_resort(sort_log) -> None:
    buf = Unsorted.from_iter([9, 3, 7, 5, 3])
    first = (buf.median(), buf.mode(), buf.cardinality())
    assert _sorts(sort_log) == 1

    assert (buf.median(), buf.mode(), buf.cardinality()) == first
    assert _sorts(sort_log) == 1


def test_mutation_marks_dirty(sort_log) -> None:
    buf = Unsorted.from_iter([2, 1])
    buf.median()
    buf.add(0)
    assert buf.median() == 1.0
    assert _sorts(sort_log) == 2

    buf.extend([5, 5])
    assert buf.mode() == 5
    assert buf.median() == 2.0
    assert _sorts(sort_log) == 3


def test_clear(sort_log) -> None:
    buf = Unsorted.from_iter([3, 1, 2])
    buf.clear()
    assert buf.is_empty()
    assert buf.median() is None
    assert buf.mode() is None
    assert _sorts(sort_log) == 0
