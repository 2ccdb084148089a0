import pytest

from mergestats import BaseConfig, MinMax, OnlineStats


def test_minmax() -> None:
    minmax = MinMax.from_iter([1, 4, 2, 3, 10])
    assert minmax.min() == 1
    assert minmax.max() == 10
    assert len(minmax) == 5


def test_minmax_empty() -> None:
    minmax = MinMax()
    assert minmax.min() is None
    assert minmax.max() is None
    assert minmax.is_empty()


def test_minmax_merge_empty() -> None:
    mx1 = MinMax.from_iter([1, 4, 2, 3, 10])
    mx1.merge(MinMax())
    assert mx1.min() == 1
    assert mx1.max() == 10

    mx2 = MinMax().merge(MinMax.from_iter([1, 4, 2, 3, 10]))
    assert mx2 == mx1


@pytest.mark.parametrize(
    "left, right",
    [
        ([5, 6, 7], [1, 2, 3]),
        ([1, 10], [4, 5]),       # right range inside left
        ([4, 5], [1, 10]),       # left range inside right
        ([-3], [8]),
    ],
)
def test_minmax_merge_matches_concatenation(left, right) -> None:
    expected = MinMax.from_iter(left + right)
    assert MinMax.from_iter(left).merge(MinMax.from_iter(right)) == expected
    assert MinMax.from_iter(right).merge(MinMax.from_iter(left)) == expected


def test_minmax_skips_nan() -> None:
    minmax = MinMax.from_iter([float("nan"), 2.0, 1.0, float("nan")])
    assert minmax.min() == 1.0
    assert minmax.max() == 2.0
    assert len(minmax) == 2


def test_minmax_works_on_any_ordered_type() -> None:
    minmax = MinMax.from_iter(["pear", "apple", "zucchini"])
    assert (minmax.min(), minmax.max()) == ("apple", "zucchini")


def test_minmax_clear() -> None:
    minmax = MinMax.from_iter([3, 1])
    minmax.clear()
    assert minmax == MinMax()


def test_minmax_refuses_other_kinds() -> None:
    with pytest.raises(TypeError):
        MinMax().merge(OnlineStats())


def test_minmax_repr_carries_label() -> None:
    minmax = MinMax.from_iter([1, 2], config=BaseConfig(label="shard-1"))
    assert repr(minmax) == "MinMax(min=1, max=2, label='shard-1')"
