"""
unsorted.py
===========

Buffered values with exact median / mode, sorted lazily.

The buffer is only sorted when a statistic needs it, and the sort is
remembered until the next mutation: any number of ``add`` / ``extend`` /
``merge`` calls cost one sort at the next query, and repeated queries with
no mutation in between cost none.

Values are held in :class:`Partial` wrappers so that floats containing NaN
still sort into one well-defined order (NaNs last).
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional

from .base import BaseConfig, Commute
from ._registry import register_accumulator
from .partial import Partial
from .sorted import median_on_sorted, mode_on_sorted

_LOG = logging.getLogger(__name__)


def median(values: Iterable[Any]) -> Optional[float]:
    """
    Exact median of a finite stream (``None`` if empty).

    Time ``O(n log n)``, space ``O(n)``.
    """
    return Unsorted.from_iter(values).median()


def mode(values: Iterable[Any]) -> Optional[Any]:
    """
    Exact mode of a finite stream.

    Time ``O(n log n)``, space ``O(n)``. Returns ``None`` if the stream is
    empty or has no unique most common value.
    """
    return Unsorted.from_iter(values).mode()


@register_accumulator("unsorted")
class Unsorted(Commute):
    """A mergeable buffer of values that sorts itself on demand."""

    def __init__(self, config: BaseConfig | None = None) -> None:
        super().__init__(config)
        self._data      : List[Partial] = []
        self._sorted    : bool          = True   # empty buffer is trivially sorted

    # ---- mutation (marks dirty) ---- #
    def add(self, value: Any) -> None:
        self._sorted = False
        self._data.append(Partial(value))

    def extend(self, values: Iterable[Any]) -> None:
        self._sorted = False
        self._data.extend(Partial(v) for v in values)

    def merge(self, other: "Unsorted") -> "Unsorted":
        self._check_mergeable(other)
        self._sorted = False
        self._data.extend(other._data)
        return self

    def _sort(self) -> None:
        if self._sorted:
            return
        _LOG.debug("Sorting %d buffered values", len(self._data))
        self._data.sort()
        self._sorted = True

    # ---- statistics ---- #
    def median(self) -> Optional[float]:
        """Exact median as a float, ``None`` if empty."""
        self._sort()
        return median_on_sorted(self._data)

    def mode(self) -> Optional[Any]:
        """Most common value, ``None`` if empty or if the top count is tied."""
        self._sort()
        found = mode_on_sorted(self._data)
        return None if found is None else found.value

    def cardinality(self) -> int:
        """Number of distinct values (values must be hashable)."""
        return len(set(self._data))

    # ---- container helpers ---- #
    def __len__(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return not self._data

    def clear(self) -> None:
        self._data.clear()
        self._sorted = True

    def _describe(self) -> str:
        state = "sorted" if self._sorted else "dirty"
        return f"n={len(self._data)}, {state}"
