from __future__ import annotations

import logging
from typing import Any, Optional

from .base import BaseConfig, Commute
from ._registry import register_accumulator

_LOG = logging.getLogger(__name__)


@register_accumulator("minmax")
class MinMax(Commute):
    """
    Running minimum and maximum of a stream.

    Values are compared with their own ``<`` / ``>``. Values unequal to
    themselves (NaN) are skipped: they have no place in a min/max and would
    otherwise block every later comparison.
    """

    def __init__(self, config: BaseConfig | None = None) -> None:
        super().__init__(config)
        self._min   : Optional[Any] = None
        self._max   : Optional[Any] = None
        self._len   : int           = 0

    def add(self, value: Any) -> None:
        if value != value:
            return
        if self._len == 0:
            self._min = self._max = value
        else:
            if value < self._min:
                self._min = value
            if value > self._max:
                self._max = value
        self._len += 1

    def merge(self, other: "MinMax") -> "MinMax":
        self._check_mergeable(other)
        if other._len == 0:
            return self
        if self._len == 0:
            self._min, self._max = other._min, other._max
        else:
            if other._min < self._min:
                self._min = other._min
            if other._max > self._max:
                self._max = other._max
        self._len += other._len
        return self

    # ____________ accessors ____________
    def min(self) -> Optional[Any]:
        """Smallest value seen, ``None`` if empty."""
        return self._min

    def max(self) -> Optional[Any]:
        """Largest value seen, ``None`` if empty."""
        return self._max

    def __len__(self) -> int:
        return self._len

    def is_empty(self) -> bool:
        return self._len == 0

    def clear(self) -> None:
        self._min = self._max = None
        self._len = 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MinMax):
            return NotImplemented
        return (self._min, self._max, self._len) == (other._min, other._max, other._len)

    def _describe(self) -> str:
        return f"min={self._min!r}, max={self._max!r}"
