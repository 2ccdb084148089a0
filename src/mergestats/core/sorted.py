"""
Order statistics over data that is already sorted.
"""
from __future__ import annotations

from itertools import groupby
from typing import Any, Iterable, Optional, Sequence

from .partial import Partial


def _to_float(x: Any) -> float:
    return float(x.value if isinstance(x, Partial) else x)


def median_on_sorted(data: Sequence[Any]) -> Optional[float]:
    """
    Exact median of a sorted sequence.

    Args:
        data: sorted numbers, or sorted :class:`Partial` wrappers of numbers.
    Returns:
        The middle value (odd length) or the mean of the two middle values
        (even length) as a float; ``None`` for an empty sequence.
    """
    n = len(data)
    if n == 0:
        return None
    mid = n // 2
    if n % 2:
        return _to_float(data[mid])
    return (_to_float(data[mid - 1]) + _to_float(data[mid])) / 2.0


def mode_on_sorted(items: Iterable[Any]) -> Optional[Any]:
    """
    Value of the single longest run of equal items in a sorted stream.

    Returns ``None`` when the stream is empty or when two or more runs share
    the longest length (so an all-distinct stream of length > 1 has no mode).
    """
    mode, best, tied = None, 0, False
    for value, run in groupby(items):
        length = sum(1 for _ in run)
        if length > best:
            mode, best, tied = value, length, False
        elif length == best:
            tied = True
    return None if tied else mode
