"""
partial.py
==========

Total-order adapter for partially ordered values.

Python floats are only partially ordered: ``nan < x``, ``nan > x`` and
``nan == x`` are all false, which leaves ``sorted`` with an order that
depends on where the NaNs happen to sit. :class:`Partial` wraps one value
and resolves every incomparable pair with a fixed rule:

* a value unequal to itself (NaN) orders after every self-equal value;
* any other incomparable pair is ordered by ``(hash, repr)`` of the values,
  so it is never reported equal unless the values themselves are.

Equality and hashing follow the same rule: wrapped NaNs are equal to each
other and share a hash bucket, and two wrapped values are equal only when
they are equal (or both NaN) underneath.
"""

from __future__ import annotations

from typing import Any

# every self-unequal value (NaN) shares this hash
_UNORDERED_HASH = hash("mergestats.partial.unordered")


def _is_unordered(x: Any) -> bool:
    return x != x


def _fallback_key(x: Any) -> tuple[int, str]:
    try:
        return hash(x), repr(x)
    except TypeError:
        return 0, repr(x)


def total_cmp(a: Any, b: Any) -> int:
    """
    Three-way comparison that never reports "incomparable".

    Returns
    -------
    int
        -1, 0 or 1 as ``a`` orders before, together with or after ``b``.
    """
    if a < b:
        return -1
    if b < a:
        return 1
    if a == b:
        return 0
    a_nan, b_nan = _is_unordered(a), _is_unordered(b)
    if a_nan or b_nan:
        if a_nan and b_nan:
            return 0
        return 1 if a_nan else -1
    # incomparable but unequal, e.g. two disjoint frozensets
    ka, kb = _fallback_key(a), _fallback_key(b)
    return (ka > kb) - (ka < kb)


class Partial:
    """Wrap *value* so that it sorts, compares and hashes totally."""

    __slots__ = ("value",)

    def __init__(self, value: Any) -> None:
        self.value = value

    def _cmp(self, other: Any) -> int:
        return total_cmp(self.value, other.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Partial):
            return NotImplemented
        return self._cmp(other) == 0

    def __lt__(self, other: Partial) -> bool:
        if not isinstance(other, Partial):
            return NotImplemented
        return self._cmp(other) < 0

    def __le__(self, other: Partial) -> bool:
        if not isinstance(other, Partial):
            return NotImplemented
        return self._cmp(other) <= 0

    def __gt__(self, other: Partial) -> bool:
        if not isinstance(other, Partial):
            return NotImplemented
        return self._cmp(other) > 0

    def __ge__(self, other: Partial) -> bool:
        if not isinstance(other, Partial):
            return NotImplemented
        return self._cmp(other) >= 0

    def __hash__(self) -> int:
        if _is_unordered(self.value):
            return _UNORDERED_HASH
        return hash(self.value)

    def __repr__(self) -> str:
        return f"Partial({self.value!r})"
