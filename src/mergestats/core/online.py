"""
online.py
=========

Single-pass mean / variance with O(1) memory, mergeable across shards.

Key traits
----------
* ``add`` uses Welford's update, so no large running sums are kept and
  precision does not degrade as the count grows.
* ``merge`` combines two (count, mean, M2) triples with the Chan et al.
  parallel formula; the result matches one accumulator built over the
  concatenated input (up to floating-point rounding).
* Variance is the *population* variance ``M2 / count``. An empty
  accumulator reports mean and variance ``0.0``.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable

import numpy as np

from .base import BaseConfig, Commute
from ._registry import register_accumulator

_LOG = logging.getLogger(__name__)


def mean(values: Iterable[float]) -> float:
    """Arithmetic mean of *values* in one streaming pass (0.0 if empty)."""
    return OnlineStats.from_iter(values).mean()


def variance(values: Iterable[float]) -> float:
    """Population variance of *values* in one streaming pass (0.0 if empty)."""
    return OnlineStats.from_iter(values).variance()


def stddev(values: Iterable[float]) -> float:
    """Population standard deviation of *values* (0.0 if empty)."""
    return OnlineStats.from_iter(values).stddev()


@register_accumulator("online")
class OnlineStats(Commute):
    """Running count, mean and variance of a numeric stream."""

    def __init__(self, config: BaseConfig | None = None) -> None:
        super().__init__(config)
        self._count     : int   = 0
        self._mean      : float = 0.0
        self._m2        : float = 0.0   # sum of squared deviations from the mean

    @classmethod
    def from_slice(cls, values, **kwargs) -> "OnlineStats":
        """
        Build from a finite sequence, adding values in order.

        Parameters
        ----------
        values
            A sequence of numbers, or a NumPy array of any shape (read
            flattened, in C order). Iterators and generators are streamed
            through :meth:`from_iter`.
        """
        if not hasattr(values, "__len__"):
            return cls.from_iter(values, **kwargs)
        stats = cls(**kwargs)
        for value in np.asarray(values).ravel():
            stats.add(value)
        return stats

    # -------------  incremental math  ------------ #
    def add(self, value: float) -> None:
        x = float(value)
        self._count += 1
        delta = x - self._mean
        self._mean += delta / self._count
        # second factor uses the *updated* mean
        self._m2 += delta * (x - self._mean)

    def merge(self, other: "OnlineStats") -> "OnlineStats":
        self._check_mergeable(other)
        if other._count == 0:
            return self
        if self._count == 0:
            self._count, self._mean, self._m2 = other._count, other._mean, other._m2
            return self

        n1, n2 = self._count, other._count
        n = n1 + n2
        delta = other._mean - self._mean
        self._mean += delta * n2 / n
        self._m2 += other._m2 + delta * delta * n1 * n2 / n
        self._count = n
        return self

    # ____________ accessors ____________
    def mean(self) -> float:
        return self._mean

    def variance(self) -> float:
        if self._count == 0:
            return 0.0
        return self._m2 / self._count

    def stddev(self) -> float:
        return math.sqrt(self.variance())

    def __len__(self) -> int:
        return self._count

    def is_empty(self) -> bool:
        return self._count == 0

    def clear(self) -> None:
        self._count, self._mean, self._m2 = 0, 0.0, 0.0

    def _describe(self) -> str:
        return f"n={self._count}, mean={self._mean:.6g}, stddev={self.stddev():.6g}"
