"""
frequency.py
============

Exact occurrence counts per distinct value.

Public API
----------

Frequencies.add / extend / merge
Frequencies.count(value)
Frequencies.cardinality()
Frequencies.most_frequent() / least_frequent()

Values must be hashable. Ranked views break ties between equal counts with
the rule configured in :class:`FrequenciesConfig` (ascending value by
default), so their output is reproducible across runs and merge orders.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Any, Hashable, List, Tuple

from .base import Commute
from ._config import FrequenciesConfig, TieBreak
from ._registry import register_accumulator
from .partial import Partial

_LOG = logging.getLogger(__name__)


@register_accumulator("frequencies")
class Frequencies(Commute):
    """
    Frequency table over a stream of hashable values.

    Parameters
    ----------
    config : FrequenciesConfig, optional
        Ranking knobs; defaults to ``FrequenciesConfig()``.

    Attributes
    ----------
    config : FrequenciesConfig
        The active configuration.
    _counts : collections.Counter
        value → count, every count ≥ 1, keys in first-seen order.
    """

    def __init__(self, config: FrequenciesConfig | None = None) -> None:
        super().__init__(config)
        if not isinstance(self.config, FrequenciesConfig):
            # a plain BaseConfig is accepted; only its label carries over
            self.config = FrequenciesConfig(label=self.config.label)

        self._counts    : Counter = Counter()

    @classmethod
    def _default_config(cls) -> FrequenciesConfig:
        return FrequenciesConfig()

    # ---- mandatory API  ---- #
    def add(self, value: Hashable) -> None:
        self._counts[value] += 1

    def extend(self, values) -> None:
        self._counts.update(iter(values))

    def merge(self, other: "Frequencies") -> "Frequencies":
        self._check_mergeable(other)
        # Counter.update adds counts and appends unseen keys in other's order
        self._counts.update(other._counts)
        return self

    # ---- queries ---- #
    def count(self, value: Hashable) -> int:
        """Occurrences of *value* (0 if never seen)."""
        return self._counts.get(value, 0)

    def cardinality(self) -> int:
        """Number of distinct values."""
        return len(self._counts)

    def total(self) -> int:
        """Number of values ever added (sum of all counts)."""
        return sum(self._counts.values())

    def most_frequent(self) -> List[Tuple[Any, int]]:
        """
        ``(value, count)`` pairs sorted by count, highest first.

        Returns
        -------
        list[tuple[Any, int]]
            Every distinct value exactly once; equal counts follow
            ``config.tie_break``.
        """
        return self._ranked(descending=True)

    def least_frequent(self) -> List[Tuple[Any, int]]:
        """``(value, count)`` pairs sorted by count, lowest first."""
        return self._ranked(descending=False)

    def _ranked(self, *, descending: bool) -> List[Tuple[Any, int]]:
        sign = -1 if descending else 1
        items = list(self._counts.items())
        if self.config.tie_break is TieBreak.by_insertion:
            # sorted() is stable: ties keep first-seen order
            return sorted(items, key=lambda kv: sign * kv[1])
        return sorted(items, key=lambda kv: (sign * kv[1], Partial(kv[0])))

    # ---- container helpers ---- #
    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, value: object) -> bool:
        return value in self._counts

    def is_empty(self) -> bool:
        return not self._counts

    def clear(self) -> None:
        self._counts.clear()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Frequencies):
            return NotImplemented
        return dict(self._counts) == dict(other._counts)

    def _describe(self) -> str:
        return f"distinct={len(self._counts)}, total={self.total()}"
