from __future__ import annotations          # <- future-proof typing
from abc import ABC, abstractmethod
import logging
from typing import Any, Iterable, TypeVar

from ._config import BaseConfig

_LOG = logging.getLogger(__name__)

C = TypeVar("C", bound="Commute")


class Commute(ABC):
    """Common interface for all mergeable accumulators.

    An accumulator is fed values one at a time (``add``) or in bulk
    (``extend``) and can absorb another accumulator of the same kind
    (``merge``). Merging is associative and commutative: the result is the
    statistic of the concatenated inputs, whatever the merge order.
    """

    def __init__(self, config: BaseConfig | None = None):
        if config is None:
            config = self._default_config()
        if not isinstance(config, BaseConfig):
            raise TypeError(
                f"'config' must be a BaseConfig (got {type(config).__name__})."
            )
        self.config     : BaseConfig = config

    @classmethod
    def _default_config(cls) -> BaseConfig:
        return BaseConfig()

    @classmethod
    def from_iter(cls: type[C], values: Iterable[Any], **kwargs: Any) -> C:
        """Build an accumulator over a finite iterable of values."""
        acc = cls(**kwargs)
        acc.extend(values)
        return acc

    @abstractmethod
    def add(self, value: Any) -> None:
        """Add a single value."""
        ...

    def extend(self, values: Iterable[Any]) -> None:
        for value in values:
            self.add(value)

    @abstractmethod
    def merge(self: C, other: C) -> C:
        """
        Fold *other* into this accumulator in place and return ``self``.

        *other* is left untouched. Both accumulators must be of the same kind.
        """
        ...

    def consume(self: C, others: Iterable[C]) -> C:
        """Merge every accumulator of *others* into this one."""
        for other in others:
            self.merge(other)
        return self

    # ------------ internal helpers (for subclasses) ------------------- #
    def _check_mergeable(self, other: Any) -> None:
        if not isinstance(other, type(self)):
            raise TypeError(
                f"Cannot merge {type(other).__name__} into {type(self).__name__}."
            )
        _LOG.debug("Merging %r into %r", other, self)

    def _describe(self) -> str:
        """Short state summary used by ``__repr__``."""
        return ""

    # ------------------------------------------------------------------ #
    # nice string representation                                         #
    # ------------------------------------------------------------------ #
    def __repr__(self) -> str:
        cls = self.__class__.__name__
        parts = [self._describe()]
        if self.config.label is not None:
            parts.append(f"label={self.config.label!r}")
        return f"{cls}({', '.join(p for p in parts if p)})"


__all__ = [
    "BaseConfig",
    "Commute",
]
