from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TieBreak(str, Enum):
    """Secondary ordering for equal counts in ranked frequency views."""

    by_value     = "value"       # ascending value (total order via Partial)
    by_insertion = "insertion"   # first-seen order of the key

    # -------- convenience helpers ------------------------------------
    @classmethod
    def from_string(cls, value: str) -> "TieBreak":
        """Coerce an arbitrary string into a TieBreak enum (raises on unknown)."""
        try:
            return cls(value.lower())
        except (ValueError, AttributeError) as exc:
            valid = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown tie-break '{value}'. Valid choices: {valid}") from exc

    @classmethod
    def choices(cls) -> list[str]:
        """Return the plain-string choices."""
        return [m.value for m in cls]


@dataclass(slots=True)
class BaseConfig:
    """Generic knobs that *any* accumulator accepts.

    Concrete subclasses extend this dataclass with the knobs of a single
    accumulator (see :class:`FrequenciesConfig`).
    """
    label: Optional[str] = None  # e.g. shard id, shown in repr and log lines


@dataclass(slots=True)
class FrequenciesConfig(BaseConfig):
    """
    Tunable parameters for :class:`Frequencies`. Inherits from :class:`BaseConfig`.

    Notes
    -----
    * ``tie_break`` decides the order of entries with equal counts in
      ``most_frequent()`` / ``least_frequent()``. Strings are accepted and
      coerced to :class:`TieBreak`.
    """
    tie_break: TieBreak = TieBreak.by_value

    def __post_init__(self) -> None:
        if not isinstance(self.tie_break, TieBreak):
            self.tie_break = TieBreak.from_string(self.tie_break)


__all__ = [
    "BaseConfig",
    "FrequenciesConfig",
    "TieBreak",
]
