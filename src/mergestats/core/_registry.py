# _registry.py
from __future__ import annotations
from typing import Any

from .base import BaseConfig, Commute

_ACCUMULATORS: dict[str, type[Commute]] = {}


def register_accumulator(name: str):
    def _decorator(cls: type[Commute]):
        _ACCUMULATORS[name.lower()] = cls
        return cls
    return _decorator


def available_accumulators() -> list[str]:
    """Names accepted by :func:`get_accumulator`, sorted."""
    return sorted(_ACCUMULATORS)


def get_accumulator(name: str, /, config: BaseConfig | None = None, **kwargs: Any) -> Commute:
    """
    Factory that instantiates an empty registered accumulator.

    Parameters
    ----------
    name : str
        The key used in ``@register_accumulator`` (case-insensitive).
    config : BaseConfig, optional
        Knobs for the accumulator (e.g. ``FrequenciesConfig``). ``None``
        selects the accumulator's default config.
    **kwargs
        Passed straight into the accumulator's ``__init__``.

    Returns
    -------
    Commute
        An empty accumulator, ready for ``add`` / ``merge``.
    """
    try:
        cls = _ACCUMULATORS[name.lower()]
    except KeyError as exc:
        raise ValueError(
            f"Unknown accumulator '{name}'. Available: {available_accumulators()}"
        ) from exc

    if config is not None and not isinstance(config, BaseConfig):
        raise TypeError(
            f"'config' must be a BaseConfig (got {type(config).__name__})."
        )

    return cls(config=config, **kwargs)
