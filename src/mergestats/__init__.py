"""
mergestats – public API
"""
from importlib.metadata import PackageNotFoundError, version as _pkg_version

from .core.base import Commute
from .core._config import BaseConfig, FrequenciesConfig, TieBreak
from .core._registry import available_accumulators, get_accumulator
from .core.partial import Partial
from .core.minmax import MinMax
from .core.frequency import Frequencies
from .core.online import OnlineStats, mean, stddev, variance
from .core.unsorted import Unsorted, median, mode
from .core.merge import merge_all

__all__ = [
    "BaseConfig",
    "Commute",
    "Frequencies",
    "FrequenciesConfig",
    "MinMax",
    "OnlineStats",
    "Partial",
    "TieBreak",
    "Unsorted",
    "available_accumulators",
    "get_accumulator",
    "mean",
    "median",
    "merge_all",
    "mode",
    "stddev",
    "variance",
    "__version__",
]

try:
    __version__ = _pkg_version(__name__)
except PackageNotFoundError:  # running from a source checkout
    __version__ = "0.0.0"
