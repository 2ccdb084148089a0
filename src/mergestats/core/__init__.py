
from ._registry import available_accumulators, get_accumulator, register_accumulator
from ._config import BaseConfig, FrequenciesConfig, TieBreak
from .base import Commute
from .partial import Partial, total_cmp
from .minmax import MinMax
from .frequency import Frequencies
from .online import OnlineStats, mean, stddev, variance
from .sorted import median_on_sorted, mode_on_sorted
from .unsorted import Unsorted, median, mode
from .merge import merge_all
