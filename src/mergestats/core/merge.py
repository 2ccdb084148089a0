from __future__ import annotations

import logging
from typing import Iterable, Optional, TypeVar

from .base import Commute

_LOG = logging.getLogger(__name__)

C = TypeVar("C", bound=Commute)


def merge_all(accumulators: Iterable[C]) -> Optional[C]:
    """
    Fold same-kind accumulators into one.

    Parameters
    ----------
    accumulators
        Finite iterable of accumulators of one kind, e.g. the partial
        results computed over the shards of a data set.

    Returns
    -------
    Commute | None
        The first accumulator, updated in place with every other one merged
        into it; ``None`` when *accumulators* is empty (no data to merge,
        which is not the same as one empty accumulator).

    Raises
    ------
    TypeError
        If the accumulators are not all of the same kind.
    """
    it = iter(accumulators)
    first = next(it, None)
    if first is None:
        _LOG.debug("merge_all called with no accumulators")
        return None

    n_merged = 1
    for acc in it:
        first.merge(acc)
        n_merged += 1
    _LOG.info("Merged %d %s accumulators", n_merged, type(first).__name__)
    return first
