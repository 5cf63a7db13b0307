"""Enumeration of the value sets a killer region can hold."""

from __future__ import annotations
import logging
import threading
from typing import Dict, FrozenSet, Iterable, List, Optional, Sequence, Tuple, Union

logger = logging.getLogger(__name__)

Combination = FrozenSet[int]
CacheKey = Tuple[int, int, int]


def enumerate_subsets(
    total: int,
    count: int,
    universe: Union[int, Iterable[int]],
) -> List[Combination]:
    """
    Find every subset of `count` distinct elements of `universe` summing to `total`.

    Args:
        total: Required sum of the subset.
        count: Number of elements in each subset.
        universe: Distinct positive integers to draw from, or an int N
            meaning {1..N}.

    Returns:
        List of frozensets, without duplicates.

    Example:
        >>> sorted(sorted(s) for s in enumerate_subsets(25, 4, 9))[0]
        [1, 7, 8, 9]
    """
    if isinstance(universe, int):
        values = tuple(range(1, universe + 1))
    else:
        values = tuple(sorted(set(universe)))
    return _enumerate(total, count, values)


def _enumerate(total: int, count: int, values: Sequence[int]) -> List[Combination]:
    """Recursive step of enumerate_subsets over a sorted tuple of values."""
    if count < 0:
        return []
    if count == 0:
        return [frozenset()] if total == 0 else []
    if count == 1:
        return [frozenset((total,))] if total in values else []

    result = []
    for idx, first in enumerate(values):
        # values are sorted, so nothing further along can fit either
        if first >= total:
            break
        # later branches never reuse an element already tried as `first`
        for rest in _enumerate(total - first, count - 1, values[idx + 1:]):
            result.append(rest | {first})
    return result


class SubsetCache:
    """
    Memo table of region value sets keyed by (total, count, size).

    Entries are computed against the universe {1..size} on first request and
    kept until clear() is called. Population is guarded by a lock so several
    solves may share one cache.
    """

    def __init__(self):
        self._table: Dict[CacheKey, Tuple[Combination, ...]] = {}
        self._lock = threading.Lock()

    def get(self, total: int, count: int, size: int) -> Tuple[Combination, ...]:
        """Return every `count`-subset of {1..size} whose elements sum to `total`."""
        key = (total, count, size)
        combinations = self._table.get(key)
        if combinations is not None:
            return combinations

        with self._lock:
            combinations = self._table.get(key)
            if combinations is None:
                combinations = tuple(enumerate_subsets(total, count, size))
                self._table[key] = combinations
                logger.debug(
                    "Cached %d combinations for sum=%d count=%d size=%d",
                    len(combinations), total, count, size,
                )
        return combinations

    def clear(self) -> None:
        """Drop every cached entry."""
        with self._lock:
            self._table.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._table

    def __len__(self) -> int:
        return len(self._table)


default_cache = SubsetCache()


def sum_combinations(
    total: int,
    count: int,
    size: int,
    cache: Optional[SubsetCache] = None,
) -> Tuple[Combination, ...]:
    """Cached enumerate_subsets over {1..size}, using the process-wide cache by default."""
    if cache is None:
        cache = default_cache
    return cache.get(total, count, size)
