#!/usr/bin/env python3
"""
Keep the coefficient map with the smallest coefficient sum.

BestResults is the per-run memo of the best map found for each (i, n).
A search reads it once before its trial loop (get_prior_result) and may
write its final best back once afterwards (store). Both happen under one
lock, which is never held across the trial loop.
"""

from __future__ import annotations
import logging
import random
import threading
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from decomposer import CoefficientMap, exponent_polynomial
from widepow import WIDTH_BITS


logger = logging.getLogger(__name__)


def sum_coefficients(result: CoefficientMap) -> int:
    return sum(result.values())


def get_best(a: CoefficientMap, b: CoefficientMap) -> CoefficientMap:
    """Return b only if its coefficient sum is strictly smaller; ties keep a."""
    if sum_coefficients(a) > sum_coefficients(b):
        return b
    return a


@dataclass
class CachedResult:
    target: int
    coefficients: CoefficientMap


class BestResults:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: Dict[Tuple[int, int], CachedResult] = {}

    def get_prior_result(self, i: int, target: int, n: int,
                         rng: Optional[random.Random] = None,
                         width: Optional[int] = WIDTH_BITS) -> CoefficientMap:
        """Copy of the cached map for (i, n), or one fresh greedy pass on a miss.

        A cached map is only reused when it was solved for the same target.
        The fresh pass is not stored here.
        """
        with self._lock:
            entry = self._entries.get((i, n))
            if entry is not None and entry.target == target:
                logger.debug("reusing cached result for i=%d, n=%d (sum %d)",
                             i, n, sum_coefficients(entry.coefficients))
                return dict(entry.coefficients)
            return exponent_polynomial(target, i, n, rng=rng, width=width)

    def store(self, i: int, target: int, n: int, result: CoefficientMap) -> bool:
        """Cache result for (i, n) unless the cached one is at least as good.

        Returns True when the cache changed.
        """
        with self._lock:
            entry = self._entries.get((i, n))
            if entry is not None and entry.target == target:
                if get_best(entry.coefficients, result) is entry.coefficients:
                    return False
            self._entries[(i, n)] = CachedResult(target=target, coefficients=dict(result))
            return True

    def get(self, i: int, n: int) -> Optional[CoefficientMap]:
        with self._lock:
            entry = self._entries.get((i, n))
            return None if entry is None else dict(entry.coefficients)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, key: Tuple[int, int]) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
