#!/usr/bin/env python3
"""
Best-of-N search for a_1*1^n + ... + a_{i-1}*(i-1)^n == i^n.

For each exponent the search starts from the cached best (or one fresh
greedy pass), runs `tries` more passes, and keeps the map with the
smallest coefficient sum. solve_range() repeats this for n = 2..n_max
with one BestResults cache scoped to the call.
"""

from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from typing import Dict, Optional

from best_results import BestResults, get_best, sum_coefficients
from decomposer import CoefficientMap, exponent_polynomial, verify_decomposition
from widepow import WIDTH_BITS, wide_pow


logger = logging.getLogger(__name__)

ResultsByExponent = Dict[int, CoefficientMap]


@dataclass(frozen=True)
class SearchProblem:
    i: int
    n: int
    tries: int

    def __post_init__(self) -> None:
        if self.i < 2:
            raise ValueError(f"base i must be >= 2, got {self.i}")
        if self.n < 1:
            raise ValueError(f"exponent n must be >= 1, got {self.n}")
        if self.tries < 0:
            raise ValueError(f"tries must be non-negative, got {self.tries}")

    @property
    def target(self) -> int:
        return wide_pow(self.i, self.n)


def find_smallest_exponent_polynomial(tries: int, target: int, i: int, n: int,
                                      cache: Optional[BestResults] = None,
                                      rng: Optional[random.Random] = None,
                                      write_back: bool = True,
                                      width: Optional[int] = WIDTH_BITS) -> CoefficientMap:
    if cache is None:
        cache = BestResults()
    if rng is None:
        rng = random.Random()

    best = cache.get_prior_result(i, target, n, rng=rng, width=width)
    verify_decomposition(best, target, n, width)
    for trial in range(tries):
        attempt = exponent_polynomial(target, i, n, rng=rng, width=width)
        verify_decomposition(attempt, target, n, width)
        previous = best
        best = get_best(best, attempt)
        if best is not previous:
            logger.debug("trial %d improved n=%d to coefficient sum %d",
                         trial + 1, n, sum_coefficients(best))

    if write_back:
        cache.store(i, target, n, best)
    return best


def attack(tries: int, i: int, n: int,
           cache: Optional[BestResults] = None,
           rng: Optional[random.Random] = None,
           write_back: bool = True,
           width: Optional[int] = WIDTH_BITS) -> CoefficientMap:
    """Solve a_1*1^n + ... + a_{i-1}*(i-1)^n == i^n; return the coefficients."""
    problem = SearchProblem(i=i, n=n, tries=tries)
    target = wide_pow(problem.i, problem.n, width)
    logger.info("Solving for i=%d, n=%d, i**n = %d", i, n, target)
    return find_smallest_exponent_polynomial(problem.tries, target, problem.i, problem.n,
                                             cache=cache, rng=rng, write_back=write_back, width=width)


def solve_range(i: int, n_max: int, tries: int,
                cache: Optional[BestResults] = None,
                rng: Optional[random.Random] = None,
                write_back: bool = True,
                width: Optional[int] = WIDTH_BITS) -> ResultsByExponent:
    if n_max < 2:
        raise ValueError(f"maximum exponent must be >= 2, got {n_max}")
    SearchProblem(i=i, n=n_max, tries=tries)  # rejects bad i or tries before any work
    if cache is None:
        cache = BestResults()
    if rng is None:
        rng = random.Random()

    results: ResultsByExponent = {}
    for n in range(2, n_max + 1):
        results[n] = attack(tries, i, n, cache=cache, rng=rng,
                            write_back=write_back, width=width)
    return results
