#!/usr/bin/env python3
"""
Randomized greedy decomposition of a target into n-th powers.

One pass of exponent_polynomial() visits the bases 1..i-1 in a shuffled
order and takes as many copies of x**n as still fit into the remaining
target, the same move greedy coin change makes with the largest coin.
Shuffling decides which base gets first pick, so repeated passes produce
different coefficient maps with different coefficient sums.
"""

from __future__ import annotations
import logging
import random
from typing import Dict, List, Optional, Tuple

from widepow import WIDTH_BITS, check_width, wide_mul, wide_pow, wide_sum


logger = logging.getLogger(__name__)

CoefficientMap = Dict[int, int]


class DecompositionError(ArithmeticError):
    """A coefficient map does not reproduce the target it was built for."""


# ---------- Decomposer ----------

def exponent_polynomial(target: int, i: int, n: int,
                        rng: Optional[random.Random] = None,
                        width: Optional[int] = WIDTH_BITS) -> CoefficientMap:
    """Find a_1*1^n + a_2*2^n + ... + a_{i-1}*(i-1)^n == target, greedily in random order.

    Bases whose power exceeds the remaining target get no entry.
    """
    if rng is None:
        rng = random.Random()
    items: List[Tuple[int, int]] = [(x, wide_pow(x, n, width)) for x in range(1, i)]
    rng.shuffle(items)

    result: CoefficientMap = {}
    remaining = check_width(target, width)
    for x, xpow in items:
        c = remaining // xpow
        if c == 0:
            continue
        result[x] = c
        remaining %= xpow
        if remaining == 0:
            break
    if remaining:
        logger.debug("pass over bases 1..%d left residual %d", i - 1, remaining)
    return result


# ---------- Evaluator ----------

def compute_result(result: CoefficientMap, n: int,
                   width: Optional[int] = WIDTH_BITS) -> int:
    return wide_sum((wide_mul(wide_pow(x, n, width), c, width) for x, c in result.items()), width)


def verify_decomposition(result: CoefficientMap, target: int, n: int,
                         width: Optional[int] = WIDTH_BITS) -> None:
    total = compute_result(result, n, width)
    if total != target:
        raise DecompositionError(
            f"coefficients {result} sum to {total} under exponent {n}, expected {target}")
