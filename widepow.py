#!/usr/bin/env python3
"""
Exact integer arithmetic held to a fixed unsigned width.

Python ints never overflow, so the width is enforced by checking every
result against 2**width. Exceeding it raises WideOverflowError instead of
wrapping. Pass width=None to lift the limit (arbitrary precision).
"""

from __future__ import annotations
from typing import Iterable, Optional


WIDTH_BITS = 128


class WideOverflowError(OverflowError):
    """A value left the unsigned range [0, 2**width)."""


def check_width(value: int, width: Optional[int] = WIDTH_BITS) -> int:
    if value < 0:
        raise WideOverflowError(f"negative value {value} in unsigned arithmetic")
    if width is not None and value >> width:
        raise WideOverflowError(f"{value} does not fit in {width} bits")
    return value


def wide_pow(x: int, n: int, width: Optional[int] = WIDTH_BITS) -> int:
    """x**n by repeated squaring, checking every intermediate against the width."""
    if n < 0:
        raise ValueError("exponent must be non-negative")
    check_width(x, width)
    result = 1
    base = x
    while n:
        if n & 1:
            result = check_width(result * base, width)
        n >>= 1
        if n:
            base = check_width(base * base, width)
    return result


def wide_mul(a: int, b: int, width: Optional[int] = WIDTH_BITS) -> int:
    return check_width(check_width(a, width) * check_width(b, width), width)


def wide_sum(values: Iterable[int], width: Optional[int] = WIDTH_BITS) -> int:
    total = 0
    for v in values:
        total = check_width(total + check_width(v, width), width)
    return total
