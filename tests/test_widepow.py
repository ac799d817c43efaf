"""Tests for fixed-width exact arithmetic."""

from __future__ import annotations

import pytest

from widepow import WIDTH_BITS, WideOverflowError, check_width, wide_mul, wide_pow, wide_sum


class TestWidePow:
    def test_small_powers(self) -> None:
        assert wide_pow(10, 3) == 1000
        assert wide_pow(7, 0) == 1
        assert wide_pow(1, 500) == 1

    def test_largest_scenario_fits_default_width(self) -> None:
        assert wide_pow(25, 25) == 25 ** 25

    def test_top_bit_fits(self) -> None:
        assert wide_pow(2, WIDTH_BITS - 1) == 2 ** 127

    def test_overflow_raises(self) -> None:
        with pytest.raises(WideOverflowError, match="128 bits"):
            wide_pow(2, 128)

    def test_overflow_is_an_overflow_error(self) -> None:
        with pytest.raises(OverflowError):
            wide_pow(40, 30)

    def test_narrow_width(self) -> None:
        assert wide_pow(2, 7, width=8) == 128
        with pytest.raises(WideOverflowError):
            wide_pow(2, 8, width=8)

    def test_arbitrary_precision(self) -> None:
        assert wide_pow(40, 30, width=None) == 40 ** 30

    def test_negative_exponent_rejected(self) -> None:
        with pytest.raises(ValueError):
            wide_pow(3, -1)


class TestCheckedOps:
    def test_check_width_rejects_negative(self) -> None:
        with pytest.raises(WideOverflowError, match="negative"):
            check_width(-1)

    def test_check_width_returns_value(self) -> None:
        assert check_width(2 ** 128 - 1) == 2 ** 128 - 1

    def test_mul(self) -> None:
        assert wide_mul(3, 5) == 15
        with pytest.raises(WideOverflowError):
            wide_mul(2 ** 64, 2 ** 64)

    def test_sum(self) -> None:
        assert wide_sum([1, 2, 3]) == 6
        assert wide_sum([]) == 0
        with pytest.raises(WideOverflowError):
            wide_sum([2 ** 127, 2 ** 127])

    def test_sum_arbitrary_precision(self) -> None:
        assert wide_sum([2 ** 127, 2 ** 127], width=None) == 2 ** 128
