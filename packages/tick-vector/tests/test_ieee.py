"""Tests for IEEE-754 float helpers."""
from __future__ import annotations

import math

from tick_vector.ieee import TAU, acos_or_nan, cos_or_nan, fdiv, sin_or_nan


class TestFdiv:
    def test_regular_division(self) -> None:
        assert fdiv(1.0, 4.0) == 0.25

    def test_positive_zero_divisor(self) -> None:
        assert fdiv(1.0, 0.0) == math.inf
        assert fdiv(-1.0, 0.0) == -math.inf
        assert fdiv(math.inf, 0.0) == math.inf

    def test_negative_zero_divisor_flips_sign(self) -> None:
        assert fdiv(1.0, -0.0) == -math.inf
        assert fdiv(-1.0, -0.0) == math.inf

    def test_zero_or_nan_over_zero_is_nan(self) -> None:
        assert math.isnan(fdiv(0.0, 0.0))
        assert math.isnan(fdiv(-0.0, 0.0))
        assert math.isnan(fdiv(math.nan, 0.0))

    def test_int_zero_divisor(self) -> None:
        assert fdiv(3, 0) == math.inf


class TestAcosOrNan:
    def test_in_range(self) -> None:
        assert acos_or_nan(1.0) == 0.0
        assert acos_or_nan(-1.0) == math.pi
        assert acos_or_nan(0.0) == math.pi / 2

    def test_just_past_one_is_nan(self) -> None:
        assert math.isnan(acos_or_nan(1.0000000000000002))

    def test_out_of_range_is_nan(self) -> None:
        assert math.isnan(acos_or_nan(-1.5))
        assert math.isnan(acos_or_nan(math.inf))
        assert math.isnan(acos_or_nan(math.nan))


class TestCosOrNan:
    def test_finite(self) -> None:
        assert cos_or_nan(0.0) == 1.0
        assert cos_or_nan(math.pi) == -1.0

    def test_infinite_is_nan(self) -> None:
        assert math.isnan(cos_or_nan(math.inf))
        assert math.isnan(cos_or_nan(-math.inf))

    def test_nan_passes_through(self) -> None:
        assert math.isnan(cos_or_nan(math.nan))


class TestSinOrNan:
    def test_finite(self) -> None:
        assert sin_or_nan(0.0) == 0.0
        assert sin_or_nan(math.pi / 2) == 1.0

    def test_infinite_is_nan(self) -> None:
        assert math.isnan(sin_or_nan(math.inf))
        assert math.isnan(sin_or_nan(-math.inf))

    def test_nan_passes_through(self) -> None:
        assert math.isnan(sin_or_nan(math.nan))


def test_tau() -> None:
    assert TAU == math.tau
