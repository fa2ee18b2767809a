"""Unit tests for src.core.financial module."""

import math
from decimal import Decimal

import numpy as np
import pytest

from src.core.exceptions import InvalidParameterError
from src.core.financial import (
    calculate_emi,
    calculate_loan_from_emi,
    ensure_non_negative,
    round_half_up,
)


class TestCalculateEmi:
    """Tests for calculate_emi function."""

    def test_standard_loan(self):
        """10 lakh over 20 years at 8.5%."""
        emi = calculate_emi(1_000_000, 8.5, 240)
        # Expected around ₹8,678/month
        assert 8670 < emi < 8690

    def test_zero_principal(self):
        """Zero principal should return zero payment."""
        assert calculate_emi(0, 8.5, 240) == 0.0

    def test_zero_tenure(self):
        assert calculate_emi(1_000_000, 8.5, 0) == 0.0

    def test_zero_rate(self):
        """Zero interest rate should return principal/months."""
        assert calculate_emi(120_000, 0.0, 120) == 1000.0

    def test_shorter_tenure_costs_more(self):
        assert calculate_emi(2_000_000, 8.5, 120) > calculate_emi(2_000_000, 8.5, 300)

    def test_returns_python_float(self):
        assert type(calculate_emi(1_000_000, 8.5, 240)) is float


class TestCalculateLoanFromEmi:
    """Tests for calculate_loan_from_emi function."""

    def test_inverts_emi(self):
        """The loan an EMI services is the loan that produced it."""
        emi = calculate_emi(3_500_000, 9.0, 180)
        assert calculate_loan_from_emi(emi, 9.0, 180) == pytest.approx(3_500_000)

    def test_zero_rate(self):
        assert calculate_loan_from_emi(40_000, 0.0, 240) == 9_600_000

    def test_non_positive_emi(self):
        assert calculate_loan_from_emi(0, 8.5, 240) == 0.0
        assert calculate_loan_from_emi(-500, 8.5, 240) == 0.0


class TestRoundHalfUp:

    @pytest.mark.parametrize(
        "value, expected",
        [(2.5, 3.0), (3.5, 4.0), (2.4, 2.0), (0.0, 0.0), (1234567.49, 1234567.0)],
    )
    def test_rounding(self, value, expected):
        assert round_half_up(value) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [(-2.5, -2.0), (-2.6, -3.0), (-2.4, -2.0), (-1234567.5, -1234567.0)],
    )
    def test_negative_halves_round_toward_positive(self, value, expected):
        assert round_half_up(value) == expected


class TestEnsureNonNegative:

    def test_accepts_int_and_float(self):
        assert ensure_non_negative("price", 10) == 10.0
        assert ensure_non_negative("price", 0.5) == 0.5

    def test_accepts_numpy_scalars(self):
        """Values pulled out of pandas columns arrive as numpy scalars."""
        value = ensure_non_negative("price", np.int64(5_000_000))
        assert value == 5_000_000.0
        assert type(value) is float
        assert ensure_non_negative("price", np.float32(2.5)) == 2.5

    def test_accepts_decimal(self):
        assert ensure_non_negative("price", Decimal("1250.75")) == 1250.75

    @pytest.mark.parametrize(
        "bad", [np.int64(-1), np.float64("nan"), Decimal("-0.01"), Decimal("NaN"), Decimal("sNaN"), Decimal("Infinity")]
    )
    def test_rejects_bad_numeric_types(self, bad):
        with pytest.raises(InvalidParameterError):
            ensure_non_negative("price", bad)

    @pytest.mark.parametrize("bad", [-0.01, math.nan, math.inf, "10", None, True])
    def test_rejects(self, bad):
        with pytest.raises(InvalidParameterError) as exc:
            ensure_non_negative("price", bad)
        assert exc.value.param_name == "price"

    def test_message_names_parameter(self):
        with pytest.raises(InvalidParameterError, match="Invalid parameter 'rent': -5 - must be >= 0"):
            ensure_non_negative("rent", -5)
