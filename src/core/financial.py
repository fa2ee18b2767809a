"""Financial calculation functions.

Loan maths shared by the affordability, eligibility and rent-vs-buy
calculators, plus the input guards every calculator applies.
"""

from __future__ import annotations

import math
import numbers
from decimal import ROUND_FLOOR, Decimal

import numpy_financial as npf

from src.core.exceptions import InvalidParameterError


def ensure_non_negative(param_name: str, value: float) -> float:
    """Validate a monetary or count input.

    Any real number is accepted, including numpy scalars and ``Decimal``.

    Args:
        param_name: Name reported in the error
        value: Value to check

    Returns:
        The value as a float

    Raises:
        InvalidParameterError: If the value is not a finite number >= 0
    """
    if isinstance(value, bool) or not isinstance(value, (numbers.Real, Decimal)):
        raise InvalidParameterError(param_name, value, "must be a number")
    if isinstance(value, Decimal) and value.is_nan():
        raise InvalidParameterError(param_name, value, "must be finite")
    number = float(value)
    if not math.isfinite(number):
        raise InvalidParameterError(param_name, value, "must be finite")
    if number < 0:
        raise InvalidParameterError(param_name, value, "must be >= 0")
    return number


def round_half_up(value: float) -> float:
    """Round to a whole unit, halves toward positive infinity (-2.5 -> -2)."""
    shifted = Decimal(str(float(value))) + Decimal("0.5")
    return float(shifted.to_integral_value(rounding=ROUND_FLOOR))


def calculate_emi(
    principal: float,
    annual_rate_pct: float,
    tenure_months: int,
) -> float:
    """Calculate the equated monthly instalment on a reducing-balance loan.

    Args:
        principal: Loan amount in ₹
        annual_rate_pct: Annual interest rate as percentage (e.g., 8.5 for 8.5%)
        tenure_months: Loan term in months

    Returns:
        Monthly instalment in ₹
    """
    if principal <= 0 or tenure_months <= 0:
        return 0.0

    monthly_rate = (annual_rate_pct / 100.0) / 12.0

    if monthly_rate <= 0:
        return principal / tenure_months

    return float(-npf.pmt(monthly_rate, tenure_months, principal))


def calculate_loan_from_emi(
    emi: float,
    annual_rate_pct: float,
    tenure_months: int,
) -> float:
    """Calculate the principal a given instalment can service (reverse EMI).

    Args:
        emi: Monthly instalment in ₹
        annual_rate_pct: Annual interest rate %
        tenure_months: Loan term in months

    Returns:
        Loan principal in ₹
    """
    if emi <= 0 or tenure_months <= 0:
        return 0.0

    monthly_rate = (annual_rate_pct / 100.0) / 12.0

    if monthly_rate <= 0:
        return emi * tenure_months

    return float(-npf.pv(monthly_rate, tenure_months, emi))
