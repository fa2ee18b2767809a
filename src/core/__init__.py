"""Core exceptions, configuration and financial helpers."""

from .exceptions import (
    DataLoadError,
    EstimatorError,
    InvalidParameterError,
)
from .financial import (
    calculate_emi,
    calculate_loan_from_emi,
    ensure_non_negative,
    round_half_up,
)
from .formatting import format_inr, format_inr_compact

__all__ = [
    "calculate_emi",
    "calculate_loan_from_emi",
    "ensure_non_negative",
    "round_half_up",
    "format_inr",
    "format_inr_compact",
    # Exceptions
    "EstimatorError",
    "DataLoadError",
    "InvalidParameterError",
]
