"""Custom exceptions for the cost estimator.

Domain-specific exception types for better error handling and debugging.
"""

from __future__ import annotations

from typing import Any


class EstimatorError(Exception):
    """Base exception for all estimator errors."""
    pass


# --- Data Errors ---

class DataLoadError(EstimatorError):
    """Failed to load, parse or validate a rate table."""
    pass


# --- Input Errors ---

class InvalidParameterError(EstimatorError):
    """Invalid parameter value provided."""

    def __init__(self, param_name: str, value: Any, reason: str = ""):
        self.param_name = param_name
        self.value = value
        self.reason = reason
        msg = f"Invalid parameter '{param_name}': {value}"
        if reason:
            msg += f" - {reason}"
        super().__init__(msg)
