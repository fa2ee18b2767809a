"""Data models for the cost estimator."""

from .rates import BuyerClass, DepositNorm, DepositTable, JurisdictionRate, StampDutyTable
from .results import (
    AffordabilityResult,
    EligibilityResult,
    MoveInEstimate,
    RentVsBuyResult,
    StampDutyResult,
)

__all__ = [
    "BuyerClass",
    "JurisdictionRate",
    "DepositNorm",
    "StampDutyTable",
    "DepositTable",
    "StampDutyResult",
    "MoveInEstimate",
    "AffordabilityResult",
    "EligibilityResult",
    "RentVsBuyResult",
]
