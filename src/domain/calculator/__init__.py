"""Cost calculators."""

from .deposit import compute_move_in_estimate
from .loans import compute_affordability, compute_loan_eligibility
from .rent_vs_buy import compare_rent_vs_buy, rent_vs_buy_schedule
from .stamp_duty import compute_stamp_duty

__all__ = [
    "compute_stamp_duty",
    "compute_move_in_estimate",
    "compute_affordability",
    "compute_loan_eligibility",
    "compare_rent_vs_buy",
    "rent_vs_buy_schedule",
]
