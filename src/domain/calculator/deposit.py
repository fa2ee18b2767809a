"""Rental security deposit and move-in cost calculator.

Deposits in India are quoted in months of rent; the customary range depends
heavily on the city.
"""

from __future__ import annotations

from src.core.financial import ensure_non_negative
from src.core.logging import get_logger
from src.core.settings import get_settings
from src.domain.models.rates import DepositTable
from src.domain.models.results import MoveInEstimate
from src.services.rate_tables import get_deposit_table

log = get_logger(__name__)


def compute_move_in_estimate(
    monthly_rent: float,
    city_code: str,
    table: DepositTable | None = None,
) -> MoveInEstimate:
    """Estimate the deposit range and total cash needed to move in.

    Move-in cost is the typical deposit plus one month's broker fee and one
    month's rent in advance. Cities whose typical deposit reaches the
    configured threshold get ``high_deposit_advisory`` and an advisory text.

    Args:
        monthly_rent: Monthly rent in ₹
        city_code: Lowercase city key, e.g. "mumbai"
        table: Deposit table to use. Defaults to the process-wide table.

    Returns:
        MoveInEstimate with deposit range and move-in total

    Raises:
        InvalidParameterError: If monthly_rent is negative or not finite
    """
    rent = ensure_non_negative("monthly_rent", monthly_rent)
    if table is None:
        table = get_deposit_table()

    resolved, norm, fallback = table.resolve(city_code)
    if fallback:
        log.warning("unknown_city_fallback", requested=city_code, resolved=resolved)

    high_deposit = norm.typical_months >= get_settings().high_deposit_threshold_months
    advisory = None
    if high_deposit:
        advisory = (
            f"{norm.display_name} typically requires {norm.min_months}-{norm.max_months} "
            "months deposit. Negotiate if possible!"
        )

    return MoveInEstimate(
        monthly_rent=rent,
        requested_city=str(city_code),
        city_code=resolved,
        city_name=norm.display_name,
        fallback_used=fallback,
        min_months=norm.min_months,
        typical_months=norm.typical_months,
        max_months=norm.max_months,
        min_deposit=rent * norm.min_months,
        typical_deposit=rent * norm.typical_months,
        max_deposit=rent * norm.max_months,
        broker_fee=rent,
        advance_rent=rent,
        high_deposit_advisory=high_deposit,
        advisory=advisory,
    )
