"""Stamp duty and registration charge calculator.

Rates are approximate state-wise reference values, not legal figures.
"""

from __future__ import annotations

from src.core.exceptions import InvalidParameterError
from src.core.financial import ensure_non_negative
from src.core.logging import get_logger
from src.domain.models.rates import BuyerClass, StampDutyTable
from src.domain.models.results import StampDutyResult
from src.services.rate_tables import get_stamp_duty_table

log = get_logger(__name__)


def _coerce_buyer_class(buyer_class: BuyerClass | str) -> BuyerClass:
    if isinstance(buyer_class, BuyerClass):
        return buyer_class
    try:
        return BuyerClass(buyer_class)
    except ValueError as e:
        raise InvalidParameterError(
            "buyer_class", buyer_class, "expected 'standard' or 'concessional'"
        ) from e


def compute_stamp_duty(
    price: float,
    region_code: str,
    buyer_class: BuyerClass | str = BuyerClass.STANDARD,
    table: StampDutyTable | None = None,
) -> StampDutyResult:
    """Calculate stamp duty and registration charges on a purchase.

    Unknown region codes are priced at the table's default region; the
    result records this in ``fallback_used`` and a warning is logged.
    Amounts are not rounded.

    Args:
        price: Property value in ₹
        region_code: Lowercase state/UT key, e.g. "maharashtra"
        buyer_class: Standard or concessional stamp duty rate
        table: Rate table to use. Defaults to the process-wide table.

    Returns:
        StampDutyResult with stamp duty, registration and total

    Raises:
        InvalidParameterError: If price is negative or not finite, or the
            buyer class is not recognised
    """
    price = ensure_non_negative("price", price)
    buyer_class = _coerce_buyer_class(buyer_class)
    if table is None:
        table = get_stamp_duty_table()

    resolved, rates, fallback = table.resolve(region_code)
    if fallback:
        log.warning("unknown_region_fallback", requested=region_code, resolved=resolved)

    stamp_duty_rate = rates.stamp_duty_rate(buyer_class)

    return StampDutyResult(
        price=price,
        requested_region=str(region_code),
        region_code=resolved,
        fallback_used=fallback,
        buyer_class=buyer_class,
        stamp_duty_rate_pct=stamp_duty_rate,
        registration_rate_pct=rates.registration_rate_pct,
        stamp_duty_amount=(price * stamp_duty_rate) / 100,
        registration_amount=(price * rates.registration_rate_pct) / 100,
    )
