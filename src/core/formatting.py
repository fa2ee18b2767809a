"""Currency formatting helpers.

Indian numbering groups the last three digits, then every two digits
(``1,23,45,678``), and large amounts are spoken of in lakhs and crores.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

RUPEE = "₹"
LAKH = 100_000
CRORE = 10_000_000


def _group_indian(digits: str) -> str:
    """Insert en-IN separators into a string of integer digits."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups) + "," + tail


def format_inr(value: float | None, decimals: int = 0) -> str:
    """Format a number as Indian Rupees.

    Args:
        value: Amount to format
        decimals: Number of decimal places

    Returns:
        Formatted string like "₹3,50,000" or "-₹1,250.50". Missing, NaN
        and infinite amounts render as "—".
    """
    if value is None or not math.isfinite(value):
        return "—"

    quantum = Decimal(1).scaleb(-decimals) if decimals > 0 else Decimal(1)
    amount = Decimal(str(float(value))).quantize(quantum, rounding=ROUND_HALF_UP)
    sign = "-" if amount < 0 else ""
    integer_part, _, fraction = f"{abs(amount):f}".partition(".")

    formatted = _group_indian(integer_part)
    if decimals > 0:
        formatted += "." + fraction
    return f"{sign}{RUPEE}{formatted}"


def format_inr_compact(value: float | None, lakh_suffix: str = "Lac") -> str:
    """Format a number in crores or lakhs when it is large enough.

    Returns:
        "₹1.25 Cr", "₹3.50 Lac", or the full ``format_inr`` rendering below a lakh
    """
    if value is None or not math.isfinite(value):
        return "—"
    if value >= CRORE:
        return f"{RUPEE}{value / CRORE:.2f} Cr"
    if value >= LAKH:
        return f"{RUPEE}{value / LAKH:.2f} {lakh_suffix}"
    return format_inr(value)
