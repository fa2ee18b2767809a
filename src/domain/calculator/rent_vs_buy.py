"""Rent versus buy comparison.

Buying costs the down payment, all EMIs and ~7% registration, offset by the
appreciated property value. Renting costs the escalating rent, offset by
what the down payment would have earned if invested instead.
"""

from __future__ import annotations

import pandas as pd

from src.core.exceptions import InvalidParameterError
from src.core.financial import calculate_emi, ensure_non_negative, round_half_up
from src.core.settings import get_settings
from src.domain.models.results import RentVsBuyResult


def _validate_growth_inputs(
    appreciation_pct: float,
    rent_increase_pct: float,
    down_payment_pct: float,
) -> tuple[float, float, float]:
    appreciation_pct = ensure_non_negative("appreciation_pct", appreciation_pct)
    rent_increase_pct = ensure_non_negative("rent_increase_pct", rent_increase_pct)
    down_payment_pct = ensure_non_negative("down_payment_pct", down_payment_pct)
    if down_payment_pct > 100:
        raise InvalidParameterError("down_payment_pct", down_payment_pct, "must be <= 100")
    return appreciation_pct, rent_increase_pct, down_payment_pct


def rent_vs_buy_schedule(
    price: float,
    monthly_rent: float,
    years: int = 10,
    appreciation_pct: float = 6.0,
    rent_increase_pct: float = 5.0,
    down_payment_pct: float = 20.0,
) -> pd.DataFrame:
    """Year-by-year figures behind the rent vs buy totals.

    Args:
        price: Property price in ₹
        monthly_rent: Starting monthly rent in ₹
        years: Comparison horizon in years
        appreciation_pct: Annual property appreciation %
        rent_increase_pct: Annual rent escalation %
        down_payment_pct: Down payment as % of price

    Returns:
        DataFrame indexed from year 1 with columns:
        - annual_rent: rent paid during the year
        - cumulative_rent: rent paid to date
        - property_value: property value at year end
        - invested_down_payment: invested down payment at year end
    """
    price = ensure_non_negative("price", price)
    monthly_rent = ensure_non_negative("monthly_rent", monthly_rent)
    years = int(ensure_non_negative("years", years))
    appreciation_pct, rent_increase_pct, down_payment_pct = _validate_growth_inputs(
        appreciation_pct, rent_increase_pct, down_payment_pct
    )
    settings = get_settings()

    down_payment = price * down_payment_pct / 100
    investment_growth = 1 + settings.alternative_investment_return_pct / 100

    rows = []
    current_rent = monthly_rent
    cumulative_rent = 0.0
    for year in range(1, years + 1):
        annual_rent = current_rent * 12
        cumulative_rent += annual_rent
        rows.append({
            "year": year,
            "annual_rent": annual_rent,
            "cumulative_rent": cumulative_rent,
            "property_value": price * (1 + appreciation_pct / 100) ** year,
            "invested_down_payment": down_payment * investment_growth ** year,
        })
        current_rent *= 1 + rent_increase_pct / 100

    columns = ["year", "annual_rent", "cumulative_rent", "property_value", "invested_down_payment"]
    return pd.DataFrame(rows, columns=columns).set_index("year")


def compare_rent_vs_buy(
    price: float,
    monthly_rent: float,
    years: int = 10,
    appreciation_pct: float = 6.0,
    rent_increase_pct: float = 5.0,
    down_payment_pct: float = 20.0,
    annual_rate_pct: float = 8.5,
) -> RentVsBuyResult:
    """Compare the net cost of buying against renting over a horizon.

    The loan runs for the same number of years as the horizon.

    Returns:
        RentVsBuyResult with amounts rounded to whole rupees

    Raises:
        InvalidParameterError: On negative inputs or a down payment above 100%
    """
    price = ensure_non_negative("price", price)
    monthly_rent = ensure_non_negative("monthly_rent", monthly_rent)
    years = int(ensure_non_negative("years", years))
    appreciation_pct, rent_increase_pct, down_payment_pct = _validate_growth_inputs(
        appreciation_pct, rent_increase_pct, down_payment_pct
    )
    annual_rate_pct = ensure_non_negative("annual_rate_pct", annual_rate_pct)
    settings = get_settings()

    # Buy
    down_payment = price * down_payment_pct / 100
    loan_amount = price - down_payment
    total_months = years * 12
    emi = calculate_emi(loan_amount, annual_rate_pct, total_months)
    total_emi_paid = emi * total_months

    future_value = price * (1 + appreciation_pct / 100) ** years
    registration_cost = price * settings.registration_cost_pct / 100
    total_buy_cost = down_payment + total_emi_paid + registration_cost
    net_buy_cost = total_buy_cost - future_value

    # Rent
    schedule = rent_vs_buy_schedule(
        price, monthly_rent, years, appreciation_pct, rent_increase_pct, down_payment_pct
    )
    total_rent_paid = float(schedule["annual_rent"].sum()) if years else 0.0
    investment_returns = down_payment * (1 + settings.alternative_investment_return_pct / 100) ** years
    net_rent_cost = total_rent_paid - (investment_returns - down_payment)

    return RentVsBuyResult(
        emi=round_half_up(emi),
        total_emi_paid=round_half_up(total_emi_paid),
        future_value=round_half_up(future_value),
        total_buy_cost=round_half_up(total_buy_cost),
        net_buy_cost=round_half_up(net_buy_cost),
        total_rent_paid=round_half_up(total_rent_paid),
        investment_returns=round_half_up(investment_returns),
        net_rent_cost=round_half_up(net_rent_cost),
        buy_better=net_buy_cost < net_rent_cost,
        savings=round_half_up(abs(net_buy_cost - net_rent_cost)),
    )
