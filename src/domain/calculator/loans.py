"""Home loan affordability and eligibility calculators.

Both use lender rules of thumb rather than any specific bank's policy.
"""

from __future__ import annotations

from src.core.exceptions import InvalidParameterError
from src.core.financial import (
    calculate_emi,
    calculate_loan_from_emi,
    ensure_non_negative,
    round_half_up,
)
from src.core.settings import get_settings
from src.domain.models.results import AffordabilityResult, EligibilityResult

# Employment type -> (retirement age, annual income multiplier)
EMPLOYMENT_RULES: dict[str, tuple[int, int]] = {
    "salaried": (60, 6),
    "self-employed": (65, 4),
}

MIN_TENURE_YEARS = 5
MAX_TENURE_YEARS = 30
FULL_ELIGIBILITY_TENURE_YEARS = 20


def compute_affordability(
    monthly_income: float,
    existing_emis: float = 0.0,
    annual_rate_pct: float = 8.5,
    tenure_years: int = 20,
) -> AffordabilityResult:
    """Calculate the property price a monthly income can support.

    Total EMIs are capped at a share of income (40% by default); the loan
    that the remaining headroom services is grossed up by the loan-to-value
    ratio (80% by default) to get a property price.

    Args:
        monthly_income: Gross monthly income in ₹
        existing_emis: EMIs already being paid in ₹
        annual_rate_pct: Home loan interest rate %
        tenure_years: Loan tenure in years

    Returns:
        AffordabilityResult with amounts rounded to whole rupees
    """
    monthly_income = ensure_non_negative("monthly_income", monthly_income)
    existing_emis = ensure_non_negative("existing_emis", existing_emis)
    annual_rate_pct = ensure_non_negative("annual_rate_pct", annual_rate_pct)
    tenure_years = ensure_non_negative("tenure_years", tenure_years)
    settings = get_settings()

    max_emi = monthly_income * settings.max_emi_income_ratio - existing_emis
    if max_emi <= 0:
        return AffordabilityResult()

    loan_amount = calculate_loan_from_emi(max_emi, annual_rate_pct, int(tenure_years * 12))
    affordable_price = loan_amount / settings.loan_to_value_ratio

    return AffordabilityResult(
        max_emi=round_half_up(max_emi),
        loan_amount=round_half_up(loan_amount),
        affordable_price=round_half_up(affordable_price),
    )


def compute_loan_eligibility(
    annual_income: float,
    age: int,
    employment_type: str = "salaried",
    existing_liabilities: float = 0.0,
) -> EligibilityResult:
    """Estimate the maximum home loan an applicant may qualify for.

    Tenure runs until retirement (60 salaried, 65 self-employed), clamped to
    5-30 years. Eligibility is a multiple of annual income less the
    lifetime burden of existing monthly liabilities, scaled down for
    tenures under 20 years.

    Args:
        annual_income: Gross annual income in ₹
        age: Applicant age in years
        employment_type: "salaried" or "self-employed"
        existing_liabilities: Existing monthly loan obligations in ₹

    Returns:
        EligibilityResult with amounts rounded to whole rupees

    Raises:
        InvalidParameterError: On negative inputs, a fractional age or an
            unknown employment type
    """
    annual_income = ensure_non_negative("annual_income", annual_income)
    age = ensure_non_negative("age", age)
    if not age.is_integer():
        raise InvalidParameterError("age", age, "must be a whole number of years")
    existing_liabilities = ensure_non_negative("existing_liabilities", existing_liabilities)
    if employment_type not in EMPLOYMENT_RULES:
        raise InvalidParameterError(
            "employment_type", employment_type, f"expected one of {sorted(EMPLOYMENT_RULES)}"
        )

    retirement_age, income_multiplier = EMPLOYMENT_RULES[employment_type]
    max_tenure = min(MAX_TENURE_YEARS, max(MIN_TENURE_YEARS, retirement_age - int(age)))

    liability_impact = existing_liabilities * 12 * max_tenure
    base_eligibility = max(0.0, annual_income * income_multiplier - liability_impact)

    tenure_multiplier = min(1.0, max_tenure / FULL_ELIGIBILITY_TENURE_YEARS)
    eligibility = base_eligibility * tenure_multiplier

    estimated_emi = calculate_emi(
        eligibility, get_settings().eligibility_rate_pct, max_tenure * 12
    )

    return EligibilityResult(
        max_loan_eligibility=round_half_up(eligibility),
        max_tenure_years=max_tenure,
        estimated_emi=round_half_up(estimated_emi),
    )
