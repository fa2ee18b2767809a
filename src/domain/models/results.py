"""Calculation result models.

Results are built fresh by each calculator call and frozen; nothing is
cached or mutated after construction.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, computed_field

from .rates import BuyerClass


class StampDutyResult(BaseModel):
    """Stamp duty and registration breakdown for a purchase."""

    price: float = Field(..., ge=0, description="Property value in ₹")
    requested_region: str = Field(..., description="Region code as supplied")
    region_code: str = Field(..., description="Region code the rates came from")
    fallback_used: bool = Field(default=False, description="Requested region was unknown")
    buyer_class: BuyerClass = Field(default=BuyerClass.STANDARD)

    stamp_duty_rate_pct: float = Field(..., ge=0, le=100)
    registration_rate_pct: float = Field(..., ge=0, le=100)
    stamp_duty_amount: float = Field(..., description="Stamp duty in ₹")
    registration_amount: float = Field(..., description="Registration charge in ₹")

    model_config = {"frozen": True}

    @computed_field
    @property
    def total_amount(self) -> float:
        """Stamp duty plus registration."""
        return self.stamp_duty_amount + self.registration_amount


class MoveInEstimate(BaseModel):
    """Security deposit range and up-front cost of moving into a rental."""

    monthly_rent: float = Field(..., ge=0, description="Monthly rent in ₹")
    requested_city: str = Field(..., description="City code as supplied")
    city_code: str = Field(..., description="City code the norm came from")
    city_name: str
    fallback_used: bool = Field(default=False, description="Requested city was unknown")

    min_months: int
    typical_months: int
    max_months: int

    min_deposit: float
    typical_deposit: float
    max_deposit: float
    broker_fee: float = Field(..., description="One month's rent")
    advance_rent: float = Field(..., description="One month's rent")

    high_deposit_advisory: bool = Field(default=False)
    advisory: Optional[str] = Field(default=None, description="Warning text for high-deposit cities")

    model_config = {"frozen": True}

    @computed_field
    @property
    def total_move_in(self) -> float:
        """Typical deposit plus broker fee plus advance rent."""
        return self.typical_deposit + self.broker_fee + self.advance_rent


class AffordabilityResult(BaseModel):
    """Property price a household can carry."""

    max_emi: float = 0.0
    loan_amount: float = 0.0
    affordable_price: float = 0.0

    model_config = {"frozen": True}


class EligibilityResult(BaseModel):
    """Indicative home-loan eligibility."""

    max_loan_eligibility: float = 0.0
    max_tenure_years: int = 0
    estimated_emi: float = 0.0

    model_config = {"frozen": True}


class RentVsBuyResult(BaseModel):
    """Total cost comparison of buying versus renting over a horizon."""

    emi: float
    total_emi_paid: float
    future_value: float
    total_buy_cost: float
    net_buy_cost: float
    total_rent_paid: float
    investment_returns: float
    net_rent_cost: float
    buy_better: bool
    savings: float

    model_config = {"frozen": True}
