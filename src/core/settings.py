"""Application settings with environment variable support.

Uses pydantic-settings for typed configuration validation.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class EstimatorSettings(BaseSettings):
    """Estimator configuration loaded from environment variables."""

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_json: bool = Field(default=False, description="Render log events as JSON")
    log_to_file: bool = Field(default=False, description="Also write logs to logs/estimator.log")

    # Reference data overrides
    stamp_duty_table_path: Optional[str] = Field(
        default=None, description="Replacement stamp duty JSON table"
    )
    deposit_table_path: Optional[str] = Field(
        default=None, description="Replacement deposit norms JSON table"
    )

    # Deposit advisory
    high_deposit_threshold_months: int = Field(default=8, ge=1, le=24)

    # Loan rules of thumb
    max_emi_income_ratio: float = Field(default=0.4, gt=0, le=1)
    loan_to_value_ratio: float = Field(default=0.8, gt=0, le=1)
    eligibility_rate_pct: float = Field(default=8.5, ge=0, le=30)

    # Rent vs buy assumptions
    registration_cost_pct: float = Field(default=7.0, ge=0, le=100)
    alternative_investment_return_pct: float = Field(default=10.0, ge=0, le=100)

    model_config = {
        "env_prefix": "ESTIMATOR_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> EstimatorSettings:
    """Get cached estimator settings."""
    return EstimatorSettings()
