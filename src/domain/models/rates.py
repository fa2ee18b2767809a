"""Rate table data models.

Stamp duty and deposit reference tables are loaded from JSON and validated
once; after that they are frozen and shared by every calculation. The
region and city mappings are exposed as read-only views.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

from pydantic import BaseModel, Field, field_serializer, field_validator, model_validator


class BuyerClass(str, Enum):
    """Stamp duty buyer category.

    Which real-world buyers qualify as ``CONCESSIONAL`` is the caller's
    policy decision; the table stores the concession as the female rate.
    """

    STANDARD = "standard"
    CONCESSIONAL = "concessional"


class JurisdictionRate(BaseModel):
    """Stamp duty and registration rates for one state or union territory."""

    display_name: str = Field(..., description="Human readable region name")
    male_rate_pct: float = Field(..., ge=0, le=100, description="Stamp duty % (standard)")
    female_rate_pct: float = Field(..., ge=0, le=100, description="Stamp duty % (concessional)")
    registration_rate_pct: float = Field(..., ge=0, le=100, description="Registration charge %")

    model_config = {"frozen": True}

    def stamp_duty_rate(self, buyer_class: BuyerClass) -> float:
        """Stamp duty rate applicable to a buyer class."""
        if buyer_class is BuyerClass.CONCESSIONAL:
            return self.female_rate_pct
        return self.male_rate_pct


class DepositNorm(BaseModel):
    """Customary security deposit, in months of rent, for one city."""

    display_name: str = Field(..., description="Human readable city name")
    min_months: int = Field(..., ge=0)
    max_months: int = Field(..., ge=0)
    typical_months: int = Field(..., ge=0)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_ordering(self) -> "DepositNorm":
        if not self.min_months <= self.typical_months <= self.max_months:
            raise ValueError(
                f"expected min <= typical <= max months, got "
                f"{self.min_months}/{self.typical_months}/{self.max_months}"
            )
        return self


class StampDutyTable(BaseModel):
    """All jurisdictions keyed by lowercase region code."""

    default_region: str
    regions: Mapping[str, JurisdictionRate]

    model_config = {"frozen": True}

    @field_validator("regions", mode="after")
    @classmethod
    def freeze_regions(cls, value: Mapping[str, JurisdictionRate]) -> Mapping[str, JurisdictionRate]:
        return MappingProxyType(dict(value))

    @field_serializer("regions")
    def serialize_regions(self, value: Mapping[str, JurisdictionRate]) -> dict[str, JurisdictionRate]:
        return dict(value)

    @model_validator(mode="after")
    def check_default(self) -> "StampDutyTable":
        if self.default_region not in self.regions:
            raise ValueError(f"default region '{self.default_region}' missing from table")
        return self

    def resolve(self, region_code: str) -> tuple[str, JurisdictionRate, bool]:
        """Look up a region, falling back to the default.

        Returns:
            Tuple of (resolved code, rates, fallback used)
        """
        rate = self.regions.get(region_code)
        if rate is not None:
            return region_code, rate, False
        return self.default_region, self.regions[self.default_region], True


class DepositTable(BaseModel):
    """All deposit norms keyed by lowercase city code."""

    default_city: str
    cities: Mapping[str, DepositNorm]

    model_config = {"frozen": True}

    @field_validator("cities", mode="after")
    @classmethod
    def freeze_cities(cls, value: Mapping[str, DepositNorm]) -> Mapping[str, DepositNorm]:
        return MappingProxyType(dict(value))

    @field_serializer("cities")
    def serialize_cities(self, value: Mapping[str, DepositNorm]) -> dict[str, DepositNorm]:
        return dict(value)

    @model_validator(mode="after")
    def check_default(self) -> "DepositTable":
        if self.default_city not in self.cities:
            raise ValueError(f"default city '{self.default_city}' missing from table")
        return self

    def resolve(self, city_code: str) -> tuple[str, DepositNorm, bool]:
        """Look up a city, falling back to the default.

        Returns:
            Tuple of (resolved code, norm, fallback used)
        """
        norm = self.cities.get(city_code)
        if norm is not None:
            return city_code, norm, False
        return self.default_city, self.cities[self.default_city], True
