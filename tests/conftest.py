"""Pytest fixtures for cost estimator tests."""

import json
import os
import sys

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.core.settings import get_settings
from src.services.rate_tables import (
    get_deposit_table,
    get_stamp_duty_table,
    load_deposit_table,
    load_stamp_duty_table,
)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings and tables so env overrides apply per test."""
    get_settings.cache_clear()
    get_stamp_duty_table.cache_clear()
    get_deposit_table.cache_clear()
    yield
    get_settings.cache_clear()
    get_stamp_duty_table.cache_clear()
    get_deposit_table.cache_clear()


@pytest.fixture
def stamp_duty_table():
    """Embedded stamp duty table."""
    return load_stamp_duty_table()


@pytest.fixture
def deposit_table():
    """Embedded deposit norms table."""
    return load_deposit_table()


@pytest.fixture
def small_stamp_duty_data():
    """Minimal two-region stamp duty table."""
    return {
        "default_region": "goa",
        "regions": {
            "goa": {
                "display_name": "Goa",
                "male_rate_pct": 4,
                "female_rate_pct": 3.5,
                "registration_rate_pct": 1,
            },
            "kerala": {
                "display_name": "Kerala",
                "male_rate_pct": 8,
                "female_rate_pct": 8,
                "registration_rate_pct": 2,
            },
        },
    }


@pytest.fixture
def small_deposit_data():
    """Minimal two-city deposit table."""
    return {
        "default_city": "pune",
        "cities": {
            "pune": {"display_name": "Pune", "min_months": 2, "max_months": 4, "typical_months": 3},
            "chennai": {"display_name": "Chennai", "min_months": 3, "max_months": 6, "typical_months": 3},
        },
    }


@pytest.fixture
def write_json(tmp_path):
    """Write a payload to a JSON file under tmp_path and return its path."""

    def _write(name, payload):
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write
