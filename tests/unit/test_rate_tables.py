"""Unit tests for src.services.rate_tables module."""

import pytest

from src.core.exceptions import DataLoadError
from src.domain.calculator.stamp_duty import compute_stamp_duty
from src.services.rate_tables import (
    get_deposit_table,
    get_stamp_duty_table,
    load_deposit_table,
    load_stamp_duty_table,
)


class TestEmbeddedTables:
    """The shipped reference data loads and validates."""

    def test_stamp_duty_regions(self, stamp_duty_table):
        assert len(stamp_duty_table.regions) == 31
        assert stamp_duty_table.default_region == "maharashtra"
        maharashtra = stamp_duty_table.regions["maharashtra"]
        assert (maharashtra.male_rate_pct, maharashtra.female_rate_pct) == (6, 5)
        assert maharashtra.registration_rate_pct == 1

    def test_deposit_cities(self, deposit_table):
        assert set(deposit_table.cities) == {
            "mumbai", "bangalore", "delhi", "hyderabad",
            "chennai", "pune", "kolkata", "ahmedabad",
        }
        assert deposit_table.default_city == "mumbai"

    def test_display_names(self, stamp_duty_table, deposit_table):
        assert stamp_duty_table.regions["jammukashmir"].display_name == "Jammu & Kashmir"
        assert deposit_table.cities["delhi"].display_name == "Delhi NCR"


class TestLoadErrors:
    """Bad table files raise DataLoadError."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(DataLoadError, match="not found"):
            load_stamp_duty_table(tmp_path / "absent.json")

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(DataLoadError, match="not valid JSON"):
            load_deposit_table(path)

    def test_rate_out_of_range(self, write_json, small_stamp_duty_data):
        small_stamp_duty_data["regions"]["kerala"]["male_rate_pct"] = 180
        path = write_json("rates.json", small_stamp_duty_data)
        with pytest.raises(DataLoadError, match="Invalid stamp duty table"):
            load_stamp_duty_table(path)

    def test_deposit_ordering(self, write_json, small_deposit_data):
        small_deposit_data["cities"]["pune"]["typical_months"] = 9
        path = write_json("deposits.json", small_deposit_data)
        with pytest.raises(DataLoadError, match="Invalid deposit table"):
            load_deposit_table(path)


class TestCachedTables:
    """Process-wide tables honour the settings override."""

    def test_cached_instance(self):
        assert get_stamp_duty_table() is get_stamp_duty_table()
        assert get_deposit_table() is get_deposit_table()

    def test_shared_table_cannot_be_rewritten(self):
        """Writes to the process-wide table fail and later results are unchanged."""
        table = get_stamp_duty_table()
        with pytest.raises(TypeError):
            table.regions["maharashtra"] = table.regions["kerala"]
        assert compute_stamp_duty(5_000_000, "maharashtra").total_amount == 350_000

    def test_path_override(self, monkeypatch, write_json, small_stamp_duty_data):
        path = write_json("rates.json", small_stamp_duty_data)
        monkeypatch.setenv("ESTIMATOR_STAMP_DUTY_TABLE_PATH", str(path))

        table = get_stamp_duty_table()
        assert set(table.regions) == {"goa", "kerala"}

        result = compute_stamp_duty(1_000_000, "maharashtra")
        assert result.region_code == "goa"
        assert result.fallback_used is True

    def test_deposit_path_override(self, monkeypatch, write_json, small_deposit_data):
        path = write_json("deposits.json", small_deposit_data)
        monkeypatch.setenv("ESTIMATOR_DEPOSIT_TABLE_PATH", str(path))
        assert get_deposit_table().default_city == "pune"
