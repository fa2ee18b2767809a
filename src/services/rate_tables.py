"""Rate table loading.

Reads the stamp duty and deposit reference tables from JSON, validates them
against the domain models and caches one instance per process.
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from src.core.exceptions import DataLoadError
from src.core.logging import get_logger
from src.core.settings import get_settings
from src.domain.models.rates import DepositTable, StampDutyTable

log = get_logger(__name__)

DATA_DIR = Path(__file__).resolve().parent.parent / "data"
STAMP_DUTY_FILE = DATA_DIR / "stamp_duty_rates.json"
DEPOSIT_FILE = DATA_DIR / "deposit_norms.json"


def _read_json(path: Path) -> Any:
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise DataLoadError(f"Rate table not found: {path}") from e
    except json.JSONDecodeError as e:
        raise DataLoadError(f"Rate table is not valid JSON: {path} ({e})") from e


def load_stamp_duty_table(path: str | Path | None = None) -> StampDutyTable:
    """Load and validate a stamp duty table from disk.

    Args:
        path: JSON file to read. Defaults to the embedded table.

    Returns:
        Validated, frozen table

    Raises:
        DataLoadError: If the file is missing, malformed or fails validation
    """
    path = Path(path) if path else STAMP_DUTY_FILE
    raw = _read_json(path)
    try:
        table = StampDutyTable.model_validate(raw)
    except ValidationError as e:
        log.error("rate_table_invalid", table="stamp_duty", path=str(path), errors=e.error_count())
        raise DataLoadError(f"Invalid stamp duty table {path}: {e}") from e

    log.info(
        "rate_table_loaded",
        table="stamp_duty",
        path=str(path),
        count=len(table.regions),
        default=table.default_region,
    )
    return table


def load_deposit_table(path: str | Path | None = None) -> DepositTable:
    """Load and validate a deposit norms table from disk.

    Args:
        path: JSON file to read. Defaults to the embedded table.

    Returns:
        Validated, frozen table

    Raises:
        DataLoadError: If the file is missing, malformed or fails validation
    """
    path = Path(path) if path else DEPOSIT_FILE
    raw = _read_json(path)
    try:
        table = DepositTable.model_validate(raw)
    except ValidationError as e:
        log.error("rate_table_invalid", table="deposit", path=str(path), errors=e.error_count())
        raise DataLoadError(f"Invalid deposit table {path}: {e}") from e

    log.info(
        "rate_table_loaded",
        table="deposit",
        path=str(path),
        count=len(table.cities),
        default=table.default_city,
    )
    return table


@lru_cache
def get_stamp_duty_table() -> StampDutyTable:
    """Process-wide stamp duty table (settings override, else embedded)."""
    return load_stamp_duty_table(get_settings().stamp_duty_table_path)


@lru_cache
def get_deposit_table() -> DepositTable:
    """Process-wide deposit table (settings override, else embedded)."""
    return load_deposit_table(get_settings().deposit_table_path)
