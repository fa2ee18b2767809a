"""Application services."""

from .rate_tables import (
    get_deposit_table,
    get_stamp_duty_table,
    load_deposit_table,
    load_stamp_duty_table,
)

__all__ = [
    "get_stamp_duty_table",
    "get_deposit_table",
    "load_stamp_duty_table",
    "load_deposit_table",
]
