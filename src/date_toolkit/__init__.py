"""Utilitários de datas: aritmética, intervalos, comparações e feriados."""

from date_toolkit.core.exceptions import (
    DateToolkitError,
    HolidaySourceError,
    InvalidInput,
    InvalidRange,
)
from date_toolkit.holidays import get_holidays, is_holiday
from date_toolkit.models import DateUnit
from date_toolkit.utils.dates import (
    add,
    get_current_year,
    is_date_before,
    is_same_day,
    is_within_range,
)

__version__ = "0.1.0"

__all__ = [
    "DateUnit",
    "DateToolkitError",
    "InvalidInput",
    "InvalidRange",
    "HolidaySourceError",
    "add",
    "get_current_year",
    "is_date_before",
    "is_same_day",
    "is_within_range",
    "get_holidays",
    "is_holiday",
]
