"""Fontes de feriados e consultas assíncronas sobre elas."""

from date_toolkit.holidays.base import HolidaySource
from date_toolkit.holidays.batch import HolidayBatchFetcher
from date_toolkit.holidays.http_source import HttpHolidaySource
from date_toolkit.holidays.lookup import get_holidays, is_holiday
from date_toolkit.holidays.mock import MockHolidaySource

__all__ = [
    "HolidaySource",
    "MockHolidaySource",
    "HttpHolidaySource",
    "HolidayBatchFetcher",
    "get_holidays",
    "is_holiday",
]
