"""Módulo core da biblioteca."""

from .config import ToolkitConfig
from .exceptions import DateToolkitError, HolidaySourceError, InvalidInput, InvalidRange

__all__ = [
    "ToolkitConfig",
    "DateToolkitError",
    "InvalidInput",
    "InvalidRange",
    "HolidaySourceError",
]
