"""Módulo de utilitários para datas e logging."""

from .dates import (
    add,
    get_current_year,
    is_date_before,
    is_same_day,
    is_within_range,
    local_day,
)
from .logging import get_logger, setup_logging

__all__ = [
    "add",
    "get_current_year",
    "is_date_before",
    "is_same_day",
    "is_within_range",
    "local_day",
    "setup_logging",
    "get_logger",
]
