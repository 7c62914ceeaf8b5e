"""Modelos de dados da biblioteca."""

from .unit import DateUnit

__all__ = ["DateUnit"]
