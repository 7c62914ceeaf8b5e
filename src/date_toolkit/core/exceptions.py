"""Exceções da biblioteca."""


class DateToolkitError(Exception):
    """Erro base para todas as exceções da biblioteca."""


class InvalidInput(DateToolkitError, ValueError):
    """Data ou quantidade inválida passada para uma operação aritmética."""


class InvalidRange(DateToolkitError, ValueError):
    """Intervalo cuja data inicial é posterior à data final."""


class HolidaySourceError(DateToolkitError):
    """Fonte de feriados não conseguiu produzir a lista de feriados."""
