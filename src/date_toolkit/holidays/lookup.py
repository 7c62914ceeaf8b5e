"""Consulta de feriados sobre uma fonte assíncrona."""

from datetime import date

from date_toolkit.utils.dates import is_same_day, local_day
from date_toolkit.utils.logging import get_logger

from .base import HolidaySource
from .mock import MockHolidaySource

logger = get_logger(__name__)


async def get_holidays(year: int, source: HolidaySource | None = None) -> list[date]:
    """
    Busca os feriados de um ano.

    Args:
        year: Ano desejado
        source: Fonte de feriados (usa MockHolidaySource se None)

    Returns:
        Lista de feriados do ano
    """
    source = source or MockHolidaySource()
    holidays = await source.fetch(year)
    logger.debug(f"Feriados de {year}: {[h.isoformat() for h in holidays]}")
    return holidays


async def is_holiday(date_obj: date, source: HolidaySource | None = None) -> bool:
    """
    Verifica se a data cai em um feriado do seu ano.

    O horário é ignorado; a comparação é feita pelo dia local.

    Args:
        date_obj: Data ou datetime a verificar
        source: Fonte de feriados (usa MockHolidaySource se None)
    """
    holidays = await get_holidays(local_day(date_obj).year, source)
    return any(is_same_day(date_obj, holiday) for holiday in holidays)
