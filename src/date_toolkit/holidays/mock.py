"""Fonte de feriados simulada, com latência artificial de rede."""

import asyncio
import logging
from datetime import date

from date_toolkit.core.config import ToolkitConfig

from .base import HolidaySource

logger = logging.getLogger(__name__)

# (mês, dia) dos feriados fixos
FIXED_HOLIDAYS = (
    (1, 1),  # Ano Novo
    (12, 25),  # Natal
    (12, 31),  # Véspera de Ano Novo
)


class MockHolidaySource(HolidaySource):
    """Simula uma API de feriados devolvendo datas fixas após um atraso."""

    def __init__(self, delay: float | None = None):
        """
        Args:
            delay: Atraso em segundos (usa ToolkitConfig.HOLIDAY_DELAY se None)
        """
        self.delay = ToolkitConfig.HOLIDAY_DELAY if delay is None else delay

    async def fetch(self, year: int) -> list[date]:
        holidays = [date(year, month, day) for month, day in FIXED_HOLIDAYS]

        await asyncio.sleep(self.delay)

        logger.debug(f"{len(holidays)} feriados simulados para {year}")
        return holidays

    def __repr__(self) -> str:
        return f"<MockHolidaySource delay={self.delay}>"
