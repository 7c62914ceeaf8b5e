"""Interface comum das fontes de feriados."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date


class HolidaySource(ABC):
    """Interface abstrata para fontes de feriados."""

    @abstractmethod
    async def fetch(self, year: int) -> list[date]:
        """Retorna os feriados do ano, em ordem cronológica."""
        pass
