"""Busca concorrente de feriados de vários anos com limitação via asyncio.Semaphore."""

import asyncio
import logging
from datetime import date
from typing import Iterable

from date_toolkit.core.config import ToolkitConfig

from .base import HolidaySource
from .mock import MockHolidaySource

logger = logging.getLogger(__name__)


class HolidayBatchFetcher:
    """
    Busca feriados de vários anos em paralelo.

    Falhas de um ano não interrompem os demais: o ano fica com None no
    resultado e o erro é registrado no log.
    """

    def __init__(
        self,
        source: HolidaySource | None = None,
        max_concurrent: int = ToolkitConfig.MAX_CONCURRENT_REQUESTS,
    ):
        """
        Args:
            source: Fonte de feriados (usará MockHolidaySource se None)
            max_concurrent: Número máximo de buscas simultâneas
        """
        if max_concurrent <= 0:
            raise ValueError(f"Concorrência máxima deve ser positiva: {max_concurrent}")

        self.source = source or MockHolidaySource()
        self.semaphore = asyncio.Semaphore(max_concurrent)

    async def fetch_all(self, years: Iterable[int]) -> dict[int, list[date] | None]:
        """
        Busca os feriados de cada ano respeitando o limite de concorrência.

        Args:
            years: Anos desejados (duplicados são buscados uma vez)

        Returns:
            Dicionário ano -> feriados (ou None em caso de falha), na ordem de entrada
        """
        unique_years = list(dict.fromkeys(years))

        async def fetch_with_semaphore(year: int) -> list[date]:
            async with self.semaphore:
                return await self.source.fetch(year)

        tasks = [fetch_with_semaphore(year) for year in unique_years]
        results = await asyncio.gather(*tasks, return_exceptions=True)

        processed: dict[int, list[date] | None] = {}
        for year, result in zip(unique_years, results):
            if isinstance(result, Exception):
                logger.error(f"Erro ao buscar feriados de {year}: {result}")
                processed[year] = None
            else:
                processed[year] = result

        successful = len([r for r in processed.values() if r is not None])
        logger.info(f"Feriados obtidos para {successful}/{len(unique_years)} anos")
        return processed
