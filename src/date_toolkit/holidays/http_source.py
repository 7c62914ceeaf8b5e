"""Fonte de feriados via API HTTP (formato Nager.Date)."""

import logging
from datetime import date

import httpx
from dateutil.parser import isoparse

from date_toolkit.core.config import ToolkitConfig
from date_toolkit.core.exceptions import HolidaySourceError
from date_toolkit.http import HttpClient

from .base import HolidaySource

logger = logging.getLogger(__name__)


class HttpHolidaySource(HolidaySource):
    """
    Busca feriados públicos em uma API JSON.

    A API deve responder em `{base_url}/{ano}/{país}` com uma lista de
    objetos contendo ao menos a chave "date" em formato ISO 8601.
    """

    def __init__(
        self,
        country_code: str = ToolkitConfig.DEFAULT_COUNTRY,
        base_url: str = ToolkitConfig.HOLIDAY_API_URL,
        client: HttpClient | None = None,
        http_client: httpx.AsyncClient | None = None,
        max_retries: int = ToolkitConfig.MAX_RETRIES,
    ):
        """
        Args:
            country_code: Código ISO 3166-1 alfa-2 do país
            base_url: URL base da API
            client: Cliente HTTP com retry (usará o padrão se None)
            http_client: Cliente httpx compartilhado (um novo é aberto por busca se None)
            max_retries: Número máximo de tentativas por requisição
        """
        self.country_code = country_code.upper()
        self.base_url = base_url.rstrip("/")
        self.client = client or HttpClient()
        self.http_client = http_client
        self.max_retries = max_retries

    def build_url(self, year: int) -> str:
        return f"{self.base_url}/{year}/{self.country_code}"

    async def fetch(self, year: int) -> list[date]:
        url = self.build_url(year)

        try:
            if self.http_client is not None:
                payload = await self.client.get_json(url, self.http_client, self.max_retries)
            else:
                async with httpx.AsyncClient() as http_client:
                    payload = await self.client.get_json(url, http_client, self.max_retries)
        except ValueError as e:
            raise HolidaySourceError(f"Resposta inválida para feriados de {year}: {e}") from e

        if payload is None:
            raise HolidaySourceError(f"Não foi possível obter feriados de {year} em {url}")

        holidays = self._parse(payload, year)
        logger.debug(f"{len(holidays)} feriados de {self.country_code}/{year}")
        return holidays

    @staticmethod
    def _parse(payload: list[dict], year: int) -> list[date]:
        """Converte o JSON da API em lista ordenada de datas."""
        try:
            holidays = {isoparse(item["date"]).date() for item in payload}
        except (ValueError, TypeError, KeyError) as e:
            raise HolidaySourceError(f"Resposta inválida para feriados de {year}: {e}") from e

        return sorted(holidays)

    def __repr__(self) -> str:
        return f"<HttpHolidaySource country={self.country_code} url={self.base_url}>"
