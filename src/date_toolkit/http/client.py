"""Cliente HTTP assíncrono usado pelas fontes reais de feriados."""

import logging
from typing import Any

import httpx
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from date_toolkit.core.config import ToolkitConfig

logger = logging.getLogger(__name__)

RETRYABLE_STATUS = frozenset({408, 429})


def is_transient(error: BaseException) -> bool:
    """
    Indica se a falha pode desaparecer numa nova tentativa.

    Timeouts e erros de conexão são transitórios; respostas HTTP só quando
    o status for 5xx, 408 ou 429.
    """
    if isinstance(error, httpx.HTTPStatusError):
        status = error.response.status_code
        return status >= 500 or status in RETRYABLE_STATUS
    return isinstance(error, httpx.RequestError)


class HttpClient:
    """GET com retry exponencial sobre um httpx.AsyncClient compartilhado."""

    DEFAULT_HEADERS = {
        "User-Agent": "date-toolkit/0.1 (+https://pypi.org/project/date-toolkit/)",
        "Accept": "application/json",
    }

    DEFAULT_TIMEOUT = httpx.Timeout(
        ToolkitConfig.READ_TIMEOUT, connect=ToolkitConfig.CONNECT_TIMEOUT
    )

    def __init__(
        self,
        headers: dict | None = None,
        timeout: httpx.Timeout | None = None,
        backoff_min: float = 1.0,
        backoff_max: float = 10.0,
    ):
        """
        Args:
            headers: Headers extras (sobrepõem DEFAULT_HEADERS)
            timeout: Timeout por requisição
            backoff_min: Espera mínima entre tentativas (segundos)
            backoff_max: Espera máxima entre tentativas (segundos)
        """
        self.headers = {**self.DEFAULT_HEADERS, **(headers or {})}
        self.timeout = timeout or self.DEFAULT_TIMEOUT
        self.backoff_min = backoff_min
        self.backoff_max = backoff_max

    @staticmethod
    def is_retryable_status(status_code: int) -> bool:
        return 500 <= status_code < 600 or status_code in RETRYABLE_STATUS

    def _retrying(self, max_retries: int) -> AsyncRetrying:
        return AsyncRetrying(
            retry=retry_if_exception(is_transient),
            stop=stop_after_attempt(max_retries),
            wait=wait_exponential(min=self.backoff_min, max=self.backoff_max),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )

    async def fetch(
        self,
        url: str,
        client: httpx.AsyncClient,
        max_retries: int = ToolkitConfig.MAX_RETRIES,
    ) -> httpx.Response | None:
        """
        Busca a URL, retentando apenas falhas transitórias.

        Returns:
            Response com status 2xx/3xx, ou None se o status não for
            retentável ou as tentativas se esgotarem
        """
        try:
            async for attempt in self._retrying(max_retries):
                with attempt:
                    response = await client.get(
                        url,
                        headers=self.headers,
                        timeout=self.timeout,
                        follow_redirects=True,
                    )
                    response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            if self.is_retryable_status(status):
                logger.error(f"HTTP {status} em {url} após {max_retries} tentativas")
            else:
                logger.warning(f"HTTP {status} em {url} (não retentável)")
            return None
        except httpx.RequestError as e:
            logger.error(f"Falha de conexão em {url} após {max_retries} tentativas: {e}")
            return None

        logger.debug(f"GET {url} - Status: {response.status_code}")
        return response

    async def get_json(
        self,
        url: str,
        client: httpx.AsyncClient,
        max_retries: int = ToolkitConfig.MAX_RETRIES,
    ) -> Any | None:
        """
        Como `fetch`, mas devolve o corpo decodificado como JSON.

        Raises:
            ValueError: Se o corpo não for JSON válido
        """
        response = await self.fetch(url, client, max_retries)
        if response is None:
            return None
        return response.json()
