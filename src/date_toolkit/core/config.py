"""Configurações e constantes da biblioteca."""

from date_toolkit.models import DateUnit


class ToolkitConfig:
    """Configurações da biblioteca de datas."""

    # Aritmética
    DEFAULT_UNIT = DateUnit.DAYS

    # Feriados simulados (latência artificial, em segundos)
    HOLIDAY_DELAY = 0.1

    # API de feriados
    HOLIDAY_API_URL = "https://date.nager.at/api/v3/PublicHolidays"
    DEFAULT_COUNTRY = "BR"

    # Limites
    MAX_CONCURRENT_REQUESTS = 10
    MAX_RETRIES = 3

    # Timeouts (em segundos)
    CONNECT_TIMEOUT = 5.0
    READ_TIMEOUT = 30.0

    def __init__(
        self,
        holiday_delay: float | None = None,
        country_code: str | None = None,
        max_concurrent: int | None = None,
        max_retries: int | None = None,
    ):
        """
        Args:
            holiday_delay: Atraso da fonte simulada de feriados
            country_code: Código ISO do país para a API de feriados
            max_concurrent: Número máximo de buscas concorrentes
            max_retries: Número máximo de tentativas por requisição
        """
        self.holiday_delay = (
            self.HOLIDAY_DELAY if holiday_delay is None else holiday_delay
        )
        self.country_code = country_code or self.DEFAULT_COUNTRY
        self.max_concurrent = max_concurrent or self.MAX_CONCURRENT_REQUESTS
        self.max_retries = max_retries or self.MAX_RETRIES

        self._validate_config()

    def _validate_config(self) -> None:
        """Valida as configurações."""
        if self.holiday_delay < 0:
            raise ValueError(
                f"Atraso de feriados não pode ser negativo: {self.holiday_delay}"
            )
        if len(self.country_code) != 2 or not self.country_code.isalpha():
            raise ValueError(f"Código de país inválido: {self.country_code!r}")
        if self.max_concurrent <= 0:
            raise ValueError(
                f"Concorrência máxima deve ser positiva: {self.max_concurrent}"
            )
        if self.max_retries <= 0:
            raise ValueError(f"Número de tentativas deve ser positivo: {self.max_retries}")
