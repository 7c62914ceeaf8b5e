"""Unidades de aritmética de datas."""

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class DateUnit(Enum):
    """Granularidades suportadas por `add`."""

    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    YEARS = "years"

    @classmethod
    def coerce(cls, value: "DateUnit | str | None") -> "DateUnit":
        """
        Converte um valor qualquer para DateUnit.

        Aceita membros do enum, seus valores ("days") ou nomes ("DAYS").
        Valores desconhecidos caem em DAYS.

        Args:
            value: Unidade informada pelo chamador

        Returns:
            Membro de DateUnit correspondente (DAYS se desconhecido)
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.DAYS

        if isinstance(value, str):
            key = value.strip()
            for unit in cls:
                if key.lower() == unit.value or key.upper() == unit.name:
                    return unit

        # TODO: decidir com o produto se unidade desconhecida deve virar erro
        logger.warning(f"Unidade desconhecida {value!r}, usando DAYS")
        return cls.DAYS
