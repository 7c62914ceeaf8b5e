"""Utilitários para manipulação de datas."""

import math
import numbers
from datetime import date, datetime, time
from decimal import Decimal

from dateutil import tz
from dateutil.relativedelta import relativedelta

from date_toolkit.core.exceptions import InvalidInput, InvalidRange
from date_toolkit.models import DateUnit
from date_toolkit.utils.logging import get_logger

logger = get_logger(__name__)


def _as_datetime(value: date) -> datetime:
    """Promove date para datetime à meia-noite (datetime é devolvido intacto)."""
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def _is_aware(value: date) -> bool:
    return isinstance(value, datetime) and value.utcoffset() is not None


def _comparable(*values: date) -> tuple[date, ...]:
    """
    Uniformiza o tipo dos argumentos para permitir comparação.

    Se algum argumento tiver fuso, os ingênuos (e os date promovidos) são
    interpretados no fuso local.
    """
    if not any(isinstance(v, datetime) for v in values):
        return values

    promoted = tuple(_as_datetime(v) for v in values)
    if any(_is_aware(v) for v in promoted):
        local = tz.tzlocal()
        promoted = tuple(
            v if _is_aware(v) else v.replace(tzinfo=local) for v in promoted
        )
    return promoted


def _is_finite_number(value: object) -> bool:
    """Aceita reais finitos (int, float, Fraction, Decimal), exceto bool."""
    if isinstance(value, bool) or not isinstance(value, (numbers.Real, Decimal)):
        return False
    try:
        return math.isfinite(value)
    except ValueError:
        # Decimal("sNaN") não converte para float
        return False


def local_day(value: date) -> date:
    """
    Retorna o dia de calendário de um instante no fuso local.

    Datetimes com fuso são convertidos para o fuso local antes de
    descartar o horário; datetimes ingênuos já são considerados locais.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(tz.tzlocal())
        return value.date()
    return value


def get_current_year() -> int:
    """Retorna o ano do instante atual (horário local)."""
    return datetime.now().year


def add(
    date_obj: date,
    amount: int | float | Decimal,
    unit: DateUnit | str = DateUnit.DAYS,
) -> date:
    """
    Soma uma quantidade de unidades a uma data.

    A aritmética de meses e anos é delegada ao relativedelta, que ajusta o
    dia para o último dia válido do mês (31/01 + 1 mês = 28/02).

    Args:
        date_obj: Data ou datetime de origem (não é modificada)
        amount: Quantidade de unidades; negativa subtrai, fração é truncada
        unit: Unidade da soma (padrão: DAYS; desconhecida cai em DAYS)

    Returns:
        Nova data do mesmo tipo da entrada

    Raises:
        InvalidInput: Se a data não for date/datetime ou a quantidade não
            for um número finito
    """
    if not isinstance(date_obj, date):
        raise InvalidInput("Invalid date provided")
    if not _is_finite_number(amount):
        raise InvalidInput("Invalid amount provided")

    unit = DateUnit.coerce(unit)
    amount = int(amount)

    if unit is DateUnit.WEEKS:
        delta = {"weeks": amount}
    elif unit is DateUnit.MONTHS:
        delta = {"months": amount}
    elif unit is DateUnit.YEARS:
        delta = {"years": amount}
    else:
        delta = {"days": amount}

    try:
        result = date_obj + relativedelta(**delta)
    except (OverflowError, ValueError) as e:
        # resultado fora do intervalo suportado por datetime.date
        raise InvalidInput("Invalid amount provided") from e
    logger.debug(f"{date_obj.isoformat()} + {amount} {unit.value} = {result.isoformat()}")
    return result


def is_within_range(date_obj: date, from_: date, to: date) -> bool:
    """
    Verifica se a data está estritamente entre `from_` e `to`.

    Os extremos são exclusivos: datas iguais a `from_` ou `to` retornam False.

    Raises:
        InvalidRange: Se `from_` for posterior a `to`
    """
    date_obj, from_, to = _comparable(date_obj, from_, to)
    if from_ > to:
        raise InvalidRange("Invalid range: from date must be before to date")

    return from_ < date_obj < to


def is_date_before(date_obj: date, compare_date: date) -> bool:
    """Retorna True se `date_obj` for estritamente anterior a `compare_date`."""
    date_obj, compare_date = _comparable(date_obj, compare_date)
    return date_obj < compare_date


def is_same_day(date_obj: date, compare_date: date) -> bool:
    """Retorna True se os dois instantes caem no mesmo dia local."""
    return local_day(date_obj) == local_day(compare_date)
