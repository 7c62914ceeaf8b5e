"""Pytest configuration and fixtures for date_toolkit tests."""

import json
from datetime import date

import httpx
import pytest

from date_toolkit.holidays import HolidaySource, MockHolidaySource

BR_2026 = [
    {"date": "2026-01-01", "localName": "Confraternização Universal", "name": "New Year's Day"},
    {"date": "2026-04-21", "localName": "Tiradentes", "name": "Tiradentes"},
    {"date": "2026-12-25", "localName": "Natal", "name": "Christmas Day"},
]


class FailingSource(HolidaySource):
    """Fonte que falha para anos específicos."""

    def __init__(self, failing_years: set[int]):
        self.failing_years = failing_years
        self.calls: list[int] = []

    async def fetch(self, year: int) -> list[date]:
        self.calls.append(year)
        if year in self.failing_years:
            raise RuntimeError(f"fonte indisponível para {year}")
        return [date(year, 1, 1)]


@pytest.fixture
def instant_source() -> MockHolidaySource:
    """Fonte simulada sem atraso."""
    return MockHolidaySource(delay=0)


@pytest.fixture
def failing_source() -> FailingSource:
    return FailingSource(failing_years={2021})


@pytest.fixture
def api_requests() -> list[httpx.Request]:
    """Requisições recebidas pela API falsa."""
    return []


@pytest.fixture
def holiday_api(api_requests):
    """
    Transporte httpx que simula a API de feriados.

    - /2026/BR responde com BR_2026
    - /1999/BR responde com JSON inválido
    - demais caminhos respondem 404
    """

    def handler(request: httpx.Request) -> httpx.Response:
        api_requests.append(request)
        if request.url.path.endswith("/2026/BR"):
            return httpx.Response(200, json=BR_2026)
        if request.url.path.endswith("/1999/BR"):
            return httpx.Response(200, content=b"<html>erro</html>")
        return httpx.Response(404, content=json.dumps({"error": "not found"}).encode())

    return httpx.MockTransport(handler)
