"""Tests for HolidayBatchFetcher class."""

import asyncio
from datetime import date

import pytest

from date_toolkit.holidays import HolidayBatchFetcher, HolidaySource, MockHolidaySource


class TrackingSource(HolidaySource):
    """Registra o pico de buscas simultâneas."""

    def __init__(self):
        self.active = 0
        self.peak = 0

    async def fetch(self, year: int) -> list[date]:
        self.active += 1
        self.peak = max(self.peak, self.active)
        await asyncio.sleep(0.01)
        self.active -= 1
        return [date(year, 1, 1)]


class TestHolidayBatchFetcher:
    """Test suite for HolidayBatchFetcher."""

    def test_init_default(self):
        fetcher = HolidayBatchFetcher()
        assert isinstance(fetcher.source, MockHolidaySource)
        assert fetcher.semaphore._value == 10

    def test_init_custom(self, instant_source):
        fetcher = HolidayBatchFetcher(source=instant_source, max_concurrent=3)
        assert fetcher.source is instant_source
        assert fetcher.semaphore._value == 3

    def test_invalid_max_concurrent(self):
        with pytest.raises(ValueError):
            HolidayBatchFetcher(max_concurrent=0)

    @pytest.mark.asyncio
    async def test_fetch_all_success(self, instant_source):
        fetcher = HolidayBatchFetcher(source=instant_source)

        results = await fetcher.fetch_all([2026, 2024, 2025])

        assert list(results) == [2026, 2024, 2025]
        assert results[2024] == [date(2024, 1, 1), date(2024, 12, 25), date(2024, 12, 31)]

    @pytest.mark.asyncio
    async def test_fetch_all_mixed_results(self, failing_source):
        fetcher = HolidayBatchFetcher(source=failing_source)

        results = await fetcher.fetch_all([2020, 2021, 2022])

        assert results[2020] == [date(2020, 1, 1)]
        assert results[2021] is None
        assert results[2022] == [date(2022, 1, 1)]

    @pytest.mark.asyncio
    async def test_fetch_all_deduplicates_years(self, failing_source):
        fetcher = HolidayBatchFetcher(source=failing_source)

        results = await fetcher.fetch_all([2020, 2020, 2022])

        assert list(results) == [2020, 2022]
        assert sorted(failing_source.calls) == [2020, 2022]

    @pytest.mark.asyncio
    async def test_fetch_all_empty(self):
        assert await HolidayBatchFetcher().fetch_all([]) == {}

    @pytest.mark.asyncio
    async def test_fetch_all_respects_concurrency_limit(self):
        source = TrackingSource()
        fetcher = HolidayBatchFetcher(source=source, max_concurrent=2)

        results = await fetcher.fetch_all(range(2020, 2026))

        assert len(results) == 6
        assert source.peak == 2
