import asyncio

import pytest

from application.services.rate_service import RateService
from domain.exceptions.currency import ProviderError


@pytest.fixture
def service(mock_provider, seeded_table):
    return RateService(mock_provider, seeded_table, base_currency='TWD')


@pytest.mark.asyncio
async def test_fetch_once_applies_rates(service, mock_provider, seeded_table):
    applied = await service.fetch_once()

    assert applied is True
    mock_provider.fetch_latest_rates.assert_awaited_once_with('TWD')
    assert seeded_table.lookup('JPY') == 4.3
    assert seeded_table.lookup('USD') == 0.0305
    assert 'GBP' not in seeded_table
    assert service.is_loading is False


@pytest.mark.asyncio
async def test_failed_fetch_keeps_previous_rates(service, mock_provider, seeded_table):
    await service.fetch_once()
    mock_provider.fetch_latest_rates.side_effect = ProviderError('ExchangeRate-API request failed: ConnectError')

    applied = await service.fetch_once()

    assert applied is False
    assert seeded_table.lookup('JPY') == 4.3
    assert service.is_loading is False


@pytest.mark.asyncio
async def test_failed_first_fetch_leaves_seed(service, mock_provider, seeded_table):
    mock_provider.fetch_latest_rates.side_effect = ProviderError('boom')

    assert await service.fetch_once() is False
    assert seeded_table.lookup('JPY') == 0.0
    assert seeded_table.updated_at is None


@pytest.mark.asyncio
async def test_loading_flag_is_set_while_fetching(service, mock_provider):
    release = asyncio.Event()
    seen = []

    async def slow_fetch(base):
        seen.append(service.is_loading)
        await release.wait()
        return {'JPY': 4.4}

    mock_provider.fetch_latest_rates.side_effect = slow_fetch

    task = asyncio.create_task(service.fetch_once())
    await asyncio.sleep(0)
    assert service.is_loading is True

    release.set()
    assert await task is True
    assert seen == [True]
    assert service.is_loading is False


@pytest.mark.asyncio
async def test_overlapping_fetch_is_skipped(service, mock_provider, seeded_table):
    release = asyncio.Event()

    async def slow_fetch(base):
        await release.wait()
        return {'JPY': 4.4}

    mock_provider.fetch_latest_rates.side_effect = slow_fetch

    first = asyncio.create_task(service.fetch_once())
    await asyncio.sleep(0)

    assert await service.fetch_once() is False

    release.set()
    assert await first is True
    assert mock_provider.fetch_latest_rates.await_count == 1
    assert seeded_table.lookup('JPY') == 4.4
