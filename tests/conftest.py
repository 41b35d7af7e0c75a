"""
Shared fixtures: a rate table with known rates and a provider double.
"""

from unittest.mock import AsyncMock

import pytest

from domain.models.rate_table import RateTable

FETCHED_RATES = {
    'TWD': 1.0,
    'USD': 0.0305,
    'JPY': 4.3,
    'EUR': 0.0292,
    'GBP': 0.0243,
}


@pytest.fixture
def rate_table():
    table = RateTable.seeded()
    table.apply_fetched_rates(FETCHED_RATES)
    return table


@pytest.fixture
def seeded_table():
    return RateTable.seeded()


@pytest.fixture
def mock_provider():
    provider = AsyncMock()
    provider.name = 'test-provider'
    provider.fetch_latest_rates.return_value = dict(FETCHED_RATES)
    return provider
