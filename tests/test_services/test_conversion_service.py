import pytest

from application.services.conversion_service import ConversionService
from domain.models.rate_table import RateTable


@pytest.fixture
def service(rate_table):
    return ConversionService(rate_table)


def test_convert_from_base_currency(service):
    assert service.convert(100, 'TWD', 'JPY') == pytest.approx(430.0)


def test_convert_between_non_base_currencies(service):
    # USD -> JPY through TWD: 100 * 4.3 / 0.0305
    assert service.convert(100, 'USD', 'JPY') == pytest.approx(100 * 4.3 / 0.0305)


def test_convert_same_currency_is_identity(service):
    assert service.convert(12.5, 'EUR', 'EUR') == pytest.approx(12.5)


def test_unknown_target_returns_zero(service):
    assert service.convert(100, 'TWD', 'XYZ') == 0


def test_unknown_source_returns_zero(service):
    assert service.convert(100, 'XYZ', 'TWD') == 0


def test_unfetched_source_rate_returns_zero():
    service = ConversionService(RateTable.seeded())

    assert service.convert(100, 'USD', 'TWD') == 0


def test_unfetched_target_rate_gives_zero():
    service = ConversionService(RateTable.seeded())

    assert service.convert(100, 'TWD', 'JPY') == 0


def test_conversion_reads_latest_rates(rate_table, service):
    rate_table.apply_fetched_rates({'JPY': 4.5})

    assert service.convert(10, 'TWD', 'JPY') == pytest.approx(45.0)
