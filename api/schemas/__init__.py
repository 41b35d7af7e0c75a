from .responses import (
	CurrenciesResponse,
	CurrencyResponse,
	DisplayResponse,
	HealthResponse,
	RefreshResponse,
)

__all__ = [
	'CurrenciesResponse',
	'CurrencyResponse',
	'DisplayResponse',
	'HealthResponse',
	'RefreshResponse',
]
