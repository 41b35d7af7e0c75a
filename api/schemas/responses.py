from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from application.services import ConverterSession
from domain.models.currency import CurrencyEntry


class CurrencyResponse(BaseModel):
	name: str = Field(..., description='Display name of the currency')
	code: str = Field(..., description='Currency code')
	rate: float = Field(..., description='Rate relative to the base currency, 0 until fetched')

	@classmethod
	def from_entry(cls, entry: CurrencyEntry) -> 'CurrencyResponse':
		return cls(name=entry.name, code=entry.code, rate=entry.rate)


class DisplayResponse(BaseModel):
	entry: str = Field(..., description='Keypad entry as typed, "0" when empty')
	converted: str = Field(..., description='Converted amount with two decimals')
	from_currency: CurrencyResponse
	to_currency: CurrencyResponse
	is_loading: bool = Field(..., description='Whether a rate fetch is in flight')
	rates_updated_at: datetime | None = Field(None, description='When rates were last applied')

	@classmethod
	def from_session(cls, session: ConverterSession) -> 'DisplayResponse':
		return cls(
			entry=session.get_display_entry(),
			converted=session.get_converted_display(),
			from_currency=CurrencyResponse.from_entry(session.from_currency),
			to_currency=CurrencyResponse.from_entry(session.to_currency),
			is_loading=session.is_loading(),
			rates_updated_at=session.rate_table.updated_at,
		)

	model_config = ConfigDict(
		json_schema_extra={
			'example': {
				'entry': '100',
				'converted': '430.00',
				'from_currency': {'name': 'New Taiwan Dollar', 'code': 'TWD', 'rate': 1.0},
				'to_currency': {'name': 'Japanese Yen', 'code': 'JPY', 'rate': 4.3},
				'is_loading': False,
				'rates_updated_at': '2025-09-27T10:30:00Z',
			}
		}
	)


class CurrenciesResponse(BaseModel):
	currencies: list[CurrencyResponse] = Field(description='Available currencies in picker order')


class RefreshResponse(BaseModel):
	applied: bool = Field(..., description='Whether fetched rates were applied')
	display: DisplayResponse


class HealthResponse(BaseModel):
	status: str
	is_loading: bool
	rates_updated_at: datetime | None = None
	missing_rates: list[str] = Field(default_factory=list, description='Codes still without a rate')
