import logging

from application.services.conversion_service import ConversionService
from application.services.keypad_service import KeypadStateMachine, format_result
from application.services.rate_service import RateService
from application.workers.rate_refresher import RateRefresher
from config.settings import Settings
from domain.exceptions.currency import InvalidCurrencyError
from domain.models.currency import ConversionSelection, CurrencyEntry
from domain.models.keypad import Key
from domain.models.rate_table import RateTable
from infrastructure.providers import ExchangeRateAPIProvider, ExchangeRateProvider

logger = logging.getLogger(__name__)


class ConverterSession:
	"""Everything one calculator screen needs: keypad, selection, rates and their refresh."""

	def __init__(
		self,
		rate_table: RateTable,
		provider: ExchangeRateProvider,
		base_currency: str = 'TWD',
		from_currency: str = 'TWD',
		to_currency: str = 'JPY',
		refresh_interval: float = 3600,
		refresh_tolerance: float = 60,
	):
		self.rate_table = rate_table
		self.provider = provider
		self.keypad = KeypadStateMachine()
		self.conversion_service = ConversionService(rate_table)
		self.rate_service = RateService(provider, rate_table, base_currency)
		self.refresher = RateRefresher(
			self.rate_service, interval=refresh_interval, tolerance=refresh_tolerance
		)
		self.selection = ConversionSelection(
			from_code=self._require_known(from_currency),
			to_code=self._require_known(to_currency),
		)

	@classmethod
	def from_settings(cls, settings: Settings) -> 'ConverterSession':
		provider = ExchangeRateAPIProvider(
			base_url=settings.RATES_BASE_URL, timeout=settings.HTTP_TIMEOUT_SECONDS
		)
		return cls(
			rate_table=RateTable.seeded(),
			provider=provider,
			base_currency=settings.BASE_CURRENCY,
			from_currency=settings.DEFAULT_FROM_CURRENCY,
			to_currency=settings.DEFAULT_TO_CURRENCY,
			refresh_interval=settings.REFRESH_INTERVAL_SECONDS,
			refresh_tolerance=settings.REFRESH_TOLERANCE_SECONDS,
		)

	def _require_known(self, code: str) -> str:
		code = code.upper()
		if code not in self.rate_table:
			raise InvalidCurrencyError(f'Currency {code} is not supported')
		return code

	# Keypad

	def on_key(self, key: Key | str) -> str:
		return self.keypad.on_key(key)

	def get_display_entry(self) -> str:
		return self.keypad.display_entry

	# Conversion

	def get_converted_amount(self) -> float:
		amount = self.keypad.current_value
		if amount is None:
			return 0.0
		return self.conversion_service.convert(amount, self.selection.from_code, self.selection.to_code)

	def get_converted_display(self) -> str:
		return format_result(self.get_converted_amount())

	# Currency selection

	def get_available_currencies(self) -> list[CurrencyEntry]:
		return self.rate_table.entries

	@property
	def from_currency(self) -> CurrencyEntry:
		return self.rate_table.get(self.selection.from_code)

	@property
	def to_currency(self) -> CurrencyEntry:
		return self.rate_table.get(self.selection.to_code)

	def select_from(self, code: str) -> None:
		self.selection.from_code = self._require_known(code)

	def select_to(self, code: str) -> None:
		self.selection.to_code = self._require_known(code)

	def swap(self) -> None:
		self.selection.swap()

	# Rates

	def is_loading(self) -> bool:
		return self.rate_service.is_loading

	async def refresh_rates(self) -> bool:
		return await self.rate_service.fetch_once()

	def start(self) -> None:
		logger.info(f'Starting converter session ({self.selection.from_code} -> {self.selection.to_code})')
		self.refresher.start()

	async def close(self) -> None:
		await self.refresher.stop()
		await self.provider.close()
		logger.info('Converter session closed')
