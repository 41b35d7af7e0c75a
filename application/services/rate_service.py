import logging

from domain.exceptions.currency import ProviderError
from domain.models.rate_table import RateTable
from infrastructure.providers.base import ExchangeRateProvider

logger = logging.getLogger(__name__)


class RateService:
	"""Fetches the latest rates for the base currency and applies them to the table.

	Failures are fail-silent: the table keeps its previous rates until the next
	successful fetch. At most one fetch is in flight at a time.
	"""

	def __init__(self, provider: ExchangeRateProvider, rate_table: RateTable, base_currency: str):
		self.provider = provider
		self.rate_table = rate_table
		self.base_currency = base_currency
		self._loading = False

	@property
	def is_loading(self) -> bool:
		return self._loading

	async def fetch_once(self) -> bool:
		if self._loading:
			logger.info('Rate fetch already in flight, skipping')
			return False

		self._loading = True
		try:
			rates = await self.provider.fetch_latest_rates(self.base_currency)
		except ProviderError as e:
			logger.warning(f'Rate fetch from {self.provider.name} failed, keeping previous rates: {e}')
			return False
		finally:
			self._loading = False

		updated = self.rate_table.apply_fetched_rates(rates)
		logger.info(
			f'Applied {len(updated)} rate(s) from {self.provider.name} '
			f'(base {self.base_currency}): {", ".join(updated) or "none"}'
		)
		return True
