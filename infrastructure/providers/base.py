from typing import Protocol


class ExchangeRateProvider(Protocol):
	@property
	def name(self) -> str: ...

	async def fetch_latest_rates(self, base_currency: str) -> dict[str, float]:
		"""Return a mapping of currency code to rate relative to ``base_currency``.

		Raises ProviderError on any network, HTTP or payload failure.
		"""
		...

	async def close(self) -> None: ...
