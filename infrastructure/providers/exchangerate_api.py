from typing import Annotated

import httpx
from pydantic import BaseModel, Field, ValidationError

from domain.exceptions.currency import ProviderError


class LatestRatesPayload(BaseModel):
	"""Only the ``rates`` object of the response is used; other fields are ignored."""

	rates: dict[str, Annotated[float, Field(ge=0)]]


class ExchangeRateAPIProvider:
	BASE_URL = 'https://api.exchangerate-api.com/v4/latest'

	def __init__(
		self,
		base_url: str | None = None,
		client: httpx.AsyncClient | None = None,
		timeout: int = 10,
	):
		self.base_url = (base_url or self.BASE_URL).rstrip('/')
		self._client = client or httpx.AsyncClient(timeout=timeout)

	@property
	def name(self) -> str:
		return 'exchangerate-api'

	async def _request(self, endpoint: str) -> dict:
		url = f'{self.base_url}/{endpoint}'

		try:
			response = await self._client.get(url)
			response.raise_for_status()
			data = response.json()
		except httpx.HTTPStatusError as e:
			raise ProviderError(
				f'ExchangeRate-API HTTP error {e.response.status_code}: {e.response.text[:200]}'
			) from e
		except httpx.RequestError as e:
			raise ProviderError(f'ExchangeRate-API request failed: {e.__class__.__name__}') from e
		except Exception as e:
			raise ProviderError(f'ExchangeRate-API response parsing error: {str(e)}') from e

		if not isinstance(data, dict):
			raise ProviderError('ExchangeRate-API response parsing error: expected a JSON object')
		return data

	async def fetch_latest_rates(self, base_currency: str) -> dict[str, float]:
		data = await self._request(base_currency)
		try:
			payload = LatestRatesPayload.model_validate(data)
		except ValidationError as e:
			raise ProviderError(
				f'ExchangeRate-API returned malformed rates: {e.error_count()} invalid field(s)'
			) from e
		return payload.rates

	async def close(self) -> None:
		await self._client.aclose()
