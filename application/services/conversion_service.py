from domain.models.rate_table import RateTable


class ConversionService:
	def __init__(self, rate_table: RateTable):
		self.rate_table = rate_table

	def convert(self, amount: float, from_currency: str, to_currency: str) -> float:
		"""Convert through the shared base currency.

		Returns 0.0 when either code is unknown or the source rate has not been
		fetched yet.
		"""
		from_rate = self.rate_table.lookup(from_currency)
		to_rate = self.rate_table.lookup(to_currency)

		if from_rate is None or to_rate is None or from_rate == 0:
			return 0.0

		return amount * (to_rate / from_rate)
