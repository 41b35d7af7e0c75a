from collections.abc import Iterator, Mapping
from datetime import UTC, datetime

from domain.models.currency import CurrencyEntry

SEED_CURRENCIES: tuple[tuple[str, str, float], ...] = (
    ("New Taiwan Dollar", "TWD", 1.0),
    ("US Dollar", "USD", 0.0),
    ("Japanese Yen", "JPY", 0.0),
    ("Euro", "EUR", 0.0),
)


class RateTable:
    """
    Fixed, ordered list of currencies with rates relative to one base currency.

    The table never grows after seeding: fetched rates only overwrite the
    entries it already knows about.
    """

    def __init__(self, entries: list[CurrencyEntry]):
        codes = [entry.code for entry in entries]
        if len(codes) != len(set(codes)):
            raise ValueError(f"Duplicate currency codes in rate table: {codes}")
        self._entries = list(entries)
        self._by_code = {entry.code: entry for entry in self._entries}
        self.updated_at: datetime | None = None

    @classmethod
    def seeded(cls) -> "RateTable":
        return cls([CurrencyEntry(name=name, code=code, rate=rate) for name, code, rate in SEED_CURRENCIES])

    @property
    def entries(self) -> list[CurrencyEntry]:
        return list(self._entries)

    @property
    def codes(self) -> list[str]:
        return [entry.code for entry in self._entries]

    def lookup(self, code: str) -> float | None:
        entry = self._by_code.get(code)
        return entry.rate if entry is not None else None

    def get(self, code: str) -> CurrencyEntry | None:
        return self._by_code.get(code)

    def apply_fetched_rates(self, rates: Mapping[str, float]) -> list[str]:
        """Overwrite the rates of known codes; unknown codes are dropped."""
        updated = []
        for entry in self._entries:
            if entry.code in rates:
                entry.rate = float(rates[entry.code])
                updated.append(entry.code)
        self.updated_at = datetime.now(UTC)
        return updated

    def __contains__(self, code: object) -> bool:
        return code in self._by_code

    def __iter__(self) -> Iterator[CurrencyEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
