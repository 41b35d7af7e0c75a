from dataclasses import dataclass


@dataclass(eq=False)
class CurrencyEntry:
    name: str
    code: str
    rate: float  # relative to the base currency, 0.0 until fetched

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CurrencyEntry):
            return NotImplemented
        return self.code == other.code

    def __hash__(self) -> int:
        return hash(self.code)


@dataclass
class ConversionSelection:
    from_code: str
    to_code: str

    def swap(self) -> None:
        self.from_code, self.to_code = self.to_code, self.from_code
