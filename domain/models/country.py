from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class Currency:
    name: str
    symbol: str | None = None


@dataclass(frozen=True)
class ExchangeRates:
    rates: dict[str, Decimal] = field(default_factory=dict)  # code -> cross rate against the reference
    errors: dict[str, str] = field(default_factory=dict)  # code -> why no rate was produced


@dataclass
class CountryData:
    name: str
    currencies: dict[str, Currency] | None = None
    population: int | None = None
    exchange_rates: dict[str, Decimal] = field(default_factory=dict)
    rate_errors: dict[str, str] = field(default_factory=dict)
