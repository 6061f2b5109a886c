from decimal import Decimal
from typing import Protocol


class ExchangeRateProvider(Protocol):
    """Reports rates of several currencies against one provider-defined base unit."""

    @property
    def name(self) -> str: ...

    async def fetch_rates(self, symbols: list[str]) -> dict[str, Decimal]: ...

    async def close(self) -> None: ...


class CountryProvider(Protocol):
    """Looks countries up by (possibly partial) name."""

    @property
    def name(self) -> str: ...

    async def fetch_by_name(self, name: str) -> list[dict]: ...

    async def close(self) -> None: ...
