import asyncio
import logging
from collections.abc import Iterable
from decimal import Decimal, DivisionByZero, InvalidOperation

from domain.exceptions.country import ProviderError
from domain.models.country import ExchangeRates
from infrastructure.providers.base import ExchangeRateProvider

logger = logging.getLogger(__name__)


class RateService:
    def __init__(self, provider: ExchangeRateProvider, reference_currency: str = "SEK"):
        self.provider = provider
        self.reference_currency = reference_currency.upper()

    async def get_exchange_rates(self, codes: Iterable[str]) -> ExchangeRates:
        """
        Cross rates of ``codes`` against the reference currency.

        One provider call per code, all issued concurrently. A code whose call
        fails is left out of ``rates`` and reported in ``errors`` instead.
        """
        codes = list(dict.fromkeys(codes))
        if not codes:
            return ExchangeRates()

        results = await asyncio.gather(
            *(self.get_cross_rate(code) for code in codes), return_exceptions=True
        )

        rates: dict[str, Decimal] = {}
        errors: dict[str, str] = {}
        for code, result in zip(codes, results, strict=True):
            if isinstance(result, ProviderError):
                logger.warning(f"No rate for {code} against {self.reference_currency}: {result}")
                errors[code] = str(result)
            elif isinstance(result, BaseException):
                raise result
            else:
                rates[code] = result

        return ExchangeRates(rates=rates, errors=errors)

    async def get_cross_rate(self, code: str) -> Decimal:
        reference = self.reference_currency
        if code == reference:
            # Still one round trip so an unusable reference rate surfaces the same way
            symbols = [reference]
        else:
            symbols = [code, reference]

        base_rates = await self.provider.fetch_rates(symbols)

        try:
            return base_rates[code] / base_rates[reference]
        except (DivisionByZero, InvalidOperation) as e:
            raise ProviderError(f"Unusable {reference} rate from {self.provider.name}") from e
