import logging

from application.services.rate_service import RateService
from domain.exceptions.country import CountryNotFoundError, ProviderError
from domain.models.country import CountryData, Currency
from infrastructure.providers.base import CountryProvider

logger = logging.getLogger(__name__)


class CountryService:
    def __init__(self, country_provider: CountryProvider, rate_service: RateService):
        self.country_provider = country_provider
        self.rate_service = rate_service

    async def get_country(self, name: str) -> CountryData:
        """
        Look ``name`` up and attach exchange rates for each of its currencies.

        The provider may match several countries; the first one wins.
        """
        matches = await self.country_provider.fetch_by_name(name)
        if not matches:
            raise CountryNotFoundError(f"No country matches {name!r}")

        country = self._to_country(matches[0])
        if len(matches) > 1:
            logger.info(f"{len(matches)} countries match {name!r}, using {country.name}")

        if not country.currencies:
            return country

        exchange_rates = await self.rate_service.get_exchange_rates(country.currencies.keys())
        country.exchange_rates = exchange_rates.rates
        country.rate_errors = exchange_rates.errors
        return country

    @staticmethod
    def _to_country(record: dict) -> CountryData:
        try:
            name = record["name"]["common"]
            raw_currencies = record.get("currencies")
            currencies = None
            if raw_currencies:
                currencies = {
                    code: Currency(name=info.get("name", code), symbol=info.get("symbol"))
                    for code, info in raw_currencies.items()
                }
            return CountryData(
                name=name,
                currencies=currencies,
                population=record.get("population"),
            )
        except (KeyError, TypeError, AttributeError) as e:
            raise ProviderError(f"Malformed country record: {e!r}") from e
