from pydantic import BaseModel, ConfigDict, Field

from domain.models.country import CountryData


class CurrencyResponse(BaseModel):
	name: str
	symbol: str | None = None


class CountryResponse(BaseModel):
	model_config = ConfigDict(populate_by_name=True)

	name: str = Field(..., description='Common name of the country')
	currencies: dict[str, CurrencyResponse] | None = Field(
		default=None, description='Currency code to currency details'
	)
	population: int | None = None
	exchange_rates: dict[str, float] = Field(
		default_factory=dict,
		alias='exchangeRates',
		description='Currency code to rate against the reference currency',
	)
	rate_errors: dict[str, str] = Field(
		default_factory=dict,
		alias='rateErrors',
		description='Currency code to the reason its rate is missing',
	)

	@classmethod
	def from_domain(cls, country: CountryData) -> 'CountryResponse':
		currencies = None
		if country.currencies is not None:
			currencies = {
				code: CurrencyResponse(name=c.name, symbol=c.symbol)
				for code, c in country.currencies.items()
			}
		return cls(
			name=country.name,
			currencies=currencies,
			population=country.population,
			exchange_rates={code: float(rate) for code, rate in country.exchange_rates.items()},
			rate_errors=dict(country.rate_errors),
		)


class TokenResponse(BaseModel):
	token: str = Field(..., description='Signed session token')
