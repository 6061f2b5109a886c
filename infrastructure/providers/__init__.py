from .base import CountryProvider, ExchangeRateProvider
from .fixerio import FixerIOProvider
from .restcountries import RestCountriesProvider

__all__ = ['CountryProvider', 'ExchangeRateProvider', 'FixerIOProvider', 'RestCountriesProvider']
