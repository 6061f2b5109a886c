from .requests import LoginRequest
from .responses import CountryResponse, CurrencyResponse, TokenResponse

__all__ = [
	'CountryResponse',
	'CurrencyResponse',
	'LoginRequest',
	'TokenResponse',
]
