from .auth_service import AuthService
from .country_service import CountryService
from .rate_service import RateService

__all__ = ['AuthService', 'CountryService', 'RateService']
