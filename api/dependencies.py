import logging
from typing import Annotated

from fastapi import Cookie, Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from application.services import AuthService, CountryService, RateService
from config.settings import Settings, get_settings
from domain.exceptions.auth import InvalidTokenError
from infrastructure.persistence.repositories.user import InMemoryUserRepository
from infrastructure.providers import (
	CountryProvider,
	ExchangeRateProvider,
	FixerIOProvider,
	RestCountriesProvider,
)
from infrastructure.security.tokens import TokenService

logger = logging.getLogger(__name__)

TOKEN_COOKIE = 'token'

bearer_scheme = HTTPBearer(auto_error=False)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	country_provider: CountryProvider | None = None
	rate_provider: ExchangeRateProvider | None = None
	user_repository: InMemoryUserRepository | None = None
	token_service: TokenService | None = None


deps = AppDependencies()


def init_dependencies(settings: Settings | None = None) -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = settings or get_settings()

	deps.country_provider = RestCountriesProvider(
		timeout=settings.HTTP_TIMEOUT_SECONDS, base_url=settings.COUNTRY_API_URL
	)
	deps.rate_provider = FixerIOProvider(
		settings.FIXERIO_API_KEY,
		timeout=settings.HTTP_TIMEOUT_SECONDS,
		base_url=settings.FIXER_API_URL,
	)
	deps.user_repository = InMemoryUserRepository()
	deps.token_service = TokenService(
		settings.JWT_SECRET,
		algorithm=settings.JWT_ALGORITHM,
		max_age_seconds=settings.TOKEN_MAX_AGE_SECONDS,
	)
	logger.info('Dependencies initialized')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.country_provider:
		await deps.country_provider.close()
	if deps.rate_provider:
		await deps.rate_provider.close()

	deps.country_provider = None
	deps.rate_provider = None
	logger.info('Cleanup complete')


def get_country_provider() -> CountryProvider:
	if deps.country_provider is None:
		raise RuntimeError('Country provider not initialized')
	return deps.country_provider


def get_rate_provider() -> ExchangeRateProvider:
	if deps.rate_provider is None:
		raise RuntimeError('Rate provider not initialized')
	return deps.rate_provider


def get_user_repository() -> InMemoryUserRepository:
	if deps.user_repository is None:
		raise RuntimeError('User repository not initialized')
	return deps.user_repository


def get_token_service() -> TokenService:
	if deps.token_service is None:
		raise RuntimeError('Token service not initialized')
	return deps.token_service


def get_rate_service(
	provider: Annotated[ExchangeRateProvider, Depends(get_rate_provider)],
	settings: Annotated[Settings, Depends(get_settings)],
) -> RateService:
	return RateService(provider=provider, reference_currency=settings.REFERENCE_CURRENCY)


def get_country_service(
	country_provider: Annotated[CountryProvider, Depends(get_country_provider)],
	rate_service: Annotated[RateService, Depends(get_rate_service)],
) -> CountryService:
	return CountryService(country_provider=country_provider, rate_service=rate_service)


def get_auth_service(
	repository: Annotated[InMemoryUserRepository, Depends(get_user_repository)],
	token_service: Annotated[TokenService, Depends(get_token_service)],
	settings: Annotated[Settings, Depends(get_settings)],
) -> AuthService:
	return AuthService(
		repository=repository,
		token_service=token_service,
		bcrypt_rounds=settings.BCRYPT_ROUNDS,
	)


def require_token(
	token_service: Annotated[TokenService, Depends(get_token_service)],
	credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)] = None,
	token: Annotated[str | None, Cookie()] = None,
) -> str:
	"""Username of the caller, taken from a bearer header or, failing that, the ``token`` cookie."""
	raw = credentials.credentials if credentials else token
	if not raw:
		raise InvalidTokenError('Missing token')
	return token_service.verify(raw)
