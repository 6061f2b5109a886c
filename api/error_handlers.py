import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse

from domain.exceptions.auth import InvalidCredentialsError, InvalidTokenError
from domain.exceptions.country import CountryNotFoundError, ProviderError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(CountryNotFoundError)
	async def country_not_found_handler(request: Request, exc: CountryNotFoundError):
		return PlainTextResponse('Country not found', status_code=status.HTTP_404_NOT_FOUND)

	@app.exception_handler(InvalidCredentialsError)
	async def invalid_credentials_handler(request: Request, exc: InvalidCredentialsError):
		return PlainTextResponse(
			'Invalid username or password', status_code=status.HTTP_401_UNAUTHORIZED
		)

	@app.exception_handler(InvalidTokenError)
	async def invalid_token_handler(request: Request, exc: InvalidTokenError):
		return PlainTextResponse(
			'Unauthorized',
			status_code=status.HTTP_401_UNAUTHORIZED,
			headers={'WWW-Authenticate': 'Bearer'},
		)

	@app.exception_handler(ProviderError)
	async def provider_error_handler(request: Request, exc: ProviderError):
		logger.error(f'Provider error on {request.url.path}: {exc}')
		return JSONResponse(
			status_code=status.HTTP_502_BAD_GATEWAY,
			content={'detail': 'Upstream service unavailable'},
		)
