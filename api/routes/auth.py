from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from api.dependencies import TOKEN_COOKIE, get_auth_service
from api.schemas import LoginRequest, TokenResponse
from application.services import AuthService
from config.settings import Settings, get_settings

router = APIRouter(tags=['auth'])


@router.post(
	'/login',
	response_model=TokenResponse,
	status_code=status.HTTP_200_OK,
	summary='Log in, registering the username on first use',
	responses={status.HTTP_401_UNAUTHORIZED: {'description': 'Invalid username or password'}},
)
def login(
	credentials: LoginRequest,
	response: Response,
	service: Annotated[AuthService, Depends(get_auth_service)],
	settings: Annotated[Settings, Depends(get_settings)],
) -> TokenResponse:
	token = service.login(credentials.username, credentials.password)

	response.set_cookie(
		key=TOKEN_COOKIE,
		value=token,
		max_age=settings.TOKEN_MAX_AGE_SECONDS,
		httponly=True,
		secure=settings.COOKIE_SECURE,
	)
	return TokenResponse(token=token)
