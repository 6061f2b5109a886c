import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, status
from fastapi.responses import PlainTextResponse

from api.dependencies import get_country_service, require_token
from api.schemas import CountryResponse
from application.services import CountryService

logger = logging.getLogger(__name__)

router = APIRouter(prefix='/api', tags=['country'], dependencies=[Depends(require_token)])

public_router = APIRouter(tags=['country'])


@router.get(
	'/name/{name}',
	response_model=CountryResponse,
	response_model_exclude_none=True,
	status_code=status.HTTP_200_OK,
	summary='Look up a country and its exchange rates',
	responses={
		status.HTTP_404_NOT_FOUND: {'description': 'Country not found'},
		status.HTTP_502_BAD_GATEWAY: {'description': 'Upstream provider failure'},
	},
)
async def get_country_by_name(
	name: Annotated[str, Path(min_length=1)],
	service: Annotated[CountryService, Depends(get_country_service)],
) -> CountryResponse:
	country = await service.get_country(name)
	return CountryResponse.from_domain(country)


@public_router.post(
	'/save-country',
	response_class=PlainTextResponse,
	status_code=status.HTTP_200_OK,
	summary='Save a country (not persisted)',
)
async def save_country() -> str:
	# Nothing is stored yet; the request body is ignored
	return 'Country saved'
