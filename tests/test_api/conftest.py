from decimal import Decimal
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from api.dependencies import (
	get_country_provider,
	get_rate_provider,
	get_token_service,
	get_user_repository,
)
from api.main import app
from infrastructure.persistence.repositories.user import InMemoryUserRepository
from infrastructure.security.tokens import TokenService

BASE_RATES = {'USD': Decimal('1.0'), 'SEK': Decimal('10.0'), 'PAB': Decimal('1.0')}


@pytest.fixture
def country_provider():
	provider = AsyncMock()
	provider.name = 'stub-countries'
	return provider


@pytest.fixture
def rate_provider():
	provider = AsyncMock()
	provider.name = 'stub-rates'
	provider.fetch_rates.side_effect = lambda symbols: {s: BASE_RATES[s] for s in symbols}
	return provider


@pytest.fixture
def token_service():
	return TokenService('test-secret')


@pytest.fixture
def client(country_provider, rate_provider, token_service):
	"""Test client wired to stub providers and a fresh user store."""
	repository = InMemoryUserRepository()
	app.dependency_overrides[get_country_provider] = lambda: country_provider
	app.dependency_overrides[get_rate_provider] = lambda: rate_provider
	app.dependency_overrides[get_user_repository] = lambda: repository
	app.dependency_overrides[get_token_service] = lambda: token_service
	client = TestClient(app)
	yield client
	app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(token_service):
	return {'Authorization': f'Bearer {token_service.issue("alice")}'}
