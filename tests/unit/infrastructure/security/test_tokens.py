from datetime import UTC, datetime, timedelta

import pytest
from jose import jwt

from domain.exceptions.auth import InvalidTokenError
from infrastructure.security.tokens import TokenService


@pytest.fixture
def token_service():
    return TokenService('test-secret')


def test_issued_token_verifies_to_username(token_service):
    token = token_service.issue('alice')

    assert token_service.verify(token) == 'alice'


def test_token_carries_seven_day_expiry(token_service):
    now = datetime(2026, 1, 1, tzinfo=UTC)
    token = token_service.issue('alice', now=now)

    claims = jwt.get_unverified_claims(token)

    assert claims['username'] == 'alice'
    assert claims['exp'] - claims['iat'] == 7 * 24 * 60 * 60


def test_token_signed_with_other_secret_is_rejected(token_service):
    token = TokenService('other-secret').issue('alice')

    with pytest.raises(InvalidTokenError):
        token_service.verify(token)


def test_garbage_token_is_rejected(token_service):
    with pytest.raises(InvalidTokenError):
        token_service.verify('not.a.token')


def test_expired_token_is_rejected(token_service):
    token = token_service.issue('alice', now=datetime.now(UTC) - timedelta(days=8))

    with pytest.raises(InvalidTokenError, match='expired'):
        token_service.verify(token)


def test_token_without_username_is_rejected(token_service):
    token = jwt.encode({'sub': 'alice'}, 'test-secret', algorithm='HS256')

    with pytest.raises(InvalidTokenError, match='missing username'):
        token_service.verify(token)


def test_empty_secret_is_refused():
    with pytest.raises(ValueError):
        TokenService('')
