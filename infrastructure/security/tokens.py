import logging
from datetime import UTC, datetime, timedelta

from jose import ExpiredSignatureError, JWTError, jwt

from domain.exceptions.auth import InvalidTokenError

logger = logging.getLogger(__name__)


class TokenService:
    """Issues and verifies the signed session tokens handed out on login."""

    def __init__(self, secret: str, algorithm: str = 'HS256', max_age_seconds: int = 60 * 60 * 24 * 7):
        if not secret:
            raise ValueError('Token signing secret must not be empty')
        self._secret = secret
        self.algorithm = algorithm
        self.max_age = timedelta(seconds=max_age_seconds)

    def issue(self, username: str, now: datetime | None = None) -> str:
        issued_at = now or datetime.now(UTC)
        claims = {
            'username': username,
            'iat': int(issued_at.timestamp()),
            'exp': int((issued_at + self.max_age).timestamp()),
        }
        return jwt.encode(claims, self._secret, algorithm=self.algorithm)

    def verify(self, token: str) -> str:
        """
        Verify ``token`` and return the username it was issued for.

        Raises:
            InvalidTokenError: bad signature, malformed token, expired token
                or a token without a username claim.
        """
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self.algorithm])
        except ExpiredSignatureError as e:
            logger.info('Rejected expired token')
            raise InvalidTokenError('Token has expired') from e
        except JWTError as e:
            logger.info(f'Rejected invalid token: {e}')
            raise InvalidTokenError('Invalid token') from e

        username = payload.get('username')
        if not isinstance(username, str):
            raise InvalidTokenError('Invalid token: missing username')
        return username
