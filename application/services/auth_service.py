import logging

from domain.exceptions.auth import InvalidCredentialsError
from domain.models.user import User
from infrastructure.persistence.repositories.user import InMemoryUserRepository
from infrastructure.security.passwords import hash_password, verify_password
from infrastructure.security.tokens import TokenService

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(
        self,
        repository: InMemoryUserRepository,
        token_service: TokenService,
        bcrypt_rounds: int = 10,
    ):
        self.repository = repository
        self.token_service = token_service
        self.bcrypt_rounds = bcrypt_rounds

    def get_or_create_user(self, username: str, password: str) -> tuple[User, bool]:
        """
        Return the user named ``username``, registering it with ``password`` if unknown.

        Login doubles as registration: the first password seen for a username
        becomes that user's password.
        """
        user = self.repository.get(username)
        if user is not None:
            return user, False

        candidate = User(username=username, password_hash=hash_password(password, self.bcrypt_rounds))
        user, created = self.repository.add_if_absent(candidate)
        if created:
            logger.info(f"Registered new user {username!r}")
        return user, created

    def login(self, username: str, password: str) -> str:
        user, _ = self.get_or_create_user(username, password)

        if not verify_password(password, user.password_hash):
            logger.info(f"Failed login for {username!r}")
            raise InvalidCredentialsError("Invalid username or password")

        return self.token_service.issue(user.username)
