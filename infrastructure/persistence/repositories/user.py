import threading

from domain.models.user import User


class InMemoryUserRepository:
    """
    Process-local user store keyed by username.

    Users are never removed and are lost on restart. All access goes through
    the lock so the store stays consistent when handlers run on a thread pool.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._users: dict[str, User] = {}

    def get(self, username: str) -> User | None:
        with self._lock:
            return self._users.get(username)

    def add_if_absent(self, user: User) -> tuple[User, bool]:
        """Store ``user`` unless the username is taken; returns the stored user and whether it was added."""
        with self._lock:
            existing = self._users.get(user.username)
            if existing is not None:
                return existing, False
            self._users[user.username] = user
            return user, True

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)
