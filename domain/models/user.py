from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    username: str
    password_hash: str

    def __repr__(self) -> str:
        return f'User(username={self.username!r})'
