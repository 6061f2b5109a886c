from concurrent.futures import ThreadPoolExecutor

from domain.models.user import User
from infrastructure.persistence.repositories.user import InMemoryUserRepository


def test_get_unknown_user_returns_none():
    assert InMemoryUserRepository().get('nobody') is None


def test_add_if_absent_stores_new_user():
    repo = InMemoryUserRepository()
    user = User(username='alice', password_hash='h1')

    stored, created = repo.add_if_absent(user)

    assert created is True
    assert stored is user
    assert repo.get('alice') is user
    assert len(repo) == 1


def test_add_if_absent_keeps_existing_user():
    repo = InMemoryUserRepository()
    first = User(username='alice', password_hash='h1')
    repo.add_if_absent(first)

    stored, created = repo.add_if_absent(User(username='alice', password_hash='h2'))

    assert created is False
    assert stored is first
    assert len(repo) == 1


def test_concurrent_adds_store_exactly_one_user():
    repo = InMemoryUserRepository()
    candidates = [User(username='alice', password_hash=f'h{i}') for i in range(50)]

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(repo.add_if_absent, candidates))

    assert sum(created for _, created in results) == 1
    winners = {stored.password_hash for stored, _ in results}
    assert winners == {repo.get('alice').password_hash}


def test_repr_does_not_leak_hash():
    assert 'h1' not in repr(User(username='alice', password_hash='h1'))
