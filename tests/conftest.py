"""
Shared pytest fixtures.

Provides both repository backends, a stub quote client and a
``TestClient`` for an application wired with in‑memory storage.
"""

from typing import List

import pytest
from fastapi.testclient import TestClient

from user_quotes_api.app.clients.quote_client import QuoteClient
from user_quotes_api.app.core.config import Settings
from user_quotes_api.app.core.db import init_db
from user_quotes_api.app.entities.user import UserEntity
from user_quotes_api.app.main import create_app
from user_quotes_api.app.repositories import InMemoryRepository, SqliteUserRepository
from user_quotes_api.app.services.user_service import UserService

QUOTE = "I'm a quote"

INITIAL_USERS = [
    ("James", "james", "James@mail.com"),
    ("Mary", "mary", "Mary@mail.com"),
    ("Robert", "robert", "Robert@mail.com"),
    ("John", "john", "Nohn@mail.com"),
    ("Jennifer", "jennifer", "Jennifer@mail.com"),
    ("Michael", "michael", "Michael@mail.com"),
    ("William", "william", "William@mail.com"),
    ("David", "david", "David@mail.com"),
    ("Karen", "karen", "Karen@mail.com"),
]


class StubQuoteClient(QuoteClient):
    """Quote client returning a fixed quote and counting calls."""

    def __init__(self, quote: str = QUOTE) -> None:
        self.quote = quote
        self.calls = 0
        self.closed = False

    def get_quote(self) -> str:
        self.calls += 1
        return self.quote

    def close(self) -> None:
        self.closed = True


def make_users() -> List[UserEntity]:
    return [UserEntity(name=name, username=username, email=email) for name, username, email in INITIAL_USERS]


@pytest.fixture
def quote_client() -> StubQuoteClient:
    return StubQuoteClient()


@pytest.fixture
def memory_repository() -> InMemoryRepository:
    return InMemoryRepository()


@pytest.fixture
def sqlite_repository(tmp_path) -> SqliteUserRepository:
    db_path = str(tmp_path / "users.db")
    init_db(db_path)
    return SqliteUserRepository(db_path)


@pytest.fixture(params=["memory", "sqlite"])
def repository(request, tmp_path):
    """Each repository contract test runs against both backends."""
    if request.param == "memory":
        return InMemoryRepository()
    db_path = str(tmp_path / "users.db")
    init_db(db_path)
    return SqliteUserRepository(db_path)


@pytest.fixture
def service(memory_repository, quote_client) -> UserService:
    return UserService(memory_repository, quote_client)


@pytest.fixture
def client(memory_repository, quote_client):
    app = create_app(Settings(), repository=memory_repository, quote_client=quote_client)
    with TestClient(app) as test_client:
        yield test_client
