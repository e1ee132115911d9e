"""
tests/conftest.py -- Shared fixtures.

Every client gets its own in-memory SQLite database: the lifespan builds a
fresh `Database` per app, and `sqlite://` is pinned to one connection, so
tests never see each other's rows. bcrypt runs at its minimum cost to keep
the suite fast.
"""

from __future__ import annotations

from collections.abc import Callable, Generator

import pytest
from fastapi.testclient import TestClient

from shop_server.config import Settings
from shop_server.core.security import PasswordHasher, TokenIssuer
from shop_server.main import create_app

TEST_SECRET = "test-secret"


def _settings(**overrides) -> Settings:
    values = {"database_url": "sqlite://", "jwt_secret": TEST_SECRET, "bcrypt_rounds": 4}
    values.update(overrides)
    # ignore any developer .env in the working directory
    return Settings(_env_file=None, **values)


@pytest.fixture
def make_client() -> Generator[Callable[..., TestClient], None, None]:
    """Factory fixture: make_client(products_require_auth=True) -> started TestClient."""
    clients: list[TestClient] = []

    def _make(**overrides) -> TestClient:
        client = TestClient(create_app(_settings(**overrides)))
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client()


@pytest.fixture
def tokens() -> TokenIssuer:
    return TokenIssuer(TEST_SECRET)


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(rounds=4)


def signup(client: TestClient, username="ann", email="ann@x.com", password="secret1"):
    return client.post(
        "/api/users/signup",
        json={"username": username, "email": email, "password": password},
    )


def valid_product(**overrides) -> dict:
    product = {
        "name": "Desk Lamp",
        "price": 24.5,
        "description": "An adjustable LED desk lamp",
        "imageUrl": "https://example.com/lamp.png",
        "stock": 12,
    }
    product.update(overrides)
    return product
