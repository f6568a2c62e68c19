# tests/conftest.py
from unittest.mock import MagicMock

import pytest

from dbcache.services.repository import Repository
from dbcache.services.repository_factory import reset_repository


@pytest.fixture
def fake_client():
    """A stand-in for redis.Redis exposing get/set/setex/delete."""
    return MagicMock(name="redis_client")


@pytest.fixture
def client_factory(fake_client):
    return MagicMock(name="client_factory", return_value=fake_client)


@pytest.fixture
def repository(client_factory):
    """A Repository whose connection is built by the fake factory."""
    return Repository(client_factory=client_factory)


@pytest.fixture(autouse=True)
def _fresh_singleton():
    reset_repository()
    yield
    reset_repository()
