"""Shared pytest fixtures for all tests."""

import pytest

from expense_frontend.api_client import ExpenseApiClient
from expense_frontend.session import SessionStore

from tests.helpers import FakeHttp, TOKEN, USER_ID


@pytest.fixture
def storage():
    """Plain dict standing in for the browser session storage."""
    return {}


@pytest.fixture
def store(storage):
    return SessionStore(storage)


@pytest.fixture
def logged_in(store):
    store.save(TOKEN, USER_ID)
    return store


@pytest.fixture
def http():
    return FakeHttp()


@pytest.fixture
def client(http):
    return ExpenseApiClient(base_url="http://api.test", token=TOKEN, timeout=5, http=http)
