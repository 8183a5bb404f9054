"""Pytest configuration and fixtures."""
import copy
import json
from pathlib import Path
from unittest.mock import Mock

import pytest

from user_data_accessor import UserDataAccessor

FIXTURES = Path(__file__).parent / "fixtures"
USERS_URL = "http://localhost:3000/users"


@pytest.fixture
def users_file():
    return FIXTURES / "users.json"


@pytest.fixture
def users_data(users_file):
    """Raw user records as served by the users endpoint."""
    with open(users_file, encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def client(users_data):
    """Transport stub answering every GET with a copy of the fixture users."""
    stub = Mock()
    stub.get_json.return_value = copy.deepcopy(users_data)
    return stub


@pytest.fixture
def accessor(client):
    return UserDataAccessor(client=client, users_url=USERS_URL)


@pytest.fixture
def loaded_accessor(accessor):
    accessor.load_users()
    return accessor
