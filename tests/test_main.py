"""Tests for the users CLI."""
import json
from unittest.mock import Mock

import pytest
from click.testing import CliRunner

from errors import TransportError
from main import cli, parse_search_params
from user_data_accessor import UserDataAccessor


@pytest.fixture
def runner():
    return CliRunner()


def invoke(runner, accessor, args):
    return runner.invoke(cli, args, obj=accessor)


def test_count(runner, accessor):
    result = invoke(runner, accessor, ["count"])

    assert result.exit_code == 0
    assert result.output.strip() == "3"


def test_emails(runner, accessor, users_data):
    result = invoke(runner, accessor, ["emails"])

    assert result.exit_code == 0
    assert result.output.strip() == ";".join(u["email"] for u in users_data)


def test_find(runner, accessor, users_data):
    result = invoke(runner, accessor, ["find", "id=1", "username=Bret"])

    assert result.exit_code == 0
    assert json.loads(result.output) == [users_data[0]]


def test_find_without_params(runner, accessor):
    result = invoke(runner, accessor, ["find"])

    assert result.exit_code == 1
    assert "No search parameters provoded!" in result.output


def test_find_no_match(runner, accessor):
    result = invoke(runner, accessor, ["find", "id=999"])

    assert result.exit_code == 1
    assert "No matching users found!" in result.output


def test_find_rejects_malformed_pair(runner, accessor):
    result = invoke(runner, accessor, ["find", "username"])

    assert result.exit_code == 2


def test_count_with_empty_source(runner, client, accessor):
    client.get_json.return_value = []

    result = invoke(runner, accessor, ["count"])

    assert result.exit_code == 1
    assert "No users loaded!" in result.output


def test_load_failure(runner):
    client = Mock()
    client.get_json.side_effect = TransportError("connection refused")
    accessor = UserDataAccessor(client=client, users_url="http://localhost:3000/users")

    result = invoke(runner, accessor, ["emails"])

    assert result.exit_code == 1
    assert "Failed to load users data: connection refused" in result.output


def test_url_option_builds_accessor(runner, monkeypatch):
    created = {}

    def fake_load(self):
        created["url"] = self.users_url
        self.users = []

    monkeypatch.setattr(UserDataAccessor, "load_users", fake_load)

    result = runner.invoke(cli, ["--url", "http://example.test/people", "count"])

    assert created["url"] == "http://example.test/people"
    assert result.exit_code == 1


def test_parse_search_params():
    params = parse_search_params(("id=1", "username=Bret", "active=true", "email=a=b@x"))

    assert params == {"id": 1, "username": "Bret", "active": True, "email": "a=b@x"}


def test_find_without_params_does_not_load(runner, client, accessor):
    client.get_json.side_effect = TransportError("connection refused")

    result = invoke(runner, accessor, ["find"])

    assert result.exit_code == 1
    assert "No search parameters provoded!" in result.output
    client.get_json.assert_not_called()
