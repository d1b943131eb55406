"""Shared fixtures for the Google store unit tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock, create_autospec

import pytest
from google.oauth2.credentials import Credentials
from googleapiclient.errors import HttpError
from httplib2 import Response


@pytest.fixture()
def mock_calendar_service() -> MagicMock:
    """Return a mock ``calendar`` v3 service resource."""
    return MagicMock()


@pytest.fixture()
def mock_tasks_service() -> MagicMock:
    """Return a mock ``tasks`` v1 service resource."""
    return MagicMock()


@pytest.fixture()
def make_http_error() -> Callable[[int], HttpError]:
    """Return a factory for ``HttpError`` instances with a given status."""

    def _make(status: int) -> HttpError:
        return HttpError(Response({"status": str(status)}), b"simulated error")

    return _make


@pytest.fixture()
def mock_credentials() -> MagicMock:
    """Return a mock Credentials object that reports as valid."""
    creds = create_autospec(Credentials, instance=True)
    creds.valid = True
    creds.expired = False
    creds.refresh_token = "fake-refresh-token"
    creds.to_json.return_value = '{"token": "fake"}'
    return creds


@pytest.fixture()
def mock_expired_credentials() -> MagicMock:
    """Return a mock Credentials object that is expired but has a refresh token."""
    creds = create_autospec(Credentials, instance=True)
    creds.valid = False
    creds.expired = True
    creds.refresh_token = "fake-refresh-token"
    creds.to_json.return_value = '{"token": "refreshed"}'
    return creds


@pytest.fixture()
def tmp_credentials_file(tmp_path: Path) -> Path:
    """Write a minimal client secrets file and return its path."""
    creds_path = tmp_path / "credentials.json"
    creds_path.write_text('{"installed": {"client_id": "fake", "client_secret": "fake"}}')
    return creds_path
