"""Tests for Google OAuth and store construction.

| Test | Scenario | Expected |
|---|---|---|
| test_valid_cached_token_returned | token valid | Cached creds, no consent |
| test_expired_token_refreshed | Expired, refresh OK | refresh() called, token saved |
| test_refresh_failure_falls_back_to_consent | Refresh rejected | Consent flow |
| test_expired_without_refresh_token | No refresh token | Consent flow, no refresh |
| test_no_token_launches_consent_flow | No token file | InstalledAppFlow launched |
| test_corrupt_token_file_ignored | Token file not JSON | Consent flow |
| test_missing_client_secrets_raises | No client secrets | StoreAuthError |
| test_reads_authorized_user_file | Real token JSON | Credentials loaded |
| test_build_stores | Service construction | Both stores built |
"""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from google.auth.exceptions import RefreshError
from google.oauth2.credentials import Credentials

from chrono_ai.stores.auth import SCOPES, build_stores, get_google_credentials
from chrono_ai.stores.exceptions import StoreAuthError
from chrono_ai.stores.google import GoogleCalendarStore, GoogleTaskStore


class TestGetGoogleCredentials:
    """Cached token, then refresh, then consent."""

    def test_valid_cached_token_returned(
        self, tmp_path: Path, mock_credentials: MagicMock
    ) -> None:
        token_path = tmp_path / "token.json"

        with (
            patch(
                "chrono_ai.stores.auth._read_token", return_value=mock_credentials
            ) as mock_read,
            patch("chrono_ai.stores.auth._consent") as mock_consent,
        ):
            result = get_google_credentials(tmp_path / "credentials.json", token_path)

        mock_read.assert_called_once_with(token_path)
        mock_consent.assert_not_called()
        assert result is mock_credentials
        assert not token_path.exists()

    def test_expired_token_refreshed(
        self, tmp_path: Path, mock_expired_credentials: MagicMock
    ) -> None:
        token_path = tmp_path / "token.json"

        with (
            patch(
                "chrono_ai.stores.auth._read_token",
                return_value=mock_expired_credentials,
            ),
            patch("chrono_ai.stores.auth._consent") as mock_consent,
        ):
            result = get_google_credentials(tmp_path / "credentials.json", token_path)

        mock_expired_credentials.refresh.assert_called_once()
        mock_consent.assert_not_called()
        assert result is mock_expired_credentials
        assert token_path.read_text() == '{"token": "refreshed"}'

    def test_refresh_failure_falls_back_to_consent(
        self,
        tmp_path: Path,
        mock_expired_credentials: MagicMock,
        mock_credentials: MagicMock,
    ) -> None:
        mock_expired_credentials.refresh.side_effect = RefreshError("revoked")
        token_path = tmp_path / "token.json"

        with (
            patch(
                "chrono_ai.stores.auth._read_token",
                return_value=mock_expired_credentials,
            ),
            patch(
                "chrono_ai.stores.auth._consent", return_value=mock_credentials
            ) as mock_consent,
        ):
            result = get_google_credentials(tmp_path / "credentials.json", token_path)

        mock_consent.assert_called_once_with(tmp_path / "credentials.json")
        assert result is mock_credentials
        assert token_path.read_text() == '{"token": "fake"}'

    def test_expired_without_refresh_token(
        self,
        tmp_path: Path,
        mock_expired_credentials: MagicMock,
        mock_credentials: MagicMock,
    ) -> None:
        mock_expired_credentials.refresh_token = None

        with (
            patch(
                "chrono_ai.stores.auth._read_token",
                return_value=mock_expired_credentials,
            ),
            patch(
                "chrono_ai.stores.auth._consent", return_value=mock_credentials
            ) as mock_consent,
        ):
            result = get_google_credentials(
                tmp_path / "credentials.json", tmp_path / "token.json"
            )

        mock_expired_credentials.refresh.assert_not_called()
        mock_consent.assert_called_once()
        assert result is mock_credentials

    def test_no_token_launches_consent_flow(
        self,
        tmp_path: Path,
        tmp_credentials_file: Path,
        mock_credentials: MagicMock,
    ) -> None:
        token_path = tmp_path / "nested" / "token.json"
        flow = MagicMock()
        flow.run_local_server.return_value = mock_credentials

        with patch(
            "chrono_ai.stores.auth.InstalledAppFlow.from_client_secrets_file",
            return_value=flow,
        ) as mock_from_file:
            result = get_google_credentials(tmp_credentials_file, token_path)

        mock_from_file.assert_called_once_with(str(tmp_credentials_file), scopes=SCOPES)
        flow.run_local_server.assert_called_once_with(port=0)
        assert result is mock_credentials
        assert token_path.read_text() == '{"token": "fake"}'

    @pytest.mark.parametrize("content", ["not json", "[1, 2]", '{"token": "x"}'])
    def test_corrupt_token_file_ignored(
        self, tmp_path: Path, mock_credentials: MagicMock, content: str
    ) -> None:
        token_path = tmp_path / "token.json"
        token_path.write_text(content)

        with patch(
            "chrono_ai.stores.auth._consent", return_value=mock_credentials
        ) as mock_consent:
            result = get_google_credentials(tmp_path / "credentials.json", token_path)

        mock_consent.assert_called_once()
        assert result is mock_credentials

    def test_missing_client_secrets_raises(self, tmp_path: Path) -> None:
        with pytest.raises(StoreAuthError, match="client secrets file not found"):
            get_google_credentials(tmp_path / "missing.json", tmp_path / "token.json")

    def test_reads_authorized_user_file(self, tmp_path: Path) -> None:
        token_path = tmp_path / "token.json"
        token_path.write_text(
            json.dumps(
                {
                    "token": "stale-access-token",
                    "expiry": "2020-01-01T00:00:00Z",
                    "refresh_token": "refresh-me",
                    "client_id": "client",
                    "client_secret": "secret",
                }
            )
        )
        # The stored access token has expired.
        with patch.object(Credentials, "refresh") as mock_refresh:
            result = get_google_credentials(tmp_path / "credentials.json", token_path)

        mock_refresh.assert_called_once()
        assert isinstance(result, Credentials)
        assert result.refresh_token == "refresh-me"

    def test_scopes_cover_calendar_and_tasks(self) -> None:
        assert "https://www.googleapis.com/auth/calendar.events" in SCOPES
        assert "https://www.googleapis.com/auth/tasks" in SCOPES


class TestBuildStores:
    """Service construction."""

    def test_build_stores(self, mock_credentials: MagicMock) -> None:
        with patch("chrono_ai.stores.auth.build") as mock_build:
            calendar, tasks = build_stores(mock_credentials, timezone_name="Europe/Paris")

        assert isinstance(calendar, GoogleCalendarStore)
        assert isinstance(tasks, GoogleTaskStore)
        built = [c.args[:2] for c in mock_build.call_args_list]
        assert built == [("calendar", "v3"), ("tasks", "v1")]
