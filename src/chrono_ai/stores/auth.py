"""Google OAuth for the calendar and task stores.

Credentials come from the first source that yields a usable token:

1. the user token cached at ``token_path``;
2. that token refreshed, when it has expired but carries a refresh token;
3. the installed-app consent flow, run against the OAuth client secrets
   downloaded from Google Cloud Console.

A token obtained from step 2 or 3 is written back to ``token_path``.

Usage::

    creds = get_google_credentials("credentials.json", "token.json")
    calendar, tasks = build_stores(creds, timezone_name="America/Vancouver")
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from google.auth.exceptions import RefreshError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from googleapiclient.discovery import build

from chrono_ai.stores.exceptions import StoreAuthError
from chrono_ai.stores.google import GoogleCalendarStore, GoogleTaskStore

logger = logging.getLogger(__name__)

SCOPES: list[str] = [
    "https://www.googleapis.com/auth/calendar.events",
    "https://www.googleapis.com/auth/tasks",
]
"""Scopes needed to create Calendar events and Tasks."""


def get_google_credentials(
    credentials_path: Path | str,
    token_path: Path | str,
) -> Credentials:
    """Return credentials that can write to Google Calendar and Tasks.

    Args:
        credentials_path: OAuth client secrets file.  Only read when the
            consent flow has to run.
        token_path: Cached user token.  Parent directories are created
            when the token is saved.

    Returns:
        Valid credentials carrying :data:`SCOPES`.

    Raises:
        StoreAuthError: If consent is needed and *credentials_path* does
            not exist.
    """
    token_path = Path(token_path)

    cached = _read_token(token_path)
    if cached is not None and cached.valid:
        logger.debug("Using cached Google token from %s", token_path)
        return cached

    creds = _refreshed(cached) if cached is not None else None
    if creds is None:
        creds = _consent(Path(credentials_path))

    _write_token(creds, token_path)
    return creds


def build_stores(
    credentials: Credentials,
    timezone_name: str = "UTC",
) -> tuple[GoogleCalendarStore, GoogleTaskStore]:
    """Build the calendar and task stores for *credentials*.

    Args:
        credentials: Valid OAuth credentials from
            :func:`get_google_credentials`.
        timezone_name: IANA timezone recorded on created events.

    Returns:
        A ``(calendar_store, task_store)`` pair.
    """
    calendar_service = build("calendar", "v3", credentials=credentials)
    tasks_service = build("tasks", "v1", credentials=credentials)
    return (
        GoogleCalendarStore(calendar_service, timezone_name=timezone_name),
        GoogleTaskStore(tasks_service),
    )


# ---------------------------------------------------------------------------
# Token sources
# ---------------------------------------------------------------------------


def _read_token(token_path: Path) -> Credentials | None:
    """Load the cached token, or ``None`` if it is absent or unusable."""
    try:
        info = json.loads(token_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return None
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable token file %s: %s", token_path, exc)
        return None

    if not isinstance(info, dict):
        logger.warning("Ignoring token file %s: not a JSON object", token_path)
        return None

    try:
        return Credentials.from_authorized_user_info(info, SCOPES)
    except ValueError as exc:
        logger.warning("Ignoring incomplete token file %s: %s", token_path, exc)
        return None


def _refreshed(creds: Credentials) -> Credentials | None:
    """Refresh an expired token in place; ``None`` if that is not possible."""
    if not (creds.expired and creds.refresh_token):
        return None
    try:
        creds.refresh(Request())
    except RefreshError as exc:
        logger.warning("Google token refresh rejected: %s", exc)
        return None
    logger.info("Refreshed expired Google token")
    return creds


def _consent(credentials_path: Path) -> Credentials:
    """Run the installed-app flow on a local loopback port."""
    if not credentials_path.exists():
        raise StoreAuthError(
            f"OAuth client secrets file not found: {credentials_path}"
        )

    flow = InstalledAppFlow.from_client_secrets_file(
        str(credentials_path), scopes=SCOPES
    )
    logger.info("Opening browser for Google consent")
    return flow.run_local_server(port=0)


def _write_token(creds: Credentials, token_path: Path) -> None:
    token_path.parent.mkdir(parents=True, exist_ok=True)
    token_path.write_text(creds.to_json(), encoding="utf-8")
    logger.debug("Saved Google token to %s", token_path)
