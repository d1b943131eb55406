"""Calendar and task stores for chrono-ai."""

from __future__ import annotations

from chrono_ai.stores.auth import build_stores, get_google_credentials
from chrono_ai.stores.base import CalendarStore, TaskStore
from chrono_ai.stores.exceptions import StoreAuthError, StoreError, StoreNotFoundError
from chrono_ai.stores.google import GoogleCalendarStore, GoogleTaskStore

__all__ = [
    "CalendarStore",
    "GoogleCalendarStore",
    "GoogleTaskStore",
    "StoreAuthError",
    "StoreError",
    "StoreNotFoundError",
    "TaskStore",
    "build_stores",
    "get_google_credentials",
]
