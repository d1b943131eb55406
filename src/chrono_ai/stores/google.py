"""Google Calendar and Google Tasks stores.

:class:`GoogleCalendarStore` and :class:`GoogleTaskStore` implement the
:mod:`chrono_ai.stores.base` protocols on top of ``googleapiclient``
service resources.  Each call is a single API request; ``HttpError`` is
translated to :class:`~chrono_ai.stores.exceptions.StoreError` and not
retried.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from googleapiclient.errors import HttpError

from chrono_ai.stores.exceptions import translate_http_error

logger = logging.getLogger(__name__)

_PRIMARY_CALENDAR = "primary"
_DEFAULT_TASKLIST = "@default"


class GoogleCalendarStore:
    """Create and list events on a Google Calendar.

    Args:
        service: A ``calendar`` v3 service resource.
        timezone_name: IANA timezone recorded on created events.
        calendar_id: Target calendar (defaults to the primary calendar).
    """

    def __init__(
        self,
        service: Any,
        timezone_name: str = "UTC",
        calendar_id: str = _PRIMARY_CALENDAR,
    ) -> None:
        self._service = service
        self._timezone = timezone_name
        self._calendar_id = calendar_id

    def create_event(
        self,
        title: str,
        start_date: datetime,
        end_date: datetime,
        notes: str | None = None,
    ) -> str:
        """Insert an event and return its Google Calendar ID.

        Raises:
            StoreError: If the API call fails.
        """
        body: dict[str, Any] = {
            "summary": title,
            "start": {"dateTime": start_date.isoformat(), "timeZone": self._timezone},
            "end": {"dateTime": end_date.isoformat(), "timeZone": self._timezone},
        }
        if notes:
            body["description"] = notes

        try:
            result = (
                self._service.events()
                .insert(calendarId=self._calendar_id, body=body)
                .execute()
            )
        except HttpError as exc:
            logger.error("Failed to create event '%s': %s", title, exc)
            raise translate_http_error(exc) from exc

        event_id = result.get("id", "")
        logger.info("Created event '%s' (id=%s)", title, event_id)
        return event_id

    def list_events(self, time_min: datetime, time_max: datetime) -> list[dict]:
        """List events between *time_min* and *time_max*, following pagination.

        Both bounds must be timezone-aware.

        Raises:
            StoreError: If the API call fails.
        """
        events: list[dict] = []
        page_token: str | None = None

        try:
            while True:
                response = (
                    self._service.events()
                    .list(
                        calendarId=self._calendar_id,
                        timeMin=time_min.isoformat(),
                        timeMax=time_max.isoformat(),
                        singleEvents=True,
                        orderBy="startTime",
                        pageToken=page_token,
                    )
                    .execute()
                )
                events.extend(response.get("items", []))
                page_token = response.get("nextPageToken")
                if page_token is None:
                    break
        except HttpError as exc:
            raise translate_http_error(exc) from exc

        logger.info(
            "Listed %d event(s) between %s and %s",
            len(events),
            time_min.isoformat(),
            time_max.isoformat(),
        )
        return events


class GoogleTaskStore:
    """Create and list tasks in a Google Tasks list.

    Args:
        service: A ``tasks`` v1 service resource.
        tasklist: Target task list (defaults to the user's default list).
    """

    def __init__(self, service: Any, tasklist: str = _DEFAULT_TASKLIST) -> None:
        self._service = service
        self._tasklist = tasklist

    def create_task(
        self,
        title: str,
        due_date: datetime | None = None,
        notes: str | None = None,
    ) -> str:
        """Insert a task and return its Google Tasks ID.

        Google Tasks only keeps the date part of ``due``.

        Raises:
            StoreError: If the API call fails.
        """
        body: dict[str, Any] = {"title": title}
        if notes:
            body["notes"] = notes
        if due_date is not None:
            body["due"] = _format_rfc3339(due_date)

        try:
            result = (
                self._service.tasks()
                .insert(tasklist=self._tasklist, body=body)
                .execute()
            )
        except HttpError as exc:
            logger.error("Failed to create task '%s': %s", title, exc)
            raise translate_http_error(exc) from exc

        task_id = result.get("id", "")
        logger.info("Created task '%s' (id=%s)", title, task_id)
        return task_id

    def list_tasks(self, show_completed: bool = False) -> list[dict]:
        """List tasks in the task list, following pagination.

        Raises:
            StoreError: If the API call fails.
        """
        tasks: list[dict] = []
        page_token: str | None = None

        try:
            while True:
                response = (
                    self._service.tasks()
                    .list(
                        tasklist=self._tasklist,
                        showCompleted=show_completed,
                        pageToken=page_token,
                    )
                    .execute()
                )
                tasks.extend(response.get("items", []))
                page_token = response.get("nextPageToken")
                if page_token is None:
                    break
        except HttpError as exc:
            raise translate_http_error(exc) from exc

        logger.info("Listed %d task(s)", len(tasks))
        return tasks


def _format_rfc3339(value: datetime) -> str:
    """Format an aware datetime as an RFC 3339 UTC timestamp."""
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.000Z")
