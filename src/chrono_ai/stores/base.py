"""Collaborator interfaces for persisting schedule items.

The extraction pipeline never writes anywhere itself.  Callers hand its
output to a :class:`CalendarStore` (events) and a :class:`TaskStore`
(tasks), passed explicitly per call.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class CalendarStore(Protocol):
    """Destination for schedulable events."""

    def create_event(
        self,
        title: str,
        start_date: datetime,
        end_date: datetime,
        notes: str | None = None,
    ) -> str:
        """Create an event and return its store identifier."""
        ...


@runtime_checkable
class TaskStore(Protocol):
    """Destination for standalone tasks."""

    def create_task(
        self,
        title: str,
        due_date: datetime | None = None,
        notes: str | None = None,
    ) -> str:
        """Create a task and return its store identifier."""
        ...
