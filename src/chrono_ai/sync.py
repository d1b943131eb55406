"""Hand extracted schedule items to the calendar and task stores.

Provides :func:`dispatch_items`, which routes each
:class:`~chrono_ai.models.schedule.ScheduleItem` to the collaborator that
owns it:

- events with both ``start_date`` and ``end_date`` go to
  :meth:`CalendarStore.create_event`;
- events missing either date are skipped;
- tasks go to :meth:`TaskStore.create_task`.

Partial failures are handled gracefully -- a single failing store call does
not prevent the remaining items from being processed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from chrono_ai.models.schedule import ScheduleItem
from chrono_ai.stores.base import CalendarStore, TaskStore
from chrono_ai.stores.exceptions import StoreError

logger = logging.getLogger(__name__)


@dataclass
class DispatchResult:
    """Aggregated result of dispatching a batch of items.

    Attributes:
        events_created: Number of calendar events created.
        tasks_created: Number of tasks created.
        skipped: Titles of events skipped for missing dates.
        failures: Details of items whose store call failed.  Each dict has
            ``"item"``, ``"kind"`` and ``"error"`` keys.
    """

    events_created: int = 0
    tasks_created: int = 0
    skipped: list[str] = field(default_factory=list)
    failures: list[dict] = field(default_factory=list)

    @property
    def total_created(self) -> int:
        """Number of items written to either store."""
        return self.events_created + self.tasks_created

    @property
    def has_failures(self) -> bool:
        """Whether any store call failed."""
        return len(self.failures) > 0


def dispatch_items(
    items: list[ScheduleItem],
    calendar: CalendarStore,
    tasks: TaskStore,
) -> DispatchResult:
    """Create an event or task for each item.

    Args:
        items: Decoded schedule items, typically
            :attr:`ExtractionResult.items`.
        calendar: Destination for events.
        tasks: Destination for tasks.

    Returns:
        A :class:`DispatchResult` with counts, skipped titles and failures.
    """
    result = DispatchResult()

    logger.info("Dispatching %d item(s)", len(items))

    for item in items:
        try:
            _dispatch_item(item, calendar, tasks, result)
        except StoreError as exc:
            logger.error(
                "Failed to create %s '%s': %s", item.kind.value, item.title, exc
            )
            result.failures.append(
                {"item": item.title, "kind": item.kind.value, "error": str(exc)}
            )

    logger.info(
        "Dispatch complete: %d event(s), %d task(s), %d skipped, %d failure(s)",
        result.events_created,
        result.tasks_created,
        len(result.skipped),
        len(result.failures),
    )
    return result


def _dispatch_item(
    item: ScheduleItem,
    calendar: CalendarStore,
    tasks: TaskStore,
    result: DispatchResult,
) -> None:
    """Dispatch one item, updating *result* in place."""
    if item.is_task:
        tasks.create_task(item.title, due_date=item.due_date, notes=item.notes)
        result.tasks_created += 1
        return

    if not item.is_schedulable:
        logger.info("Event '%s' skipped (missing start or end date)", item.title)
        result.skipped.append(item.title)
        return

    calendar.create_event(item.title, item.start_date, item.end_date, notes=item.notes)
    result.events_created += 1
