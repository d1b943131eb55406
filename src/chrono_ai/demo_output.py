"""Console output for the chrono-ai CLI.

Renders an :class:`~chrono_ai.models.schedule.ExtractionResult` and a
:class:`~chrono_ai.sync.DispatchResult` as plain text.  The ``format_*``
functions return strings; the ``print_*`` wrappers write them to stdout.
"""

from __future__ import annotations

import sys
from datetime import datetime

from chrono_ai.models.schedule import ExtractionResult, ScheduleItem
from chrono_ai.sync import DispatchResult

_BANNER_WIDTH = 60
_SEPARATOR = "=" * _BANNER_WIDTH


def format_extraction_result(result: ExtractionResult) -> str:
    """Render the decoded items and decode failures.

    Args:
        result: The pipeline output to format.

    Returns:
        A multi-line string ready for console display.
    """
    lines: list[str] = [_SEPARATOR, "  CHRONO.AI SCHEDULE", _SEPARATOR, ""]

    if not result.items:
        lines.append("  No events or tasks found.")
    else:
        lines.append(
            f"  Found {len(result.events)} event(s) and {len(result.tasks)} task(s)"
        )
        for idx, item in enumerate(result.items, start=1):
            lines.append("")
            _append_item(lines, idx, item)

    if result.failures:
        lines.append("")
        lines.append(f"  Could not read {len(result.failures)} item(s):")
        for failure in result.failures:
            lines.append(f"    - {failure.message}")

    lines.append(_SEPARATOR)
    return "\n".join(lines)


def format_dispatch_result(result: DispatchResult) -> str:
    """Render the outcome of writing items to the stores."""
    lines = [f"Added {result.total_created} items to your calendar/tasks!"]
    lines.append(
        f"  Events: {result.events_created}  Tasks: {result.tasks_created}"
    )
    for title in result.skipped:
        lines.append(f"  [SKIP] {title} (no start or end time)")
    for failure in result.failures:
        lines.append(f"  [FAIL] {failure['item']}: {failure['error']}")
    return "\n".join(lines)


def print_extraction_result(result: ExtractionResult) -> None:
    """Format and print an :class:`ExtractionResult` to stdout."""
    sys.stdout.write(format_extraction_result(result) + "\n")


def print_dispatch_result(result: DispatchResult) -> None:
    """Format and print a :class:`DispatchResult` to stdout."""
    sys.stdout.write(format_dispatch_result(result) + "\n")


# ---------------------------------------------------------------------------
# Internal formatters
# ---------------------------------------------------------------------------


def _append_item(lines: list[str], idx: int, item: ScheduleItem) -> None:
    label = "Event" if item.is_event else "Task"
    lines.append(f"  {label} {idx}: {item.title}")

    if item.is_event:
        lines.append(f"    When: {_format_range(item.start_date, item.end_date)}")
    else:
        lines.append(f"    Due: {_format_datetime(item.due_date)}")

    if item.notes:
        lines.append(f"    Notes: {item.notes}")


def _format_range(start: datetime | None, end: datetime | None) -> str:
    if start is None or end is None:
        return f"{_format_datetime(start)} - {_format_datetime(end)} (incomplete)"
    if start.date() == end.date():
        return f"{start:%a %b %d, %Y %H:%M} - {end:%H:%M %Z}".rstrip()
    return f"{_format_datetime(start)} - {_format_datetime(end)}"


def _format_datetime(value: datetime | None) -> str:
    if value is None:
        return "unspecified"
    return f"{value:%a %b %d, %Y %H:%M %Z}".rstrip()
