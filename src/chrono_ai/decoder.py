"""Decode untyped JSON items into :class:`ScheduleItem` instances.

Each element of the completion's ``items`` array is decoded independently.
``title`` and ``type`` are required; every other field is best-effort:

- ``type == "event"`` decodes to :attr:`ItemKind.EVENT`.  Any other string,
  including ``"task"`` and unrecognised tags, decodes to
  :attr:`ItemKind.TASK`.  An unknown tag is never a decode failure.
- Date fields are parsed with :data:`DATE_FORMAT`.  A date that is missing,
  not a string, or does not match the format is left empty; the item still
  decodes.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime
from typing import Any

from chrono_ai.exceptions import ItemDecodeError
from chrono_ai.models.schedule import DecodeFailure, ItemKind, ScheduleItem

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"
"""Date, time and UTC offset, e.g. ``2025-05-14T10:00:00Z`` or ``...-07:00``."""

_DATE_PATTERN = re.compile(
    r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?:Z|[+-]\d{2}:?\d{2})"
)

_EVENT_TAG = "event"


def parse_date(value: Any) -> datetime | None:
    """Parse *value* with :data:`DATE_FORMAT`.

    Args:
        value: The raw JSON value of a date field.

    Returns:
        A timezone-aware ``datetime``, or ``None`` when *value* is not a
        string or does not match the format.  Fields must be zero-padded
        to their full width.
    """
    if not isinstance(value, str):
        return None
    text = value.strip()
    if _DATE_PATTERN.fullmatch(text) is None:
        logger.debug("Ignoring unparsable date %r", value)
        return None
    try:
        return datetime.strptime(text, DATE_FORMAT)
    except ValueError:
        logger.debug("Ignoring unparsable date %r", value)
        return None


def decode_item(value: Any, index: int) -> ScheduleItem:
    """Decode one element of the ``items`` array.

    Args:
        value: The decoded JSON element.
        index: Position of *value* in the ``items`` array, recorded on
            failure.

    Returns:
        A new :class:`ScheduleItem` with a freshly generated ``id``.

    Raises:
        ItemDecodeError: If *value* is not an object, or ``title`` or
            ``type`` is missing.  ``title`` must be a non-blank string
            and ``type`` must be a string.
    """
    if not isinstance(value, dict):
        raise ItemDecodeError(
            DecodeFailure.malformed(
                index, f"expected a JSON object, got {type(value).__name__}"
            )
        )

    title = value.get("title")
    if not isinstance(title, str) or not title.strip():
        raise ItemDecodeError(DecodeFailure.missing_field(index, "title"))

    type_tag = value.get("type")
    if not isinstance(type_tag, str):
        raise ItemDecodeError(DecodeFailure.missing_field(index, "type"))

    kind = ItemKind.EVENT if type_tag == _EVENT_TAG else ItemKind.TASK

    notes = value.get("notes")
    if not isinstance(notes, str):
        notes = None

    if kind is ItemKind.EVENT:
        return ScheduleItem(
            title=title,
            kind=kind,
            start_date=parse_date(value.get("startDate")),
            end_date=parse_date(value.get("endDate")),
            notes=notes,
        )

    return ScheduleItem(
        title=title,
        kind=kind,
        due_date=parse_date(value.get("dueDate")),
        notes=notes,
    )
