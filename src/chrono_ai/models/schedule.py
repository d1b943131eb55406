"""Domain models for extracted schedule items.

Defines the validated output of the extraction pipeline:

- :class:`ItemKind` -- discriminator between calendar events and tasks.
- :class:`ScheduleItem` -- one immutable, validated schedule item.
- :class:`DecodeFailure` -- why a single item in a batch could not be decoded.
- :class:`ExtractionResult` -- decoded items plus per-item failures.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# ---------------------------------------------------------------------------
# ScheduleItem
# ---------------------------------------------------------------------------


class ItemKind(str, Enum):
    """Kind of schedule item."""

    EVENT = "event"
    TASK = "task"


class ScheduleItem(BaseModel):
    """A single validated schedule item.

    Event-only dates (``start_date``, ``end_date``) and the task-only
    ``due_date`` are rejected on the wrong kind, so a constructed item is
    always internally consistent.  An event missing either date is still a
    valid item but is not schedulable.

    Attributes:
        id: Unique identifier generated at construction time.
        title: Non-empty item title.
        kind: :class:`ItemKind` discriminator.
        start_date: Timezone-aware event start, or ``None``.
        end_date: Timezone-aware event end, or ``None``.
        due_date: Timezone-aware task due date, or ``None``.
        notes: Free-text notes, or ``None``.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    title: str = Field(min_length=1)
    kind: ItemKind
    start_date: datetime | None = None
    end_date: datetime | None = None
    due_date: datetime | None = None
    notes: str | None = None

    @field_validator("start_date", "end_date", "due_date")
    @classmethod
    def _require_timezone(cls, value: datetime | None) -> datetime | None:
        """Reject naive datetimes."""
        if value is not None and value.utcoffset() is None:
            raise ValueError("schedule dates must be timezone-aware")
        return value

    @model_validator(mode="after")
    def _check_dates_match_kind(self) -> ScheduleItem:
        if self.kind is ItemKind.EVENT and self.due_date is not None:
            raise ValueError("events cannot carry a due_date")
        if self.kind is ItemKind.TASK and (
            self.start_date is not None or self.end_date is not None
        ):
            raise ValueError("tasks cannot carry start_date or end_date")
        return self

    @property
    def is_event(self) -> bool:
        """Whether this item belongs on the calendar."""
        return self.kind is ItemKind.EVENT

    @property
    def is_task(self) -> bool:
        """Whether this item belongs in the task list."""
        return self.kind is ItemKind.TASK

    @property
    def is_schedulable(self) -> bool:
        """Whether this is an event with both start and end dates."""
        return (
            self.is_event
            and self.start_date is not None
            and self.end_date is not None
        )


# ---------------------------------------------------------------------------
# DecodeFailure
# ---------------------------------------------------------------------------


class FailureReason(str, Enum):
    """Why an item could not be decoded."""

    MISSING_REQUIRED_FIELD = "missing_required_field"
    MALFORMED_ITEM = "malformed_item"


@dataclass(frozen=True)
class DecodeFailure:
    """A single item that could not be decoded.

    Attributes:
        index: Position of the item in the ``items`` array.
        reason: :class:`FailureReason` category.
        field: Name of the missing field for
            ``MISSING_REQUIRED_FIELD``, otherwise ``None``.
        message: Human-readable description.
    """

    index: int
    reason: FailureReason
    field: str | None = None
    message: str = ""

    @classmethod
    def missing_field(cls, index: int, field_name: str) -> DecodeFailure:
        return cls(
            index=index,
            reason=FailureReason.MISSING_REQUIRED_FIELD,
            field=field_name,
            message=f"Item {index}: missing required field {field_name!r}",
        )

    @classmethod
    def malformed(cls, index: int, detail: str) -> DecodeFailure:
        return cls(
            index=index,
            reason=FailureReason.MALFORMED_ITEM,
            message=f"Item {index}: {detail}",
        )


# ---------------------------------------------------------------------------
# ExtractionResult
# ---------------------------------------------------------------------------


@dataclass
class ExtractionResult:
    """Outcome of parsing one completion.

    Attributes:
        items: Successfully decoded items, in source order.
        failures: Items that could not be decoded, in source order.
    """

    items: list[ScheduleItem] = field(default_factory=list)
    failures: list[DecodeFailure] = field(default_factory=list)

    @property
    def events(self) -> list[ScheduleItem]:
        """Decoded items of kind ``EVENT``."""
        return [item for item in self.items if item.is_event]

    @property
    def tasks(self) -> list[ScheduleItem]:
        """Decoded items of kind ``TASK``."""
        return [item for item in self.items if item.is_task]

    @property
    def has_failures(self) -> bool:
        """Whether any item failed to decode."""
        return len(self.failures) > 0

    @property
    def all_failed(self) -> bool:
        """Whether the batch had items but none of them decoded."""
        return not self.items and self.has_failures
