"""Data models for chrono-ai."""

from __future__ import annotations

from chrono_ai.models.provider import (
    ChatCompletionEnvelope,
    ChatMessage,
    ExtractionRequest,
)
from chrono_ai.models.schedule import (
    DecodeFailure,
    ExtractionResult,
    FailureReason,
    ItemKind,
    ScheduleItem,
)

__all__ = [
    "ChatCompletionEnvelope",
    "ChatMessage",
    "DecodeFailure",
    "ExtractionRequest",
    "ExtractionResult",
    "FailureReason",
    "ItemKind",
    "ScheduleItem",
]
