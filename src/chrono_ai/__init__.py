"""chrono-ai: natural-language schedule extraction.

Turns a free-form description of someone's schedule into validated
calendar events and tasks via a chat-completion provider.
"""

from __future__ import annotations

from chrono_ai.decoder import decode_item, parse_date
from chrono_ai.exceptions import (
    ClientError,
    EmptyResponseError,
    ExtractError,
    InvalidJSONError,
    MalformedEnvelopeError,
    MissingItemsFieldError,
    NetworkError,
    NoJSONFoundError,
    ParseError,
    PipelineError,
    ProviderError,
)
from chrono_ai.extractor import extract_json
from chrono_ai.llm import ExtractionClient
from chrono_ai.models.provider import ExtractionRequest
from chrono_ai.models.schedule import (
    DecodeFailure,
    ExtractionResult,
    FailureReason,
    ItemKind,
    ScheduleItem,
)
from chrono_ai.parser import parse_response
from chrono_ai.pipeline import aextract_schedule, extract_schedule
from chrono_ai.prompts import build_request

__version__ = "0.1.0"

__all__ = [
    "ClientError",
    "DecodeFailure",
    "EmptyResponseError",
    "ExtractError",
    "ExtractionClient",
    "ExtractionRequest",
    "ExtractionResult",
    "FailureReason",
    "InvalidJSONError",
    "ItemKind",
    "MalformedEnvelopeError",
    "MissingItemsFieldError",
    "NetworkError",
    "NoJSONFoundError",
    "ParseError",
    "PipelineError",
    "ProviderError",
    "ScheduleItem",
    "aextract_schedule",
    "build_request",
    "decode_item",
    "extract_json",
    "extract_schedule",
    "parse_date",
    "parse_response",
]
