"""Custom exceptions for the chrono-ai extraction pipeline.

Every failure the pipeline can surface is a :class:`PipelineError`, so a
caller can handle the whole pipeline with a single ``except`` clause while
still being able to inspect the precise cause.

Exception hierarchy::

    PipelineError
    +-- ClientError               (provider exchange failed)
    |   +-- NetworkError
    |   +-- ProviderError
    |   +-- EmptyResponseError
    |   +-- MalformedEnvelopeError
    +-- ExtractError              (no JSON object in the completion)
    |   +-- NoJSONFoundError
    +-- ParseError                (batch-level structural failure)
    |   +-- NoJSONFoundError
    |   +-- InvalidJSONError
    |   +-- MissingItemsFieldError
    +-- ItemDecodeError           (item-level, collected by the parser)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chrono_ai.models.schedule import DecodeFailure


class PipelineError(Exception):
    """Base class for all schedule-extraction failures."""


# ---------------------------------------------------------------------------
# Provider exchange
# ---------------------------------------------------------------------------


class ClientError(PipelineError):
    """Raised when the completion provider exchange does not yield text.

    None of these are retried by the client; retry policy belongs to the
    caller.
    """


class NetworkError(ClientError):
    """Raised when the request could not be delivered or answered.

    The underlying ``httpx`` exception is chained as ``__cause__``.
    """


class ProviderError(ClientError):
    """Raised when the provider reports an error in the response body.

    Attributes:
        message: The provider's error message.
        status_code: HTTP status code of the response.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class EmptyResponseError(ClientError):
    """Raised when the provider answers successfully with no body."""

    def __init__(self, message: str = "No data received from provider") -> None:
        super().__init__(message)


class MalformedEnvelopeError(ClientError):
    """Raised when the response body is not a chat-completion envelope.

    Attributes:
        raw_response: The response body that failed to parse.
    """

    def __init__(self, message: str, raw_response: str = "") -> None:
        super().__init__(message)
        self.raw_response = raw_response


# ---------------------------------------------------------------------------
# Completion parsing
# ---------------------------------------------------------------------------


class ExtractError(PipelineError):
    """Raised when no JSON candidate can be recovered from a completion."""


class ParseError(PipelineError):
    """Raised when a completion cannot be turned into a batch of items.

    Aborts the whole batch.  Item-level problems are reported as
    :class:`~chrono_ai.models.schedule.DecodeFailure` records instead.

    Attributes:
        raw_response: The completion text (or candidate JSON) that failed.
    """

    def __init__(self, message: str, raw_response: str = "") -> None:
        super().__init__(message)
        self.raw_response = raw_response


class NoJSONFoundError(ExtractError, ParseError):
    """Raised when a completion contains no ``{ ... }`` span.

    This is both an :class:`ExtractError` (raised by the extractor) and a
    :class:`ParseError` (propagated unchanged by the response parser).
    """

    def __init__(self, raw_response: str = "") -> None:
        super().__init__("No JSON object found in completion", raw_response)


class InvalidJSONError(ParseError):
    """Raised when the extracted candidate is not valid JSON."""


class MissingItemsFieldError(ParseError):
    """Raised when the JSON has no top-level ``items`` list."""


class ItemDecodeError(PipelineError):
    """Raised when a single item cannot be decoded.

    The response parser catches this and records :attr:`failure`, so one
    bad item never discards the rest of the batch.

    Attributes:
        failure: Structured description of what went wrong.
    """

    def __init__(self, failure: DecodeFailure) -> None:
        super().__init__(failure.message)
        self.failure = failure
