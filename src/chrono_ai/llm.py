"""Chat-completion client for schedule extraction.

Sends an :class:`~chrono_ai.models.provider.ExtractionRequest` to an
OpenAI-compatible ``/chat/completions`` endpoint and returns the raw
completion text.  Parsing that text into schedule items is the job of
:mod:`chrono_ai.parser`.

Every call performs exactly one HTTP exchange.  Nothing is retried or
cached, and no connection is kept between calls.  Timeouts are supplied by
the caller; ``timeout=None`` waits indefinitely.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx
from pydantic import ValidationError

from chrono_ai.exceptions import (
    EmptyResponseError,
    MalformedEnvelopeError,
    NetworkError,
    ProviderError,
)
from chrono_ai.models.provider import ChatCompletionEnvelope, ExtractionRequest

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://api.openai.com/v1/chat/completions"


class ExtractionClient:
    """Client for a chat-completion provider.

    Args:
        api_key: Bearer token for the provider.
        endpoint: Full URL of the chat-completions endpoint.
        transport: Optional ``httpx`` transport.  Pass an
            :class:`httpx.MockTransport` here in tests.
    """

    def __init__(
        self,
        api_key: str,
        endpoint: str = DEFAULT_ENDPOINT,
        transport: httpx.BaseTransport | httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._endpoint = endpoint
        self._transport = transport
        self._headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def send(
        self,
        request: ExtractionRequest,
        *,
        timeout: float | None = None,
    ) -> str:
        """Send *request* and return the completion text.

        Args:
            request: The request built by
                :func:`~chrono_ai.prompts.build_request`.
            timeout: Overall HTTP timeout in seconds, or ``None`` for no
                timeout.

        Returns:
            ``choices[0].message.content`` from the provider response.

        Raises:
            NetworkError: On connection failures, timeouts and other
                transport-level request errors.
            ProviderError: If the body carries ``error.message`` (whatever
                the status code) or the status is not 2xx.
            EmptyResponseError: If a successful response has no body.
            MalformedEnvelopeError: If the body cannot be decoded or is not
                a chat-completion envelope.
        """
        payload = request.to_payload()
        logger.debug(
            "Sending extraction request to %s (model=%s)", self._endpoint, request.model
        )

        try:
            with httpx.Client(transport=self._transport, timeout=timeout) as http:
                response = http.post(
                    self._endpoint, headers=self._headers, json=payload
                )
        except httpx.RequestError as exc:
            raise _client_error(exc) from exc

        return self._read_completion(response)

    async def asend(
        self,
        request: ExtractionRequest,
        *,
        timeout: float | None = None,
    ) -> str:
        """Asynchronous variant of :meth:`send`.

        Cancelling the awaiting task cancels the in-flight request.
        """
        payload = request.to_payload()
        logger.debug(
            "Sending extraction request to %s (model=%s)", self._endpoint, request.model
        )

        try:
            async with httpx.AsyncClient(
                transport=self._transport, timeout=timeout
            ) as http:
                response = await http.post(
                    self._endpoint, headers=self._headers, json=payload
                )
        except httpx.RequestError as exc:
            raise _client_error(exc) from exc

        return self._read_completion(response)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _read_completion(self, response: httpx.Response) -> str:
        """Validate the provider response and return the completion text."""
        status = response.status_code
        body = response.text
        logger.debug("HTTP status code: %d", status)
        logger.debug("Provider response: %s", body)

        if not body.strip():
            if response.is_success:
                raise EmptyResponseError()
            raise ProviderError(f"HTTP {status}", status_code=status)

        try:
            data: Any = json.loads(body)
        except (json.JSONDecodeError, RecursionError):
            data = None

        error_message = _provider_error_message(data)
        if error_message is not None:
            logger.error("Provider error (HTTP %d): %s", status, error_message)
            raise ProviderError(error_message, status_code=status)

        if not response.is_success:
            logger.error("Provider returned HTTP %d without an error message", status)
            raise ProviderError(f"HTTP {status}", status_code=status)

        if data is None:
            raise MalformedEnvelopeError("Response body is not JSON", raw_response=body)

        try:
            envelope = ChatCompletionEnvelope.model_validate(data)
        except ValidationError as exc:
            raise MalformedEnvelopeError(
                f"Unexpected response envelope: {exc}", raw_response=body
            ) from exc

        return envelope.content


def _provider_error_message(data: Any) -> str | None:
    """Return ``data["error"]["message"]`` if present and a string."""
    if not isinstance(data, dict):
        return None
    error = data.get("error")
    if not isinstance(error, dict):
        return None
    message = error.get("message")
    return message if isinstance(message, str) else None


def _client_error(exc: httpx.RequestError) -> NetworkError | MalformedEnvelopeError:
    """Map an ``httpx`` request failure to the matching client error."""
    if isinstance(exc, httpx.DecodingError):
        logger.error("Could not decode provider response: %s", exc)
        return MalformedEnvelopeError(f"Undecodable response body: {exc}")
    logger.error("Network error calling provider: %s", exc)
    return NetworkError(f"Provider request failed: {exc}")
