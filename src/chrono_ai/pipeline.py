"""Pipeline entry point for schedule extraction.

:func:`extract_schedule` is the one operation the rest of the application
depends on.  It wires the request builder, the extraction client, and the
response parser together:

1. **Build** -- fixed system prompt plus the user's text.
2. **Send** -- exactly one provider call.
3. **Parse** -- recover the JSON, decode each item, collect failures.

Provider and structural errors propagate as
:class:`~chrono_ai.exceptions.PipelineError`.  Per-item problems do not:
they are returned in :attr:`ExtractionResult.failures` next to the items
that did decode.
"""

from __future__ import annotations

import logging

from chrono_ai.llm import ExtractionClient
from chrono_ai.models.schedule import ExtractionResult
from chrono_ai.parser import parse_response
from chrono_ai.prompts import DEFAULT_MODEL, DEFAULT_TEMPERATURE, build_request

logger = logging.getLogger(__name__)


def extract_schedule(
    input_text: str,
    client: ExtractionClient,
    *,
    model: str = DEFAULT_MODEL,
    temperature: float = DEFAULT_TEMPERATURE,
    timeout: float | None = None,
) -> ExtractionResult:
    """Extract schedule items from a free-form description.

    Args:
        input_text: The user's schedule description.  Callers should
            reject empty input before calling.
        client: The provider client to send the request with.
        model: Provider model identifier.
        temperature: Sampling temperature.
        timeout: HTTP timeout in seconds, or ``None`` for no timeout.

    Returns:
        An :class:`ExtractionResult` with the decoded items and any
        per-item decode failures.

    Raises:
        ClientError: If the provider call fails.
        ParseError: If the completion has no usable ``items`` array.
    """
    request = build_request(input_text, model=model, temperature=temperature)
    logger.debug("User prompt sent to provider:\n%s", input_text)

    completion = client.send(request, timeout=timeout)
    logger.debug("Raw completion:\n%s", completion)

    return _parse(completion)


async def aextract_schedule(
    input_text: str,
    client: ExtractionClient,
    *,
    model: str = DEFAULT_MODEL,
    temperature: float = DEFAULT_TEMPERATURE,
    timeout: float | None = None,
) -> ExtractionResult:
    """Asynchronous variant of :func:`extract_schedule`."""
    request = build_request(input_text, model=model, temperature=temperature)
    logger.debug("User prompt sent to provider:\n%s", input_text)

    completion = await client.asend(request, timeout=timeout)
    logger.debug("Raw completion:\n%s", completion)

    return _parse(completion)


def _parse(completion: str) -> ExtractionResult:
    result = parse_response(completion)
    for item in result.items:
        logger.info("Extracted %s: '%s'", item.kind.value, item.title)
    if result.all_failed:
        logger.warning("No items could be decoded from the completion")
    return result
