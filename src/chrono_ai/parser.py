"""Parse an LLM completion into a batch of schedule items.

Composes :func:`~chrono_ai.extractor.extract_json` and
:func:`~chrono_ai.decoder.decode_item`:

1. Recover the JSON candidate from the completion text.
2. Parse it as JSON.
3. Read the top-level ``items`` list.
4. Decode each element independently, collecting per-item failures.

Steps 1-3 abort the batch with a :class:`~chrono_ai.exceptions.ParseError`.
Step 4 never aborts: an all-failed batch is returned as an
:class:`ExtractionResult` with no items and the caller decides what that
means.
"""

from __future__ import annotations

import json
import logging

from chrono_ai.decoder import decode_item
from chrono_ai.exceptions import (
    InvalidJSONError,
    ItemDecodeError,
    MissingItemsFieldError,
)
from chrono_ai.extractor import extract_json
from chrono_ai.models.schedule import ExtractionResult

logger = logging.getLogger(__name__)


def parse_response(raw: str) -> ExtractionResult:
    """Parse a raw completion into decoded items and decode failures.

    Args:
        raw: The completion text returned by the provider.

    Returns:
        An :class:`ExtractionResult` whose ``items`` and ``failures`` keep
        the order of the source ``items`` array.

    Raises:
        NoJSONFoundError: If *raw* contains no ``{ ... }`` span.
        InvalidJSONError: If the span is not valid JSON.
        MissingItemsFieldError: If the JSON is not an object with an
            ``items`` list.
    """
    candidate = extract_json(raw)

    try:
        data = json.loads(candidate)
    except (json.JSONDecodeError, RecursionError) as exc:
        raise InvalidJSONError(
            f"Invalid JSON: {exc}", raw_response=candidate
        ) from exc

    if not isinstance(data, dict) or not isinstance(data.get("items"), list):
        raise MissingItemsFieldError(
            "Completion JSON has no 'items' list", raw_response=candidate
        )

    result = ExtractionResult()
    for index, element in enumerate(data["items"]):
        try:
            result.items.append(decode_item(element, index))
        except ItemDecodeError as exc:
            logger.warning("Skipping item: %s", exc.failure.message)
            result.failures.append(exc.failure)

    logger.info(
        "Parsed %d item(s), %d decode failure(s)",
        len(result.items),
        len(result.failures),
    )
    return result
