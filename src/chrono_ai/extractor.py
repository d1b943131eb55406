"""Recover the JSON object from a noisy LLM completion.

Completions routinely wrap the requested JSON in prose, markdown fences,
or trailing commentary.  :func:`extract_json` returns the span from the
first ``{`` through the last ``}``.

This is a first/last-brace heuristic, not a balanced-bracket scanner.  A
completion with two separate JSON objects, or with stray braces in the
surrounding prose, yields a span that is not valid JSON; the response
parser rejects that span with
:class:`~chrono_ai.exceptions.InvalidJSONError`.
"""

from __future__ import annotations

from chrono_ai.exceptions import NoJSONFoundError


def extract_json(raw: str) -> str:
    """Return the candidate JSON object embedded in *raw*.

    Args:
        raw: The raw completion text.

    Returns:
        The substring from the first ``{`` to the last ``}``, inclusive.

    Raises:
        NoJSONFoundError: If *raw* has no ``{``, no ``}``, or its last
            ``}`` comes before its first ``{``.
    """
    start = raw.find("{")
    end = raw.rfind("}")

    if start == -1 or end == -1 or end < start:
        raise NoJSONFoundError(raw_response=raw)

    return raw[start : end + 1]
