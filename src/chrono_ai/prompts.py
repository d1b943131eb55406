"""Request builder for the schedule-extraction call.

The system prompt is a constant: it never contains any part of the user's
input, so instructions and data stay in separate messages.
"""

from __future__ import annotations

from chrono_ai.models.provider import ChatMessage, ExtractionRequest

DEFAULT_MODEL = "gpt-3.5-turbo"
DEFAULT_TEMPERATURE = 0.2

SYSTEM_PROMPT = """\
Parse the user's schedule description into structured events and tasks.
For each item, determine if it's an event (with start/end time) or a task
(with optional due date).

Write every date as an ISO 8601 date and time with a UTC offset, for example
"2025-05-14T10:00:00Z" or "2025-05-14T10:00:00-07:00".

Respond in JSON format like this:
{
  "items": [
    {
      "type": "event",
      "title": "Meeting with John",
      "startDate": "2025-05-14T10:00:00Z",
      "endDate": "2025-05-14T11:00:00Z",
      "notes": "Discuss project timeline"
    },
    {
      "type": "task",
      "title": "Buy groceries",
      "dueDate": "2025-05-14T18:00:00Z",
      "notes": "Milk, eggs, bread"
    }
  ]
}
"""


def build_system_prompt() -> str:
    """Return the fixed system instructions."""
    return SYSTEM_PROMPT


def build_request(
    input_text: str,
    model: str = DEFAULT_MODEL,
    temperature: float = DEFAULT_TEMPERATURE,
) -> ExtractionRequest:
    """Build the provider request for *input_text*.

    The request carries exactly two messages: the fixed system prompt,
    then *input_text* verbatim as the user message.  Empty input is not
    rejected here; callers validate input before building a request.

    Args:
        input_text: The user's free-form schedule description.
        model: Provider model identifier.
        temperature: Sampling temperature.  Kept low so the output shape
            stays close to the worked example.

    Returns:
        An :class:`ExtractionRequest` ready for
        :meth:`~chrono_ai.llm.ExtractionClient.send`.
    """
    return ExtractionRequest(
        model=model,
        messages=(
            ChatMessage(role="system", content=SYSTEM_PROMPT),
            ChatMessage(role="user", content=input_text),
        ),
        temperature=temperature,
    )
