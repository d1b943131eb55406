"""Pydantic models for the chat-completion provider wire format.

- :class:`ExtractionRequest` -- the request body sent to the provider.
- :class:`ChatCompletionEnvelope` -- the subset of the provider response
  the client reads.  Unknown fields are ignored.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class ChatMessage(BaseModel):
    """A single ``{role, content}`` chat message."""

    model_config = ConfigDict(frozen=True)

    role: Literal["system", "user", "assistant"]
    content: str


class ExtractionRequest(BaseModel):
    """Provider request for one extraction call.

    Attributes:
        model: Provider model identifier.
        messages: Ordered chat messages (system instructions, then user text).
        temperature: Sampling temperature.
    """

    model_config = ConfigDict(frozen=True)

    model: str
    messages: tuple[ChatMessage, ...]
    temperature: float = Field(ge=0.0, le=2.0)

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON-serialisable wire body."""
        return {
            "model": self.model,
            "messages": [m.model_dump() for m in self.messages],
            "temperature": self.temperature,
        }


# ---------------------------------------------------------------------------
# Response envelope
# ---------------------------------------------------------------------------


class CompletionMessage(BaseModel):
    role: str | None = None
    content: str


class CompletionChoice(BaseModel):
    index: int | None = None
    message: CompletionMessage


class ChatCompletionEnvelope(BaseModel):
    """Chat-completion response envelope.

    Only ``choices[0].message.content`` is consumed; at least one choice
    is required.
    """

    id: str | None = None
    model: str | None = None
    choices: list[CompletionChoice] = Field(min_length=1)

    @property
    def content(self) -> str:
        """Completion text of the first choice."""
        return self.choices[0].message.content
