"""Data models for the chat client.

These models define the conversation entries, the wire format of the chat
endpoint and the explicit outcomes of session operations.
"""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Role(str, Enum):
    """Author of a conversation message."""

    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """A single entry in the conversation.

    Immutable once created. Its identity is its position in the conversation.
    """

    model_config = ConfigDict(frozen=True)

    role: Role = Field(description="Who wrote the message: 'user' or 'assistant'")
    text: str = Field(description="Message text as displayed")
    timestamp: datetime = Field(default_factory=datetime.now)


class ChatRequest(BaseModel):
    """Request body sent to the chat endpoint."""

    message: str = Field(description="The user's question")


class ChatReply(BaseModel):
    """Response body returned by the chat endpoint.

    `reply` is optional; unknown keys are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    reply: str | None = Field(default=None, description="Assistant reply text")

    @field_validator("reply", mode="before")
    @classmethod
    def coerce_scalar_reply(cls, v: Any) -> str | None:
        """Render numeric replies as text; other non-string values count as missing."""
        if isinstance(v, str):
            return v
        if isinstance(v, (int, float)) and not isinstance(v, bool) and v:
            return str(v)
        return None


class SubmitOutcome(str, Enum):
    """Result of a submit call."""

    IGNORED_EMPTY = "ignored_empty"  # Blank input, nothing changed
    IGNORED_BUSY = "ignored_busy"    # A request was already in flight
    REPLIED = "replied"              # Endpoint returned a reply
    NO_REPLY = "no_reply"            # Endpoint succeeded without a reply
    FAILED = "failed"                # Transport failure or non-2xx status


class CopyOutcome(str, Enum):
    """Result of copying the last reply."""

    COPIED = "copied"
    NO_REPLY = "no_reply"
    CLIPBOARD_FAILED = "clipboard_failed"
