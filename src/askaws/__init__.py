"""
askaws: a terminal chat front-end for an AWS question-answering service.

Each module hides one design decision: the client core hides the wire format
and session state, the ui module hides rendering, the cli module hides
configuration lookup.
"""

__version__ = "0.1.0"

from .client import (
    ChatEndpoint,
    ChatEndpointError,
    ChatSession,
    CopyOutcome,
    Message,
    Role,
    SubmitOutcome,
    create_chat_session,
)

__all__ = [
    "ChatEndpoint",
    "ChatEndpointError",
    "ChatSession",
    "CopyOutcome",
    "Message",
    "Role",
    "SubmitOutcome",
    "create_chat_session",
]
