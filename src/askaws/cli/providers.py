"""Session factory functions for the CLI.

Centralizes reading configuration from the environment so the client core
only ever receives explicit values.
"""

import os

from ..client import DEFAULT_API_BASE, ChatSession, create_chat_session, normalize_api_base

API_BASE_ENV = "ASKAWS_API_BASE"


def get_api_base(override: str | None = None) -> str:
    """Resolve the API base URL.

    Args:
        override: Value from the command line; wins over the environment

    Returns:
        Normalized base URL

    Environment variables:
        ASKAWS_API_BASE: Base URL of the assistant backend
            (default: http://localhost:8081)
    """
    if override and override.strip():
        return normalize_api_base(override)
    return normalize_api_base(os.getenv(API_BASE_ENV, DEFAULT_API_BASE))


def get_session(api_base: str | None = None) -> ChatSession:
    """Create a chat session for the resolved API base URL."""
    return create_chat_session(get_api_base(api_base))
