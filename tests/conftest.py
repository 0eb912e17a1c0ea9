"""Pytest configuration and shared fixtures."""
import json
import os
from collections.abc import Callable

import httpx
import pytest

from askaws.client import ChatSession, Clipboard, create_chat_session

TEST_API_BASE = "http://chat.test"


class RecordingClipboard(Clipboard):
    """Clipboard that keeps everything written to it."""

    def __init__(self) -> None:
        self.copied: list[str] = []

    def copy(self, text: str) -> None:
        self.copied.append(text)


class BrokenClipboard(Clipboard):
    """Clipboard whose every write fails."""

    def copy(self, text: str) -> None:
        raise RuntimeError("no clipboard mechanism available")


def reply_handler(reply: str | None = "hello", status_code: int = 200) -> Callable:
    """Build a MockTransport handler answering every request the same way."""
    def handler(request: httpx.Request) -> httpx.Response:
        if reply is None:
            return httpx.Response(status_code)
        return httpx.Response(status_code, json={"reply": reply})
    return handler


def make_session(handler: Callable, **options) -> ChatSession:
    """Create a session whose HTTP traffic goes to `handler`."""
    return create_chat_session(
        TEST_API_BASE,
        transport=httpx.MockTransport(handler),
        **options
    )


def request_json(request: httpx.Request) -> dict:
    return json.loads(request.content)


@pytest.fixture(scope="session")
def live_api_base():
    """Return the live API base from the environment, if any."""
    return os.getenv("ASKAWS_API_BASE")


@pytest.fixture
def clipboard():
    return RecordingClipboard()


@pytest.fixture
async def session():
    """Session answering every question with 'hello'."""
    chat_session = make_session(reply_handler("hello"))
    yield chat_session
    await chat_session.close()
