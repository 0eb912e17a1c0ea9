"""Unit and property-based tests for the chat session."""
import asyncio

import httpx
import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from askaws.client import (
    NO_REPLY_TEXT,
    OFFLINE_TEXT,
    ChatSession,
    CopyOutcome,
    Message,
    Role,
    SubmitOutcome,
)
from conftest import (
    BrokenClipboard,
    RecordingClipboard,
    make_session,
    reply_handler,
    request_json,
)

blank_text = st.text(alphabet=" \t\r\n  ", max_size=20)
question_text = st.text(min_size=1, max_size=80).filter(lambda s: s.strip())


def snapshot(session: ChatSession) -> tuple:
    return (
        session.messages,
        session.input,
        session.loading,
        session.error,
        session.connected,
    )


class TestInitialState:
    """Tests for a fresh session."""

    async def test_defaults(self, session):
        assert session.messages == ()
        assert session.input == ""
        assert session.loading is False
        assert session.error == ""
        assert session.connected is True
        assert session.status == "ok"


class TestSubmitIgnored:
    """Tests for submits that must not change anything."""

    @pytest.mark.parametrize("text", ["", "   ", "\n\t "])
    async def test_blank_text_is_ignored(self, session, text: str):
        before = snapshot(session)
        assert await session.submit(text) == SubmitOutcome.IGNORED_EMPTY
        assert snapshot(session) == before

    async def test_blank_input_buffer_is_ignored(self, session):
        session.input = "    "
        assert await session.submit() == SubmitOutcome.IGNORED_EMPTY
        assert session.input == "    "
        assert session.messages == ()

    @given(blank_text)
    @settings(max_examples=25, deadline=None)
    def test_whitespace_never_sends(self, text: str):
        """Property test: whitespace-only text never reaches the endpoint."""
        calls: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(200, json={"reply": "x"})

        async def run() -> SubmitOutcome:
            async with make_session(handler) as chat_session:
                return await chat_session.submit(text)

        assert asyncio.run(run()) == SubmitOutcome.IGNORED_EMPTY
        assert calls == []

    async def test_submit_while_loading_is_rejected(self):
        """A second submit during an in-flight request changes nothing."""
        release = asyncio.Event()
        calls: list[str] = []

        async def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request_json(request)["message"])
            await release.wait()
            return httpx.Response(200, json={"reply": "first answer"})

        async with make_session(handler) as chat_session:
            first = asyncio.create_task(chat_session.submit("first"))
            while not calls:
                await asyncio.sleep(0)

            assert chat_session.loading is True
            assert chat_session.status == "busy"
            before = snapshot(chat_session)

            assert await chat_session.submit("second") == SubmitOutcome.IGNORED_BUSY
            assert snapshot(chat_session) == before

            release.set()
            assert await first == SubmitOutcome.REPLIED

        assert calls == ["first"]
        assert [m.text for m in chat_session.messages] == ["first", "first answer"]


class TestSubmitSuccess:
    """Tests for successful exchanges."""

    async def test_reply_is_appended(self, session):
        outcome = await session.submit("What is S3?")

        assert outcome == SubmitOutcome.REPLIED
        assert session.messages == (
            Message(role=Role.USER, text="What is S3?", timestamp=session.messages[0].timestamp),
            Message(role=Role.ASSISTANT, text="hello", timestamp=session.messages[1].timestamp),
        )
        assert session.loading is False
        assert session.error == ""
        assert session.connected is True

    async def test_uses_and_clears_input_buffer(self, session):
        session.input = "  Explain IAM roles  "
        assert await session.submit() == SubmitOutcome.REPLIED
        assert session.input == ""
        assert session.messages[0].text == "Explain IAM roles"

    async def test_explicit_text_overrides_input_buffer(self, session):
        session.input = "draft"
        await session.submit("What is CloudFront?")
        assert session.messages[0].text == "What is CloudFront?"
        assert session.input == ""

    async def test_user_message_appended_before_reply(self):
        """The user message is visible while the request is in flight."""
        seen_during_request: list[tuple] = []
        holder: dict[str, ChatSession] = {}

        def handler(request: httpx.Request) -> httpx.Response:
            chat_session = holder["session"]
            seen_during_request.append(
                (chat_session.messages, chat_session.loading, chat_session.input)
            )
            return httpx.Response(200, json={"reply": "answer"})

        async with make_session(handler) as chat_session:
            holder["session"] = chat_session
            chat_session.input = "question"
            await chat_session.submit()

        messages, loading, buffer = seen_during_request[0]
        assert [(m.role, m.text) for m in messages] == [(Role.USER, "question")]
        assert loading is True
        assert buffer == ""

    @pytest.mark.parametrize("response", [
        httpx.Response(200),
        httpx.Response(200, json={}),
        httpx.Response(200, json={"reply": ""}),
    ])
    async def test_missing_reply_uses_fallback(self, response: httpx.Response):
        async with make_session(lambda request: response) as chat_session:
            outcome = await chat_session.submit("hi")

        assert outcome == SubmitOutcome.NO_REPLY
        assert chat_session.messages[-1].role == Role.ASSISTANT
        assert chat_session.messages[-1].text == NO_REPLY_TEXT
        assert chat_session.error == ""
        assert chat_session.connected is True

    async def test_conversation_keeps_send_order(self, session):
        for question in ("one", "two", "three"):
            await session.submit(question)

        assert [(m.role, m.text) for m in session.messages] == [
            (Role.USER, "one"), (Role.ASSISTANT, "hello"),
            (Role.USER, "two"), (Role.ASSISTANT, "hello"),
            (Role.USER, "three"), (Role.ASSISTANT, "hello"),
        ]

    @given(question_text)
    @settings(max_examples=25, deadline=None)
    def test_exactly_one_user_message_per_send(self, text: str):
        """Property test: one stripped user message and one request per send."""
        bodies: list[dict] = []

        def handler(request: httpx.Request) -> httpx.Response:
            bodies.append(request_json(request))
            return httpx.Response(200, json={"reply": "ok"})

        async def run() -> ChatSession:
            async with make_session(handler) as chat_session:
                await chat_session.submit(text)
                return chat_session

        chat_session = asyncio.run(run())
        user_messages = [m for m in chat_session.messages if m.role == Role.USER]
        assert [m.text for m in user_messages] == [text.strip()]
        assert bodies == [{"message": text.strip()}]


class TestSubmitFailure:
    """Tests for endpoint failures absorbed by the session."""

    async def test_server_error(self):
        handler = lambda request: httpx.Response(500, text="boom")  # noqa: E731
        async with make_session(handler) as chat_session:
            outcome = await chat_session.submit("hi")

        assert outcome == SubmitOutcome.FAILED
        assert "500" in chat_session.error
        assert "boom" in chat_session.error
        assert chat_session.connected is False
        assert chat_session.loading is False
        assert chat_session.status == "bad"
        assert [(m.role, m.text) for m in chat_session.messages] == [
            (Role.USER, "hi"),
            (Role.ASSISTANT, OFFLINE_TEXT),
        ]

    async def test_transport_failure(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        async with make_session(handler) as chat_session:
            outcome = await chat_session.submit("hi")

        assert outcome == SubmitOutcome.FAILED
        assert chat_session.error == "Connection refused"
        assert chat_session.connected is False
        assert chat_session.messages[-1].text == OFFLINE_TEXT

    async def test_next_submit_resets_error_and_connected(self):
        responses = [
            httpx.Response(503, text="waking up"),
            httpx.Response(200, json={"reply": "back online"}),
        ]

        async with make_session(lambda request: responses.pop(0)) as chat_session:
            await chat_session.submit("first")
            assert chat_session.connected is False

            outcome = await chat_session.submit("retry")

        assert outcome == SubmitOutcome.REPLIED
        assert chat_session.error == ""
        assert chat_session.connected is True
        assert chat_session.messages[-1].text == "back online"

    def test_offline_text_suggests_retry(self):
        assert "couldn’t reach the server" in OFFLINE_TEXT
        assert "Try again in 20–30 seconds." in OFFLINE_TEXT

    def test_no_reply_text(self):
        assert NO_REPLY_TEXT == "I didn’t get a reply. Try again?"


class TestCallbacks:
    """Tests for change, focus and debug hooks."""

    async def test_focus_restored_after_submit_and_clear(self):
        focus_calls: list[str] = []
        chat_session = make_session(
            reply_handler("a"),
            on_focus=lambda: focus_calls.append("focus"),
        )
        async with chat_session:
            await chat_session.submit("hi")
            assert focus_calls == ["focus"]

            chat_session.clear()
            assert focus_calls == ["focus", "focus"]

    async def test_focus_restored_after_failure(self):
        focus_calls: list[str] = []
        chat_session = make_session(
            reply_handler(status_code=500),
            on_focus=lambda: focus_calls.append("focus"),
        )
        async with chat_session:
            await chat_session.submit("hi")
        assert focus_calls == ["focus"]

    async def test_ignored_submit_does_not_notify(self, session):
        changes: list[bool] = []
        session.set_on_change(lambda: changes.append(session.loading))
        await session.submit("   ")
        assert changes == []

    async def test_change_callback_sees_loading_then_idle(self, session):
        changes: list[tuple[int, bool]] = []
        session.set_on_change(lambda: changes.append((len(session.messages), session.loading)))

        await session.submit("hi")

        assert changes[0] == (1, True)
        assert changes[-1] == (2, False)

    async def test_debug_callback_receives_entries(self):
        entries: list[tuple[str, str, str]] = []
        chat_session = make_session(reply_handler(status_code=500))
        chat_session.set_debug_callback(lambda *entry: entries.append(entry))

        async with chat_session:
            await chat_session.submit("hi")

        levels = [level for level, _, _ in entries]
        assert "info" in levels
        assert "error" in levels
        assert all(component == "Chat" for _, component, _ in entries)


class TestClear:
    """Tests for ChatSession.clear."""

    async def test_clear_empties_conversation_and_error(self):
        async with make_session(reply_handler(status_code=500)) as chat_session:
            await chat_session.submit("hi")
            assert chat_session.error

            chat_session.clear()

        assert chat_session.messages == ()
        assert chat_session.error == ""

    async def test_clear_on_empty_session(self, session):
        session.clear()
        assert session.messages == ()
        assert session.error == ""


class TestCopyLastReply:
    """Tests for ChatSession.copy_last_reply."""

    async def test_copies_newest_assistant_message(self, session, clipboard):
        await session.submit("hi")
        assert session.last_reply() == "hello"

        assert session.copy_last_reply(clipboard) == CopyOutcome.COPIED
        assert clipboard.copied == ["hello"]

    async def test_no_assistant_message_is_noop(self, session, clipboard):
        assert session.copy_last_reply(clipboard) == CopyOutcome.NO_REPLY
        assert clipboard.copied == []

    async def test_skips_newer_user_messages(self):
        release = asyncio.Event()
        answers = ["first answer", "second answer"]

        async def handler(request: httpx.Request) -> httpx.Response:
            if len(answers) == 1:
                await release.wait()
            return httpx.Response(200, json={"reply": answers.pop(0)})

        clipboard = RecordingClipboard()

        async with make_session(handler) as chat_session:
            await chat_session.submit("one")
            pending = asyncio.create_task(chat_session.submit("two"))
            while not chat_session.loading:
                await asyncio.sleep(0)

            # Newest message is the user's "two"
            assert chat_session.messages[-1].role == Role.USER
            assert chat_session.copy_last_reply(clipboard) == CopyOutcome.COPIED

            release.set()
            await pending

        assert clipboard.copied == ["first answer"]

    async def test_clipboard_failure_is_reported(self, session):
        await session.submit("hi")
        assert session.copy_last_reply(BrokenClipboard()) == CopyOutcome.CLIPBOARD_FAILED
