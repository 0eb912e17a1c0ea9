"""Chat session state and the submit/clear/copy operations.

The session owns the conversation and the transient flags shown by the UI.
Every endpoint failure is absorbed here and turned into visible state:
the `error` string, `connected = False` and a synthetic assistant message.
"""

from collections.abc import Callable
from typing import Any

from .clipboard import Clipboard
from .endpoint import ChatEndpoint
from .errors import ChatEndpointError
from .models import CopyOutcome, Message, Role, SubmitOutcome

NO_REPLY_TEXT = "I didn’t get a reply. Try again?"

OFFLINE_TEXT = (
    "⚠️ I couldn’t reach the server. If you just deployed the backend, "
    "it may be waking up (free tiers can sleep). Try again in 20–30 seconds."
)

DebugCallback = Callable[[str, str, str], None]


def _preview(text: str, limit: int = 50) -> str:
    return text if len(text) <= limit else text[:limit] + "..."


class ChatSession:
    """Conversation state container for one chat client.

    State:
        messages: Append-only conversation, in send order
        input: Composer buffer
        loading: True while a request is in flight
        error: Last error message, empty when none
        connected: False after the last request failed

    At most one request is in flight per session: `submit` returns
    `SubmitOutcome.IGNORED_BUSY` while `loading` is set.

    Example:
        async with ChatSession(ChatEndpoint("http://localhost:8081")) as session:
            outcome = await session.submit("What is Amazon S3?")
            print(session.messages[-1].text)
    """

    def __init__(
        self,
        endpoint: ChatEndpoint,
        on_change: Callable[[], None] | None = None,
        on_focus: Callable[[], None] | None = None,
    ) -> None:
        self.endpoint = endpoint
        self._messages: list[Message] = []
        self.input = ""
        self.loading = False
        self.error = ""
        self.connected = True
        self._on_change = on_change
        self._on_focus = on_focus
        self._debug_callback: DebugCallback | None = None

    @property
    def messages(self) -> tuple[Message, ...]:
        """Snapshot of the conversation."""
        return tuple(self._messages)

    @property
    def status(self) -> str:
        """Status indicator: 'busy', 'ok' or 'bad'."""
        if self.loading:
            return "busy"
        return "ok" if self.connected else "bad"

    def set_on_change(self, callback: Callable[[], None] | None) -> None:
        """Set the callback run after every state change."""
        self._on_change = callback

    def set_on_focus(self, callback: Callable[[], None] | None) -> None:
        """Set the callback that gives focus back to the composer."""
        self._on_focus = callback

    def set_debug_callback(self, callback: DebugCallback | None) -> None:
        """Set the debug callback for execution logging.

        Args:
            callback: Callable(level: str, component: str, message: str)
                      level: 'debug', 'info', 'warning', 'error'
        """
        self._debug_callback = callback

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, "Chat", message)

    def _changed(self) -> None:
        if self._on_change:
            self._on_change()

    def _focus(self) -> None:
        if self._on_focus:
            self._on_focus()

    def _append(self, role: Role, text: str) -> None:
        self._messages.append(Message(role=role, text=text))
        self._changed()

    async def submit(self, text: str | None = None) -> SubmitOutcome:
        """Send a message and record the reply.

        Args:
            text: Message to send. Uses the input buffer when None.

        Returns:
            What happened; endpoint failures are reported as FAILED, never raised
        """
        message = (self.input if text is None else text).strip()
        if not message:
            self._debug("debug", "Ignored empty submit")
            return SubmitOutcome.IGNORED_EMPTY
        if self.loading:
            self._debug("warning", "Ignored submit while a request is in flight")
            return SubmitOutcome.IGNORED_BUSY

        self.error = ""
        self.connected = True
        self.loading = True
        self.input = ""
        self._append(Role.USER, message)

        self._debug("info", f"POST {self.endpoint.url}: '{_preview(message)}'")
        try:
            reply = await self.endpoint.send(message)
        except ChatEndpointError as e:
            self.connected = False
            self.error = str(e)
            self._debug("error", f"Request failed: {e}")
            self._append(Role.ASSISTANT, OFFLINE_TEXT)
            outcome = SubmitOutcome.FAILED
        else:
            if reply:
                self._debug("info", f"Reply received ({len(reply)} chars)")
                self._append(Role.ASSISTANT, reply)
                outcome = SubmitOutcome.REPLIED
            else:
                self._debug("warning", "Endpoint answered without a reply")
                self._append(Role.ASSISTANT, NO_REPLY_TEXT)
                outcome = SubmitOutcome.NO_REPLY
        finally:
            self.loading = False
            self._changed()
            self._focus()

        return outcome

    def clear(self) -> None:
        """Empty the conversation and clear the error."""
        self._messages.clear()
        self.error = ""
        self._debug("info", "Conversation cleared")
        self._changed()
        self._focus()

    def last_reply(self) -> str | None:
        """Get the newest assistant message text."""
        for msg in reversed(self._messages):
            if msg.role == Role.ASSISTANT:
                return msg.text
        return None

    def copy_last_reply(self, clipboard: Clipboard) -> CopyOutcome:
        """Copy the newest assistant message to the clipboard.

        Clipboard failures are reported as CLIPBOARD_FAILED, never raised.
        """
        text = self.last_reply()
        if not text:
            self._debug("debug", "No reply to copy")
            return CopyOutcome.NO_REPLY
        try:
            clipboard.copy(text)
        except Exception as e:
            self._debug("warning", f"Clipboard write failed: {e}")
            return CopyOutcome.CLIPBOARD_FAILED
        self._debug("debug", f"Copied reply ({len(text)} chars)")
        return CopyOutcome.COPIED

    async def close(self) -> None:
        """Release the endpoint's HTTP client."""
        await self.endpoint.close()

    async def __aenter__(self) -> "ChatSession":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
