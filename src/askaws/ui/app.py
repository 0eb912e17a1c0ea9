"""Main Textual TUI application.

Orchestrates the UI components and routes user interaction to a ChatSession.
"""

import asyncio

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Button, Footer, Header, Static

from ..client import (
    ChatSession,
    Clipboard,
    CopyOutcome,
    FallbackClipboard,
    PyperclipClipboard,
    SubmitOutcome,
    TerminalClipboard,
)
from .styles import APP_CSS
from .themes import SQUID_INK
from .widgets import (
    ChatHistoryWidget,
    ChatInputBar,
    DebugPanel,
    LogLevel,
    PromptButton,
    StatusPanel,
    SuggestedPrompts,
)


class ChatApp(App):
    """Textual TUI for the AWS chat assistant."""

    CSS = APP_CSS
    TITLE = "askaws"
    SUB_TITLE = "AWS Chat Assistant"

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", priority=True),
        Binding("ctrl+k", "clear_chat", "Clear Chat", priority=True),
        Binding("ctrl+r", "copy_last_reply", "Copy Answer", priority=True),
        Binding("ctrl+d", "toggle_debug", "Log", priority=True),
    ]

    def __init__(
        self,
        session: ChatSession,
        log_level: str | None = None,
        clipboard: Clipboard | None = None,
    ) -> None:
        super().__init__()
        self.session = session
        self._log_level = log_level
        self.reply_clipboard = clipboard or FallbackClipboard(
            PyperclipClipboard(), TerminalClipboard(self)
        )

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)

        yield ChatHistoryWidget(id="chat-history")

        with Vertical(id="side-panel"):
            yield StatusPanel(id="status-panel")
            yield SuggestedPrompts(id="suggested-prompts")
            yield DebugPanel(id="debug-panel")

        with Vertical(id="composer"):
            yield ChatInputBar(id="chat-input-bar")
            yield Static("", id="error-line")
            yield Static(
                "Press Enter to send • Ctrl+K clears • Ctrl+R copies the last answer",
                id="hint",
            )

        yield Footer()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.register_theme(SQUID_INK)
        self.theme = "squid-ink"

        log_panel = self.query_one("#debug-panel", DebugPanel)
        if self._log_level is not None:
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.show()
            log_panel.write_entry(
                "TUI",
                f"Log panel enabled with level: {log_panel.log_level.name}",
                LogLevel.INFO,
            )

        self.session.set_on_change(self._refresh_view)
        self.session.set_on_focus(self._focus_composer)
        self.session.set_debug_callback(self._route_debug)

        self._refresh_view()
        self.query_one("#chat-input-bar", ChatInputBar).focus_input()

    def _route_debug(self, level: str, component: str, message: str) -> None:
        """Route session debug messages to the log panel."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        log_panel.write_entry(component, message, LogLevel.from_string(level))

    def _focus_composer(self) -> None:
        """Return focus to the composer after the current render pass."""
        bar = self.query_one("#chat-input-bar", ChatInputBar)
        self.call_after_refresh(bar.focus_input)

    def _refresh_view(self) -> None:
        """Re-render everything derived from session state."""
        session = self.session

        chat = self.query_one("#chat-history", ChatHistoryWidget)
        chat.sync(session.messages, session.loading)

        status = self.query_one("#status-panel", StatusPanel)
        status.update_status(
            session.status,
            session.connected,
            session.endpoint.display_host,
            session.endpoint.is_local,
        )

        self.query_one("#chat-input-bar", ChatInputBar).set_busy(session.loading)
        for button in self.query(PromptButton):
            button.disabled = session.loading

        error_line = self.query_one("#error-line", Static)
        error_line.update(f"Error: {session.error}" if session.error else "")
        error_line.display = bool(session.error)

    def on_chat_input_bar_changed(self, event: ChatInputBar.Changed) -> None:
        """Keep the session's input buffer in sync with the composer."""
        self.session.input = event.value

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        """Handle user input submission."""
        if self.session.loading:
            return
        self._send(event.value)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Send the question behind a suggested prompt or quick-ask button."""
        if not isinstance(event.button, PromptButton):
            return
        event.stop()
        if self.session.loading:
            return
        self._send(event.button.prompt)

    @work(group="chat")
    async def _send(self, text: str) -> None:
        """Submit as a background async worker; the session absorbs failures."""
        outcome = await self.session.submit(text)
        if outcome == SubmitOutcome.FAILED:
            self.notify("Could not reach the server", severity="error", timeout=5)
        elif outcome == SubmitOutcome.IGNORED_BUSY:
            self.notify("Still waiting for the last answer", severity="warning", timeout=2)

    def action_clear_chat(self) -> None:
        """Clear the conversation."""
        self.session.clear()
        self.notify("Chat cleared", timeout=2)

    def action_copy_last_reply(self) -> None:
        """Copy the last assistant answer to the clipboard."""
        outcome = self.session.copy_last_reply(self.reply_clipboard)
        if outcome == CopyOutcome.COPIED:
            self.notify("Answer copied", timeout=2)
        elif outcome == CopyOutcome.NO_REPLY:
            self.notify("No answer to copy", severity="warning", timeout=2)

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        is_visible = log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)


async def run_chat_tui(session: ChatSession, log_level: str | None = None) -> None:
    """Run the Textual TUI.

    Args:
        session: Chat session to drive
        log_level: Log level for panel (debug/info/warning/error), None to hide
    """
    app = ChatApp(session=session, log_level=log_level)
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
    finally:
        await session.close()
