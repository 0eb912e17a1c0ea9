"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Composer history and send gating
- Suggested prompt buttons
- Conversation rendering and scrolling
- Status indicator formatting
- Trace log rendering
"""

from collections.abc import Sequence
from datetime import datetime

from rich.markup import escape
from rich.text import Text
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import Click
from textual.message import Message as TextualMessage
from textual.widgets import Button, Input, Markdown, RichLog, Static

from ..client import Message, Role
from .config import (
    COMPOSER_PLACEHOLDER,
    INPUT_HISTORY_MAX_SIZE,
    LOG_COMPONENT_STYLES,
    LOG_LEVEL_STYLES,
    LOG_MAX_MESSAGE_LENGTH,
    LOG_TIMESTAMP_FORMAT,
    MESSAGE_TIMESTAMP_FORMAT,
    QUICK_ASKS,
    STATUS_TEXT,
    SUGGESTED_PROMPTS,
    LogLevel,
)


class ClickableMessage(Vertical):
    """A chat message container that copies its text when clicked."""

    def __init__(self, content: str, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._content = content

    def on_click(self, event: Click) -> None:
        event.stop()
        try:
            self.app.reply_clipboard.copy(self._content)
        except Exception:
            self.app.notify("Could not copy message", severity="warning", timeout=2)
            return
        self.app.notify("Copied to clipboard", timeout=2)


class HistoryInput(Input):
    """Input widget with sent-message history.

    Use Up/Down arrow keys to navigate through history.
    """

    BINDINGS = [
        Binding("up", "history_prev", "Previous", show=False),
        Binding("down", "history_next", "Next", show=False),
    ]

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._history: list[str] = []
        self._history_index: int = -1
        self._current_input: str = ""

    def action_history_prev(self) -> None:
        if not self._history:
            return
        if self._history_index == -1:
            self._current_input = self.value
            self._history_index = len(self._history) - 1
        elif self._history_index > 0:
            self._history_index -= 1
        self.value = self._history[self._history_index]
        self.cursor_position = len(self.value)

    def action_history_next(self) -> None:
        if self._history_index == -1:
            return
        if self._history_index < len(self._history) - 1:
            self._history_index += 1
            self.value = self._history[self._history_index]
        else:
            self._history_index = -1
            self.value = self._current_input
        self.cursor_position = len(self.value)

    def add_to_history(self, command: str) -> None:
        """Add a sent message to history."""
        if command and (not self._history or self._history[-1] != command):
            self._history.append(command)
            del self._history[:-INPUT_HISTORY_MAX_SIZE]
        self._history_index = -1
        self._current_input = ""


class ChatInputBar(Horizontal):
    """Composer: single-line input plus Send button.

    Enter or the Send button submits. Sending is gated while a request is in
    flight or while the input is blank.
    """

    class Submitted(TextualMessage):
        """Posted when the user submits a non-blank message."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    class Changed(TextualMessage):
        """Posted when the composer text changes."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._busy = False

    def compose(self):
        yield HistoryInput(id="chat-input", placeholder=COMPOSER_PLACEHOLDER)
        yield Button("Send", id="send-btn", disabled=True).with_tooltip(
            "Send message (Enter)"
        )

    @property
    def value(self) -> str:
        return self.query_one("#chat-input", HistoryInput).value

    def set_busy(self, busy: bool) -> None:
        """Reflect the session's loading flag on the Send button."""
        self._busy = busy
        self._update_button()

    def _update_button(self) -> None:
        button = self.query_one("#send-btn", Button)
        button.label = "Sending…" if self._busy else "Send"
        button.disabled = self._busy or not self.value.strip()

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        self._update_button()
        self.post_message(self.Changed(event.value))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send-btn":
            event.stop()
            self._submit()

    def _submit(self) -> None:
        text_input = self.query_one("#chat-input", HistoryInput)
        value = text_input.value
        if self._busy or not value.strip():
            return
        text_input.add_to_history(value.strip())
        text_input.value = ""
        self.post_message(self.Submitted(value))

    def focus_input(self) -> None:
        """Focus the text input."""
        self.query_one("#chat-input", HistoryInput).focus()


class PromptButton(Button):
    """Button that sends a fixed question when pressed."""

    def __init__(self, label: str, prompt: str, *args, **kwargs) -> None:
        super().__init__(label, *args, **kwargs)
        self.prompt = prompt


class SuggestedPrompts(Vertical):
    """Side panel card of one-click example questions."""

    BORDER_TITLE = "Suggested prompts"

    def compose(self):
        for index, prompt in enumerate(SUGGESTED_PROMPTS):
            yield PromptButton(prompt, prompt, id=f"prompt-{index}").with_tooltip(
                "Send this prompt"
            )


class ChatHistoryWidget(VerticalScroll):
    """Scrollable conversation view.

    Mirrors the session's message list: new messages are appended, a shorter
    list means the conversation was cleared.
    """

    BORDER_TITLE = "Live Chat"
    BORDER_SUBTITLE = "Conversation history"
    ALLOW_MAXIMIZE = True

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._rendered = 0

    def compose(self):
        with Vertical(id="empty-hint"):
            yield Static("Start with a question ✨", id="empty-title")
            yield Static("Try: What is Amazon S3?  or  Explain VPC peering", id="empty-sub")
            with Horizontal(id="quick-asks"):
                for widget_id, label, question in QUICK_ASKS:
                    yield PromptButton(label, question, id=widget_id)
        yield Static("Assistant is typing…", id="typing-indicator")

    def on_mount(self) -> None:
        self.query_one("#typing-indicator", Static).display = False

    @property
    def rendered_count(self) -> int:
        return self._rendered

    def sync(self, messages: Sequence[Message], loading: bool) -> None:
        """Render any messages not yet shown and the typing indicator."""
        if len(messages) < self._rendered:
            self.clear_history()

        for msg in messages[self._rendered:]:
            self._render_message(msg)
        added = len(messages) != self._rendered
        self._rendered = len(messages)

        self.query_one("#empty-hint").display = not messages
        self.query_one("#typing-indicator", Static).display = loading
        self.border_subtitle = (
            f"{self._rendered} messages" if self._rendered else "Conversation history"
        )

        if added or loading:
            self.scroll_end(animate=False)

    def clear_history(self) -> None:
        """Remove all rendered messages."""
        self.query(".chat-message").remove()
        self._rendered = 0

    def _render_message(self, msg: Message) -> None:
        if msg.role == Role.USER:
            prefix = "You"
            border_class = "user-message"
            icon = ">"
        else:
            prefix = "Assistant"
            border_class = "assistant-message"
            icon = "<"

        timestamp = msg.timestamp.strftime(MESSAGE_TIMESTAMP_FORMAT)
        header = Text(f"{icon} {prefix} [{timestamp}]")

        container = ClickableMessage(content=msg.text, classes=f"chat-message {border_class}")
        container.compose_add_child(Static(header, classes="message-header"))

        if msg.role == Role.ASSISTANT:
            # Replies are usually markdown (lists, code fences)
            container.compose_add_child(Markdown(msg.text, classes="message-content"))
        else:
            container.compose_add_child(Static(Text(msg.text), classes="message-content"))

        self.mount(container, before=self.query_one("#typing-indicator"))


class StatusPanel(Static):
    """Connection status: busy/ready/offline, API host and API kind."""

    BORDER_TITLE = "Status"

    _DOTS = {
        "busy": "[yellow]●[/]",
        "ok": "[green]●[/]",
        "bad": "[red]●[/]",
    }

    def update_status(
        self,
        status: str,
        connected: bool,
        host: str,
        is_local: bool,
    ) -> None:
        """Render the status lines.

        Args:
            status: ChatSession.status ('busy', 'ok', 'bad')
            connected: Whether the last request succeeded
            host: API base without scheme
            is_local: Whether the API runs on loopback
        """
        for name in self._DOTS:
            self.set_class(name == status, name)

        dot = self._DOTS.get(status, "●")
        link = "Connected" if connected else "Offline"
        kind = "Local API" if is_local else "Production API"
        self.update(
            f"{dot} {STATUS_TEXT.get(status, '')}\n"
            f"[dim]{link} • {kind}[/]\n"
            f"[dim]{escape(host)}[/]"
        )


class DebugPanel(RichLog):
    """Log panel for request tracing with level filtering.

    Shows timestamped log messages from all components.
    Supports standard log levels: DEBUG < INFO < WARNING < ERROR.
    Hidden by default, shown with --log-level flag or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Trace log"

    def __init__(self, *args, log_level: LogLevel = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=True,
            **kwargs
        )
        self._log_level = log_level

    @property
    def log_level(self) -> LogLevel:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: LogLevel) -> None:
        self._log_level = level
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {self._log_level.name}"
        else:
            self.border_subtitle = "Hidden"

    def on_mount(self) -> None:
        """Hide by default."""
        self.display = False

    def write_entry(
        self,
        component: str,
        message: str,
        level: LogLevel = LogLevel.DEBUG
    ) -> None:
        """Add a log entry if it meets the current level threshold.

        Args:
            component: Component name (TUI, Chat)
            message: Log message
            level: Entry level, compared against the panel threshold
        """
        if level < self._log_level:
            return

        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)

        level_color = LOG_LEVEL_STYLES.get(level, "white")
        comp_color = LOG_COMPONENT_STYLES.get(component, "white")

        if len(message) > LOG_MAX_MESSAGE_LENGTH:
            message = message[:LOG_MAX_MESSAGE_LENGTH] + "..."

        self.write(
            f"[dim]{timestamp}[/] "
            f"[{level_color}]{level.name:<5}[/] "
            f"[{comp_color}]{escape('[' + component + ']')}[/] {escape(message)}"
        )

    def show(self) -> None:
        """Show the log panel."""
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        """Hide the log panel."""
        self.display = False
        self.border_subtitle = "Hidden"

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True
