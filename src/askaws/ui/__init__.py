"""Terminal UI module for askaws.

Provides a Textual-based TUI over a ChatSession.

Module structure (each module hides a design decision):
- widgets.py: Custom widgets (composer, prompts, conversation view, status, trace log)
- styles.py: CSS styling (layout decisions)
- themes.py: Color palette and theme configuration
- config.py: Log levels, labels and limits
- app.py: Application orchestration (user interaction flow)
"""

from .app import ChatApp, run_chat_tui
from .config import LogLevel
from .widgets import (
    ChatHistoryWidget,
    ChatInputBar,
    DebugPanel,
    PromptButton,
    StatusPanel,
    SuggestedPrompts,
)

__all__ = [
    "ChatApp",
    "ChatHistoryWidget",
    "ChatInputBar",
    "DebugPanel",
    "LogLevel",
    "PromptButton",
    "StatusPanel",
    "SuggestedPrompts",
    "run_chat_tui",
]
