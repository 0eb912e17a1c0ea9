"""Clipboard targets for copying replies.

Hides which clipboard mechanism is used: the system clipboard through
pyperclip, or the terminal's OSC 52 sequence through Textual.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import pyperclip

if TYPE_CHECKING:
    from textual.app import App


class Clipboard(ABC):
    """Abstract clipboard target."""

    @abstractmethod
    def copy(self, text: str) -> None:
        """Write text to the clipboard.

        Raises:
            Exception: Implementation-specific failures
        """


class PyperclipClipboard(Clipboard):
    """System clipboard (pbcopy, xclip, xsel, win32)."""

    def copy(self, text: str) -> None:
        pyperclip.copy(text)


class TerminalClipboard(Clipboard):
    """Terminal clipboard via Textual's OSC 52 support."""

    def __init__(self, app: "App") -> None:
        self._app = app

    def copy(self, text: str) -> None:
        self._app.copy_to_clipboard(text)


class FallbackClipboard(Clipboard):
    """Try the primary clipboard, fall back to a second one on failure."""

    def __init__(self, primary: Clipboard, fallback: Clipboard) -> None:
        self._primary = primary
        self._fallback = fallback

    def copy(self, text: str) -> None:
        try:
            self._primary.copy(text)
        except Exception:
            self._fallback.copy(text)
