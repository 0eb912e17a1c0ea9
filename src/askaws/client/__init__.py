"""Chat client core: session state plus the single call to `/chat`."""

from .clipboard import Clipboard, FallbackClipboard, PyperclipClipboard, TerminalClipboard
from .endpoint import DEFAULT_API_BASE, ChatEndpoint, normalize_api_base
from .errors import AskAwsError, ChatEndpointError
from .factory import create_chat_session
from .models import ChatReply, ChatRequest, CopyOutcome, Message, Role, SubmitOutcome
from .session import NO_REPLY_TEXT, OFFLINE_TEXT, ChatSession

__all__ = [
    "AskAwsError",
    "ChatEndpoint",
    "ChatEndpointError",
    "ChatReply",
    "ChatRequest",
    "ChatSession",
    "Clipboard",
    "CopyOutcome",
    "DEFAULT_API_BASE",
    "FallbackClipboard",
    "Message",
    "NO_REPLY_TEXT",
    "OFFLINE_TEXT",
    "PyperclipClipboard",
    "Role",
    "SubmitOutcome",
    "TerminalClipboard",
    "create_chat_session",
    "normalize_api_base",
]
