from typing import Any

from .endpoint import ChatEndpoint
from .session import ChatSession


def create_chat_session(api_base: str, **config: Any) -> ChatSession:
    """Create a chat session bound to an API base URL.

    Args:
        api_base: Base URL of the assistant backend (blank uses the local default)
        **config: Optional configuration
            - timeout: float | None, request timeout in seconds
            - transport: httpx.AsyncBaseTransport, replaces the network transport
            - on_change: Callable[[], None], run after every state change
            - on_focus: Callable[[], None], run when composer focus is restored

    Returns:
        A ChatSession owning a new ChatEndpoint

    Raises:
        TypeError: If an unknown configuration key is given

    Examples:
        >>> session = create_chat_session("https://aws-chat.onrender.com")
        >>> session.endpoint.url
        'https://aws-chat.onrender.com/chat'
    """
    endpoint_keys = {"timeout", "transport"}
    session_keys = {"on_change", "on_focus"}

    unknown = set(config) - endpoint_keys - session_keys
    if unknown:
        raise TypeError(f"Unknown chat session option(s): {', '.join(sorted(unknown))}")

    endpoint = ChatEndpoint(
        api_base,
        **{k: v for k, v in config.items() if k in endpoint_keys},
    )
    return ChatSession(
        endpoint,
        **{k: v for k, v in config.items() if k in session_keys},
    )
