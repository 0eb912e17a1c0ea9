"""HTTP access to the remote chat endpoint.

Hides the wire format and transport from the session: callers hand over a
question and get back the reply text, or a ChatEndpointError.
"""

from typing import Any
from urllib.parse import urlparse

import httpx
from pydantic import ValidationError

from .errors import ChatEndpointError
from .models import ChatReply, ChatRequest

DEFAULT_API_BASE = "http://localhost:8081"
CHAT_PATH = "/chat"

_LOCAL_HOSTS = {"localhost", "127.0.0.1"}


def normalize_api_base(url: str | None) -> str:
    """Normalize the API base URL.

    Blank values fall back to the local default. Trailing slashes are removed
    so `{base}/chat` never contains a double slash.
    """
    raw = (url or "").strip().rstrip("/")
    return raw or DEFAULT_API_BASE


class ChatEndpoint:
    """Client for the `/chat` endpoint of the assistant backend.

    One call, one POST. No retries, no custom timeout unless one is given.

    Supports async context manager protocol:
        async with ChatEndpoint("https://api.example.com") as endpoint:
            reply = await endpoint.send("What is S3?")
    """

    def __init__(
        self,
        api_base: str,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_base = normalize_api_base(api_base)
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            options: dict[str, Any] = {
                "base_url": self.api_base,
                "headers": {"Content-Type": "application/json"},
            }
            if self._timeout is not None:
                options["timeout"] = self._timeout
            if self._transport is not None:
                options["transport"] = self._transport
            self._client = httpx.AsyncClient(**options)
        return self._client

    @property
    def url(self) -> str:
        """Full URL of the chat endpoint."""
        return f"{self.api_base}{CHAT_PATH}"

    @property
    def is_local(self) -> bool:
        """Check if the endpoint runs on the loopback interface."""
        host = urlparse(self.api_base).hostname or ""
        return host in _LOCAL_HOSTS

    @property
    def display_host(self) -> str:
        """API base without its scheme, for status display."""
        for scheme in ("https://", "http://"):
            if self.api_base.startswith(scheme):
                return self.api_base[len(scheme):]
        return self.api_base

    async def send(self, message: str) -> str | None:
        """Send a question and return the reply text.

        Args:
            message: The user's question (already trimmed)

        Returns:
            The reply, or None when the endpoint answered 2xx without one

        Raises:
            ChatEndpointError: On transport failure or a non-2xx status
        """
        body = ChatRequest(message=message).model_dump()
        try:
            response = await self.client.post(CHAT_PATH, json=body)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise ChatEndpointError(str(e) or "Error contacting server.") from e

        if not response.is_success:
            text = response.text
            raise ChatEndpointError(
                f"API {response.status_code}: {text or 'Request failed'}",
                status_code=response.status_code,
            )

        return self._parse_reply(response)

    @staticmethod
    def _parse_reply(response: httpx.Response) -> str | None:
        """Extract `reply` from a success body. Malformed bodies yield None."""
        try:
            reply = ChatReply.model_validate(response.json())
        except (ValueError, ValidationError):
            return None
        return reply.reply or None

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def __aenter__(self) -> "ChatEndpoint":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
