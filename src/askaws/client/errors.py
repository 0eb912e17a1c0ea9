"""Exceptions raised by the chat client."""


class AskAwsError(Exception):
    """Base class for askaws errors."""


class ChatEndpointError(AskAwsError):
    """The chat endpoint could not be reached or answered with a non-2xx status.

    A status code of 0 means the request never got a response.
    """

    def __init__(self, message: str, status_code: int = 0):
        super().__init__(message)
        self.status_code = status_code

    @property
    def is_transport_error(self) -> bool:
        """Check if the failure happened before any HTTP response."""
        return self.status_code == 0

    @property
    def is_server_error(self) -> bool:
        """Check if the endpoint answered with a 5xx status."""
        return self.status_code >= 500
