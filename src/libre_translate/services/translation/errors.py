"""Error family raised by translation services."""

from typing import Optional


class TranslationError(Exception):
    """
    Base class for every failure a translation service can report.

    ``str(error)`` is the human-readable description shown to the user.

    Attributes:
        status_code: HTTP status of the response, or 0 when no response was received.
        message: Description of the failure.
    """

    def __init__(self, message: str, status_code: int = 0):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class TransportError(TranslationError):
    """The HTTP exchange could not be completed (DNS, connection, timeout)."""

    def __init__(self, cause: Exception):
        super().__init__(str(cause) or type(cause).__name__)
        self.cause = cause


class ApiError(TranslationError):
    """The server answered with an error status and an ``{"error": ...}`` payload."""


class DecodeError(TranslationError):
    """A response body did not match the expected shape."""

    def __init__(self, message: str, status_code: int = 0, body: Optional[str] = None):
        super().__init__(message, status_code)
        self.body = body


class SerializationError(TranslationError):
    """The outgoing request body could not be built."""
