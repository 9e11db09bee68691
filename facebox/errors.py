"""Errors raised by the facebox client.

Transport failures are not wrapped: whatever ``requests`` raises while
sending (``requests.RequestException`` and subclasses) reaches the caller
as-is.
"""

from __future__ import annotations


class FaceboxError(Exception):
    """Base class for client errors. Every subclass carries a message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ConfigurationError(FaceboxError, ValueError):
    """Bad box address, image URL, or lookup id. Raised before any request."""


class HTTPStatusError(FaceboxError):
    """The box answered with a non-2xx status. The body is not read."""

    def __init__(self, status_code: int, reason: str | None = None) -> None:
        super().__init__(f"{status_code} {reason or ''}".strip())
        self.status_code = status_code
        self.reason = reason


class DecodeError(FaceboxError):
    """The response body is not a valid similarity envelope."""


class ServerError(FaceboxError):
    """The box decoded fine but reported ``success: false``.

    ``message`` is the box's own error text, unmodified.
    """
