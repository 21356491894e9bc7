"""
Exception hierarchy for the placeholder client library.

Every failure raised by this package derives from ``PlaceholderClientError``.
Status mismatches are also ``AssertionError`` instances so that a test using
an endpoint fails the same way a plain ``assert`` would.
"""

from typing import Any, Dict, Optional, Sequence


class PlaceholderClientError(Exception):
    """
    Base exception for all placeholder client errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (if applicable)
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details or {}

    def __str__(self) -> str:
        parts = [self.message]
        if self.status_code:
            parts.append(f"(HTTP {self.status_code})")
        return " ".join(parts)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"status_code={self.status_code})"
        )


BODY_PREVIEW_LIMIT = 500


def _truncate(body: str, limit: int = BODY_PREVIEW_LIMIT) -> str:
    if len(body) <= limit:
        return body
    return f"{body[:limit]}... ({len(body)} chars)"


# =============================================================================
# Response Errors
# =============================================================================


class StatusCodeMismatchError(PlaceholderClientError, AssertionError):
    """
    The response status code differs from the expected one.

    Raised by ``ValidatableResponse.status_code``. The response body is kept
    in ``body`` for diagnosis.
    """

    def __init__(
        self,
        expected: int,
        actual: int,
        *,
        method: Optional[str] = None,
        url: Optional[str] = None,
        body: str = "",
    ):
        target = f" for {method} {url}" if method and url else ""
        message = f"Expected status {expected} but was {actual}{target}"
        if body:
            message = f"{message}: {_truncate(body)}"
        super().__init__(
            message,
            status_code=actual,
            details={"expected": expected, "actual": actual},
        )
        self.expected = expected
        self.actual = actual
        self.method = method
        self.url = url
        self.body = body


class DeserializationError(PlaceholderClientError):
    """The response body cannot be mapped onto the requested type."""

    def __init__(
        self,
        target: str,
        body: str,
        *,
        reason: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        message = f"Cannot deserialize response body as {target}"
        if reason:
            message = f"{message}: {reason}"
        if body:
            message = f"{message}\nBody: {_truncate(body)}"
        super().__init__(
            message,
            status_code=status_code,
            details={"target": target, "body": body},
        )
        self.target = target
        self.body = body


# =============================================================================
# Request Errors
# =============================================================================


class PathTemplateError(PlaceholderClientError):
    """A path template and its positional parameters do not line up."""

    def __init__(
        self,
        template: str,
        params: Sequence[Any],
        *,
        message: Optional[str] = None,
    ):
        super().__init__(
            message or f"Cannot resolve path template {template!r} with {list(params)!r}",
            details={"template": template, "params": list(params)},
        )
        self.template = template
        self.params = tuple(params)


# =============================================================================
# Network Errors (Client-side)
# =============================================================================


class NetworkError(PlaceholderClientError):
    """
    Network-level error occurred.

    Raised when there's a connection problem, DNS failure, or other
    transport failure. Never retried.
    """

    def __init__(
        self,
        message: str = "Network error",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=None, details=details)


class TimeoutError(NetworkError):
    """Request timed out."""

    def __init__(
        self,
        message: str = "Request timed out",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)


class ConnectionError(NetworkError):
    """Failed to establish connection to the server."""

    def __init__(
        self,
        message: str = "Failed to connect to server",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)
