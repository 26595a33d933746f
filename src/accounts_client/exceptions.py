"""
Exception hierarchy for the accounts client library.

Every failure surfaced by the client is one of three kinds:

- TransportError: the request could not be sent or no response arrived
- RemoteError: the service answered with a non-2xx status
- DecodeError: a payload could not be (de)serialized into the expected model

RemoteError subclasses are picked from the response status code so callers can
catch the common cases directly; the status code itself is always available.
"""

from typing import Any, Dict, Optional


class AccountsClientError(Exception):
    """
    Base exception for all accounts client errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (if applicable)
        error_code: Error code reported by the service (if any)
        details: Additional error details
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}

    def __str__(self) -> str:
        parts = [self.message]
        if self.error_code:
            parts.insert(0, f"[{self.error_code}]")
        if self.status_code:
            parts.append(f"(HTTP {self.status_code})")
        return " ".join(parts)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"status_code={self.status_code}, "
            f"error_code={self.error_code!r})"
        )


# =============================================================================
# Transport Errors (no response received)
# =============================================================================


class TransportError(AccountsClientError):
    """
    The request could not be sent or no response was received.

    Raised on connection refusal, DNS or TLS failures, timeouts and other
    network-level problems. Never carries a status code.
    """

    def __init__(
        self,
        message: str = "Transport error",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            status_code=None,
            error_code=None,
            details=details,
        )


class TimeoutError(TransportError):
    """Request timed out."""

    def __init__(
        self,
        message: str = "Request timed out",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)


class ConnectionError(TransportError):
    """Failed to establish connection to the server."""

    def __init__(
        self,
        message: str = "Failed to connect to server",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)


# =============================================================================
# Remote Errors (non-2xx response)
# =============================================================================


class RemoteError(AccountsClientError):
    """
    The service responded with a status outside 2xx.

    Attributes:
        body: Raw response body, kept for diagnostics. Not guaranteed to be JSON.
    """

    def __init__(
        self,
        message: str = "Remote error",
        *,
        status_code: int,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        body: Optional[str] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            details=details,
        )
        self.body = body


class ValidationError(RemoteError):
    """The service rejected the request as invalid (400)."""

    def __init__(
        self,
        message: str = "Validation error",
        *,
        status_code: int = 400,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        body: Optional[str] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            details=details,
            body=body,
        )


class NotFoundError(RemoteError):
    """Requested resource was not found (404)."""

    def __init__(
        self,
        message: str = "Resource not found",
        *,
        status_code: int = 404,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        body: Optional[str] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            details=details,
            body=body,
        )


class ConflictError(RemoteError):
    """
    Request conflicts with the current state of the resource (409).

    Raised when creating an account whose id already exists, or deleting
    with a stale version.
    """

    def __init__(
        self,
        message: str = "Resource conflict",
        *,
        status_code: int = 409,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        body: Optional[str] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            details=details,
            body=body,
        )


class ServerError(RemoteError):
    """Server-side error occurred (5xx)."""

    def __init__(
        self,
        message: str = "Server error",
        *,
        status_code: int = 500,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        body: Optional[str] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            details=details,
            body=body,
        )


# =============================================================================
# Decode Errors
# =============================================================================


class DecodeError(AccountsClientError):
    """
    A payload failed to (de)serialize into the expected model.

    Raised for malformed 2xx response bodies and for outbound payloads that
    cannot be built. The underlying pydantic error is chained as __cause__.
    """

    def __init__(
        self,
        message: str = "Failed to decode payload",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)


# =============================================================================
# Exception Mapping
# =============================================================================

# Map HTTP status codes to exception classes
STATUS_CODE_EXCEPTIONS = {
    400: ValidationError,
    404: NotFoundError,
    409: ConflictError,
}


def exception_from_response(
    status_code: int,
    message: str,
    error_code: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None,
    body: Optional[str] = None,
) -> RemoteError:
    """
    Create an appropriate exception from a non-2xx HTTP response.

    Args:
        status_code: HTTP status code
        message: Error message
        error_code: Error code reported by the service
        details: Additional error details
        body: Raw response body

    Returns:
        Appropriate RemoteError subclass
    """
    exception_class = STATUS_CODE_EXCEPTIONS.get(status_code)
    if exception_class is None:
        exception_class = ServerError if 500 <= status_code < 600 else RemoteError
    return exception_class(
        message,
        status_code=status_code,
        error_code=error_code,
        details=details,
        body=body,
    )
