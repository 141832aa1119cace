"""ABOUTME: Error classification for Kinsta API calls.

Maps HTTP status codes and transport failures to a closed set of error kinds,
each with a stable human message and a retryability flag. Classification never
raises: every status code and every transport failure maps to exactly one kind.
"""

import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import httpx


# =============================================================================
# Error Kinds
# =============================================================================

class ErrorKind(str, Enum):
    """Closed set of error kinds returned by the Kinsta client."""

    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    RATE_LIMITED = "RATE_LIMITED"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    SERVER_ERROR = "SERVER_ERROR"
    NETWORK_ERROR = "NETWORK_ERROR"
    TIMEOUT = "TIMEOUT"
    UNKNOWN = "UNKNOWN"


RETRYABLE_KINDS = frozenset({
    ErrorKind.RATE_LIMITED,
    ErrorKind.SERVER_ERROR,
    ErrorKind.TIMEOUT,
})

# Base messages for the fixed status mappings
MESSAGE_UNAUTHORIZED = "Invalid or expired API key"
MESSAGE_FORBIDDEN = "Your API key does not have permission to access this resource"
MESSAGE_NOT_FOUND = "Resource not found"
MESSAGE_RATE_LIMITED = "Rate limit exceeded. Please wait before retrying."
MESSAGE_TIMEOUT = "Request timed out"
MESSAGE_UNKNOWN = "Unknown error occurred"
MESSAGE_NON_JSON = "Received non-JSON response from Kinsta API"


@dataclass(frozen=True)
class ClassifiedError:
    """Structured, kind-tagged representation of a failed Kinsta request.

    Attributes:
        kind: Error kind from the closed ErrorKind set
        message: Human-readable message (API message appended when present)
        status_code: Original HTTP status code, if a response was received
        api_message: Raw message extracted from the response body, if any
        retryable: Advisory flag; nothing in this package retries automatically
    """
    kind: ErrorKind
    message: str
    status_code: Optional[int] = None
    api_message: Optional[str] = None
    retryable: bool = False


# =============================================================================
# HTTP Status Code Helpers
# =============================================================================

class HTTPStatusCodes:
    """Helper methods for HTTP status code checks.

    Provides semantic methods to check HTTP status codes instead of
    hardcoding numeric values throughout the codebase.
    """

    @staticmethod
    def is_success(status_code: int) -> bool:
        """Check if status code indicates success (2xx)."""
        return 200 <= status_code < 300

    @staticmethod
    def is_unauthorized(status_code: int) -> bool:
        """Check if status code is 401 (Unauthorized)."""
        return status_code == 401

    @staticmethod
    def is_forbidden(status_code: int) -> bool:
        """Check if status code is 403 (Forbidden)."""
        return status_code == 403

    @staticmethod
    def is_not_found(status_code: int) -> bool:
        """Check if status code is 404 (Not Found)."""
        return status_code == 404

    @staticmethod
    def is_rate_limit(status_code: int) -> bool:
        """Check if status code indicates rate limiting.

        Args:
            status_code: HTTP status code

        Returns:
            True if status code is 429 (Too Many Requests)
        """
        return status_code == 429

    @staticmethod
    def is_client_error(status_code: int) -> bool:
        """Check if status code indicates client error (4xx).

        Args:
            status_code: HTTP status code

        Returns:
            True if status code is in range 400-499
        """
        return 400 <= status_code < 500


# =============================================================================
# Classification
# =============================================================================

def _with_api_message(message: str, api_message: Optional[str]) -> str:
    if api_message:
        return f"{message}: {api_message}"
    return message


def classify_http_error(
    status_code: int,
    api_message: Optional[str] = None
) -> ClassifiedError:
    """Classify a non-success HTTP status into a ClassifiedError.

    Args:
        status_code: HTTP status code of the response
        api_message: Message extracted from the response body (optional)

    Returns:
        ClassifiedError for the status. Unmapped 4xx codes become
        VALIDATION_ERROR and everything else becomes SERVER_ERROR.

    Example:
        error = classify_http_error(429, "slow down")
        # error.kind == ErrorKind.RATE_LIMITED, error.retryable is True
    """
    if HTTPStatusCodes.is_unauthorized(status_code):
        kind, message = ErrorKind.UNAUTHORIZED, MESSAGE_UNAUTHORIZED
    elif HTTPStatusCodes.is_forbidden(status_code):
        kind, message = ErrorKind.FORBIDDEN, MESSAGE_FORBIDDEN
    elif HTTPStatusCodes.is_not_found(status_code):
        kind, message = ErrorKind.NOT_FOUND, MESSAGE_NOT_FOUND
    elif HTTPStatusCodes.is_rate_limit(status_code):
        kind, message = ErrorKind.RATE_LIMITED, MESSAGE_RATE_LIMITED
    elif HTTPStatusCodes.is_client_error(status_code):
        kind, message = ErrorKind.VALIDATION_ERROR, f"Client error ({status_code})"
    else:
        kind, message = ErrorKind.SERVER_ERROR, f"Server error ({status_code})"

    return ClassifiedError(
        kind=kind,
        message=_with_api_message(message, api_message),
        status_code=status_code,
        api_message=api_message,
        retryable=kind in RETRYABLE_KINDS,
    )


def classify_transport_error(exc: BaseException) -> ClassifiedError:
    """Classify an exception raised while talking to the API.

    Timeouts (httpx or the request deadline) become TIMEOUT. Transport
    failures (httpx errors and OSError) and any other exception carrying a
    message become NETWORK_ERROR. The message is preserved, falling back to the
    exception class name when it is empty. Anything else becomes UNKNOWN.

    Args:
        exc: Exception raised by the transport

    Returns:
        ClassifiedError without a status code
    """
    if isinstance(exc, (httpx.TimeoutException, asyncio.TimeoutError)):
        return ClassifiedError(
            kind=ErrorKind.TIMEOUT,
            message=MESSAGE_TIMEOUT,
            retryable=True,
        )

    detail = str(exc)
    if detail or isinstance(exc, (httpx.HTTPError, OSError)):
        detail = detail or type(exc).__name__
        return ClassifiedError(
            kind=ErrorKind.NETWORK_ERROR,
            message=f"Network error: {detail}",
            retryable=False,
        )

    return ClassifiedError(
        kind=ErrorKind.UNKNOWN,
        message=MESSAGE_UNKNOWN,
        retryable=False,
    )


def non_json_response_error(status_code: Optional[int] = None) -> ClassifiedError:
    """Error for a success status whose body is not valid JSON."""
    return ClassifiedError(
        kind=ErrorKind.UNKNOWN,
        message=MESSAGE_NON_JSON,
        status_code=status_code,
        retryable=False,
    )
