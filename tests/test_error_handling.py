"""ABOUTME: Tests for HTTP status and transport error classification."""

import asyncio

import httpx
import pytest

from kinsta_mcp.common.error_handling import (
    ErrorKind,
    HTTPStatusCodes,
    RETRYABLE_KINDS,
    classify_http_error,
    classify_transport_error,
    non_json_response_error,
)


class TestHTTPStatusCodes:
    """Tests for status code helpers."""

    def test_success_range(self):
        """Test 2xx bounds."""
        assert HTTPStatusCodes.is_success(200)
        assert HTTPStatusCodes.is_success(204)
        assert not HTTPStatusCodes.is_success(199)
        assert not HTTPStatusCodes.is_success(300)

    def test_client_error_range(self):
        """Test 4xx bounds."""
        assert HTTPStatusCodes.is_client_error(400)
        assert HTTPStatusCodes.is_client_error(499)
        assert not HTTPStatusCodes.is_client_error(500)


class TestClassifyHttpError:
    """Tests for mapping HTTP status codes to error kinds."""

    @pytest.mark.parametrize("status,kind,message", [
        (401, ErrorKind.UNAUTHORIZED, "Invalid or expired API key"),
        (403, ErrorKind.FORBIDDEN, "Your API key does not have permission to access this resource"),
        (404, ErrorKind.NOT_FOUND, "Resource not found"),
        (429, ErrorKind.RATE_LIMITED, "Rate limit exceeded. Please wait before retrying."),
        (400, ErrorKind.VALIDATION_ERROR, "Client error (400)"),
        (422, ErrorKind.VALIDATION_ERROR, "Client error (422)"),
        (500, ErrorKind.SERVER_ERROR, "Server error (500)"),
        (503, ErrorKind.SERVER_ERROR, "Server error (503)"),
    ])
    def test_status_mapping(self, status, kind, message):
        """Test each status maps to its kind and base message."""
        error = classify_http_error(status)
        assert error.kind == kind
        assert error.message == message
        assert error.status_code == status
        assert error.api_message is None

    def test_unexpected_status_is_server_error(self):
        """Test statuses outside 4xx fall back to SERVER_ERROR."""
        error = classify_http_error(302)
        assert error.kind == ErrorKind.SERVER_ERROR
        assert error.message == "Server error (302)"

    def test_api_message_appended(self):
        """Test API message is appended after a colon."""
        error = classify_http_error(422, "display_name is required")
        assert error.message == "Client error (422): display_name is required"
        assert error.api_message == "display_name is required"

    def test_empty_api_message_not_appended(self):
        """Test empty API message leaves the base message untouched."""
        error = classify_http_error(404, "")
        assert error.message == "Resource not found"

    def test_retryable_flags(self):
        """Test only rate limits and server errors are retryable among HTTP errors."""
        assert classify_http_error(429).retryable
        assert classify_http_error(500).retryable
        assert not classify_http_error(401).retryable
        assert not classify_http_error(403).retryable
        assert not classify_http_error(404).retryable
        assert not classify_http_error(400).retryable

    def test_retryable_kinds(self):
        """Test the retryable set is exactly rate limit, server error and timeout."""
        assert RETRYABLE_KINDS == {ErrorKind.RATE_LIMITED, ErrorKind.SERVER_ERROR, ErrorKind.TIMEOUT}


class TestClassifyTransportError:
    """Tests for mapping transport exceptions to error kinds."""

    def test_deadline_timeout(self):
        """Test asyncio deadline expiry becomes TIMEOUT."""
        error = classify_transport_error(asyncio.TimeoutError())
        assert error.kind == ErrorKind.TIMEOUT
        assert error.message == "Request timed out"
        assert error.retryable
        assert error.status_code is None

    def test_httpx_timeout(self):
        """Test httpx timeouts become TIMEOUT."""
        error = classify_transport_error(httpx.ReadTimeout("read timed out"))
        assert error.kind == ErrorKind.TIMEOUT

    def test_connection_error_keeps_message(self):
        """Test connection failures become NETWORK_ERROR with the cause preserved."""
        error = classify_transport_error(httpx.ConnectError("Name or service not known"))
        assert error.kind == ErrorKind.NETWORK_ERROR
        assert error.message == "Network error: Name or service not known"
        assert not error.retryable

    def test_messageless_transport_error_uses_class_name(self):
        """Test a transport failure with no message is still NETWORK_ERROR."""
        error = classify_transport_error(httpx.ReadError(""))
        assert error.kind == ErrorKind.NETWORK_ERROR
        assert error.message == "Network error: ReadError"
        assert not error.retryable

    def test_messageless_os_error(self):
        """Test a bare OSError is classified as a network failure."""
        error = classify_transport_error(OSError())
        assert error.kind == ErrorKind.NETWORK_ERROR
        assert error.message == "Network error: OSError"

    def test_messageless_non_transport_exception_is_unknown(self):
        """Test a messageless exception outside the transport family becomes UNKNOWN."""
        error = classify_transport_error(RuntimeError())
        assert error.kind == ErrorKind.UNKNOWN
        assert error.message == "Unknown error occurred"
        assert not error.retryable


class TestNonJsonResponse:
    """Tests for the non-JSON success body error."""

    def test_non_json_error(self):
        """Test non-JSON success bodies become UNKNOWN."""
        error = non_json_response_error(200)
        assert error.kind == ErrorKind.UNKNOWN
        assert error.message == "Received non-JSON response from Kinsta API"
        assert error.status_code == 200
        assert not error.retryable
