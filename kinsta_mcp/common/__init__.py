"""ABOUTME: Common MCP server utilities and shared infrastructure."""

from .mcp_base import MCPServerBase, setup_logging
from .error_handling import (
    # Error kinds
    ErrorKind,
    ClassifiedError,
    RETRYABLE_KINDS,
    # HTTP status code helpers
    HTTPStatusCodes,
    # Classification
    classify_http_error,
    classify_transport_error,
    non_json_response_error,
)
from .results import (
    format_success,
    format_message,
    format_error,
    format_auth_error,
    format_validation_error,
)

__all__ = [
    "MCPServerBase",
    "setup_logging",
    # Error kinds
    "ErrorKind",
    "ClassifiedError",
    "RETRYABLE_KINDS",
    # HTTP status code helpers
    "HTTPStatusCodes",
    # Classification
    "classify_http_error",
    "classify_transport_error",
    "non_json_response_error",
    # Result envelopes
    "format_success",
    "format_message",
    "format_error",
    "format_auth_error",
    "format_validation_error",
]
