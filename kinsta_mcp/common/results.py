"""ABOUTME: Result envelope formatting for all Kinsta MCP tools.

Every tool returns one of two shapes:
- success: text content (pretty-printed JSON or a message), plus structured
  content when the payload is a JSON object or array
- error: isError=True with a single text block whose prefix tells the reader
  whether the network was reached ("Kinsta API Error (KIND): ...") or not
  ("Authentication Error: ...", "Error: ...")
"""

import json
from typing import Any, Dict, Optional

from mcp.types import CallToolResult, TextContent

from ..constants import ERROR_TEXT_PREFIX
from .error_handling import ClassifiedError, ErrorKind


# Friendly replacements for classified messages, keyed by error kind
FRIENDLY_ERROR_MESSAGES: Dict[ErrorKind, str] = {
    ErrorKind.UNAUTHORIZED: (
        "Your API key is invalid or expired. "
        "Generate a new one in MyKinsta > Company settings > API Keys."
    ),
    ErrorKind.FORBIDDEN: "Your API key does not have permission to access this resource.",
    ErrorKind.RATE_LIMITED: (
        "You have exceeded Kinsta's rate limit. "
        "Please wait a moment before trying again."
    ),
}

AUTH_ERROR_PREFIX = "Authentication Error"
VALIDATION_ERROR_PREFIX = "Error"


def _text(text: str) -> TextContent:
    return TextContent(type="text", text=text)


def _error_result(text: str) -> CallToolResult:
    return CallToolResult(content=[_text(text)], isError=True)


# =============================================================================
# Success Formatting
# =============================================================================

def format_success(data: Any) -> CallToolResult:
    """Wrap an API payload as pretty-printed JSON text.

    Structured content is attached only for objects and arrays. MCP requires
    structured content to be an object, so arrays are exposed under "items".

    Args:
        data: JSON-compatible payload returned by the Kinsta API

    Returns:
        CallToolResult with a JSON text block

    Example:
        format_success({"site": {"id": "abc"}})
    """
    text_content = _text(json.dumps(data, indent=2))
    if isinstance(data, dict):
        return CallToolResult(content=[text_content], structuredContent=data)
    if isinstance(data, list):
        return CallToolResult(content=[text_content], structuredContent={"items": data})
    return CallToolResult(content=[text_content])


def format_message(message: str) -> CallToolResult:
    """Wrap a plain message as a successful result."""
    return CallToolResult(content=[_text(message)])


# =============================================================================
# Error Formatting
# =============================================================================

def render_error_message(
    error: ClassifiedError,
    resource_type: Optional[str] = None
) -> str:
    """Pick the message shown for a classified error.

    Priority:
    1. NOT_FOUND with a resource noun: "The requested <noun> was not found."
    2. Fixed friendly message for UNAUTHORIZED, FORBIDDEN and RATE_LIMITED
    3. The classified message itself
    """
    if error.kind == ErrorKind.NOT_FOUND and resource_type:
        return f"The requested {resource_type} was not found."
    return FRIENDLY_ERROR_MESSAGES.get(error.kind, error.message)


def format_error(
    error: ClassifiedError,
    resource_type: Optional[str] = None
) -> CallToolResult:
    """Format a classified API error for MCP tools.

    Args:
        error: ClassifiedError produced by the client
        resource_type: Optional noun for "not found" messages (e.g. "site", "environment")

    Returns:
        CallToolResult with isError=True

    Example:
        format_error(classify_http_error(404), "site")
        # "Kinsta API Error (NOT_FOUND): The requested site was not found."
    """
    message = render_error_message(error, resource_type)
    return _error_result(f"{ERROR_TEXT_PREFIX} ({error.kind.value}): {message}")


def format_auth_error(message: str) -> CallToolResult:
    """Format a credential failure that happened before any network call."""
    return _error_result(f"{AUTH_ERROR_PREFIX}: {message}")


def format_validation_error(message: str) -> CallToolResult:
    """Format an input rejection that happened before any network call."""
    return _error_result(f"{VALIDATION_ERROR_PREFIX}: {message}")
