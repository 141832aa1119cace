"""ABOUTME: Input validation helpers for Kinsta MCP tools.

Identifiers are interpolated into request paths, so they are checked against a
safe character set before any network call. Query values are stringified here
because the Kinsta client sends query parameters verbatim.
"""

import re
from typing import Any, Dict, Optional, Pattern, Tuple


# =============================================================================
# Validation Constants
# =============================================================================

SAFE_ID_PATTERN = re.compile(r"^[a-zA-Z0-9_-]+$")

# Operation IDs are "<resource>:<action>-<uuid>", e.g. "sites:add-54fb80af-..."
OPERATION_ID_PATTERN = re.compile(r"^[a-zA-Z0-9_-]+(:[a-zA-Z0-9_-]+)*$")


# =============================================================================
# Standalone Validator Functions
# =============================================================================

def validate_id(
    value: str,
    param_name: str,
    pattern: Pattern[str] = SAFE_ID_PATTERN,
) -> Optional[str]:
    """Validate an identifier used as a path segment.

    Args:
        value: Identifier supplied by the caller
        param_name: Name of the parameter for error messages
        pattern: Allowed shape of the identifier (default: SAFE_ID_PATTERN)

    Returns:
        None if valid, otherwise an error message

    Example:
        error = validate_id("env/../../", "env_id")
        # "Invalid env_id: contains illegal characters"
    """
    if not isinstance(value, str) or not pattern.fullmatch(value):
        return f"Invalid {param_name}: contains illegal characters"
    return None


def validate_ids(**ids: str) -> Optional[str]:
    """Validate several identifiers, returning the first error found."""
    for param_name, value in ids.items():
        error = validate_id(value, param_name)
        if error:
            return error
    return None


def validate_non_empty_string(
    value: str,
    field_name: str = "field"
) -> Tuple[bool, Optional[str]]:
    """Validate that string is not empty and return (is_valid, error_message).

    Args:
        value: String value to validate
        field_name: Name of field for error messages (default: "field")

    Returns:
        Tuple of (is_valid, error_message)
        - (True, None) if valid
        - (False, error_message) if invalid
    """
    if not isinstance(value, str):
        return False, f"{field_name} must be a string, got {type(value).__name__}"

    if not value.strip():
        return False, f"{field_name} cannot be empty or whitespace-only"

    return True, None


# =============================================================================
# Parameter Building
# =============================================================================

def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_params(**values: Any) -> Dict[str, str]:
    """Build a query parameter dict, dropping None and stringifying the rest.

    Example:
        build_params(company="c1", include_environments=True, lines=None)
        # {"company": "c1", "include_environments": "true"}
    """
    return {key: _stringify(value) for key, value in values.items() if value is not None}


def build_body(**values: Any) -> Dict[str, Any]:
    """Build a JSON body dict, dropping None values."""
    return {key: value for key, value in values.items() if value is not None}
