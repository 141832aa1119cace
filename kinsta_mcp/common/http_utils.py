"""ABOUTME: HTTP helpers for the Kinsta client - auth headers and error body parsing."""

from typing import Dict, Optional

import httpx

JSON_MEDIA_TYPE = "application/json"

# Body fields checked, in order, for a human-readable API message
API_MESSAGE_FIELDS = ("message", "error")


def build_headers(api_key: str, has_body: bool = False) -> Dict[str, str]:
    """Build request headers for an authenticated Kinsta API call."""
    headers = {
        "Authorization": f"Bearer {api_key}",
        "Accept": JSON_MEDIA_TYPE,
    }
    if has_body:
        headers["Content-Type"] = JSON_MEDIA_TYPE
    return headers


def extract_api_message(response: httpx.Response) -> Optional[str]:
    """Extract the API-provided message from an error response body.

    Checks the "message" field first, then "error". Non-JSON bodies, JSON that
    is not an object, and non-string fields all yield None.
    """
    try:
        payload = response.json()
    except ValueError:
        return None

    if not isinstance(payload, dict):
        return None

    for field in API_MESSAGE_FIELDS:
        value = payload.get(field)
        if isinstance(value, str) and value:
            return value
    return None


__all__ = [
    "JSON_MEDIA_TYPE",
    "API_MESSAGE_FIELDS",
    "build_headers",
    "extract_api_message",
]
