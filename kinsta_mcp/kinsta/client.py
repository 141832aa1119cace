"""ABOUTME: Async HTTP client for the Kinsta REST API.

- Sets `Authorization: Bearer <API_KEY>` on all requests
- Enforces a fixed request deadline and reports expiry as a TIMEOUT failure
- Returns a KinstaResult for every expected outcome; HTTP errors, transport
  failures and timeouts never raise out of `request`
"""

import asyncio
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Literal, Optional, Union

import httpx

from ..common.error_handling import (
    ClassifiedError,
    HTTPStatusCodes,
    classify_http_error,
    classify_transport_error,
    non_json_response_error,
)
from ..common.http_utils import build_headers, extract_api_message
from ..constants import FETCH_TIMEOUT_SECONDS
from .config import KinstaConfig

logger = logging.getLogger(__name__)

HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]


@dataclass(frozen=True)
class KinstaSuccess:
    """Successful API call carrying the decoded JSON payload."""
    data: Any
    success: Literal[True] = field(default=True, init=False)


@dataclass(frozen=True)
class KinstaFailure:
    """Failed API call carrying the classified error."""
    error: ClassifiedError
    success: Literal[False] = field(default=False, init=False)


KinstaResult = Union[KinstaSuccess, KinstaFailure]


class KinstaClient:
    """Client for the Kinsta API.

    One client is valid for exactly one KinstaConfig. A new httpx.AsyncClient
    is opened per request, so discarding a KinstaClient leaks nothing.
    """

    def __init__(
        self,
        config: KinstaConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = FETCH_TIMEOUT_SECONDS,
    ):
        """Initialize Kinsta client.

        Args:
            config: Credentials and base URL
            transport: Optional httpx transport (tests inject httpx.MockTransport)
            timeout: Request deadline in seconds (default 30)
        """
        self._api_key = config.api_key
        self.company_id = config.company_id
        self.base_url = config.base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

        logger.info(f"Initialized Kinsta client for {self.base_url}")

    async def request(
        self,
        path: str,
        method: HttpMethod = "GET",
        params: Optional[Dict[str, str]] = None,
        body: Any = None,
    ) -> KinstaResult:
        """Make an authenticated request to the Kinsta API.

        Args:
            path: URL path relative to the base URL (e.g. "/sites")
            method: HTTP method (default GET)
            params: Query parameters, already stringified by the caller
            body: JSON-serializable request body (optional)

        Returns:
            KinstaSuccess with the decoded payload, or KinstaFailure
        """
        url = f"{self.base_url}{path}"
        logger.debug(f"Kinsta request: {method} {path}")

        try:
            response = await asyncio.wait_for(
                self._send(method, url, params, body),
                timeout=self.timeout,
            )
        except (httpx.HTTPError, OSError, asyncio.TimeoutError) as e:
            return self._failure(method, path, classify_transport_error(e))

        if not HTTPStatusCodes.is_success(response.status_code):
            api_message = extract_api_message(response)
            return self._failure(
                method, path, classify_http_error(response.status_code, api_message)
            )

        try:
            data = response.json()
        except ValueError:
            return self._failure(method, path, non_json_response_error(response.status_code))

        return KinstaSuccess(data=data)

    async def _send(
        self,
        method: str,
        url: str,
        params: Optional[Dict[str, str]],
        body: Any,
    ) -> httpx.Response:
        has_body = body is not None
        headers = build_headers(self._api_key, has_body=has_body)
        content = json.dumps(body) if has_body else None

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            return await client.request(
                method,
                url,
                params=params or None,
                headers=headers,
                content=content,
            )

    def _failure(self, method: str, path: str, error: ClassifiedError) -> KinstaFailure:
        status = error.status_code if error.status_code is not None else "-"
        logger.warning(
            f"Kinsta request failed: {method} {path} [{error.kind.value}] "
            f"status={status} retryable={error.retryable}"
        )
        return KinstaFailure(error=error)
