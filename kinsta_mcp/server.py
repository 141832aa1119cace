"""ABOUTME: Kinsta MCP server - composition root wiring tools, resources and prompts.

The server owns the KinstaClientCache; every tool resolves its client through
`call_kinsta`, which runs the cache -> request -> envelope sequence.
"""

import os
import time
from typing import Any, Callable, Optional, Union

from mcp.types import CallToolResult

from .common.mcp_base import MCPServerBase
from .common.results import format_auth_error, format_error, format_success
from .constants import SERVER_NAME
from .kinsta.client import HttpMethod
from .kinsta.client_cache import KinstaClientCache
from .prompts import register_prompts
from .resources import register_resources
from .tools import register_tools

# Values that may depend on the company ID of the resolved client
CompanyScoped = Union[Any, Callable[[str], Any]]

VALID_TRANSPORTS = ("stdio", "streamable-http", "sse")
DEFAULT_TRANSPORT = "stdio"


def _resolve(value: CompanyScoped, company_id: str) -> Any:
    return value(company_id) if callable(value) else value


class KinstaMCPServer(MCPServerBase):
    """MCP server exposing the Kinsta API."""

    def __init__(
        self,
        client_cache: Optional[KinstaClientCache] = None,
        server_name: str = SERVER_NAME,
    ):
        """Initialize the Kinsta MCP server.

        Args:
            client_cache: Cache used to resolve the Kinsta client (default: a fresh cache)
            server_name: MCP server name
        """
        super().__init__(server_name)
        self.client_cache = client_cache if client_cache is not None else KinstaClientCache()

    async def call_kinsta(
        self,
        tool_name: str,
        path: CompanyScoped,
        method: HttpMethod = "GET",
        params: CompanyScoped = None,
        body: CompanyScoped = None,
        resource_type: Optional[str] = None,
    ) -> CallToolResult:
        """Call the Kinsta API on behalf of a tool and format the result.

        `path`, `params` and `body` may be callables receiving the company ID,
        for endpoints scoped to the configured company.

        Args:
            tool_name: Tool name for logging
            path: Request path (or callable returning it)
            method: HTTP method
            params: Query parameters (string values)
            body: JSON body
            resource_type: Noun for "not found" messages (e.g. "site")

        Returns:
            CallToolResult envelope
        """
        client_result = self.client_cache.get_client()
        if not client_result.success:
            self.log_tool_error(tool_name, "AUTH", client_result.error)
            return format_auth_error(client_result.error)

        client = client_result.client
        resolved_path = _resolve(path, client.company_id)
        self.log_tool_start(tool_name, method=method, path=resolved_path)

        start = time.time()
        result = await client.request(
            resolved_path,
            method=method,
            params=_resolve(params, client.company_id),
            body=_resolve(body, client.company_id),
        )
        duration_ms = int((time.time() - start) * 1000)

        if not result.success:
            error = result.error
            self.log_tool_error(
                tool_name,
                error.kind.value,
                error.message,
                status=error.status_code,
                retryable=error.retryable,
                duration_ms=duration_ms,
            )
            return format_error(error, resource_type)

        self.log_tool_complete(tool_name, duration_ms=duration_ms)
        return format_success(result.data)


def create_server(client_cache: Optional[KinstaClientCache] = None) -> KinstaMCPServer:
    """Create a Kinsta MCP server with all tools, resources and prompts registered."""
    server = KinstaMCPServer(client_cache=client_cache)
    register_tools(server)
    register_resources(server)
    register_prompts(server)
    return server


def main() -> None:
    """Console entry point: run the server on the transport named by MCP_TRANSPORT."""
    transport = os.getenv("MCP_TRANSPORT", DEFAULT_TRANSPORT)
    if transport not in VALID_TRANSPORTS:
        raise SystemExit(
            f"Unknown MCP_TRANSPORT: {transport}. Supported: {', '.join(VALID_TRANSPORTS)}"
        )

    server = create_server()
    server.run(transport=transport)
