"""ABOUTME: Site maintenance tools - cache clearing, PHP restart/version and denied IPs.

These endpoints take the environment in the body or query string, never in
the path.
"""

from typing import TYPE_CHECKING, List, Optional

from mcp.types import CallToolResult

from ..common.validation import build_body
from .annotations import MUTATING, READ_ONLY

if TYPE_CHECKING:
    from ..server import KinstaMCPServer


def register_site_tool_tools(server: "KinstaMCPServer") -> None:
    mcp = server.get_mcp()

    @mcp.tool(name="kinsta_tools_clear_cache", annotations=MUTATING)
    async def clear_cache(environment_id: str) -> CallToolResult:
        """Clear the site cache for an environment. Returns an operation_id.

        Args:
            environment_id: The environment ID to clear cache for
        """
        return await server.call_kinsta(
            "kinsta_tools_clear_cache",
            "/sites/tools/clear-cache",
            method="POST",
            body={"environment_id": environment_id},
            resource_type="environment",
        )

    @mcp.tool(name="kinsta_tools_restart_php", annotations=MUTATING)
    async def restart_php(environment_id: str) -> CallToolResult:
        """Restart PHP for an environment. Returns an operation_id.

        Args:
            environment_id: The environment ID to restart PHP for
        """
        return await server.call_kinsta(
            "kinsta_tools_restart_php",
            "/sites/tools/restart-php",
            method="POST",
            body={"environment_id": environment_id},
            resource_type="environment",
        )

    @mcp.tool(name="kinsta_tools_php_version", annotations=MUTATING)
    async def tools_php_version(
        environment_id: str,
        php_version: str,
        is_opt_out_from_automatic_php_update: Optional[bool] = None,
    ) -> CallToolResult:
        """Change the PHP version for an environment. Returns an operation_id.

        Args:
            environment_id: The environment ID
            php_version: PHP version to switch to (e.g. 8.1, 8.2, 8.3)
            is_opt_out_from_automatic_php_update: Opt out of automatic PHP updates
        """
        return await server.call_kinsta(
            "kinsta_tools_php_version",
            "/sites/tools/modify-php-version",
            method="PUT",
            body=build_body(
                environment_id=environment_id,
                php_version=php_version,
                is_opt_out_from_automatic_php_update=is_opt_out_from_automatic_php_update,
            ),
            resource_type="environment",
        )

    @mcp.tool(name="kinsta_tools_denied_ips", annotations=READ_ONLY)
    async def denied_ips(environment_id: str) -> CallToolResult:
        """Get the list of denied (blocked) IP addresses for an environment.

        Args:
            environment_id: The environment ID
        """
        return await server.call_kinsta(
            "kinsta_tools_denied_ips",
            "/sites/tools/denied-ips",
            params={"environment_id": environment_id},
            resource_type="environment",
        )

    @mcp.tool(name="kinsta_tools_denied_ips_update", annotations=MUTATING)
    async def denied_ips_update(environment_id: str, ip_list: List[str]) -> CallToolResult:
        """Update the list of denied (blocked) IP addresses for an environment.

        Args:
            environment_id: The environment ID
            ip_list: List of IP addresses to block
        """
        return await server.call_kinsta(
            "kinsta_tools_denied_ips_update",
            "/sites/tools/denied-ips",
            method="PUT",
            body={"environment_id": environment_id, "ip_list": ip_list},
            resource_type="environment",
        )
