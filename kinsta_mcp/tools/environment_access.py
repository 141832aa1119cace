"""ABOUTME: Environment access tools - SSH/SFTP settings, WP-CLI and phpMyAdmin.

SSH endpoints live under /sites/environments/{env_id}/ssh, except the
connection config which is addressed through the site.
"""

from typing import TYPE_CHECKING, List

from mcp.types import CallToolResult

from ..common.results import format_validation_error
from ..common.validation import validate_id, validate_ids
from .annotations import DESTRUCTIVE, MUTATING, READ_ONLY

if TYPE_CHECKING:
    from ..server import KinstaMCPServer


def register_environment_access_tools(server: "KinstaMCPServer") -> None:
    mcp = server.get_mcp()

    async def env_request(tool_name: str, env_id: str, suffix: str, **kwargs) -> CallToolResult:
        error = validate_id(env_id, "env_id")
        if error:
            return format_validation_error(error)

        return await server.call_kinsta(
            tool_name,
            f"/sites/environments/{env_id}/{suffix}",
            resource_type="environment",
            **kwargs,
        )

    # -------------------------------------------------------------------------
    # SSH/SFTP
    # -------------------------------------------------------------------------

    @mcp.tool(name="kinsta_environments_ssh_status", annotations=READ_ONLY)
    async def ssh_status(env_id: str) -> CallToolResult:
        """Get the SSH/SFTP status for an environment.

        Args:
            env_id: The environment ID
        """
        return await env_request("kinsta_environments_ssh_status", env_id, "ssh/get-status")

    @mcp.tool(name="kinsta_environments_ssh_toggle", annotations=MUTATING)
    async def ssh_toggle(env_id: str, is_enabled: bool) -> CallToolResult:
        """Enable or disable SSH/SFTP access for an environment.

        Args:
            env_id: The environment ID
            is_enabled: True to enable SSH, False to disable it
        """
        return await env_request(
            "kinsta_environments_ssh_toggle",
            env_id,
            "ssh/set-status",
            method="POST",
            body={"is_enabled": is_enabled},
        )

    @mcp.tool(name="kinsta_environments_ssh_password_access", annotations=MUTATING)
    async def ssh_password_access(env_id: str, is_enabled: bool) -> CallToolResult:
        """Enable or disable SSH password-based access for an environment.

        Args:
            env_id: The environment ID
            is_enabled: True to allow password logins, False to require keys
        """
        return await env_request(
            "kinsta_environments_ssh_password_access",
            env_id,
            "ssh/set-password-status",
            method="POST",
            body={"is_enabled": is_enabled},
        )

    @mcp.tool(name="kinsta_environments_ssh_generate_password", annotations=MUTATING)
    async def ssh_generate_password(env_id: str) -> CallToolResult:
        """Generate a new SSH/SFTP password for an environment.

        Args:
            env_id: The environment ID
        """
        return await env_request(
            "kinsta_environments_ssh_generate_password",
            env_id,
            "ssh/generate-password",
            method="POST",
        )

    @mcp.tool(name="kinsta_environments_ssh_password", annotations=READ_ONLY)
    async def ssh_password(env_id: str) -> CallToolResult:
        """Get the current SSH/SFTP password for an environment.

        Args:
            env_id: The environment ID
        """
        return await env_request("kinsta_environments_ssh_password", env_id, "ssh/password")

    @mcp.tool(name="kinsta_environments_ssh_ip_allowlist", annotations=READ_ONLY)
    async def ssh_ip_allowlist(env_id: str) -> CallToolResult:
        """Get the SSH IP allowlist for an environment.

        Args:
            env_id: The environment ID
        """
        return await env_request(
            "kinsta_environments_ssh_ip_allowlist", env_id, "ssh/get-allowed-ips"
        )

    @mcp.tool(name="kinsta_environments_ssh_ip_allowlist_update", annotations=MUTATING)
    async def ssh_ip_allowlist_update(env_id: str, ip_allowlist: List[str]) -> CallToolResult:
        """Replace the SSH IP allowlist for an environment.

        Args:
            env_id: The environment ID
            ip_allowlist: IP addresses allowed to connect over SSH
        """
        return await env_request(
            "kinsta_environments_ssh_ip_allowlist_update",
            env_id,
            "ssh/set-allowed-ips",
            method="POST",
            body={"ip_allowlist": ip_allowlist},
        )

    @mcp.tool(name="kinsta_environments_ssh_config", annotations=READ_ONLY)
    async def ssh_config(site_id: str, env_id: str) -> CallToolResult:
        """Get SSH connection configuration (host, port, user) for an environment.

        Args:
            site_id: The site ID
            env_id: The environment ID
        """
        error = validate_ids(site_id=site_id, env_id=env_id)
        if error:
            return format_validation_error(error)

        return await server.call_kinsta(
            "kinsta_environments_ssh_config",
            f"/sites/{site_id}/environments/{env_id}/ssh/config",
            resource_type="environment",
        )

    @mcp.tool(name="kinsta_environments_ssh_password_expiration", annotations=MUTATING)
    async def ssh_password_expiration(env_id: str, exp_interval: int) -> CallToolResult:
        """Change the SSH password expiration interval for an environment.

        Args:
            env_id: The environment ID
            exp_interval: Password expiration interval in seconds
        """
        return await env_request(
            "kinsta_environments_ssh_password_expiration",
            env_id,
            "ssh/change-expiration-interval",
            method="POST",
            body={"exp_interval": exp_interval},
        )

    # -------------------------------------------------------------------------
    # WP-CLI and phpMyAdmin
    # -------------------------------------------------------------------------

    @mcp.tool(name="kinsta_environments_wp_cli", annotations=DESTRUCTIVE)
    async def wp_cli(env_id: str, wp_command: str) -> CallToolResult:
        """Run a WP-CLI command on an environment. The command must start with 'wp '.

        Args:
            env_id: The environment ID
            wp_command: WP-CLI command to run (e.g. "wp plugin list")
        """
        return await env_request(
            "kinsta_environments_wp_cli",
            env_id,
            "run-wp-cli-command",
            method="POST",
            body={"wp_command": wp_command},
        )

    @mcp.tool(name="kinsta_environments_phpmyadmin", annotations=MUTATING)
    async def phpmyadmin(env_id: str) -> CallToolResult:
        """Get a phpMyAdmin login token for an environment's database.

        Args:
            env_id: The environment ID
        """
        return await env_request(
            "kinsta_environments_phpmyadmin",
            env_id,
            "pma-login-token",
            method="POST",
        )
