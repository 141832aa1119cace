"""ABOUTME: Additional SFTP/SSH account tools - list, toggle, add and remove per environment."""

from typing import TYPE_CHECKING

from mcp.types import CallToolResult

from ..common.results import format_validation_error
from ..common.validation import validate_id, validate_ids
from .annotations import DESTRUCTIVE, MUTATING, READ_ONLY

if TYPE_CHECKING:
    from ..server import KinstaMCPServer


def register_sftp_user_tools(server: "KinstaMCPServer") -> None:
    mcp = server.get_mcp()

    @mcp.tool(name="kinsta_sftp_users_list", annotations=READ_ONLY)
    async def sftp_users_list(env_id: str) -> CallToolResult:
        """List additional SFTP/SSH user accounts for an environment.

        Args:
            env_id: The environment ID
        """
        error = validate_id(env_id, "env_id")
        if error:
            return format_validation_error(error)

        return await server.call_kinsta(
            "kinsta_sftp_users_list",
            f"/sites/environments/{env_id}/additional-sftp-accounts",
            resource_type="SFTP account",
        )

    @mcp.tool(name="kinsta_sftp_users_toggle", annotations=MUTATING)
    async def sftp_users_toggle(env_id: str, is_enabled: bool) -> CallToolResult:
        """Enable or disable additional SFTP/SSH accounts for an environment.

        Args:
            env_id: The environment ID
            is_enabled: True to enable additional accounts, False to disable them
        """
        error = validate_id(env_id, "env_id")
        if error:
            return format_validation_error(error)

        return await server.call_kinsta(
            "kinsta_sftp_users_toggle",
            f"/sites/environments/{env_id}/additional-sftp-accounts/toggle",
            method="PUT",
            body={"is_enabled": is_enabled},
            resource_type="SFTP account",
        )

    @mcp.tool(name="kinsta_sftp_users_add", annotations=MUTATING)
    async def sftp_users_add(env_id: str, username: str, password: str) -> CallToolResult:
        """Add an additional SFTP/SSH user account to an environment.

        Args:
            env_id: The environment ID
            username: Username for the new account
            password: Password for the new account
        """
        error = validate_id(env_id, "env_id")
        if error:
            return format_validation_error(error)

        return await server.call_kinsta(
            "kinsta_sftp_users_add",
            f"/sites/environments/{env_id}/additional-sftp-accounts",
            method="POST",
            body={"username": username, "password": password},
            resource_type="SFTP account",
        )

    @mcp.tool(name="kinsta_sftp_users_remove", annotations=DESTRUCTIVE)
    async def sftp_users_remove(env_id: str, account_id: str) -> CallToolResult:
        """Remove an additional SFTP/SSH user account from an environment.

        Args:
            env_id: The environment ID
            account_id: The SFTP account ID to remove
        """
        error = validate_ids(env_id=env_id, account_id=account_id)
        if error:
            return format_validation_error(error)

        return await server.call_kinsta(
            "kinsta_sftp_users_remove",
            f"/sites/environments/{env_id}/additional-sftp-accounts/{account_id}",
            method="DELETE",
            resource_type="SFTP account",
        )
