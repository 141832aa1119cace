"""ABOUTME: Backup tools - list, create, restore and delete environment backups."""

from typing import TYPE_CHECKING, Optional

from mcp.types import CallToolResult

from ..common.results import format_validation_error
from ..common.validation import build_body, validate_id, validate_ids
from .annotations import DESTRUCTIVE, MUTATING, READ_ONLY

if TYPE_CHECKING:
    from ..server import KinstaMCPServer


def register_backup_tools(server: "KinstaMCPServer") -> None:
    mcp = server.get_mcp()

    @mcp.tool(name="kinsta_backups_list", annotations=READ_ONLY)
    async def backups_list(env_id: str) -> CallToolResult:
        """List all backups for an environment.

        Args:
            env_id: The environment ID
        """
        error = validate_id(env_id, "env_id")
        if error:
            return format_validation_error(error)

        return await server.call_kinsta(
            "kinsta_backups_list",
            f"/sites/environments/{env_id}/backups",
            resource_type="backup",
        )

    @mcp.tool(name="kinsta_backups_downloadable", annotations=READ_ONLY)
    async def backups_downloadable(env_id: str) -> CallToolResult:
        """List downloadable backups for an environment.

        Args:
            env_id: The environment ID
        """
        error = validate_id(env_id, "env_id")
        if error:
            return format_validation_error(error)

        return await server.call_kinsta(
            "kinsta_backups_downloadable",
            f"/sites/environments/{env_id}/backups/downloadable",
            resource_type="backup",
        )

    @mcp.tool(name="kinsta_backups_create", annotations=MUTATING)
    async def backups_create(env_id: str, tag: Optional[str] = None) -> CallToolResult:
        """Create a manual backup for an environment. Returns an operation_id.

        Args:
            env_id: The environment ID
            tag: Optional tag/label for the backup
        """
        error = validate_id(env_id, "env_id")
        if error:
            return format_validation_error(error)

        # No body at all when there is nothing to send
        body = build_body(tag=tag) or None
        return await server.call_kinsta(
            "kinsta_backups_create",
            f"/sites/environments/{env_id}/backups/manual",
            method="POST",
            body=body,
            resource_type="backup",
        )

    @mcp.tool(name="kinsta_backups_restore", annotations=DESTRUCTIVE)
    async def backups_restore(env_id: str, backup_id: str) -> CallToolResult:
        """Restore an environment from a backup. This overwrites the current environment. Returns an operation_id.

        Args:
            env_id: The environment ID to restore to
            backup_id: The backup ID to restore from
        """
        error = validate_id(env_id, "env_id")
        if error:
            return format_validation_error(error)

        return await server.call_kinsta(
            "kinsta_backups_restore",
            f"/sites/environments/{env_id}/backups/restore",
            method="POST",
            body={"backup_id": backup_id},
            resource_type="backup",
        )

    @mcp.tool(name="kinsta_backups_delete", annotations=DESTRUCTIVE)
    async def backups_delete(env_id: str, backup_id: str) -> CallToolResult:
        """Delete a backup. This action cannot be undone.

        Args:
            env_id: The environment ID
            backup_id: The backup ID to delete
        """
        error = validate_ids(env_id=env_id, backup_id=backup_id)
        if error:
            return format_validation_error(error)

        return await server.call_kinsta(
            "kinsta_backups_delete",
            f"/sites/environments/{env_id}/backups/{backup_id}",
            method="DELETE",
            resource_type="backup",
        )
