"""ABOUTME: Operation status polling and API key validation tools."""

from typing import TYPE_CHECKING

from mcp.types import CallToolResult

from ..common.results import format_validation_error
from ..common.validation import OPERATION_ID_PATTERN, validate_id
from .annotations import READ_ONLY

if TYPE_CHECKING:
    from ..server import KinstaMCPServer


def register_operation_tools(server: "KinstaMCPServer") -> None:
    mcp = server.get_mcp()

    @mcp.tool(name="kinsta_operations_status", annotations=READ_ONLY)
    async def operations_status(operation_id: str) -> CallToolResult:
        """Check the status of an asynchronous Kinsta operation by its operation ID.

        Many Kinsta actions (site creation, backups, cache clearing, etc.) return an
        operation_id that can be polled here to track progress.

        Args:
            operation_id: The operation ID to check status for
        """
        error = validate_id(operation_id, "operation_id", OPERATION_ID_PATTERN)
        if error:
            return format_validation_error(error)

        return await server.call_kinsta(
            "kinsta_operations_status",
            f"/operations/{operation_id}",
            resource_type="operation",
        )

    @mcp.tool(name="kinsta_auth_validate", annotations=READ_ONLY)
    async def auth_validate() -> CallToolResult:
        """Validate the current Kinsta API key. Returns account information if the key is valid."""
        return await server.call_kinsta("kinsta_auth_validate", "/validate")
