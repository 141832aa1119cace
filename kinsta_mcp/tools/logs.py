"""ABOUTME: Log tool - read error.log / access.log contents for an environment."""

from typing import TYPE_CHECKING, Optional

from mcp.types import CallToolResult

from ..common.results import format_validation_error
from ..common.validation import build_params, validate_id
from .annotations import READ_ONLY

if TYPE_CHECKING:
    from ..server import KinstaMCPServer


def register_log_tools(server: "KinstaMCPServer") -> None:
    mcp = server.get_mcp()

    @mcp.tool(name="kinsta_logs_get", title="Get Logs", annotations=READ_ONLY)
    async def logs_get(
        env_id: str,
        file_name: Optional[str] = None,
        lines: Optional[int] = None,
    ) -> CallToolResult:
        """Get log file contents for an environment. Supports error.log and access.log.

        Args:
            env_id: The environment ID
            file_name: Log file name (e.g. error.log, access.log)
            lines: Number of log lines to return
        """
        error = validate_id(env_id, "env_id")
        if error:
            return format_validation_error(error)

        return await server.call_kinsta(
            "kinsta_logs_get",
            f"/sites/environments/{env_id}/logs",
            params=build_params(file_name=file_name, lines=lines),
            resource_type="log",
        )
