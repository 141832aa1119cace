"""ABOUTME: Analytics tools - visits, bandwidth, CDN bandwidth and disk space per environment.

All analytics endpoints share one input shape, so the tools are generated from
ANALYTICS_METRICS instead of being written out one by one.
"""

from typing import TYPE_CHECKING, Optional

from mcp.types import CallToolResult

from ..common.results import format_validation_error
from ..common.validation import build_params, validate_id
from .annotations import READ_ONLY

if TYPE_CHECKING:
    from ..server import KinstaMCPServer

# (tool name, path suffix, description)
ANALYTICS_METRICS = (
    (
        "kinsta_analytics_visits",
        "visits",
        "Get visitor analytics for an environment over a date range.",
    ),
    (
        "kinsta_analytics_bandwidth",
        "bandwidth",
        "Get bandwidth analytics for an environment over a date range.",
    ),
    (
        "kinsta_analytics_cdn_bandwidth",
        "cdn-bandwidth",
        "Get CDN bandwidth analytics for an environment over a date range.",
    ),
    (
        "kinsta_analytics_disk_space",
        "disk-space",
        "Get disk space usage analytics for an environment.",
    ),
)


def _register_analytics_tool(
    server: "KinstaMCPServer",
    tool_name: str,
    path_suffix: str,
    description: str,
) -> None:
    async def analytics_tool(
        env_id: str,
        timeframe_start: Optional[str] = None,
        timeframe_end: Optional[str] = None,
    ) -> CallToolResult:
        error = validate_id(env_id, "env_id")
        if error:
            return format_validation_error(error)

        return await server.call_kinsta(
            tool_name,
            f"/sites/environments/{env_id}/analytics/{path_suffix}",
            params=build_params(timeframe_start=timeframe_start, timeframe_end=timeframe_end),
            resource_type="analytics",
        )

    server.get_mcp().tool(
        name=tool_name,
        description=(
            f"{description}\n\n"
            "Args:\n"
            "    env_id: The environment ID\n"
            "    timeframe_start: Start of the period (ISO 8601)\n"
            "    timeframe_end: End of the period (ISO 8601)"
        ),
        annotations=READ_ONLY,
    )(analytics_tool)


def register_analytics_tools(server: "KinstaMCPServer") -> None:
    for tool_name, path_suffix, description in ANALYTICS_METRICS:
        _register_analytics_tool(server, tool_name, path_suffix, description)
