"""ABOUTME: Company-level tools - users, regions, API keys and activity logs."""

from typing import TYPE_CHECKING, Literal, Optional

from mcp.types import CallToolResult

from ..common.validation import build_params
from .annotations import READ_ONLY

if TYPE_CHECKING:
    from ..server import KinstaMCPServer

ActivityCategory = Literal[
    "siteActions",
    "kinstaDns",
    "migrations",
    "billing",
    "notifications",
    "userManagement",
    "personalSettings",
    "samlSso",
]
LogLanguage = Literal["da", "de", "en", "es", "fr", "it", "ja", "nl", "pt", "sv"]


def register_company_tools(server: "KinstaMCPServer") -> None:
    mcp = server.get_mcp()

    @mcp.tool(name="kinsta_company_users", title="List Company Users", annotations=READ_ONLY)
    async def company_users() -> CallToolResult:
        """List all users in your Kinsta company."""
        return await server.call_kinsta(
            "kinsta_company_users",
            lambda company: f"/company/{company}/users",
            resource_type="company",
        )

    @mcp.tool(name="kinsta_company_regions", title="List Available Regions", annotations=READ_ONLY)
    async def company_regions() -> CallToolResult:
        """List all available deployment regions for your Kinsta company."""
        return await server.call_kinsta(
            "kinsta_company_regions",
            lambda company: f"/company/{company}/available-regions",
            resource_type="company",
        )

    @mcp.tool(name="kinsta_company_api_keys", title="List API Keys", annotations=READ_ONLY)
    async def company_api_keys() -> CallToolResult:
        """List all API keys for your Kinsta company."""
        return await server.call_kinsta(
            "kinsta_company_api_keys",
            lambda company: f"/company/{company}/api-keys",
            resource_type="company",
        )

    @mcp.tool(name="kinsta_company_activity_logs", title="List Activity Logs", annotations=READ_ONLY)
    async def company_activity_logs(
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        category: Optional[ActivityCategory] = None,
        site_id: Optional[str] = None,
        id_initiated_by: Optional[str] = None,
        id_api_key: Optional[str] = None,
        language: Optional[LogLanguage] = None,
    ) -> CallToolResult:
        """List activity logs for your Kinsta company. Supports filtering and pagination.

        Args:
            limit: Number of results to return
            offset: Offset for pagination
            category: Filter by activity category
            site_id: Filter by site ID
            id_initiated_by: Filter by user ID who initiated the action
            id_api_key: Filter by API key ID
            language: Language for log messages
        """
        return await server.call_kinsta(
            "kinsta_company_activity_logs",
            lambda company: f"/company/{company}/activity-logs",
            params=build_params(
                limit=limit,
                offset=offset,
                category=category,
                site_id=site_id,
                id_initiated_by=id_initiated_by,
                id_api_key=id_api_key,
                language=language,
            ),
            resource_type="company",
        )
