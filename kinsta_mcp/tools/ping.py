"""ABOUTME: kinsta_ping - confirms the server is running and credentials are configured.

Makes no API calls to Kinsta.
"""

from typing import TYPE_CHECKING

from mcp.types import CallToolResult, TextContent

from ..common.results import format_message
from ..constants import ENV_API_KEY, ENV_COMPANY_ID
from ..kinsta.config import is_kinsta_configured
from .annotations import LOCAL_READ_ONLY

if TYPE_CHECKING:
    from ..server import KinstaMCPServer

NOT_CONFIGURED_MESSAGE = (
    "Kinsta MCP server is running, but API credentials are not configured.\n\n"
    "Please set the following environment variables:\n"
    f"  - {ENV_API_KEY}: Your Kinsta API key (from MyKinsta > Company settings > API Keys)\n"
    f"  - {ENV_COMPANY_ID}: Your Kinsta company ID"
)
CONFIGURED_MESSAGE = "Kinsta MCP server is running and API credentials are configured."


def register_ping_tool(server: "KinstaMCPServer") -> None:
    mcp = server.get_mcp()

    @mcp.tool(name="kinsta_ping", title="Ping", annotations=LOCAL_READ_ONLY)
    async def kinsta_ping() -> CallToolResult:
        """Check that the Kinsta MCP server is running and that API credentials are configured.

        Does not make any API calls to Kinsta.
        """
        if not is_kinsta_configured():
            server.logger.warning("kinsta_ping: credentials not configured")
            return CallToolResult(
                content=[TextContent(type="text", text=NOT_CONFIGURED_MESSAGE)],
                isError=True,
            )
        return format_message(CONFIGURED_MESSAGE)
