"""ABOUTME: Kinsta MCP tool registry - registers every tool group on a server."""

from typing import TYPE_CHECKING

from .analytics import register_analytics_tools
from .backups import register_backup_tools
from .cache import register_cache_tools
from .company import register_company_tools
from .dns import register_dns_tools
from .domains import register_domain_tools
from .environment_access import register_environment_access_tools
from .environments import register_environment_tools
from .logs import register_log_tools
from .operations import register_operation_tools
from .ping import register_ping_tool
from .plugins_themes import register_plugin_theme_tools
from .sftp_users import register_sftp_user_tools
from .site_tools import register_site_tool_tools
from .sites import register_site_tools

if TYPE_CHECKING:
    from ..server import KinstaMCPServer


def register_tools(server: "KinstaMCPServer") -> None:
    """Register all Kinsta tools on the server."""
    register_ping_tool(server)
    register_operation_tools(server)
    register_company_tools(server)
    register_site_tools(server)
    register_environment_tools(server)
    register_environment_access_tools(server)
    register_site_tool_tools(server)
    register_domain_tools(server)
    register_dns_tools(server)
    register_cache_tools(server)
    register_backup_tools(server)
    register_log_tools(server)
    register_analytics_tools(server)
    register_plugin_theme_tools(server)
    register_sftp_user_tools(server)


__all__ = ["register_tools"]
