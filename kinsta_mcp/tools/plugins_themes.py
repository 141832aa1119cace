"""ABOUTME: WordPress plugin and theme tools - list, update and bulk-update per environment."""

from typing import TYPE_CHECKING, List

from mcp.types import CallToolResult

from ..common.results import format_validation_error
from ..common.validation import validate_id, validate_ids
from .annotations import MUTATING, READ_ONLY

if TYPE_CHECKING:
    from ..server import KinstaMCPServer


def register_plugin_theme_tools(server: "KinstaMCPServer") -> None:
    mcp = server.get_mcp()

    async def list_items(tool_name: str, env_id: str, suffix: str, noun: str) -> CallToolResult:
        error = validate_id(env_id, "env_id")
        if error:
            return format_validation_error(error)

        return await server.call_kinsta(
            tool_name, f"/sites/environments/{env_id}/{suffix}", resource_type=noun
        )

    async def bulk_update(
        tool_name: str, env_id: str, suffix: str, noun: str, field: str, ids: List[str]
    ) -> CallToolResult:
        error = validate_id(env_id, "env_id")
        if error:
            return format_validation_error(error)

        return await server.call_kinsta(
            tool_name,
            f"/sites/environments/{env_id}/{suffix}/bulk-update",
            method="PUT",
            body={field: ids},
            resource_type=noun,
        )

    # -------------------------------------------------------------------------
    # Plugins
    # -------------------------------------------------------------------------

    @mcp.tool(name="kinsta_plugins_list", annotations=READ_ONLY)
    async def plugins_list(env_id: str) -> CallToolResult:
        """List all plugins installed on a Kinsta environment.

        Args:
            env_id: The environment ID
        """
        return await list_items("kinsta_plugins_list", env_id, "plugins", "plugin")

    @mcp.tool(name="kinsta_plugins_update", annotations=MUTATING)
    async def plugins_update(env_id: str, plugin_id: str) -> CallToolResult:
        """Update a single plugin to its latest version. Returns an operation_id.

        Args:
            env_id: The environment ID
            plugin_id: The plugin ID to update
        """
        error = validate_ids(env_id=env_id, plugin_id=plugin_id)
        if error:
            return format_validation_error(error)

        return await server.call_kinsta(
            "kinsta_plugins_update",
            f"/sites/environments/{env_id}/plugins/{plugin_id}",
            method="PUT",
            resource_type="plugin",
        )

    @mcp.tool(name="kinsta_plugins_bulk_update", annotations=MUTATING)
    async def plugins_bulk_update(env_id: str, plugin_ids: List[str]) -> CallToolResult:
        """Update several plugins to their latest versions at once. Returns an operation_id.

        Args:
            env_id: The environment ID
            plugin_ids: Plugin IDs to update
        """
        return await bulk_update(
            "kinsta_plugins_bulk_update", env_id, "plugins", "plugin", "plugin_ids", plugin_ids
        )

    @mcp.tool(name="kinsta_plugins_list_wp", annotations=READ_ONLY)
    async def plugins_list_wp(env_id: str) -> CallToolResult:
        """List plugins with details from the WordPress.org repository for an environment.

        Args:
            env_id: The environment ID
        """
        return await list_items("kinsta_plugins_list_wp", env_id, "wordpress-plugins", "plugin")

    # -------------------------------------------------------------------------
    # Themes
    # -------------------------------------------------------------------------

    @mcp.tool(name="kinsta_themes_list", annotations=READ_ONLY)
    async def themes_list(env_id: str) -> CallToolResult:
        """List all themes installed on a Kinsta environment.

        Args:
            env_id: The environment ID
        """
        return await list_items("kinsta_themes_list", env_id, "themes", "theme")

    @mcp.tool(name="kinsta_themes_update", annotations=MUTATING)
    async def themes_update(env_id: str, theme_id: str) -> CallToolResult:
        """Update a single theme to its latest version. Returns an operation_id.

        Args:
            env_id: The environment ID
            theme_id: The theme ID to update
        """
        error = validate_ids(env_id=env_id, theme_id=theme_id)
        if error:
            return format_validation_error(error)

        return await server.call_kinsta(
            "kinsta_themes_update",
            f"/sites/environments/{env_id}/themes/{theme_id}",
            method="PUT",
            resource_type="theme",
        )

    @mcp.tool(name="kinsta_themes_bulk_update", annotations=MUTATING)
    async def themes_bulk_update(env_id: str, theme_ids: List[str]) -> CallToolResult:
        """Update several themes to their latest versions at once. Returns an operation_id.

        Args:
            env_id: The environment ID
            theme_ids: Theme IDs to update
        """
        return await bulk_update(
            "kinsta_themes_bulk_update", env_id, "themes", "theme", "theme_ids", theme_ids
        )

    @mcp.tool(name="kinsta_themes_list_wp", annotations=READ_ONLY)
    async def themes_list_wp(env_id: str) -> CallToolResult:
        """List themes with details from the WordPress.org repository for an environment.

        Args:
            env_id: The environment ID
        """
        return await list_items("kinsta_themes_list_wp", env_id, "wordpress-themes", "theme")
