"""ABOUTME: Edge cache and CDN tools for an environment."""

from typing import TYPE_CHECKING, Optional

from mcp.types import CallToolResult

from ..common.results import format_validation_error
from ..common.validation import build_body, validate_id
from .annotations import MUTATING

if TYPE_CHECKING:
    from ..server import KinstaMCPServer


def register_cache_tools(server: "KinstaMCPServer") -> None:
    mcp = server.get_mcp()

    @mcp.tool(name="kinsta_edge_cache_clear", annotations=MUTATING)
    async def edge_cache_clear(env_id: str) -> CallToolResult:
        """Clear the edge cache for an environment. Returns an operation_id.

        Args:
            env_id: The environment ID
        """
        error = validate_id(env_id, "env_id")
        if error:
            return format_validation_error(error)

        return await server.call_kinsta(
            "kinsta_edge_cache_clear",
            f"/sites/environments/{env_id}/edge-cache/clear",
            method="POST",
            resource_type="environment",
        )

    @mcp.tool(name="kinsta_edge_cache_toggle", annotations=MUTATING)
    async def edge_cache_toggle(env_id: str, is_enabled: bool) -> CallToolResult:
        """Enable or disable edge caching for an environment.

        Args:
            env_id: The environment ID
            is_enabled: Whether to enable (true) or disable (false) edge caching
        """
        error = validate_id(env_id, "env_id")
        if error:
            return format_validation_error(error)

        return await server.call_kinsta(
            "kinsta_edge_cache_toggle",
            f"/sites/environments/{env_id}/edge-cache/status",
            method="PUT",
            body={"is_enabled": is_enabled},
            resource_type="environment",
        )

    @mcp.tool(name="kinsta_cdn_cache_clear", annotations=MUTATING)
    async def cdn_cache_clear(env_id: str) -> CallToolResult:
        """Clear the CDN cache for an environment. Returns an operation_id.

        Args:
            env_id: The environment ID
        """
        error = validate_id(env_id, "env_id")
        if error:
            return format_validation_error(error)

        return await server.call_kinsta(
            "kinsta_cdn_cache_clear",
            f"/sites/environments/{env_id}/cdn-cache/clear",
            method="POST",
            resource_type="environment",
        )

    @mcp.tool(name="kinsta_cdn_image_optimization", annotations=MUTATING)
    async def cdn_image_optimization(
        env_id: str,
        is_enabled: bool,
        is_lossless: Optional[bool] = None,
    ) -> CallToolResult:
        """Configure CDN image optimization settings for an environment.

        Args:
            env_id: The environment ID
            is_enabled: Whether to enable image optimization
            is_lossless: Use lossless compression (true) or lossy (false)
        """
        error = validate_id(env_id, "env_id")
        if error:
            return format_validation_error(error)

        return await server.call_kinsta(
            "kinsta_cdn_image_optimization",
            f"/sites/environments/{env_id}/cdn/image-optimization",
            method="PUT",
            body=build_body(is_enabled=is_enabled, is_lossless=is_lossless),
            resource_type="environment",
        )
