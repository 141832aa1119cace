"""ABOUTME: Site tools - list, inspect, create, clone, reset and delete Kinsta sites.

Site creation, cloning and reset are asynchronous on Kinsta's side: they return
an operation_id to poll with kinsta_operations_status.
"""

from typing import TYPE_CHECKING, Optional

from mcp.types import CallToolResult

from ..common.results import format_validation_error
from ..common.validation import (
    build_body,
    build_params,
    validate_id,
    validate_non_empty_string,
)
from .annotations import DESTRUCTIVE, MUTATING, READ_ONLY

if TYPE_CHECKING:
    from ..server import KinstaMCPServer


def register_site_tools(server: "KinstaMCPServer") -> None:
    mcp = server.get_mcp()

    @mcp.tool(name="kinsta_sites_list", annotations=READ_ONLY)
    async def sites_list(include_environments: Optional[bool] = None) -> CallToolResult:
        """List all WordPress sites in your Kinsta company. Optionally include environment details.

        Args:
            include_environments: Include environment details for each site
        """
        return await server.call_kinsta(
            "kinsta_sites_list",
            "/sites",
            params=lambda company: build_params(
                company=company,
                include_environments=include_environments,
            ),
            resource_type="site",
        )

    @mcp.tool(name="kinsta_sites_get", annotations=READ_ONLY)
    async def sites_get(site_id: str) -> CallToolResult:
        """Get details for a specific Kinsta site by its ID.

        Args:
            site_id: The site ID to retrieve
        """
        error = validate_id(site_id, "site_id")
        if error:
            return format_validation_error(error)

        return await server.call_kinsta(
            "kinsta_sites_get", f"/sites/{site_id}", resource_type="site"
        )

    @mcp.tool(name="kinsta_sites_create", annotations=MUTATING)
    async def sites_create(
        display_name: str,
        region: str,
        admin_email: str,
        admin_password: str,
        admin_user: str,
        site_title: str,
        wp_language: str,
        is_multisite: Optional[bool] = None,
        is_subdomain_multisite: Optional[bool] = None,
        woocommerce: Optional[bool] = None,
        wordpressseo: Optional[bool] = None,
    ) -> CallToolResult:
        """Create a new WordPress site on Kinsta. Returns an operation_id to track progress.

        Args:
            display_name: Display name for the new site
            region: Deployment region (use kinsta_company_regions to list available regions)
            admin_email: WordPress admin email
            admin_password: WordPress admin password
            admin_user: WordPress admin username
            site_title: WordPress site title
            wp_language: WordPress language code (e.g. en_US)
            is_multisite: Create as WordPress multisite
            is_subdomain_multisite: Use subdomain-based multisite
            woocommerce: Install WooCommerce
            wordpressseo: Install Yoast SEO
        """
        is_valid, error = validate_non_empty_string(display_name, "display_name")
        if not is_valid:
            return format_validation_error(error)

        return await server.call_kinsta(
            "kinsta_sites_create",
            "/sites",
            method="POST",
            body=lambda company: build_body(
                company=company,
                display_name=display_name,
                region=region,
                admin_email=admin_email,
                admin_password=admin_password,
                admin_user=admin_user,
                site_title=site_title,
                wp_language=wp_language,
                is_multisite=is_multisite,
                is_subdomain_multisite=is_subdomain_multisite,
                woocommerce=woocommerce,
                wordpressseo=wordpressseo,
            ),
            resource_type="site",
        )

    @mcp.tool(name="kinsta_sites_create_plain", annotations=MUTATING)
    async def sites_create_plain(display_name: str, region: str) -> CallToolResult:
        """Create a new plain (empty) site on Kinsta without WordPress installed. Returns an operation_id.

        Args:
            display_name: Display name for the new site
            region: Deployment region
        """
        is_valid, error = validate_non_empty_string(display_name, "display_name")
        if not is_valid:
            return format_validation_error(error)

        return await server.call_kinsta(
            "kinsta_sites_create_plain",
            "/sites/plain",
            method="POST",
            body=lambda company: {
                "company": company,
                "display_name": display_name,
                "region": region,
            },
            resource_type="site",
        )

    @mcp.tool(name="kinsta_sites_clone", annotations=MUTATING)
    async def sites_clone(display_name: str, source_env_id: str) -> CallToolResult:
        """Clone an existing site to create a new site. Returns an operation_id.

        Args:
            display_name: Display name for the cloned site
            source_env_id: Source environment ID to clone from
        """
        error = validate_id(source_env_id, "source_env_id")
        if error:
            return format_validation_error(error)

        is_valid, error = validate_non_empty_string(display_name, "display_name")
        if not is_valid:
            return format_validation_error(error)

        return await server.call_kinsta(
            "kinsta_sites_clone",
            "/sites/clone",
            method="POST",
            body=lambda company: {
                "company": company,
                "display_name": display_name,
                "source_env_id": source_env_id,
            },
            resource_type="site",
        )

    @mcp.tool(name="kinsta_sites_delete", annotations=DESTRUCTIVE)
    async def sites_delete(site_id: str) -> CallToolResult:
        """Delete a Kinsta site permanently. This action cannot be undone.

        Args:
            site_id: The site ID to delete
        """
        error = validate_id(site_id, "site_id")
        if error:
            return format_validation_error(error)

        return await server.call_kinsta(
            "kinsta_sites_delete", f"/sites/{site_id}", method="DELETE", resource_type="site"
        )

    @mcp.tool(name="kinsta_sites_reset", annotations=DESTRUCTIVE)
    async def sites_reset(site_id: str, admin_password: str) -> CallToolResult:
        """Reset a Kinsta site to a fresh WordPress install. This removes all existing data.

        Args:
            site_id: The site ID to reset
            admin_password: New WordPress admin password after reset
        """
        error = validate_id(site_id, "site_id")
        if error:
            return format_validation_error(error)

        return await server.call_kinsta(
            "kinsta_sites_reset",
            f"/sites/{site_id}/reset-site",
            method="POST",
            body={"admin_password": admin_password},
            resource_type="site",
        )
