"""ABOUTME: Environment tools - lifecycle, PHP workers, webroot, files and redirect rules."""

from typing import TYPE_CHECKING, Any, Dict, List, Literal, Optional

from mcp.types import CallToolResult

from ..common.results import format_validation_error
from ..common.validation import build_body, build_params, validate_id, validate_ids
from .annotations import DESTRUCTIVE, MUTATING, READ_ONLY

if TYPE_CHECKING:
    from ..server import KinstaMCPServer

PushFilesOption = Literal["ALL_FILES", "SPECIFIC_FILES"]
RedirectAction = Literal["DELETE", "DELETE_ALL", "NEW", "UPDATE"]


def register_environment_tools(server: "KinstaMCPServer") -> None:
    mcp = server.get_mcp()

    @mcp.tool(name="kinsta_environments_list", annotations=READ_ONLY)
    async def environments_list(site_id: str) -> CallToolResult:
        """List all environments (live, staging, premium staging) for a site.

        Args:
            site_id: The site ID to list environments for
        """
        error = validate_id(site_id, "site_id")
        if error:
            return format_validation_error(error)

        return await server.call_kinsta(
            "kinsta_environments_list",
            f"/sites/{site_id}/environments",
            resource_type="environment",
        )

    @mcp.tool(name="kinsta_environments_create", annotations=MUTATING)
    async def environments_create(
        site_id: str,
        display_name: str,
        site_title: str,
        is_premium: bool,
        admin_email: str,
        admin_password: str,
        admin_user: str,
        wp_language: str,
        is_multisite: Optional[bool] = None,
        is_subdomain_multisite: Optional[bool] = None,
        woocommerce: Optional[bool] = None,
        wordpress_plugin_edd: Optional[bool] = None,
        wordpressseo: Optional[bool] = None,
    ) -> CallToolResult:
        """Create a new WordPress environment for a site. Returns an operation_id.

        Args:
            site_id: The site ID to create the environment for
            display_name: Display name for the environment
            site_title: WordPress site title
            is_premium: Whether this is a premium staging environment
            admin_email: WordPress admin email
            admin_password: WordPress admin password
            admin_user: WordPress admin username
            wp_language: WordPress language code (e.g. en_US)
            is_multisite: Create as WordPress multisite
            is_subdomain_multisite: Use subdomain-based multisite
            woocommerce: Install WooCommerce
            wordpress_plugin_edd: Install Easy Digital Downloads
            wordpressseo: Install Yoast SEO
        """
        error = validate_id(site_id, "site_id")
        if error:
            return format_validation_error(error)

        return await server.call_kinsta(
            "kinsta_environments_create",
            f"/sites/{site_id}/environments",
            method="POST",
            body=build_body(
                display_name=display_name,
                site_title=site_title,
                is_premium=is_premium,
                admin_email=admin_email,
                admin_password=admin_password,
                admin_user=admin_user,
                wp_language=wp_language,
                is_multisite=is_multisite,
                is_subdomain_multisite=is_subdomain_multisite,
                woocommerce=woocommerce,
                wordpress_plugin_edd=wordpress_plugin_edd,
                wordpressseo=wordpressseo,
            ),
            resource_type="environment",
        )

    @mcp.tool(name="kinsta_environments_create_plain", annotations=MUTATING)
    async def environments_create_plain(
        site_id: str,
        display_name: str,
        is_premium: bool,
    ) -> CallToolResult:
        """Create a new plain (empty) environment for a site. Returns an operation_id.

        Args:
            site_id: The site ID to create the environment for
            display_name: Display name for the environment
            is_premium: Whether this is a premium staging environment
        """
        error = validate_id(site_id, "site_id")
        if error:
            return format_validation_error(error)

        return await server.call_kinsta(
            "kinsta_environments_create_plain",
            f"/sites/{site_id}/environments/plain",
            method="POST",
            body={"display_name": display_name, "is_premium": is_premium},
            resource_type="environment",
        )

    @mcp.tool(name="kinsta_environments_clone", annotations=MUTATING)
    async def environments_clone(
        site_id: str,
        display_name: str,
        is_premium: bool,
        source_env_id: str,
    ) -> CallToolResult:
        """Clone an existing environment to create a new one. Returns an operation_id.

        Args:
            site_id: The site ID to create the environment for
            display_name: Display name for the cloned environment
            is_premium: Whether this is a premium staging environment
            source_env_id: Source environment ID to clone from
        """
        error = validate_ids(site_id=site_id, source_env_id=source_env_id)
        if error:
            return format_validation_error(error)

        return await server.call_kinsta(
            "kinsta_environments_clone",
            f"/sites/{site_id}/environments/clone",
            method="POST",
            body={
                "display_name": display_name,
                "is_premium": is_premium,
                "source_env_id": source_env_id,
            },
            resource_type="environment",
        )

    @mcp.tool(name="kinsta_environments_push", annotations=MUTATING)
    async def environments_push(
        site_id: str,
        source_env_id: str,
        target_env_id: str,
        push_db: Optional[bool] = None,
        push_files: Optional[bool] = None,
        run_search_and_replace: Optional[bool] = None,
        push_files_option: Optional[PushFilesOption] = None,
        file_list: Optional[List[str]] = None,
    ) -> CallToolResult:
        """Push one environment to another (e.g. staging to live). Returns an operation_id.

        Args:
            site_id: The site ID
            source_env_id: Source environment ID to push from
            target_env_id: Target environment ID to push to
            push_db: Push the database
            push_files: Push files
            run_search_and_replace: Run search and replace on the database
            push_files_option: Which files to push (ALL_FILES or SPECIFIC_FILES)
            file_list: Specific files to push when push_files_option is SPECIFIC_FILES
        """
        error = validate_ids(
            site_id=site_id,
            source_env_id=source_env_id,
            target_env_id=target_env_id,
        )
        if error:
            return format_validation_error(error)

        return await server.call_kinsta(
            "kinsta_environments_push",
            f"/sites/{site_id}/environments",
            method="PUT",
            body=build_body(
                source_env_id=source_env_id,
                target_env_id=target_env_id,
                push_db=push_db,
                push_files=push_files,
                run_search_and_replace=run_search_and_replace,
                push_files_option=push_files_option,
                file_list=file_list,
            ),
            resource_type="environment",
        )

    @mcp.tool(name="kinsta_environments_delete", annotations=DESTRUCTIVE)
    async def environments_delete(env_id: str) -> CallToolResult:
        """Delete an environment. This action cannot be undone.

        Args:
            env_id: The environment ID to delete
        """
        error = validate_id(env_id, "env_id")
        if error:
            return format_validation_error(error)

        return await server.call_kinsta(
            "kinsta_environments_delete",
            f"/sites/environments/{env_id}",
            method="DELETE",
            resource_type="environment",
        )

    # -------------------------------------------------------------------------
    # PHP and webroot
    # -------------------------------------------------------------------------

    @mcp.tool(name="kinsta_environments_php_allocation", annotations=MUTATING)
    async def environments_php_allocation(
        env_id: str,
        thread_count: int,
        thread_memory: int,
    ) -> CallToolResult:
        """Change PHP worker allocation for a single environment. Returns an operation_id.

        Args:
            env_id: The environment ID
            thread_count: Number of PHP worker threads
            thread_memory: Memory per PHP worker thread in MB
        """
        error = validate_id(env_id, "env_id")
        if error:
            return format_validation_error(error)

        return await server.call_kinsta(
            "kinsta_environments_php_allocation",
            f"/sites/environments/{env_id}/change-environment-php-allocation",
            method="POST",
            body={"thread_count": thread_count, "thread_memory": thread_memory},
            resource_type="environment",
        )

    @mcp.tool(name="kinsta_environments_php_allocation_site", annotations=MUTATING)
    async def environments_php_allocation_site(
        site_id: str,
        thread_count: int,
        thread_memory: int,
    ) -> CallToolResult:
        """Change PHP worker allocation for every environment of a site. Returns an operation_id.

        Args:
            site_id: The site ID
            thread_count: Number of PHP worker threads
            thread_memory: Memory per PHP worker thread in MB
        """
        error = validate_id(site_id, "site_id")
        if error:
            return format_validation_error(error)

        return await server.call_kinsta(
            "kinsta_environments_php_allocation_site",
            f"/sites/{site_id}/change-site-php-allocation",
            method="POST",
            body={"thread_count": thread_count, "thread_memory": thread_memory},
            resource_type="site",
        )

    @mcp.tool(name="kinsta_environments_webroot", annotations=MUTATING)
    async def environments_webroot(
        env_id: str,
        web_root_subfolder: str,
        clear_all_cache: Optional[bool] = None,
        refresh_plugins_and_themes: Optional[bool] = None,
    ) -> CallToolResult:
        """Change the webroot subfolder for an environment. Returns an operation_id.

        Args:
            env_id: The environment ID
            web_root_subfolder: New webroot subfolder path
            clear_all_cache: Clear all caches after the change
            refresh_plugins_and_themes: Refresh plugins and themes after the change
        """
        error = validate_id(env_id, "env_id")
        if error:
            return format_validation_error(error)

        return await server.call_kinsta(
            "kinsta_environments_webroot",
            f"/sites/environments/{env_id}/change-webroot-subfolder",
            method="POST",
            body=build_body(
                web_root_subfolder=web_root_subfolder,
                clear_all_cache=clear_all_cache,
                refresh_plugins_and_themes=refresh_plugins_and_themes,
            ),
            resource_type="environment",
        )

    # -------------------------------------------------------------------------
    # Files and redirects
    # -------------------------------------------------------------------------

    @mcp.tool(name="kinsta_environments_files", annotations=READ_ONLY)
    async def environments_files(env_id: str) -> CallToolResult:
        """List files in an environment's file system.

        Args:
            env_id: The environment ID
        """
        error = validate_id(env_id, "env_id")
        if error:
            return format_validation_error(error)

        return await server.call_kinsta(
            "kinsta_environments_files",
            f"/sites/environments/{env_id}/file-list",
            resource_type="environment",
        )

    @mcp.tool(name="kinsta_environments_redirects", annotations=READ_ONLY)
    async def environments_redirects(
        env_id: str,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        key: Optional[str] = None,
        order: Optional[str] = None,
        search_query: Optional[str] = None,
        regex_search: Optional[bool] = None,
    ) -> CallToolResult:
        """List redirect rules for an environment. Supports filtering and pagination.

        Args:
            env_id: The environment ID
            limit: Number of results to return
            offset: Offset for pagination
            key: Sort key
            order: Sort order (asc or desc)
            search_query: Search term to filter redirects
            regex_search: Treat search_query as a regular expression
        """
        error = validate_id(env_id, "env_id")
        if error:
            return format_validation_error(error)

        return await server.call_kinsta(
            "kinsta_environments_redirects",
            f"/sites/environments/{env_id}/redirect-rules",
            params=build_params(
                limit=limit,
                offset=offset,
                key=key,
                order=order,
                search_query=search_query,
                regex_search=regex_search,
            ),
            resource_type="redirect",
        )

    @mcp.tool(name="kinsta_environments_redirects_update", annotations=DESTRUCTIVE)
    async def environments_redirects_update(
        env_id: str,
        action_type: RedirectAction,
        rules_to_update: Optional[List[Dict[str, Any]]] = None,
        new_value: Optional[Dict[str, Any]] = None,
    ) -> CallToolResult:
        """Create, update or delete redirect rules for an environment.

        Args:
            env_id: The environment ID
            action_type: DELETE, DELETE_ALL, NEW or UPDATE
            rules_to_update: Rules to update or delete
            new_value: New redirect rule to create
        """
        error = validate_id(env_id, "env_id")
        if error:
            return format_validation_error(error)

        return await server.call_kinsta(
            "kinsta_environments_redirects_update",
            f"/sites/environments/{env_id}/redirect-rules",
            method="POST",
            body=build_body(
                action_type=action_type,
                rules_to_update=rules_to_update,
                new_value=new_value,
            ),
            resource_type="redirect",
        )
