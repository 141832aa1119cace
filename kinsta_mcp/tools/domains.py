"""ABOUTME: Domain tools - list, add, remove, verify and set the primary domain."""

from typing import TYPE_CHECKING, List

from mcp.types import CallToolResult

from ..common.results import format_validation_error
from ..common.validation import validate_id, validate_ids
from .annotations import DESTRUCTIVE, MUTATING, READ_ONLY

if TYPE_CHECKING:
    from ..server import KinstaMCPServer


def register_domain_tools(server: "KinstaMCPServer") -> None:
    mcp = server.get_mcp()

    @mcp.tool(name="kinsta_domains_list", annotations=READ_ONLY)
    async def domains_list(env_id: str) -> CallToolResult:
        """List all custom domains for an environment.

        Args:
            env_id: The environment ID
        """
        error = validate_id(env_id, "env_id")
        if error:
            return format_validation_error(error)

        return await server.call_kinsta(
            "kinsta_domains_list",
            f"/sites/environments/{env_id}/domains",
            resource_type="domain",
        )

    @mcp.tool(name="kinsta_domains_add", annotations=MUTATING)
    async def domains_add(env_id: str, domain_name: str) -> CallToolResult:
        """Add a custom domain to an environment.

        Args:
            env_id: The environment ID
            domain_name: The domain name to add (e.g. example.com)
        """
        error = validate_id(env_id, "env_id")
        if error:
            return format_validation_error(error)

        return await server.call_kinsta(
            "kinsta_domains_add",
            f"/sites/environments/{env_id}/domains",
            method="POST",
            body={"domain_name": domain_name},
            resource_type="domain",
        )

    @mcp.tool(name="kinsta_domains_delete", annotations=DESTRUCTIVE)
    async def domains_delete(env_id: str, domain_ids: List[str]) -> CallToolResult:
        """Remove custom domains from an environment.

        Args:
            env_id: The environment ID
            domain_ids: Domain IDs to remove
        """
        error = validate_id(env_id, "env_id")
        if error:
            return format_validation_error(error)

        return await server.call_kinsta(
            "kinsta_domains_delete",
            f"/sites/environments/{env_id}/domains",
            method="DELETE",
            body={"domain_ids": domain_ids},
            resource_type="domain",
        )

    @mcp.tool(name="kinsta_domains_verification", annotations=READ_ONLY)
    async def domains_verification(domain_id: str) -> CallToolResult:
        """Get DNS verification records for a domain.

        Args:
            domain_id: The domain ID to get verification records for
        """
        error = validate_id(domain_id, "domain_id")
        if error:
            return format_validation_error(error)

        return await server.call_kinsta(
            "kinsta_domains_verification",
            f"/sites/domains/{domain_id}/verification-records",
            resource_type="domain",
        )

    @mcp.tool(name="kinsta_domains_set_primary", annotations=MUTATING)
    async def domains_set_primary(env_id: str, domain_id: str) -> CallToolResult:
        """Set the primary domain for an environment.

        Args:
            env_id: The environment ID
            domain_id: The domain ID to set as primary
        """
        error = validate_ids(env_id=env_id, domain_id=domain_id)
        if error:
            return format_validation_error(error)

        return await server.call_kinsta(
            "kinsta_domains_set_primary",
            f"/sites/environments/{env_id}/domains/primary",
            method="PUT",
            body={"domain_id": domain_id},
            resource_type="domain",
        )
