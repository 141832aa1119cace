"""ABOUTME: DNS tools - list company DNS domains and manage their records.

Records are identified by (type, name) rather than an ID, so update and
delete send them in the request body.
"""

from typing import TYPE_CHECKING, Annotated, List, Optional

from mcp.types import CallToolResult
from pydantic import BaseModel, Field

from ..common.results import format_validation_error
from ..common.validation import build_body, validate_id
from .annotations import DESTRUCTIVE, MUTATING, READ_ONLY

if TYPE_CHECKING:
    from ..server import KinstaMCPServer

MIN_TTL_SECONDS = 300


class ResourceRecord(BaseModel):
    """Single value of a DNS record (an IP, hostname or TXT string)."""

    value: str = Field(description="Record value")


def _dump_records(records: Optional[List[ResourceRecord]]) -> Optional[List[dict]]:
    if records is None:
        return None
    return [record.model_dump() for record in records]


def register_dns_tools(server: "KinstaMCPServer") -> None:
    mcp = server.get_mcp()

    @mcp.tool(name="kinsta_dns_domains", annotations=READ_ONLY)
    async def dns_domains() -> CallToolResult:
        """List all DNS domains for your Kinsta company."""
        return await server.call_kinsta(
            "kinsta_dns_domains",
            "/domains",
            params=lambda company: {"company": company},
            resource_type="domain",
        )

    @mcp.tool(name="kinsta_dns_records", annotations=READ_ONLY)
    async def dns_records(domain_id: str) -> CallToolResult:
        """List all DNS records for a domain.

        Args:
            domain_id: The domain ID to list DNS records for
        """
        error = validate_id(domain_id, "domain_id")
        if error:
            return format_validation_error(error)

        return await server.call_kinsta(
            "kinsta_dns_records",
            f"/domains/{domain_id}/dns-records",
            resource_type="DNS record",
        )

    @mcp.tool(name="kinsta_dns_records_create", annotations=MUTATING)
    async def dns_records_create(
        domain_id: str,
        type: str,
        name: str,
        ttl: Annotated[int, Field(ge=MIN_TTL_SECONDS)],
        resource_records: List[ResourceRecord],
    ) -> CallToolResult:
        """Create a new DNS record for a domain.

        Args:
            domain_id: The domain ID to create a record for
            type: DNS record type (e.g. A, AAAA, CNAME, MX, TXT, SRV)
            name: DNS record name (e.g. @ or a subdomain)
            ttl: Time to live in seconds (minimum 300)
            resource_records: Values for the record
        """
        error = validate_id(domain_id, "domain_id")
        if error:
            return format_validation_error(error)

        return await server.call_kinsta(
            "kinsta_dns_records_create",
            f"/domains/{domain_id}/dns-records",
            method="POST",
            body={
                "type": type,
                "name": name,
                "ttl": ttl,
                "resource_records": _dump_records(resource_records),
            },
            resource_type="DNS record",
        )

    @mcp.tool(name="kinsta_dns_records_update", annotations=MUTATING)
    async def dns_records_update(
        domain_id: str,
        type: str,
        name: str,
        ttl: Optional[Annotated[int, Field(ge=MIN_TTL_SECONDS)]] = None,
        new_resource_records: Optional[List[ResourceRecord]] = None,
        removed_resource_records: Optional[List[ResourceRecord]] = None,
    ) -> CallToolResult:
        """Update an existing DNS record for a domain.

        Args:
            domain_id: The domain ID containing the record
            type: DNS record type
            name: DNS record name to update
            ttl: New TTL in seconds (minimum 300)
            new_resource_records: Values to add to the record
            removed_resource_records: Values to remove from the record
        """
        error = validate_id(domain_id, "domain_id")
        if error:
            return format_validation_error(error)

        return await server.call_kinsta(
            "kinsta_dns_records_update",
            f"/domains/{domain_id}/dns-records",
            method="PUT",
            body=build_body(
                type=type,
                name=name,
                ttl=ttl,
                new_resource_records=_dump_records(new_resource_records),
                removed_resource_records=_dump_records(removed_resource_records),
            ),
            resource_type="DNS record",
        )

    @mcp.tool(name="kinsta_dns_records_delete", annotations=DESTRUCTIVE)
    async def dns_records_delete(domain_id: str, type: str, name: str) -> CallToolResult:
        """Delete a DNS record from a domain.

        Args:
            domain_id: The domain ID containing the record
            type: DNS record type to delete
            name: DNS record name to delete
        """
        error = validate_id(domain_id, "domain_id")
        if error:
            return format_validation_error(error)

        return await server.call_kinsta(
            "kinsta_dns_records_delete",
            f"/domains/{domain_id}/dns-records",
            method="DELETE",
            body={"type": type, "name": name},
            resource_type="DNS record",
        )
