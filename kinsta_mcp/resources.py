"""ABOUTME: Read-only MCP resources over the Kinsta API (sites, site details, environments, regions).

Resources have no error envelope, so failures are raised: KinstaClientUnavailable
when credentials are missing, KinstaResourceError when the API call fails.
"""

import json
import logging
from typing import TYPE_CHECKING, Dict, Optional

from .common.validation import validate_id
from .constants import ERROR_TEXT_PREFIX
from .kinsta.client import KinstaClient

if TYPE_CHECKING:
    from .server import KinstaMCPServer

logger = logging.getLogger(__name__)

JSON_MIME_TYPE = "application/json"


class KinstaResourceError(Exception):
    """Raised when a resource read fails at the Kinsta API."""


async def _fetch_json(
    client: KinstaClient,
    path: str,
    params: Optional[Dict[str, str]] = None,
) -> str:
    result = await client.request(path, params=params)
    if not result.success:
        error = result.error
        logger.error(f"Resource read failed: GET {path} [{error.kind.value}] {error.message}")
        raise KinstaResourceError(f"{ERROR_TEXT_PREFIX} ({error.kind.value}): {error.message}")
    return json.dumps(result.data, indent=2)


def _require_id(value: str, param_name: str) -> None:
    error = validate_id(value, param_name)
    if error:
        raise ValueError(error)


def register_resources(server: "KinstaMCPServer") -> None:
    """Register all Kinsta resources on the server."""
    mcp = server.get_mcp()

    @mcp.resource(
        "kinsta://sites",
        name="sites",
        description="List all WordPress sites in your Kinsta company",
        mime_type=JSON_MIME_TYPE,
    )
    async def sites_resource() -> str:
        client = server.client_cache.get_client_or_raise()
        return await _fetch_json(client, "/sites", params={"company": client.company_id})

    @mcp.resource(
        "kinsta://sites/{site_id}",
        name="site-details",
        description="Get details for a specific Kinsta site",
        mime_type=JSON_MIME_TYPE,
    )
    async def site_details_resource(site_id: str) -> str:
        _require_id(site_id, "site_id")
        client = server.client_cache.get_client_or_raise()
        return await _fetch_json(client, f"/sites/{site_id}")

    @mcp.resource(
        "kinsta://sites/{site_id}/environments",
        name="site-environments",
        description="List environments for a Kinsta site",
        mime_type=JSON_MIME_TYPE,
    )
    async def site_environments_resource(site_id: str) -> str:
        _require_id(site_id, "site_id")
        client = server.client_cache.get_client_or_raise()
        return await _fetch_json(client, f"/sites/{site_id}/environments")

    @mcp.resource(
        "kinsta://regions",
        name="regions",
        description="List available deployment regions",
        mime_type=JSON_MIME_TYPE,
    )
    async def regions_resource() -> str:
        client = server.client_cache.get_client_or_raise()
        return await _fetch_json(client, f"/company/{client.company_id}/available-regions")
