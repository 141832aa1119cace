"""ABOUTME: Tests for server bootstrap, resources and prompts."""

import json

import pytest

from conftest import TEST_COMPANY_ID, json_response
from kinsta_mcp import server as server_module
from kinsta_mcp.prompts import (
    deploy_site_prompt,
    manage_backups_prompt,
    push_environment_prompt,
    setup_domain_prompt,
)


class TestResources:
    """Tests for kinsta:// resources."""

    @pytest.mark.asyncio
    async def test_sites_resource(self, kinsta_env, make_server):
        """Test the sites resource returns JSON scoped to the company."""
        payload = {"company": {"sites": [{"id": "s1"}]}}
        server, transport = make_server(json_response(payload))

        contents = list(await server.get_mcp().read_resource("kinsta://sites"))

        assert json.loads(contents[0].content) == payload
        assert contents[0].mime_type == "application/json"
        assert transport.last_request.url.params["company"] == TEST_COMPANY_ID

    @pytest.mark.asyncio
    async def test_site_environments_template(self, kinsta_env, make_server):
        """Test templated resources substitute the site ID into the path."""
        server, transport = make_server(json_response({"site": {"environments": []}}))

        await server.get_mcp().read_resource("kinsta://sites/s1/environments")

        assert transport.last_request.url.path == "/v2/sites/s1/environments"

    @pytest.mark.asyncio
    async def test_regions_resource(self, kinsta_env, make_server):
        """Test the regions resource uses the company path."""
        server, transport = make_server(json_response({"company": {"available_regions": []}}))

        await server.get_mcp().read_resource("kinsta://regions")

        assert transport.last_request.url.path == f"/v2/company/{TEST_COMPANY_ID}/available-regions"

    @pytest.mark.asyncio
    async def test_resource_api_failure_raises(self, kinsta_env, make_server):
        """Test API failures surface as a raised error with the kind."""
        server, _ = make_server(json_response({}, status_code=500))

        with pytest.raises(Exception, match=r"Kinsta API Error \(SERVER_ERROR\)"):
            await server.get_mcp().read_resource("kinsta://sites")

    @pytest.mark.asyncio
    async def test_resource_without_credentials_raises(self, clean_env, make_server):
        """Test missing credentials raise before any request."""
        server, transport = make_server(json_response({}))

        with pytest.raises(Exception, match="KINSTA_API_KEY environment variable is required"):
            await server.get_mcp().read_resource("kinsta://regions")
        assert transport.requests == []


class TestPrompts:
    """Tests for workflow prompts."""

    @pytest.mark.asyncio
    async def test_prompts_registered(self, make_server):
        """Test all four prompts are listed."""
        server, _ = make_server(json_response({}))

        prompts = await server.get_mcp().list_prompts()

        assert {p.name for p in prompts} == {
            "deploy-site",
            "manage-backups",
            "push-environment",
            "setup-domain",
        }

    def test_deploy_site_without_region(self):
        """Test the region step is included when no region is given."""
        text = deploy_site_prompt("blog")
        assert "Site name: blog" in text
        assert "kinsta_company_regions" in text

    def test_deploy_site_with_region(self):
        """Test a chosen region is echoed and the region lookup skipped."""
        text = deploy_site_prompt("blog", region="us-central1")
        assert "Region: us-central1" in text
        assert "kinsta_company_regions" not in text

    def test_other_prompts_reference_their_tools(self):
        """Test each prompt names the tools its workflow needs."""
        assert "kinsta_backups_restore" in manage_backups_prompt("e1")
        assert "kinsta_environments_push" in push_environment_prompt("s1")
        text = setup_domain_prompt("e1", "example.com")
        assert '"example.com"' in text
        assert "kinsta_domains_verification" in text


class TestMain:
    """Tests for the console entry point."""

    def test_unknown_transport_rejected(self, monkeypatch):
        """Test an unsupported MCP_TRANSPORT exits with a message."""
        monkeypatch.setenv("MCP_TRANSPORT", "carrier-pigeon")

        with pytest.raises(SystemExit, match="Unknown MCP_TRANSPORT: carrier-pigeon"):
            server_module.main()

    def test_default_transport_is_stdio(self, monkeypatch):
        """Test stdio is used when MCP_TRANSPORT is unset."""
        monkeypatch.delenv("MCP_TRANSPORT", raising=False)
        seen = []
        monkeypatch.setattr(
            server_module.KinstaMCPServer,
            "run",
            lambda self, transport="stdio": seen.append(transport),
        )

        server_module.main()

        assert seen == ["stdio"]
