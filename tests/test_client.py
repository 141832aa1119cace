"""ABOUTME: Tests for the Kinsta HTTP client core against an httpx.MockTransport."""

import asyncio
import json

import httpx
import pytest

from conftest import TEST_API_KEY, TEST_BASE_URL, json_response
from kinsta_mcp.common.error_handling import ErrorKind


class TestRequestShape:
    """Tests for what the client puts on the wire."""

    @pytest.mark.asyncio
    async def test_get_headers_and_url(self, make_client):
        """Test GET carries bearer auth and Accept, no Content-Type and no body."""
        client, transport = make_client(json_response({"ok": True}))

        result = await client.request("/sites/s1")

        assert result.success
        request = transport.last_request
        assert request.method == "GET"
        assert str(request.url) == f"{TEST_BASE_URL}/sites/s1"
        assert request.headers["Authorization"] == f"Bearer {TEST_API_KEY}"
        assert request.headers["Accept"] == "application/json"
        assert "Content-Type" not in request.headers
        assert request.content == b""

    @pytest.mark.asyncio
    async def test_query_params(self, make_client):
        """Test query parameters are sent verbatim."""
        client, transport = make_client(json_response({}))

        await client.request("/sites", params={"company": "c1", "include_environments": "true"})

        url = transport.last_request.url
        assert url.path == "/v2/sites"
        assert url.params["company"] == "c1"
        assert url.params["include_environments"] == "true"

    @pytest.mark.asyncio
    async def test_empty_params_add_no_query_string(self, make_client):
        """Test an empty params dict leaves the URL without a query string."""
        client, transport = make_client(json_response({}))

        await client.request("/validate", params={})

        assert transport.last_request.url.query == b""

    @pytest.mark.asyncio
    async def test_json_body(self, make_client):
        """Test a body is JSON-encoded with a JSON Content-Type."""
        client, transport = make_client(json_response({"operation_id": "op-1"}, status_code=202))
        body = {"company": "c1", "display_name": "blog", "is_multisite": False}

        result = await client.request("/sites", method="POST", body=body)

        assert result.success
        assert result.data == {"operation_id": "op-1"}
        request = transport.last_request
        assert request.method == "POST"
        assert request.headers["Content-Type"] == "application/json"
        assert json.loads(request.content) == body

    @pytest.mark.asyncio
    async def test_one_request_per_call(self, make_client):
        """Test the client never retries."""
        client, transport = make_client(json_response({"message": "boom"}, status_code=503))

        result = await client.request("/sites")

        assert not result.success
        assert result.error.retryable
        assert len(transport.requests) == 1


class TestSuccessDecoding:
    """Tests for decoding successful responses."""

    @pytest.mark.asyncio
    async def test_list_payload(self, make_client):
        """Test JSON arrays are returned as-is."""
        client, _ = make_client(json_response([{"id": "r1"}]))
        result = await client.request("/regions")
        assert result.success
        assert result.data == [{"id": "r1"}]

    @pytest.mark.asyncio
    async def test_non_json_success_is_unknown(self, make_client):
        """Test a 200 with a non-JSON body is a failure, not a success."""
        client, _ = make_client(lambda request: httpx.Response(200, text="<html>ok</html>"))

        result = await client.request("/sites")

        assert not result.success
        assert result.error.kind == ErrorKind.UNKNOWN
        assert result.error.message == "Received non-JSON response from Kinsta API"
        assert not result.error.retryable

    @pytest.mark.asyncio
    async def test_empty_success_body_is_unknown(self, make_client):
        """Test a 204 with no body is treated like any other non-JSON success."""
        client, _ = make_client(lambda request: httpx.Response(204))

        result = await client.request("/sites/s1", method="DELETE")

        assert not result.success
        assert result.error.kind == ErrorKind.UNKNOWN


class TestHttpErrors:
    """Tests for non-2xx classification."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status,kind,retryable", [
        (401, ErrorKind.UNAUTHORIZED, False),
        (403, ErrorKind.FORBIDDEN, False),
        (404, ErrorKind.NOT_FOUND, False),
        (429, ErrorKind.RATE_LIMITED, True),
        (400, ErrorKind.VALIDATION_ERROR, False),
        (500, ErrorKind.SERVER_ERROR, True),
    ])
    async def test_status_classification(self, make_client, status, kind, retryable):
        """Test each status surfaces as the matching error kind."""
        client, _ = make_client(json_response({}, status_code=status))

        result = await client.request("/sites")

        assert not result.success
        assert result.error.kind == kind
        assert result.error.status_code == status
        assert result.error.retryable is retryable

    @pytest.mark.asyncio
    async def test_message_field_extracted(self, make_client):
        """Test the body "message" field is appended to the classified message."""
        client, _ = make_client(json_response({"message": "region is invalid"}, status_code=422))

        result = await client.request("/sites", method="POST", body={})

        assert result.error.api_message == "region is invalid"
        assert result.error.message == "Client error (422): region is invalid"

    @pytest.mark.asyncio
    async def test_error_field_fallback(self, make_client):
        """Test "error" is used when "message" is absent."""
        client, _ = make_client(json_response({"error": "no such site"}, status_code=404))

        result = await client.request("/sites/missing")

        assert result.error.message == "Resource not found: no such site"

    @pytest.mark.asyncio
    async def test_non_string_message_ignored(self, make_client):
        """Test non-string message fields are not used."""
        client, _ = make_client(json_response({"message": {"detail": "x"}}, status_code=500))

        result = await client.request("/sites")

        assert result.error.api_message is None
        assert result.error.message == "Server error (500)"

    @pytest.mark.asyncio
    async def test_non_json_error_body(self, make_client):
        """Test a non-JSON error body still classifies by status."""
        client, _ = make_client(lambda request: httpx.Response(502, text="Bad Gateway"))

        result = await client.request("/sites")

        assert result.error.kind == ErrorKind.SERVER_ERROR
        assert result.error.api_message is None


class TestTransportFailures:
    """Tests for failures before any response arrives."""

    @pytest.mark.asyncio
    async def test_connection_error(self, make_client):
        """Test connection failures become NETWORK_ERROR with the cause preserved."""
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        client, _ = make_client(handler)

        result = await client.request("/sites")

        assert not result.success
        assert result.error.kind == ErrorKind.NETWORK_ERROR
        assert "connection refused" in result.error.message
        assert result.error.status_code is None

    @pytest.mark.asyncio
    async def test_deadline_expiry_is_timeout(self, make_client):
        """Test a response slower than the deadline becomes TIMEOUT and leaves no task behind."""
        async def slow_handler(request):
            await asyncio.sleep(5)
            return httpx.Response(200, json={})

        client, _ = make_client(slow_handler, timeout=0.05)
        tasks_before = len(asyncio.all_tasks())

        result = await client.request("/sites")

        assert not result.success
        assert result.error.kind == ErrorKind.TIMEOUT
        assert result.error.message == "Request timed out"
        assert result.error.retryable
        assert len(asyncio.all_tasks()) == tasks_before

    @pytest.mark.asyncio
    async def test_fast_response_within_deadline(self, make_client):
        """Test a response inside the deadline succeeds normally."""
        client, _ = make_client(json_response({"ok": True}), timeout=5)

        result = await client.request("/sites")

        assert result.success
