"""Tests for OrderGatewayClient."""

import json

import httpx
import pytest

from pizza_assistant.gateway import OrderGatewayClient


def make_client(config, handler) -> OrderGatewayClient:
    return OrderGatewayClient(config, transport=httpx.MockTransport(handler))


class TestLookupStore:
    """Tests for OrderGatewayClient.lookup_store()."""

    @pytest.mark.asyncio
    async def test_success(self, config):
        """Test a successful lookup and the request it sends."""
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["path"] = request.url.path
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"success": True, "storeId": "12345"})

        client = make_client(config, handler)
        result = await client.lookup_store("10 Main St")
        await client.aclose()

        assert result.success is True
        assert result.store_id == "12345"
        assert seen == {"method": "POST", "path": "/store-lookup", "body": {"address": "10 Main St"}}

    @pytest.mark.asyncio
    async def test_business_failure(self, config):
        """Test that success=false is passed through with its error."""
        client = make_client(
            config,
            lambda request: httpx.Response(200, json={"success": False, "error": "No store"}),
        )

        result = await client.lookup_store("nowhere")

        assert result.success is False
        assert result.store_id is None
        assert result.error_message == "No store"

    @pytest.mark.asyncio
    async def test_server_error_body(self, config):
        """Test that a 500 with an error body is absorbed."""
        client = make_client(
            config,
            lambda request: httpx.Response(500, json={"success": False, "error": "vendor down"}),
        )

        result = await client.lookup_store("10 Main St")

        assert result.success is False
        assert result.error_message == "vendor down"

    @pytest.mark.asyncio
    async def test_error_status_overrides_success_flag(self, config):
        """Test that an error status is never reported as success."""
        client = make_client(
            config,
            lambda request: httpx.Response(503, json={"success": True, "storeId": "1"}),
        )

        result = await client.lookup_store("10 Main St")

        assert result.success is False

    @pytest.mark.asyncio
    async def test_transport_failure_is_absorbed(self, config):
        """Test that connection errors return success=False instead of raising."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = make_client(config, handler)
        result = await client.lookup_store("10 Main St")

        assert result.success is False
        assert result.error_message == "Ordering service unavailable"

    @pytest.mark.asyncio
    async def test_non_json_response(self, config):
        """Test that a non-JSON body is treated as a failure."""
        client = make_client(config, lambda request: httpx.Response(502, text="Bad Gateway"))

        result = await client.lookup_store("10 Main St")

        assert result.success is False

    @pytest.mark.asyncio
    async def test_missing_store_id(self, config):
        """Test that success without a storeId is treated as a failure."""
        client = make_client(config, lambda request: httpx.Response(200, json={"success": True}))

        result = await client.lookup_store("10 Main St")

        assert result.success is False


class TestPlaceOrder:
    """Tests for OrderGatewayClient.place_order()."""

    @pytest.mark.asyncio
    async def test_success(self, config):
        """Test a successful order and the payload it sends."""
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["path"] = request.url.path
            seen["body"] = json.loads(request.content)
            return httpx.Response(
                200, json={"success": True, "message": "Order placed", "orderId": "67890"}
            )

        client = make_client(config, handler)
        result = await client.place_order("10 Main St", "pepperoni", "large")

        assert result.success is True
        assert result.order_id == "67890"
        assert result.message == "Order placed"
        assert seen["path"] == "/place-order"
        assert seen["body"] == {"address": "10 Main St", "pizzaType": "pepperoni", "size": "large"}

    @pytest.mark.asyncio
    async def test_rejected(self, config):
        """Test that a rejected order is reported as failure."""
        client = make_client(
            config,
            lambda request: httpx.Response(
                422, json={"success": False, "error": "Order rejected: closed"}
            ),
        )

        result = await client.place_order("10 Main St", "pepperoni", "large")

        assert result.success is False
        assert result.error_message == "Order rejected: closed"

    @pytest.mark.asyncio
    async def test_timeout_is_absorbed(self, config):
        """Test that a timeout returns success=False instead of raising."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        client = make_client(config, handler)
        result = await client.place_order("10 Main St", "pepperoni", "large")

        assert result.success is False
        assert result.order_id is None

    @pytest.mark.asyncio
    async def test_missing_order_id(self, config):
        """Test that success without an orderId is treated as a failure."""
        client = make_client(config, lambda request: httpx.Response(200, json={"success": True}))

        result = await client.place_order("10 Main St", "pepperoni", "large")

        assert result.success is False
