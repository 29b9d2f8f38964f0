"""Integration tests: gateway client against the real ordering app in-process."""

import re

import httpx
import pytest
import pytest_asyncio

from pizza_assistant.app import Application
from pizza_assistant.gateway import OrderGatewayClient
from pizza_assistant.ordering_service import DemoVendorClient, create_ordering_app


@pytest_asyncio.fixture
async def gateway_client(config):
    """Gateway wired to the ordering service with the demo vendor."""
    app = create_ordering_app(vendor=DemoVendorClient(store_id="store-1"))
    client = OrderGatewayClient(config, transport=httpx.ASGITransport(app=app))
    yield client
    await client.aclose()


@pytest.mark.asyncio
async def test_lookup_and_place(gateway_client):
    """Test store lookup and order placement over HTTP."""
    lookup = await gateway_client.lookup_store("10 Main St")
    assert lookup.success is True
    assert lookup.store_id == "store-1"

    order = await gateway_client.place_order("10 Main St", "pepperoni", "large")
    assert order.success is True
    assert order.order_id
    assert "pepperoni" in order.message


@pytest.mark.asyncio
async def test_blank_address_has_no_store(gateway_client):
    """Test that the demo vendor's no-store answer reaches the client."""
    lookup = await gateway_client.lookup_store("   ")

    assert lookup.success is False
    assert "No store" in lookup.error_message


@pytest.mark.asyncio
async def test_invalid_request_is_absorbed(gateway_client):
    """Test that a validation error comes back as a failed result."""
    order = await gateway_client.place_order("10 Main St", "", "large")

    assert order.success is False
    assert "pizzaType" in order.error_message


@pytest.mark.asyncio
async def test_full_voice_order(
    config, gateway_client, make_speech_input, speech_output, mock_llm, spoken
):
    """Test end-to-end flow: utterances -> dialogue -> HTTP -> spoken confirmation."""
    app = Application(
        config,
        speech_input=make_speech_input(
            "hello", "Order a pizza", "10 Main St", "margherita", "medium", "quit"
        ),
        speech_output=speech_output,
        llm_provider=mock_llm,
        gateway=gateway_client,
    )

    await app.start()
    await app.run()

    said = spoken()
    assert said[0] == "Test response"
    assert re.search(r"order number is \w+", said[-1])
    assert "medium margherita" in said[-1]
