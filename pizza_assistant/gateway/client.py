"""HTTP client for the ordering microservice."""

from typing import Protocol

import httpx

from ..config import AssistantConfig
from ..logging_config import get_logger
from ..models import OrderResult, StoreLookupResult

logger = get_logger(__name__)


class IOrderGateway(Protocol):
    """Store lookup and order placement. Failures come back as results, never raised."""

    async def lookup_store(self, address: str) -> StoreLookupResult:
        """Find the store that delivers to address."""
        ...

    async def place_order(self, address: str, item_description: str, size: str) -> OrderResult:
        """Place a single-pizza order for delivery to address."""
        ...


class OrderGatewayClient:
    """Talks to the ordering microservice over HTTP/JSON."""

    def __init__(
        self,
        config: AssistantConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._client = httpx.AsyncClient(
            base_url=config.ordering_service_url,
            timeout=config.http_timeout,
            transport=transport,
        )

    async def lookup_store(self, address: str) -> StoreLookupResult:
        data = await self._post("/store-lookup", {"address": address})
        if data is None:
            return StoreLookupResult(success=False, error_message="Ordering service unavailable")

        if not data.get("success"):
            return StoreLookupResult(success=False, error_message=data.get("error"))

        store_id = data.get("storeId")
        if not store_id:
            logger.error("Store lookup succeeded without a storeId: %s", data)
            return StoreLookupResult(success=False, error_message="Malformed store lookup response")

        logger.info("Store %s serves %s", store_id, address)
        return StoreLookupResult(success=True, store_id=str(store_id))

    async def place_order(self, address: str, item_description: str, size: str) -> OrderResult:
        data = await self._post(
            "/place-order",
            {"address": address, "pizzaType": item_description, "size": size},
        )
        if data is None:
            return OrderResult(success=False, error_message="Ordering service unavailable")

        if not data.get("success"):
            return OrderResult(success=False, error_message=data.get("error"))

        order_id = data.get("orderId")
        if not order_id:
            logger.error("Order placed without an orderId: %s", data)
            return OrderResult(success=False, error_message="Malformed place order response")

        logger.info("Order %s placed", order_id)
        return OrderResult(success=True, order_id=str(order_id), message=data.get("message"))

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _post(self, path: str, payload: dict) -> dict | None:
        """POST JSON and return the decoded body, or None on transport failure.

        Error statuses still carry a {success: false, error} body, so they are
        decoded like any other response.
        """
        try:
            response = await self._client.post(path, json=payload)
        except httpx.HTTPError as e:
            logger.error("Request to %s failed: %s", path, e)
            return None

        try:
            data = response.json()
        except ValueError:
            logger.error("Non-JSON response from %s (status %s)", path, response.status_code)
            return None

        if not isinstance(data, dict):
            logger.error("Unexpected response from %s: %r", path, data)
            return None

        if response.is_error:
            logger.warning(
                "%s returned %s: %s", path, response.status_code, data.get("error", "unknown error")
            )
            data = {**data, "success": False}

        return data
