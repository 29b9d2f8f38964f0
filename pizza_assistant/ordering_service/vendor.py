"""Pizza vendor adapters used by the ordering microservice."""

import uuid
from dataclasses import dataclass
from typing import Protocol

import httpx

from ..config import ServiceConfig
from ..logging_config import get_logger

logger = get_logger(__name__)


class VendorError(Exception):
    """The vendor could not be reached or answered nonsense."""


class VendorOrderRejected(VendorError):
    """The vendor understood the order and refused it."""


@dataclass(frozen=True)
class VendorOrder:
    """An order accepted by the vendor."""

    order_id: str
    message: str


class IVendorClient(Protocol):
    """Access to the external pizza vendor."""

    async def find_store(self, address: str) -> str | None:
        """Return the id of the store delivering to address, or None."""
        ...

    async def place_order(
        self, store_id: str, address: str, pizza_type: str, size: str
    ) -> VendorOrder:
        """Place the order. Raises VendorOrderRejected or VendorError."""
        ...

    async def aclose(self) -> None:
        """Release connections."""
        ...


class HttpVendorClient:
    """Vendor REST API client.

    GET  /stores?address=...  -> [{"id": ..., ...}, ...]
    POST /orders              -> {"orderId": ..., "message": ...}
    """

    def __init__(
        self,
        config: ServiceConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        if not config.vendor_api_url:
            raise ValueError("VENDOR_API_URL is not configured")

        headers = {}
        if config.vendor_api_key:
            headers["Authorization"] = f"Bearer {config.vendor_api_key}"

        self._client = httpx.AsyncClient(
            base_url=config.vendor_api_url,
            headers=headers,
            timeout=config.vendor_timeout,
            transport=transport,
        )

    async def find_store(self, address: str) -> str | None:
        try:
            response = await self._client.get("/stores", params={"address": address})
            response.raise_for_status()
            stores = response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise VendorError(f"Store lookup failed: {e}") from e

        if not isinstance(stores, list):
            raise VendorError(f"Unexpected store list: {stores!r}")
        if not stores:
            return None
        return str(stores[0]["id"])

    async def place_order(
        self, store_id: str, address: str, pizza_type: str, size: str
    ) -> VendorOrder:
        payload = {
            "storeId": store_id,
            "address": address,
            "items": [{"type": pizza_type, "size": size}],
        }
        try:
            response = await self._client.post("/orders", json=payload)
        except httpx.HTTPError as e:
            raise VendorError(f"Order request failed: {e}") from e

        if response.is_client_error:
            raise VendorOrderRejected(_error_text(response))
        if response.is_error:
            raise VendorError(f"Vendor returned {response.status_code}: {_error_text(response)}")

        try:
            data = response.json()
            order_id = str(data["orderId"])
        except (ValueError, KeyError, TypeError) as e:
            raise VendorError(f"Malformed order response: {e}") from e

        return VendorOrder(order_id=order_id, message=data.get("message") or "Order placed")

    async def aclose(self) -> None:
        await self._client.aclose()


def _error_text(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(data, dict):
        return str(data.get("error") or data.get("message") or data)
    return str(data)


class DemoVendorClient:
    """In-process vendor for local runs without vendor credentials.

    Every non-blank address is served by one store and every order is accepted.
    """

    def __init__(self, store_id: str = "demo-store"):
        self._store_id = store_id

    async def find_store(self, address: str) -> str | None:
        return self._store_id if address.strip() else None

    async def place_order(
        self, store_id: str, address: str, pizza_type: str, size: str
    ) -> VendorOrder:
        order_id = uuid.uuid4().hex[:8]
        logger.info("Demo order %s: %s %s to %s", order_id, size, pizza_type, address)
        return VendorOrder(order_id=order_id, message=f"{size} {pizza_type} pizza ordered")

    async def aclose(self) -> None:
        return


def create_vendor_client(config: ServiceConfig) -> IVendorClient:
    """Pick the HTTP vendor when configured, else the demo vendor."""
    if config.vendor_api_url:
        return HttpVendorClient(config)
    logger.warning("VENDOR_API_URL not set, using demo vendor")
    return DemoVendorClient()
