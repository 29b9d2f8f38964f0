"""Ordering API routes."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from ..logging_config import get_logger
from .vendor import IVendorClient, VendorOrderRejected

logger = get_logger(__name__)

NO_STORE_ERROR = "No store found near this address"


class StoreLookupRequest(BaseModel):
    """Request model for finding a store."""

    address: str = Field(min_length=1)


class StoreLookupResponse(BaseModel):
    """Response model for store lookup."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool
    store_id: str | None = Field(default=None, alias="storeId")
    error: str | None = None


class PlaceOrderRequest(BaseModel):
    """Request model for placing an order."""

    model_config = ConfigDict(populate_by_name=True)

    address: str = Field(min_length=1)
    pizza_type: str = Field(alias="pizzaType", min_length=1)
    size: str = Field(min_length=1)


class PlaceOrderResponse(BaseModel):
    """Response model for order placement."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool
    message: str | None = None
    order_id: str | None = Field(default=None, alias="orderId")
    error: str | None = None


def error_response(status_code: int, error: str) -> JSONResponse:
    """Failure body shared by every endpoint."""
    return JSONResponse(status_code=status_code, content={"success": False, "error": error})


def create_ordering_router(vendor: IVendorClient) -> APIRouter:
    """Create ordering router bound to a vendor client."""
    router = APIRouter(tags=["ordering"])

    @router.post(
        "/store-lookup",
        response_model=StoreLookupResponse,
        response_model_exclude_none=True,
    )
    async def store_lookup(request: StoreLookupRequest):
        """Find the store that delivers to the address."""
        try:
            store_id = await vendor.find_store(request.address)
        except Exception as e:
            logger.error("Store lookup failed for %r: %s", request.address, e, exc_info=True)
            return error_response(500, str(e))

        if store_id is None:
            logger.info("No store for %r", request.address)
            return StoreLookupResponse(success=False, error=NO_STORE_ERROR)

        return StoreLookupResponse(success=True, store_id=store_id)

    @router.post(
        "/place-order",
        response_model=PlaceOrderResponse,
        response_model_exclude_none=True,
    )
    async def place_order(request: PlaceOrderRequest):
        """Find the nearest store and place the order with it."""
        try:
            store_id = await vendor.find_store(request.address)
            if store_id is None:
                return error_response(422, NO_STORE_ERROR)

            order = await vendor.place_order(
                store_id, request.address, request.pizza_type, request.size
            )
        except VendorOrderRejected as e:
            logger.warning("Order rejected by vendor: %s", e)
            return error_response(422, f"Order rejected: {e}")
        except Exception as e:
            logger.error("Order placement failed: %s", e, exc_info=True)
            return error_response(500, str(e))

        logger.info(
            "Order placed",
            extra={"context": {"order_id": order.order_id, "store_id": store_id}},
        )
        return PlaceOrderResponse(success=True, message=order.message, order_id=order.order_id)

    @router.get("/health")
    async def health() -> dict:
        """Liveness probe."""
        return {"status": "ok"}

    return router
