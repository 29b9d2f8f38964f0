"""FastAPI application for the ordering microservice."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from ..config import ServiceConfig
from ..logging_config import get_logger
from .routes import create_ordering_router, error_response
from .vendor import IVendorClient, create_vendor_client

logger = get_logger(__name__)


def create_ordering_app(
    config: ServiceConfig | None = None,
    vendor: IVendorClient | None = None,
) -> FastAPI:
    """Create and configure the ordering FastAPI application.

    Pass ``vendor`` to inject a client (tests); otherwise one is built from
    ``config``. The app owns the vendor and closes it on shutdown.
    """
    vendor_client = vendor or create_vendor_client(config or ServiceConfig())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Manage application lifespan."""
        logger.info("Ordering service starting")
        yield
        await vendor_client.aclose()
        logger.info("Ordering service stopped")

    fastapi_app = FastAPI(
        title="Pizza Ordering Service",
        description="Bridges the voice assistant to the pizza vendor API",
        version="0.1.0",
        lifespan=lifespan,
    )

    @fastapi_app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        fields = ", ".join(str(err["loc"][-1]) for err in exc.errors())
        return error_response(422, f"Invalid request: {fields}")

    fastapi_app.include_router(create_ordering_router(vendor_client))

    return fastapi_app
