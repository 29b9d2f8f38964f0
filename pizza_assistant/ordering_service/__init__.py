"""Ordering microservice."""

from .app import create_ordering_app
from .vendor import (
    DemoVendorClient,
    HttpVendorClient,
    IVendorClient,
    VendorError,
    VendorOrder,
    VendorOrderRejected,
)

__all__ = [
    "create_ordering_app",
    "IVendorClient",
    "HttpVendorClient",
    "DemoVendorClient",
    "VendorOrder",
    "VendorError",
    "VendorOrderRejected",
]
