"""Ordering microservice gateway."""

from .client import IOrderGateway, OrderGatewayClient

__all__ = ["IOrderGateway", "OrderGatewayClient"]
