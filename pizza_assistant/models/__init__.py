"""Core data models for the pizza assistant."""

from .conversation import ChatMessage, Intent
from .orders import OrderOutcome, OrderRequest, OrderResult, StoreLookupResult

__all__ = [
    # Conversation
    "Intent",
    "ChatMessage",
    # Orders
    "OrderRequest",
    "OrderResult",
    "StoreLookupResult",
    "OrderOutcome",
]
