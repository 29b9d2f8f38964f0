"""Order-related data models."""

from dataclasses import dataclass, fields
from enum import Enum


@dataclass
class OrderRequest:
    """Order parameters collected slot by slot during one order sub-dialogue."""

    delivery_address: str = ""
    item_description: str = ""
    size: str = ""

    def missing_fields(self) -> list[str]:
        """Names of slots that are still empty, in prompting order."""
        return [f.name for f in fields(self) if not getattr(self, f.name).strip()]

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields()


@dataclass(frozen=True)
class StoreLookupResult:
    """Outcome of asking the ordering service for the nearest store."""

    success: bool
    store_id: str | None = None
    error_message: str | None = None


@dataclass(frozen=True)
class OrderResult:
    """Outcome of asking the ordering service to place an order."""

    success: bool
    order_id: str | None = None
    message: str | None = None
    error_message: str | None = None


class OrderOutcome(str, Enum):
    """How an order sub-dialogue ended."""

    PLACED = "placed"
    NO_STORE = "no_store"
    FAILED = "failed"
    ABANDONED = "abandoned"
    CANCELLED = "cancelled"
