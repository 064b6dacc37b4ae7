"""
Records - What the Store Holds

Both records are immutable. A change is a new copy handed back to the
store (full replacement), so nothing a caller holds can drift from what
is stored.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

from commerce_core.domain.errors import OrderError, RejectionReason

# Returned by create operations when a precondition fails.
INVALID_ID = -1


class OrderStatus(str, Enum):
    """
    Order lifecycle states.

    State machine (only cancellation is guarded):
    PENDING ──cancel──> CANCELLED
    CONFIRMED ──cancel──> CANCELLED
    SHIPPED / DELIVERED / CANCELLED ──cancel──> rejected

    Direct status updates may move any status to any other status.
    """

    PENDING = "pending"
    CONFIRMED = "confirmed"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @property
    def is_cancellable(self) -> bool:
        return self in CANCELLABLE_STATUSES


CANCELLABLE_STATUSES = frozenset({OrderStatus.PENDING, OrderStatus.CONFIRMED})


class User(BaseModel):
    """User record. ``id`` stays 0 until the store assigns one."""

    model_config = ConfigDict(frozen=True)

    id: int = 0
    name: str
    email: str
    is_active: bool = True

    def deactivated(self) -> User:
        """Return an inactive copy. There is no way back."""
        return self.model_copy(update={"is_active": False})


class Order(BaseModel):
    """Order record. ``id`` stays 0 until the store assigns one."""

    model_config = ConfigDict(frozen=True)

    id: int = 0
    user_id: int
    product_name: str
    amount: float
    status: OrderStatus = OrderStatus.PENDING

    def with_status(self, status: OrderStatus | str) -> Order:
        """
        Return a copy in ``status``. No transition check.

        Plain status values ("shipped") are coerced to ``OrderStatus``;
        anything else raises ``OrderError``.
        """
        try:
            status = OrderStatus(status)
        except ValueError:
            raise OrderError(
                f"Unknown order status {status!r}",
                RejectionReason.INVALID_STATUS,
                order_id=self.id,
            ) from None
        return self.model_copy(update={"status": status})

    def cancelled(self) -> Order:
        """
        Return a cancelled copy.

        Invariant: only PENDING and CONFIRMED orders can be cancelled.
        """
        if not self.status.is_cancellable:
            raise OrderError(
                f"Cannot cancel order in status {self.status.value}",
                RejectionReason.NOT_CANCELLABLE,
                order_id=self.id,
            )
        return self.with_status(OrderStatus.CANCELLED)

    @property
    def counts_toward_total(self) -> bool:
        return self.status != OrderStatus.CANCELLED
