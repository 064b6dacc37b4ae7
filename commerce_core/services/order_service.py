"""
Order Service

Business logic for orders. Consults a ``UserLookup`` so that only active,
existing users can place orders.

Note: ``create_order`` checks the owner and saves the order under two
separate store calls. A user deactivated in between can still end up
with a new order; no lock is held across both steps.
"""

from __future__ import annotations

from typing import Optional

import structlog

from commerce_core.domain.errors import DomainError, OrderError, RejectionReason
from commerce_core.domain.models import INVALID_ID, Order, OrderStatus
from commerce_core.domain.validation import require_active_owner, require_valid_order
from commerce_core.infrastructure.store import RecordStore
from commerce_core.services.contracts import UserLookup

logger = structlog.get_logger(__name__)


class OrderService:
    """Service for order business logic. Implements ``OrderBook``."""

    def __init__(self, store: RecordStore, users: UserLookup):
        self.store = store
        self.users = users

    def create_order(self, user_id: int, product_name: str, amount: float) -> int:
        """Create a PENDING order and return its id, or INVALID_ID."""
        try:
            require_active_owner(user_id, self.users.get_user(user_id))
            require_valid_order(product_name, amount)
        except DomainError as e:
            logger.info(
                "order_service.order_rejected",
                user_id=user_id,
                reason=e.reason.value,
            )
            return INVALID_ID

        order_id = self.store.save_order(
            Order(
                user_id=user_id,
                product_name=product_name,
                amount=amount,
                status=OrderStatus.PENDING,
            )
        )
        logger.info("order_service.order_created", order_id=order_id, user_id=user_id)
        return order_id

    def get_order(self, order_id: int) -> Optional[Order]:
        return self.store.find_order_by_id(order_id)

    def get_user_orders(self, user_id: int) -> list[Order]:
        return self.store.find_orders_by_user(user_id)

    def update_order_status(self, order_id: int, status: OrderStatus | str) -> bool:
        """Overwrite the status. Any status may follow any other here."""
        order = self.store.find_order_by_id(order_id)
        if order is None:
            self._log_rejection(order_id, RejectionReason.ORDER_NOT_FOUND)
            return False

        try:
            changed = order.with_status(status)
        except OrderError as e:
            self._log_rejection(order_id, e.reason, status=str(status))
            return False

        updated = self.store.update_order(changed)
        logger.info(
            "order_service.status_updated",
            order_id=order_id,
            from_status=order.status.value,
            to_status=changed.status.value,
        )
        return updated

    def cancel_order(self, order_id: int) -> bool:
        """Cancel a PENDING or CONFIRMED order."""
        order = self.store.find_order_by_id(order_id)
        if order is None:
            self._log_rejection(order_id, RejectionReason.ORDER_NOT_FOUND)
            return False

        try:
            cancelled = order.cancelled()
        except OrderError as e:
            self._log_rejection(order_id, e.reason, status=order.status.value)
            return False

        updated = self.store.update_order(cancelled)
        logger.info("order_service.order_cancelled", order_id=order_id)
        return updated

    def get_total_amount(self, user_id: int) -> float:
        """Sum of the user's order amounts, cancelled orders excluded."""
        return sum(
            (o.amount for o in self.store.find_orders_by_user(user_id) if o.counts_toward_total),
            0.0,
        )

    @staticmethod
    def _log_rejection(order_id: int, reason: RejectionReason, **fields) -> None:
        logger.info(
            "order_service.request_rejected",
            order_id=order_id,
            reason=reason.value,
            **fields,
        )
