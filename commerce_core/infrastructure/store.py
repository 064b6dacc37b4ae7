"""
Record Store - The Only Shared Mutable State

What it does:
1. Holds users and orders in two independent id -> record maps
2. Assigns sequential ids per record kind, starting at 1
3. Serialises every read and write behind one exclusive lock

Each call is atomic on its own. There are no transactions: a service
that reads then writes does so under two separate lock acquisitions.

Records are immutable, so handing them out without copying is safe.
"""

from __future__ import annotations

import threading
from typing import Protocol

import structlog

from commerce_core.domain.models import Order, User

logger = structlog.get_logger(__name__)


class RecordStore(Protocol):
    """Interface for user and order storage."""

    def save_user(self, user: User) -> int:
        """Store a new user under a fresh id (input id is ignored)."""
        ...

    def find_user_by_id(self, user_id: int) -> User | None:
        ...

    def find_all_users(self) -> list[User]:
        ...

    def update_user(self, user: User) -> bool:
        """Replace the stored user with the same id. False if absent."""
        ...

    def delete_user(self, user_id: int) -> bool:
        ...

    def save_order(self, order: Order) -> int:
        """Store a new order under a fresh id (input id is ignored)."""
        ...

    def find_order_by_id(self, order_id: int) -> Order | None:
        ...

    def find_orders_by_user(self, user_id: int) -> list[Order]:
        ...

    def find_all_orders(self) -> list[Order]:
        ...

    def update_order(self, order: Order) -> bool:
        """Replace the stored order with the same id. False if absent."""
        ...

    def delete_order(self, order_id: int) -> bool:
        ...

    def clear(self) -> None:
        """Drop every record and reset both id counters."""
        ...


class InMemoryRecordStore:
    """
    Dict-backed store guarded by a single ``threading.Lock``.

    Reads take the same lock as writes; there is no reader/writer split.
    Construct one per process (or per test) and pass it to the services.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._users: dict[int, User] = {}
        self._orders: dict[int, Order] = {}
        self._next_user_id = 1
        self._next_order_id = 1

    # Users

    def save_user(self, user: User) -> int:
        with self._lock:
            user_id = self._next_user_id
            self._next_user_id += 1
            self._users[user_id] = user.model_copy(update={"id": user_id})
        logger.debug("store.user_saved", user_id=user_id)
        return user_id

    def find_user_by_id(self, user_id: int) -> User | None:
        with self._lock:
            return self._users.get(user_id)

    def find_all_users(self) -> list[User]:
        with self._lock:
            return list(self._users.values())

    def update_user(self, user: User) -> bool:
        with self._lock:
            if user.id not in self._users:
                return False
            self._users[user.id] = user
            return True

    def delete_user(self, user_id: int) -> bool:
        with self._lock:
            return self._users.pop(user_id, None) is not None

    def count_users(self) -> int:
        with self._lock:
            return len(self._users)

    # Orders

    def save_order(self, order: Order) -> int:
        with self._lock:
            order_id = self._next_order_id
            self._next_order_id += 1
            self._orders[order_id] = order.model_copy(update={"id": order_id})
        logger.debug("store.order_saved", order_id=order_id, user_id=order.user_id)
        return order_id

    def find_order_by_id(self, order_id: int) -> Order | None:
        with self._lock:
            return self._orders.get(order_id)

    def find_orders_by_user(self, user_id: int) -> list[Order]:
        with self._lock:
            return [o for o in self._orders.values() if o.user_id == user_id]

    def find_all_orders(self) -> list[Order]:
        with self._lock:
            return list(self._orders.values())

    def update_order(self, order: Order) -> bool:
        with self._lock:
            if order.id not in self._orders:
                return False
            self._orders[order.id] = order
            return True

    def delete_order(self, order_id: int) -> bool:
        with self._lock:
            return self._orders.pop(order_id, None) is not None

    def count_orders(self) -> int:
        with self._lock:
            return len(self._orders)

    def clear(self) -> None:
        with self._lock:
            self._users.clear()
            self._orders.clear()
            self._next_user_id = 1
            self._next_order_id = 1
        logger.info("store.cleared")
