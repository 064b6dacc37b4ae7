"""
Service Contracts

Capability interfaces the services implement or consume. Any object with
the right methods satisfies them; tests substitute stubs freely.
"""

from __future__ import annotations

from typing import Protocol

from commerce_core.domain.models import Order, OrderStatus, User


class UserLookup(Protocol):
    """The one capability the order service needs from the user side."""

    def get_user(self, user_id: int) -> User | None:
        ...


class UserDirectory(UserLookup, Protocol):
    """Interface for user management."""

    def create_user(self, name: str, email: str) -> int:
        """
        Create an active user.

        Returns the new id, or INVALID_ID if the name is empty or the
        email is invalid.
        """
        ...

    def get_active_users(self) -> list[User]:
        ...

    def deactivate_user(self, user_id: int) -> bool:
        """False if the user does not exist. Repeat calls return True."""
        ...

    def user_exists(self, user_id: int) -> bool:
        ...


class OrderBook(Protocol):
    """Interface for order management."""

    def create_order(self, user_id: int, product_name: str, amount: float) -> int:
        """
        Create a PENDING order.

        Returns the new id, or INVALID_ID unless the owner exists and is
        active, the product name is non-empty and amount > 0.
        """
        ...

    def get_order(self, order_id: int) -> Order | None:
        ...

    def get_user_orders(self, user_id: int) -> list[Order]:
        ...

    def update_order_status(self, order_id: int, status: OrderStatus | str) -> bool:
        """Set any status. False if the order or the status is unknown."""
        ...

    def cancel_order(self, order_id: int) -> bool:
        """Cancel a PENDING or CONFIRMED order. False otherwise."""
        ...

    def get_total_amount(self, user_id: int) -> float:
        """Sum of the user's non-cancelled order amounts."""
        ...
