"""
Business Logic Services

Services validate input and orchestrate store calls.
"""

from .contracts import OrderBook, UserDirectory, UserLookup
from .order_service import OrderService
from .user_service import UserService

__all__ = [
    "OrderBook",
    "OrderService",
    "UserDirectory",
    "UserLookup",
    "UserService",
]
