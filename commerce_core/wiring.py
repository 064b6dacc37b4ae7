"""
Service Wiring

Builds one store and the two services that share it. Every call returns
an independent graph, so tests never see each other's records.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from commerce_core.config import Settings, get_settings
from commerce_core.infrastructure.store import InMemoryRecordStore, RecordStore
from commerce_core.services.order_service import OrderService
from commerce_core.services.user_service import UserService

logger = structlog.get_logger(__name__)


@dataclass
class Services:
    """The wired component graph."""

    store: RecordStore
    users: UserService
    orders: OrderService


def build_services(
    store: RecordStore | None = None,
    settings: Settings | None = None,
) -> Services:
    """Wire a store, a user service and an order service together."""
    settings = settings or get_settings()
    store = store if store is not None else InMemoryRecordStore()

    users = UserService(store, strict_email=settings.strict_email_validation)
    orders = OrderService(store, users)

    logger.info(
        "services_wired",
        store=type(store).__name__,
        strict_email=settings.strict_email_validation,
    )
    return Services(store=store, users=users, orders=orders)
