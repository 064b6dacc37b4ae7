"""
Pytest configuration and fixtures for the user and order services.
"""

import pytest

from commerce_core.config import get_settings
from commerce_core.infrastructure.store import InMemoryRecordStore
from commerce_core.services.order_service import OrderService
from commerce_core.services.user_service import UserService


def pytest_configure(config):
    config.addinivalue_line("markers", "race: concurrent access tests using threads")


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings so env overrides in one test don't leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def store():
    """Create an empty in-memory store."""
    return InMemoryRecordStore()


@pytest.fixture
def user_service(store):
    """User service with strict email validation."""
    return UserService(store, strict_email=True)


@pytest.fixture
def order_service(store, user_service):
    """Order service backed by the real user service."""
    return OrderService(store, user_service)


@pytest.fixture
def active_user_id(user_service):
    """Create an active test user."""
    return user_service.create_user("Test User", "test@example.com")
