"""
User Service

Business logic for user management operations.
"""

from __future__ import annotations

from typing import Optional

import structlog

from commerce_core.config import get_settings
from commerce_core.domain.errors import UserError
from commerce_core.domain.models import INVALID_ID, User
from commerce_core.domain.validation import require_valid_user
from commerce_core.infrastructure.store import RecordStore

logger = structlog.get_logger(__name__)


class UserService:
    """Service for user business logic. Implements ``UserDirectory``."""

    def __init__(self, store: RecordStore, strict_email: Optional[bool] = None):
        """
        Initialize user service.

        Args:
            store: Shared record store
            strict_email: Override for the ``strict_email_validation`` setting
        """
        self.store = store
        if strict_email is None:
            strict_email = get_settings().strict_email_validation
        self.strict_email = strict_email

    def create_user(self, name: str, email: str) -> int:
        """Create a new active user and return its id, or INVALID_ID."""
        try:
            require_valid_user(name, email, strict_email=self.strict_email)
        except UserError as e:
            logger.info("user_service.user_rejected", reason=e.reason.value)
            return INVALID_ID

        user_id = self.store.save_user(User(name=name, email=email, is_active=True))
        logger.info("user_service.user_created", user_id=user_id)
        return user_id

    def get_user(self, user_id: int) -> Optional[User]:
        return self.store.find_user_by_id(user_id)

    def get_active_users(self) -> list[User]:
        return [u for u in self.store.find_all_users() if u.is_active]

    def deactivate_user(self, user_id: int) -> bool:
        """Soft-disable a user. Safe to call more than once."""
        user = self.store.find_user_by_id(user_id)
        if user is None:
            logger.info("user_service.deactivate_missing", user_id=user_id)
            return False

        updated = self.store.update_user(user.deactivated())
        logger.info("user_service.user_deactivated", user_id=user_id, updated=updated)
        return updated

    def user_exists(self, user_id: int) -> bool:
        return self.get_user(user_id) is not None
