"""
Domain Errors - Why a Request Was Rejected

The public service API reports failure with sentinels only (-1, False,
None). Inside the domain layer rules are still expressed as exceptions
that carry a reason, so the services can log *which* rule failed before
translating it into the sentinel.
"""

from __future__ import annotations

from enum import Enum


class RejectionReason(str, Enum):
    """Every rule a create/update request can break."""

    EMPTY_NAME = "empty_name"
    INVALID_EMAIL = "invalid_email"
    USER_NOT_FOUND = "user_not_found"
    USER_INACTIVE = "user_inactive"
    EMPTY_PRODUCT_NAME = "empty_product_name"
    NON_POSITIVE_AMOUNT = "non_positive_amount"
    ORDER_NOT_FOUND = "order_not_found"
    NOT_CANCELLABLE = "not_cancellable"
    INVALID_STATUS = "invalid_status"


class DomainError(Exception):
    """Base error for domain rule violations."""

    def __init__(self, message: str, reason: RejectionReason):
        self.reason = reason
        super().__init__(message)


class UserError(DomainError):
    """Domain error for user operations."""

    def __init__(
        self, message: str, reason: RejectionReason, user_id: int | None = None
    ):
        self.user_id = user_id
        super().__init__(message, reason)


class OrderError(DomainError):
    """Domain error for order operations."""

    def __init__(
        self, message: str, reason: RejectionReason, order_id: int | None = None
    ):
        self.order_id = order_id
        super().__init__(message, reason)
