"""
Validation Rules for New Records

Each ``require_*`` helper raises a ``DomainError`` naming the broken rule;
the ``is_valid_*`` predicates are the rules themselves.
"""

from __future__ import annotations

from commerce_core.domain.errors import OrderError, RejectionReason, UserError
from commerce_core.domain.models import User


def is_valid_name(name: str) -> bool:
    return bool(name)


def is_valid_email(email: str, strict: bool = True) -> bool:
    """
    Check an email address.

    Strict mode needs a non-empty local part and a non-empty domain part
    around the first "@" ("a@b" passes, "@x.com" and "ann@" do not).
    Lenient mode accepts any non-empty string.
    """
    if not email:
        return False
    if not strict:
        return True
    local, sep, domain = email.partition("@")
    return bool(sep and local and domain)


def is_valid_product_name(product_name: str) -> bool:
    return bool(product_name)


def is_valid_amount(amount: float) -> bool:
    return amount > 0


def require_valid_user(name: str, email: str, strict_email: bool = True) -> None:
    if not is_valid_name(name):
        raise UserError("User name must not be empty", RejectionReason.EMPTY_NAME)
    if not is_valid_email(email, strict=strict_email):
        raise UserError(
            f"Invalid email address {email!r}", RejectionReason.INVALID_EMAIL
        )


def require_active_owner(user_id: int, owner: User | None) -> None:
    """Orders can only be placed by a user that exists and is active."""
    if owner is None:
        raise UserError(
            f"User {user_id} does not exist",
            RejectionReason.USER_NOT_FOUND,
            user_id=user_id,
        )
    if not owner.is_active:
        raise UserError(
            f"User {user_id} is inactive",
            RejectionReason.USER_INACTIVE,
            user_id=user_id,
        )


def require_valid_order(product_name: str, amount: float) -> None:
    if not is_valid_product_name(product_name):
        raise OrderError(
            "Product name must not be empty", RejectionReason.EMPTY_PRODUCT_NAME
        )
    if not is_valid_amount(amount):
        raise OrderError(
            f"Order amount must be positive, got {amount}",
            RejectionReason.NON_POSITIVE_AMOUNT,
        )
