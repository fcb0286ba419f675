"""Custom predicates plugged into the catalog rule tables.

Each returns None on success or a Violation describing the breach.
"""

from typing import Optional

from recordrules.models.requests import DatabaseContext, RegisterUserRequest
from recordrules.validators.models import Violation


def not_blank(value: str) -> Optional[Violation]:
    if not value.strip():
        return Violation(code="not_blank", message="Value cannot be blank")
    return None


def password_equals_confirm_password(request: RegisterUserRequest) -> Optional[Violation]:
    if request.password != request.confirm_password:
        return Violation(
            code="password_equals_confirm_password",
            message="Password and confirm password must be same",
        )
    return None


def can_register(request: RegisterUserRequest, context: DatabaseContext) -> Optional[Violation]:
    """Registration is open only while the store is below capacity."""
    if context.total >= context.max_data:
        return Violation(
            code="can_register",
            message=f"cannot register user {request.username}, database is full",
        )
    return None
