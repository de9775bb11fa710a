"""User domain manages account identity.

This domain handles:
- User aggregate (identity: id, username, email, role, NSFW preference)
- Role-based authorization (user / admin)
"""

from vidshare.domain.user.aggregates import User
from vidshare.domain.user.exceptions import (
    UserAlreadyExistsError,
    UserNotFoundError,
)
from vidshare.domain.user.repositories import UserRepository
from vidshare.domain.user.value_objects import UserRole

__all__ = [
    "User",
    "UserAlreadyExistsError",
    "UserNotFoundError",
    "UserRepository",
    "UserRole",
]
