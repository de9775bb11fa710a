"""Credential repository interface.

The auth package does not own user storage; applications provide an
implementation that exposes the stored password hash for a user.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class UserCredentialData:
    """Stored credentials of a user."""

    user_id: int
    username: str
    password_hash: str


class UserCredentialRepository(ABC):
    """Read access to user credentials."""

    @abstractmethod
    async def find_by_username(self, username: str) -> UserCredentialData | None:
        """Find credentials by login name."""

    @abstractmethod
    async def find_by_user_id(self, user_id: int) -> UserCredentialData | None:
        """Find credentials by user ID."""
