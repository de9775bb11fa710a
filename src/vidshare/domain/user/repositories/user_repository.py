"""User repository interface."""

from abc import ABC, abstractmethod

from vidshare.domain.user.aggregates.user import User


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    async def find_by_id(self, user_id: int) -> User | None:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_username(self, username: str) -> User | None:
        """Find a user by their username."""

    @abstractmethod
    async def get_by_id(self, user_id: int) -> User:
        """Load a user by ID, raising UserNotFoundError if absent."""

    @abstractmethod
    async def get_by_username(self, username: str) -> User:
        """Load a user by username, raising UserNotFoundError if absent."""

    @abstractmethod
    async def exists_by_username_or_email(self, username: str, email: str) -> bool:
        """Check if a user already holds the username or the email."""

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save or update a user. Returns the persisted user (with its ID)."""

    @abstractmethod
    async def destroy(self, user: User) -> None:
        """Delete a loaded user."""

    @abstractmethod
    async def count(self) -> int:
        """Count total users."""

    @abstractmethod
    async def list_for_api(
        self,
        start: int,
        count: int,
        sort: str,
    ) -> tuple[list[User], int]:
        """Return one page of users and the total number of users."""
