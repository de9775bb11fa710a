"""User aggregate."""

from datetime import datetime
from typing import Union

from vidshare.domain.shared.time import utc_now
from vidshare.domain.user.value_objects import UserRole


class User:
    """
    User aggregate root.

    Holds the account identity (username, email), the stored password
    hash, the NSFW display preference and the role. The ID is assigned by
    the store on first save, so a freshly created user has ``id is None``.
    """

    def __init__(
        self,
        username: str,
        email: str,
        password_hash: str,
        display_nsfw: bool = False,
        role: Union[str, UserRole] = UserRole.USER,
        id: int | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id
        self._username = username
        self._email = email.strip().lower()
        self._password_hash = password_hash
        self._display_nsfw = display_nsfw
        self._role = role if isinstance(role, UserRole) else UserRole(role)
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> int | None:
        return self._id

    @property
    def username(self) -> str:
        return self._username

    @property
    def email(self) -> str:
        return self._email

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def display_nsfw(self) -> bool:
        return self._display_nsfw

    @property
    def role(self) -> UserRole:
        return self._role

    @property
    def is_admin(self) -> bool:
        return self._role == UserRole.ADMIN

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def change_password_hash(self, password_hash: str) -> None:
        self._password_hash = password_hash
        self._updated_at = utc_now()

    def set_display_nsfw(self, display_nsfw: bool) -> None:
        self._display_nsfw = display_nsfw
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        username: str,
        email: str,
        password_hash: str,
        role: UserRole = UserRole.USER,
    ) -> "User":
        """Build a new, unsaved user. NSFW display always starts disabled."""
        return cls(
            username=username,
            email=email,
            password_hash=password_hash,
            display_nsfw=False,
            role=role,
        )

    @classmethod
    def reconstitute(
        cls,
        id: int,
        username: str,
        email: str,
        password_hash: str,
        display_nsfw: bool,
        role: Union[str, UserRole],
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            username=username,
            email=email,
            password_hash=password_hash,
            display_nsfw=display_nsfw,
            role=role,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        if self._id is None or other._id is None:
            return self is other
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id) if self._id is not None else id(self)

    def __repr__(self) -> str:
        return f"User(id={self._id}, username={self._username})"
