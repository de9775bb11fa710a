"""User domain exceptions."""

from vidshare.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
)


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_ref: str) -> None:
        self.user_ref = user_ref
        super().__init__(
            "User not found",
            code=ErrorCode.USER_NOT_FOUND,
            details={"user": user_ref},
        )


class UserAlreadyExistsError(ConflictError):
    """Username or email already registered."""

    def __init__(self, username: str, email: str) -> None:
        self.username = username
        self.email = email
        super().__init__(
            "User with this username or email already exists.",
            code=ErrorCode.USER_ALREADY_EXISTS,
            details={"username": username, "email": email},
        )
