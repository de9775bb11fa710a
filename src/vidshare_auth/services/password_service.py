"""bcrypt password hashing for stored account credentials."""

import bcrypt

from vidshare_auth.exceptions import WeakPasswordError


class PasswordHashingService:
    """Hash and check account passwords with bcrypt.

    The length limits match what request validation enforces, so a password
    that passed the API schemas never fails here. The upper bound is in
    bytes because bcrypt refuses longer inputs.

    Examples
    --------
    >>> service = PasswordHashingService(rounds=4)
    >>> stored = service.hash("correct-horse")
    >>> service.verify("correct-horse", stored)
    True
    """

    MIN_LENGTH = 6
    MAX_LENGTH = 72

    def __init__(self, rounds: int = 12):
        self._rounds = rounds

    def hash(self, password: str) -> str:
        """Return the bcrypt hash of ``password``.

        Raises
        ------
        WeakPasswordError
            If the password is empty, too short or too long
        """
        self.validate_strength(password)
        hashed = bcrypt.hashpw(
            password.encode("utf-8"),
            bcrypt.gensalt(rounds=self._rounds),
        )
        return hashed.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"),
                password_hash.encode("utf-8"),
            )
        except (ValueError, TypeError):
            # Stored value is not a bcrypt hash
            return False

    def validate_strength(self, password: str) -> None:
        if not password:
            msg = "Password cannot be empty"
            raise WeakPasswordError(msg)

        if len(password) < self.MIN_LENGTH:
            msg = f"Password must be at least {self.MIN_LENGTH} characters"
            raise WeakPasswordError(msg)

        if len(password.encode("utf-8")) > self.MAX_LENGTH:
            msg = f"Password cannot exceed {self.MAX_LENGTH} bytes"
            raise WeakPasswordError(msg)
