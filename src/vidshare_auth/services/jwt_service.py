"""HS256 bearer tokens for the users API.

Tokens carry the integer user id as ``sub`` plus the login name and a
``type`` claim separating access tokens from refresh tokens.
"""

from datetime import datetime, timedelta, timezone

import jwt

from vidshare_auth.exceptions import InvalidTokenError
from vidshare_auth.schemas import ACCESS_TOKEN, REFRESH_TOKEN, TokenPayload


class JWTService:
    """Service for JWT token creation and verification.

    Handles access tokens (short-lived) and refresh tokens (long-lived)
    issued by the token endpoint.

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key")
    >>> token = service.create_access_token(42, "alice")
    >>> payload = service.verify_token(token)
    >>> print(payload.user_id)
    42
    """

    DEFAULT_ACCESS_EXPIRE_HOURS = 4
    DEFAULT_REFRESH_EXPIRE_DAYS = 14
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        access_token_expire_hours: int = DEFAULT_ACCESS_EXPIRE_HOURS,
        refresh_token_expire_days: int = DEFAULT_REFRESH_EXPIRE_DAYS,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Must be kept secure.
        access_token_expire_hours
            Hours until access token expires
        refresh_token_expire_days
            Days until refresh token expires
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._access_expire = timedelta(hours=access_token_expire_hours)
        self._refresh_expire = timedelta(days=refresh_token_expire_days)

    @property
    def access_token_lifetime(self) -> timedelta:
        return self._access_expire

    def create_access_token(
        self,
        user_id: int,
        username: str,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a short-lived access token."""
        return self._create_token(
            user_id=user_id,
            username=username,
            token_type=ACCESS_TOKEN,
            expires_delta=expires_delta or self._access_expire,
        )

    def create_refresh_token(
        self,
        user_id: int,
        username: str,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a long-lived refresh token.

        Refresh tokens are exchanged at the token endpoint for a new
        token pair without sending the password again.
        """
        return self._create_token(
            user_id=user_id,
            username=username,
            token_type=REFRESH_TOKEN,
            expires_delta=expires_delta or self._refresh_expire,
        )

    def verify_token(self, token: str) -> TokenPayload:
        """Verify and decode a JWT token.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        TokenPayload containing the decoded data

        Raises
        ------
        InvalidTokenError
            If token is invalid, expired, or malformed
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
            )

            user_id = int(payload["sub"])
            username = payload["username"]
            exp = datetime.fromtimestamp(payload["exp"], tz=timezone.utc)
            token_type = payload.get("type", ACCESS_TOKEN)

            return TokenPayload(
                user_id=user_id,
                username=username,
                exp=exp,
                token_type=token_type,
            )

        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, ValueError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e

    def _create_token(
        self,
        user_id: int,
        username: str,
        token_type: str,
        expires_delta: timedelta,
    ) -> str:
        now = datetime.now(tz=timezone.utc)
        expire = now + expires_delta

        payload = {
            "sub": str(user_id),
            "username": username,
            "type": token_type,
            "iat": now,
            "exp": expire,
        }

        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)
