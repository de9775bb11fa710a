"""Token issuance for the OAuth2 password and refresh-token grants."""

import logging

from vidshare_auth.exceptions import (
    InvalidGrantError,
    InvalidRequestError,
    InvalidTokenError,
    UnsupportedGrantTypeError,
)
from vidshare_auth.repositories import UserCredentialData, UserCredentialRepository
from vidshare_auth.schemas import TokenGrant
from vidshare_auth.services.jwt_service import JWTService
from vidshare_auth.services.password_service import PasswordHashingService

logger = logging.getLogger(__name__)

PASSWORD_GRANT = "password"
REFRESH_TOKEN_GRANT = "refresh_token"  # NOQA: S105


class TokenGrantService:
    """Exchange user credentials (or a refresh token) for a token pair.

    Tokens are stateless JWTs; nothing is stored server-side.
    """

    def __init__(
        self,
        credential_repository: UserCredentialRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._credential_repo = credential_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    async def grant(
        self,
        grant_type: str | None,
        username: str | None = None,
        password: str | None = None,
        refresh_token: str | None = None,
    ) -> TokenGrant:
        if not grant_type:
            raise InvalidRequestError("Missing parameter: `grant_type`")

        if grant_type == PASSWORD_GRANT:
            return await self._password_grant(username, password)
        if grant_type == REFRESH_TOKEN_GRANT:
            return await self._refresh_token_grant(refresh_token)

        raise UnsupportedGrantTypeError(
            f"Unsupported grant type: `{grant_type}` is not supported",
        )

    async def _password_grant(
        self,
        username: str | None,
        password: str | None,
    ) -> TokenGrant:
        if not username:
            raise InvalidRequestError("Missing parameter: `username`")
        if not password:
            raise InvalidRequestError("Missing parameter: `password`")

        credential = await self._credential_repo.find_by_username(username)
        if credential is None:
            raise InvalidGrantError

        if not self._password_service.verify(password, credential.password_hash):
            logger.info("Rejected password grant for user: %s", username)
            raise InvalidGrantError

        logger.debug("Issued tokens for user: %s", username)
        return self._issue(credential)

    async def _refresh_token_grant(self, refresh_token: str | None) -> TokenGrant:
        if not refresh_token:
            raise InvalidRequestError("Missing parameter: `refresh_token`")

        try:
            payload = self._jwt_service.verify_token(refresh_token)
        except InvalidTokenError as e:
            raise InvalidGrantError("Invalid grant: refresh token is invalid") from e

        if not payload.is_refresh_token():
            raise InvalidGrantError("Invalid grant: refresh token is invalid")

        credential = await self._credential_repo.find_by_user_id(payload.user_id)
        if credential is None:
            raise InvalidGrantError("Invalid grant: user no longer exists")

        return self._issue(credential)

    def _issue(self, credential: UserCredentialData) -> TokenGrant:
        access_token = self._jwt_service.create_access_token(
            user_id=credential.user_id,
            username=credential.username,
        )
        refresh_token = self._jwt_service.create_refresh_token(
            user_id=credential.user_id,
            username=credential.username,
        )
        return TokenGrant(
            access_token=access_token,
            refresh_token=refresh_token,
            expires_in=int(self._jwt_service.access_token_lifetime.total_seconds()),
        )
