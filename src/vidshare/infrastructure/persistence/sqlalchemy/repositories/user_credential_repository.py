"""Credential lookup for the token grant, backed by the users table."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from vidshare.infrastructure.persistence.sqlalchemy.models import UserModel
from vidshare.infrastructure.persistence.sqlalchemy.repositories._utils import (
    translate_connection_errors,
)
from vidshare_auth.repositories import UserCredentialData, UserCredentialRepository


class UserCredentialRepositorySQLAlchemy(UserCredentialRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_username(self, username: str) -> UserCredentialData | None:
        return await self._find_one(UserModel.username == username)

    async def find_by_user_id(self, user_id: int) -> UserCredentialData | None:
        return await self._find_one(UserModel.id == user_id)

    async def _find_one(self, condition) -> UserCredentialData | None:
        stmt = select(
            UserModel.id,
            UserModel.username,
            UserModel.password_hash,
        ).where(condition)
        with translate_connection_errors():
            result = await self._session.execute(stmt)
        row = result.one_or_none()

        if row is None:
            return None

        return UserCredentialData(
            user_id=row.id,
            username=row.username,
            password_hash=row.password_hash,
        )
