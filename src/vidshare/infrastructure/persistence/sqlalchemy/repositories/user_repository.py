"""SQLAlchemy implementation of UserRepository."""

import logging

from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from vidshare.domain.shared.time import ensure_tz_aware
from vidshare.domain.user import (
    User,
    UserAlreadyExistsError,
    UserNotFoundError,
    UserRepository,
)
from vidshare.infrastructure.persistence.sqlalchemy.models import UserModel
from vidshare.infrastructure.persistence.sqlalchemy.repositories._utils import (
    translate_connection_errors,
)

logger = logging.getLogger(__name__)

# Public sort keys -> mapped columns
SORTABLE_COLUMNS = {
    "id": UserModel.id,
    "username": UserModel.username,
    "createdAt": UserModel.created_at,
}


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: int) -> User | None:
        model = await self._find_model_by_id(user_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def find_by_username(self, username: str) -> User | None:
        stmt = select(UserModel).where(UserModel.username == username)
        with translate_connection_errors():
            result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def get_by_id(self, user_id: int) -> User:
        user = await self.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(str(user_id))
        return user

    async def get_by_username(self, username: str) -> User:
        user = await self.find_by_username(username)
        if user is None:
            raise UserNotFoundError(username)
        return user

    async def exists_by_username_or_email(self, username: str, email: str) -> bool:
        stmt = (
            select(func.count())
            .select_from(UserModel)
            .where(
                or_(
                    UserModel.username == username,
                    UserModel.email == email.strip().lower(),
                ),
            )
        )
        with translate_connection_errors():
            result = await self._session.execute(stmt)
        return result.scalar_one() > 0

    async def save(self, user: User) -> User:
        existing = (
            await self._find_model_by_id(user.id) if user.id is not None else None
        )

        try:
            with translate_connection_errors():
                if existing:
                    self._update_model(existing, user)
                    model = existing
                    await self._session.flush()
                    logger.debug("Updated user: %s", user.id)
                else:
                    model = self._map_to_model(user)
                    self._session.add(model)
                    await self._session.flush()
                    logger.info(
                        "Created user: %s (username: %s)",
                        model.id,
                        model.username,
                    )
        except IntegrityError as e:
            raise UserAlreadyExistsError(user.username, user.email) from e

        return self._map_to_domain(model)

    async def destroy(self, user: User) -> None:
        model = await self._find_model_by_id(user.id) if user.id is not None else None
        if model is None:
            raise UserNotFoundError(str(user.id))

        with translate_connection_errors():
            await self._session.delete(model)
            await self._session.flush()
        logger.info("Deleted user: %s (username: %s)", user.id, user.username)

    async def count(self) -> int:
        stmt = select(func.count()).select_from(UserModel)
        with translate_connection_errors():
            result = await self._session.execute(stmt)
        return result.scalar_one()

    async def list_for_api(
        self,
        start: int,
        count: int,
        sort: str,
    ) -> tuple[list[User], int]:
        descending = sort.startswith("-")
        column = SORTABLE_COLUMNS[sort.lstrip("-")]
        order = column.desc() if descending else column.asc()

        stmt = (
            select(UserModel)
            .order_by(order, UserModel.id.asc())
            .offset(start)
            .limit(count)
        )
        with translate_connection_errors():
            result = await self._session.execute(stmt)
            models = result.scalars().all()
            total = await self.count()

        return [self._map_to_domain(model) for model in models], total

    async def _find_model_by_id(self, user_id: int) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        with translate_connection_errors():
            result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            username=model.username,
            email=model.email,
            password_hash=model.password_hash,
            display_nsfw=model.display_nsfw,
            role=model.role,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            username=user.username,
            email=user.email,
            password_hash=user.password_hash,
            display_nsfw=user.display_nsfw,
            role=user.role.value,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def _update_model(self, model: UserModel, user: User) -> None:
        model.password_hash = user.password_hash
        model.display_nsfw = user.display_nsfw
        model.role = user.role.value
        model.updated_at = user.updated_at
