"""Integration tests for the SQLAlchemy user, video and rating repositories.

Runs against a Testcontainers PostgreSQL so unique constraints, ordering
and UUID columns behave as they do in production.
"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from vidshare.domain.user import (
    User,
    UserAlreadyExistsError,
    UserNotFoundError,
    UserRole,
)
from vidshare.domain.video import VideoRateType
from vidshare.infrastructure.persistence.sqlalchemy.repositories import (
    UserCredentialRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
    UserVideoRateRepositorySQLAlchemy,
    VideoRepositorySQLAlchemy,
)
from tests.shared.fixtures.database import (
    TEST_UNRATED_VIDEO_ID,
    TEST_VIDEO_ID,
    make_rate_model,
    make_video_model,
)

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _user(username: str, days: int = 0, role: UserRole = UserRole.USER) -> User:
    created = BASE_TIME + timedelta(days=days)
    return User(
        username=username,
        email=f"{username}@example.com",
        password_hash="$2b$04$hash",
        role=role,
        created_at=created,
        updated_at=created,
    )


@pytest.mark.integration
class TestUserRepositorySQLAlchemy:
    @pytest.mark.asyncio
    async def test_save_assigns_id(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)

        saved = await repo.save(User.create("alice", "Alice@Example.com", "hash"))

        assert saved.id is not None
        assert saved.email == "alice@example.com"
        assert saved.display_nsfw is False
        assert (await repo.get_by_id(saved.id)).username == "alice"

    @pytest.mark.asyncio
    async def test_duplicate_username_raises(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        await repo.save(_user("alice"))

        duplicate = User.create("alice", "other@example.com", "hash")
        with pytest.raises(UserAlreadyExistsError):
            await repo.save(duplicate)

    @pytest.mark.asyncio
    async def test_exists_by_username_or_email(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        await repo.save(_user("alice"))

        assert await repo.exists_by_username_or_email("alice", "new@example.com")
        assert await repo.exists_by_username_or_email("bob", "ALICE@example.com")
        assert not await repo.exists_by_username_or_email("bob", "bob@example.com")

    @pytest.mark.asyncio
    async def test_update_persists_changes(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        user = await repo.save(_user("alice"))

        user.set_display_nsfw(True)
        user.change_password_hash("new-hash")
        await repo.save(user)

        reloaded = await repo.get_by_id(user.id)
        assert reloaded.display_nsfw is True
        assert reloaded.password_hash == "new-hash"

    @pytest.mark.asyncio
    async def test_list_for_api_sorts_and_pages(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        for days, name in enumerate(["carol", "alice", "bob"]):
            await repo.save(_user(name, days=days))

        newest_first, total = await repo.list_for_api(0, 2, "-createdAt")
        by_name, _ = await repo.list_for_api(1, 5, "username")

        assert total == 3
        assert [u.username for u in newest_first] == ["bob", "alice"]
        assert [u.username for u in by_name] == ["bob", "carol"]

    @pytest.mark.asyncio
    async def test_list_for_api_past_the_end(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        await repo.save(_user("alice"))

        users, total = await repo.list_for_api(10, 5, "id")

        assert users == []
        assert total == 1

    @pytest.mark.asyncio
    async def test_destroy(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        user = await repo.save(_user("alice"))

        await repo.destroy(user)

        assert await repo.find_by_id(user.id) is None
        assert await repo.count() == 0

    @pytest.mark.asyncio
    async def test_destroy_missing_user_raises(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        ghost = User.reconstitute(
            id=404,
            username="ghost",
            email="ghost@example.com",
            password_hash="hash",
            display_nsfw=False,
            role=UserRole.USER,
            created_at=BASE_TIME,
            updated_at=BASE_TIME,
        )

        with pytest.raises(UserNotFoundError):
            await repo.destroy(ghost)

    @pytest.mark.asyncio
    async def test_get_by_username_missing_raises(self, db_session):
        with pytest.raises(UserNotFoundError):
            await UserRepositorySQLAlchemy(db_session).get_by_username("nobody")


@pytest.mark.integration
class TestCredentialRepositorySQLAlchemy:
    @pytest.mark.asyncio
    async def test_lookup_by_username_and_id(self, db_session):
        user = await UserRepositorySQLAlchemy(db_session).save(_user("alice"))
        repo = UserCredentialRepositorySQLAlchemy(db_session)

        by_name = await repo.find_by_username("alice")
        by_id = await repo.find_by_user_id(user.id)

        assert by_name == by_id
        assert by_name.password_hash == "$2b$04$hash"
        assert await repo.find_by_username("nobody") is None


@pytest.mark.integration
class TestVideoRepositories:
    @pytest.mark.asyncio
    async def test_video_exists(self, db_session):
        db_session.add(make_video_model(TEST_VIDEO_ID, "Intro"))
        await db_session.flush()
        repo = VideoRepositorySQLAlchemy(db_session)

        assert await repo.exists(TEST_VIDEO_ID)
        assert not await repo.exists(uuid4())

    @pytest.mark.asyncio
    async def test_find_rating(self, db_session):
        user = await UserRepositorySQLAlchemy(db_session).save(_user("alice"))
        db_session.add_all(
            [
                make_video_model(TEST_VIDEO_ID, "Intro"),
                make_video_model(TEST_UNRATED_VIDEO_ID, "Outro"),
            ],
        )
        await db_session.flush()
        db_session.add(make_rate_model(user.id, TEST_VIDEO_ID, "like"))
        await db_session.flush()
        repo = UserVideoRateRepositorySQLAlchemy(db_session)

        rate = await repo.find(user.id, TEST_VIDEO_ID)

        assert rate.type == VideoRateType.LIKE
        assert await repo.find(user.id, TEST_UNRATED_VIDEO_ID) is None
