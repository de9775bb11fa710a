from vidshare.domain.user import User, UserRepository
from vidshare_auth.services import PasswordHashingService


class UpdateUserCommand:
    """Command to update the caller's own password and NSFW preference.

    ``None`` means "not supplied": that field is left untouched. An
    explicit ``display_nsfw=False`` is applied.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service

    async def execute(
        self,
        username: str,
        password: str | None = None,
        display_nsfw: bool | None = None,
    ) -> User:
        user = await self._user_repo.get_by_username(username)

        if password is not None:
            user.change_password_hash(self._password_service.hash(password))
        if display_nsfw is not None:
            user.set_display_nsfw(display_nsfw)

        return await self._user_repo.save(user)
