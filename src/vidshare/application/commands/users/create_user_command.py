import logging

from vidshare.domain.user import User, UserRepository, UserRole
from vidshare_auth.services import PasswordHashingService

logger = logging.getLogger(__name__)


class CreateUserCommand:
    """Command to create a new user account.

    NSFW display always starts disabled. The role defaults to a regular
    user; only the admin route passes anything else.
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
        email: str,
        password: str,
        role: UserRole = UserRole.USER,
    ) -> User:
        password_hash = self._password_service.hash(password)
        user = User.create(
            username=username,
            email=email,
            password_hash=password_hash,
            role=role,
        )
        saved = await self._user_repo.save(user)

        logger.info("User created: %s (role: %s)", saved.username, saved.role.value)
        return saved
