from vidshare.domain.user.value_objects.user_role import UserRole

__all__ = ["UserRole"]
