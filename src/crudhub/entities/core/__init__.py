from .user import PublicUser, User, UserRepository, UserTable

__all__ = ["PublicUser", "User", "UserRepository", "UserTable"]
