"""User entity module.

- User: domain entity, carries the password hash
- PublicUser: the shape returned over the API
- UserTable: database persistence model
- UserRepository: data access layer
"""

from .entity import Credentials, PublicUser, User
from .repository import UserRepository
from .table import UserTable

__all__ = ["Credentials", "PublicUser", "User", "UserRepository", "UserTable"]
