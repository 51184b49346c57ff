"""User domain entity."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from src.crudhub.entities.core._base import Entity


class User(Entity):
    """A registered account.

    ``password_hash`` never leaves the service layer; responses use
    :class:`PublicUser`.
    """

    email: str = Field(description="Login email, unique across users")
    password_hash: str = Field(description="Encoded PBKDF2 hash", repr=False)

    def to_public(self) -> "PublicUser":
        return PublicUser(
            id=self.id,
            email=self.email,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    def __eq__(self, other: Any) -> bool:
        """Compare users by identity and email, ignoring timestamps."""
        if not isinstance(other, User):
            return False
        return self.id == other.id and self.email == other.email

    def __hash__(self) -> int:
        return hash((self.id, self.email))


class PublicUser(BaseModel):
    id: str
    email: str
    created_at: datetime
    updated_at: datetime


class Credentials(BaseModel):
    """Request body for register and login. Presence is checked by the service."""

    email: str | None = None
    password: str | None = None
