"""User database table model."""

from sqlmodel import Field

from src.crudhub.entities.core._base import EntityTable


class UserTable(EntityTable, table=True):
    """Database persistence model for users."""

    __tablename__ = "users"

    email: str = Field(unique=True, index=True)
    password_hash: str
