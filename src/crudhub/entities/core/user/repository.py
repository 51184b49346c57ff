from sqlmodel import Session, select

from .entity import User
from .table import UserTable


class UserRepository:
    """Data-access layer for users."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, user_id: str) -> User | None:
        row = self._session.get(UserTable, user_id)
        if row is None:
            return None
        return User.model_validate(row, from_attributes=True)

    def get_by_email(self, email: str) -> User | None:
        statement = select(UserTable).where(UserTable.email == email)
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return User.model_validate(row, from_attributes=True)

    def count_by_email(self, email: str) -> int:
        statement = select(UserTable).where(UserTable.email == email)
        return len(self._session.exec(statement).all())

    def create(self, user: User) -> User:
        """Stage a new user row. Unique violations surface on flush as IntegrityError."""
        row = UserTable.model_validate(user.model_dump())
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return User.model_validate(row, from_attributes=True)
