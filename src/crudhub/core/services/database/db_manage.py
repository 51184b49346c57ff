from loguru import logger
from sqlmodel import SQLModel

from src.crudhub.core.services.database.db_session import DbSessionService


class DbManageService:
    def __init__(self, db_session_service: DbSessionService):
        self._engine = db_session_service.engine

    def create_all(self) -> None:
        """Create all database tables."""
        # Table models register themselves on import
        from src.crudhub.entities import (  # noqa: F401
            OrderTable,
            ProductTable,
            ProjectTable,
            TaskTable,
            UserTable,
        )

        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables.")
