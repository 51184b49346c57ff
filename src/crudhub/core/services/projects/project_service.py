from loguru import logger
from sqlmodel import Session

from src.crudhub.core.errors import NotFound
from src.crudhub.core.services.validation import check_page, require_fields
from src.crudhub.entities.service.project import (
    Project,
    ProjectCreate,
    ProjectRepository,
    TaskCreate,
)


class ProjectService:
    """Projects and the append-only task sequence they own."""

    def __init__(self, db_session: Session):
        self._db_session = db_session
        self._repo = ProjectRepository(db_session)

    def list_projects(self, offset: int = 0, limit: int | None = None) -> list[Project]:
        check_page(offset, limit)
        return self._repo.list_all(offset=offset, limit=limit)

    def get_project(self, project_id: str) -> Project:
        project = self._repo.get(project_id)
        if project is None:
            raise NotFound("Project", project_id)
        return project

    def create_project(self, data: ProjectCreate) -> Project:
        require_fields(name=data.name, description=data.description)
        created = self._repo.create(
            Project(name=data.name, description=data.description)
        )
        self._db_session.commit()
        logger.info("Created project {}", created.id)
        return created

    def add_task(self, project_id: str, data: TaskCreate) -> Project:
        """Append a task to the end of the project's sequence and return the project."""
        if not self._repo.exists(project_id):
            raise NotFound("Project", project_id)
        require_fields(name=data.name, deadline=data.deadline)

        task = self._repo.append_task(project_id, data.name, data.deadline)
        self._db_session.commit()
        logger.info("Appended task {} to project {} at {}", task.id, project_id, task.position)
        return self.get_project(project_id)
