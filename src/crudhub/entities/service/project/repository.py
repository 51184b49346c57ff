from collections import defaultdict
from datetime import date

from sqlalchemy import func
from sqlmodel import Session, select

from .entity import Project, Task
from .table import ProjectTable, TaskTable


class ProjectRepository:
    """Data-access layer for projects and their tasks."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def _tasks_for(self, project_ids: list[str]) -> dict[str, list[Task]]:
        if not project_ids:
            return {}
        statement = (
            select(TaskTable)
            .where(TaskTable.project_id.in_(project_ids))
            .order_by(TaskTable.position, TaskTable.created_at, TaskTable.id)
        )
        grouped: dict[str, list[Task]] = defaultdict(list)
        for row in self._session.exec(statement).all():
            grouped[row.project_id].append(Task.model_validate(row, from_attributes=True))
        return grouped

    def _to_entity(self, row: ProjectTable, tasks: list[Task]) -> Project:
        return Project(
            id=row.id,
            name=row.name,
            description=row.description,
            tasks=tasks,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    def exists(self, project_id: str) -> bool:
        return self._session.get(ProjectTable, project_id) is not None

    def get(self, project_id: str) -> Project | None:
        row = self._session.get(ProjectTable, project_id)
        if row is None:
            return None
        tasks = self._tasks_for([row.id]).get(row.id, [])
        return self._to_entity(row, tasks)

    def list_all(self, offset: int = 0, limit: int | None = None) -> list[Project]:
        """Return projects in creation order, each with its tasks."""
        statement = (
            select(ProjectTable)
            .order_by(ProjectTable.created_at, ProjectTable.id)
            .offset(offset)
        )
        if limit is not None:
            statement = statement.limit(limit)
        rows = self._session.exec(statement).all()
        tasks = self._tasks_for([row.id for row in rows])
        return [self._to_entity(row, tasks.get(row.id, [])) for row in rows]

    def create(self, project: Project) -> Project:
        row = ProjectTable(
            id=project.id,
            name=project.name,
            description=project.description,
            created_at=project.created_at,
            updated_at=project.updated_at,
        )
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return self._to_entity(row, [])

    def count_tasks(self, project_id: str) -> int:
        statement = select(func.count()).select_from(TaskTable).where(
            TaskTable.project_id == project_id
        )
        return self._session.exec(statement).one()

    def append_task(self, project_id: str, name: str, deadline: date) -> Task:
        """Insert a task at the end of the project's sequence.

        Only the child row is written; the project row is never rewritten.
        """
        row = TaskTable(
            project_id=project_id,
            position=self.count_tasks(project_id),
            name=name,
            deadline=deadline,
        )
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Task.model_validate(row, from_attributes=True)
