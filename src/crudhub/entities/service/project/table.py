"""Project and task database table models."""

from datetime import date

from sqlmodel import Field

from src.crudhub.entities.core._base import EntityTable


class ProjectTable(EntityTable, table=True):
    __tablename__ = "projects"

    name: str
    description: str


class TaskTable(EntityTable, table=True):
    """One row per task, keyed to its project and ordered by ``position``."""

    __tablename__ = "tasks"

    project_id: str = Field(foreign_key="projects.id", index=True)
    position: int = Field(default=0)
    name: str
    deadline: date
