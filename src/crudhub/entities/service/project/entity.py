"""Entity: Project with its ordered task sequence."""

from datetime import date
from typing import Any

from pydantic import BaseModel, Field

from src.crudhub.entities.core._base import Entity


class Task(Entity):
    """A task owned by one project.

    Tasks have their own identifier but are only created by appending to a
    project, and are always returned embedded in their project.
    """

    project_id: str
    position: int = Field(ge=0, description="Append order within the project")
    name: str
    deadline: date

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Task):
            return False
        return (
            self.id == other.id
            and self.project_id == other.project_id
            and self.name == other.name
            and self.deadline == other.deadline
        )

    def __hash__(self) -> int:
        return hash((self.id, self.project_id, self.name, self.deadline))


class Project(Entity):
    name: str
    description: str
    tasks: list[Task] = Field(default_factory=list)

    def __eq__(self, other: Any) -> bool:
        """Compare projects by business attributes, ignoring timestamps."""
        if not isinstance(other, Project):
            return False
        return (
            self.id == other.id
            and self.name == other.name
            and self.description == other.description
            and self.tasks == other.tasks
        )

    def __hash__(self) -> int:
        return hash((self.id, self.name, self.description))


class ProjectCreate(BaseModel):
    name: str | None = None
    description: str | None = None


class TaskCreate(BaseModel):
    name: str | None = None
    deadline: date | None = None
