"""Entity package: Project and its tasks."""

from .entity import Project, ProjectCreate, Task, TaskCreate
from .repository import ProjectRepository
from .table import ProjectTable, TaskTable

__all__ = [
    "Project",
    "ProjectCreate",
    "ProjectRepository",
    "ProjectTable",
    "Task",
    "TaskCreate",
    "TaskTable",
]
