"""Project tracker router."""

from fastapi import APIRouter, Depends, Query

from src.crudhub.api.http.deps import get_project_service
from src.crudhub.core.services import ProjectService
from src.crudhub.entities.service.project import Project, ProjectCreate, TaskCreate

router = APIRouter(prefix="/projects", tags=["projects"])


@router.post("", response_model=Project, status_code=201)
def create_project(
    data: ProjectCreate,
    service: ProjectService = Depends(get_project_service),
) -> Project:
    return service.create_project(data)


@router.get("", response_model=list[Project])
def list_projects(
    offset: int = Query(default=0),
    limit: int | None = Query(default=None),
    service: ProjectService = Depends(get_project_service),
) -> list[Project]:
    """List projects in creation order, each with its tasks."""
    return service.list_projects(offset=offset, limit=limit)


@router.get("/{project_id}", response_model=Project)
def get_project(
    project_id: str,
    service: ProjectService = Depends(get_project_service),
) -> Project:
    return service.get_project(project_id)


@router.post("/{project_id}/tasks", response_model=Project, status_code=201)
def add_task(
    project_id: str,
    data: TaskCreate,
    service: ProjectService = Depends(get_project_service),
) -> Project:
    """Append a task and return the updated project."""
    return service.add_task(project_id, data)
