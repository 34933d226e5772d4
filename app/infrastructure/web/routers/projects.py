"""
Project management router.
Handles CRUD operations for project resources.
"""

from typing import Annotated
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.application.use_cases.project_use_cases import (
    CreateProjectUseCase,
    UpdateProjectUseCase,
    DeleteProjectUseCase,
    GetProjectByIdUseCase,
    ListProjectsUseCase
)
from app.application.dto.project_dto import CreateProjectRequestDTO, UpdateProjectRequestDTO
from app.infrastructure.repositories.project_repository import SQLAlchemyProjectRepository
from app.infrastructure.repositories.task_repository import SQLAlchemyTaskRepository
from app.infrastructure.web.dependencies import get_project_repository, get_task_repository
from app.infrastructure.web.responses import to_api_response


router = APIRouter()


@router.get("")
async def list_projects(
    repository: Annotated[SQLAlchemyProjectRepository, Depends(get_project_repository)]
) -> JSONResponse:
    """
    List all projects ordered by name.
    """
    result = await ListProjectsUseCase(repository).execute(None)
    return to_api_response(result)


@router.get("/{project_id}")
async def get_project(
    project_id: int,
    repository: Annotated[SQLAlchemyProjectRepository, Depends(get_project_repository)]
) -> JSONResponse:
    """
    Get a specific project by ID.

    - **project_id**: Project ID to retrieve
    """
    result = await GetProjectByIdUseCase(repository).execute(project_id)
    return to_api_response(result)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_project(
    request: CreateProjectRequestDTO,
    repository: Annotated[SQLAlchemyProjectRepository, Depends(get_project_repository)]
) -> JSONResponse:
    """
    Create a new project.

    - **name**: Project name (required, up to 200 characters)
    - **code**: Project code, unique across all projects (required, up to 50 characters)
    - **isActive**: Whether the project is active (default true)
    """
    result = await CreateProjectUseCase(repository).execute(request)
    return to_api_response(result, success_status_code=status.HTTP_201_CREATED)


@router.put("/{project_id}")
async def update_project(
    project_id: int,
    request: UpdateProjectRequestDTO,
    repository: Annotated[SQLAlchemyProjectRepository, Depends(get_project_repository)]
) -> JSONResponse:
    """
    Update a project. All fields are overwritten.

    - **project_id**: Project ID to update
    """
    request = request.model_copy(update={"id": project_id})
    result = await UpdateProjectUseCase(repository).execute(request)
    return to_api_response(result)


@router.delete("/{project_id}")
async def delete_project(
    project_id: int,
    repository: Annotated[SQLAlchemyProjectRepository, Depends(get_project_repository)],
    task_repository: Annotated[SQLAlchemyTaskRepository, Depends(get_task_repository)]
) -> JSONResponse:
    """
    Delete a project. Fails while the project still owns tasks.

    - **project_id**: Project ID to delete
    """
    result = await DeleteProjectUseCase(repository, task_repository).execute(project_id)
    return to_api_response(result)
