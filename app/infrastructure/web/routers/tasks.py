"""
Task management router.
Handles CRUD operations for tasks within projects.
"""

from typing import Annotated
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.application.use_cases.task_use_cases import (
    CreateTaskUseCase,
    UpdateTaskUseCase,
    DeleteTaskUseCase,
    GetTaskByIdUseCase,
    ListTasksUseCase,
    ListActiveTasksUseCase
)
from app.application.dto.task_dto import CreateTaskRequestDTO, UpdateTaskRequestDTO
from app.infrastructure.repositories.project_repository import SQLAlchemyProjectRepository
from app.infrastructure.repositories.task_repository import SQLAlchemyTaskRepository
from app.infrastructure.repositories.time_entry_repository import SQLAlchemyTimeEntryRepository
from app.infrastructure.web.dependencies import (
    get_project_repository, get_task_repository, get_time_entry_repository
)
from app.infrastructure.web.responses import to_api_response


router = APIRouter()


@router.get("")
async def list_tasks(
    repository: Annotated[SQLAlchemyTaskRepository, Depends(get_task_repository)]
) -> JSONResponse:
    """
    List all tasks ordered by name, each with its project.
    """
    result = await ListTasksUseCase(repository).execute(None)
    return to_api_response(result)


@router.get("/active")
async def list_active_tasks(
    repository: Annotated[SQLAlchemyTaskRepository, Depends(get_task_repository)]
) -> JSONResponse:
    """
    List the active tasks, the only ones that accept time entries.
    """
    result = await ListActiveTasksUseCase(repository).execute(None)
    return to_api_response(result)


@router.get("/{task_id}")
async def get_task(
    task_id: int,
    repository: Annotated[SQLAlchemyTaskRepository, Depends(get_task_repository)]
) -> JSONResponse:
    """
    Get a specific task by ID.
    """
    result = await GetTaskByIdUseCase(repository).execute(task_id)
    return to_api_response(result)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_task(
    request: CreateTaskRequestDTO,
    repository: Annotated[SQLAlchemyTaskRepository, Depends(get_task_repository)],
    project_repository: Annotated[SQLAlchemyProjectRepository, Depends(get_project_repository)]
) -> JSONResponse:
    """
    Create a new task.

    - **name**: Task name, unique within the project (required, up to 300 characters)
    - **projectId**: Owning project ID (required)
    - **isActive**: Whether time can be recorded on the task (default true)
    """
    result = await CreateTaskUseCase(repository, project_repository).execute(request)
    return to_api_response(result, success_status_code=status.HTTP_201_CREATED)


@router.put("/{task_id}")
async def update_task(
    task_id: int,
    request: UpdateTaskRequestDTO,
    repository: Annotated[SQLAlchemyTaskRepository, Depends(get_task_repository)],
    project_repository: Annotated[SQLAlchemyProjectRepository, Depends(get_project_repository)]
) -> JSONResponse:
    """
    Update a task. Changing projectId moves the task to another project.
    """
    request = request.model_copy(update={"id": task_id})
    result = await UpdateTaskUseCase(repository, project_repository).execute(request)
    return to_api_response(result)


@router.delete("/{task_id}")
async def delete_task(
    task_id: int,
    repository: Annotated[SQLAlchemyTaskRepository, Depends(get_task_repository)],
    time_entry_repository: Annotated[SQLAlchemyTimeEntryRepository, Depends(get_time_entry_repository)]
) -> JSONResponse:
    """
    Delete a task. Fails while time is recorded against it.
    """
    result = await DeleteTaskUseCase(repository, time_entry_repository).execute(task_id)
    return to_api_response(result)
