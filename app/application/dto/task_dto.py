"""
Task DTOs for the application layer.
Data Transfer Objects for task-related operations.
"""

from typing import Optional
from pydantic import Field

from app.domain.models.task import Task, TASK_NAME_MAX_LENGTH
from .base_dto import CreateRequestDTO, NonBlankStr, ResponseDTO, UpdateRequestDTO
from .project_dto import ProjectResponseDTO


class CreateTaskRequestDTO(CreateRequestDTO):
    """DTO for creating a new task."""

    name: NonBlankStr = Field(min_length=1, max_length=TASK_NAME_MAX_LENGTH, description="Task name")
    project_id: int = Field(ge=1, description="Owning project ID")
    is_active: bool = Field(default=True, description="Whether time can be recorded on the task")


class UpdateTaskRequestDTO(UpdateRequestDTO):
    """DTO for updating a task. Changing project_id moves the task."""

    name: NonBlankStr = Field(min_length=1, max_length=TASK_NAME_MAX_LENGTH, description="Task name")
    project_id: int = Field(ge=1, description="Owning project ID")
    is_active: bool = Field(default=True, description="Whether time can be recorded on the task")


class TaskResponseDTO(ResponseDTO):
    """DTO for task responses, with the owning project embedded."""

    name: str
    project_id: int
    is_active: bool
    project: Optional[ProjectResponseDTO] = None

    @classmethod
    def from_domain(cls, task: Task) -> "TaskResponseDTO":
        return cls(
            id=task.id,
            name=task.name,
            project_id=task.project_id,
            is_active=task.is_active,
            project=ProjectResponseDTO.from_domain(task.project) if task.project else None
        )
