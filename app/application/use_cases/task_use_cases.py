"""
Task use cases for the application layer.
Implements business logic for task operations.
"""

import logging
from typing import List

from app.application.use_cases.base_use_case import (
    CreateUseCase, UpdateUseCase, DeleteUseCase, GetByIdUseCase, ListUseCase
)
from app.application.dto.task_dto import (
    CreateTaskRequestDTO, UpdateTaskRequestDTO, TaskResponseDTO
)
from app.domain.models.base import (
    EntityNotFoundError, ProjectNotFoundError, DuplicateTaskNameError, DependentEntitiesError
)
from app.domain.models.task import Task
from app.domain.repositories.project_repository import ProjectRepository
from app.domain.repositories.task_repository import TaskRepository
from app.domain.repositories.time_entry_repository import TimeEntryRepository


logger = logging.getLogger(__name__)


class CreateTaskUseCase(CreateUseCase[CreateTaskRequestDTO, TaskResponseDTO]):
    """Use case for creating a new task in an existing project."""

    success_message = "Task created successfully"

    def __init__(self, task_repository: TaskRepository, project_repository: ProjectRepository):
        super().__init__()
        self.task_repository = task_repository
        self.project_repository = project_repository

    async def _execute_command_logic(self, request: CreateTaskRequestDTO) -> TaskResponseDTO:
        project = self.project_repository.find_by_id(request.project_id)
        if not project:
            raise ProjectNotFoundError(request.project_id)

        # Names are unique per project only
        if self.task_repository.find_by_name(request.project_id, request.name):
            raise DuplicateTaskNameError(request.name, request.project_id)

        task = Task.create(
            name=request.name,
            project_id=request.project_id,
            is_active=request.is_active
        )

        saved_task = self.task_repository.save(task)
        if saved_task.project is None:
            saved_task.project = project

        logger.info(f"Task created with id {saved_task.id} in project {saved_task.project_id}")
        return TaskResponseDTO.from_domain(saved_task)


class UpdateTaskUseCase(UpdateUseCase[UpdateTaskRequestDTO, TaskResponseDTO]):
    """
    Use case for updating a task.
    Moving a task re-checks name uniqueness in the destination project.
    """

    success_message = "Task updated successfully"

    def __init__(self, task_repository: TaskRepository, project_repository: ProjectRepository):
        super().__init__()
        self.task_repository = task_repository
        self.project_repository = project_repository

    async def _execute_command_logic(self, request: UpdateTaskRequestDTO) -> TaskResponseDTO:
        task = self.task_repository.find_by_id(request.id)
        if not task:
            raise EntityNotFoundError("Task", request.id)

        project = self.project_repository.find_by_id(request.project_id)
        if not project:
            raise ProjectNotFoundError(request.project_id)

        holder = self.task_repository.find_by_name(request.project_id, request.name)
        if holder and holder.id != task.id:
            raise DuplicateTaskNameError(request.name, request.project_id)

        task.update_info(
            name=request.name,
            project_id=request.project_id,
            is_active=request.is_active
        )

        saved_task = self.task_repository.save(task)
        if saved_task.project is None:
            saved_task.project = project

        return TaskResponseDTO.from_domain(saved_task)


class DeleteTaskUseCase(DeleteUseCase[bool]):
    """Use case for deleting a task that has no recorded time."""

    success_message = "Task deleted successfully"

    def __init__(self, task_repository: TaskRepository, time_entry_repository: TimeEntryRepository):
        super().__init__()
        self.task_repository = task_repository
        self.time_entry_repository = time_entry_repository

    async def _execute_command_logic(self, request: int) -> bool:
        task = self.task_repository.find_by_id(request)
        if not task:
            raise EntityNotFoundError("Task", request)

        entry_count = self.time_entry_repository.count_by_task(task.id)
        if entry_count > 0:
            raise DependentEntitiesError("Task", task.name, "time entries", entry_count)

        return self.task_repository.delete(task.id)


class GetTaskByIdUseCase(GetByIdUseCase[TaskResponseDTO]):
    """Use case for getting a task by ID."""

    success_message = "Task retrieved successfully"

    def __init__(self, task_repository: TaskRepository):
        super().__init__()
        self.task_repository = task_repository

    async def _execute_business_logic(self, request: int) -> TaskResponseDTO:
        task = self.task_repository.find_by_id(request)
        if not task:
            raise EntityNotFoundError("Task", request)

        return TaskResponseDTO.from_domain(task)


class ListTasksUseCase(ListUseCase[None, List[TaskResponseDTO]]):
    """Use case for listing all tasks, ordered by name."""

    def __init__(self, task_repository: TaskRepository):
        super().__init__()
        self.task_repository = task_repository

    async def _execute_business_logic(self, request: None = None) -> List[TaskResponseDTO]:
        return [TaskResponseDTO.from_domain(task) for task in self.task_repository.find_all()]

    def _success_message(self, result: List[TaskResponseDTO]) -> str:
        return f"Retrieved {len(result)} task(s)"


class ListActiveTasksUseCase(ListUseCase[None, List[TaskResponseDTO]]):
    """Use case for listing the tasks that accept time entries."""

    def __init__(self, task_repository: TaskRepository):
        super().__init__()
        self.task_repository = task_repository

    async def _execute_business_logic(self, request: None = None) -> List[TaskResponseDTO]:
        return [TaskResponseDTO.from_domain(task) for task in self.task_repository.find_active()]

    def _success_message(self, result: List[TaskResponseDTO]) -> str:
        return f"Retrieved {len(result)} active task(s)"
