"""
Project use cases for the application layer.
Implements business logic for project operations.
"""

import logging
from typing import List

from app.application.use_cases.base_use_case import (
    CreateUseCase, UpdateUseCase, DeleteUseCase, GetByIdUseCase, ListUseCase
)
from app.application.dto.project_dto import (
    CreateProjectRequestDTO, UpdateProjectRequestDTO, ProjectResponseDTO
)
from app.domain.models.base import (
    EntityNotFoundError, DuplicateProjectCodeError, DependentEntitiesError
)
from app.domain.models.project import Project
from app.domain.repositories.project_repository import ProjectRepository
from app.domain.repositories.task_repository import TaskRepository


logger = logging.getLogger(__name__)


class CreateProjectUseCase(CreateUseCase[CreateProjectRequestDTO, ProjectResponseDTO]):
    """Use case for creating a new project."""

    success_message = "Project created successfully"

    def __init__(self, project_repository: ProjectRepository):
        super().__init__()
        self.project_repository = project_repository

    async def _execute_command_logic(self, request: CreateProjectRequestDTO) -> ProjectResponseDTO:
        # Codes are unique across all projects
        if self.project_repository.find_by_code(request.code):
            raise DuplicateProjectCodeError(request.code)

        project = Project.create(
            name=request.name,
            code=request.code,
            is_active=request.is_active
        )

        saved_project = self.project_repository.save(project)
        logger.info(f"Project created with id {saved_project.id} (code '{saved_project.code}')")

        return ProjectResponseDTO.from_domain(saved_project)


class UpdateProjectUseCase(UpdateUseCase[UpdateProjectRequestDTO, ProjectResponseDTO]):
    """Use case for updating project information."""

    success_message = "Project updated successfully"

    def __init__(self, project_repository: ProjectRepository):
        super().__init__()
        self.project_repository = project_repository

    async def _execute_command_logic(self, request: UpdateProjectRequestDTO) -> ProjectResponseDTO:
        project = self.project_repository.find_by_id(request.id)
        if not project:
            raise EntityNotFoundError("Project", request.id)

        # Keeping its own code is fine; taking another project's code is not
        holder = self.project_repository.find_by_code(request.code)
        if holder and holder.id != project.id:
            raise DuplicateProjectCodeError(request.code)

        project.update_info(
            name=request.name,
            code=request.code,
            is_active=request.is_active
        )

        saved_project = self.project_repository.save(project)
        return ProjectResponseDTO.from_domain(saved_project)


class DeleteProjectUseCase(DeleteUseCase[bool]):
    """Use case for deleting a project that owns no tasks."""

    success_message = "Project deleted successfully"

    def __init__(self, project_repository: ProjectRepository, task_repository: TaskRepository):
        super().__init__()
        self.project_repository = project_repository
        self.task_repository = task_repository

    async def _execute_command_logic(self, request: int) -> bool:
        project = self.project_repository.find_by_id(request)
        if not project:
            raise EntityNotFoundError("Project", request)

        task_count = self.task_repository.count_by_project(project.id)
        if task_count > 0:
            raise DependentEntitiesError("Project", project.name, "tasks", task_count)

        return self.project_repository.delete(project.id)


class GetProjectByIdUseCase(GetByIdUseCase[ProjectResponseDTO]):
    """Use case for getting a project by ID."""

    success_message = "Project retrieved successfully"

    def __init__(self, project_repository: ProjectRepository):
        super().__init__()
        self.project_repository = project_repository

    async def _execute_business_logic(self, request: int) -> ProjectResponseDTO:
        project = self.project_repository.find_by_id(request)
        if not project:
            raise EntityNotFoundError("Project", request)

        return ProjectResponseDTO.from_domain(project)


class ListProjectsUseCase(ListUseCase[None, List[ProjectResponseDTO]]):
    """Use case for listing all projects, ordered by name."""

    def __init__(self, project_repository: ProjectRepository):
        super().__init__()
        self.project_repository = project_repository

    async def _execute_business_logic(self, request: None = None) -> List[ProjectResponseDTO]:
        projects = self.project_repository.find_all()
        return [ProjectResponseDTO.from_domain(project) for project in projects]

    def _success_message(self, result: List[ProjectResponseDTO]) -> str:
        return f"Retrieved {len(result)} project(s)"
