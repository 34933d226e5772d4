"""
Project DTOs for the application layer.
Data Transfer Objects for project-related operations.
"""

from pydantic import Field

from app.domain.models.project import Project, PROJECT_CODE_MAX_LENGTH, PROJECT_NAME_MAX_LENGTH
from .base_dto import CreateRequestDTO, NonBlankStr, ResponseDTO, UpdateRequestDTO


class CreateProjectRequestDTO(CreateRequestDTO):
    """DTO for creating a new project."""

    name: NonBlankStr = Field(min_length=1, max_length=PROJECT_NAME_MAX_LENGTH, description="Project name")
    code: NonBlankStr = Field(min_length=1, max_length=PROJECT_CODE_MAX_LENGTH, description="Unique project code")
    is_active: bool = Field(default=True, description="Whether the project is active")


class UpdateProjectRequestDTO(UpdateRequestDTO):
    """DTO for updating a project. Every field is overwritten."""

    name: NonBlankStr = Field(min_length=1, max_length=PROJECT_NAME_MAX_LENGTH, description="Project name")
    code: NonBlankStr = Field(min_length=1, max_length=PROJECT_CODE_MAX_LENGTH, description="Unique project code")
    is_active: bool = Field(default=True, description="Whether the project is active")


class ProjectResponseDTO(ResponseDTO):
    """DTO for project responses."""

    name: str
    code: str
    is_active: bool

    @classmethod
    def from_domain(cls, project: Project) -> "ProjectResponseDTO":
        return cls(
            id=project.id,
            name=project.name,
            code=project.code,
            is_active=project.is_active
        )
