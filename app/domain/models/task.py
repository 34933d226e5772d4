"""
Task domain model.
Represents a unit of work within a project. Only active tasks accept time entries.
"""

from dataclasses import dataclass
from typing import Optional

from app.domain.models.base import BaseEntity, ValidationError
from app.domain.models.project import Project


TASK_NAME_MAX_LENGTH = 300


@dataclass(eq=False)
class Task(BaseEntity):
    """
    Task entity.
    The name is unique within the owning project.
    """

    name: str
    project_id: int
    is_active: bool = True

    # Owning project, attached by the repository when loaded
    project: Optional[Project] = None

    def __post_init__(self):
        """Validate on creation."""
        self.validate()

    def validate(self) -> None:
        """Validate task state."""
        if not self.name or not self.name.strip():
            raise ValidationError("Task name is required", "name")

        if len(self.name) > TASK_NAME_MAX_LENGTH:
            raise ValidationError(
                f"Task name too long (max {TASK_NAME_MAX_LENGTH} characters)", "name"
            )

        if not self.project_id or self.project_id < 1:
            raise ValidationError("Project ID is required", "project_id")

    @property
    def accepts_time_entries(self) -> bool:
        return self.is_active

    def update_info(self, name: str, project_id: int, is_active: bool) -> None:
        """Overwrite all editable fields. Moving to another project drops the attached one."""
        if project_id != self.project_id:
            self.project = None
        self.name = name
        self.project_id = project_id
        self.is_active = is_active
        self.validate()

    @classmethod
    def create(cls, name: str, project_id: int, is_active: bool = True) -> "Task":
        """Factory method to create a new task."""
        return cls(name=name, project_id=project_id, is_active=is_active)
