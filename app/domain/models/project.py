"""
Project domain model.
Represents a top-level grouping of tasks identified by a unique code.
"""

from dataclasses import dataclass

from app.domain.models.base import BaseEntity, ValidationError


PROJECT_NAME_MAX_LENGTH = 200
PROJECT_CODE_MAX_LENGTH = 50


@dataclass(eq=False)
class Project(BaseEntity):
    """
    Project entity.
    The code is unique across all projects; uniqueness is enforced by the
    project use cases against the repository, not by the entity itself.
    """

    name: str
    code: str
    is_active: bool = True

    def __post_init__(self):
        """Validate on creation."""
        self.validate()

    def validate(self) -> None:
        """Validate project state."""
        if not self.name or not self.name.strip():
            raise ValidationError("Project name is required", "name")

        if len(self.name) > PROJECT_NAME_MAX_LENGTH:
            raise ValidationError(
                f"Project name too long (max {PROJECT_NAME_MAX_LENGTH} characters)", "name"
            )

        if not self.code or not self.code.strip():
            raise ValidationError("Project code is required", "code")

        if len(self.code) > PROJECT_CODE_MAX_LENGTH:
            raise ValidationError(
                f"Project code too long (max {PROJECT_CODE_MAX_LENGTH} characters)", "code"
            )

    def update_info(self, name: str, code: str, is_active: bool) -> None:
        """Overwrite all editable fields at once."""
        self.name = name
        self.code = code
        self.is_active = is_active
        self.validate()

    @classmethod
    def create(cls, name: str, code: str, is_active: bool = True) -> "Project":
        """Factory method to create a new project."""
        return cls(name=name, code=code, is_active=is_active)
