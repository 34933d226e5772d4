"""
Project mapper for converting between domain entities and database models.
"""

from app.domain.models.project import Project
from app.infrastructure.db.models import ProjectModel


class ProjectMapper:
    """Maps between Project domain entity and ProjectModel database model."""

    def domain_to_model(self, project: Project) -> ProjectModel:
        """Convert Project domain entity to ProjectModel."""
        return ProjectModel(
            id=project.id,
            name=project.name,
            code=project.code,
            is_active=project.is_active
        )

    def update_model(self, model: ProjectModel, project: Project) -> ProjectModel:
        """Copy editable fields onto an already persisted model."""
        model.name = project.name
        model.code = project.code
        model.is_active = project.is_active
        return model

    def model_to_domain(self, model: ProjectModel) -> Project:
        """Convert ProjectModel to Project domain entity."""
        return Project(
            id=model.id,
            name=model.name,
            code=model.code,
            is_active=bool(model.is_active)
        )
