"""
Task mapper for converting between domain entities and database models.
"""

from app.domain.models.task import Task
from app.infrastructure.db.models import TaskModel
from app.infrastructure.mappers.project_mapper import ProjectMapper


class TaskMapper:
    """Maps between Task domain entity and TaskModel database model."""

    def __init__(self):
        self.project_mapper = ProjectMapper()

    def domain_to_model(self, task: Task) -> TaskModel:
        """Convert Task domain entity to TaskModel."""
        return TaskModel(
            id=task.id,
            name=task.name,
            project_id=task.project_id,
            is_active=task.is_active
        )

    def update_model(self, model: TaskModel, task: Task) -> TaskModel:
        """Copy editable fields onto an already persisted model."""
        model.name = task.name
        model.project_id = task.project_id
        model.is_active = task.is_active
        return model

    def model_to_domain(self, model: TaskModel) -> Task:
        """Convert TaskModel to Task domain entity, with its project when loaded."""
        return Task(
            id=model.id,
            name=model.name,
            project_id=model.project_id,
            is_active=bool(model.is_active),
            project=self.project_mapper.model_to_domain(model.project) if model.project else None
        )
