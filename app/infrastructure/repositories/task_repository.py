"""
Task repository implementation using SQLAlchemy.
"""

import logging
from typing import Optional, List
from sqlalchemy.orm import Session, joinedload
from sqlalchemy import func

from app.domain.models.task import Task
from app.domain.repositories.task_repository import TaskRepository
from app.domain.models.base import EntityNotFoundError
from app.infrastructure.db.models import TaskModel
from app.infrastructure.mappers.task_mapper import TaskMapper


logger = logging.getLogger(__name__)


class SQLAlchemyTaskRepository(TaskRepository):
    """SQLAlchemy implementation of task repository."""

    def __init__(self, session: Session):
        self.session = session
        self.mapper = TaskMapper()

    def _query(self):
        return self.session.query(TaskModel).options(joinedload(TaskModel.project))

    def save(self, task: Task) -> Task:
        """Save a task entity."""
        try:
            if task.is_new:
                model = self.mapper.domain_to_model(task)
                self.session.add(model)
            else:
                model = self.session.query(TaskModel).filter_by(id=task.id).first()
                if not model:
                    raise EntityNotFoundError("Task", task.id)
                self.mapper.update_model(model, task)

            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

        # Reload with the owning project attached
        return self.find_by_id(model.id)

    def find_by_id(self, task_id: int) -> Optional[Task]:
        """Get task by ID."""
        model = self._query().filter(TaskModel.id == task_id).first()

        if not model:
            return None

        return self.mapper.model_to_domain(model)

    def find_by_name(self, project_id: int, name: str) -> Optional[Task]:
        """Get task by exact name within a project."""
        model = self._query().filter(
            TaskModel.project_id == project_id,
            TaskModel.name == name
        ).first()

        if not model:
            return None

        return self.mapper.model_to_domain(model)

    def find_all(self) -> List[Task]:
        """Get all tasks ordered by name."""
        models = self._query().order_by(TaskModel.name, TaskModel.id).all()
        return [self.mapper.model_to_domain(model) for model in models]

    def find_active(self) -> List[Task]:
        """Get active tasks ordered by name."""
        models = self._query().filter(
            TaskModel.is_active.is_(True)
        ).order_by(TaskModel.name, TaskModel.id).all()
        return [self.mapper.model_to_domain(model) for model in models]

    def count_by_project(self, project_id: int) -> int:
        """Get task count for project."""
        return self.session.query(func.count(TaskModel.id)).filter_by(
            project_id=project_id
        ).scalar()

    def delete(self, task_id: int) -> bool:
        """Delete task by ID."""
        model = self.session.query(TaskModel).filter_by(id=task_id).first()

        if not model:
            return False

        try:
            self.session.delete(model)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

        logger.info(f"Task {task_id} deleted")
        return True
