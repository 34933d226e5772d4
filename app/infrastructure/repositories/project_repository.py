"""
Project repository implementation using SQLAlchemy.
"""

import logging
from typing import Optional, List
from sqlalchemy.orm import Session

from app.domain.models.project import Project
from app.domain.repositories.project_repository import ProjectRepository
from app.domain.models.base import EntityNotFoundError
from app.infrastructure.db.models import ProjectModel
from app.infrastructure.mappers.project_mapper import ProjectMapper


logger = logging.getLogger(__name__)


class SQLAlchemyProjectRepository(ProjectRepository):
    """SQLAlchemy implementation of project repository."""

    def __init__(self, session: Session):
        self.session = session
        self.mapper = ProjectMapper()

    def save(self, project: Project) -> Project:
        """Save a project entity."""
        try:
            if project.is_new:
                model = self.mapper.domain_to_model(project)
                self.session.add(model)
            else:
                model = self.session.query(ProjectModel).filter_by(id=project.id).first()
                if not model:
                    raise EntityNotFoundError("Project", project.id)
                self.mapper.update_model(model, project)

            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

        self.session.refresh(model)
        return self.mapper.model_to_domain(model)

    def find_by_id(self, project_id: int) -> Optional[Project]:
        """Get project by ID."""
        model = self.session.query(ProjectModel).filter_by(id=project_id).first()

        if not model:
            return None

        return self.mapper.model_to_domain(model)

    def find_by_code(self, code: str) -> Optional[Project]:
        """Get project by exact code."""
        model = self.session.query(ProjectModel).filter(ProjectModel.code == code).first()

        if not model:
            return None

        return self.mapper.model_to_domain(model)

    def find_all(self) -> List[Project]:
        """Get all projects ordered by name."""
        models = self.session.query(ProjectModel).order_by(ProjectModel.name, ProjectModel.id).all()
        return [self.mapper.model_to_domain(model) for model in models]

    def delete(self, project_id: int) -> bool:
        """Delete project by ID."""
        model = self.session.query(ProjectModel).filter_by(id=project_id).first()

        if not model:
            return False

        try:
            self.session.delete(model)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

        logger.info(f"Project {project_id} deleted")
        return True
