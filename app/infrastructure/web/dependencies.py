"""
Repository dependencies for FastAPI routers.
Each request gets repositories bound to its own database session.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from app.infrastructure.db.database import get_db
from app.infrastructure.repositories.project_repository import SQLAlchemyProjectRepository
from app.infrastructure.repositories.task_repository import SQLAlchemyTaskRepository
from app.infrastructure.repositories.time_entry_repository import SQLAlchemyTimeEntryRepository


def get_project_repository(session: Session = Depends(get_db)) -> SQLAlchemyProjectRepository:
    """Dependency to get project repository."""
    return SQLAlchemyProjectRepository(session)


def get_task_repository(session: Session = Depends(get_db)) -> SQLAlchemyTaskRepository:
    """Dependency to get task repository."""
    return SQLAlchemyTaskRepository(session)


def get_time_entry_repository(session: Session = Depends(get_db)) -> SQLAlchemyTimeEntryRepository:
    """Dependency to get time entry repository."""
    return SQLAlchemyTimeEntryRepository(session)
