"""
Infrastructure repositories module.
Contains SQLAlchemy implementations of domain repositories.
"""

from .project_repository import SQLAlchemyProjectRepository
from .task_repository import SQLAlchemyTaskRepository
from .time_entry_repository import SQLAlchemyTimeEntryRepository

__all__ = [
    "SQLAlchemyProjectRepository",
    "SQLAlchemyTaskRepository",
    "SQLAlchemyTimeEntryRepository",
]
