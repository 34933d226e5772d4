"""
Database infrastructure for the time tracking service.
"""

from .database import engine, SessionLocal, get_db, Base, build_engine, create_all_tables
from .models import ProjectModel, TaskModel, TimeEntryModel

__all__ = [
    "engine",
    "SessionLocal",
    "get_db",
    "Base",
    "build_engine",
    "create_all_tables",
    "ProjectModel",
    "TaskModel",
    "TimeEntryModel",
]
