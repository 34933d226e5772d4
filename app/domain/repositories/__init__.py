"""
Repository interfaces for the domain layer.
This module exports all repository interfaces (ports) for dependency injection.
"""

from .project_repository import ProjectRepository
from .task_repository import TaskRepository
from .time_entry_repository import TimeEntryRepository

__all__ = [
    "ProjectRepository",
    "TaskRepository",
    "TimeEntryRepository",
]
