"""
Infrastructure mappers module.
Contains mappers for converting between domain entities and database models.
"""

from .project_mapper import ProjectMapper
from .task_mapper import TaskMapper
from .time_entry_mapper import TimeEntryMapper

__all__ = [
    "ProjectMapper",
    "TaskMapper",
    "TimeEntryMapper",
]
