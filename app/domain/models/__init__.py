"""
Domain models for the time tracking service.
This module exports all domain entities and domain exceptions.
"""

# Base classes
from .base import (
    BaseEntity,
    ErrorKind,
    DomainException,
    ValidationError,
    InvalidPeriodError,
    BusinessRuleViolation,
    EntityNotFoundError,
    DuplicateEntityError,
    DuplicateProjectCodeError,
    DuplicateTaskNameError,
    ReferencedEntityNotFoundError,
    ProjectNotFoundError,
    TaskNotFoundError,
    InactiveTaskError,
    DailyHoursExceededError,
    DependentEntitiesError,
)

# Domain entities
from .project import Project
from .task import Task
from .time_entry import TimeEntry

# Read models
from .daily_summary import DailyStatus, DailySummary

__all__ = [
    # Base
    "BaseEntity",
    "ErrorKind",
    "DomainException",
    "ValidationError",
    "InvalidPeriodError",
    "BusinessRuleViolation",
    "EntityNotFoundError",
    "DuplicateEntityError",
    "DuplicateProjectCodeError",
    "DuplicateTaskNameError",
    "ReferencedEntityNotFoundError",
    "ProjectNotFoundError",
    "TaskNotFoundError",
    "InactiveTaskError",
    "DailyHoursExceededError",
    "DependentEntitiesError",

    # Entities
    "Project",
    "Task",
    "TimeEntry",

    # Read models
    "DailyStatus",
    "DailySummary",
]
