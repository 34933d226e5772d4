"""
Application layer use cases.
Business logic for the time tracking service.
"""

from .base_use_case import *
from .project_use_cases import *
from .task_use_cases import *
from .time_entry_use_cases import *

__all__ = [
    # Base Use Cases
    "BaseUseCase",
    "QueryUseCase",
    "CommandUseCase",
    "CreateUseCase",
    "UpdateUseCase",
    "DeleteUseCase",
    "GetByIdUseCase",
    "ListUseCase",
    "UseCaseResult",
    "ApiStatusCode",
    "STATUS_BY_ERROR_KIND",

    # Project Use Cases
    "CreateProjectUseCase",
    "UpdateProjectUseCase",
    "DeleteProjectUseCase",
    "GetProjectByIdUseCase",
    "ListProjectsUseCase",

    # Task Use Cases
    "CreateTaskUseCase",
    "UpdateTaskUseCase",
    "DeleteTaskUseCase",
    "GetTaskByIdUseCase",
    "ListTasksUseCase",
    "ListActiveTasksUseCase",

    # Time Entry Use Cases
    "CreateTimeEntryUseCase",
    "ListTimeEntriesUseCase",
    "ListTimeEntriesByDateUseCase",
    "ListTimeEntriesByMonthUseCase",
    "GetDailySummaryUseCase",
]
