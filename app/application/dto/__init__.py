"""
Application layer DTOs.
Data Transfer Objects for API requests and responses.
"""

from .base_dto import *
from .project_dto import *
from .task_dto import *
from .time_entry_dto import *

__all__ = [
    # Base DTOs
    "BaseDTO",
    "RequestDTO",
    "ResponseDTO",
    "CreateRequestDTO",
    "UpdateRequestDTO",
    "ApiResponseDTO",
    "NonBlankStr",

    # Project DTOs
    "CreateProjectRequestDTO",
    "UpdateProjectRequestDTO",
    "ProjectResponseDTO",

    # Task DTOs
    "CreateTaskRequestDTO",
    "UpdateTaskRequestDTO",
    "TaskResponseDTO",

    # Time Entry DTOs
    "CalendarDate",
    "CreateTimeEntryRequestDTO",
    "MonthPeriodRequestDTO",
    "TimeEntryResponseDTO",
    "DailySummaryResponseDTO",
]
