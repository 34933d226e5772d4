"""
Time entry DTOs for the application layer.
Data Transfer Objects for time entry operations and the daily summary report.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Annotated, Any, Optional
from pydantic import BeforeValidator, Field

from app.domain.models.daily_summary import DailySummary
from app.domain.models.time_entry import TimeEntry, DESCRIPTION_MAX_LENGTH
from .base_dto import BaseDTO, CreateRequestDTO, NonBlankStr, RequestDTO, ResponseDTO
from .task_dto import TaskResponseDTO


def parse_calendar_date(value: Any) -> Any:
    """Accept a date or an ISO datetime and keep only the calendar date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str) and len(value) > 10:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    return value


CalendarDate = Annotated[date, BeforeValidator(parse_calendar_date)]


class CreateTimeEntryRequestDTO(CreateRequestDTO):
    """DTO for recording time against a task."""

    entry_date: CalendarDate = Field(alias="date", description="Calendar date of the work; time of day is dropped")
    hours: Decimal = Field(ge=Decimal("0.1"), le=Decimal("24"), max_digits=4, decimal_places=2, description="Hours worked")
    description: NonBlankStr = Field(min_length=1, max_length=DESCRIPTION_MAX_LENGTH, description="What was done")
    task_id: int = Field(ge=1, description="Task the time is recorded against")


class MonthPeriodRequestDTO(RequestDTO):
    """Calendar month to list entries for. Range checks happen in the use case."""

    year: int
    month: int


class TimeEntryResponseDTO(ResponseDTO):
    """DTO for time entry responses, with task and project embedded."""

    entry_date: date = Field(alias="date")
    hours: float
    description: str
    task_id: int
    task: Optional[TaskResponseDTO] = None

    @classmethod
    def from_domain(cls, entry: TimeEntry) -> "TimeEntryResponseDTO":
        return cls(
            id=entry.id,
            entry_date=entry.date,
            hours=float(entry.hours),
            description=entry.description,
            task_id=entry.task_id,
            task=TaskResponseDTO.from_domain(entry.task) if entry.task else None
        )


class DailySummaryResponseDTO(BaseDTO):
    """One day of the daily hours report."""

    entry_date: date = Field(alias="date")
    total_hours: float
    status: str = Field(description="insufficient, sufficient or excessive")

    @classmethod
    def from_domain(cls, summary: DailySummary) -> "DailySummaryResponseDTO":
        return cls(
            entry_date=summary.date,
            total_hours=float(summary.total_hours),
            status=summary.status.value
        )
