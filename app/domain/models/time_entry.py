"""
TimeEntry domain model.
Represents hours of work recorded against a task on one calendar day.
"""

from dataclasses import dataclass
from datetime import datetime, date
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

from app.domain.models.base import BaseEntity, ValidationError
from app.domain.models.task import Task


MIN_ENTRY_HOURS = Decimal("0.1")
MAX_ENTRY_HOURS = Decimal("24")
DESCRIPTION_MAX_LENGTH = 500

HOURS_QUANTUM = Decimal("0.01")


def normalize_entry_date(value: Union[date, datetime]) -> date:
    """Drop the time-of-day component; entries are compared by calendar date only."""
    if isinstance(value, datetime):
        return value.date()
    return value


def normalize_hours(value: Union[Decimal, float, int, str]) -> Decimal:
    """Convert to a two-place decimal, the precision the store keeps."""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(HOURS_QUANTUM, rounding=ROUND_HALF_UP)


@dataclass(eq=False)
class TimeEntry(BaseEntity):
    """
    TimeEntry entity.

    The per-day cap (total hours on one date across all tasks) is a rule over
    many entries and lives in TimeTrackingService, not here.
    """

    date: date
    hours: Decimal
    description: str
    task_id: int

    # Owning task (with its project), attached by the repository when loaded
    task: Optional[Task] = None

    def __post_init__(self):
        """Normalize date and hours, then validate."""
        self.date = normalize_entry_date(self.date)
        self.hours = normalize_hours(self.hours)
        self.validate()

    def validate(self) -> None:
        """Validate time entry state."""
        if self.date is None:
            raise ValidationError("Entry date is required", "date")

        if self.hours < MIN_ENTRY_HOURS or self.hours > MAX_ENTRY_HOURS:
            raise ValidationError(
                f"Hours must be between {MIN_ENTRY_HOURS} and {MAX_ENTRY_HOURS}", "hours"
            )

        if not self.description or not self.description.strip():
            raise ValidationError("Work description is required", "description")

        if len(self.description) > DESCRIPTION_MAX_LENGTH:
            raise ValidationError(
                f"Description too long (max {DESCRIPTION_MAX_LENGTH} characters)", "description"
            )

        if not self.task_id or self.task_id < 1:
            raise ValidationError("Task ID is required", "task_id")

    @classmethod
    def create(
        cls,
        entry_date: Union[date, datetime],
        hours: Union[Decimal, float, int, str],
        description: str,
        task_id: int
    ) -> "TimeEntry":
        """Factory method to create a new time entry."""
        return cls(date=entry_date, hours=hours, description=description, task_id=task_id)
