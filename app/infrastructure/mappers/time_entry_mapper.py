"""
Time entry mapper for converting between domain entities and database models.
"""

from app.domain.models.time_entry import TimeEntry
from app.infrastructure.db.models import TimeEntryModel
from app.infrastructure.mappers.task_mapper import TaskMapper


class TimeEntryMapper:
    """Maps between TimeEntry domain entity and TimeEntryModel database model."""

    def __init__(self):
        self.task_mapper = TaskMapper()

    def domain_to_model(self, entry: TimeEntry) -> TimeEntryModel:
        """Convert TimeEntry domain entity to TimeEntryModel."""
        return TimeEntryModel(
            id=entry.id,
            date=entry.date,
            hours=entry.hours,
            description=entry.description,
            task_id=entry.task_id
        )

    def model_to_domain(self, model: TimeEntryModel) -> TimeEntry:
        """Convert TimeEntryModel to TimeEntry domain entity, with task and project."""
        return TimeEntry(
            id=model.id,
            date=model.date,
            hours=model.hours,
            description=model.description,
            task_id=model.task_id,
            task=self.task_mapper.model_to_domain(model.task) if model.task else None
        )
