"""
Time entry repository implementation using SQLAlchemy.
"""

from typing import List
from datetime import date
from decimal import Decimal
from sqlalchemy.orm import Session, joinedload
from sqlalchemy import func, desc

from app.domain.models.time_entry import TimeEntry
from app.domain.repositories.time_entry_repository import TimeEntryRepository
from app.infrastructure.db.models import TaskModel, TimeEntryModel
from app.infrastructure.mappers.time_entry_mapper import TimeEntryMapper


class SQLAlchemyTimeEntryRepository(TimeEntryRepository):
    """SQLAlchemy implementation of time entry repository."""

    def __init__(self, session: Session):
        self.session = session
        self.mapper = TimeEntryMapper()

    def _query(self):
        return self.session.query(TimeEntryModel).options(
            joinedload(TimeEntryModel.task).joinedload(TaskModel.project)
        )

    def save(self, time_entry: TimeEntry) -> TimeEntry:
        """Insert a time entry."""
        model = self.mapper.domain_to_model(time_entry)
        try:
            self.session.add(model)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

        saved = self._query().filter(TimeEntryModel.id == model.id).one()
        return self.mapper.model_to_domain(saved)

    def find_all(self) -> List[TimeEntry]:
        """Get all time entries, newest date first."""
        models = self._query().order_by(
            desc(TimeEntryModel.date), TimeEntryModel.id
        ).all()
        return [self.mapper.model_to_domain(model) for model in models]

    def find_by_date(self, entry_date: date) -> List[TimeEntry]:
        """Get time entries for one calendar date."""
        models = self._query().filter(
            TimeEntryModel.date == entry_date
        ).order_by(TimeEntryModel.id).all()
        return [self.mapper.model_to_domain(model) for model in models]

    def find_by_date_range(self, start_date: date, end_date: date) -> List[TimeEntry]:
        """Get time entries in [start_date, end_date)."""
        models = self._query().filter(
            TimeEntryModel.date >= start_date,
            TimeEntryModel.date < end_date
        ).order_by(desc(TimeEntryModel.date), TimeEntryModel.id).all()
        return [self.mapper.model_to_domain(model) for model in models]

    def get_total_hours_for_date(self, entry_date: date) -> Decimal:
        """Sum of hours recorded on a calendar date, across all tasks."""
        total = self.session.query(
            func.coalesce(func.sum(TimeEntryModel.hours), 0)
        ).filter(TimeEntryModel.date == entry_date).scalar()

        return Decimal(str(total)).quantize(Decimal("0.01"))

    def count_by_task(self, task_id: int) -> int:
        """Get time entry count for task."""
        return self.session.query(func.count(TimeEntryModel.id)).filter_by(
            task_id=task_id
        ).scalar()
