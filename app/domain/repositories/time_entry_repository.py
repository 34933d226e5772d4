"""
Time entry repository interface.
Defines the contract for time entry data persistence operations.
"""

from abc import ABC, abstractmethod
from datetime import date
from decimal import Decimal
from typing import List

from app.domain.models.time_entry import TimeEntry


class TimeEntryRepository(ABC):
    """
    Repository interface for TimeEntry entity.
    Entries returned by find methods carry their task and its project.
    """

    @abstractmethod
    def save(self, time_entry: TimeEntry) -> TimeEntry:
        """
        Insert a time entry and commit.
        Returns the saved entry with its ID, task and project attached.
        """
        pass

    @abstractmethod
    def find_all(self) -> List[TimeEntry]:
        """
        Find all time entries, newest date first, then by ID.
        """
        pass

    @abstractmethod
    def find_by_date(self, entry_date: date) -> List[TimeEntry]:
        """
        Find time entries recorded on a calendar date, ordered by ID.
        """
        pass

    @abstractmethod
    def find_by_date_range(self, start_date: date, end_date: date) -> List[TimeEntry]:
        """
        Find time entries with start_date <= date < end_date,
        newest date first, then by ID.
        """
        pass

    @abstractmethod
    def get_total_hours_for_date(self, entry_date: date) -> Decimal:
        """
        Sum the hours of every entry on a calendar date, across all tasks.
        Returns zero when the date has no entries.
        """
        pass

    @abstractmethod
    def count_by_task(self, task_id: int) -> int:
        """
        Count the time entries recorded against a task.
        """
        pass
