"""
Unit tests for TimeEntry domain model and the domain exceptions it relies on.
"""

import pytest
from datetime import date, datetime
from decimal import Decimal

from app.domain.models.base import (
    ErrorKind, ValidationError, DailyHoursExceededError, DependentEntitiesError,
    DuplicateProjectCodeError, DuplicateTaskNameError, EntityNotFoundError,
    InactiveTaskError, ProjectNotFoundError, TaskNotFoundError
)
from app.domain.models.time_entry import TimeEntry, normalize_entry_date, normalize_hours


class TestTimeEntry:
    """Test cases for TimeEntry domain model."""

    def test_create_time_entry_success(self):
        """Test successful time entry creation."""
        entry = TimeEntry.create(
            entry_date=date(2025, 1, 15),
            hours=Decimal("7.5"),
            description="Landing page",
            task_id=1
        )

        assert entry.date == date(2025, 1, 15)
        assert entry.hours == Decimal("7.50")
        assert entry.description == "Landing page"
        assert entry.task_id == 1
        assert entry.task is None

    def test_time_of_day_is_dropped(self):
        """Test that a datetime is reduced to its calendar date."""
        entry = TimeEntry.create(
            entry_date=datetime(2025, 1, 15, 18, 45),
            hours=2,
            description="Review",
            task_id=1
        )

        assert entry.date == date(2025, 1, 15)
        assert not isinstance(entry.date, datetime)

    def test_hours_bounds_inclusive(self):
        """Test that 0.1 and 24 are both accepted."""
        assert TimeEntry.create(date(2025, 1, 15), "0.1", "Call", 1).hours == Decimal("0.10")
        assert TimeEntry.create(date(2025, 1, 15), 24, "Marathon", 1).hours == Decimal("24.00")

    @pytest.mark.parametrize("hours", ["0.09", "0", "24.01", "-1"])
    def test_hours_out_of_range(self, hours):
        """Test that hours outside 0.1-24 are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            TimeEntry.create(date(2025, 1, 15), hours, "Work", 1)

        assert exc_info.value.field == "hours"

    def test_description_required(self):
        """Test that a blank description is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            TimeEntry.create(date(2025, 1, 15), 1, "  ", 1)

        assert exc_info.value.field == "description"

    def test_description_length_limit(self):
        """Test the description length limit."""
        TimeEntry.create(date(2025, 1, 15), 1, "d" * 500, 1)

        with pytest.raises(ValidationError):
            TimeEntry.create(date(2025, 1, 15), 1, "d" * 501, 1)

    def test_task_id_required(self):
        """Test that a non-positive task id is rejected."""
        with pytest.raises(ValidationError):
            TimeEntry.create(date(2025, 1, 15), 1, "Work", 0)

    def test_to_dict_serializes_date_and_hours(self):
        """Test dictionary conversion of date and decimal values."""
        entry = TimeEntry(id=4, date=date(2025, 1, 15), hours=Decimal("3.25"), description="Work", task_id=2)

        data = entry.to_dict()

        assert data["date"] == "2025-01-15"
        assert data["hours"] == 3.25


class TestNormalization:
    """Test cases for date and hours normalization helpers."""

    def test_normalize_entry_date(self):
        assert normalize_entry_date(datetime(2025, 3, 1, 23, 59)) == date(2025, 3, 1)
        assert normalize_entry_date(date(2025, 3, 1)) == date(2025, 3, 1)

    def test_normalize_hours_two_places(self):
        assert normalize_hours(8) == Decimal("8.00")
        assert normalize_hours(7.99) == Decimal("7.99")
        assert normalize_hours("1.005") == Decimal("1.01")


class TestDomainExceptions:
    """Test cases for the tagged domain exceptions."""

    def test_error_kinds(self):
        """Test that each rule violation carries its kind."""
        assert EntityNotFoundError("Project", 1).kind == ErrorKind.NOT_FOUND
        assert DuplicateProjectCodeError("P1").kind == ErrorKind.DUPLICATE_CODE
        assert DuplicateTaskNameError("T1", 1).kind == ErrorKind.DUPLICATE_NAME
        assert ProjectNotFoundError(9).kind == ErrorKind.PROJECT_NOT_FOUND
        assert TaskNotFoundError(9).kind == ErrorKind.TASK_NOT_FOUND
        assert InactiveTaskError("T1").kind == ErrorKind.TASK_INACTIVE
        assert DependentEntitiesError("Project", "P", "tasks", 2).kind == ErrorKind.HAS_DEPENDENTS

    def test_daily_hours_message_reports_totals(self):
        """Test that the cap message names current, added and resulting hours."""
        exc = DailyHoursExceededError(
            entry_date=date(2025, 1, 15),
            current_hours=Decimal("20.00"),
            added_hours=Decimal("5.00"),
            max_hours=Decimal("24")
        )

        assert exc.kind == ErrorKind.DAILY_CAP_EXCEEDED
        assert exc.total_hours == Decimal("25.00")
        assert "20.00" in exc.message
        assert "5.00" in exc.message
        assert "25.00" in exc.message
        assert "2025-01-15" in exc.message

    def test_inactive_task_message_names_task(self):
        assert "Backend" in InactiveTaskError("Backend").message

    def test_dependents_message_reports_count(self):
        exc = DependentEntitiesError("Task", "Design", "time entries", 3)

        assert "Design" in exc.message
        assert "3" in exc.message
        assert exc.count == 3

    def test_code_defaults_to_kind(self):
        assert TaskNotFoundError(4).code == "TASK_NOT_FOUND"
