"""
Time entry use cases for the application layer.
Records time against tasks and serves the time entry queries and daily report.
"""

import logging
from datetime import date, datetime
from typing import List, Optional, Union

from app.application.use_cases.base_use_case import CreateUseCase, ListUseCase
from app.application.dto.time_entry_dto import (
    CreateTimeEntryRequestDTO, MonthPeriodRequestDTO,
    TimeEntryResponseDTO, DailySummaryResponseDTO
)
from app.domain.models.base import TaskNotFoundError, InactiveTaskError, InvalidPeriodError
from app.domain.models.time_entry import TimeEntry, normalize_entry_date
from app.domain.repositories.task_repository import TaskRepository
from app.domain.repositories.time_entry_repository import TimeEntryRepository
from app.domain.services.time_tracking_service import TimeTrackingService


logger = logging.getLogger(__name__)

MIN_REPORT_YEAR = 1900
MAX_REPORT_YEAR = 2100


class CreateTimeEntryUseCase(CreateUseCase[CreateTimeEntryRequestDTO, TimeEntryResponseDTO]):
    """
    Use case for recording time against a task.

    Checks run in order, all before the write: the task exists, the task is
    active, and the calendar day stays within the daily cap once the new
    hours are added.
    """

    success_message = "Time entry created successfully"

    def __init__(
        self,
        time_entry_repository: TimeEntryRepository,
        task_repository: TaskRepository,
        time_tracking_service: Optional[TimeTrackingService] = None
    ):
        super().__init__()
        self.time_entry_repository = time_entry_repository
        self.task_repository = task_repository
        self.time_tracking_service = time_tracking_service or TimeTrackingService()

    async def _execute_command_logic(self, request: CreateTimeEntryRequestDTO) -> TimeEntryResponseDTO:
        task = self.task_repository.find_by_id(request.task_id)
        if not task:
            raise TaskNotFoundError(request.task_id)

        if not task.accepts_time_entries:
            raise InactiveTaskError(task.name)

        entry = TimeEntry.create(
            entry_date=request.entry_date,
            hours=request.hours,
            description=request.description,
            task_id=request.task_id
        )

        # Total across every task and project on that calendar day
        existing_hours = self.time_entry_repository.get_total_hours_for_date(entry.date)
        daily_total = self.time_tracking_service.validate_daily_hours(
            entry.date, existing_hours, entry.hours
        )

        saved_entry = self.time_entry_repository.save(entry)
        if saved_entry.task is None:
            saved_entry.task = task

        logger.info(
            f"Time entry {saved_entry.id} recorded: {saved_entry.hours}h on "
            f"{saved_entry.date.isoformat()} for task {saved_entry.task_id} "
            f"(day total {daily_total}h)"
        )
        return TimeEntryResponseDTO.from_domain(saved_entry)


class ListTimeEntriesUseCase(ListUseCase[None, List[TimeEntryResponseDTO]]):
    """Use case for listing all time entries, newest date first."""

    def __init__(self, time_entry_repository: TimeEntryRepository):
        super().__init__()
        self.time_entry_repository = time_entry_repository

    async def _execute_business_logic(self, request: None = None) -> List[TimeEntryResponseDTO]:
        return [TimeEntryResponseDTO.from_domain(entry) for entry in self.time_entry_repository.find_all()]

    def _success_message(self, result: List[TimeEntryResponseDTO]) -> str:
        return f"Retrieved {len(result)} time entries"


class ListTimeEntriesByDateUseCase(ListUseCase[Union[date, datetime], List[TimeEntryResponseDTO]]):
    """Use case for listing the time entries of one calendar date."""

    def __init__(self, time_entry_repository: TimeEntryRepository):
        super().__init__()
        self.time_entry_repository = time_entry_repository

    async def _execute_business_logic(self, request: Union[date, datetime]) -> List[TimeEntryResponseDTO]:
        entry_date = normalize_entry_date(request)
        self._entry_date = entry_date
        entries = self.time_entry_repository.find_by_date(entry_date)
        return [TimeEntryResponseDTO.from_domain(entry) for entry in entries]

    def _success_message(self, result: List[TimeEntryResponseDTO]) -> str:
        return f"Retrieved {len(result)} time entries for {self._entry_date.isoformat()}"


class ListTimeEntriesByMonthUseCase(ListUseCase[MonthPeriodRequestDTO, List[TimeEntryResponseDTO]]):
    """Use case for listing the time entries of one calendar month."""

    def __init__(self, time_entry_repository: TimeEntryRepository):
        super().__init__()
        self.time_entry_repository = time_entry_repository

    async def _validate_request(self, request: MonthPeriodRequestDTO) -> None:
        if request.month < 1 or request.month > 12:
            raise InvalidPeriodError("Month must be between 1 and 12", "month")

        if request.year < MIN_REPORT_YEAR or request.year > MAX_REPORT_YEAR:
            raise InvalidPeriodError(
                f"Year must be between {MIN_REPORT_YEAR} and {MAX_REPORT_YEAR}", "year"
            )

    async def _execute_business_logic(self, request: MonthPeriodRequestDTO) -> List[TimeEntryResponseDTO]:
        start_date = date(request.year, request.month, 1)
        if request.month == 12:
            end_date = date(request.year + 1, 1, 1)
        else:
            end_date = date(request.year, request.month + 1, 1)

        self._period = f"{request.year:04d}-{request.month:02d}"
        entries = self.time_entry_repository.find_by_date_range(start_date, end_date)
        return [TimeEntryResponseDTO.from_domain(entry) for entry in entries]

    def _success_message(self, result: List[TimeEntryResponseDTO]) -> str:
        return f"Retrieved {len(result)} time entries for {self._period}"


class GetDailySummaryUseCase(ListUseCase[None, List[DailySummaryResponseDTO]]):
    """Use case for the per-day hours report over all recorded time."""

    def __init__(
        self,
        time_entry_repository: TimeEntryRepository,
        time_tracking_service: Optional[TimeTrackingService] = None
    ):
        super().__init__()
        self.time_entry_repository = time_entry_repository
        self.time_tracking_service = time_tracking_service or TimeTrackingService()

    async def _execute_business_logic(self, request: None = None) -> List[DailySummaryResponseDTO]:
        entries = self.time_entry_repository.find_all()
        summaries = self.time_tracking_service.summarize_by_day(entries)
        return [DailySummaryResponseDTO.from_domain(summary) for summary in summaries]

    def _success_message(self, result: List[DailySummaryResponseDTO]) -> str:
        return f"Retrieved daily summary for {len(result)} day(s)"
