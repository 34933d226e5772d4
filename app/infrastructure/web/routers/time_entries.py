"""
Time tracking router.
Records time entries and serves the time entry queries and daily summary.
"""

from typing import Annotated
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.application.use_cases.time_entry_use_cases import (
    CreateTimeEntryUseCase,
    ListTimeEntriesUseCase,
    ListTimeEntriesByDateUseCase,
    ListTimeEntriesByMonthUseCase,
    GetDailySummaryUseCase
)
from app.application.dto.time_entry_dto import (
    CalendarDate, CreateTimeEntryRequestDTO, MonthPeriodRequestDTO
)
from app.infrastructure.repositories.task_repository import SQLAlchemyTaskRepository
from app.infrastructure.repositories.time_entry_repository import SQLAlchemyTimeEntryRepository
from app.infrastructure.web.dependencies import get_task_repository, get_time_entry_repository
from app.infrastructure.web.responses import to_api_response


router = APIRouter()


@router.get("")
async def list_time_entries(
    repository: Annotated[SQLAlchemyTimeEntryRepository, Depends(get_time_entry_repository)]
) -> JSONResponse:
    """
    List all time entries, newest date first.
    """
    result = await ListTimeEntriesUseCase(repository).execute(None)
    return to_api_response(result)


@router.get("/daily-summary")
async def get_daily_summary(
    repository: Annotated[SQLAlchemyTimeEntryRepository, Depends(get_time_entry_repository)]
) -> JSONResponse:
    """
    Total hours per calendar day, newest first, with each day classified as
    insufficient (< 8h), sufficient (exactly 8h) or excessive (> 8h).
    """
    result = await GetDailySummaryUseCase(repository).execute(None)
    return to_api_response(result)


@router.get("/date/{entry_date}")
async def list_time_entries_by_date(
    entry_date: CalendarDate,
    repository: Annotated[SQLAlchemyTimeEntryRepository, Depends(get_time_entry_repository)]
) -> JSONResponse:
    """
    List the time entries of one calendar date.
    Accepts YYYY-MM-DD or an ISO datetime, whose time of day is ignored.
    """
    result = await ListTimeEntriesByDateUseCase(repository).execute(entry_date)
    return to_api_response(result)


@router.get("/month/{year}/{month}")
async def list_time_entries_by_month(
    year: int,
    month: int,
    repository: Annotated[SQLAlchemyTimeEntryRepository, Depends(get_time_entry_repository)]
) -> JSONResponse:
    """
    List the time entries of one calendar month.

    - **year**: 1900 to 2100
    - **month**: 1 to 12
    """
    period = MonthPeriodRequestDTO(year=year, month=month)
    result = await ListTimeEntriesByMonthUseCase(repository).execute(period)
    return to_api_response(result)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_time_entry(
    request: CreateTimeEntryRequestDTO,
    repository: Annotated[SQLAlchemyTimeEntryRepository, Depends(get_time_entry_repository)],
    task_repository: Annotated[SQLAlchemyTaskRepository, Depends(get_task_repository)]
) -> JSONResponse:
    """
    Record time against an active task.

    - **date**: Calendar date of the work; a time of day is ignored
    - **hours**: 0.1 to 24, at most two decimal places
    - **description**: What was done (required, up to 500 characters)
    - **taskId**: Task the time is recorded against

    No calendar day may exceed 24 hours across all tasks and projects.
    """
    result = await CreateTimeEntryUseCase(repository, task_repository).execute(request)
    return to_api_response(result, success_status_code=status.HTTP_201_CREATED)
