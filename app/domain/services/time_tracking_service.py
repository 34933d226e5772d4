"""Time tracking service for the daily hours rules.
Enforces the daily cap and builds the per-day summary report.
"""

from collections import defaultdict
from datetime import date, datetime
from decimal import Decimal
from typing import Dict, Iterable, List, Union

from app.domain.models.base import DailyHoursExceededError
from app.domain.models.daily_summary import DailyStatus, DailySummary
from app.domain.models.time_entry import TimeEntry, normalize_entry_date, normalize_hours


class TimeTrackingService:
    """
    Domain service for the rules that span many time entries.
    Stateless: every call works only on the values passed in.
    """

    def __init__(
        self,
        max_daily_hours: Decimal = Decimal("24"),
        standard_daily_hours: Decimal = Decimal("8")
    ):
        self.max_daily_hours = max_daily_hours
        self.standard_daily_hours = standard_daily_hours

    def validate_daily_hours(
        self,
        entry_date: Union[date, datetime],
        existing_hours: Decimal,
        new_hours: Decimal
    ) -> Decimal:
        """
        Validate that adding new_hours on entry_date stays within the daily cap.

        existing_hours is the total already recorded on that calendar date
        across all tasks and projects. The boundary is inclusive: reaching the
        cap exactly is allowed. Returns the resulting daily total.
        """
        existing_hours = normalize_hours(existing_hours or 0)
        new_hours = normalize_hours(new_hours)
        total_hours = existing_hours + new_hours

        if total_hours > self.max_daily_hours:
            raise DailyHoursExceededError(
                entry_date=normalize_entry_date(entry_date),
                current_hours=existing_hours,
                added_hours=new_hours,
                max_hours=self.max_daily_hours
            )

        return total_hours

    def classify_day(self, total_hours: Decimal) -> DailyStatus:
        """Compare a day's total with the standard workday (exact decimal comparison)."""
        if total_hours < self.standard_daily_hours:
            return DailyStatus.INSUFFICIENT
        if total_hours == self.standard_daily_hours:
            return DailyStatus.SUFFICIENT
        return DailyStatus.EXCESSIVE

    def summarize_by_day(self, entries: Iterable[TimeEntry]) -> List[DailySummary]:
        """
        Group entries by calendar date, sum hours and classify each day.
        Days are returned newest first.
        """
        hours_by_day: Dict[date, Decimal] = defaultdict(Decimal)
        for entry in entries:
            hours_by_day[normalize_entry_date(entry.date)] += entry.hours

        return [
            DailySummary(
                date=day,
                total_hours=total,
                status=self.classify_day(total)
            )
            for day, total in sorted(hours_by_day.items(), key=lambda item: item[0], reverse=True)
        ]
