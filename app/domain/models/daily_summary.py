"""
Daily summary read model.
Derived per-date aggregate over all time entries; never persisted.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Dict


class DailyStatus(str, Enum):
    """How a day's total compares with a standard workday."""
    INSUFFICIENT = "insufficient"
    SUFFICIENT = "sufficient"
    EXCESSIVE = "excessive"


@dataclass(frozen=True)
class DailySummary:
    date: date
    total_hours: Decimal
    status: DailyStatus

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "total_hours": float(self.total_hours),
            "status": self.status.value,
        }
