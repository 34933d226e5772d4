"""
Domain services for the time tracking service.
This module exports the domain services for rules spanning many entities.
"""

from .time_tracking_service import TimeTrackingService

__all__ = [
    "TimeTrackingService",
]
