# clock_in/errors.py
from typing import Optional


class ClockInError(Exception):
    """Base for every failure the clock-in helpers raise. str(exc) is the reason."""

    reason = "Clock-in error"

    def __init__(self, reason: Optional[str] = None):
        super().__init__(reason or self.reason)


class ClockInFailedError(ClockInError):
    reason = "Failed to clock in"


class GpsFetchFailedError(ClockInError):
    reason = "Failed to fetch GPS coordinates"


class GpsNotAvailableError(ClockInError):
    reason = "GPS is not available"
