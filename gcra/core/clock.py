from datetime import datetime, timedelta, timezone
from typing import Final

from .rounding import round_div

# Raw engine time unit: int nanoseconds since the Unix epoch
NANOSECONDS_PER_MICROSECOND: Final[int] = 1_000
NANOSECONDS_PER_SECOND: Final[int] = 1_000_000_000
SECONDS_PER_DAY: Final[int] = 86_400

EPOCH: Final[datetime] = datetime(1970, 1, 1, tzinfo=timezone.utc)

class Clock:
    """
    Conversions between the raw nanosecond domain and datetime/timedelta.
    Never reads the process clock: "now" is always supplied by the caller.
    """

    @staticmethod
    def duration_to_ns(duration: timedelta) -> int:
        """
        Exact conversion of a timedelta to integer nanoseconds.
        """
        seconds = duration.days * SECONDS_PER_DAY + duration.seconds
        return (seconds * NANOSECONDS_PER_SECOND
                + duration.microseconds * NANOSECONDS_PER_MICROSECOND)

    @staticmethod
    def duration_from_ns(ns: int) -> timedelta:
        """
        timedelta has microsecond resolution, so the value is rounded
        to the nearest microsecond (ties away from zero).
        """
        return timedelta(microseconds=round_div(ns, NANOSECONDS_PER_MICROSECOND))

    @staticmethod
    def to_unix_ns(dt: datetime) -> int:
        """
        Returns nanoseconds since the Unix epoch.
        Naive datetimes are interpreted as UTC.
        """
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return Clock.duration_to_ns(dt - EPOCH)

    @staticmethod
    def from_unix_ns(ns: int) -> datetime:
        """
        Returns a UTC datetime, rounded to the nearest microsecond.
        """
        return EPOCH + Clock.duration_from_ns(ns)
