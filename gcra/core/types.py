from datetime import datetime, timedelta
from pydantic import BaseModel, ConfigDict, computed_field

from .clock import Clock
from .rounding import round_div

class Options(BaseModel):
    """
    GCRA parameters: burst is the maximum number of tokens available at
    once, rate the number of tokens regenerated per period.
    Positivity is checked per call by the facade, not on construction.
    """
    model_config = ConfigDict(frozen=True)

    burst: int
    rate: int
    period: timedelta # accepts timedelta, seconds or ISO 8601 durations

    @property
    def period_ns(self) -> int:
        return Clock.duration_to_ns(self.period)

    @property
    def emission_interval_ns(self) -> int:
        """
        Virtual time one token is worth: period / rate, rounded to the
        nearest nanosecond. Requires rate != 0.
        """
        return round_div(self.period_ns, self.rate)

class Bucket(BaseModel):
    """
    GCRA bucket. Holds the theoretical arrival time (TAT), the point in
    time at which the bucket is full again, as Unix nanoseconds.
    The zero bucket is full.
    """
    model_config = ConfigDict(frozen=True)

    tat_ns: int = 0

    @classmethod
    def from_raw(cls, tat_ns: int) -> "Bucket":
        return cls(tat_ns=tat_ns)

    @classmethod
    def from_time(cls, tat: datetime) -> "Bucket":
        return cls(tat_ns=Clock.to_unix_ns(tat))

    @property
    def raw(self) -> int:
        return self.tat_ns

    @property
    def tat(self) -> datetime:
        return Clock.from_unix_ns(self.tat_ns)

class Result(BaseModel):
    """
    Outcome of a single GCRA computation.
    retry_in is zero unless limited; reset_in is the time until the
    bucket is full again.
    """
    model_config = ConfigDict(frozen=True)

    limited: bool
    remaining: int
    retry_in_ns: int = 0
    reset_in_ns: int = 0

    @computed_field
    @property
    def retry_in(self) -> timedelta:
        return Clock.duration_from_ns(self.retry_in_ns)

    @computed_field
    @property
    def reset_in(self) -> timedelta:
        return Clock.duration_from_ns(self.reset_in_ns)
