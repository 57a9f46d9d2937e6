"""
GCRA: Raw Engine

Integer-only form of the algorithm. All times are in one monotonic
unit (the facade uses Unix nanoseconds). No validation happens here:
callers guarantee 0 <= cost <= burst, positive parameters and a
non-zero emission interval.
"""
from dataclasses import dataclass

from .core.rounding import round_div

@dataclass(frozen=True)
class RawOutcome:
    """
    Result of compute_raw. tat is the value to persist.
    """
    tat: int
    limited: bool
    remaining: int
    retry_in: int
    reset_in: int

def generate_raw(now: int, count: int, burst: int, rate: int, period: int) -> int:
    """
    Returns the TAT of a bucket that holds count tokens at now.
    """
    emission_interval = round_div(period, rate)
    return now + emission_interval * (burst - count)

def compute_raw(tat: int, now: int, burst: int, rate: int, period: int, cost: int) -> RawOutcome:
    """
    Advances the bucket by cost tokens. Cost may be zero to query.
    A denied request leaves the (clamped) TAT untouched.
    """
    emission_interval = round_div(period, rate)
    increment = emission_interval * cost
    burst_offset = emission_interval * burst

    # A bucket cannot be more than full
    if now > tat:
        tat = now

    new_tat = tat + increment
    allow_at = new_tat - burst_offset
    diff = now - allow_at
    remaining = round_div(diff, emission_interval)

    # Not enough tokens: report what is left without this request
    if remaining < 0:
        return RawOutcome(
            tat=tat,
            limited=True,
            remaining=round_div(now - (tat - burst_offset), emission_interval),
            retry_in=-diff,
            reset_in=tat - now
        )

    # Empty bucket queried without cost
    if remaining == 0 and increment <= 0:
        return RawOutcome(
            tat=tat,
            limited=True,
            remaining=0,
            retry_in=0,
            reset_in=tat - now
        )

    return RawOutcome(
        tat=new_tat,
        limited=False,
        remaining=remaining,
        retry_in=0,
        reset_in=new_tat - now
    )
