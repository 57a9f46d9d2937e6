"""
GCRA: Typed Facade

Validates parameters, converts between datetime/timedelta and the raw
nanosecond domain, and delegates to the raw engine.
"""
from datetime import datetime
from typing import Tuple

from .core.clock import Clock
from .core.errors import (
    CostHigherThanBurstError,
    GCRAError,
    InvalidParameterError,
    MisconfigurationError,
)
from .core.logger import get_logger
from .core.types import Bucket, Options, Result
from .raw import compute_raw, generate_raw

logger = get_logger("GCRA")

def _check_arguments(amount: int, opts: Options) -> None:
    """
    Raises before any computation. amount is the count or the cost.
    """
    # bool is an int subclass but never a token count
    if not isinstance(amount, int) or isinstance(amount, bool):
        raise InvalidParameterError(f"invalid parameter: amount must be an integer, got {amount!r}")

    if amount < 0 or opts.burst <= 0 or opts.rate <= 0 or opts.period_ns <= 0:
        raise InvalidParameterError()

    if amount > opts.burst:
        raise CostHigherThanBurstError(amount, opts.burst)

    # Period shorter than half a nanosecond per token
    if opts.emission_interval_ns == 0:
        raise InvalidParameterError("invalid parameter: period too short for rate")

def generate(now: datetime, count: int, opts: Options) -> Bucket:
    """
    Creates a bucket that holds count tokens at now.
    """
    _check_arguments(count, opts)

    tat = generate_raw(Clock.to_unix_ns(now), count, opts.burst, opts.rate, opts.period_ns)
    return Bucket.from_raw(tat)

def must_generate(now: datetime, count: int, opts: Options) -> Bucket:
    """
    Calls generate and raises MisconfigurationError on errors.
    """
    try:
        return generate(now, count, opts)
    except GCRAError as e:
        logger.error("gcra_misconfigured", operation="generate", error=e.message)
        raise MisconfigurationError(e.message) from e

def compute(now: datetime, bucket: Bucket, cost: int, opts: Options) -> Tuple[Bucket, Result]:
    """
    Performs the GCRA. Cost may be zero to query the bucket.
    Returns the bucket to persist and the result.
    """
    _check_arguments(cost, opts)

    outcome = compute_raw(
        bucket.raw, Clock.to_unix_ns(now), opts.burst, opts.rate, opts.period_ns, cost
    )

    result = Result(
        limited=outcome.limited,
        remaining=outcome.remaining,
        retry_in_ns=outcome.retry_in,
        reset_in_ns=outcome.reset_in,
    )
    return Bucket.from_raw(outcome.tat), result

def must_compute(now: datetime, bucket: Bucket, cost: int, opts: Options) -> Tuple[Bucket, Result]:
    """
    Calls compute and raises MisconfigurationError on errors.
    """
    try:
        return compute(now, bucket, cost, opts)
    except GCRAError as e:
        logger.error("gcra_misconfigured", operation="compute", error=e.message)
        raise MisconfigurationError(e.message) from e
