"""Exceptions raised by the GCRA facade."""


class GCRAError(ValueError):
    """Base class for recoverable GCRA errors.

    Raised before any computation takes place, so a failed call never
    produces a partially advanced bucket.
    """

    def __init__(self, message: str = "gcra error"):
        self.message = message
        super().__init__(message)


class InvalidParameterError(GCRAError):
    """Raised when burst, rate or period is not positive, when the
    count or cost is negative, or when the period is too short for the
    rate to yield a non-zero emission interval.
    """

    def __init__(self, message: str = "invalid parameter"):
        super().__init__(message)


class CostHigherThanBurstError(GCRAError):
    """Raised when the count or cost exceeds the burst."""

    def __init__(self, cost: int, burst: int):
        self.cost = cost
        self.burst = burst
        super().__init__(f"cost higher than burst: {cost} > {burst}")


class MisconfigurationError(RuntimeError):
    """Raised by the must_* variants in place of a GCRAError.

    Not a GCRAError: handlers for recoverable errors must not catch it.
    The original error is available as __cause__.
    """
