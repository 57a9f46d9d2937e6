"""
GCRA

Generic cell rate algorithm: stateless rate limiting on a single
theoretical arrival time per key. Storage of buckets and per-key
locking are left to the caller.
"""
from .core.errors import (
    GCRAError,
    InvalidParameterError,
    CostHigherThanBurstError,
    MisconfigurationError,
)
from .core.types import Options, Bucket, Result
from .facade import generate, must_generate, compute, must_compute
from .raw import RawOutcome, generate_raw, compute_raw

__all__ = [
    "GCRAError",
    "InvalidParameterError",
    "CostHigherThanBurstError",
    "MisconfigurationError",
    "Options",
    "Bucket",
    "Result",
    "generate",
    "must_generate",
    "compute",
    "must_compute",
    "RawOutcome",
    "generate_raw",
    "compute_raw",
]
