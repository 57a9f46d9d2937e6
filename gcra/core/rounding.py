"""
GCRA: Rounding Context

Every division in the engine goes through round_div, which uses this
dedicated decimal context. The context is never installed globally, so
callers keep their own decimal settings.
"""
import decimal
from decimal import Decimal

# Ties round away from zero. 60 digits keep int64 quotients exact.
ROUNDING_CONTEXT = decimal.Context(
    prec=60,
    rounding=decimal.ROUND_HALF_UP,
    Emin=-999999,
    Emax=999999,
    capitals=1,
    clamp=0,
    flags=[],
    traps=[decimal.InvalidOperation, decimal.DivisionByZero, decimal.Overflow]
)

_ONE = Decimal(1)

def round_div(a: int, b: int) -> int:
    """
    Divides a by b and rounds to the nearest integer, ties away from zero.
    Raises decimal.DivisionByZero if b is zero, including 0 / 0.
    """
    if b == 0:
        raise decimal.DivisionByZero(f"round_div: division of {a} by zero")

    quotient = ROUNDING_CONTEXT.divide(Decimal(a), Decimal(b))
    return int(quotient.quantize(_ONE, context=ROUNDING_CONTEXT))
