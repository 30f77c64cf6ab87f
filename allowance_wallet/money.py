"""
Decimal arithmetic for wallet amounts.

Amounts have no upper bound, so balance arithmetic and rendering never run
under the interpreter's default 28-digit context, which would round large
sums silently or raise while quantizing them. Everything here uses one
module-level context wide enough that additions and subtractions are exact.

PRECONDITION: callers never pass NaN or infinities (coerce_amount rejects
them before they reach this module).
"""

from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    ROUND_HALF_EVEN,
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
)

_MONEY_CONTEXT = Context(
    prec=MAX_PREC,
    rounding=ROUND_HALF_EVEN,
    Emax=MAX_EMAX,
    Emin=MIN_EMIN,
    traps=[InvalidOperation, DivisionByZero, Overflow],
)


def add_amounts(left: Decimal, right: Decimal) -> Decimal:
    """Exact sum."""
    return _MONEY_CONTEXT.add(left, right)


def subtract_amounts(left: Decimal, right: Decimal) -> Decimal:
    """Exact difference."""
    return _MONEY_CONTEXT.subtract(left, right)


def quantize_amount(amount: Decimal, places: int) -> Decimal:
    """Round to ``places`` decimal places (banker's rounding) for display."""
    return amount.quantize(Decimal(1).scaleb(-places), context=_MONEY_CONTEXT)


__all__ = ["add_amounts", "quantize_amount", "subtract_amounts"]
