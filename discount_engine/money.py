"""Monetary arithmetic on ``Decimal`` with a fixed 2-digit scale.

Every helper re-rounds its result half-up (ties away from zero), so a chain
of discount computations never drifts by more than that rounding introduces.
Helpers compute under a ``PRECISION``-digit context rather than the default
28 digits; the ``MAX_*`` bounds keep validated inputs well inside it.
"""
from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Union

SCALE = 2
PRECISION = 60
CENTS = Decimal("0.01")
ZERO = Decimal("0.00")
HUNDRED = Decimal("100")

# Upper bounds enforced on cart items and campaigns at construction
MAX_AMOUNT = Decimal("999999999999.99")
MAX_QUANTITY = 1_000_000
MAX_RATE = Decimal("1000000")

MoneyLike = Union[Decimal, int, float, str]


def _quantum(scale: int) -> Decimal:
    return Decimal(1).scaleb(-scale)


def to_decimal(value: MoneyLike) -> Decimal:
    """Convert to ``Decimal`` without rounding.

    Floats go through ``str`` so ``0.1`` becomes ``Decimal("0.1")`` rather
    than its binary expansion.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def to_money(value: MoneyLike, scale: int = SCALE, rounding: str = ROUND_HALF_UP) -> Decimal:
    """Round a value to ``scale`` fractional digits (half-up by default)."""
    with localcontext() as ctx:
        ctx.prec = PRECISION
        return to_decimal(value).quantize(_quantum(scale), rounding=rounding)


def add(a: MoneyLike, b: MoneyLike) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = PRECISION
        return to_money(to_decimal(a) + to_decimal(b))


def multiply(a: MoneyLike, scalar: MoneyLike) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = PRECISION
        return to_money(to_decimal(a) * to_decimal(scalar))


def divide(
    a: MoneyLike,
    b: MoneyLike,
    scale: int = SCALE,
    rounding: str = ROUND_HALF_UP,
) -> Decimal:
    """Divide ``a`` by ``b`` and round the quotient.

    Raises:
        ZeroDivisionError: if ``b`` is zero.
    """
    divisor = to_decimal(b)
    if divisor == 0:
        raise ZeroDivisionError(f"Cannot divide {a} by zero")
    with localcontext() as ctx:
        ctx.prec = PRECISION
        return to_money(to_decimal(a) / divisor, scale=scale, rounding=rounding)


def percent_of(amount: MoneyLike, rate: MoneyLike) -> Decimal:
    """``amount * rate / 100``, rounded once at the end."""
    with localcontext() as ctx:
        ctx.prec = PRECISION
        return divide(to_decimal(amount) * to_decimal(rate), HUNDRED)
