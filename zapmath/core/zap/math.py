"""Integer helpers shared by the zap equation, solver and swap simulator.

Every function operates on plain Python ints.

Rounding is explicit: ``trunc_div`` truncates toward zero, which is what a
ledger's unsigned/big-int division does. Python's ``//`` floors toward -inf and
only agrees with it when both operands share a sign, so signed quantities in
the solver must go through ``trunc_div``.
"""

from __future__ import annotations

from .errors import InvalidAmountError, InvalidReserveError


def require_int(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")


def require_amount(name: str, value: int) -> int:
    """Validate a user-side amount: an int ``>= 0``."""
    require_int(name, value)
    if value < 0:
        raise InvalidAmountError(f"{name} must be non-negative: {value}")
    return value


def require_reserve(name: str, value: int) -> int:
    """Validate a pool depth: an int ``> 0``."""
    require_int(name, value)
    if value <= 0:
        raise InvalidReserveError(f"{name} must be positive: {value}")
    return value


def trunc_div(numerator: int, denominator: int) -> int:
    """Integer division truncating toward zero.

    ``trunc_div(-7, 2) == -3`` where ``-7 // 2 == -4``.
    """
    if denominator == 0:
        raise ZeroDivisionError("trunc_div by zero")
    q = abs(numerator) // abs(denominator)
    return q if (numerator >= 0) == (denominator > 0) else -q


def mul_div(value: int, numerator: int, denominator: int) -> int:
    """``floor(value * numerator / denominator)`` for non-negative operands."""
    if denominator <= 0:
        raise ValueError("denominator must be positive")
    if value < 0 or numerator < 0:
        raise ValueError("operands must be non-negative")
    return (value * numerator) // denominator
