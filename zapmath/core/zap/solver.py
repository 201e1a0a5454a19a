"""
Integer Newton-Raphson solver for the zap equation.

Algorithm Design:
- Type: Newton-Raphson over exact ints, truncating division
- Start: x_0 = 0 (the equation usually settles in 3-5 steps from there)
- Bound: at most ``params.max_iterations`` steps (32)
- Stop: as soon as x_{n+1} == x_n, compared at full precision

Every validator of a deterministic ledger must reproduce the same root, so no
float ever appears and each step truncates toward zero:

    x_{n+1} = x_n - trunc(f(x_n) / f'(x_n))

Hitting the iteration cap is not an error here; ``newton_solve`` reports it as
``converged=False`` and ``solve_or_raise`` turns it into ``NonConvergenceError``.
"""

from __future__ import annotations

import logging
from typing import Optional

from .equation import Equation
from .errors import DegenerateEquationError, NonConvergenceError, UndefinedDerivativeError
from .math import require_int, trunc_div
from .params import DEFAULT_PARAMS, ZapParams
from .types import IterationObserver, IterationRecord, SolveResult

logger = logging.getLogger(__name__)


def newton_solve(
    equation: Equation,
    *,
    x_init: int = 0,
    max_iterations: Optional[int] = None,
    observer: Optional[IterationObserver] = None,
    params: ZapParams = DEFAULT_PARAMS,
) -> SolveResult:
    """
    Run the bounded Newton iteration and report how it ended.

    Raises:
        DegenerateEquationError: ``a == 0`` (the equation is not quadratic)
        UndefinedDerivativeError: ``f'(x_n) == 0`` at some step
    """
    require_int("x_init", x_init)
    limit = params.max_iterations if max_iterations is None else max_iterations
    require_int("max_iterations", limit)
    if limit <= 0:
        raise ValueError(f"max_iterations must be positive: {limit}")
    if not equation.is_quadratic:
        raise DegenerateEquationError(f"leading coefficient is zero: {equation}")

    x = x_init
    for iteration in range(1, limit + 1):
        value = equation.value(x)
        derivative = equation.derivative(x)
        if derivative == 0:
            raise UndefinedDerivativeError(iteration, x)
        x_next = x - trunc_div(value, derivative)

        logger.debug("iteration %d: x=%d value=%d derivative=%d x_next=%d", iteration, x, value, derivative, x_next)
        if observer is not None:
            observer(IterationRecord(iteration=iteration, x=x, value=value, derivative=derivative, x_next=x_next))

        if x_next == x:
            logger.debug("converged after %d iterations: x=%d", iteration, x_next)
            return SolveResult(root=x_next, iterations=iteration, converged=True)
        x = x_next

    logger.debug("iteration cap %d reached: x=%d", limit, x)
    return SolveResult(root=x, iterations=limit, converged=False)


def solve(
    equation: Equation,
    *,
    x_init: int = 0,
    observer: Optional[IterationObserver] = None,
    params: ZapParams = DEFAULT_PARAMS,
) -> int:
    """
    Integer approximation of the root of ``equation``.

    If the cap is reached the latest iterate is returned; callers that need to
    know should use ``newton_solve`` or ``solve_or_raise``.
    """
    return newton_solve(equation, x_init=x_init, observer=observer, params=params).root


def solve_or_raise(
    equation: Equation,
    *,
    x_init: int = 0,
    observer: Optional[IterationObserver] = None,
    params: ZapParams = DEFAULT_PARAMS,
) -> int:
    """Like ``solve()`` but raises ``NonConvergenceError`` when the cap is hit."""
    result = newton_solve(equation, x_init=x_init, observer=observer, params=params)
    if not result.converged:
        raise NonConvergenceError(result.root, result.iterations)
    return result.root
