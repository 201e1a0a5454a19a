"""Exception types for the zap math engine.

Every error derives from ``ZapError`` which is itself a ``ValueError`` so that
callers treating bad inputs as ``ValueError`` (the convention across ``core``)
keep working. Non-int inputs raise ``TypeError`` instead.
"""

from __future__ import annotations


class ZapError(ValueError):
    """Base class for rejected zap computations."""


class InvalidReserveError(ZapError):
    """Raised when a pool depth is zero or negative."""


class InvalidAmountError(ZapError):
    """Raised when a user or offer amount is negative."""


class InvalidDepositError(ZapError):
    """Raised when a zap deposits nothing."""


class DegenerateEquationError(ZapError):
    """Raised when the quadratic coefficient is zero."""


class UndefinedDerivativeError(ZapError):
    """Raised when a Newton step would divide by a zero derivative."""

    def __init__(self, iteration: int, x: int) -> None:
        self.iteration = iteration
        self.x = x
        super().__init__(f"derivative is zero at iteration {iteration} (x={x})")


class NonConvergenceError(ZapError):
    """Raised by ``solve_or_raise`` when the iteration cap is hit before the iterate settles."""

    def __init__(self, root: int, iterations: int) -> None:
        self.root = root
        self.iterations = iterations
        super().__init__(f"no convergence after {iterations} iterations (last x={root})")


class ZapRangeError(ZapError):
    """Raised when a solved swap amount falls outside what the user can offer."""


class SlippageError(ZapError):
    """Raised when a zap would mint fewer LP shares than the caller accepts."""

    def __init__(self, minimum_received: int, received: int) -> None:
        self.minimum_received = minimum_received
        self.received = received
        super().__init__(f"too little received: minimum {minimum_received}, received {received}")
