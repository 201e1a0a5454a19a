"""`zap`: integer-exact math for zapping into constant-product pools.

A zap deposits an arbitrary pair of amounts into a two-asset XYK pool by first
swapping part of one asset into the other so that both land in the pool's
ratio. Everything here is deterministic and integer-only:

- `equation`: the quadratic whose root is the swap amount (fee included),
- `solver`: bounded Newton-Raphson with truncating division,
- `swap`: the constant-product swap simulator,
- `planner`: deposit validation, offer-side selection and the enter preview.

Public API:
- `build(offer_user, offer_pool, ask_user, ask_pool) -> Equation`
- `solve(equation) -> int`
- `simulate_swap(offer_amount, offer_depth, ask_depth) -> (return_amount, commission)`
- `plan_zap(reserves, deposits) -> ZapPlan`
- `simulate_enter(reserves, deposits, total_share) -> EnterSimulation`
"""

from .equation import Equation, build, build_oriented
from .errors import (
    DegenerateEquationError,
    InvalidAmountError,
    InvalidDepositError,
    InvalidReserveError,
    NonConvergenceError,
    SlippageError,
    UndefinedDerivativeError,
    ZapError,
    ZapRangeError,
)
from .params import DEFAULT_PARAMS, ZapParams, load_params
from .planner import assert_minimum_received, plan_zap, simulate_enter, validate_deposits
from .solver import newton_solve, solve, solve_or_raise
from .swap import simulate_swap, simulate_swap_detailed
from .types import (
    EnterSimulation,
    IterationRecord,
    PairDeposits,
    PairReserves,
    PoolReserves,
    SolveResult,
    SwapSimulation,
    UserDeposits,
    ZapPlan,
)

__all__ = [
    "Equation",
    "build",
    "build_oriented",
    "newton_solve",
    "solve",
    "solve_or_raise",
    "simulate_swap",
    "simulate_swap_detailed",
    "plan_zap",
    "simulate_enter",
    "validate_deposits",
    "assert_minimum_received",
    "ZapParams",
    "DEFAULT_PARAMS",
    "load_params",
    "PoolReserves",
    "UserDeposits",
    "PairReserves",
    "PairDeposits",
    "IterationRecord",
    "SolveResult",
    "SwapSimulation",
    "ZapPlan",
    "EnterSimulation",
    "ZapError",
    "InvalidReserveError",
    "InvalidAmountError",
    "InvalidDepositError",
    "DegenerateEquationError",
    "UndefinedDerivativeError",
    "NonConvergenceError",
    "ZapRangeError",
    "SlippageError",
]
