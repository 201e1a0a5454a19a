"""
Zap balance equation.

Swapping ``x`` of the offered asset into the asked asset and then depositing
both remaining balances leaves the user's holdings in the pool's post-swap
ratio exactly when ``x`` is a root of

    f(x) = a * x^2 + b * x + c

with (offer pool ``O``, ask pool ``A``, user amounts ``u_o`` / ``u_a``, fee ``f``):

    a = A + u_a
    b = 2 * O * a - A * (O + u_o) * f
    c = O * (O * u_a - u_o * A)

Expanding the constant-product output ``y = (1 - f) * A * x / (O + x)`` in
``(u_o - x) / (u_a + y) = (O + x) / (A - y)`` gives exactly these terms. The
commission enters only through ``b``; the solver is fee-agnostic.

Written as ``a * x^2 + b * x - C = 0`` the constant is ``C = -c``, which is
non-negative whenever the user holds relatively more of the offered asset than
the pool does. The stored ``c`` keeps its own sign.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import DegenerateEquationError
from .math import require_amount, require_int, require_reserve
from .params import DEFAULT_PARAMS, ZapParams
from .types import Amount, PoolReserves, UserDeposits


@dataclass(frozen=True)
class Equation:
    a: int
    b: int
    c: int

    def __post_init__(self) -> None:
        for name, v in (("a", self.a), ("b", self.b), ("c", self.c)):
            require_int(name, v)

    @classmethod
    def from_assets(
        cls,
        offer_user: Amount,
        offer_pool: Amount,
        ask_user: Amount,
        ask_pool: Amount,
        *,
        params: ZapParams = DEFAULT_PARAMS,
    ) -> "Equation":
        require_amount("offer_user", offer_user)
        require_amount("ask_user", ask_user)
        require_reserve("offer_pool", offer_pool)
        require_reserve("ask_pool", ask_pool)

        a = ask_pool + ask_user
        if a == 0:
            raise DegenerateEquationError("ask_pool + ask_user is zero")

        b_1 = 2 * offer_pool * a
        b_2 = (ask_pool * (offer_pool + offer_user) * params.commission_bps) // params.bps_denom
        b = b_1 - b_2

        c = offer_pool * (offer_pool * ask_user - offer_user * ask_pool)

        return cls(a=a, b=b, c=c)

    def value(self, x: int) -> int:
        """``f(x) = a * x^2 + b * x + c``"""
        return self.a * x * x + self.b * x + self.c

    def derivative(self, x: int) -> int:
        """``f'(x) = 2 * a * x + b``"""
        return 2 * self.a * x + self.b

    @property
    def is_quadratic(self) -> bool:
        return self.a != 0


def build(
    offer_user: Amount,
    offer_pool: Amount,
    ask_user: Amount,
    ask_pool: Amount,
    *,
    params: ZapParams = DEFAULT_PARAMS,
) -> Equation:
    """
    Derive the zap equation for one request.

    Raises:
        TypeError: an input is not an int
        InvalidAmountError: a user amount is negative
        InvalidReserveError: a pool depth is zero or negative
    """
    return Equation.from_assets(offer_user, offer_pool, ask_user, ask_pool, params=params)


def build_oriented(
    reserves: PoolReserves,
    deposits: UserDeposits,
    *,
    params: ZapParams = DEFAULT_PARAMS,
) -> Equation:
    return Equation.from_assets(
        deposits.offer_user,
        reserves.offer_depth,
        deposits.ask_user,
        reserves.ask_depth,
        params=params,
    )
