"""
Constant-product swap simulator.

Predicts what an XYK pool returns for an offer, with the commission taken
from the output:

    cp                = offer_depth * ask_depth
    ask_depth_after   = floor(cp * S / (offer_depth + offer_amount))
    return_amount     = floor((ask_depth * S - ask_depth_after) / S)
    commission        = floor(return_amount * 30 / 10_000)

``S`` is the precision scalar (1e18). Scaling before the division keeps the
fractional part of ``ask_depth_after`` until the final division by ``S``, so
the result is floored once instead of twice.

Transfer taxes some assets levy on top of this are not modelled.
"""

from __future__ import annotations

from typing import Tuple

from .math import require_amount, require_reserve
from .params import DEFAULT_PARAMS, ZapParams
from .types import Amount, PoolReserves, SwapSimulation


def simulate_swap_detailed(
    offer_amount: Amount,
    offer_depth: Amount,
    ask_depth: Amount,
    *,
    params: ZapParams = DEFAULT_PARAMS,
) -> SwapSimulation:
    """
    Quote a swap of ``offer_amount`` against the given depths.

    The spread is the shortfall against the pre-trade price
    ``offer_amount * ask_depth / offer_depth``.

    Raises:
        InvalidReserveError: a depth is zero or negative
        InvalidAmountError: ``offer_amount`` is negative
    """
    require_reserve("offer_depth", offer_depth)
    require_reserve("ask_depth", ask_depth)
    require_amount("offer_amount", offer_amount)

    scale = params.precision_scalar
    cp = offer_depth * ask_depth
    offer_depth_after = offer_depth + offer_amount
    ask_depth_after = (cp * scale) // offer_depth_after
    return_amount = (ask_depth * scale - ask_depth_after) // scale

    commission = params.commission(return_amount)
    spread_amount = max(0, (offer_amount * ask_depth) // offer_depth - return_amount)

    return SwapSimulation(
        return_amount=return_amount - commission,
        commission=commission,
        spread_amount=spread_amount,
    )


def simulate_swap(
    offer_amount: Amount,
    offer_depth: Amount,
    ask_depth: Amount,
    *,
    params: ZapParams = DEFAULT_PARAMS,
) -> Tuple[Amount, Amount]:
    """Returns ``(return_amount_after_fee, commission)``."""
    sim = simulate_swap_detailed(offer_amount, offer_depth, ask_depth, params=params)
    return sim.return_amount, sim.commission


def simulate_swap_oriented(
    offer_amount: Amount,
    reserves: PoolReserves,
    *,
    params: ZapParams = DEFAULT_PARAMS,
) -> SwapSimulation:
    return simulate_swap_detailed(offer_amount, reserves.offer_depth, reserves.ask_depth, params=params)
