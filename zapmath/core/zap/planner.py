"""
Zap planning: turn an arbitrary two-asset deposit into a swap-then-provide plan.

Flow (pure; the transaction layer executes the result):
1. validate the deposit (at least one non-zero asset)
2. offer the asset the user holds a larger share of, relative to the pool
3. solve the zap equation for the swap amount
4. optionally preview the swap, the provided amounts and the LP shares minted
"""

from __future__ import annotations

from typing import Optional

from .equation import build_oriented
from .errors import InvalidDepositError, SlippageError, ZapRangeError
from .math import mul_div, require_amount, require_int
from .params import DEFAULT_PARAMS, ZapParams
from .solver import newton_solve
from .swap import simulate_swap_oriented
from .types import Amount, EnterSimulation, IterationObserver, PairDeposits, PairReserves, ZapPlan


def validate_deposits(deposits: PairDeposits) -> None:
    if deposits.is_empty():
        raise InvalidDepositError("must deposit at least one non-zero asset")


def choose_offer_index(reserves: PairReserves, deposits: PairDeposits) -> int:
    """
    Index of the asset to swap away.

    ``amount0 / reserve0 > amount1 / reserve1`` is compared by cross-multiplying.
    Ties (including a perfectly balanced deposit) offer asset 1, whose equation
    then has ``c == 0`` and solves to a zero swap.
    """
    if deposits.amount0 * reserves.reserve1 > deposits.amount1 * reserves.reserve0:
        return 0
    return 1


def plan_zap(
    reserves: PairReserves,
    deposits: PairDeposits,
    *,
    observer: Optional[IterationObserver] = None,
    params: ZapParams = DEFAULT_PARAMS,
) -> ZapPlan:
    """
    Compute which asset to offer and how much of it to swap.

    Reaching the iteration cap is tolerated: the latest iterate is used, and a
    caller's ``minimum_received`` bounds the damage of a poor approximation.

    Raises:
        InvalidDepositError: nothing is deposited
        ZapRangeError: the solved amount is negative, exceeds the offered
            deposit, or does not fit the ledger's amount range
    """
    validate_deposits(deposits)

    offer_index = choose_offer_index(reserves, deposits)
    user = deposits.oriented(offer_index)
    equation = build_oriented(reserves.oriented(offer_index), user, params=params)
    result = newton_solve(equation, observer=observer, params=params)

    offer_amount = result.root
    if offer_amount < 0:
        raise ZapRangeError(f"solved swap amount is negative: {offer_amount}")
    if offer_amount > user.offer_user:
        raise ZapRangeError(f"solved swap amount {offer_amount} exceeds offered deposit {user.offer_user}")
    if offer_amount > params.max_amount:
        raise ZapRangeError(f"solved swap amount {offer_amount} exceeds max amount {params.max_amount}")

    return ZapPlan(offer_index=offer_index, offer_amount=offer_amount, solve=result)


def compute_mint_shares(provided: PairDeposits, reserves: PairReserves, total_share: Amount) -> Amount:
    """``min(amount0 * total_share // reserve0, amount1 * total_share // reserve1)``"""
    require_int("total_share", total_share)
    if total_share <= 0:
        raise ValueError(f"total_share must be positive: {total_share}")
    share0 = mul_div(provided.amount0, total_share, reserves.reserve0)
    share1 = mul_div(provided.amount1, total_share, reserves.reserve1)
    return min(share0, share1)


def simulate_enter(
    reserves: PairReserves,
    deposits: PairDeposits,
    total_share: Amount,
    *,
    params: ZapParams = DEFAULT_PARAMS,
) -> EnterSimulation:
    """
    Preview a full zap: the swap, the amounts provided afterwards and the LP
    shares minted against the post-swap pool.
    """
    plan = plan_zap(reserves, deposits, params=params)
    swap = simulate_swap_oriented(plan.offer_amount, reserves.oriented(plan.offer_index), params=params)

    pool = [reserves.reserve0, reserves.reserve1]
    user = [deposits.amount0, deposits.amount1]
    pool[plan.offer_index] += plan.offer_amount
    pool[plan.ask_index] -= swap.return_amount
    user[plan.offer_index] -= plan.offer_amount
    user[plan.ask_index] += swap.return_amount

    reserves_after = PairReserves(reserve0=pool[0], reserve1=pool[1])
    provided = PairDeposits(amount0=user[0], amount1=user[1])

    return EnterSimulation(
        plan=plan,
        return_amount=swap.return_amount,
        commission=swap.commission,
        reserves_after=reserves_after,
        provided=provided,
        mint_shares=compute_mint_shares(provided, reserves_after, total_share),
    )


def assert_minimum_received(mint_shares: Amount, minimum_received: Optional[Amount]) -> None:
    """Raise ``SlippageError`` when ``mint_shares < minimum_received``; ``None`` skips the check."""
    require_amount("mint_shares", mint_shares)
    if minimum_received is None:
        return
    require_amount("minimum_received", minimum_received)
    if mint_shares < minimum_received:
        raise SlippageError(minimum_received, mint_shares)
