"""Data types for the zap engine.

All types are frozen dataclasses (immutable) over plain ints.

Conventions:
- "offer" is the asset the user swaps away, "ask" the asset received.
- ``*0`` / ``*1`` fields follow the pool's own asset order.
- amounts are integer base units with no decimals applied.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from .math import require_amount, require_reserve


Amount = int  # Non-negative integer (arbitrary precision)


@dataclass(frozen=True)
class PoolReserves:
    """Pool depths seen from the offer side of a swap."""

    offer_depth: Amount
    ask_depth: Amount

    def __post_init__(self) -> None:
        require_reserve("offer_depth", self.offer_depth)
        require_reserve("ask_depth", self.ask_depth)


@dataclass(frozen=True)
class UserDeposits:
    """Amounts the user deposits, seen from the offer side."""

    offer_user: Amount
    ask_user: Amount

    def __post_init__(self) -> None:
        require_amount("offer_user", self.offer_user)
        require_amount("ask_user", self.ask_user)


@dataclass(frozen=True)
class PairReserves:
    """Pool depths in pool asset order."""

    reserve0: Amount
    reserve1: Amount

    def __post_init__(self) -> None:
        require_reserve("reserve0", self.reserve0)
        require_reserve("reserve1", self.reserve1)

    def oriented(self, offer_index: int) -> PoolReserves:
        if offer_index == 0:
            return PoolReserves(offer_depth=self.reserve0, ask_depth=self.reserve1)
        if offer_index == 1:
            return PoolReserves(offer_depth=self.reserve1, ask_depth=self.reserve0)
        raise ValueError(f"offer_index must be 0 or 1: {offer_index}")


@dataclass(frozen=True)
class PairDeposits:
    """User deposits in pool asset order."""

    amount0: Amount = 0
    amount1: Amount = 0

    def __post_init__(self) -> None:
        require_amount("amount0", self.amount0)
        require_amount("amount1", self.amount1)

    def oriented(self, offer_index: int) -> UserDeposits:
        if offer_index == 0:
            return UserDeposits(offer_user=self.amount0, ask_user=self.amount1)
        if offer_index == 1:
            return UserDeposits(offer_user=self.amount1, ask_user=self.amount0)
        raise ValueError(f"offer_index must be 0 or 1: {offer_index}")

    def is_empty(self) -> bool:
        return self.amount0 == 0 and self.amount1 == 0


@dataclass(frozen=True)
class IterationRecord:
    """One Newton step: ``x_next = x - value / derivative``."""

    iteration: int
    x: int
    value: int
    derivative: int
    x_next: int


IterationObserver = Callable[[IterationRecord], None]


@dataclass(frozen=True)
class SolveResult:
    root: int
    iterations: int
    converged: bool


@dataclass(frozen=True)
class SwapSimulation:
    return_amount: Amount  # after commission
    commission: Amount
    spread_amount: Amount


@dataclass(frozen=True)
class ZapPlan:
    """Which asset to offer, and how much of it to swap before depositing."""

    offer_index: int
    offer_amount: Amount
    solve: Optional[SolveResult] = None

    @property
    def ask_index(self) -> int:
        return 1 - self.offer_index

    @property
    def needs_swap(self) -> bool:
        return self.offer_amount > 0


@dataclass(frozen=True)
class EnterSimulation:
    plan: ZapPlan
    return_amount: Amount
    commission: Amount
    reserves_after: PairReserves
    provided: PairDeposits
    mint_shares: Amount
