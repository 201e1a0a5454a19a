"""Tests for zapmath/core/zap/solver.py."""

from __future__ import annotations

import logging

import pytest

from zapmath.core.zap.equation import Equation, build
from zapmath.core.zap.errors import (
    DegenerateEquationError,
    NonConvergenceError,
    UndefinedDerivativeError,
)
from zapmath.core.zap.params import ZapParams
from zapmath.core.zap.solver import newton_solve, solve, solve_or_raise
from zapmath.core.zap.types import IterationRecord


def _worked_example() -> Equation:
    return build(offer_user=10_000, offer_pool=1_000_000, ask_user=0, ask_pool=1_000_000)


# ---------------------------------------------------------------------------
# Worked example
# ---------------------------------------------------------------------------

class TestWorkedExample:
    def test_root(self):
        assert solve(_worked_example()) == 4996

    def test_diagnostics(self):
        result = newton_solve(_worked_example())
        assert result.root == 4996
        assert result.iterations == 3
        assert result.converged is True

    def test_iteration_trace(self):
        records: list[IterationRecord] = []
        solve(_worked_example(), observer=records.append)
        b = 1_996_970_000_000
        assert records == [
            IterationRecord(iteration=1, x=0, value=-(10**16), derivative=b, x_next=5007),
            IterationRecord(
                iteration=2,
                x=5007,
                value=23_898_839_000_000,
                derivative=2_006_984_000_000,
                x_next=4996,
            ),
            IterationRecord(
                iteration=3,
                x=4996,
                value=1_822_136_000_000,
                derivative=2_006_962_000_000,
                x_next=4996,
            ),
        ]

    def test_root_brackets_true_root(self):
        eq = _worked_example()
        x = solve(eq)
        # Iterates approach from above; the returned x is the first integer at or past the root.
        assert eq.value(x) >= 0
        assert eq.value(x - 1) < 0

    def test_reproducible(self):
        assert newton_solve(_worked_example()) == newton_solve(_worked_example())


# ---------------------------------------------------------------------------
# Rounding
# ---------------------------------------------------------------------------

class TestTruncation:
    def test_negative_step_truncates_toward_zero(self):
        # c > 0: first step is -trunc(1e16 / 2_017_000_000_000) = -4957 (floor would give -4958).
        eq = build(offer_user=0, offer_pool=1_000_000, ask_user=10_000, ask_pool=1_000_000)
        records: list[IterationRecord] = []
        newton_solve(eq, max_iterations=1, observer=records.append)
        assert records[0].derivative == 2_017_000_000_000
        assert records[0].x_next == -4957

    def test_zero_constant_settles_immediately(self):
        eq = build(offer_user=0, offer_pool=5, ask_user=0, ask_pool=9)
        result = newton_solve(eq)
        assert result == newton_solve(eq)
        assert result.root == 0
        assert result.iterations == 1
        assert result.converged is True

    def test_small_pool_converges(self):
        eq = build(offer_user=100, offer_pool=1, ask_user=0, ask_pool=1)
        result = newton_solve(eq)
        assert result.converged
        assert result.root == 10
        assert result.iterations == 6


# ---------------------------------------------------------------------------
# Failure modes
# ---------------------------------------------------------------------------

class TestFailures:
    def test_degenerate_equation(self):
        with pytest.raises(DegenerateEquationError):
            solve(Equation(a=0, b=5, c=-10))

    def test_degenerate_checked_before_iterating(self):
        calls: list[IterationRecord] = []
        with pytest.raises(DegenerateEquationError):
            newton_solve(Equation(a=0, b=0, c=0), observer=calls.append)
        assert calls == []

    def test_zero_derivative(self):
        with pytest.raises(UndefinedDerivativeError) as exc_info:
            solve(Equation(a=1, b=0, c=-4))
        assert exc_info.value.iteration == 1
        assert exc_info.value.x == 0

    def test_zero_derivative_mid_run(self):
        # x^2 + 1 from x=1: value=2, derivative=2 -> x=0 where f'(0) == 0.
        with pytest.raises(UndefinedDerivativeError) as exc_info:
            solve(Equation(a=1, b=0, c=1), x_init=1)
        assert exc_info.value.iteration == 2

    def test_iteration_cap_is_reported(self):
        result = newton_solve(_worked_example(), max_iterations=1)
        assert result.converged is False
        assert result.iterations == 1
        assert result.root == 5007

    def test_solve_returns_last_iterate_at_cap(self):
        assert solve(_worked_example(), params=ZapParams(max_iterations=2)) == 4996

    def test_solve_or_raise(self):
        with pytest.raises(NonConvergenceError) as exc_info:
            solve_or_raise(_worked_example(), params=ZapParams(max_iterations=2))
        assert exc_info.value.root == 4996
        assert exc_info.value.iterations == 2

    def test_solve_or_raise_converged(self):
        assert solve_or_raise(_worked_example()) == 4996

    def test_max_iterations_must_be_positive(self):
        with pytest.raises(ValueError):
            newton_solve(_worked_example(), max_iterations=0)


def test_iterations_logged_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="zapmath.core.zap.solver"):
        solve(_worked_example())
    messages = [r.getMessage() for r in caplog.records if r.name == "zapmath.core.zap.solver"]
    assert len(messages) == 4
    assert messages[0].startswith("iteration 1:")
    assert "converged after 3 iterations" in messages[-1]


class TestOversizedDeposit:
    def test_negative_slope_at_zero_leads_to_negative_root(self):
        # 1000x the offered depth: b < 0, so the iteration settles on the negative root.
        eq = build(offer_user=1_000, offer_pool=1, ask_user=0, ask_pool=1)
        assert eq.b < 0
        result = newton_solve(eq)
        assert result == newton_solve(eq)
        assert result.converged is True
        assert result.root == -32
