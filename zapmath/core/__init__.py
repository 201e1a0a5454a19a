"""
Core zap algorithms
"""

from .zap import (
    Equation,
    build,
    solve,
    simulate_swap,
    plan_zap,
    simulate_enter,
)

__all__ = [
    "Equation",
    "build",
    "solve",
    "simulate_swap",
    "plan_zap",
    "simulate_enter",
]
