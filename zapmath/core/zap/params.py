"""
Zap kernel parameters.

The constants here are process-wide and read-only. They are bundled into an
immutable ``ZapParams`` passed explicitly into each component, so nothing reads
mutable module state.

The same values are published in `zapmath/kernels/dex/zap_xyk_v1.yaml`; the
YAML is the artifact shared with other implementations and `load_params` reads
it back for parity checks.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from .math import mul_div, require_int


KERNEL_ID = "zap_xyk_v1"

BPS_DENOM = 10_000
COMMISSION_BPS = 30
PRECISION_SCALAR = 10**18
MAX_ITERATIONS = 32
MAX_UINT128 = (1 << 128) - 1


@dataclass(frozen=True)
class ZapParams:
    commission_bps: int = COMMISSION_BPS
    bps_denom: int = BPS_DENOM
    precision_scalar: int = PRECISION_SCALAR
    max_iterations: int = MAX_ITERATIONS
    max_amount: int = MAX_UINT128

    def __post_init__(self) -> None:
        for name, v in (
            ("commission_bps", self.commission_bps),
            ("bps_denom", self.bps_denom),
            ("precision_scalar", self.precision_scalar),
            ("max_iterations", self.max_iterations),
            ("max_amount", self.max_amount),
        ):
            require_int(name, v)
        if self.bps_denom <= 0:
            raise ValueError(f"bps_denom must be positive: {self.bps_denom}")
        if not (0 <= self.commission_bps < self.bps_denom):
            raise ValueError(f"commission_bps must be in [0, {self.bps_denom}): {self.commission_bps}")
        if self.precision_scalar <= 0:
            raise ValueError(f"precision_scalar must be positive: {self.precision_scalar}")
        if self.max_iterations <= 0:
            raise ValueError(f"max_iterations must be positive: {self.max_iterations}")
        if self.max_amount <= 0:
            raise ValueError(f"max_amount must be positive: {self.max_amount}")

    def commission(self, amount: int) -> int:
        """``floor(amount * commission_bps / bps_denom)``."""
        return mul_div(amount, self.commission_bps, self.bps_denom)


DEFAULT_PARAMS = ZapParams()


def kernel_spec_path() -> Path:
    # zapmath/core/zap/params.py -> zapmath/ -> kernels/dex/zap_xyk_v1.yaml
    return Path(__file__).resolve().parents[2] / "kernels" / "dex" / f"{KERNEL_ID}.yaml"


def params_from_mapping(obj: Mapping[str, Any]) -> ZapParams:
    """Build ``ZapParams`` from a parsed kernel spec mapping."""
    kernel = obj.get("kernel")
    if kernel != KERNEL_ID:
        raise ValueError(f"unexpected kernel id: {kernel!r} (expected {KERNEL_ID!r})")

    fee = obj.get("fee")
    solver = obj.get("solver")
    limits = obj.get("limits")
    for name, section in (("fee", fee), ("solver", solver), ("limits", limits)):
        if not isinstance(section, Mapping):
            raise ValueError(f"kernel spec section {name!r} must be a mapping")

    return ZapParams(
        commission_bps=fee.get("commission_bps"),
        bps_denom=fee.get("bps_denom"),
        precision_scalar=obj.get("precision_scalar"),
        max_iterations=solver.get("max_iterations"),
        max_amount=limits.get("max_amount"),
    )


@lru_cache(maxsize=1)
def _load_default() -> ZapParams:
    return load_params(kernel_spec_path())


def load_params(path: Optional[Path] = None) -> ZapParams:
    """
    Load kernel parameters from YAML.

    With no ``path`` the bundled `zap_xyk_v1.yaml` is read once and cached.
    """
    if path is None:
        return _load_default()
    obj = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    if not isinstance(obj, Mapping):
        raise TypeError("kernel spec YAML must be a mapping")
    return params_from_mapping(obj)
