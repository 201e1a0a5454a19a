"""
Kernel layer.

- `zapmath/kernels/dex/` contains kernel parameter specs (.yaml) shared with
  other implementations of the same math.
- `zapmath/core/zap/params.py` loads them; parity tests keep the Python
  defaults and the YAML in lockstep.
"""
