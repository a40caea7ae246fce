"""
Soft-Cap Clamp

Pre-filter bounding a requested notional by the tier soft cap and the hard cap.
The policy service still enforces the authoritative limit.
"""

import math
from typing import Optional


def soft_clamp(
    requested_notional: float,
    hard_cap: float,
    soft_cap: Optional[float] = None,
) -> float:
    """
    Clamp a signed notional to min(hard_cap, soft_cap).

    The result keeps the sign of the request, so reduce/short orders
    expressed as negative notionals never flip direction.
    """
    if hard_cap < 0 or (soft_cap is not None and soft_cap < 0):
        raise ValueError(f"Caps must be non-negative: hard={hard_cap}, soft={soft_cap}")

    cap = min(hard_cap, soft_cap if soft_cap is not None else hard_cap)
    magnitude = min(abs(requested_notional), cap)
    if magnitude == 0:
        return 0.0
    return math.copysign(magnitude, requested_notional)
