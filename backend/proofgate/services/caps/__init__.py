"""
Soft Caps

CONTRACT:
    soft_clamp(requested_notional, hard_cap, soft_cap?) -> clamped notional
    LevelSoftCaps.caps_for(xp_total)                   -> SoftCaps

Soft caps are a pre-filter only. The policy service remains the
authoritative limit; the clamp keeps obviously out-of-tier amounts
from being offered for evaluation.
"""

from proofgate.services.caps.clamp import soft_clamp
from proofgate.services.caps.levels import DEFAULT_LEVELS, LevelSoftCaps

__all__ = [
    "soft_clamp",
    "DEFAULT_LEVELS",
    "LevelSoftCaps",
]
