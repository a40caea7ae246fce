"""
CONTRACT: Soft Caps

Tier-derived notional ceilings applied before an order is offered for evaluation.
Soft caps never exceed the authoritative hard cap enforced by the policy service.
"""

from pydantic import BaseModel, ConfigDict, Field


class SoftCaps(BaseModel):
    """Per-tier notional ceilings."""

    model_config = ConfigDict(frozen=True)

    per_trade: float = Field(..., ge=0)
    per_symbol: float = Field(..., ge=0)


class LevelTier(BaseModel):
    """One row of the level table."""

    model_config = ConfigDict(frozen=True)

    level: int = Field(..., ge=1)
    xp_min: float = Field(..., ge=0)
    soft_caps: SoftCaps


class CapsResponse(BaseModel):
    """Soft caps resolved for an experience total."""

    xp_total: float
    level: int
    soft_caps: SoftCaps
    xp_for_next_level: float
    level_progress: float = Field(..., ge=0, le=100)
