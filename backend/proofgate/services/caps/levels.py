"""
Level Soft Caps

Monotonic step function from accumulated experience (XP) to soft caps.
Higher tiers unlock larger per-trade and per-symbol notionals; caps never shrink.
"""

from typing import Optional, Sequence

from proofgate.schemas.caps import LevelTier, SoftCaps

DEFAULT_LEVELS: tuple[LevelTier, ...] = (
    LevelTier(level=1, xp_min=0, soft_caps=SoftCaps(per_trade=2000, per_symbol=10000)),
    LevelTier(level=2, xp_min=500, soft_caps=SoftCaps(per_trade=5000, per_symbol=20000)),
    LevelTier(level=3, xp_min=1500, soft_caps=SoftCaps(per_trade=10000, per_symbol=30000)),
    LevelTier(level=4, xp_min=3000, soft_caps=SoftCaps(per_trade=15000, per_symbol=50000)),
    LevelTier(level=5, xp_min=6000, soft_caps=SoftCaps(per_trade=25000, per_symbol=75000)),
)


class LevelSoftCaps:
    """
    Ordered level table.

    Validated on construction:
    - at least one tier
    - strictly increasing levels and XP thresholds
    - non-decreasing per-trade and per-symbol caps
    """

    def __init__(self, tiers: Sequence[LevelTier] = DEFAULT_LEVELS):
        self._tiers = tuple(tiers)
        self._validate()

    @property
    def tiers(self) -> tuple[LevelTier, ...]:
        return self._tiers

    def _validate(self) -> None:
        if not self._tiers:
            raise ValueError("Level table must contain at least one tier")

        for prev, tier in zip(self._tiers, self._tiers[1:]):
            if tier.level <= prev.level:
                raise ValueError(f"Levels must increase: {prev.level} -> {tier.level}")
            if tier.xp_min <= prev.xp_min:
                raise ValueError(
                    f"XP thresholds must strictly increase: "
                    f"level {prev.level} ({prev.xp_min}) -> level {tier.level} ({tier.xp_min})"
                )
            if tier.soft_caps.per_trade < prev.soft_caps.per_trade:
                raise ValueError(f"Per-trade cap decreases at level {tier.level}")
            if tier.soft_caps.per_symbol < prev.soft_caps.per_symbol:
                raise ValueError(f"Per-symbol cap decreases at level {tier.level}")

    def tier_for(self, xp_total: float) -> LevelTier:
        """Highest tier whose threshold is <= xp_total (first tier if below all)."""
        for tier in reversed(self._tiers):
            if xp_total >= tier.xp_min:
                return tier
        return self._tiers[0]

    def level_for(self, xp_total: float) -> int:
        return self.tier_for(xp_total).level

    def caps_for(self, xp_total: float) -> SoftCaps:
        """Soft caps unlocked by xp_total."""
        return self.tier_for(xp_total).soft_caps

    def _next_tier(self, level: int) -> Optional[LevelTier]:
        for tier in self._tiers:
            if tier.level > level:
                return tier
        return None

    def xp_for_next_level(self, level: int) -> float:
        """XP needed to reach the tier above `level` (top threshold at max level)."""
        next_tier = self._next_tier(level)
        if next_tier is None:
            return self._tiers[-1].xp_min
        return next_tier.xp_min

    def level_progress(self, xp_total: float) -> float:
        """Percent progress from the current tier toward the next one."""
        current = self.tier_for(xp_total)
        next_tier = self._next_tier(current.level)
        if next_tier is None:
            return 100.0

        span = next_tier.xp_min - current.xp_min
        progress = (xp_total - current.xp_min) / span * 100
        return max(0.0, min(100.0, progress))
