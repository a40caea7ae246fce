"""
CONTRACT: Order Preview

Input: PreviewRequest (OrderAction + current position)
Output: PreviewResult

Wire shapes shared with the risk-proof and policy services.
Every PreviewResult embeds the exact payloads returned by both services.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# ENUMS
# =============================================================================


class OrderSide(str, Enum):
    BUY = "buy"
    SELL = "sell"


class GateDecision(str, Enum):
    ALLOW = "ALLOW"  # Order may be previewed
    REJECT = "REJECT"  # Order refused by the decision policy


# =============================================================================
# INPUT: Order Action
# =============================================================================


class OrderAction(BaseModel):
    """
    Caller-supplied order intent.
    Sent to both the risk-proof and the policy service as-is.
    """

    model_config = ConfigDict(frozen=True)

    symbol: str = Field(..., min_length=1, description="Ticker symbol")
    side: Literal["buy", "sell"]
    qty: float = Field(..., gt=0)

    @property
    def signed_qty(self) -> float:
        """Quantity signed by direction (sells are negative)."""
        return self.qty if self.side == OrderSide.BUY.value else -self.qty


class PreviewRequest(BaseModel):
    """Request body for an order preview."""

    model_config = ConfigDict(populate_by_name=True)

    action: OrderAction
    current_qty: float = Field(..., alias="currentQty")
    xp_total: Optional[float] = Field(
        default=None,
        alias="xpTotal",
        ge=0,
        description="Accumulated experience, selects the soft-cap tier",
    )
    reference_price: Optional[float] = Field(
        default=None,
        alias="referencePrice",
        gt=0,
        description="Price used to derive the order's notional for clamping",
    )


# =============================================================================
# REMOTE PAYLOADS
# =============================================================================


class RiskProof(BaseModel):
    """Risk-proof service success response."""

    model_config = ConfigDict(frozen=True, strict=True)

    proof_id: str
    hash: str
    ok: bool
    var_value: float


class PolicyVerdict(BaseModel):
    """Policy/compliance service success response."""

    model_config = ConfigDict(frozen=True, strict=True)

    verdict_id: str
    allow: bool
    reasons: Optional[list[str]] = None


# =============================================================================
# DERIVED
# =============================================================================


@dataclass(frozen=True)
class CheckOutcome:
    """
    Combined state of both dependency legs.
    Built only through derive(), never by callers.
    """

    ace_ok: bool
    var_ok: bool
    degraded: bool

    @classmethod
    def derive(cls, proof_leg, policy_leg) -> "CheckOutcome":
        """Derive the outcome from the two settled legs."""
        proof: Optional[RiskProof] = proof_leg.value
        policy: Optional[PolicyVerdict] = policy_leg.value
        return cls(
            ace_ok=policy is not None and policy.allow is True,
            var_ok=proof is not None and proof.ok is True,
            degraded=proof_leg.degraded or policy_leg.degraded,
        )


# =============================================================================
# OUTPUT: Preview Result
# =============================================================================


class PreviewResult(BaseModel):
    """
    Order preview that passed both proofs.
    Returned once to the caller, never cached.
    """

    order_preview_id: str
    action: OrderAction
    proof: RiskProof
    policy: PolicyVerdict
    trace_id: str
