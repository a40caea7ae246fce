"""
ProofGate Schema Contracts

This module defines all JSON contracts between system components.
These are the authoritative interfaces - all modules must conform to these schemas.
"""

from proofgate.schemas.order import (
    OrderSide,
    GateDecision,
    OrderAction,
    PreviewRequest,
    RiskProof,
    PolicyVerdict,
    CheckOutcome,
    PreviewResult,
)
from proofgate.schemas.caps import (
    SoftCaps,
    LevelTier,
    CapsResponse,
)

__all__ = [
    # Order preview
    "OrderSide",
    "GateDecision",
    "OrderAction",
    "PreviewRequest",
    "RiskProof",
    "PolicyVerdict",
    "CheckOutcome",
    "PreviewResult",
    # Caps
    "SoftCaps",
    "LevelTier",
    "CapsResponse",
]
