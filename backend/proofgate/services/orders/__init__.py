"""
Dual-Proof Order Gate

CONTRACT:
    Input:  PreviewRequest (OrderAction + current position)
    Output: PreviewResult, or SafeModeError

RESPONSIBILITIES:
    - Clamp the order to the caller's tier soft cap (optional)
    - Request a risk proof and a policy verdict concurrently
    - Join both legs under independent timeouts
    - Ask the pluggable decision policy
    - Veto anything degraded or rejected

CRITICAL: The gate is FAIL-CLOSED.
Any dependency failure refuses the order with SAFE_MODE.
"""

from proofgate.services.orders.interface import OrderPreviewInterface
from proofgate.services.orders.service import (
    ClampConfig,
    OrderPreviewOrchestrator,
    build_order_preview_service,
)

__all__ = [
    "OrderPreviewInterface",
    "ClampConfig",
    "OrderPreviewOrchestrator",
    "build_order_preview_service",
]
