"""
Order Preview Service Interface

Defines the contract for the dual-proof order gate.
"""

from abc import abstractmethod
from typing import Optional

from proofgate.services.base import BaseService
from proofgate.schemas.order import OrderAction, PreviewRequest, PreviewResult


class OrderPreviewInterface(BaseService[PreviewRequest, PreviewResult]):
    """
    Order Preview Service Contract.

    INPUT: PreviewRequest
        - action: symbol / side / qty
        - current_qty: current signed position in the symbol
        - xp_total, reference_price: optional, drive the soft-cap clamp

    OUTPUT: PreviewResult
        - order_preview_id, trace_id: fresh per call
        - action: the order that was evaluated
        - proof: risk-proof payload, unmodified
        - policy: policy verdict payload, unmodified

    GATE STEPS (in order):
        1. Clamp notional to tier soft cap (if configured)
        2. Dispatch risk-proof and policy calls concurrently
        3. Join: wait for BOTH legs to settle
        4. Derive CheckOutcome
        5. Ask the decision policy
        6. Veto: degraded OR REJECT -> SAFE_MODE
        7. Assemble the result

    Any refusal raises SafeModeError. No partial results, no retries.
    """

    @property
    def name(self) -> str:
        return "OrderPreviewService"

    @abstractmethod
    async def preview(
        self,
        action: OrderAction,
        current_qty: float,
        *,
        xp_total: Optional[float] = None,
        reference_price: Optional[float] = None,
    ) -> PreviewResult:
        """Run the gate for one order."""
        pass

    async def execute(self, input_data: PreviewRequest) -> PreviewResult:
        return await self.preview(
            input_data.action,
            input_data.current_qty,
            xp_total=input_data.xp_total,
            reference_price=input_data.reference_price,
        )
