"""
Risk-Proof Service Client

Requests a zk-VaR risk proof for an order.
Fail-closed: any failure yields a degraded LegResult, never an exception.
"""

from proofgate.schemas.order import OrderAction, RiskProof
from proofgate.services.clients.base import (
    FailClosedClient,
    LegResult,
)

DEFAULT_PATH = "/prove"


class RiskProofServiceClient(FailClosedClient):
    """Client for the external risk-proof service."""

    name = "RiskProofService"

    async def prove(self, action: OrderAction) -> LegResult[RiskProof]:
        """Request a risk proof for the order."""
        return await self._call(
            "POST",
            self._url(self.config.path or DEFAULT_PATH),
            RiskProof.model_validate,
            payload=action.model_dump(),
        )

    async def fetch_proof(self, proof_id: str) -> LegResult[RiskProof]:
        """Look up a previously issued proof."""
        return await self._call(
            "GET",
            self._resource_url("proofs", proof_id),
            RiskProof.model_validate,
        )
