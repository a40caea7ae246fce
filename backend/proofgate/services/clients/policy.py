"""
Policy Service Client

Asks the compliance engine (ACE) whether an order is allowed.
Same fail-closed contract as the risk-proof client, shorter timeout.
"""

from proofgate.schemas.order import OrderAction, PolicyVerdict
from proofgate.services.clients.base import (
    FailClosedClient,
    LegResult,
)

DEFAULT_PATH = "/evaluate"


class PolicyServiceClient(FailClosedClient):
    """Client for the external policy/compliance service."""

    name = "PolicyService"

    async def evaluate(self, action: OrderAction) -> LegResult[PolicyVerdict]:
        """Request a policy verdict for the order."""
        return await self._call(
            "POST",
            self._url(self.config.path or DEFAULT_PATH),
            PolicyVerdict.model_validate,
            payload=action.model_dump(),
        )

    async def fetch_verdict(self, verdict_id: str) -> LegResult[PolicyVerdict]:
        """Look up a previously issued verdict."""
        return await self._call(
            "GET",
            self._resource_url("verdicts", verdict_id),
            PolicyVerdict.model_validate,
        )
