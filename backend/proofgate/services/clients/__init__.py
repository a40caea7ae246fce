"""
Remote Dependency Clients

CONTRACT:
    RiskProofServiceClient.prove(OrderAction)    -> LegResult[RiskProof]
    PolicyServiceClient.evaluate(OrderAction)    -> LegResult[PolicyVerdict]

FAIL-CLOSED:
    Timeout, transport error, non-2xx status, or an unparseable body
    all become a degraded LegResult. Nothing is raised, nothing is retried.
"""

from proofgate.services.clients.base import (
    FailClosedClient,
    LegResult,
    ServiceClientConfig,
    call_or_degrade,
)
from proofgate.services.clients.policy import PolicyServiceClient
from proofgate.services.clients.risk_proof import RiskProofServiceClient

__all__ = [
    "FailClosedClient",
    "LegResult",
    "ServiceClientConfig",
    "call_or_degrade",
    "PolicyServiceClient",
    "RiskProofServiceClient",
]
