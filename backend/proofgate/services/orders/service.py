"""
Dual-Proof Order Gate Implementation

Joins the risk-proof and policy legs, asks the decision policy,
and applies the fail-closed veto on top of whatever it returned.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Optional
from uuid import uuid4

import aiohttp

from proofgate.core.config import Settings
from proofgate.schemas.order import (
    CheckOutcome,
    GateDecision,
    OrderAction,
    PolicyVerdict,
    PreviewResult,
    RiskProof,
)
from proofgate.services.base import SafeModeError
from proofgate.services.caps import LevelSoftCaps, soft_clamp
from proofgate.services.clients import (
    LegResult,
    PolicyServiceClient,
    RiskProofServiceClient,
    ServiceClientConfig,
)
from proofgate.services.orders.interface import OrderPreviewInterface
from proofgate.services.supervisor import DecisionPolicy, strict_policy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClampConfig:
    """Soft-cap clamp wiring, enabled per deployment."""

    hard_cap: float
    soft_caps: LevelSoftCaps = field(default_factory=LevelSoftCaps)

    def __post_init__(self):
        if self.hard_cap < 0:
            raise ValueError(f"Hard cap must be non-negative: {self.hard_cap}")


class OrderPreviewOrchestrator(OrderPreviewInterface):
    """
    Dual-Proof Order Gate.

    Holds only its collaborators and read-only configuration;
    concurrent previews share nothing mutable.
    """

    def __init__(
        self,
        proof_client: RiskProofServiceClient,
        policy_client: PolicyServiceClient,
        decision_policy: DecisionPolicy = strict_policy,
        clamp: Optional[ClampConfig] = None,
    ):
        self._proof_client = proof_client
        self._policy_client = policy_client
        self._decision_policy = decision_policy
        self._clamp = clamp

    @property
    def name(self) -> str:
        return "OrderPreviewOrchestrator"

    @property
    def proof_client(self) -> RiskProofServiceClient:
        return self._proof_client

    @property
    def policy_client(self) -> PolicyServiceClient:
        return self._policy_client

    @property
    def clamp(self) -> Optional[ClampConfig]:
        return self._clamp

    @property
    def soft_caps(self) -> LevelSoftCaps:
        """Level table used for clamping (default table when clamp is off)."""
        return self._clamp.soft_caps if self._clamp is not None else LevelSoftCaps()

    async def preview(
        self,
        action: OrderAction,
        current_qty: float,
        *,
        xp_total: Optional[float] = None,
        reference_price: Optional[float] = None,
    ) -> PreviewResult:
        """Run the gate for one order. Raises SafeModeError on any refusal."""
        # Step 1: clamp before anything is offered for evaluation
        dispatched = self._apply_clamp(action, xp_total, reference_price)

        # Steps 2-3: both requests in flight before either is awaited
        proof_leg, policy_leg = await self._dispatch_and_join(dispatched)

        # Step 4
        checks = CheckOutcome.derive(proof_leg, policy_leg)

        # Step 5
        decision = self._decide(checks, dispatched, current_qty)

        # Step 6: veto applies even if the policy allowed a degraded signal
        if checks.degraded or decision != GateDecision.ALLOW:
            logger.warning(
                f"SAFE_MODE for {dispatched.side} {dispatched.qty} {dispatched.symbol}: "
                f"decision={getattr(decision, 'value', decision)} ace_ok={checks.ace_ok} "
                f"var_ok={checks.var_ok} degraded={checks.degraded} "
                f"proof_reason={proof_leg.reason} policy_reason={policy_leg.reason}"
            )
            raise SafeModeError(self.name)

        # Step 7
        result = PreviewResult(
            order_preview_id=str(uuid4()),
            action=dispatched,
            proof=proof_leg.value,
            policy=policy_leg.value,
            trace_id=str(uuid4()),
        )
        logger.info(
            f"Preview {result.order_preview_id} issued for {dispatched.side} "
            f"{dispatched.qty} {dispatched.symbol} (trace {result.trace_id})"
        )
        return result

    async def health_check(self) -> bool:
        """Healthy when both dependencies are configured."""
        proof_ok, policy_ok = await asyncio.gather(
            self._proof_client.health_check(),
            self._policy_client.health_check(),
        )
        return proof_ok and policy_ok

    # =========================================================================
    # STEPS
    # =========================================================================

    def _apply_clamp(
        self,
        action: OrderAction,
        xp_total: Optional[float],
        reference_price: Optional[float],
    ) -> OrderAction:
        """Bound the order's notional by the caller's tier soft cap."""
        if self._clamp is None or xp_total is None or reference_price is None:
            return action

        caps = self._clamp.soft_caps.caps_for(xp_total)
        notional = action.signed_qty * reference_price
        clamped = soft_clamp(notional, self._clamp.hard_cap, caps.per_trade)

        if clamped == notional:
            return action
        if clamped == 0:
            logger.warning(f"SAFE_MODE for {action.symbol}: notional clamped to zero")
            raise SafeModeError(self.name)

        qty = abs(clamped) / reference_price
        logger.info(
            f"Clamped {action.symbol} notional {notional:,.2f} -> {clamped:,.2f} "
            f"(qty {action.qty} -> {qty})"
        )
        return action.model_copy(update={"qty": qty})

    async def _dispatch_and_join(
        self, action: OrderAction
    ) -> tuple[LegResult[RiskProof], LegResult[PolicyVerdict]]:
        """
        Join, never race: wait for both legs to settle.

        Clients do not raise by contract; a client that does anyway
        counts as a degraded leg rather than aborting the other one.
        """
        proof_raw, policy_raw = await asyncio.gather(
            self._proof_client.prove(action),
            self._policy_client.evaluate(action),
            return_exceptions=True,
        )
        return (
            self._settle(self._proof_client.name, proof_raw),
            self._settle(self._policy_client.name, policy_raw),
        )

    @staticmethod
    def _settle(leg_name: str, raw: Any) -> LegResult:
        if isinstance(raw, LegResult):
            return raw
        if isinstance(raw, BaseException):
            logger.error(f"[{leg_name}] client raised past its boundary: {raw!r}")
            return LegResult.failure(f"client raised {type(raw).__name__}")
        logger.error(f"[{leg_name}] client returned unexpected {type(raw).__name__}")
        return LegResult.failure("unexpected client result")

    def _decide(
        self, checks: CheckOutcome, action: OrderAction, current_qty: float
    ) -> GateDecision:
        try:
            return self._decision_policy(checks, action, current_qty)
        except Exception as e:
            logger.error(f"Decision policy raised, treating as REJECT: {e!r}")
            return GateDecision.REJECT


def build_order_preview_service(
    settings: Settings,
    session: Optional[aiohttp.ClientSession] = None,
    decision_policy: DecisionPolicy = strict_policy,
) -> OrderPreviewOrchestrator:
    """Wire the gate from settings. Called once at startup."""
    proof_client = RiskProofServiceClient(
        ServiceClientConfig(
            base_url=settings.risk_proof_base_url or "",
            timeout_ms=settings.risk_proof_timeout_ms,
            path=settings.risk_proof_path,
        ),
        session=session,
    )
    policy_client = PolicyServiceClient(
        ServiceClientConfig(
            base_url=settings.policy_base_url or "",
            timeout_ms=settings.policy_timeout_ms,
            path=settings.policy_path,
        ),
        session=session,
    )
    clamp = ClampConfig(hard_cap=settings.hard_cap_notional) if settings.soft_clamp_enabled else None

    return OrderPreviewOrchestrator(
        proof_client=proof_client,
        policy_client=policy_client,
        decision_policy=decision_policy,
        clamp=clamp,
    )
