"""
Supervisor Decision Policies

A decision policy is a pure function:
    (CheckOutcome, OrderAction, current_qty) -> GateDecision

Policies are pluggable and treated as untrusted by the order preview
service: its fail-closed veto applies whatever a policy returns.
"""

from typing import Callable

from proofgate.schemas.order import CheckOutcome, GateDecision, OrderAction

DecisionPolicy = Callable[[CheckOutcome, OrderAction, float], GateDecision]


def is_reduction(current_qty: float, order: OrderAction) -> bool:
    """True when the order shrinks the absolute position size."""
    next_qty = current_qty + order.signed_qty
    return abs(next_qty) < abs(current_qty)


def strict_policy(checks: CheckOutcome, order: OrderAction, current_qty: float) -> GateDecision:
    """Allow only when both checks pass on a healthy signal."""
    if not checks.degraded and checks.ace_ok and checks.var_ok:
        return GateDecision.ALLOW
    return GateDecision.REJECT


def reduction_only_policy(
    checks: CheckOutcome, order: OrderAction, current_qty: float
) -> GateDecision:
    """
    Supervisor rule with a degraded-mode carve-out.

    Healthy signal: allow when both checks pass.
    Degraded signal: allow position reductions only.

    Not fail-closed on its own; the preview service vetoes degraded
    previews regardless.
    """
    if not checks.degraded:
        return GateDecision.ALLOW if checks.ace_ok and checks.var_ok else GateDecision.REJECT
    return GateDecision.ALLOW if is_reduction(current_qty, order) else GateDecision.REJECT
