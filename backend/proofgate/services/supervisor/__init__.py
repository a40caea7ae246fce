"""
Supervisor Decision Policy

CONTRACT:
    Input:  CheckOutcome + OrderAction + current position quantity
    Output: GateDecision (ALLOW / REJECT)

PURE FUNCTIONS - no I/O, no state outside the three arguments.
"""

from proofgate.services.supervisor.policy import (
    DecisionPolicy,
    is_reduction,
    reduction_only_policy,
    strict_policy,
)

__all__ = [
    "DecisionPolicy",
    "is_reduction",
    "reduction_only_policy",
    "strict_policy",
]
