"""
API v1 Router

All API endpoints for the frontend.
"""

from fastapi import APIRouter

from proofgate.api.v1.endpoints import caps, orders, proofs, verdicts

router = APIRouter()

# Include all endpoint routers
router.include_router(orders.router, prefix="/orders", tags=["Orders"])
router.include_router(proofs.router, prefix="/proofs", tags=["Risk Proofs"])
router.include_router(verdicts.router, prefix="/verdicts", tags=["Policy Verdicts"])
router.include_router(caps.router, prefix="/caps", tags=["Soft Caps"])
