"""
Verdicts API Endpoints

Lookup of previously issued policy verdicts.
"""

from fastapi import APIRouter, Depends, HTTPException

from proofgate.api.v1.deps import get_order_preview_service
from proofgate.schemas.order import PolicyVerdict
from proofgate.services.orders import OrderPreviewOrchestrator

router = APIRouter()


@router.get("/{verdict_id}", response_model=PolicyVerdict)
async def get_verdict(
    verdict_id: str,
    service: OrderPreviewOrchestrator = Depends(get_order_preview_service),
):
    """
    Get a policy verdict by id from the policy service.

    Unknown ids and an unavailable service both return 404.
    """
    result = await service.policy_client.fetch_verdict(verdict_id)
    if result.degraded:
        raise HTTPException(status_code=404, detail="Verdict not available")
    return result.value
