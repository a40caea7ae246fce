"""
Proofs API Endpoints

Lookup of previously issued risk proofs.
"""

from fastapi import APIRouter, Depends, HTTPException

from proofgate.api.v1.deps import get_order_preview_service
from proofgate.schemas.order import RiskProof
from proofgate.services.orders import OrderPreviewOrchestrator

router = APIRouter()


@router.get("/{proof_id}", response_model=RiskProof)
async def get_proof(
    proof_id: str,
    service: OrderPreviewOrchestrator = Depends(get_order_preview_service),
):
    """
    Get a risk proof by id from the risk-proof service.

    Unknown ids and an unavailable service both return 404.
    """
    result = await service.proof_client.fetch_proof(proof_id)
    if result.degraded:
        raise HTTPException(status_code=404, detail="Proof not available")
    return result.value
