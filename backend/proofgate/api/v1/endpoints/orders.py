"""
Orders API Endpoints

Dual-proof order preview.
"""

from fastapi import APIRouter, Depends, HTTPException

from proofgate.api.v1.deps import get_order_preview_service
from proofgate.schemas.order import PreviewRequest, PreviewResult
from proofgate.services.base import SafeModeError
from proofgate.services.orders import OrderPreviewOrchestrator

router = APIRouter()


@router.post("/preview", response_model=PreviewResult)
async def preview_order(
    request: PreviewRequest,
    service: OrderPreviewOrchestrator = Depends(get_order_preview_service),
):
    """
    Preview an order through the dual-proof gate.

    Runs the risk-proof and policy checks concurrently and returns both
    payloads with a fresh preview id and trace id.

    Any refusal (dependency down, timeout, policy or risk rejection)
    returns 409 `SAFE_MODE` with no further detail.
    """
    try:
        return await service.execute(request)
    except SafeModeError as e:
        raise HTTPException(status_code=e.status_code, detail=e.kind)
