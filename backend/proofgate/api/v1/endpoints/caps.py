"""
Soft Caps API Endpoints

Tier soft caps for an experience total.
"""

from fastapi import APIRouter, Depends, Query

from proofgate.api.v1.deps import get_order_preview_service
from proofgate.schemas.caps import CapsResponse
from proofgate.services.orders import OrderPreviewOrchestrator

router = APIRouter()


@router.get("", response_model=CapsResponse)
async def get_caps(
    xp_total: float = Query(0, ge=0, description="Accumulated experience"),
    service: OrderPreviewOrchestrator = Depends(get_order_preview_service),
):
    """
    Resolve level and soft caps for `xp_total`.

    Soft caps are a pre-filter; the policy service enforces the hard limit.
    """
    levels = service.soft_caps
    level = levels.level_for(xp_total)
    return CapsResponse(
        xp_total=xp_total,
        level=level,
        soft_caps=levels.caps_for(xp_total),
        xp_for_next_level=levels.xp_for_next_level(level),
        level_progress=levels.level_progress(xp_total),
    )
