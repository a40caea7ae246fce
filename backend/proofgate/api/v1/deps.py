"""
Request-scoped dependencies.

Services are built once in the application lifespan and kept on app.state.
"""

from fastapi import Request

from proofgate.services.orders import OrderPreviewOrchestrator


def get_order_preview_service(request: Request) -> OrderPreviewOrchestrator:
    """Order gate wired at startup."""
    return request.app.state.order_preview_service
