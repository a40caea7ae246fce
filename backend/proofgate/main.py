"""
ProofGate Backend - FastAPI Application

Main entry point for the backend API.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import aiohttp
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from proofgate.core.config import Settings, get_settings
from proofgate.core.logging import setup_logging
from proofgate.api.v1 import router as api_v1_router
from proofgate.services.orders import build_order_preview_service

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application for the given settings."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        # Startup
        setup_logging(settings.log_level)
        logger.info(f"Starting {settings.app_name} v{settings.app_version}")
        logger.info(f"Environment: {settings.environment}")

        # One pooled session shared by both dependency clients
        session = aiohttp.ClientSession()
        app.state.order_preview_service = build_order_preview_service(settings, session)
        logger.info(
            f"Risk-proof service: {settings.risk_proof_base_url or 'NOT CONFIGURED'} "
            f"(timeout {settings.risk_proof_timeout_ms}ms)"
        )
        logger.info(
            f"Policy service: {settings.policy_base_url or 'NOT CONFIGURED'} "
            f"(timeout {settings.policy_timeout_ms}ms)"
        )
        logger.info(f"Soft-cap clamp: {'enabled' if settings.soft_clamp_enabled else 'disabled'}")

        yield

        # Shutdown
        logger.info("Shutting down...")
        await session.close()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="""
    ProofGate Dual-Proof Order Gate API

    ## Architecture
    - **Risk-Proof Client**: zk-VaR proof per order (fail-closed)
    - **Policy Client**: compliance verdict per order (fail-closed)
    - **Soft Caps**: tier-derived notional pre-filter
    - **Order Gate**: concurrent join, decision policy, SAFE_MODE veto

    ## Core Principles
    - Both proofs or nothing
    - Any dependency failure refuses the order
    - One refusal kind: `SAFE_MODE` (409)
    """,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # CORS middleware - allow both frontend ports
    cors_origins = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]
    # Add any additional origins from settings
    if settings.allowed_origins:
        cors_origins.extend([o for o in settings.allowed_origins if o not in cors_origins])

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include API routes
    app.include_router(api_v1_router, prefix="/api/v1")

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        service = getattr(app.state, "order_preview_service", None)
        dependencies_ready = await service.health_check() if service else False
        return {
            "status": "healthy" if dependencies_ready else "degraded",
            "app": settings.app_name,
            "version": settings.app_version,
            "environment": settings.environment,
            "risk_proof_configured": bool(settings.risk_proof_base_url),
            "policy_configured": bool(settings.policy_base_url),
        }

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "message": "ProofGate Backend API",
            "docs": "/docs",
            "health": "/health",
        }

    return app


app = create_app()
