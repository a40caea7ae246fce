"""
Application Configuration

All settings loaded from environment variables.
Read once at startup; services receive explicit config structs built from it.
"""

from functools import lru_cache
from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Application
    app_name: str = "ProofGate Backend"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS (Frontend URL)
    allowed_origins: list[str] = ["http://localhost:3000"]

    # Risk-proof service (zk-VaR)
    risk_proof_base_url: Optional[str] = None
    risk_proof_path: str = "/prove"
    risk_proof_timeout_ms: int = 8000  # Proof generation is the slower leg

    # Policy / compliance service (ACE)
    policy_base_url: Optional[str] = None
    policy_path: str = "/evaluate"
    policy_timeout_ms: int = 5000

    # Soft-cap clamp (pre-filter, policy service stays authoritative)
    soft_clamp_enabled: bool = False
    hard_cap_notional: float = Field(default=100_000.0, ge=0)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
