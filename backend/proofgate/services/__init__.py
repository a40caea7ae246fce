"""
ProofGate Services

Service layer containing all business logic.
Each service has a defined interface (contract) and implementation.
"""

from proofgate.services.base import BaseService, SafeModeError, ServiceError

__all__ = ["BaseService", "SafeModeError", "ServiceError"]
