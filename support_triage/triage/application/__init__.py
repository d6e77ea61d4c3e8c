"""
Triage Application Layer
=========================

Application layer for support message triage.

Contains:
- Services: Categorization pipeline orchestration
- DTOs: Data transfer objects for serialization
"""

from support_triage.triage.application.dto import (
    CategorizeRequest,
    CategorizationResponse,
)
from support_triage.triage.application.services import (
    CategorizationService,
    ILLMClient,
)

__all__ = [
    # DTOs
    "CategorizeRequest",
    "CategorizationResponse",
    # Services
    "CategorizationService",
    # Gateway Interface
    "ILLMClient",
]
