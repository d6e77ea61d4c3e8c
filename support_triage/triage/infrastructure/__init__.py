"""
Triage Infrastructure Layer
============================

Infrastructure implementations for support message triage.

Contains:
- External: Adapter from the application gateway interface to provider clients
"""

from support_triage.triage.infrastructure.external import LLMClientAdapter

__all__ = [
    "LLMClientAdapter",
]
