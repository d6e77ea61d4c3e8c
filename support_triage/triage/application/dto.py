"""
Triage Application DTOs
========================

Data Transfer Objects for callers that serialize categorization input/output.

Pydantic models for request/response validation.
"""

from typing import Dict, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from support_triage.triage.domain import CategorizationResult


# ========== Type Aliases for Literals ==========
UrgencyLevelStr = Literal["High", "Medium", "Low"]

MAX_MESSAGE_LENGTH = 10000


# ========== Request DTOs ==========

class CategorizeRequest(BaseModel):
    """Request model for message categorization."""
    message: str = Field(..., min_length=1, description="Customer support message")

    @field_validator("message")
    @classmethod
    def validate_message(cls, v: str) -> str:
        """Reject blank messages and ones too long for the prompt."""
        if not v.strip():
            raise ValueError("Message must not be blank")
        if len(v) > MAX_MESSAGE_LENGTH:
            raise ValueError(f"Message too long (max {MAX_MESSAGE_LENGTH} characters)")
        return v


# ========== Response DTOs ==========

class CategorizationResponse(BaseModel):
    """Response model for message categorization, serialized with camelCase keys."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    category: str
    urgency: UrgencyLevelStr
    suggested_response: str = Field(..., alias="suggestedResponse", min_length=1)
    reasoning: str

    @classmethod
    def from_domain(cls, result: CategorizationResult) -> "CategorizationResponse":
        """Create from domain result."""
        return cls(
            category=result.category,
            urgency=result.urgency,
            suggested_response=result.suggested_response,
            reasoning=result.reasoning
        )

    def to_domain(self) -> CategorizationResult:
        """Convert to domain result."""
        return CategorizationResult(
            category=self.category,
            urgency=self.urgency,
            suggested_response=self.suggested_response,
            reasoning=self.reasoning
        )

    def to_payload(self) -> Dict[str, str]:
        """Plain dict with the camelCase keys UI callers expect."""
        return self.model_dump(by_alias=True)
