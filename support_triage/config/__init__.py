"""
Configuration Module
====================

Application settings and configuration management using Pydantic.
"""

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


GROQ_BASE_URL = "https://api.groq.com/openai/v1"
OPENAI_BASE_URL = "https://api.openai.com/v1"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses Pydantic for validation and type safety.
    """

    # ========== Application ==========
    app_name: str = Field(default="support-triage", description="Application name")
    environment: str = Field(default="development", description="Environment name")
    log_level: str = Field(default="INFO", description="Root log level")

    # ========== LLM Gateway ==========
    llm_provider: str = Field(
        default="groq",
        description="Completion provider: groq, openai or mock"
    )
    groq_api_key: Optional[str] = Field(default=None, description="Groq API key")
    openai_api_key: Optional[str] = Field(default=None, description="OpenAI API key")
    llm_base_url: Optional[str] = Field(
        default=None,
        description="Override the provider endpoint (any OpenAI-compatible API)"
    )
    llm_model: str = Field(
        default="llama-3.3-70b-versatile",
        description="Model used for categorization"
    )
    llm_temperature: float = Field(
        default=0.3,
        description="Sampling temperature, kept low for stable formatting",
        ge=0.0,
        le=2.0
    )
    llm_max_tokens: int = Field(
        default=1000,
        description="Max tokens for the completion",
        ge=1,
        le=8000
    )
    llm_timeout_seconds: float = Field(
        default=30.0,
        description="Timeout for a single completion call",
        gt=0
    )

    # ========== Categorization ==========
    category_passthrough: bool = Field(
        default=False,
        description="Return unrecognized model categories verbatim instead of General Inquiry"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Ensure environment is one of allowed values."""
        allowed = {"development", "staging", "production"}
        if v not in allowed:
            raise ValueError(f"environment must be one of {allowed}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"log_level must be one of {allowed}")
        return v.upper()

    @field_validator("llm_provider")
    @classmethod
    def validate_provider(cls, v: str) -> str:
        """Ensure provider is one we can build a client for."""
        v = v.lower()
        if v not in LLM_PROVIDERS:
            raise ValueError(f"llm_provider must be one of {LLM_PROVIDERS}")
        return v


@lru_cache()
def get_settings() -> Settings:
    """Returns cached Settings instance."""
    return Settings()


@dataclass(frozen=True)
class GatewayConfig:
    """
    Connection and sampling parameters for one completion gateway.

    Built by the caller and handed to the client and pipeline at
    construction time, so no client is created at import.
    """
    provider: str
    model: str
    api_key: Optional[str] = None
    base_url: Optional[str] = None
    temperature: float = 0.3
    max_tokens: int = 1000
    timeout_seconds: float = 30.0

    @classmethod
    def from_settings(cls, settings: Settings) -> "GatewayConfig":
        """Resolve credentials and endpoint for the configured provider."""
        if settings.llm_provider == "groq":
            api_key = settings.groq_api_key
            base_url = settings.llm_base_url or GROQ_BASE_URL
        elif settings.llm_provider == "openai":
            api_key = settings.openai_api_key
            base_url = settings.llm_base_url or OPENAI_BASE_URL
        else:
            api_key = None
            base_url = settings.llm_base_url

        return cls(
            provider=settings.llm_provider,
            model=settings.llm_model,
            api_key=api_key,
            base_url=base_url,
            temperature=settings.llm_temperature,
            max_tokens=settings.llm_max_tokens,
            timeout_seconds=settings.llm_timeout_seconds
        )


# ========== Constants ==========

class SupportCategory(str, Enum):
    """Categories a support message can be triaged into."""
    BILLING = "Billing Issue"
    TECHNICAL = "Technical Problem"
    FEATURE = "Feature Request"
    GENERAL = "General Inquiry"


class UrgencyLevel(str, Enum):
    """Message urgency levels."""
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


# ========== Lists for validation ==========

LLM_PROVIDERS = ["groq", "openai", "mock"]
SUPPORT_CATEGORIES: List[str] = [c.value for c in SupportCategory]
URGENCY_LEVELS: List[str] = [u.value for u in UrgencyLevel]
