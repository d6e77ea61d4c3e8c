"""Shared pytest fixtures for the support triage test suite.

Provides:
  - FakeLLMClient: records calls and returns a configurable completion
  - FailingLLMClient: raises on every call
  - gateway_config: GatewayConfig for the mock provider
  - classifier: RuleBasedClassifier that always picks the first template

No test talks to a real provider.
"""

from __future__ import annotations

from typing import Any

import pytest

from support_triage.config import GatewayConfig
from support_triage.core import LLMException
from support_triage.infrastructure.llm import ChatCompletionResult
from support_triage.triage.application import CategorizationService, ILLMClient
from support_triage.triage.domain import RuleBasedClassifier, first_template


WELL_FORMED_COMPLETION = (
    "Category: Billing Issue\n"
    "Urgency: High\n"
    "Suggested Response: Hi Sam, I'm so sorry about the double charge.\n"
    "I will personally track this refund until it is resolved.\n"
    "Reasoning: The customer reports being charged twice.\n"
    "A duplicate charge needs quick action."
)


class FakeLLMClient(ILLMClient):
    """Gateway double returning a fixed completion."""

    def __init__(self, content: str = WELL_FORMED_COMPLETION) -> None:
        self._content = content
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    async def chat_completion(
        self,
        messages: list[dict],
        temperature: float = 0.3,
        max_tokens: int = 1000,
        operation: str = "chat_completion",
    ) -> ChatCompletionResult:
        self.calls.append(
            {
                "messages": messages,
                "temperature": temperature,
                "max_tokens": max_tokens,
                "operation": operation,
            }
        )
        return ChatCompletionResult(
            content=self._content,
            model="fake-model",
            prompt_tokens=50,
            completion_tokens=10,
            latency_ms=1,
        )

    async def aclose(self) -> None:
        self.closed = True


class FailingLLMClient(ILLMClient):
    """Gateway double that is always unavailable."""

    def __init__(self, error: Exception | None = None) -> None:
        self._error = error or LLMException("Chat completion failed: 429 rate limit")
        self.calls = 0

    async def chat_completion(
        self,
        messages: list[dict],
        temperature: float = 0.3,
        max_tokens: int = 1000,
        operation: str = "chat_completion",
    ) -> ChatCompletionResult:
        self.calls += 1
        raise self._error


@pytest.fixture
def gateway_config() -> GatewayConfig:
    """Mock-provider gateway configuration."""
    return GatewayConfig(provider="mock", model="test-model", temperature=0.3, max_tokens=500)


@pytest.fixture
def classifier() -> RuleBasedClassifier:
    """Deterministic rule-based classifier."""
    return RuleBasedClassifier(chooser=first_template)


@pytest.fixture
def make_service(gateway_config: GatewayConfig, classifier: RuleBasedClassifier):
    """Factory for a CategorizationService around a given gateway double."""

    def _make(llm_client: ILLMClient, category_passthrough: bool = False) -> CategorizationService:
        return CategorizationService(
            llm_client=llm_client,
            config=gateway_config,
            classifier=classifier,
            category_passthrough=category_passthrough,
        )

    return _make
