"""
LLM Client Infrastructure
==========================

Wrapper for LLM providers (Groq, OpenAI) providing clean interface for LLM operations.

This module abstracts the LLM client implementation following the
Dependency Inversion Principle - the domain layer depends on abstractions,
not concrete implementations.
"""

import asyncio
import time
from abc import ABC, abstractmethod
from typing import List, Optional

import httpx
from openai import AsyncOpenAI

from support_triage.config import GatewayConfig, GROQ_BASE_URL, OPENAI_BASE_URL
from support_triage.core import LLMException, ConfigurationException
from support_triage.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


class ChatCompletionResult:
    """Result of a chat completion."""

    def __init__(
        self,
        content: str,
        model: str,
        prompt_tokens: int,
        completion_tokens: int,
        latency_ms: int
    ):
        self.content = content
        self.model = model
        self.prompt_tokens = prompt_tokens
        self.completion_tokens = completion_tokens
        self.total_tokens = prompt_tokens + completion_tokens
        self.latency_ms = latency_ms


class ILLMClient(ABC):
    """
    Interface for LLM client operations.

    Following Interface Segregation Principle - only methods
    actually needed by the application are defined.
    """

    @abstractmethod
    async def chat_completion(
        self,
        messages: List[dict],
        temperature: float = 0.3,
        max_tokens: int = 1000,
        operation: str = "chat_completion"
    ) -> ChatCompletionResult:
        """Generate chat completion."""

    async def aclose(self) -> None:
        """Release network resources held by the client."""


class OpenAICompatibleLLMClient(ILLMClient):
    """
    Client for any endpoint speaking the OpenAI chat completions API.

    Provides async wrapper around OpenAI SDK operations.
    """

    provider_name = "openai-compatible"
    default_base_url: Optional[str] = None

    def __init__(self, config: GatewayConfig):
        if not config.api_key:
            raise ConfigurationException(
                f"{self.provider_name} API key not configured",
                {"provider": config.provider}
            )

        self._config = config
        self._model = config.model
        self._timeout = config.timeout_seconds
        self._client = AsyncOpenAI(
            api_key=config.api_key,
            base_url=config.base_url or self.default_base_url,
            timeout=httpx.Timeout(config.timeout_seconds, connect=5.0)
        )
        logger.info(
            "LLM client initialized",
            extra={"provider": self.provider_name, "model": self._model}
        )

    @property
    def model(self) -> str:
        return self._model

    async def chat_completion(
        self,
        messages: List[dict],
        temperature: float = 0.3,
        max_tokens: int = 1000,
        operation: str = "chat_completion"
    ) -> ChatCompletionResult:
        """
        Generate chat completion.

        Args:
            messages: List of message dicts with 'role' and 'content'
            temperature: Sampling temperature
            max_tokens: Maximum tokens to generate
            operation: Operation name for logging (categorization, ...)

        Returns:
            ChatCompletionResult with generated text

        Raises:
            LLMException: If completion fails or times out
        """
        start_time = time.perf_counter()

        try:
            response = await asyncio.wait_for(
                self._client.chat.completions.create(
                    model=self._model,
                    messages=messages,
                    temperature=temperature,
                    max_tokens=max_tokens
                ),
                timeout=self._timeout
            )
        except asyncio.TimeoutError as e:
            raise LLMException(
                f"Chat completion timed out after {self._timeout}s",
                {"provider": self.provider_name, "operation": operation}
            ) from e
        except Exception as e:
            raise LLMException(
                f"Chat completion failed: {str(e)}",
                {"provider": self.provider_name, "operation": operation}
            ) from e

        latency_ms = int((time.perf_counter() - start_time) * 1000)

        if not response.choices:
            raise LLMException(
                "Chat completion returned no choices",
                {"provider": self.provider_name, "operation": operation}
            )

        content = response.choices[0].message.content or ""
        usage = response.usage

        result = ChatCompletionResult(
            content=content,
            model=response.model or self._model,
            prompt_tokens=usage.prompt_tokens if usage else 0,
            completion_tokens=usage.completion_tokens if usage else 0,
            latency_ms=latency_ms
        )

        logger.debug(
            "Chat completion ok",
            extra={
                "provider": self.provider_name,
                "operation": operation,
                "prompt_tokens": result.prompt_tokens,
                "completion_tokens": result.completion_tokens,
                "latency_ms": latency_ms
            }
        )
        return result

    async def aclose(self) -> None:
        await self._client.close()


class GroqLLMClient(OpenAICompatibleLLMClient):
    """
    Groq client implementation for Llama models.

    Groq is OpenAI-compatible with ultra-fast inference.
    Base URL: https://api.groq.com/openai/v1
    """

    provider_name = "groq"
    default_base_url = GROQ_BASE_URL


class OpenAILLMClient(OpenAICompatibleLLMClient):
    """OpenAI client implementation for GPT models."""

    provider_name = "openai"
    default_base_url = OPENAI_BASE_URL


MOCK_COMPLETION = """Category: General Inquiry
Urgency: Medium
Suggested Response: Hi there, thank you for getting in touch. I have read your message carefully and I will personally make sure you get a complete answer.
Reasoning: Mock completion returned without calling an external API."""


class MockLLMClient(ILLMClient):
    """
    Mock LLM client for testing.

    Returns predictable responses without calling external APIs.
    """

    def __init__(self, content: str = MOCK_COMPLETION, model: str = "mock-model"):
        self._content = content
        self._model = model

    @property
    def model(self) -> str:
        return self._model

    async def chat_completion(
        self,
        messages: List[dict],
        temperature: float = 0.3,
        max_tokens: int = 1000,
        operation: str = "chat_completion"
    ) -> ChatCompletionResult:
        """Return the canned completion."""
        return ChatCompletionResult(
            content=self._content,
            model=self._model,
            prompt_tokens=sum(len(str(m.get("content", "")).split()) for m in messages),
            completion_tokens=len(self._content.split()),
            latency_ms=0
        )


def create_llm_client(config: GatewayConfig) -> ILLMClient:
    """
    Build the client for the configured provider.

    Raises:
        ConfigurationException: If the provider is unknown or lacks credentials
    """
    if config.provider == "groq":
        return GroqLLMClient(config)
    if config.provider == "openai":
        return OpenAILLMClient(config)
    if config.provider == "mock":
        return MockLLMClient(model=config.model)
    raise ConfigurationException(f"Unknown LLM provider: {config.provider}")
