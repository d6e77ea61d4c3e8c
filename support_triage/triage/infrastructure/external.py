"""
Triage External Service Adapters
==================================

Adapters for external services used by the triage module.

Implements the interfaces defined in the application layer using concrete
external service implementations.
"""

from typing import List, Optional

from support_triage.config import GatewayConfig
from support_triage.infrastructure.llm import (
    ChatCompletionResult,
    ILLMClient as InfrastructureLLMClient,
    create_llm_client,
)
from support_triage.triage.application import ILLMClient


class LLMClientAdapter(ILLMClient):
    """
    Adapter that wraps the infrastructure LLM client.

    Implements the application layer ILLMClient interface using
    the provider client selected by the gateway configuration.
    """

    def __init__(
        self,
        config: GatewayConfig,
        client: Optional[InfrastructureLLMClient] = None
    ):
        self._client = client or create_llm_client(config)

    async def chat_completion(
        self,
        messages: List[dict],
        temperature: float = 0.3,
        max_tokens: int = 1000,
        operation: str = "chat_completion"
    ) -> ChatCompletionResult:
        """Generate chat completion."""
        return await self._client.chat_completion(messages, temperature, max_tokens, operation)

    async def aclose(self) -> None:
        await self._client.aclose()
