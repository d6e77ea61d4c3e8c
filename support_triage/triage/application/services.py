"""
Triage Application Services
============================

Application service for support message categorization.

Orchestrates the model path and the rule-based fallback.
"""

import asyncio
import time
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Sequence

from support_triage.config import GatewayConfig
from support_triage.core import LLMException
from support_triage.shared.infrastructure.logging import get_logger
from support_triage.triage.domain import (
    CategorizationResult,
    CategorizationPromptBuilder,
    CompletionParser,
    RuleBasedClassifier,
    DEFAULT_CATEGORY,
    normalize_category,
    normalize_urgency,
    is_known_category,
)

logger = get_logger(__name__)


# ========== Gateway Interface ==========

class ILLMClient(ABC):
    """Interface for LLM operations."""

    @abstractmethod
    async def chat_completion(
        self,
        messages: List[dict],
        temperature: float,
        max_tokens: int,
        operation: str = "chat_completion"
    ) -> Any:
        """Generate chat completion. The result exposes a ``content`` string."""

    async def aclose(self) -> None:
        """Release resources held by the client."""


# ========== Application Services ==========

class CategorizationService:
    """
    Categorizes support messages with an LLM, falling back to rules.

    categorize() never raises: any failure on the model path is logged
    and replaced by the rule-based result for the same message. The
    service holds no per-call state, so concurrent calls need no locking.
    """

    def __init__(
        self,
        llm_client: ILLMClient,
        config: GatewayConfig,
        classifier: Optional[RuleBasedClassifier] = None,
        category_passthrough: bool = False
    ):
        self._llm = llm_client
        self._config = config
        self._classifier = classifier or RuleBasedClassifier()
        self._category_passthrough = category_passthrough

    async def __aenter__(self) -> "CategorizationService":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying gateway client."""
        await self._llm.aclose()

    async def categorize(self, message: str) -> CategorizationResult:
        """
        Categorize a support message.

        Args:
            message: Customer message text

        Returns:
            CategorizationResult with category, urgency, suggested response and reasoning
        """
        start_time = time.perf_counter()
        path = "llm"

        try:
            result = await self._categorize_with_llm(message)
        except Exception as e:
            logger.warning(
                "LLM categorization failed, using rule-based fallback",
                extra={
                    "reason": str(e),
                    "error_type": type(e).__name__,
                    "provider": self._config.provider
                }
            )
            path = "rules"
            result = self._classifier.classify(message)

        logger.info(
            "Message categorized",
            extra={
                "path": path,
                "category": result.category,
                "urgency": result.urgency,
                "message_len": len(message),
                "latency_ms": int((time.perf_counter() - start_time) * 1000)
            }
        )
        return result

    async def categorize_batch(self, messages: Sequence[str]) -> List[CategorizationResult]:
        """Categorize several messages concurrently, preserving input order."""
        return list(await asyncio.gather(*(self.categorize(m) for m in messages)))

    def interpret_completion(self, content: str) -> CategorizationResult:
        """
        Turn raw model output into a CategorizationResult.

        Missing fields fall back to defaults; the reasoning falls back to
        the whole completion so nothing the model said is lost.
        """
        parsed = CompletionParser.parse(content)
        if parsed.missing_fields:
            logger.debug(
                "Completion missing fields",
                extra={"missing_fields": parsed.missing_fields}
            )

        category = normalize_category(parsed.category_or_default())
        if not is_known_category(category) and not self._category_passthrough:
            logger.warning(
                "Unrecognized category from model",
                extra={"raw_category": category, "replaced_with": DEFAULT_CATEGORY}
            )
            category = DEFAULT_CATEGORY

        return CategorizationResult(
            category=category,
            urgency=normalize_urgency(parsed.urgency_or_default()),
            suggested_response=parsed.suggested_response_or_default(),
            reasoning=parsed.reasoning if parsed.reasoning is not None else content
        )

    async def _categorize_with_llm(self, message: str) -> CategorizationResult:
        response = await self._llm.chat_completion(
            messages=CategorizationPromptBuilder.build_messages(message),
            temperature=self._config.temperature,
            max_tokens=self._config.max_tokens,
            operation="categorization"
        )

        content = response.content
        if not content or not content.strip():
            raise LLMException("Empty completion", {"model": self._config.model})

        return self.interpret_completion(content)
