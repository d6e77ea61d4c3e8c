"""
Support Triage - Entry Points
==============================

Wiring for the categorization pipeline.

Layers:
- Application: CategorizationService and DTOs
- Domain: prompt, parser, normalizers and rule-based classifier
- Infrastructure: LLM provider clients

The caller owns the service and closes it when done; nothing is
created at import time.
"""

from typing import Optional

from pydantic import ValidationError

from support_triage.config import GatewayConfig, Settings, get_settings
from support_triage.core import ValidationException
from support_triage.infrastructure.llm import ILLMClient as InfrastructureLLMClient
from support_triage.shared.infrastructure.logging import get_logger, log_latency, setup_logging
from support_triage.triage.application import CategorizationService, CategorizeRequest
from support_triage.triage.domain import CategorizationResult, RuleBasedClassifier, TemplateChooser
from support_triage.triage.infrastructure import LLMClientAdapter

logger = get_logger(__name__)


def configure_logging(settings: Settings) -> None:
    """Install JSON logging at the configured level and environment."""
    setup_logging(level=settings.log_level, environment=settings.environment)


def create_categorization_service(
    settings: Optional[Settings] = None,
    llm_client: Optional[InfrastructureLLMClient] = None,
    chooser: Optional[TemplateChooser] = None
) -> CategorizationService:
    """
    Build a categorization service from settings.

    Configures logging from the same settings before wiring the client.

    Args:
        settings: Application settings (cached environment settings by default)
        llm_client: Provider client to use instead of the configured one
        chooser: Template chooser for the rule-based fallback

    Returns:
        CategorizationService ready to use

    Raises:
        ConfigurationException: If the configured provider lacks credentials
    """
    settings = settings or get_settings()
    configure_logging(settings)

    config = GatewayConfig.from_settings(settings)
    classifier = RuleBasedClassifier(chooser) if chooser else RuleBasedClassifier()

    service = CategorizationService(
        llm_client=LLMClientAdapter(config, client=llm_client),
        config=config,
        classifier=classifier,
        category_passthrough=settings.category_passthrough
    )
    logger.info(
        "Categorization service created",
        extra={
            "app_name": settings.app_name,
            "provider": config.provider,
            "model": config.model
        }
    )
    return service


async def categorize_message(
    message: str,
    settings: Optional[Settings] = None
) -> CategorizationResult:
    """
    Categorize one message with a short-lived service.

    Raises:
        ValidationException: If the message is blank or too long
    """
    try:
        request = CategorizeRequest(message=message)
    except ValidationError as e:
        raise ValidationException(
            "Invalid support message",
            {"errors": [error["msg"] for error in e.errors()]}
        ) from e

    async with create_categorization_service(settings) as service:
        with log_latency(logger, "categorize_message"):
            return await service.categorize(request.message)
