"""
Triage Domain Layer
===================

Domain layer for support message triage.

Contains:
- Entities: CategorizationResult, CategorizationPromptBuilder
- Value Objects: ParsedCompletion, CompletionParser and the normalizers
- Rules: RuleBasedClassifier and its template tables

This layer is framework-agnostic and contains pure business logic.
"""

from support_triage.triage.domain.entities import (
    CategorizationResult,
    CategorizationPromptBuilder,
    DEFAULT_CATEGORY,
    DEFAULT_URGENCY,
    DEFAULT_SUGGESTED_RESPONSE,
)
from support_triage.triage.domain.value_objects import (
    ParsedCompletion,
    CompletionParser,
    normalize_category,
    normalize_urgency,
    is_known_category,
)
from support_triage.triage.domain.rules import (
    Bucket,
    RuleBasedClassifier,
    TemplateChooser,
    bucket_for,
    first_template,
)

__all__ = [
    "CategorizationResult",
    "CategorizationPromptBuilder",
    "DEFAULT_CATEGORY",
    "DEFAULT_URGENCY",
    "DEFAULT_SUGGESTED_RESPONSE",
    "ParsedCompletion",
    "CompletionParser",
    "normalize_category",
    "normalize_urgency",
    "is_known_category",
    "Bucket",
    "RuleBasedClassifier",
    "TemplateChooser",
    "bucket_for",
    "first_template",
]
