"""
Triage Value Objects
=====================

Immutable value objects and pure functions for reading model output.

The parser extracts the four labeled fields requested by
CategorizationPromptBuilder; the normalizers map loosely-worded
values onto the fixed category and urgency sets.
"""

import re
from dataclasses import dataclass
from typing import List, Optional

from support_triage.config import SupportCategory, UrgencyLevel, SUPPORT_CATEGORIES
from support_triage.triage.domain.entities import (
    DEFAULT_CATEGORY, DEFAULT_URGENCY, DEFAULT_SUGGESTED_RESPONSE
)


# Leading whitespace and markdown emphasis/heading markers are tolerated
# before a label, so "**Category:** Billing" still matches.
_LABEL_PREFIX = r"^[ \t*#]*"
_AFTER_LABEL = r"[ \t*]*"

_CATEGORY_RE = re.compile(
    _LABEL_PREFIX + r"Category:" + _AFTER_LABEL + r"(.+?)[ \t*]*$",
    re.IGNORECASE | re.MULTILINE
)
_URGENCY_RE = re.compile(
    _LABEL_PREFIX + r"Urgency:" + _AFTER_LABEL + r"(.+?)[ \t*]*$",
    re.IGNORECASE | re.MULTILINE
)
_SUGGESTED_RESPONSE_RE = re.compile(
    _LABEL_PREFIX + r"Suggested Response:" + _AFTER_LABEL
    + r"(.+?)(?=\n[ \t*#]*Reasoning:|\Z)",
    re.IGNORECASE | re.MULTILINE | re.DOTALL
)
_REASONING_RE = re.compile(
    _LABEL_PREFIX + r"Reasoning:" + _AFTER_LABEL + r"(.+)",
    re.IGNORECASE | re.MULTILINE | re.DOTALL
)

# Ordered: the first matching keyword group wins.
_CATEGORY_KEYWORDS = (
    (("billing",), SupportCategory.BILLING),
    (("technical", "bug"), SupportCategory.TECHNICAL),
    (("feature",), SupportCategory.FEATURE),
    (("inquiry", "question"), SupportCategory.GENERAL),
)


@dataclass(frozen=True)
class ParsedCompletion:
    """
    Fields extracted from one model completion.

    A field is None when its label was missing or had no text after it.
    """
    category: Optional[str]
    urgency: Optional[str]
    suggested_response: Optional[str]
    reasoning: Optional[str]

    @property
    def missing_fields(self) -> List[str]:
        return [name for name, value in vars(self).items() if value is None]

    def category_or_default(self) -> str:
        return self.category if self.category is not None else DEFAULT_CATEGORY

    def urgency_or_default(self) -> str:
        return self.urgency if self.urgency is not None else DEFAULT_URGENCY

    def suggested_response_or_default(self) -> str:
        if self.suggested_response is not None:
            return self.suggested_response
        return DEFAULT_SUGGESTED_RESPONSE


class CompletionParser:
    """
    Line-anchored extraction of the labeled fields.

    Stateless utility class: every method is a pure function of the text.
    """

    @staticmethod
    def parse(content: str) -> ParsedCompletion:
        """
        Parse a completion in the Category/Urgency/Suggested Response/Reasoning format.

        Args:
            content: Raw model output

        Returns:
            ParsedCompletion with None for every field not found
        """
        return ParsedCompletion(
            category=_extract(_CATEGORY_RE, content),
            urgency=_extract(_URGENCY_RE, content),
            suggested_response=_extract(_SUGGESTED_RESPONSE_RE, content),
            reasoning=_extract(_REASONING_RE, content),
        )


def _extract(pattern: re.Pattern, content: str) -> Optional[str]:
    match = pattern.search(content)
    if not match:
        return None
    value = match.group(1).strip()
    return value or None


def normalize_category(value: str) -> str:
    """
    Map a loosely-worded category onto the taxonomy.

    Unrecognized values are returned unchanged; callers decide whether
    to accept them (see is_known_category).
    """
    lowered = value.lower()
    for keywords, category in _CATEGORY_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return category.value
    return value


def normalize_urgency(value: str) -> str:
    """Map any urgency text onto High, Low or (by default) Medium."""
    lowered = value.lower()
    if "high" in lowered:
        return UrgencyLevel.HIGH.value
    if "low" in lowered:
        return UrgencyLevel.LOW.value
    return UrgencyLevel.MEDIUM.value


def is_known_category(value: str) -> bool:
    return value in SUPPORT_CATEGORIES
