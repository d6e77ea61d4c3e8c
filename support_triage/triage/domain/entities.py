"""
Triage Domain Entities
======================

Domain entities for the support message triage module.

Contains pure Python business objects for message categorization
and the prompt the model is asked to answer.
"""

from dataclasses import dataclass, asdict
from typing import Dict, List

from support_triage.config import SupportCategory, UrgencyLevel


DEFAULT_CATEGORY = SupportCategory.GENERAL.value
DEFAULT_URGENCY = UrgencyLevel.MEDIUM.value
DEFAULT_SUGGESTED_RESPONSE = (
    "Thank you for contacting us. We have received your message "
    "and will get back to you shortly."
)


@dataclass(frozen=True)
class CategorizationResult:
    """
    Result of categorizing one support message.

    Produced by both the model path and the rule-based path. Built once
    per call and never mutated afterwards.
    """
    category: str
    urgency: str
    suggested_response: str
    reasoning: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


class CategorizationPromptBuilder:
    """
    Builds the prompt for message categorization.

    The labels in the output format are parsed back by
    CompletionParser and must stay in sync with it.
    """

    PROMPT_TEMPLATE = """Analyze this customer support message and provide:
1. Category (Billing Issue, Technical Problem, Feature Request, or General Inquiry)
2. Urgency (High, Medium, or Low)
3. Suggested Response (Draft a reply to the customer)
4. Reasoning (Brief explanation)

Tone Instructions for Suggested Response:
- Warm, empathetic, and strictly non-generic.
- Must convey that we are committed to resolving the issue with them.
- Start with a personalized opening.
- Avoid dismissive phrases like "we will look into it".
- Use assuring language like "I will personally track this until it is resolved".

Format your response exactly like this:
Category: [Category]
Urgency: [Urgency]
Suggested Response: [Suggested Response]
Reasoning: [Reasoning]

Message: {message}"""

    @classmethod
    def build_prompt(cls, message: str) -> str:
        """Build categorization prompt for a support message."""
        return cls.PROMPT_TEMPLATE.format(message=message)

    @classmethod
    def build_messages(cls, message: str) -> List[dict]:
        """Wrap the prompt as a single user turn for the chat API."""
        return [{"role": "user", "content": cls.build_prompt(message)}]
