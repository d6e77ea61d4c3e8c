"""
Rule-Based Classifier
=====================

Keyword cascade used when the completion gateway is unavailable.

Buckets are evaluated top to bottom and the first match wins, so a
message that mentions both a refund and an error is a billing issue.
Reply and reasoning text comes from fixed per-bucket template tables
through a pluggable chooser.
"""

import random
from typing import Callable, Dict, Sequence, Tuple

from support_triage.config import SupportCategory, UrgencyLevel
from support_triage.triage.domain.entities import CategorizationResult


TemplateChooser = Callable[[Sequence[str]], str]


class Bucket:
    """Names of the keyword buckets, in evaluation order."""
    BILLING = "billing"
    TECHNICAL = "technical"
    FEATURE = "feature"
    POSITIVE = "positive"
    INQUIRY = "inquiry"
    AMBIGUOUS = "ambiguous"


# ========== Template tables ==========

RESPONSE_TEMPLATES: Dict[str, Tuple[str, ...]] = {
    Bucket.BILLING: (
        "Hi there, thanks for reaching out. I understand how frustrating billing issues can be, "
        "and I want to help get this sorted out for you right away. I'm going to personally look "
        "into your account details to see exactly what happened here.",
        "Hello! I appreciate you bringing this charge to our attention. I know it's stressful to "
        "see unexpected items on your bill. I'm reviewing your transaction history now and will "
        "ensure we make this right for you.",
    ),
    Bucket.TECHNICAL: (
        "Hello, thanks for reporting this. I'm so sorry you're dealing with these technical "
        "difficulties—I know how disruptive that is to your day. I've already flagged this for "
        "our engineering team and will personally track its progress until it's fixed.",
        "Hi there. I completely understand your frustration with this error. We are 100% "
        "committed to reliability, so I'm making this my top priority. I will work with our tech "
        "team to get you back up and running as quickly as possible.",
    ),
    Bucket.FEATURE: (
        "Hi! Thank you so much for sharing this idea. We love hearing from users who care about "
        "making our product better. I've passed this directly to our product team, and I really "
        "appreciate you taking the time to help us improve.",
        "Hello! That is a fantastic suggestion. We are always looking for ways to enhance the "
        "user experience, and your feedback is incredibly valuable. I've added this to our "
        "feature request board for serious consideration.",
    ),
    Bucket.INQUIRY: (
        "Hi there! Thanks for asking about this. I'm happy to help clear things up for you. Here "
        "is the information you're looking for, and please let me know if there's anything else "
        "I can explain!",
        "Hello! I'd be delighted to assist you with your question. We want to make sure you have "
        "everything you need to succeed. Here are the details you requested.",
    ),
    Bucket.POSITIVE: (
        "Hi! reading this made my day. Thank you so much for your kind words! We work hard to "
        "provide the best service possible, and it means the world to us to know we're hitting "
        "the mark. I'll share this with the whole team!",
    ),
    Bucket.AMBIGUOUS: (
        "Hello, thanks for contacting us. I want to make sure I fully understand how to help you "
        "best. Could you please provide a little more detail? I'm here to assist you until this "
        "is resolved.",
    ),
}

REASONING_TEMPLATES: Dict[str, Tuple[str, ...]] = {
    Bucket.BILLING: (
        "Based on keywords related to payments and billing, this appears to be a billing-related "
        "inquiry. The customer may need assistance with account charges or payment issues.",
        "This message contains billing terminology. The customer is likely experiencing issues "
        "with payments, invoices, or account charges.",
        "The message references financial matters related to the customer's account. This "
        "suggests a billing or payment concern that requires attention.",
    ),
    Bucket.TECHNICAL: (
        "This message describes technical difficulties or system errors. The customer is "
        "reporting functionality issues that may require engineering review.",
        "Based on error-related keywords, this appears to be a technical support issue. The "
        "customer is experiencing problems with product functionality.",
        "The message indicates a technical problem or bug. This requires investigation from the "
        "technical support team.",
        "System-related issues are mentioned in this message. The customer needs technical "
        "assistance to resolve functionality problems.",
    ),
    Bucket.FEATURE: (
        "This message suggests improvements or new functionality. The customer is providing "
        "product feedback and feature suggestions.",
        "The customer is requesting enhancements to the product. This appears to be a feature "
        "request that should be reviewed by the product team.",
        "Based on the language used, this seems to be a suggestion for product improvements "
        "rather than a support issue.",
    ),
    Bucket.INQUIRY: (
        "This appears to be a general question about the product or service. The customer is "
        "seeking information or clarification.",
        "The message contains questions that don't indicate a specific problem. This is likely a "
        "general inquiry requiring informational support.",
        "Based on the question format, this seems to be an information request rather than a "
        "technical or billing issue.",
    ),
    Bucket.POSITIVE: (
        "This message contains positive sentiment and appreciation. While not a support request, "
        "it may warrant acknowledgment.",
        "The customer is expressing satisfaction or gratitude. This doesn't appear to require "
        "immediate support action.",
    ),
    Bucket.AMBIGUOUS: (
        "The message content is unclear or doesn't match standard support categories. Manual "
        "review may be needed for proper categorization.",
        "This message doesn't contain clear indicators for automatic categorization. Human "
        "review recommended.",
    ),
}


# ========== Keyword sets ==========

BILLING_KEYWORDS = (
    "bill", "payment", "charge", "invoice", "credit card", "subscription", "refund"
)
TECHNICAL_KEYWORDS = (
    "bug", "error", "broken", "not working", "crash", "down",
    "server", "loading", "slow", "issue"
)
HIGH_URGENCY_KEYWORDS = ("server", "down")
FEATURE_KEYWORDS = (
    "improve", "would like to see", "suggestion", "wish", "enhancement", "would be great"
)
GRATITUDE_KEYWORDS = ("thank", "thanks", "appreciate")
INQUIRY_KEYWORDS = ("how", "what", "when", "where", "can i", "is there", "?")


def _contains_any(text: str, keywords: Sequence[str]) -> bool:
    return any(keyword in text for keyword in keywords)


def is_billing(text: str) -> bool:
    return _contains_any(text, BILLING_KEYWORDS) or ("cancel" in text and "account" in text)


def is_technical(text: str) -> bool:
    if _contains_any(text, TECHNICAL_KEYWORDS):
        return True
    return "problem" in text and "no problem" not in text


def is_feature_request(text: str) -> bool:
    if "feature" in text or _contains_any(text, FEATURE_KEYWORDS):
        return True
    if "add" in text and ("please" in text or "could" in text):
        return True
    return "could you" in text and "add" in text


def is_positive(text: str) -> bool:
    return (
        _contains_any(text, GRATITUDE_KEYWORDS)
        and "but" not in text
        and "however" not in text
    )


def is_inquiry(text: str) -> bool:
    return _contains_any(text, INQUIRY_KEYWORDS)


def first_template(templates: Sequence[str]) -> str:
    """Deterministic chooser: always the first variant."""
    return templates[0]


_BUCKET_CHECKS: Tuple[Tuple[str, Callable[[str], bool]], ...] = (
    (Bucket.BILLING, is_billing),
    (Bucket.TECHNICAL, is_technical),
    (Bucket.FEATURE, is_feature_request),
    (Bucket.POSITIVE, is_positive),
    (Bucket.INQUIRY, is_inquiry),
)

_BUCKET_LABELS: Dict[str, Tuple[SupportCategory, UrgencyLevel]] = {
    Bucket.BILLING: (SupportCategory.BILLING, UrgencyLevel.MEDIUM),
    Bucket.TECHNICAL: (SupportCategory.TECHNICAL, UrgencyLevel.MEDIUM),
    Bucket.FEATURE: (SupportCategory.FEATURE, UrgencyLevel.LOW),
    Bucket.POSITIVE: (SupportCategory.GENERAL, UrgencyLevel.LOW),
    Bucket.INQUIRY: (SupportCategory.GENERAL, UrgencyLevel.LOW),
    Bucket.AMBIGUOUS: (SupportCategory.GENERAL, UrgencyLevel.LOW),
}


def bucket_for(message: str) -> str:
    """Name of the first bucket whose rule matches the message."""
    text = message.lower()
    for bucket, check in _BUCKET_CHECKS:
        if check(text):
            return bucket
    return Bucket.AMBIGUOUS


class RuleBasedClassifier:
    """
    Keyword-driven categorization with templated replies.

    Matching is plain substring search over the lower-cased message,
    so "add" also matches "address" and "how" matches "show".
    """

    def __init__(self, chooser: TemplateChooser = random.choice):
        self._choose = chooser

    @classmethod
    def seeded(cls, seed: int) -> "RuleBasedClassifier":
        """Classifier whose template choice is reproducible for a given seed."""
        return cls(chooser=random.Random(seed).choice)

    def classify(self, message: str) -> CategorizationResult:
        """
        Categorize a message without calling the model.

        Args:
            message: Customer message text

        Returns:
            CategorizationResult for the first bucket that matches
        """
        bucket = bucket_for(message)
        category, urgency = _BUCKET_LABELS[bucket]

        if bucket == Bucket.TECHNICAL and _contains_any(message.lower(), HIGH_URGENCY_KEYWORDS):
            urgency = UrgencyLevel.HIGH

        return CategorizationResult(
            category=category.value,
            urgency=urgency.value,
            suggested_response=self._choose(RESPONSE_TEMPLATES[bucket]),
            reasoning=self._choose(REASONING_TEMPLATES[bucket]),
        )
