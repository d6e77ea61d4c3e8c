"""
Triage Module
=============

Bounded Context for support message categorization.

Responsibilities:
- Categorize messages as Billing Issue, Technical Problem, Feature Request or General Inquiry
- Assign urgency (High, Medium, Low)
- Draft a suggested reply with reasoning
- Fall back to keyword rules when the LLM gateway is unavailable
"""
