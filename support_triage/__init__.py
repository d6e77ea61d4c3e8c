"""
Support Triage
==============

Categorizes customer support messages (category, urgency) and drafts a
reply using an LLM, with a keyword rule fallback when the LLM is unavailable.
"""

__version__ = "1.0.0"
