"""
Shared Kernel Module
====================

Generic infrastructure shared by the triage module and the entry points.

DO NOT add categorization logic to the shared kernel.
"""
