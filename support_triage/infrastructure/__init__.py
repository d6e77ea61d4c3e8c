"""
Infrastructure Package
======================

Clients for external services used across the application.
"""
