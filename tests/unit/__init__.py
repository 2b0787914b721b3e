# File: tests/unit/__init__.py
"""Unit tests for the domain, application and infrastructure layers."""
