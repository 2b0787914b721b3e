# File: tests/integration/__init__.py
"""
Integration tests: the quote service and the console loop working together
with the real domain objects.
"""
