# File: src/permit_pricing/presentation/__init__.py
"""Presentation layer: console loop and receipt formatting."""
