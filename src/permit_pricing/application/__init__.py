# File: src/permit_pricing/application/__init__.py
"""Application layer: DTOs and the quote service."""
