# File: src/permit_pricing/infrastructure/__init__.py
"""Infrastructure layer: object factories."""
