# File: src/permit_pricing/domain/__init__.py
"""Domain layer: value objects, rate modifiers, pricing strategies and the calculator."""
