# File: src/permit_pricing/__init__.py
"""
Campus parking permit pricing

Computes permit price quotes from a permit type, vehicle type, carpool flag
and duration, and prints a receipt for each quote.
"""

__version__ = "1.0.0"
