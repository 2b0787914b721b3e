# File: tests/__init__.py
"""
Test package for Campus Parking Permit Pricing

Adds the src directory to the Python path so the suites run from a plain
checkout as well as from an installed package.
"""

import sys
from pathlib import Path

src_dir = Path(__file__).parent.parent / "src"
if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))
