"""
Pytest configuration and shared fixtures.

Key fixtures:
- known_brands: Sample brand roster
- parser: DealParser bound to the sample roster

No environment or network is required; the parser is pure.
"""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

from deal_parser import DealParser


@pytest.fixture
def known_brands() -> list[str]:
    """Sample brand roster, as a creator's brand directory would supply it."""
    return ['Nike', 'Adidas', 'Apple Inc']


@pytest.fixture
def parser(known_brands) -> DealParser:
    """DealParser bound to the sample roster with default thresholds."""
    return DealParser(known_brands=known_brands)
