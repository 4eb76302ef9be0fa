"""Shared pytest setup for the samefringe test suite."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from samefringe.testing import CountingValue


@pytest.fixture(autouse=True)
def reset_counting_value():
    """Start every test with a zeroed comparison counter."""
    CountingValue.reset()
    yield
