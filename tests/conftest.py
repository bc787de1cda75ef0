"""Shared fixtures."""

import sys
from pathlib import Path

import pytest

# Add project root
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture()
def sleeps():
    """Pass `sleeps.append` as the sleep callable to record delays instead of blocking."""
    return []
