"""Pytest configuration for the bid64 test suite."""

import random
import sys
from pathlib import Path

import pytest

# Add repository root to path for bid64 imports
sys.path.insert(0, str(Path(__file__).parent.parent))

SEED = 0xD64


@pytest.fixture
def rng() -> random.Random:
    return random.Random(SEED)
