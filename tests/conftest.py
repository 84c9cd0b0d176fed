"""
Pytest configuration for the underbar tests.

Puts the project root on the Python path so the tests import the working
tree even when the package is not installed, and resets the cached
settings around every test that changes the environment.
"""

import sys
from pathlib import Path

# Add the project root to the Python path
root_dir = Path(__file__).parent.parent
if str(root_dir) not in sys.path:
    sys.path.insert(0, str(root_dir))

import random
import pytest

from underbar import advanced, models


@pytest.fixture
def clean_settings(monkeypatch):
    """Drop UNDERBAR_* variables and cached settings for the test's duration"""
    for name in ("UNDERBAR_LOG_LEVEL", "UNDERBAR_LOG_FORMAT", "UNDERBAR_SHUFFLE_SEED"):
        monkeypatch.delenv(name, raising=False)
    models.reset_settings()
    advanced.reset_default_rng()
    yield monkeypatch
    models.reset_settings()
    advanced.reset_default_rng()


@pytest.fixture
def seeded_rng():
    """Deterministic RNG for shuffle tests"""
    return random.Random(1234)


@pytest.fixture
def people():
    return [
        {"name": "curly", "age": 50},
        {"name": "moe", "age": 30},
        {"name": "larry", "age": 30},
    ]
