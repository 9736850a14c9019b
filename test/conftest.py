import logging
import random

import pytest


@pytest.fixture
def log() -> logging.Logger:
    """Create and configure a logger for tests"""
    log = logging.getLogger("b58codec")
    log.setLevel(logging.DEBUG)
    return log


@pytest.fixture
def rng() -> random.Random:
    """Seeded generator so random round trips are reproducible"""
    return random.Random(0)
