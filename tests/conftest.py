import numpy as np
import pytest


@pytest.fixture
def rng():
    """A seeded random source so generated boards are reproducible."""
    return np.random.default_rng(1234)
