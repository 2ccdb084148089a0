import numpy as np
import pytest


@pytest.fixture
def sample() -> np.ndarray:
    """Large-offset normal sample; stresses precision of running sums."""
    rng = np.random.default_rng(42)
    return rng.normal(loc=1e6, scale=3.0, size=1000)


@pytest.fixture
def shards(sample: np.ndarray) -> list[np.ndarray]:
    """The sample split into uneven, non-empty shards."""
    return np.split(sample, [10, 250, 251, 700])
