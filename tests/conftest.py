"""
Pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Reproducible random number generator."""
    return np.random.default_rng(seed=42)


@pytest.fixture
def two_node_graph():
    """Two nodes 10 apart on the x axis, joined by one edge."""
    from forcelayout.core import build_graph
    return build_graph(2, [(0, 1)], positions=[(0.0, 0.0), (10.0, 0.0)])


@pytest.fixture
def square_cycle():
    """A 4-cycle on a slightly irregular square around the origin."""
    from forcelayout.core import build_graph
    return build_graph(
        4,
        [(0, 1), (1, 2), (2, 3), (3, 0)],
        positions=[(30.0, 2.0), (1.0, 25.0), (-28.0, -1.0), (0.0, -33.0)],
    )


@pytest.fixture
def constants():
    """Default force constants."""
    from forcelayout.core import ForceConstants
    return ForceConstants()
