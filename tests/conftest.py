"""Shared fixtures for the unimod test suite."""

import random

import numpy as np
import pytest

from unimod.matrix import IntMatrix


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "statistical: distribution checks over many random draws "
        "(deselect with -m 'not statistical')",
    )


@pytest.fixture
def seeded_rng(request: pytest.FixtureRequest) -> random.Random:
    """Seeded ``random.Random`` to inject into generators.

    The seed is extracted from ``request.param`` when used with
    indirect parametrization, or defaults to 42. Stdlib ``random`` and numpy
    are seeded as well so helper matrices are reproducible.
    """
    seed = getattr(request, "param", 42)
    random.seed(seed)
    np.random.seed(seed)
    return random.Random(seed)


@pytest.fixture
def small_matrix() -> IntMatrix:
    return IntMatrix.from_rows([
        [1, 2, 3],
        [4, 5, 6],
    ])

