"""Pytest configuration for lensblade tests.

Enables 64-bit floats before any array is created so geometric checks can
use tight tolerances, selects a headless matplotlib backend,
and provides shared fixtures.
"""

import jax
import matplotlib

jax.config.update("jax_enable_x64", True)
matplotlib.use("Agg")

import numpy as np
import pytest


BLADE_COUNTS = [3, 5, 6, 8]


@pytest.fixture
def key():
    """Fixed JAX random key."""
    return jax.random.key(42)


@pytest.fixture
def rng():
    """Fixed numpy generator for test inputs."""
    return np.random.default_rng(1234)


def reference_margin(uv, num_blades, angle):
    """Distance inside the polygon edge, computed from polar coordinates.

    Positive inside, negative outside. Independent of the texture's folding
    and rotation math.
    """
    p = np.asarray(uv) * 2.0 - 1.0
    r = np.hypot(p[..., 0], p[..., 1])
    sector = 2.0 * np.pi / num_blades
    theta = np.mod(np.arctan2(p[..., 1], p[..., 0]) - angle, sector)
    return np.cos(np.pi / num_blades) - r * np.cos(theta - 0.5 * sector)
