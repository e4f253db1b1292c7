"""Transformation and rotation utilities."""

import jax.numpy as jnp


def rotate2d(xy, phi):
    """
    Rotate 2D points counter-clockwise about the origin.

    Args:
        xy: Points (..., 2)
        phi: Rotation angle in radians, scalar or broadcastable to (...)

    Returns:
        Rotated points (..., 2)
    """
    x, y = xy[..., 0], xy[..., 1]
    sin_phi = jnp.sin(phi)
    cos_phi = jnp.cos(phi)
    return jnp.stack([x * cos_phi - y * sin_phi,
                      y * cos_phi + x * sin_phi], axis=-1)


def uv_to_centered(uv):
    """Map uv in [0, 1]^2 to centred coordinates in [-1, 1]^2."""
    return jnp.asarray(uv) * 2.0 - 1.0


def centered_to_uv(xy):
    """Map centred coordinates in [-1, 1]^2 back to uv in [0, 1]^2."""
    return jnp.asarray(xy) * 0.5 + 0.5
