"""Sampling utilities for aperture textures."""

import jax.numpy as jnp
from jax import random


def sample_triangle(u, v):
    """
    Warp two uniforms to barycentric weights uniform over a triangle.

    Uses the square-root parameterisation, so samples do not cluster at
    the first vertex.

    Args:
        u: Uniform values in [0, 1)
        v: Uniform values in [0, 1)

    Returns:
        (alpha, beta, gamma) weights summing to one
    """
    s = jnp.sqrt(u)
    alpha = 1.0 - s
    beta = (1.0 - v) * s
    gamma = 1.0 - alpha - beta
    return alpha, beta, gamma


def sample_uniform_uv(key, shape):
    """
    Draw independent uniform uv pairs.

    Args:
        key: JAX random key
        shape: Batch shape

    Returns:
        uv pairs (..., 2) in [0, 1)
    """
    return random.uniform(key, tuple(shape) + (2,))


def sample_texture(key, texture, shape, jacobian=None):
    """
    Draw uv points distributed according to a texture's sampling density.

    Args:
        key: JAX random key
        texture: Texture implementing sample(uv, jacobian)
        shape: Batch shape
        jacobian: TextureMapJacobian passed through to the texture

    Returns:
        Sampled uv points (..., 2)
    """
    uv = sample_uniform_uv(key, shape)
    if jacobian is None:
        return texture.sample(uv)
    return texture.sample(uv, jacobian)
