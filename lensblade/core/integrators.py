import logging

import jax
import jax.numpy as jnp

from ..utils.sampling import sample_texture

logger = logging.getLogger(__name__)


class MCIntegrator:
    """
    Monte Carlo integrator over samplable textures.
    """

    def __init__(self, n_samples=128):
        if n_samples < 1:
            raise ValueError(f"n_samples must be at least 1, got {n_samples}")
        self.n_samples = int(n_samples)

    def sample_texture(self, texture, key):
        """
        Importance sample a texture and return estimator weights.

        Args:
            texture: Texture implementing sample/pdf
            key: JAX random key

        Returns:
            uv points (n_samples, 2), weights (n_samples, 1) = 1 / (pdf * n_samples)
        """
        n_samples = self.n_samples
        uv = sample_texture(key, texture, (n_samples,))
        pdf = texture.pdf(uv)

        # Zero weight for samples the density does not cover
        weights = jnp.where(pdf > 0, 1.0 / jnp.where(pdf > 0, pdf * n_samples, 1.0), 0.0)
        return uv, weights[..., None]

    def sample_textures(self, textures, key):
        """
        Sample a list of textures with independent keys.

        Args:
            textures: List of Texture objects
            key: JAX random key

        Returns:
            List of (uv, weights) tuples
        """
        if not textures:
            return []

        keys = jax.random.split(key, len(textures))
        logger.debug("Sampling %d textures with %d samples each", len(textures), self.n_samples)
        return [self.sample_texture(t, k) for t, k in zip(textures, keys)]

    def estimate_area(self, texture, key):
        """Estimate the uv area of a texture's sampling support."""
        _, weights = self.sample_texture(texture, key)
        return jnp.sum(weights)

    def integrate(self, texture, fn, key):
        """
        Estimate the integral of fn over the texture's sampling support.

        Args:
            texture: Texture implementing sample/pdf
            fn: Callable mapping uv (n_samples, 2) to values (n_samples, ...)
            key: JAX random key

        Returns:
            Integral estimate with the trailing shape of fn's values
        """
        uv, weights = self.sample_texture(texture, key)
        values = jnp.asarray(fn(uv))
        weights = weights.reshape((self.n_samples,) + (1,) * (values.ndim - 1))
        return jnp.sum(values * weights, axis=0)
