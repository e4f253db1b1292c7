import jax.numpy as jnp
import equinox as eqx

from .blades import BladeTexture
from .textures import Texture
from ..utils.sampling import sample_texture
from ..utils.transforms import uv_to_centered


class ThinLens(eqx.Module):
    """Thin lens whose aperture shape is given by a samplable texture."""

    aperture: Texture
    aperture_radius: float = eqx.field(static=True)
    focus_distance: float = eqx.field(static=True)

    def __init__(self, aperture=None, aperture_radius=1.0, focus_distance=1.0):
        if focus_distance <= 0:
            raise ValueError(f"Focus distance must be positive, got {focus_distance}")
        self.aperture = aperture if aperture is not None else BladeTexture()
        self.aperture_radius = float(aperture_radius)
        self.focus_distance = float(focus_distance)

    def sample(self, key, shape):
        """
        Sample lens positions on the z=0 lens plane.

        Args:
            key: JAX random key
            shape: Batch shape

        Returns:
            Lens points (..., 3)
        """
        uv = sample_texture(key, self.aperture, shape)
        xy = uv_to_centered(uv) * self.aperture_radius
        return jnp.concatenate([xy, jnp.zeros(xy.shape[:-1] + (1,))], axis=-1)

    def focus_rays(self, key, directions):
        """
        Turn pinhole directions into depth-of-field rays.

        Each ray starts at a sampled lens point and passes through the point
        where the pinhole ray meets the focal plane z = focus_distance.

        Args:
            key: JAX random key
            directions: Pinhole ray directions (..., 3), camera looks along +z.
                Directions with z <= 0 are returned unfocused.

        Returns:
            origins (..., 3), unit directions (..., 3)
        """
        directions = jnp.asarray(directions)
        origins = self.sample(key, directions.shape[:-1])

        dz = directions[..., 2:3]
        forward = dz > 0
        focal_points = directions * (self.focus_distance / jnp.where(forward, dz, 1.0))

        # Directions that never reach the focal plane keep their pinhole direction
        d = jnp.where(forward, focal_points - origins, directions)
        return origins, d / jnp.linalg.norm(d, axis=-1, keepdims=True)
