import jax
import jax.numpy as jnp
import numpy as np
import equinox as eqx

from .textures import Texture, TextureMapJacobian
from ..utils.sampling import sample_triangle
from ..utils.transforms import rotate2d, uv_to_centered, centered_to_uv


class BladeTexture(Texture):
    """
    Regular polygon aperture made of ``num_blades`` triangular wedges.

    The polygon has unit circumradius in centred coordinates [-1, 1]^2 and
    is exposed over uv in [0, 1]^2. Every wedge is a rotated copy of the
    canonical wedge between angles 0 and ``blade_angle``, so membership,
    sampling and density all reduce to that single triangle.

    Instances are immutable. ``with_num_blades`` and ``with_angle`` return
    a new texture with every derived quantity recomputed.
    """

    num_blades: int = eqx.field(static=True)
    angle: float = eqx.field(static=True)

    # Derived from (num_blades, angle)
    blade_angle: float = eqx.field(static=True)
    area: float = eqx.field(static=True)   # area in uv space
    base_edge: jax.Array                    # (2,)
    base_normal: jax.Array                  # (2,)

    def __init__(self, num_blades=6, angle=None):
        num_blades = int(num_blades)
        if num_blades < 3:
            raise ValueError(f"Blade texture needs at least 3 blades, got {num_blades}")

        self.num_blades = num_blades
        self.angle = float(0.5 * np.pi / num_blades if angle is None else angle)

        self.blade_angle = 2.0 * np.pi / num_blades
        sin_half = np.sin(0.5 * self.blade_angle)
        cos_half = np.cos(0.5 * self.blade_angle)

        # Centred area is 0.5*N*sin(blade_angle); uv space is a quarter of that
        self.area = float(0.25 * 0.5 * num_blades * np.sin(self.blade_angle))
        self.base_edge = jnp.array([-sin_half, cos_half]) * 2.0 * np.sin(np.pi / num_blades)
        self.base_normal = jnp.array([cos_half, sin_half])

    def with_num_blades(self, num_blades):
        """Return a copy with a different blade count and the same angle."""
        return BladeTexture(num_blades, self.angle)

    def with_angle(self, angle):
        """Return a copy with a different rotation and the same blade count."""
        return BladeTexture(self.num_blades, angle)

    def _edge_distance(self, uv):
        """Signed distance along base_normal past the edge of the folded wedge."""
        p = uv_to_centered(uv)
        phi = jnp.arctan2(p[..., 1], p[..., 0]) - self.angle
        phi = -(jnp.floor(phi / self.blade_angle) * self.blade_angle + self.angle)
        local = rotate2d(p, phi)
        return ((local[..., 0] - 1.0) * self.base_normal[0]
                + local[..., 1] * self.base_normal[1])

    def contains(self, uv):
        """
        Check if uv points lie inside the polygon.

        A uv of exactly (0, 0) is the caller's probe for the centre and
        always counts as inside.

        Args:
            uv: Points (..., 2) in [0, 1]^2

        Returns:
            Boolean mask (...)
        """
        uv = jnp.asarray(uv)
        sentinel = jnp.all(uv == 0.0, axis=-1)
        return sentinel | (self._edge_distance(uv) <= 0.0)

    def evaluate(self, uv):
        inside = self.contains(uv)
        return jnp.where(inside[..., None], jnp.ones(3), jnp.zeros(3))

    def is_constant(self):
        return False

    def average(self):
        return jnp.full(3, self.area)

    def minimum(self):
        return jnp.zeros(3)

    def maximum(self):
        return jnp.ones(3)

    def sample(self, uv, jacobian=TextureMapJacobian.MAP_UNIFORM):
        """
        Map uniform pairs to points uniform over the polygon.

        The first component picks a blade and is rescaled to a fresh
        uniform within it; both components then warp onto the blade's
        triangle.

        Args:
            uv: Uniform pairs (..., 2) in [0, 1)
            jacobian: Ignored

        Returns:
            uv points (..., 2) inside the polygon
        """
        uv = jnp.asarray(uv)
        u = uv[..., 0] * self.num_blades
        blade = jnp.floor(u)
        u = u - blade

        phi = self.angle + blade * self.blade_angle

        alpha, beta, gamma = sample_triangle(u, uv[..., 1])
        local = jnp.stack([(1.0 + self.base_edge[0]) * beta + gamma,
                           self.base_edge[1] * beta], axis=-1)

        # Pull samples off the outer edge so rounding in contains() cannot reject them
        local = local * (1.0 - 32.0 * jnp.finfo(local.dtype).eps)

        return centered_to_uv(rotate2d(local, phi))

    def pdf(self, uv, jacobian=TextureMapJacobian.MAP_UNIFORM):
        return jnp.where(self.contains(uv), 1.0 / self.area, 0.0)

    def density(self, uv):
        """Density of sample() w.r.t. uv area: 1/area inside, 0 outside."""
        return self.pdf(uv)
