import enum

import jax
import jax.numpy as jnp
import equinox as eqx
from abc import abstractmethod


class TextureMapJacobian(enum.Enum):
    """How a texture's uv domain maps onto the surface it is sampled on."""

    MAP_UNIFORM = 0
    MAP_SPHERICAL = 1


class IntersectionInfo(eqx.Module):
    """Surface hit record as far as textures are concerned."""

    uv: jax.Array            # (..., 2)

    def __init__(self, uv):
        self.uv = jnp.asarray(uv)


class Texture(eqx.Module):
    """Abstract base class for textures over the unit square."""

    @abstractmethod
    def evaluate(self, uv):
        """Return RGB values (..., 3) at uv points (..., 2)."""
        pass

    def evaluate_at(self, info):
        """Evaluate at a surface hit using its uv coordinates."""
        return self.evaluate(info.uv)

    @abstractmethod
    def is_constant(self):
        pass

    @abstractmethod
    def average(self):
        pass

    @abstractmethod
    def minimum(self):
        pass

    @abstractmethod
    def maximum(self):
        pass

    def derivatives(self, uv):
        """Return d/du and d/dv of the texture's scalar value, (..., 2)."""
        return jnp.zeros(jnp.shape(uv))

    def make_samplable(self, jacobian=TextureMapJacobian.MAP_UNIFORM):
        """Return a texture ready for sample/pdf calls."""
        return self

    @abstractmethod
    def sample(self, uv, jacobian=TextureMapJacobian.MAP_UNIFORM):
        """Warp uniform uv pairs (..., 2) to points distributed by pdf."""
        pass

    @abstractmethod
    def pdf(self, uv, jacobian=TextureMapJacobian.MAP_UNIFORM):
        """Return the density (..., ) of sample() w.r.t. uv area."""
        pass


class ConstantTexture(Texture):
    """Texture with the same RGB value everywhere."""

    value: jax.Array  # (3,)

    def __init__(self, value=1.0):
        self.value = jnp.ones(3) * jnp.asarray(value)

    def evaluate(self, uv):
        batch = jnp.shape(uv)[:-1]
        return jnp.broadcast_to(self.value, batch + (3,))

    def is_constant(self):
        return True

    def average(self):
        return self.value

    def minimum(self):
        return self.value

    def maximum(self):
        return self.value

    def sample(self, uv, jacobian=TextureMapJacobian.MAP_UNIFORM):
        # Uniform over the unit square
        return jnp.asarray(uv)

    def pdf(self, uv, jacobian=TextureMapJacobian.MAP_UNIFORM):
        return jnp.ones(jnp.shape(uv)[:-1])
