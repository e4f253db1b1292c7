from .textures import Texture, ConstantTexture, TextureMapJacobian, IntersectionInfo
from .blades import BladeTexture
from .lens import ThinLens
from .integrators import MCIntegrator

__all__ = [
    # Textures
    'Texture',
    'ConstantTexture',
    'BladeTexture',
    'TextureMapJacobian',
    'IntersectionInfo',
    # Lens
    'ThinLens',
    # Integrators
    'MCIntegrator',
]
