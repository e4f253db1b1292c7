from .core import (
    Texture,
    ConstantTexture,
    BladeTexture,
    TextureMapJacobian,
    IntersectionInfo,
    ThinLens,
    MCIntegrator,
)
from .viz import bladeshow, sampleshow
from .io import load_texture, save_texture

__version__ = "0.1.0"

__all__ = [
    'Texture',
    'ConstantTexture',
    'BladeTexture',
    'TextureMapJacobian',
    'IntersectionInfo',
    'ThinLens',
    'MCIntegrator',
    'bladeshow',
    'sampleshow',
    'load_texture',
    'save_texture',
]
