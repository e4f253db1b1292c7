"""Utility functions."""

from .transforms import rotate2d, uv_to_centered, centered_to_uv
from .sampling import sample_triangle, sample_uniform_uv, sample_texture

__all__ = [
    'rotate2d',
    'uv_to_centered',
    'centered_to_uv',
    'sample_triangle',
    'sample_uniform_uv',
    'sample_texture',
]
