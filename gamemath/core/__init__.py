# gamemath/core/__init__.py
"""
Core value types: scalars, vectors, color, shapes, Matrix4, transforms.
"""

from .scalar import (
    PI, HALF_PI, DOUBLE_PI, EQUAL_EPSILON,
    float_equals, deg2rad, rad2deg,
    lerp, fast_lerp, clamp,
    cos_from_sin, safe_div,
)
from .vector import Vec2, Vec3
from .color import Color
from .shapes import Rect, Circle, Box
from .matrix import Matrix4, MATRIX_DTYPE
from .transform import Transform2D, Transform3D

__all__ = [
    # Scalars
    'PI', 'HALF_PI', 'DOUBLE_PI', 'EQUAL_EPSILON',
    'float_equals', 'deg2rad', 'rad2deg',
    'lerp', 'fast_lerp', 'clamp',
    'cos_from_sin', 'safe_div',

    # Vectors
    'Vec2', 'Vec3',

    # Color & shapes
    'Color',
    'Rect', 'Circle', 'Box',

    # Matrices & transforms
    'Matrix4', 'MATRIX_DTYPE',
    'Transform2D', 'Transform3D',
]
