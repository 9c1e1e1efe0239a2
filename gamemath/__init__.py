# gamemath/__init__.py
"""
gamemath - 2D/3D math for real-time graphics.

Core components:
- Scalar helpers: float_equals, deg2rad/rad2deg, lerp/fast_lerp, cos_from_sin
- Vec2 / Vec3: vector algebra
- Color: RGBA float color with hex decoding
- Rect / Circle / Box: bounding shapes
- Matrix4: projections, rotation, scale, translation
- Transform2D / Transform3D: model and view matrix baking
"""

from .config import MathConfig, configure, get_config
from .core import *  # noqa: F401,F403
from .core import __all__ as _core_all

__version__ = "0.1.0"

__all__ = ['MathConfig', 'configure', 'get_config'] + list(_core_all)
