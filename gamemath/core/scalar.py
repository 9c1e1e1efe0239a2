# gamemath/core/scalar.py
"""
Scalar constants and helpers shared by every other core module.
"""

from __future__ import annotations
import logging
import math

import numpy as np

from ..config import debug_enabled

logger = logging.getLogger(__name__)

# =============================================================================
# Constants
# =============================================================================

PI: float = math.pi
HALF_PI: float = PI / 2.0
DOUBLE_PI: float = PI * 2.0

# Single-precision machine epsilon (2**-23).
EQUAL_EPSILON: float = float(np.finfo(np.float32).eps)


# =============================================================================
# Comparison
# =============================================================================

def float_equals(a: float, b: float, epsilon: float = EQUAL_EPSILON) -> bool:
    """True when b lies strictly inside the band (a - epsilon, a + epsilon).

    The band is centered on a, so swapping arguments can change the answer
    at the edges.
    """
    return (a - epsilon) < b and b < (a + epsilon)


# =============================================================================
# Angles
# =============================================================================

def deg2rad(a: float) -> float:
    return (a * PI) / 180.0


def rad2deg(a: float) -> float:
    return (a * 180.0) / PI


def cos_from_sin(sin: float, angle: float) -> float:
    """Cosine of angle, given its already computed sine."""
    cos = math.sqrt(1.0 - sin * sin)
    a = angle + HALF_PI
    b = a - math.floor(a / DOUBLE_PI) * DOUBLE_PI
    if b < 0.0 and DOUBLE_PI + b >= PI:
        return -cos
    return cos


# =============================================================================
# Interpolation
# =============================================================================

def lerp(a: float, b: float, t: float) -> float:
    """Precise lerp: returns exactly a at t=0 and exactly b at t=1."""
    return ((1.0 - t) * a) + (t * b)


def fast_lerp(a: float, b: float, t: float) -> float:
    return a + t * (b - a)


def clamp(value: float, min_val: float, max_val: float) -> float:
    return max(min_val, min(value, max_val))


# =============================================================================
# Division
# =============================================================================

def safe_div(a: float, b: float) -> float:
    """IEEE-754 division: x/0 gives +-inf and 0/0 gives nan instead of raising."""
    if b == 0.0 and debug_enabled():
        logger.warning("division by zero: %r / %r", a, b)
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.divide(np.float64(a), np.float64(b)))
