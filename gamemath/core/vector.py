# gamemath/core/vector.py
"""
Vec2 / Vec3 value types.

Every operation returns a new vector. Division and normalization follow
IEEE-754: a zero divisor or zero length yields inf/nan, never an exception.
"""

from __future__ import annotations
import logging
import math
import numbers
from dataclasses import dataclass
from typing import Iterator, Tuple, Union

from ..config import debug_enabled
from .scalar import EQUAL_EPSILON, float_equals, lerp, safe_div

logger = logging.getLogger(__name__)

Number = Union[int, float, numbers.Real]


# =============================================================================
# Vec2
# =============================================================================

@dataclass(frozen=True)
class Vec2:
    """2D vector for screen, sprite and UI coordinates."""
    # numpy scalars on the left defer to __rmul__ instead of broadcasting
    __array_ufunc__ = None

    x: float = 0.0
    y: float = 0.0

    # --- componentwise arithmetic ---

    def add(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def sub(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def mul(self, other: Vec2) -> Vec2:
        return Vec2(self.x * other.x, self.y * other.y)

    def div(self, other: Vec2) -> Vec2:
        return Vec2(safe_div(self.x, other.x), safe_div(self.y, other.y))

    def scale(self, v: float) -> Vec2:
        return Vec2(self.x * v, self.y * v)

    def invert(self) -> Vec2:
        return self.scale(-1.0)

    def abs(self) -> Vec2:
        return Vec2(abs(self.x), abs(self.y))

    # --- metrics ---

    def dot(self, other: Vec2 = None) -> float:
        """Dot product with other, or with itself (squared length) if omitted."""
        if other is None:
            other = self
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        return math.sqrt(self.dot())

    def magnitude(self) -> float:
        return self.length()

    def normalized(self) -> Vec2:
        length = self.length()
        if length == 0.0 and debug_enabled():
            logger.warning("normalizing zero-length %r", self)
        return Vec2(safe_div(self.x, length), safe_div(self.y, length))

    @staticmethod
    def distance(a: Vec2, b: Vec2) -> float:
        return b.sub(a).magnitude()

    @staticmethod
    def lerp(a: Vec2, b: Vec2, t: float) -> Vec2:
        return Vec2(lerp(a.x, b.x, t), lerp(a.y, b.y, t))

    def almost_equals(self, other: Vec2, epsilon: float = EQUAL_EPSILON) -> bool:
        return (float_equals(self.x, other.x, epsilon)
                and float_equals(self.y, other.y, epsilon))

    # --- operators ---

    def __add__(self, other: Vec2) -> Vec2:
        if isinstance(other, Vec2):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other: Vec2) -> Vec2:
        if isinstance(other, Vec2):
            return self.sub(other)
        return NotImplemented

    def __mul__(self, other: Union[Vec2, Number]) -> Vec2:
        if isinstance(other, Vec2):
            return self.mul(other)
        if isinstance(other, numbers.Real):
            return self.scale(float(other))
        return NotImplemented

    def __rmul__(self, scalar: Number) -> Vec2:
        if isinstance(scalar, numbers.Real):
            return self.scale(float(scalar))
        return NotImplemented

    def __truediv__(self, other: Union[Vec2, Number]) -> Vec2:
        if isinstance(other, Vec2):
            return self.div(other)
        if isinstance(other, numbers.Real):
            other = float(other)
            return Vec2(safe_div(self.x, other), safe_div(self.y, other))
        return NotImplemented

    def __neg__(self) -> Vec2:
        return self.invert()

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    # --- conversion ---

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def extend(self, z: float = 0.0) -> Vec3:
        return Vec3(self.x, self.y, z)

    @staticmethod
    def from_tuple(t: Tuple[float, float]) -> Vec2:
        return Vec2(t[0], t[1])


Vec2.ZERO = Vec2(0.0, 0.0)
Vec2.FILL_ONE = Vec2(1.0, 1.0)
Vec2.UP = Vec2(0.0, 1.0)
Vec2.DOWN = Vec2(0.0, -1.0)
Vec2.LEFT = Vec2(-1.0, 0.0)
Vec2.RIGHT = Vec2(1.0, 0.0)


# =============================================================================
# Vec3
# =============================================================================

@dataclass(frozen=True)
class Vec3:
    """3D vector for positions, sizes and euler angles."""
    __array_ufunc__ = None

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    # --- componentwise arithmetic ---

    def add(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def sub(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def mul(self, other: Vec3) -> Vec3:
        return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)

    def div(self, other: Vec3) -> Vec3:
        return Vec3(
            safe_div(self.x, other.x),
            safe_div(self.y, other.y),
            safe_div(self.z, other.z)
        )

    def scale(self, v: float) -> Vec3:
        return Vec3(self.x * v, self.y * v, self.z * v)

    def invert(self) -> Vec3:
        return self.scale(-1.0)

    def abs(self) -> Vec3:
        return Vec3(abs(self.x), abs(self.y), abs(self.z))

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    # --- metrics ---

    def dot(self, other: Vec3 = None) -> float:
        """Dot product with other, or with itself (squared length) if omitted."""
        if other is None:
            other = self
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> float:
        return math.sqrt(self.dot())

    def magnitude(self) -> float:
        return self.length()

    def normalized(self) -> Vec3:
        length = self.length()
        if length == 0.0 and debug_enabled():
            logger.warning("normalizing zero-length %r", self)
        return Vec3(
            safe_div(self.x, length),
            safe_div(self.y, length),
            safe_div(self.z, length)
        )

    @staticmethod
    def distance(a: Vec3, b: Vec3) -> float:
        return b.sub(a).magnitude()

    @staticmethod
    def lerp(a: Vec3, b: Vec3, t: float) -> Vec3:
        return Vec3(lerp(a.x, b.x, t), lerp(a.y, b.y, t), lerp(a.z, b.z, t))

    def almost_equals(self, other: Vec3, epsilon: float = EQUAL_EPSILON) -> bool:
        return (float_equals(self.x, other.x, epsilon)
                and float_equals(self.y, other.y, epsilon)
                and float_equals(self.z, other.z, epsilon))

    # --- operators ---

    def __add__(self, other: Vec3) -> Vec3:
        if isinstance(other, Vec3):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other: Vec3) -> Vec3:
        if isinstance(other, Vec3):
            return self.sub(other)
        return NotImplemented

    def __mul__(self, other: Union[Vec3, Number]) -> Vec3:
        if isinstance(other, Vec3):
            return self.mul(other)
        if isinstance(other, numbers.Real):
            return self.scale(float(other))
        return NotImplemented

    def __rmul__(self, scalar: Number) -> Vec3:
        if isinstance(scalar, numbers.Real):
            return self.scale(float(scalar))
        return NotImplemented

    def __truediv__(self, other: Union[Vec3, Number]) -> Vec3:
        if isinstance(other, Vec3):
            return self.div(other)
        if isinstance(other, numbers.Real):
            other = float(other)
            return Vec3(safe_div(self.x, other), safe_div(self.y, other), safe_div(self.z, other))
        return NotImplemented

    def __neg__(self) -> Vec3:
        return self.invert()

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    # --- conversion ---

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def xy(self) -> Vec2:
        return Vec2(self.x, self.y)

    @staticmethod
    def from_tuple(t: Tuple[float, float, float]) -> Vec3:
        return Vec3(t[0], t[1], t[2])


Vec3.ZERO = Vec3(0.0, 0.0, 0.0)
Vec3.FILL_ONE = Vec3(1.0, 1.0, 1.0)
Vec3.UP = Vec3(0.0, 1.0, 0.0)
Vec3.DOWN = Vec3(0.0, -1.0, 0.0)
Vec3.LEFT = Vec3(-1.0, 0.0, 0.0)
Vec3.RIGHT = Vec3(1.0, 0.0, 0.0)
Vec3.FORWARD = Vec3(0.0, 0.0, 1.0)
Vec3.BACKWARD = Vec3(0.0, 0.0, -1.0)
