# gamemath/core/shapes.py
"""
Bounding shapes: Rect, Circle (2D) and Box (3D).

Plain aggregates. Negative sizes and radii are accepted as given.
"""

from __future__ import annotations
from dataclasses import dataclass

from .vector import Vec2, Vec3


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle; position is the min corner."""
    position: Vec2 = Vec2.ZERO
    size: Vec2 = Vec2.FILL_ONE

    @staticmethod
    def empty() -> Rect:
        return Rect(position=Vec2.ZERO, size=Vec2.FILL_ONE)

    @property
    def center(self) -> Vec2:
        return self.position + self.size * 0.5

    def contains(self, p: Vec2) -> bool:
        lo = self.position
        hi = self.position + self.size
        return lo.x <= p.x <= hi.x and lo.y <= p.y <= hi.y

    def intersects(self, other: Rect) -> bool:
        a_hi = self.position + self.size
        b_hi = other.position + other.size
        return not (
            a_hi.x < other.position.x or
            b_hi.x < self.position.x or
            a_hi.y < other.position.y or
            b_hi.y < self.position.y
        )


@dataclass(frozen=True)
class Circle:
    position: Vec2 = Vec2.ZERO
    radius: float = 1.0

    @staticmethod
    def new(radius: float) -> Circle:
        """Circle of the given radius centered on the origin."""
        return Circle(position=Vec2.ZERO, radius=radius)

    @property
    def center(self) -> Vec2:
        return self.position

    def contains(self, p: Vec2) -> bool:
        return p.sub(self.position).dot() <= self.radius * self.radius


@dataclass(frozen=True)
class Box:
    """Axis-aligned box; position is the min corner."""
    position: Vec3 = Vec3.ZERO
    size: Vec3 = Vec3.FILL_ONE

    @property
    def center(self) -> Vec3:
        return self.position + self.size * 0.5

    def contains(self, p: Vec3) -> bool:
        lo = self.position
        hi = self.position + self.size
        return lo.x <= p.x <= hi.x and lo.y <= p.y <= hi.y and lo.z <= p.z <= hi.z


Rect.EMPTY = Rect.empty()
Circle.EMPTY = Circle(position=Vec2.ZERO, radius=1.0)
Box.EMPTY = Box(position=Vec3.ZERO, size=Vec3.FILL_ONE)
