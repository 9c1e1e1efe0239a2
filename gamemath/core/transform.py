# gamemath/core/transform.py
"""
Transform2D / Transform3D - position, size and rotation descriptors that
bake into a Matrix4.

Model matrix: identity -> scale(size) -> rotate(rotation) -> translate(position)
View matrix:  identity -> translate(-position) -> rotate(rotation) -> scale(size)
"""

from __future__ import annotations
from dataclasses import dataclass

from .matrix import Matrix4
from .scalar import lerp
from .vector import Vec2, Vec3


# =============================================================================
# Transform2D
# =============================================================================

@dataclass(frozen=True)
class Transform2D:
    position: Vec2 = Vec2.ZERO
    size: Vec2 = Vec2.FILL_ONE
    rotation: float = 0.0  # radians, about +z

    def into_matrix(self, matrix: Matrix4):
        """Overwrite matrix with this transform's model matrix."""
        matrix.data[...] = Matrix4.IDENTITY.data
        matrix.scale2d(self.size)
        matrix.rotate2d(self.rotation)
        matrix.translate2d(self.position)

    def to_matrix(self) -> Matrix4:
        result = Matrix4.identity()
        self.into_matrix(result)
        return result

    def into_view_matrix(self, matrix: Matrix4):
        """Overwrite matrix with the world -> camera matrix for this transform."""
        matrix.data[...] = Matrix4.IDENTITY.data
        matrix.translate2d(self.position.invert())
        matrix.rotate2d(self.rotation)
        matrix.scale2d(self.size)

    def to_view_matrix(self) -> Matrix4:
        result = Matrix4.identity()
        self.into_view_matrix(result)
        return result

    @staticmethod
    def lerp(a: Transform2D, b: Transform2D, t: float) -> Transform2D:
        return Transform2D(
            position=Vec2.lerp(a.position, b.position, t),
            size=Vec2.lerp(a.size, b.size, t),
            rotation=lerp(a.rotation, b.rotation, t),
        )


# =============================================================================
# Transform3D
# =============================================================================

@dataclass(frozen=True)
class Transform3D:
    position: Vec3 = Vec3.ZERO
    size: Vec3 = Vec3.FILL_ONE
    euler_angles: Vec3 = Vec3.ZERO  # radians, applied X -> Y -> Z

    def into_matrix(self, matrix: Matrix4):
        """Overwrite matrix with this transform's model matrix."""
        matrix.data[...] = Matrix4.IDENTITY.data
        matrix.scale(self.size)
        matrix.rotate(self.euler_angles)
        matrix.translate(self.position)

    def to_matrix(self) -> Matrix4:
        result = Matrix4.identity()
        self.into_matrix(result)
        return result

    def into_view_matrix(self, matrix: Matrix4):
        """Overwrite matrix with the world -> camera matrix for this transform."""
        matrix.data[...] = Matrix4.IDENTITY.data
        matrix.translate(self.position.invert())
        matrix.rotate(self.euler_angles)
        matrix.scale(self.size)

    def to_view_matrix(self) -> Matrix4:
        result = Matrix4.identity()
        self.into_view_matrix(result)
        return result

    @staticmethod
    def lerp(a: Transform3D, b: Transform3D, t: float) -> Transform3D:
        return Transform3D(
            position=Vec3.lerp(a.position, b.position, t),
            size=Vec3.lerp(a.size, b.size, t),
            euler_angles=Vec3.lerp(a.euler_angles, b.euler_angles, t),
        )


Transform2D.IDENTITY = Transform2D()
Transform3D.IDENTITY = Transform3D()
