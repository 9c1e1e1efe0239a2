# gamemath/core/matrix.py
"""
Matrix4 - 4x4 float32 matrix for model, view and projection transforms.

Storage is a numpy (4, 4) float32 array addressed data[row][col]. The
layout matches what OpenGL expects for an untransposed uniform upload:
translation lives in row 3 and points are treated as row vectors
(v' = [x, y, z, 1] @ data).

Composition
-----------
mul(other) is the one composition primitive:

    self.data = other.data @ self.data

i.e. the result is other x self, not self x other. rotated(), translated()
and the Transform2D/3D bakers are all written in terms of it.

Scale and translation
---------------------
Two families exist:

- scale*/translate*: scale multiplies the diagonal in place. translate
  composes a real translation matrix into row 3.
- scale_diagonal*: multiply [0][0], [1][1], [2][2] by x, y, z.
- translate_diagonal*: multiply the same cells, every one of them by the
  x component. This is not a translation in the affine sense; it is kept
  for callers that were built against that behavior.
"""

from __future__ import annotations
import logging
import math
from typing import Iterable, List, Optional, Union

import numpy as np

from ..config import debug_enabled
from .scalar import EQUAL_EPSILON, cos_from_sin, safe_div
from .vector import Vec2, Vec3

logger = logging.getLogger(__name__)

MATRIX_DTYPE = np.float32

GridLike = Union[np.ndarray, Iterable[Iterable[float]]]


def _as_grid(data: GridLike) -> np.ndarray:
    grid = np.array(data, dtype=MATRIX_DTYPE)
    if grid.shape != (4, 4):
        raise ValueError(f"Matrix4 needs 4x4 data, got shape {grid.shape}")
    return grid


def _read_only(grid: np.ndarray) -> np.ndarray:
    grid.flags.writeable = False
    return grid


def _check_volume(kind: str, *spans: float):
    if debug_enabled() and any(span == 0.0 for span in spans):
        logger.warning("%s projection with a zero-width axis: spans=%r", kind, spans)


class Matrix4:
    """4x4 transform matrix. Mutators work in place; *ed variants copy."""

    __slots__ = ('data',)

    def __init__(self, data: Optional[GridLike] = None):
        """Zero matrix by default, otherwise a copy of any 4x4 grid."""
        if data is None:
            self.data = np.zeros((4, 4), dtype=MATRIX_DTYPE)
        else:
            self.data = _as_grid(data)

    # =========================================================================
    # Construction
    # =========================================================================

    @staticmethod
    def zero() -> Matrix4:
        return Matrix4()

    @staticmethod
    def identity() -> Matrix4:
        return Matrix4(np.identity(4, dtype=MATRIX_DTYPE))

    def copy(self) -> Matrix4:
        return Matrix4(self.data)

    @staticmethod
    def perspective(fovy: float, aspect: float, znear: float, zfar: float) -> Matrix4:
        """
        Symmetric perspective projection.

        Args:
            fovy: Vertical field of view, in radians.
            aspect: Width / height of the viewport.
            znear: Distance to the near clipping plane (positive).
            zfar: Distance to the far clipping plane (positive).
        """
        logger.debug("perspective fovy=%s aspect=%s near=%s far=%s", fovy, aspect, znear, zfar)
        _check_volume("perspective", aspect, zfar - znear)
        tan_half_fovy = math.tan(fovy / 2.0)
        depth = zfar - znear

        result = Matrix4.zero()
        result.data[0][0] = safe_div(1.0, aspect * tan_half_fovy)
        result.data[1][1] = safe_div(1.0, tan_half_fovy)
        result.data[2][2] = safe_div(-(zfar + znear), depth)
        result.data[2][3] = -1.0
        result.data[3][2] = safe_div(-(2.0 * zfar * znear), depth)
        return result

    @staticmethod
    def ortho(left: float, right: float, bottom: float, top: float,
              znear: float, zfar: float) -> Matrix4:
        """Orthographic parallel viewing volume."""
        logger.debug("ortho l=%s r=%s b=%s t=%s n=%s f=%s", left, right, bottom, top, znear, zfar)
        dx = right - left
        dy = top - bottom
        dz = zfar - znear
        _check_volume("ortho", dx, dy, dz)

        result = Matrix4.identity()
        result.data[0][0] = safe_div(2.0, dx)
        result.data[1][1] = safe_div(2.0, dy)
        result.data[2][2] = safe_div(-2.0, dz)
        result.data[3][0] = safe_div(-(right + left), dx)
        result.data[3][1] = safe_div(-(top + bottom), dy)
        result.data[3][2] = safe_div(-(zfar + znear), dz)
        return result

    @staticmethod
    def frustum(left: float, right: float, bottom: float, top: float,
                znear: float, zfar: float) -> Matrix4:
        """Perspective projection for an arbitrary (possibly off-center) frustum."""
        logger.debug("frustum l=%s r=%s b=%s t=%s n=%s f=%s", left, right, bottom, top, znear, zfar)
        dx = right - left
        dy = top - bottom
        dz = zfar - znear
        _check_volume("frustum", dx, dy, dz)

        result = Matrix4.zero()
        result.data[0][0] = safe_div(2.0 * znear, dx)
        result.data[1][1] = safe_div(2.0 * znear, dy)
        result.data[2][0] = safe_div(right + left, dx)
        result.data[2][1] = safe_div(top + bottom, dy)
        result.data[2][2] = safe_div(-(zfar + znear), dz)
        result.data[2][3] = -1.0
        result.data[3][2] = safe_div(-(2.0 * zfar * znear), dz)
        return result

    @staticmethod
    def translation_matrix(translation: Vec3) -> Matrix4:
        result = Matrix4.identity()
        result.data[3][0] = translation.x
        result.data[3][1] = translation.y
        result.data[3][2] = translation.z
        return result

    @staticmethod
    def rotation_matrix(euler_angles: Vec3) -> Matrix4:
        """
        Combined X -> Y -> Z rotation.

        The three axis rotations are folded into direct cell writes on an
        identity matrix instead of two full matrix products. Cosines are
        derived from the sines with cos_from_sin.
        """
        sin_x = math.sin(euler_angles.x)
        cos_x = cos_from_sin(sin_x, euler_angles.x)
        sin_y = math.sin(euler_angles.y)
        cos_y = cos_from_sin(sin_y, euler_angles.y)
        sin_z = math.sin(euler_angles.z)
        cos_z = cos_from_sin(sin_z, euler_angles.z)
        m_sin_x = -sin_x
        m_sin_y = -sin_y
        m_sin_z = -sin_z

        # rotate X
        nm11 = cos_x
        nm12 = sin_x
        nm21 = m_sin_x
        nm22 = cos_x
        # rotate Y
        nm00 = cos_y
        nm01 = nm21 * m_sin_y
        nm02 = nm22 * m_sin_y

        result = Matrix4.identity()
        d = result.data
        d[0][2] = sin_y
        d[1][2] = nm21 * cos_y
        d[2][2] = nm22 * cos_y
        # rotate Z
        d[0][0] = nm00 * cos_z
        d[1][0] = nm01 * cos_z + nm11 * sin_z
        d[2][0] = nm02 * cos_z + nm12 * sin_z
        d[0][1] = nm00 * m_sin_z
        d[1][1] = nm01 * m_sin_z + nm11 * cos_z
        d[2][1] = nm02 * m_sin_z + nm12 * cos_z
        return result

    # =========================================================================
    # Composition
    # =========================================================================

    def mul(self, other: Matrix4):
        """In place: self = other x self."""
        self.data[...] = other.data @ self.data

    def multiplicated(self, other: Matrix4) -> Matrix4:
        result = self.copy()
        result.mul(other)
        return result

    def __matmul__(self, other: Matrix4) -> Matrix4:
        if isinstance(other, Matrix4):
            return self.multiplicated(other)
        return NotImplemented

    # =========================================================================
    # Rotation
    # =========================================================================

    def rotated(self, rotation: Vec3) -> Matrix4:
        return Matrix4.rotation_matrix(rotation).multiplicated(self)

    def rotate(self, rotation: Vec3):
        self.data[...] = self.rotated(rotation).data

    def rotated2d(self, rotation: float) -> Matrix4:
        return self.rotated(Vec3(0.0, 0.0, rotation))

    def rotate2d(self, rotation: float):
        self.rotate(Vec3(0.0, 0.0, rotation))

    # =========================================================================
    # Translation
    # =========================================================================

    def translated(self, translation: Vec3) -> Matrix4:
        return Matrix4.translation_matrix(translation).multiplicated(self)

    def translate(self, translation: Vec3):
        self.data[...] = self.translated(translation).data

    def translated2d(self, translation: Vec2) -> Matrix4:
        return self.translated(translation.extend(0.0))

    def translate2d(self, translation: Vec2):
        self.translate(translation.extend(0.0))

    def translate_diagonal(self, translation: Vec3):
        """Multiply [0][0], [1][1] and [2][2] by translation.x (y and z are unused)."""
        self.data[0][0] *= translation.x
        self.data[1][1] *= translation.x
        self.data[2][2] *= translation.x

    def translated_diagonal(self, translation: Vec3) -> Matrix4:
        result = self.copy()
        result.translate_diagonal(translation)
        return result

    def translate_diagonal2d(self, translation: Vec2):
        self.data[0][0] *= translation.x
        self.data[1][1] *= translation.x

    def translated_diagonal2d(self, translation: Vec2) -> Matrix4:
        result = self.copy()
        result.translate_diagonal2d(translation)
        return result

    # =========================================================================
    # Scale
    # =========================================================================

    def scale(self, scale: Vec3):
        self.data[0][0] *= scale.x
        self.data[1][1] *= scale.y
        self.data[2][2] *= scale.z

    def scaled(self, scale: Vec3) -> Matrix4:
        result = self.copy()
        result.scale(scale)
        return result

    def scale2d(self, scale: Vec2):
        self.data[0][0] *= scale.x
        self.data[1][1] *= scale.y

    def scaled2d(self, scale: Vec2) -> Matrix4:
        result = self.copy()
        result.scale2d(scale)
        return result

    # Same cells as scale(), one component per axis.
    scale_diagonal = scale
    scaled_diagonal = scaled
    scale_diagonal2d = scale2d
    scaled_diagonal2d = scaled2d

    # =========================================================================
    # Queries & conversion
    # =========================================================================

    def transform_point(self, v: Vec3) -> Vec3:
        """Row-vector transform of a point (w=1), with perspective divide."""
        x, y, z, w = np.array([v.x, v.y, v.z, 1.0]) @ self.data.astype(np.float64)
        if w != 1.0 and w != 0.0:
            return Vec3(float(x / w), float(y / w), float(z / w))
        return Vec3(float(x), float(y), float(z))

    def transposed(self) -> Matrix4:
        return Matrix4(self.data.T)

    def equals(self, other: Matrix4, epsilon: float = EQUAL_EPSILON) -> bool:
        """Cellwise float_equals(self, other)."""
        a = self.data.astype(np.float64)
        b = other.data.astype(np.float64)
        return bool(np.all(((a - epsilon) < b) & (b < (a + epsilon))))

    def to_numpy(self) -> np.ndarray:
        return self.data.copy()

    def to_list(self) -> List[float]:
        """16 floats in storage order (untransposed uniform upload)."""
        return [float(v) for v in self.data.reshape(16)]

    def to_bytes(self) -> bytes:
        return self.data.tobytes()

    def __getitem__(self, row: int) -> np.ndarray:
        return self.data[row]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return bool(np.array_equal(self.data, other.data))

    __hash__ = None

    def __repr__(self) -> str:
        rows = ", ".join(
            "[" + ", ".join(f"{v:.4g}" for v in row) + "]" for row in self.data
        )
        return f"Matrix4([{rows}])"


Matrix4.EMPTY = Matrix4.zero()
_read_only(Matrix4.EMPTY.data)
Matrix4.IDENTITY = Matrix4.identity()
_read_only(Matrix4.IDENTITY.data)
