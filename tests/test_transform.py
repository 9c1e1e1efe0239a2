import numpy as np
import pytest

from gamemath.core.matrix import Matrix4
from gamemath.core.scalar import HALF_PI
from gamemath.core.transform import Transform2D, Transform3D
from gamemath.core.vector import Vec2, Vec3


def test_identity_transforms_bake_to_identity():
    assert Transform2D.IDENTITY.to_matrix() == Matrix4.IDENTITY
    assert Transform2D.IDENTITY.to_view_matrix() == Matrix4.IDENTITY
    assert Transform3D.IDENTITY.to_matrix() == Matrix4.IDENTITY
    assert Transform3D.IDENTITY.to_view_matrix() == Matrix4.IDENTITY


def test_identity_defaults():
    assert Transform2D.IDENTITY == Transform2D(Vec2.ZERO, Vec2.FILL_ONE, 0.0)
    assert Transform3D.IDENTITY == Transform3D(Vec3.ZERO, Vec3.FILL_ONE, Vec3.ZERO)


def test_model_matrix_scale_then_translate():
    t = Transform3D(position=Vec3(1.0, 2.0, 3.0), size=Vec3(2.0, 2.0, 2.0))
    m = t.to_matrix()
    np.testing.assert_array_equal(np.diag(m.data), [2.0, 2.0, 2.0, 1.0])
    np.testing.assert_array_equal(m.data[3], [1.0, 2.0, 3.0, 1.0])
    assert m.transform_point(Vec3(1.0, 0.0, 0.0)) == Vec3(3.0, 2.0, 3.0)


def test_model_matrix_order():
    t = Transform3D(
        position=Vec3(1.0, -1.0, 0.5),
        size=Vec3(2.0, 3.0, 4.0),
        euler_angles=Vec3(0.1, 0.2, 0.3),
    )
    expected = Matrix4.identity()
    expected.scale(t.size)
    expected.rotate(t.euler_angles)
    expected.translate(t.position)
    assert t.to_matrix() == expected


def test_view_matrix_order():
    t = Transform3D(
        position=Vec3(1.0, -1.0, 0.5),
        size=Vec3(2.0, 3.0, 4.0),
        euler_angles=Vec3(0.1, 0.2, 0.3),
    )
    expected = Matrix4.identity()
    expected.translate(Vec3(-1.0, 1.0, -0.5))
    expected.rotate(t.euler_angles)
    expected.scale(t.size)
    assert t.to_view_matrix() == expected


def test_view_matrix_moves_camera_position_to_origin():
    t = Transform3D(position=Vec3(1.0, 2.0, 3.0))
    assert t.to_view_matrix().transform_point(Vec3(1.0, 2.0, 3.0)) == Vec3.ZERO

    t2 = Transform2D(position=Vec2(5.0, -5.0))
    assert t2.to_view_matrix().transform_point(Vec3(5.0, -5.0, 0.0)) == Vec3.ZERO


def test_transform2d_rotation():
    m = Transform2D(rotation=HALF_PI).to_matrix()
    assert m.data[0][0] == pytest.approx(0.0, abs=1e-6)
    assert m.data[0][1] == pytest.approx(-1.0)
    assert m.data[1][0] == pytest.approx(1.0)
    assert m.data[2][2] == 1.0


def test_transform2d_matches_manual_bake():
    t = Transform2D(position=Vec2(3.0, 4.0), size=Vec2(2.0, 0.5), rotation=0.25)
    expected = Matrix4.identity()
    expected.scale2d(t.size)
    expected.rotate2d(t.rotation)
    expected.translate2d(t.position)
    assert t.to_matrix() == expected


def test_into_matrix_overwrites_target():
    t = Transform3D(position=Vec3(1.0, 2.0, 3.0), euler_angles=Vec3(0.0, 0.5, 0.0))
    target = Matrix4(np.full((4, 4), 7.0))
    t.into_matrix(target)
    assert target == t.to_matrix()

    target = Matrix4.zero()
    t.into_view_matrix(target)
    assert target == t.to_view_matrix()


def test_into_matrix_refuses_constants():
    with pytest.raises(ValueError):
        Transform2D.IDENTITY.into_matrix(Matrix4.IDENTITY)


def test_lerp():
    a = Transform2D(position=Vec2(0.0, 0.0), size=Vec2(1.0, 1.0), rotation=0.0)
    b = Transform2D(position=Vec2(2.0, 4.0), size=Vec2(3.0, 3.0), rotation=1.0)
    mid = Transform2D.lerp(a, b, 0.5)
    assert mid == Transform2D(Vec2(1.0, 2.0), Vec2(2.0, 2.0), 0.5)

    c = Transform3D(euler_angles=Vec3(0.0, 0.0, 2.0))
    assert Transform3D.lerp(Transform3D.IDENTITY, c, 1.0) == c
