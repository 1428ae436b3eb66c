import math

import pytest

from enginecore import jungle_math as jm
from enginecore.mathutil import PI
from enginecore.matrix import Matrix
from enginecore.quat import Quat
from enginecore.vector import Vector, Vector4


def _assert_matrix_close(a, b, tol=1e-6):
    for row_a, row_b in zip(a, b):
        assert list(row_a) == pytest.approx(list(row_b), abs=tol)


def _assert_vector_close(a, b, tol=1e-6):
    assert list(a) == pytest.approx(list(b), abs=tol)


def test_convert_v3_to_v4_zero_fourth_component():
    assert jm.convert_v3_to_v4(Vector(1.0, 2.0, 3.0)) == Vector4(1.0, 2.0, 3.0, 0.0)


def test_deg_rad_round_trip():
    for angle in (-270.0, -45.0, 0.0, 30.0, 123.4):
        assert jm.rad_to_deg(jm.deg_to_rad(angle)) == pytest.approx(angle)


def test_deg_to_rad_half_turn_is_pi():
    assert jm.deg_to_rad(180.0) == pytest.approx(PI)


def test_euler_to_quaternion_is_unit():
    q = jm.euler_to_quaternion(Vector(15.0, -40.0, 75.0))
    assert q.is_normalized()


@pytest.mark.parametrize(
    "euler",
    [Vector(10.0, 20.0, 30.0), Vector(-60.0, 45.0, 170.0), Vector(0.0, 0.0, -90.0)],
)
def test_euler_quaternion_round_trip(euler):
    back = jm.quaternion_to_euler(jm.euler_to_quaternion(euler))
    _assert_vector_close(back, euler, tol=1e-4)


def test_quaternion_to_euler_of_identity_is_zero():
    _assert_vector_close(jm.quaternion_to_euler(Quat()), Vector.ZERO)


def test_rotate_vector_yaw_turns_forward_into_right():
    rotated = jm.rotate_vector(Vector.FORWARD, Vector(0.0, 0.0, 90.0))
    _assert_vector_close(rotated, Vector.RIGHT)


def test_rotate_vector_euler_matches_quaternion():
    euler = Vector(20.0, 35.0, -50.0)
    origin = Vector(1.0, -2.0, 0.5)
    by_euler = jm.rotate_vector(origin, euler)
    by_quat = jm.rotate_vector(origin, jm.euler_to_quaternion(euler))
    _assert_vector_close(by_euler, by_quat)
    assert by_euler.magnitude() == pytest.approx(origin.magnitude())


@pytest.mark.parametrize("axis", [0, 1, 2])
def test_create_rotation_matrix_single_axis_matches_matrix(axis):
    angles = [0.0, 0.0, 0.0]
    angles[axis] = 37.0
    expected = Matrix.create_rotation(*angles)
    _assert_matrix_close(jm.create_rotation_matrix(Vector(*angles)), expected, tol=1e-5)


def test_create_rotation_matrix_is_orthonormal():
    m = jm.create_rotation_matrix(Vector(25.0, -70.0, 110.0))
    _assert_matrix_close(m * m.transpose(), Matrix.identity())
    assert m.determinant() == pytest.approx(1.0)


def test_model_matrix_euler_and_identity_quat_agree():
    translation = Vector(5.0, 6.0, 7.0)
    scale = Vector(2.0, 3.0, 4.0)
    by_euler = jm.create_model_matrix(translation, Vector.ZERO, scale)
    by_quat = jm.create_model_matrix(translation, Quat(), scale)
    _assert_matrix_close(by_euler, by_quat)


def test_model_matrix_translates_origin_and_scales_axes():
    translation = Vector(5.0, 6.0, 7.0)
    scale = Vector(2.0, 3.0, 4.0)
    m = jm.create_model_matrix(translation, Vector.ZERO, scale)
    _assert_vector_close(m.transform_position(Vector.ZERO), translation)
    _assert_vector_close(m.transform_vector(Vector.FORWARD), Vector(scale.x, 0.0, 0.0))


def test_view_matrix_moves_eye_to_origin_and_target_onto_z():
    eye = Vector(1.0, 2.0, 3.0)
    target = Vector(4.0, 2.0, 3.0)
    view = jm.create_view_matrix(eye, target, Vector.UP)
    _assert_vector_close(view.transform_position(eye), Vector.ZERO)
    moved = view.transform_position(target)
    assert moved.x == pytest.approx(0.0, abs=1e-6)
    assert moved.y == pytest.approx(0.0, abs=1e-6)
    assert moved.z == pytest.approx(eye.distance(target))


def test_projection_maps_near_and_far_planes_to_depth_range():
    near, far = 0.5, 100.0
    proj = jm.create_projection_matrix(math.radians(60.0), 16 / 9, near, far)
    assert proj.transform_position(Vector(0.0, 0.0, near)).z == pytest.approx(0.0, abs=1e-6)
    assert proj.transform_position(Vector(0.0, 0.0, far)).z == pytest.approx(1.0)


def test_ortho_projection_maps_box_corner_to_unit_cube():
    width, height, near, far = 8.0, 6.0, 1.0, 11.0
    ortho = jm.create_ortho_projection_matrix(width, height, near, far)
    corner = ortho.transform_position(Vector(width / 2, height / 2, far))
    _assert_vector_close(corner, Vector.ONE)
    assert ortho.transform_position(Vector(0.0, 0.0, near)).z == pytest.approx(0.0, abs=1e-9)