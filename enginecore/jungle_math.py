"""Camera, projection and Euler/quaternion conversion helpers."""

from __future__ import annotations

import math
from typing import Union

from enginecore.mathutil import PI
from enginecore.matrix import Matrix
from enginecore.quat import Quat
from enginecore.vector import Vector, Vector4


def convert_v3_to_v4(vec3: Vector) -> Vector4:
    """Extend a 3D vector with a zero fourth component."""
    return Vector4(vec3.x, vec3.y, vec3.z, 0.0)


def create_model_matrix(translation: Vector, rotation: Union[Vector, Quat], scale: Vector) -> Matrix:
    """Scale, then rotate, then translate.

    ``rotation`` is either Euler angles in degrees (roll, pitch, yaw) as a
    ``Vector`` or a ``Quat``.
    """
    if isinstance(rotation, Quat):
        rotation_matrix = rotation.to_matrix()
    else:
        rotation_matrix = Matrix.create_rotation(rotation.x, rotation.y, rotation.z)
    return (
        Matrix.create_scale(scale.x, scale.y, scale.z)
        * rotation_matrix
        * Matrix.create_translation(translation)
    )


def create_view_matrix(eye: Vector, target: Vector, up: Vector) -> Matrix:
    """Left-handed look-at view matrix."""
    z_axis = (target - eye).normalize()
    x_axis = up.cross(z_axis).normalize()
    y_axis = z_axis.cross(x_axis)
    return Matrix(
        [
            [x_axis.x, y_axis.x, z_axis.x, 0.0],
            [x_axis.y, y_axis.y, z_axis.y, 0.0],
            [x_axis.z, y_axis.z, z_axis.z, 0.0],
            [-x_axis.dot(eye), -y_axis.dot(eye), -z_axis.dot(eye), 1.0],
        ]
    )


def create_projection_matrix(fov: float, aspect: float, near_plane: float, far_plane: float) -> Matrix:
    """Left-handed perspective projection mapping depth to ``[0, 1]``; ``fov`` in radians."""
    tan_half_fov = math.tan(fov / 2.0)
    depth = far_plane - near_plane
    return Matrix(
        [
            [1.0 / (aspect * tan_half_fov), 0.0, 0.0, 0.0],
            [0.0, 1.0 / tan_half_fov, 0.0, 0.0],
            [0.0, 0.0, far_plane / depth, 1.0],
            [0.0, 0.0, -(near_plane * far_plane) / depth, 0.0],
        ]
    )


def create_ortho_projection_matrix(width: float, height: float, near_plane: float, far_plane: float) -> Matrix:
    """Left-handed orthographic projection mapping depth to ``[0, 1]``."""
    r = width * 0.5
    t = height * 0.5
    inv_depth = 1.0 / (far_plane - near_plane)
    return Matrix(
        [
            [1.0 / r, 0.0, 0.0, 0.0],
            [0.0, 1.0 / t, 0.0, 0.0],
            [0.0, 0.0, inv_depth, 0.0],
            [0.0, 0.0, -near_plane * inv_depth, 1.0],
        ]
    )


def rotate_vector(origin: Vector, rotation: Union[Vector, Quat]) -> Vector:
    """Rotate ``origin`` by a quaternion or by Euler angles in degrees."""
    if isinstance(rotation, Quat):
        return rotation.rotate_vector(origin)
    return euler_to_quaternion(rotation).rotate_vector(origin)


def create_rotation_matrix(rotation: Vector) -> Matrix:
    """Rotation matrix from Euler degrees, composed as X, then Y, then Z quaternions."""
    quat_x = Quat.from_axis_angle(Vector(1.0, 0.0, 0.0), deg_to_rad(rotation.x))
    quat_y = Quat.from_axis_angle(Vector(0.0, 1.0, 0.0), deg_to_rad(rotation.y))
    quat_z = Quat.from_axis_angle(Vector(0.0, 0.0, 1.0), deg_to_rad(rotation.z))
    combined = (quat_x * quat_y * quat_z).normalize()
    # Row-vector convention: the transpose of the column-vector rotation matrix.
    return combined.to_matrix().transpose()


def rad_to_deg(radian: float) -> float:
    """Convert radians to degrees."""
    return radian * (180.0 / PI)


def deg_to_rad(degree: float) -> float:
    """Convert degrees to radians."""
    return degree * (PI / 180.0)


def euler_to_quaternion(euler_degrees: Vector) -> Quat:
    """Quaternion from Euler angles in degrees: x roll, y pitch, z yaw."""
    half_yaw = deg_to_rad(euler_degrees.z) * 0.5
    half_pitch = deg_to_rad(euler_degrees.y) * 0.5
    half_roll = deg_to_rad(euler_degrees.x) * 0.5

    cos_yaw, sin_yaw = math.cos(half_yaw), math.sin(half_yaw)
    cos_pitch, sin_pitch = math.cos(half_pitch), math.sin(half_pitch)
    cos_roll, sin_roll = math.cos(half_roll), math.sin(half_roll)

    return Quat(
        cos_yaw * cos_pitch * cos_roll + sin_yaw * sin_pitch * sin_roll,
        cos_yaw * cos_pitch * sin_roll - sin_yaw * sin_pitch * cos_roll,
        cos_yaw * sin_pitch * cos_roll + sin_yaw * cos_pitch * sin_roll,
        sin_yaw * cos_pitch * cos_roll - cos_yaw * sin_pitch * sin_roll,
    )


def quaternion_to_euler(quat: Quat) -> Vector:
    """Euler angles in degrees (x roll, y pitch, z yaw) of a quaternion."""
    q = quat

    sin_yaw = 2.0 * (q.w * q.z + q.x * q.y)
    cos_yaw = 1.0 - 2.0 * (q.y * q.y + q.z * q.z)
    yaw = rad_to_deg(math.atan2(sin_yaw, cos_yaw))

    sin_pitch = 2.0 * (q.w * q.y - q.z * q.x)
    if abs(sin_pitch) >= 1.0:
        # Gimbal lock: clamp to +/- 90 degrees.
        pitch = rad_to_deg(math.copysign(PI / 2, sin_pitch))
    else:
        pitch = rad_to_deg(math.asin(sin_pitch))

    sin_roll = 2.0 * (q.w * q.x + q.y * q.z)
    cos_roll = 1.0 - 2.0 * (q.x * q.x + q.y * q.y)
    roll = rad_to_deg(math.atan2(sin_roll, cos_roll))

    return Vector(roll, pitch, yaw)