"""Quaternions for 3D rotation."""

from __future__ import annotations

import math
from dataclasses import dataclass

from enginecore.matrix import Matrix
from enginecore.vector import Vector

_DEG_TO_RAD = 3.14159265359 / 180.0


@dataclass(frozen=True)
class Quat:
    """A quaternion ``w + xi + yj + zk``; the default is the identity rotation."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_axis_angle(cls, axis: Vector, angle: float) -> Quat:
        """Rotation of ``angle`` radians about ``axis``."""
        half = angle * 0.5
        s = math.sin(half)
        return cls(math.cos(half), axis.x * s, axis.y * s, axis.z * s)

    @classmethod
    def create_rotation(cls, roll: float, pitch: float, yaw: float) -> Quat:
        """Combine rotations about X, Y and Z given in degrees."""
        q_roll = cls.from_axis_angle(Vector(1.0, 0.0, 0.0), roll * _DEG_TO_RAD)
        q_pitch = cls.from_axis_angle(Vector(0.0, 1.0, 0.0), pitch * _DEG_TO_RAD)
        q_yaw = cls.from_axis_angle(Vector(0.0, 0.0, 1.0), yaw * _DEG_TO_RAD)
        return q_roll * q_pitch * q_yaw

    def __mul__(self, other: Quat) -> Quat:
        return Quat(
            self.w * other.w - self.x * other.x - self.y * other.y - self.z * other.z,
            self.w * other.x + self.x * other.w + self.y * other.z - self.z * other.y,
            self.w * other.y - self.x * other.z + self.y * other.w + self.z * other.x,
            self.w * other.z + self.x * other.y - self.y * other.x + self.z * other.w,
        )

    def rotate_vector(self, vec: Vector) -> Vector:
        """Rotate ``vec`` by this quaternion (q * v * conj(q))."""
        conjugate = Quat(self.w, -self.x, -self.y, -self.z)
        result = self * Quat(0.0, vec.x, vec.y, vec.z) * conjugate
        return Vector(result.x, result.y, result.z)

    def is_normalized(self) -> bool:
        """Whether this is a unit quaternion."""
        norm_sq = self.w * self.w + self.x * self.x + self.y * self.y + self.z * self.z
        return abs(norm_sq - 1.0) < 1e-6

    def normalize(self) -> Quat:
        """Unit quaternion in the same direction; raises for a zero quaternion."""
        magnitude = math.sqrt(
            self.w * self.w + self.x * self.x + self.y * self.y + self.z * self.z
        )
        return Quat(self.w / magnitude, self.x / magnitude, self.y / magnitude, self.z / magnitude)

    def to_matrix(self) -> Matrix:
        """Rotation matrix of this quaternion."""
        w, x, y, z = self.w, self.x, self.y, self.z
        return Matrix(
            [
                [1.0 - 2.0 * (y * y + z * z), 2.0 * (x * y - w * z), 2.0 * (x * z + w * y), 0.0],
                [2.0 * (x * y + w * z), 1.0 - 2.0 * (x * x + z * z), 2.0 * (y * z - w * x), 0.0],
                [2.0 * (x * z - w * y), 2.0 * (y * z + w * x), 1.0 - 2.0 * (x * x + y * y), 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )