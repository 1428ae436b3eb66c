"""Row-major 4x4 matrices using the row-vector convention."""

from __future__ import annotations

import math
from typing import Iterable, Sequence, Union

from enginecore.vector import Vector, Vector4

Row = tuple[float, float, float, float]

_DEG_TO_RAD = 3.14159265359 / 180.0
_SINGULAR_EPSILON = 1e-6


def _det3(m: Sequence[Sequence[float]]) -> float:
    return (
        m[0][0] * (m[1][1] * m[2][2] - m[1][2] * m[2][1])
        - m[0][1] * (m[1][0] * m[2][2] - m[1][2] * m[2][0])
        + m[0][2] * (m[1][0] * m[2][1] - m[1][1] * m[2][0])
    )


def _minor(rows: Sequence[Sequence[float]], skip_row: int, skip_col: int) -> list[list[float]]:
    return [
        [value for c, value in enumerate(row) if c != skip_col]
        for r, row in enumerate(rows)
        if r != skip_row
    ]


class Matrix:
    """An immutable 4x4 matrix of floats."""

    __slots__ = ("_rows",)

    def __init__(self, rows: Iterable[Iterable[float]] | None = None):
        if rows is None:
            self._rows: tuple[Row, ...] = tuple((0.0, 0.0, 0.0, 0.0) for _ in range(4))
            return
        built = tuple(tuple(float(v) for v in row) for row in rows)
        if len(built) != 4 or any(len(row) != 4 for row in built):
            raise ValueError("a matrix needs exactly 4 rows of 4 values")
        self._rows = built  # type: ignore[assignment]

    @staticmethod
    def identity() -> Matrix:
        """The 4x4 identity matrix."""
        return Matrix([[1.0 if r == c else 0.0 for c in range(4)] for r in range(4)])

    @property
    def rows(self) -> tuple[Row, ...]:
        return self._rows

    def __getitem__(self, row: int) -> Row:
        return self._rows[row]

    def __iter__(self):
        return iter(self._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        return f"Matrix({[list(row) for row in self._rows]!r})"

    def __add__(self, other: Matrix) -> Matrix:
        return Matrix([[a + b for a, b in zip(ra, rb)] for ra, rb in zip(self, other)])

    def __sub__(self, other: Matrix) -> Matrix:
        return Matrix([[a - b for a, b in zip(ra, rb)] for ra, rb in zip(self, other)])

    def __mul__(self, other: Union[Matrix, float]) -> Matrix:
        if isinstance(other, Matrix):
            columns = list(zip(*other.rows))
            return Matrix(
                [[sum(a * b for a, b in zip(row, col)) for col in columns] for row in self]
            )
        if isinstance(other, (int, float)):
            return Matrix([[v * other for v in row] for row in self])
        return NotImplemented

    def __truediv__(self, scalar: float) -> Matrix:
        return Matrix([[v / scalar for v in row] for row in self])

    def transpose(self) -> Matrix:
        """Return the transposed matrix."""
        return Matrix(zip(*self._rows))

    def determinant(self) -> float:
        """Determinant by cofactor expansion along the first row."""
        return sum(
            (1 if i % 2 == 0 else -1) * value * _det3(_minor(self._rows, 0, i))
            for i, value in enumerate(self._rows[0])
        )

    def inverse(self) -> Matrix:
        """Inverse matrix; a (near-)singular matrix yields the identity."""
        det = self.determinant()
        if abs(det) < _SINGULAR_EPSILON:
            return Matrix.identity()
        inv_det = 1.0 / det
        # Inverse is the transposed cofactor matrix scaled by 1/det.
        return Matrix(
            [
                [
                    (1 if (i + j) % 2 == 0 else -1) * _det3(_minor(self._rows, i, j)) * inv_det
                    for i in range(4)
                ]
                for j in range(4)
            ]
        )

    @staticmethod
    def create_rotation(roll: float, pitch: float, yaw: float) -> Matrix:
        """Rotation from Euler angles in degrees, applied yaw, then pitch, then roll."""
        rad_roll = roll * _DEG_TO_RAD
        rad_pitch = pitch * _DEG_TO_RAD
        rad_yaw = yaw * _DEG_TO_RAD
        cr, sr = math.cos(rad_roll), math.sin(rad_roll)
        cp, sp = math.cos(rad_pitch), math.sin(rad_pitch)
        cy, sy = math.cos(rad_yaw), math.sin(rad_yaw)

        rotation_z = Matrix([[cy, sy, 0, 0], [-sy, cy, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1]])
        rotation_y = Matrix([[cp, 0, -sp, 0], [0, 1, 0, 0], [sp, 0, cp, 0], [0, 0, 0, 1]])
        rotation_x = Matrix([[1, 0, 0, 0], [0, cr, sr, 0], [0, -sr, cr, 0], [0, 0, 0, 1]])
        return rotation_x * rotation_y * rotation_z

    @staticmethod
    def create_scale(scale_x: float, scale_y: float, scale_z: float) -> Matrix:
        """Scale matrix."""
        return Matrix(
            [[scale_x, 0, 0, 0], [0, scale_y, 0, 0], [0, 0, scale_z, 0], [0, 0, 0, 1]]
        )

    @staticmethod
    def create_translation(position: Vector) -> Matrix:
        """Translation matrix; the offset sits in the last row."""
        return Matrix(
            [[1, 0, 0, 0], [0, 1, 0, 0], [0, 0, 1, 0], [position.x, position.y, position.z, 1]]
        )

    def transform_vector(self, v: Vector) -> Vector:
        """Transform a direction (w = 0), ignoring translation."""
        m = self._rows
        return Vector(
            v.x * m[0][0] + v.y * m[1][0] + v.z * m[2][0],
            v.x * m[0][1] + v.y * m[1][1] + v.z * m[2][1],
            v.x * m[0][2] + v.y * m[1][2] + v.z * m[2][2],
        )

    def transform_vector4(self, v: Vector4) -> Vector4:
        """Transform a 4D row vector."""
        x, y, z, w = (
            sum(c * m for c, m in zip(v, col)) for col in zip(*self._rows)
        )
        return Vector4(x, y, z, w)

    def transform_position(self, v: Vector) -> Vector:
        """Transform a point (w = 1), dividing by the resulting w when non-zero."""
        x, y, z, w = (
            v.x * col[0] + v.y * col[1] + v.z * col[2] + col[3] for col in zip(*self._rows)
        )
        if w != 0.0:
            return Vector(x / w, y / w, z / w)
        return Vector(x, y, z)