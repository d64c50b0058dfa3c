"""Row-major 3x3 and 4x4 transformation matrices."""

from __future__ import annotations

import math
from collections.abc import Sequence

from a4engine.vectors import DEG2RAD, Vector3, Vector4


def _fmt(value: float) -> str:
    return f"{value:g}"


class _SquareMatrix:
    _size = 0

    def __init__(self, values: Sequence[float]) -> None:
        values = [float(v) for v in values]
        expected = self._size * self._size
        if len(values) != expected:
            raise ValueError(
                f"{type(self).__name__} needs {expected} values, got {len(values)}"
            )
        self._values = values

    @classmethod
    def _zero(cls):
        return cls([0.0] * (cls._size * cls._size))

    def _offset(self, index: tuple[int, int]) -> int:
        i, j = index
        if not (0 <= i < self._size and 0 <= j < self._size):
            raise IndexError(f"matrix index {index} out of range")
        return i * self._size + j

    def __getitem__(self, index: tuple[int, int]) -> float:
        return self._values[self._offset(index)]

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        self._values[self._offset(index)] = float(value)

    def transpose(self):
        """Return the transposed matrix."""
        n = self._size
        return type(self)(
            [self[i, j] for j in range(n) for i in range(n)]
        )

    def _matmul(self, other):
        n = self._size
        return type(self)(
            [
                sum(self[i, k] * other[k, j] for k in range(n))
                for i in range(n)
                for j in range(n)
            ]
        )

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._values!r})"


class Matrix3(_SquareMatrix):
    """A 3x3 matrix used for 2D affine transformations."""

    _size = 3

    def __init__(self, values: Sequence[float]) -> None:
        super().__init__(values)

    def __getitem__(self, index: tuple[int, int]) -> float:
        return super().__getitem__(index)

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        super().__setitem__(index, value)

    def determinant(self) -> float:
        v = self
        return (
            v[0, 0] * (v[1, 1] * v[2, 2] - v[2, 1] * v[1, 2])
            - v[0, 1] * (v[1, 0] * v[2, 2] - v[1, 2] * v[2, 0])
            + v[0, 2] * (v[1, 0] * v[2, 1] - v[1, 1] * v[2, 0])
        )

    def inverse(self) -> Matrix3:
        """Return the inverse; raises ValueError for a singular matrix."""
        det = self.determinant()
        if det == 0:
            raise ValueError("matrix is singular")
        inv = 1.0 / det
        v = self
        return Matrix3(
            [
                (v[1, 1] * v[2, 2] - v[2, 1] * v[1, 2]) * inv,
                -(v[0, 1] * v[2, 2] - v[0, 2] * v[2, 1]) * inv,
                (v[0, 1] * v[1, 2] - v[0, 2] * v[1, 1]) * inv,
                -(v[1, 0] * v[2, 2] - v[1, 2] * v[2, 0]) * inv,
                (v[0, 0] * v[2, 2] - v[0, 2] * v[2, 0]) * inv,
                -(v[0, 0] * v[1, 2] - v[1, 0] * v[0, 2]) * inv,
                (v[1, 0] * v[2, 1] - v[2, 0] * v[1, 1]) * inv,
                -(v[0, 0] * v[2, 1] - v[2, 0] * v[0, 1]) * inv,
                (v[0, 0] * v[1, 1] - v[1, 0] * v[0, 1]) * inv,
            ]
        )

    def transpose(self) -> Matrix3:
        return super().transpose()

    def transform_point(self, point: Sequence[float]) -> tuple[float, float]:
        """Apply the matrix to a 2D point given as ``(x, y)``."""
        x, y = point
        return (
            self[0, 0] * x + self[0, 1] * y + self[0, 2],
            self[1, 0] * x + self[1, 1] * y + self[1, 2],
        )

    def __mul__(self, other):
        if isinstance(other, Matrix3):
            return self._matmul(other)
        if isinstance(other, Sequence) and len(other) == 2:
            return self.transform_point(other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        return super().__eq__(other)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        r = [_fmt(v) for v in self._values]
        return (
            f"Matrix3({r[0]}, {r[1]}, {r[2]},\n"
            f"        {r[3]}, {r[4]}, {r[5]},\n"
            f"        {r[6]}, {r[7]}, {r[8]})"
        )

    @classmethod
    def identity(cls) -> Matrix3:
        return cls([1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0])

    @classmethod
    def rotate(cls, degree_angle: float) -> Matrix3:
        s = math.sin(degree_angle * DEG2RAD)
        c = math.cos(degree_angle * DEG2RAD)
        return cls([c, -s, 0.0, s, c, 0.0, 0.0, 0.0, 1.0])

    @classmethod
    def scale(cls, scale: Sequence[float]) -> Matrix3:
        sx, sy = scale
        return cls([sx, 0.0, 0.0, 0.0, sy, 0.0, 0.0, 0.0, 1.0])

    @classmethod
    def translate(cls, translation: Sequence[float]) -> Matrix3:
        tx, ty = translation
        return cls([1.0, 0.0, tx, 0.0, 1.0, ty, 0.0, 0.0, 1.0])


class Matrix4(_SquareMatrix):
    """A 4x4 matrix used for 3D affine transformations."""

    _size = 4

    def __init__(self, values: Sequence[float]) -> None:
        super().__init__(values)

    def __getitem__(self, index: tuple[int, int]) -> float:
        return super().__getitem__(index)

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        super().__setitem__(index, value)

    def inverse(self) -> Matrix4:
        """Return the inverse; raises ValueError for a singular matrix."""
        v = self
        a2323 = v[2, 2] * v[3, 3] - v[2, 3] * v[3, 2]
        a1323 = v[2, 1] * v[3, 3] - v[2, 3] * v[3, 1]
        a1223 = v[2, 1] * v[3, 2] - v[2, 2] * v[3, 1]
        a0323 = v[2, 0] * v[3, 3] - v[2, 3] * v[3, 0]
        a0223 = v[2, 0] * v[3, 2] - v[2, 2] * v[3, 0]
        a0123 = v[2, 0] * v[3, 1] - v[2, 1] * v[3, 0]
        a2313 = v[1, 2] * v[3, 3] - v[1, 3] * v[3, 2]
        a1313 = v[1, 1] * v[3, 3] - v[1, 3] * v[3, 1]
        a1213 = v[1, 1] * v[3, 2] - v[1, 2] * v[3, 1]
        a2312 = v[1, 2] * v[2, 3] - v[1, 3] * v[2, 2]
        a1312 = v[1, 1] * v[2, 3] - v[1, 3] * v[2, 1]
        a1212 = v[1, 1] * v[2, 2] - v[1, 2] * v[2, 1]
        a0313 = v[1, 0] * v[3, 3] - v[1, 3] * v[3, 0]
        a0213 = v[1, 0] * v[3, 2] - v[1, 2] * v[3, 0]
        a0312 = v[1, 0] * v[2, 3] - v[1, 3] * v[2, 0]
        a0212 = v[1, 0] * v[2, 2] - v[1, 2] * v[2, 0]
        a0113 = v[1, 0] * v[3, 1] - v[1, 1] * v[3, 0]
        a0112 = v[1, 0] * v[2, 1] - v[1, 1] * v[2, 0]

        det = (
            v[0, 0] * (v[1, 1] * a2323 - v[1, 2] * a1323 + v[1, 3] * a1223)
            - v[0, 1] * (v[1, 0] * a2323 - v[1, 2] * a0323 + v[1, 3] * a0223)
            + v[0, 2] * (v[1, 0] * a1323 - v[1, 1] * a0323 + v[1, 3] * a0123)
            - v[0, 3] * (v[1, 0] * a1223 - v[1, 1] * a0223 + v[1, 2] * a0123)
        )
        if det == 0:
            raise ValueError("matrix is singular")
        d = 1.0 / det

        return Matrix4(
            [
                d * (v[1, 1] * a2323 - v[1, 2] * a1323 + v[1, 3] * a1223),
                d * -(v[0, 1] * a2323 - v[0, 2] * a1323 + v[0, 3] * a1223),
                d * (v[0, 1] * a2313 - v[0, 2] * a1313 + v[0, 3] * a1213),
                d * -(v[0, 1] * a2312 - v[0, 2] * a1312 + v[0, 3] * a1212),
                d * -(v[1, 0] * a2323 - v[1, 2] * a0323 + v[1, 3] * a0223),
                d * (v[0, 0] * a2323 - v[0, 2] * a0323 + v[0, 3] * a0223),
                d * -(v[0, 0] * a2313 - v[0, 2] * a0313 + v[0, 3] * a0213),
                d * (v[0, 0] * a2312 - v[0, 2] * a0312 + v[0, 3] * a0212),
                d * (v[1, 0] * a1323 - v[1, 1] * a0323 + v[1, 3] * a0123),
                d * -(v[0, 0] * a1323 - v[0, 1] * a0323 + v[0, 3] * a0123),
                d * (v[0, 0] * a1313 - v[0, 1] * a0313 + v[0, 3] * a0113),
                d * -(v[0, 0] * a1312 - v[0, 1] * a0312 + v[0, 3] * a0112),
                d * -(v[1, 0] * a1223 - v[1, 1] * a0223 + v[1, 2] * a0123),
                d * (v[0, 0] * a1223 - v[0, 1] * a0223 + v[0, 2] * a0123),
                d * -(v[0, 0] * a1213 - v[0, 1] * a0213 + v[0, 2] * a0113),
                d * (v[0, 0] * a1212 - v[0, 1] * a0212 + v[0, 2] * a0112),
            ]
        )

    def transpose(self) -> Matrix4:
        return super().transpose()

    def transform_point(self, point):
        """Apply the matrix to a Vector4, a Vector3 or a 2D ``(x, y)`` point."""
        v = self
        if isinstance(point, Vector4):
            return Vector4(
                v[0, 0] * point.x + v[0, 1] * point.y + v[0, 2] * point.z + v[0, 3] * point.w,
                v[1, 0] * point.x + v[1, 1] * point.y + v[1, 2] * point.z + v[1, 3] * point.w,
                v[2, 0] * point.z + v[2, 1] * point.y + v[2, 2] * point.z + v[2, 3] * point.w,
                v[3, 0] * point.w + v[3, 1] * point.y + v[3, 2] * point.z + v[3, 3] * point.w,
            )
        if isinstance(point, Vector3):
            return Vector3(
                v[0, 0] * point.x + v[0, 1] * point.y + v[0, 2] * point.z + v[0, 3],
                v[1, 0] * point.x + v[1, 1] * point.y + v[1, 2] * point.z + v[1, 3],
                v[2, 0] * point.z + v[2, 1] * point.y + v[2, 2] * point.z + v[2, 3],
            )
        x, y = point
        return (
            v[0, 0] * x + v[0, 1] * y + v[0, 3],
            v[1, 0] * x + v[1, 1] * y + v[1, 3],
        )

    def __mul__(self, other):
        if isinstance(other, Matrix4):
            return self._matmul(other)
        if isinstance(other, (Vector3, Vector4)):
            return self.transform_point(other)
        if isinstance(other, Sequence) and len(other) == 2:
            return self.transform_point(other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        return super().__eq__(other)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        r = [_fmt(v) for v in self._values]
        return (
            f"Matrix4({r[0]}, {r[1]}, {r[2]}, {r[3]}\n"
            f"        {r[4]}, {r[5]}, {r[6]}, {r[7]}\n"
            f"        {r[8]}, {r[9]}, {r[10]}, {r[11]}\n"
            f"        {r[12]}, {r[13]}, {r[14]}, {r[15]})"
        )

    @classmethod
    def identity(cls) -> Matrix4:
        return cls(
            [
                1.0, 0.0, 0.0, 0.0,
                0.0, 1.0, 0.0, 0.0,
                0.0, 0.0, 1.0, 0.0,
                0.0, 0.0, 0.0, 1.0,
            ]
        )

    @classmethod
    def rotate_around_x(cls, degree_angle: float) -> Matrix4:
        s = math.sin(degree_angle * DEG2RAD)
        c = math.cos(degree_angle * DEG2RAD)
        return cls(
            [
                1.0, 0.0, 0.0, 0.0,
                0.0, c, s, 0.0,
                0.0, -s, c, 0.0,
                0.0, 0.0, 0.0, 1.0,
            ]
        )

    @classmethod
    def rotate_around_y(cls, degree_angle: float) -> Matrix4:
        s = math.sin(degree_angle * DEG2RAD)
        c = math.cos(degree_angle * DEG2RAD)
        return cls(
            [
                c, 0.0, -s, 0.0,
                0.0, 1.0, 0.0, 0.0,
                s, 0.0, c, 0.0,
                0.0, 0.0, 0.0, 1.0,
            ]
        )

    @classmethod
    def rotate_around_z(cls, degree_angle: float) -> Matrix4:
        s = math.sin(degree_angle * DEG2RAD)
        c = math.cos(degree_angle * DEG2RAD)
        return cls(
            [
                c, -s, 0.0, 0.0,
                s, c, 0.0, 0.0,
                0.0, 0.0, 1.0, 0.0,
                0.0, 0.0, 0.0, 1.0,
            ]
        )

    @classmethod
    def scale(cls, scale: Vector3) -> Matrix4:
        return cls(
            [
                scale.x, 0.0, 0.0, 0.0,
                0.0, scale.y, 0.0, 0.0,
                0.0, 0.0, scale.z, 0.0,
                0.0, 0.0, 0.0, 1.0,
            ]
        )

    @classmethod
    def translate(cls, translation: Vector3) -> Matrix4:
        return cls(
            [
                1.0, 0.0, 0.0, translation.x,
                0.0, 1.0, 0.0, translation.y,
                0.0, 0.0, 1.0, translation.z,
                0.0, 0.0, 0.0, 1.0,
            ]
        )