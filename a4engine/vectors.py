"""Three- and four-component vectors and angle constants."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

PI = math.pi
DEG2RAD = PI / 180.0
RAD2DEG = 180.0 / PI


def _fmt(value: float) -> str:
    return f"{value:g}"


@dataclass(frozen=True)
class Vector3:
    """An immutable 3D vector with component-wise arithmetic."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def splat(cls, value: float) -> Vector3:
        """Return a vector with every component set to ``value``."""
        return cls(value, value, value)

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Vector3 | float) -> Vector3:
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, Real):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Vector3:
        if isinstance(other, Real):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __truediv__(self, other: Vector3 | float) -> Vector3:
        if isinstance(other, Vector3):
            return Vector3(self.x / other.x, self.y / other.y, self.z / other.z)
        if isinstance(other, Real):
            return Vector3(self.x / other, self.y / other, self.z / other)
        return NotImplemented

    def __str__(self) -> str:
        return f"Vector3({_fmt(self.x)}, {_fmt(self.y)}, {_fmt(self.z)})"


@dataclass(frozen=True)
class Vector4:
    """An immutable 4D vector with component-wise arithmetic."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    @classmethod
    def splat(cls, value: float) -> Vector4:
        """Return a vector with every component set to ``value``."""
        return cls(value, value, value, value)

    def __add__(self, other: Vector4) -> Vector4:
        if not isinstance(other, Vector4):
            return NotImplemented
        return Vector4(
            self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w
        )

    def __sub__(self, other: Vector4) -> Vector4:
        if not isinstance(other, Vector4):
            return NotImplemented
        return Vector4(
            self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w
        )

    def __mul__(self, other: Vector4 | float) -> Vector4:
        if isinstance(other, Vector4):
            return Vector4(
                self.x * other.x, self.y * other.y, self.z * other.z, self.w * other.w
            )
        if isinstance(other, Real):
            return Vector4(self.x * other, self.y * other, self.z * other, self.w * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Vector4:
        if isinstance(other, Real):
            return Vector4(self.x * other, self.y * other, self.z * other, self.w * other)
        return NotImplemented

    def __truediv__(self, other: Vector4 | float) -> Vector4:
        if isinstance(other, Vector4):
            return Vector4(
                self.x / other.x, self.y / other.y, self.z / other.z, self.w / other.w
            )
        if isinstance(other, Real):
            return Vector4(self.x / other, self.y / other, self.z / other, self.w / other)
        return NotImplemented

    def __str__(self) -> str:
        return (
            f"Vector4({_fmt(self.x)}, {_fmt(self.y)}, "
            f"{_fmt(self.z)}, {_fmt(self.w)})"
        )