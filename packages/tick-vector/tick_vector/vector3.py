"""Immutable 3-component float vector."""
from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator, Sequence

from tick_vector.ieee import cos_or_nan, fdiv, sin_or_nan


def _expect_vector3(other: object, operation: str) -> None:
    if not isinstance(other, Vector3):
        raise TypeError(f"{operation} expects a Vector3, got {type(other).__name__}")


@dataclass(frozen=True, slots=True)
class Vector3:
    """3D vector of 64-bit floats with value semantics.

    Same contract as Vector2: component-wise operators against a Vector3,
    broadcast against a real scalar, exact equality, no mutation.
    Scalars are converted with float(), so an int too large for a float
    raises OverflowError.
    Non-real components raise TypeError at construction.
    """

    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        for name in ("x", "y", "z"):
            value = getattr(self, name)
            if not isinstance(value, Real):
                raise TypeError(
                    f"Vector3.{name} must be a real number, got {type(value).__name__}"
                )
            object.__setattr__(self, name, float(value))

    @classmethod
    def origin(cls) -> Vector3:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def unit_x(cls) -> Vector3:
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def unit_y(cls) -> Vector3:
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def unit_z(cls) -> Vector3:
        return cls(0.0, 0.0, 1.0)

    @classmethod
    def from_tuple(cls, values: Sequence[float]) -> Vector3:
        if len(values) != 3:
            raise ValueError(f"Vector3 needs 3 components, got {len(values)}")
        return cls(values[0], values[1], values[2])

    # --- Equality and display ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def __str__(self) -> str:
        return f"[ {self.x:.3f}, {self.y:.3f}, {self.z:.3f} ]"

    def to_string(self) -> str:
        return str(self)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    # --- Arithmetic ---

    def __add__(self, other: Vector3 | float) -> Vector3:
        if isinstance(other, Vector3):
            return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)
        if isinstance(other, Real):
            s = float(other)
            return Vector3(self.x + s, self.y + s, self.z + s)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: Vector3 | float) -> Vector3:
        if isinstance(other, Vector3):
            return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Real):
            s = float(other)
            return Vector3(self.x - s, self.y - s, self.z - s)
        return NotImplemented

    def __mul__(self, other: Vector3 | float) -> Vector3:
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, Real):
            s = float(other)
            return Vector3(self.x * s, self.y * s, self.z * s)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other: Vector3 | float) -> Vector3:
        if isinstance(other, Vector3):
            return Vector3(
                fdiv(self.x, other.x),
                fdiv(self.y, other.y),
                fdiv(self.z, other.z),
            )
        if isinstance(other, Real):
            s = float(other)
            return Vector3(fdiv(self.x, s), fdiv(self.y, s), fdiv(self.z, s))
        return NotImplemented

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __pos__(self) -> Vector3:
        return self

    # --- Geometry ---

    def is_origin(self) -> bool:
        return self.x == 0.0 and self.y == 0.0 and self.z == 0.0

    def dot(self, other: Vector3) -> float:
        _expect_vector3(other, "dot")
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        """Right-handed cross product, orthogonal to both operands."""
        _expect_vector3(other, "cross")
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def len(self) -> float:
        return math.sqrt(self.len2())

    def len2(self) -> float:
        return self.dot(self)

    def normalize(self) -> Vector3:
        """Unit vector in the same direction. The origin normalizes to itself."""
        if self.is_origin():
            return Vector3.origin()
        return self / self.len()

    def trim(self, max_len: float) -> Vector3:
        return self.normalize() * min(self.len(), max_len)

    def dist(self, other: Vector3) -> float:
        return math.sqrt(self.dist2(other))

    def dist2(self, other: Vector3) -> float:
        _expect_vector3(other, "dist2")
        dx = self.x - other.x
        dy = self.y - other.y
        dz = self.z - other.z
        return dx * dx + dy * dy + dz * dz

    def rotate(self, angle: float, axis: Vector3) -> Vector3:
        """Rotate by *angle* radians about *axis* (Rodrigues' formula).

        The axis is normalized first, so its length does not matter. An origin
        axis leaves only the ``cos(angle)`` diagonal, scaling the vector.
        """
        _expect_vector3(axis, "rotate")
        u = axis.normalize()
        c = cos_or_nan(angle)
        s = sin_or_nan(angle)
        t = 1.0 - c
        m1 = Vector3(c + u.x * u.x * t, u.x * u.y * t - u.z * s, u.x * u.z * t + u.y * s)
        m2 = Vector3(u.y * u.x * t + u.z * s, c + u.y * u.y * t, u.y * u.z * t - u.x * s)
        m3 = Vector3(u.z * u.x * t - u.y * s, u.z * u.y * t + u.x * s, c + u.z * u.z * t)
        return Vector3(self.dot(m1), self.dot(m2), self.dot(m3))

    def perpendicular(self) -> Vector3:
        """Rotate the XY projection 90 degrees counter-clockwise; Z is dropped to 0.

        Degenerates to the origin for vectors lying on the Z axis.
        """
        return Vector3(-self.y, self.x, 0.0)

    def lerp(self, other: Vector3, step: float) -> Vector3:
        _expect_vector3(other, "lerp")
        return self + (other - self) * step
