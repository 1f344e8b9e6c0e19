"""Immutable 2-component float vector."""
from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator, Sequence

from tick_vector.ieee import TAU, acos_or_nan, cos_or_nan, fdiv, sin_or_nan


def _expect_vector2(other: object, operation: str) -> None:
    if not isinstance(other, Vector2):
        raise TypeError(f"{operation} expects a Vector2, got {type(other).__name__}")


@dataclass(frozen=True, slots=True)
class Vector2:
    """2D vector of 64-bit floats with value semantics.

    Operators work component-wise against another Vector2 and broadcast
    against a real scalar. Nothing mutates; every operation returns a new
    vector. Equality is exact, with no tolerance.
    Scalars are converted with float(), so an int too large for a float
    raises OverflowError.
    Non-real components raise TypeError at construction.
    """

    x: float
    y: float

    def __post_init__(self) -> None:
        for name in ("x", "y"):
            value = getattr(self, name)
            if not isinstance(value, Real):
                raise TypeError(
                    f"Vector2.{name} must be a real number, got {type(value).__name__}"
                )
            object.__setattr__(self, name, float(value))

    @classmethod
    def origin(cls) -> Vector2:
        return cls(0.0, 0.0)

    @classmethod
    def unit_x(cls) -> Vector2:
        return cls(1.0, 0.0)

    @classmethod
    def unit_y(cls) -> Vector2:
        return cls(0.0, 1.0)

    @classmethod
    def from_polar(cls, radius: float, angle: float) -> Vector2:
        """Build the Cartesian vector for *radius* at *angle* radians."""
        return cls(radius * cos_or_nan(angle), radius * sin_or_nan(angle))

    @classmethod
    def from_tuple(cls, values: Sequence[float]) -> Vector2:
        if len(values) != 2:
            raise ValueError(f"Vector2 needs 2 components, got {len(values)}")
        return cls(values[0], values[1])

    # --- Equality and display ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __str__(self) -> str:
        return f"[ {self.x:.3f}, {self.y:.3f} ]"

    def to_string(self) -> str:
        return str(self)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y))

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    # --- Arithmetic ---

    def __add__(self, other: Vector2 | float) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x + other.x, self.y + other.y)
        if isinstance(other, Real):
            s = float(other)
            return Vector2(self.x + s, self.y + s)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: Vector2 | float) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x - other.x, self.y - other.y)
        if isinstance(other, Real):
            s = float(other)
            return Vector2(self.x - s, self.y - s)
        return NotImplemented

    def __mul__(self, other: Vector2 | float) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        if isinstance(other, Real):
            s = float(other)
            return Vector2(self.x * s, self.y * s)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other: Vector2 | float) -> Vector2:
        # Zero divisors give inf/nan components, never ZeroDivisionError.
        if isinstance(other, Vector2):
            return Vector2(fdiv(self.x, other.x), fdiv(self.y, other.y))
        if isinstance(other, Real):
            s = float(other)
            return Vector2(fdiv(self.x, s), fdiv(self.y, s))
        return NotImplemented

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __pos__(self) -> Vector2:
        return self

    # --- Geometry ---

    def is_origin(self) -> bool:
        return self.x == 0.0 and self.y == 0.0

    def dot(self, other: Vector2) -> float:
        _expect_vector2(other, "dot")
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector2) -> float:
        """Z component of the 3D cross product; positive when *other* lies counter-clockwise."""
        _expect_vector2(other, "cross")
        return self.x * other.y - self.y * other.x

    def len(self) -> float:
        return math.sqrt(self.len2())

    def len2(self) -> float:
        """Squared length. Cheaper than len() when only comparing magnitudes."""
        return self.dot(self)

    def normalize(self) -> Vector2:
        """Unit vector in the same direction. The origin normalizes to itself."""
        if self.is_origin():
            return Vector2.origin()
        return self / self.len()

    def trim(self, max_len: float) -> Vector2:
        """Scale down to *max_len* if longer, otherwise keep the same length."""
        return self.normalize() * min(self.len(), max_len)

    def dist(self, other: Vector2) -> float:
        return math.sqrt(self.dist2(other))

    def dist2(self, other: Vector2) -> float:
        _expect_vector2(other, "dist2")
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def rotate(self, angle: float) -> Vector2:
        """Rotate counter-clockwise by *angle* radians."""
        c = cos_or_nan(angle)
        s = sin_or_nan(angle)
        return Vector2(c * self.x - s * self.y, s * self.x + c * self.y)

    def perpendicular(self) -> Vector2:
        return Vector2(-self.y, self.x)

    def angle_to(self, other: Vector2) -> float:
        """Bearing of the vector pointing from *other* to this one, in (-pi, pi]."""
        _expect_vector2(other, "angle_to")
        return math.atan2(self.y - other.y, self.x - other.x)

    def angle_between(self, other: Vector2) -> float:
        """Unsigned angle between the two directions, in [0, pi].

        nan when either vector has zero length, or when rounding pushes the
        cosine outside [-1, 1].
        """
        return acos_or_nan(fdiv(self.dot(other), self.len() * other.len()))

    def to_polar(self) -> tuple[float, float]:
        """Return ``(radius, angle)`` with the angle in (0, 2*pi].

        Angles of zero or below are shifted up by 2*pi, so a vector on the
        positive X axis reports 2*pi rather than 0.
        """
        radius = self.len()
        angle = math.atan2(self.y, self.x)
        if angle <= 0.0:
            angle += TAU
        return (radius, angle)

    def lerp(self, other: Vector2, step: float) -> Vector2:
        """Linear interpolation; *step* outside [0, 1] extrapolates."""
        _expect_vector2(other, "lerp")
        return self + (other - self) * step
