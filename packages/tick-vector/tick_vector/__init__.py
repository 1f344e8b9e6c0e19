"""tick-vector - Immutable 2D and 3D float vectors for the tick engine."""
from __future__ import annotations

from tick_vector import ieee
from tick_vector.vector2 import Vector2
from tick_vector.vector3 import Vector3

__all__ = [
    "Vector2",
    "Vector3",
    "ieee",
]
