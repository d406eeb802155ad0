"""Immutable two-dimensional vectors used for positions, velocities and directions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Vec2:
    """A 2D vector with value semantics."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec2:
        return Vec2(self.x / scalar, self.y / scalar)

    def length(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vec2:
        """Unit vector in the same direction; a zero vector has none."""
        size = self.length()
        if size == 0.0:
            raise ValueError("cannot normalise a zero-length vector")
        return Vec2(self.x / size, self.y / size)

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vec2) -> float:
        """Z component of the 3D cross product of the two vectors."""
        return self.x * other.y - self.y * other.x

    def rotated(self, angle: float) -> Vec2:
        """Rotate counter-clockwise by ``angle`` radians."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Vec2(self.x * cos_a - self.y * sin_a, self.x * sin_a + self.y * cos_a)