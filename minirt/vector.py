"""Three-component vectors and rays."""

from __future__ import annotations

import math
from dataclasses import dataclass

EPS = 1e-4
TMAX = 1e9


@dataclass(frozen=True, slots=True)
class Vec3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vec3:
        """Unit vector in the same direction, or the zero vector if too short."""
        length = self.length()
        if length < EPS:
            return Vec3(0.0, 0.0, 0.0)
        return Vec3(self.x / length, self.y / length, self.z / length)

    def clamp01(self) -> Vec3:
        """Clamp every component into [0, 1]."""
        return Vec3(*(min(max(c, 0.0), 1.0) for c in (self.x, self.y, self.z)))

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, k: float) -> Vec3:
        return Vec3(self.x * k, self.y * k, self.z * k)

    __rmul__ = __mul__

    def __truediv__(self, k: float) -> Vec3:
        return Vec3(self.x / k, self.y / k, self.z / k)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)


@dataclass(frozen=True, slots=True)
class Ray:
    """A ray with an origin and a direction."""

    origin: Vec3
    direction: Vec3

    def at(self, t: float) -> Vec3:
        """Point reached after travelling ``t`` along the direction."""
        return self.origin + self.direction * t