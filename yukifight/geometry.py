"""Two-dimensional vectors and the circle and capsule hit tests."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scale: float) -> Vec2:
        return Vec2(self.x * scale, self.y * scale)

    __rmul__ = __mul__

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def length(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vec2:
        """Unit vector in the same direction; the zero vector stays zero."""
        size = self.length()
        if size == 0.0:
            return Vec2(0.0, 0.0)
        return Vec2(self.x / size, self.y / size)

    def dot(self, other: Vec2) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y


@dataclass
class Circle:
    """A hit circle: centre and radius."""

    cx: float = 0.0
    cy: float = 0.0
    r: float = 0.0

    @property
    def center(self) -> Vec2:
        return Vec2(self.cx, self.cy)


@dataclass
class Capsule:
    """A hit capsule: start point, extent vector to the end point, radius."""

    x: float = 0.0
    y: float = 0.0
    ex: float = 0.0
    ey: float = 0.0
    r: float = 0.0


def hit_circle(a: Circle, b: Circle) -> bool:
    """True when the circles overlap (touching does not count)."""
    distance = Vec2(b.cx - a.cx, b.cy - a.cy).length()
    return distance < a.r + b.r


def hit_capsule(circle: Circle, capsule: Capsule) -> bool:
    """True when the circle overlaps the capsule."""
    extent = Vec2(capsule.ex, capsule.ey)
    offset = Vec2(circle.cx - capsule.x, circle.cy - capsule.y)
    denominator = extent.dot(extent)
    t = extent.dot(offset) / denominator if denominator else 0.0
    t = min(max(t, 0.0), 1.0)
    cross_x = extent.x * t + capsule.x
    cross_y = extent.y * t + capsule.y
    cross_len_sq = (cross_x - circle.cx) ** 2 + (cross_y - circle.cy) ** 2
    size = circle.r + capsule.r
    return cross_len_sq < size * size