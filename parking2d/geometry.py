"""Plain 2D vectors and axis-aligned rectangles."""

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

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def length(self) -> float:
        """Return the Euclidean length."""
        return math.hypot(self.x, self.y)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def _spans(self) -> tuple[float, float, float, float]:
        return (
            min(self.left, self.right),
            max(self.left, self.right),
            min(self.top, self.bottom),
            max(self.top, self.bottom),
        )

    def intersects(self, other: Rect) -> bool:
        """Return True if the two rectangles overlap with a positive area."""
        l1, r1, t1, b1 = self._spans()
        l2, r2, t2, b2 = other._spans()
        return max(l1, l2) < min(r1, r2) and max(t1, t2) < min(b1, b2)