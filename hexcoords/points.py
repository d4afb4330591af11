"""Screen-space points and displacement vectors."""

from __future__ import annotations

from dataclasses import dataclass
from math import hypot


@dataclass(frozen=True, slots=True)
class Vector2:
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class Point:
    """An immutable pixel coordinate. Y grows downward, as on screen."""

    x: float
    y: float

    def delta(self, other: Point) -> Vector2:
        """Return the displacement from ``other`` to this point."""

        return Vector2(self.x - other.x, self.y - other.y)

    def distance(self, other: Point) -> float:
        return hypot(self.x - other.x, self.y - other.y)

    def translate(self, v: Vector2) -> Point:
        return Point(self.x + v.x, self.y + v.y)

    def __add__(self, other: object) -> Point:
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.translate(other)

    def __sub__(self, other: object) -> Vector2:
        if not isinstance(other, Point):
            return NotImplemented
        return self.delta(other)

    def __str__(self) -> str:
        return f"({self.x:f}, {self.y:f})"


__all__ = ["Point", "Vector2"]
