"""Two-dimensional vectors and the angle helpers used by the game."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import ClassVar, Iterator

_EPSILON = 1e-5


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector in screen coordinates (y grows downwards)."""

    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar["Vector2"]
    RIGHT: ClassVar["Vector2"]
    LEFT: ClassVar["Vector2"]
    UP: ClassVar["Vector2"]
    DOWN: ClassVar["Vector2"]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def dot(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    def angle_to(self, other: Vector2) -> float:
        """Angle in degrees between this vector (y flipped) and ``other``."""
        corrected = Vector2(self.x, -self.y)
        cosine = corrected.dot(other) / (corrected.length() * other.length())
        return radians_to_degrees(math.acos(max(-1.0, min(1.0, cosine))))

    def normalized(self) -> Vector2:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        return self / (length if length > 0.0 else 1.0)

    def rotated_by(self, angle: float) -> Vector2:
        """Rotate by ``angle`` radians using the game's rotation convention."""
        if is_nearly_equal(angle, 0.0):
            return self
        sin_a = math.sin(angle)
        cos_a = math.cos(angle)
        return Vector2(
            self.x * sin_a - self.y * cos_a,
            self.x * cos_a + self.y * sin_a,
        )

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector2:
        return Vector2(self.x / scalar, self.y / scalar)


Vector2.ZERO = Vector2(0.0, 0.0)
Vector2.RIGHT = Vector2(1.0, 0.0)
Vector2.LEFT = Vector2(-1.0, 0.0)
Vector2.UP = Vector2(0.0, -1.0)
Vector2.DOWN = Vector2(0.0, 1.0)


def random_range(low: int, high: int) -> int:
    """Random integer in the inclusive range ``[low, high]``."""
    return random.randint(low, high)


def is_nearly_equal(a: float, b: float) -> bool:
    return abs(a - b) <= _EPSILON


def radians_to_degrees(radians: float) -> float:
    return radians * (180.0 / math.pi)


def degrees_to_radians(degrees: float) -> float:
    return degrees * (math.pi / 180.0)


def direction_from_angle(angle: float) -> Vector2:
    """Unit direction for an angle in degrees (counter-clockwise, y down)."""
    safe_angle = 360.0 + angle if angle < 0.0 else angle
    radians = degrees_to_radians(safe_angle)
    return Vector2(math.cos(radians), -math.sin(radians))


def angle_from_direction(direction: Vector2) -> float:
    """Angle in degrees that a direction points to.

    Directions lying exactly on an axis yield 0.
    """
    normal = direction.normalized()
    angle = 0.0
    if normal.x > 0.0 and normal.y != 0.0:
        angle = math.asin(-normal.y)
    elif normal.x < 0.0 and normal.y > 0.0:
        angle = -math.acos(normal.x)
    elif normal.x < 0.0 and normal.y < 0.0:
        angle = math.acos(normal.x)
    return radians_to_degrees(angle)


def lerp(a: Vector2, target: Vector2, factor: float = 0.5) -> Vector2:
    """Move ``a`` towards ``target`` by ``factor``."""
    return (target - a) * factor + a