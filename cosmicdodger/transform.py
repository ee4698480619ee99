"""Position, rotation and scale of things in the game world."""

from __future__ import annotations

from cosmicdodger.vector import Vector2


class Transform:
    """Position, rotation in degrees and scale.

    Assigning a rotation above 360 degrees wraps it down by one turn.
    """

    __slots__ = ("position", "_rotation", "scale")

    def __init__(
        self,
        position: Vector2 = Vector2.ZERO,
        rotation: float = 0.0,
        scale: float = 1.0,
    ) -> None:
        self.position = position
        self._rotation = rotation
        self.scale = scale

    @property
    def rotation(self) -> float:
        return self._rotation

    @rotation.setter
    def rotation(self, value: float) -> None:
        self._rotation = value - 360.0 if value > 360.0 else value

    def __add__(self, other: Transform) -> Transform:
        return Transform(
            self.position + other.position,
            self._rotation + other._rotation,
            self.scale * other.scale,
        )

    def __iadd__(self, other: Transform) -> Transform:
        combined = self + other
        self.position = combined.position
        self._rotation = combined._rotation
        self.scale = combined.scale
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transform):
            return NotImplemented
        return (
            self.position == other.position
            and self._rotation == other._rotation
            and self.scale == other.scale
        )

    def __repr__(self) -> str:
        return (
            f"Transform(position={self.position!r}, "
            f"rotation={self._rotation!r}, scale={self.scale!r})"
        )

    def copy(self) -> Transform:
        """An independent copy of this transform."""
        return Transform(self.position, self._rotation, self.scale)