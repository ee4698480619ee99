"""Velocity-driven movement of a game object."""

from __future__ import annotations

from cosmicdodger.entity import Component, GameObject
from cosmicdodger.vector import Vector2, angle_from_direction, is_nearly_equal


class MovementComponent(Component):
    """Moves its parent along ``velocity`` at ``speed`` units per second.

    ``speed`` is kept within ``[0, max_speed]``.
    """

    def __init__(self, parent: GameObject, name: str = "NA_MovementComponent") -> None:
        super().__init__(parent, name)
        self.velocity: Vector2 = Vector2.ZERO
        self._speed = 0.0
        self._max_speed = 500.0
        self.rotation_follows_velocity = False
        self.clamp_to_screen = True

    @property
    def speed(self) -> float:
        return self._speed

    @speed.setter
    def speed(self, value: float) -> None:
        self._speed = min(max(value, 0.0), self._max_speed)

    @property
    def max_speed(self) -> float:
        return self._max_speed

    @max_speed.setter
    def max_speed(self, value: float) -> None:
        self._max_speed = max(value, 0.0)
        self._speed = min(max(self._speed, 0.0), self._max_speed)

    def update(self, delta_time: float) -> None:
        if self.rotation_follows_velocity and not is_nearly_equal(
            self.velocity.length(), 0.0
        ):
            self.parent.transform.rotation = angle_from_direction(self.velocity)
        self.add_position_delta(self.velocity * self._speed * delta_time)

    def add_position_delta(self, delta: Vector2) -> None:
        """Shift the parent's position by ``delta``."""
        transform = self.parent.transform
        transform.position = transform.position + delta