"""Invisible walls just inside the edges of the window."""

from __future__ import annotations

from cosmicdodger.collision import CollisionComponent
from cosmicdodger.entity import GameObject
from cosmicdodger.resources import TextureResource
from cosmicdodger.transform import Transform
from cosmicdodger.vector import Vector2
from cosmicdodger.window import Window

_BOUNDS_WIDTH = 50.0
_INSET = 10.0


class WindowBounds(GameObject):
    """Four colliders named LEFT, RIGHT, UP and DOWN along the window edges."""

    def __init__(self, name: str = "NA_WindowBounds") -> None:
        super().__init__(Transform(), TextureResource("Window", Vector2.ZERO, None), name)
        self._collision_component = self.add_component(
            CollisionComponent(self, "Collision Component")
        )
        self._collision_component.can_render = False

        width = float(Window.width)
        height = float(Window.height)
        half = _BOUNDS_WIDTH / 2.0
        add = self._collision_component.add_collider
        add(Vector2(_BOUNDS_WIDTH, height), Vector2(-half + _INSET, height / 2.0), True, "LEFT")
        add(
            Vector2(_BOUNDS_WIDTH, height),
            Vector2(width + half - _INSET, height / 2.0),
            True,
            "RIGHT",
        )
        add(Vector2(width, _BOUNDS_WIDTH), Vector2(width / 2.0, -half + _INSET), True, "UP")
        add(
            Vector2(width, _BOUNDS_WIDTH),
            Vector2(width / 2.0, height + half - _INSET),
            True,
            "DOWN",
        )

    @property
    def collision_component(self) -> CollisionComponent:
        return self._collision_component