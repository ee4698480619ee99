"""Collectable stars that float in place and award a point."""

from __future__ import annotations

from typing import Any, Optional

from cosmicdodger.collision import Collider2D, CollisionComponent, HitInfo
from cosmicdodger.entity import GameObject
from cosmicdodger.sound import Sound
from cosmicdodger.transform import Transform
from cosmicdodger.vector import Vector2

_COLLIDER_SCALE = 0.7


class Pickup(GameObject):
    """Bobs up and down; touching it scores a point and removes it.

    ``world`` supplies ``player``, ``pickup_spawner`` and ``destroy_entity``.
    """

    max_floating_distance = 10.0

    def __init__(
        self,
        transform: Transform,
        name: str = "NA_FuelGrab",
        *,
        world: Any,
        resources: Any,
        game_state: Optional[Any] = None,
    ) -> None:
        super().__init__(transform.copy(), resources.pickup_texture, name)
        self.world = world
        self.game_state = game_state
        self._pick_up_sound = Sound(resources.pick_up_sound, 0.5)
        self.start_position = self.transform.position
        self.velocity = Vector2(0.0, -60.0)

        self.transform.rotation = 90.0
        self._collision = self.add_component(CollisionComponent(self, "Collision Component"))
        self._collision.can_render = False
        self._collider = self._collision.add_collider(
            resources.meteor_texture.dimensions * _COLLIDER_SCALE,
            Vector2.ZERO,
            True,
            "Fuel Grab Collision",
        )
        self._collider.set_collision_delegate(self._on_collision)
        if world.player is not None:
            self._collider.listen_for_collisions(world.player)

    @property
    def collider(self) -> Collider2D:
        return self._collider

    def update(self, delta_time: float) -> None:
        super().update(delta_time)
        self._bounce(delta_time)

    def _on_collision(self, hit_info: HitInfo) -> None:
        self._pick_up_sound.play()
        spawner = self.world.pickup_spawner
        if spawner is not None:
            spawner.delete_pickup(self)
        else:
            self.world.destroy_entity(self)
        if self.game_state is not None:
            self.game_state.add_score(1)

    def _bounce(self, delta_time: float) -> None:
        current = self.transform.position
        if (current - self.start_position).length() > self.max_floating_distance:
            self.start_position = (
                self.start_position + self.velocity.normalized() * self.max_floating_distance
            )
            self.velocity = self.velocity * -1
        else:
            self.transform.position = current + self.velocity * delta_time