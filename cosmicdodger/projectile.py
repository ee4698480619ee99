"""Laser shots fired by the player."""

from __future__ import annotations

from typing import Any, Optional

from cosmicdodger.collision import Collider2D, CollisionComponent, HitInfo
from cosmicdodger.entity import GameObject
from cosmicdodger.meteor import Meteor
from cosmicdodger.movement import MovementComponent
from cosmicdodger.sound import Sound
from cosmicdodger.transform import Transform
from cosmicdodger.vector import Vector2


class Projectile(GameObject):
    """Flies along its velocity, destroys meteors and bounces off the window edges.

    ``world`` supplies ``destroy_entity``.
    """

    max_bounces = 1

    def __init__(
        self,
        transform: Transform,
        name: str = "NA_Projectile",
        *,
        world: Any,
        resources: Any,
        game_state: Optional[Any] = None,
    ) -> None:
        super().__init__(transform.copy(), resources.projectile_texture, name)
        self.world = world
        self.game_state = game_state
        self._hit_sound = Sound(resources.projectile_hit_sound, 0.5)
        self.bounces = 0

        self._collision = self.add_component(CollisionComponent(self, "Collision Component"))
        self._collision.can_render = False
        self._collider = self._collision.add_collider(
            Vector2(18.0, 18.0), Vector2(0.0, -25.0), True, "Basic Collision"
        )
        self._collider.set_collision_delegate(self._on_collision)

        self._movement = self.add_component(MovementComponent(self, "Movement Component"))
        self._movement.max_speed = 2000.0
        self._movement.speed = 1500.0
        self._movement.rotation_follows_velocity = True

        self.start_position = self.transform.position

    @property
    def collider(self) -> Collider2D:
        return self._collider

    @property
    def collision_component(self) -> CollisionComponent:
        return self._collision

    @property
    def movement_component(self) -> MovementComponent:
        return self._movement

    def set_window_collisions(self, window_bounds: Any) -> None:
        """Bounce off (or stop at) the colliders of the window bounds."""
        self._collider.listen_for_collisions(window_bounds.collision_component.colliders)

    def update(self, delta_time: float) -> None:
        super().update(delta_time)

    def _on_collision(self, hit_info: HitInfo) -> None:
        target = hit_info.hit_game_object
        if target is None:
            return
        if target.display_name == "NA_Meteor":
            self.world.destroy_entity(self)
            if self.game_state is not None:
                self.game_state.add_score(1)
            self._hit_sound.play()
            if isinstance(target, Meteor):
                target.on_collision(
                    HitInfo(
                        has_hit=hit_info.has_hit,
                        hit_location=hit_info.hit_location,
                        hit_collider=self._collider,
                        hit_game_object=self,
                    )
                )
        elif target.display_name == "Window Bounds":
            self.bounces += 1
            if self.bounces >= self.max_bounces:
                self.world.destroy_entity(self)
                return
            velocity = self._movement.velocity
            side = hit_info.hit_collider.display_name if hit_info.hit_collider else ""
            if side in ("UP", "DOWN"):
                self._movement.velocity = Vector2(velocity.x, -velocity.y)
            elif side in ("RIGHT", "LEFT"):
                self._movement.velocity = Vector2(-velocity.x, velocity.y)