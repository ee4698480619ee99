"""Meteors that drift across the screen and break apart when hit."""

from __future__ import annotations

from typing import Any, ClassVar, Optional

from cosmicdodger.animation import Animation, AnimationComponent
from cosmicdodger.collision import Collider2D, CollisionComponent, HitInfo
from cosmicdodger.entity import GameObject
from cosmicdodger.movement import MovementComponent
from cosmicdodger.transform import Transform
from cosmicdodger.vector import Vector2, random_range

_DESTROY_ANIMATION = "Destroy"
_DESTROY_FPS = 12
_COLLIDER_SCALE = 0.7
_SLOWDOWN_ON_HIT = 0.1


class Meteor(GameObject):
    """A spinning rock moving in a straight line.

    It removes itself after travelling ``max_distance`` or once its
    destruction animation has finished. ``world`` supplies ``player``,
    ``meteor_spawner`` and ``destroy_entity``.
    """

    max_speed: ClassVar[float] = 350.0
    max_distance: ClassVar[float] = 2000.0

    def __init__(
        self,
        transform: Transform,
        initial_velocity: Vector2,
        speed: float,
        name: str = "NA_Meteor",
        *,
        world: Any,
        resources: Any,
        game_state: Optional[Any] = None,
    ) -> None:
        super().__init__(transform.copy(), resources.meteor_texture, name)
        self.world = world
        self.game_state = game_state
        self._alive_time = 0.0
        self._distance_traveled = 0.0

        self.rotation_rate = 0
        while self.rotation_rate == 0:
            self.rotation_rate = random_range(-2, 2)

        self._movement = self.add_component(MovementComponent(self, "Movement Component"))
        self._movement.velocity = initial_velocity
        self._movement.max_speed = self.max_speed
        self._movement.speed = speed

        self._collision = self.add_component(CollisionComponent(self, "Collision Component"))
        self._collision.can_render = False
        self._collider = self._collision.add_collider(
            resources.meteor_texture.dimensions * _COLLIDER_SCALE,
            Vector2.ZERO,
            True,
            "Meteor Collision",
        )
        self._collider.set_collision_delegate(self.on_collision)
        if world.player is not None:
            self._collider.listen_for_collisions(world.player)

        self._animation = self.add_component(AnimationComponent(self, "Animation Component"))
        destroy = self._animation.add_animation(
            Animation(_DESTROY_ANIMATION, resources.meteor_destroy_frames, _DESTROY_FPS)
        )
        destroy.on_timeout = self._on_destroy_animation_finish

    @property
    def collider(self) -> Collider2D:
        return self._collider

    @property
    def collision_component(self) -> CollisionComponent:
        return self._collision

    @property
    def movement_component(self) -> MovementComponent:
        return self._movement

    @property
    def animation_component(self) -> AnimationComponent:
        return self._animation

    @property
    def distance_traveled(self) -> float:
        return self._distance_traveled

    def update(self, delta_time: float) -> None:
        super().update(delta_time)
        self._alive_time += delta_time
        self._distance_traveled = self._movement.speed * self._alive_time
        if self._distance_traveled > self.max_distance:
            self._delete()
        self.transform.rotation = self.transform.rotation + self.rotation_rate

    def on_collision(self, hit_info: HitInfo) -> None:
        """Stop colliding, slow down and play the destruction animation."""
        self._collider.disable()
        self._animation.play_animation(_DESTROY_ANIMATION)
        self.rotation_rate = 0
        self._movement.max_speed = self._movement.speed * _SLOWDOWN_ON_HIT
        target = hit_info.hit_game_object
        if (
            target is not None
            and target.display_name == "Player"
            and self.game_state is not None
        ):
            self.game_state.on_player_hit()

    def _on_destroy_animation_finish(self) -> None:
        self._delete()

    def _delete(self) -> None:
        spawner = self.world.meteor_spawner
        if spawner is not None:
            spawner.delete_meteor(self)
        else:
            self.world.destroy_entity(self)