"""The player's ship, its input handling and its gun."""

from __future__ import annotations

from typing import Any, ClassVar, Optional

import pygame

from cosmicdodger.collision import Collider2D, CollisionComponent, HitInfo
from cosmicdodger.entity import Component, GameObject
from cosmicdodger.movement import MovementComponent
from cosmicdodger.projectile import Projectile
from cosmicdodger.sound import Sound
from cosmicdodger.transform import Transform
from cosmicdodger.vector import (
    Vector2,
    angle_from_direction,
    direction_from_angle,
    lerp,
)

_LEFT_MOUSE_BUTTON = 1
_MOUSE_ON_PLAYER_DISTANCE = 40.0
_MIN_MOVE_DISTANCE = 120.0
_ACCELERATION = 15.0
_TURN_FACTOR = 0.2


class Player(GameObject):
    """The ship: turns towards the mouse and thrusts while W is held.

    ``world`` supplies the frame's input and the entity registry.
    """

    def __init__(
        self,
        hud: Any,
        name: str = "NA_Player",
        *,
        world: Any,
        resources: Any,
        game_state: Optional[Any] = None,
        start_position: Optional[Vector2] = None,
    ) -> None:
        if hud is None:
            raise ValueError("a player needs a HUD")
        super().__init__(Transform(), resources.player_texture, name)
        self.world = world
        self.resources = resources
        self.game_state = game_state
        self._hud = hud
        self._is_mouse_on_player = True
        self._look_at_direction = Vector2.ZERO
        self.can_move = False
        self._window_bounds: Optional[Any] = None
        self._input: Optional[PlayerInputComponent] = None
        self._shooting: Optional[ShootingComponent] = None

        if start_position is None:
            start_position = (
                game_state.player_start_position if game_state is not None else Vector2.ZERO
            )
        self.transform = Transform(start_position, 90.0)

        self._movement = self.add_component(MovementComponent(self, "Movement Component"))
        self._movement.max_speed = 600.0

        self._collision = self.add_component(CollisionComponent(self, "Collision Component"))
        self._collision.can_render = False
        self._collider = self._collision.add_collider(
            resources.player_texture.dimensions * 0.85, Vector2.ZERO, True, "Ship Collision"
        )
        self._collider.set_collision_delegate(self._on_collision)

        self._input = self.add_component(PlayerInputComponent(self, "Input Component"))
        self._shooting = self.add_component(ShootingComponent(self, "Shoot Component"))

    @property
    def hud(self) -> Any:
        return self._hud

    @property
    def window_bounds(self) -> Any:
        if self._window_bounds is None:
            raise RuntimeError("the player has no window bounds set")
        return self._window_bounds

    @property
    def is_mouse_on_player(self) -> bool:
        return self._is_mouse_on_player

    @property
    def look_at_direction(self) -> Vector2:
        return self._look_at_direction

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
    def input_component(self) -> "PlayerInputComponent":
        return self._input

    @property
    def shooting_component(self) -> "ShootingComponent":
        return self._shooting

    def set_window_bounds(self, window_bounds: Any) -> None:
        """Remember the window bounds and collide with their walls."""
        self._window_bounds = window_bounds
        self._collider.listen_for_collisions(window_bounds.collision_component.colliders)

    def update(self, delta_time: float) -> None:
        super().update(delta_time)

        center = self.transform.position + self.center_point
        to_mouse = self.world.mouse_position - center
        distance = to_mouse.length()
        self._is_mouse_on_player = distance < _MOUSE_ON_PLAYER_DISTANCE
        if not self._is_mouse_on_player:
            current = direction_from_angle(self.transform.rotation)
            self._look_at_direction = lerp(current, to_mouse.normalized(), _TURN_FACTOR)
            self.transform.rotation = angle_from_direction(self._look_at_direction)

        speed = self._movement.speed
        if self.can_move and distance >= _MIN_MOVE_DISTANCE:
            self._movement.velocity = self._look_at_direction
            self._movement.speed = speed + _ACCELERATION
        else:
            self._movement.speed = speed - _ACCELERATION

    def _on_collision(self, hit_info: HitInfo) -> None:
        pass


class PlayerInputComponent(Component):
    """Turns mouse clicks into shots and the W key into thrust."""

    def __init__(self, parent: GameObject, name: str = "NA_PlayerInputComponent") -> None:
        if not isinstance(parent, Player):
            raise TypeError("PlayerInputComponent must be attached to a Player")
        super().__init__(parent, name)
        self.player = parent
        self._is_shooting = False

    @property
    def is_shooting(self) -> bool:
        return self._is_shooting

    def update(self, delta_time: float) -> None:
        world = self.player.world
        for event in world.events:
            if getattr(event, "button", None) != _LEFT_MOUSE_BUTTON:
                continue
            if event.type == pygame.MOUSEBUTTONDOWN:
                self._is_shooting = True
            elif event.type == pygame.MOUSEBUTTONUP:
                self._is_shooting = False

        if self._is_shooting:
            self.player.shooting_component.shoot()

        self.player.can_move = world.is_key_pressed(pygame.K_w)


class ShootingComponent(Component):
    """Fires projectiles with a reload delay and a slowly refilling magazine."""

    max_ammo: ClassVar[int] = 20
    reload_time: ClassVar[float] = 0.15
    spawn_distance: ClassVar[float] = 50.0
    replenish_time: ClassVar[float] = 2.0

    def __init__(self, parent: GameObject, name: str = "NA_ShootingComponent") -> None:
        if not isinstance(parent, Player):
            raise TypeError("ShootingComponent must be attached to a Player")
        super().__init__(parent, name)
        self.player = parent
        self._shooting_sound = Sound(parent.resources.shooting_sound, 0.5)
        self._time_since_last_shot = 0.0
        self._time_since_last_replenish = 0.0
        self._current_ammo = self.max_ammo
        self.player.hud.update_ammo(self._current_ammo)

    @property
    def current_ammo(self) -> int:
        return self._current_ammo

    def reset(self) -> None:
        """Refill the magazine and restart the shooting timers."""
        self._current_ammo = self.max_ammo
        self._time_since_last_replenish = 0.0
        self._time_since_last_shot = 0.0

    def update(self, delta_time: float) -> None:
        self._time_since_last_shot += delta_time
        self._time_since_last_replenish += delta_time
        if self._time_since_last_replenish >= self.replenish_time:
            self._update_ammo(self._current_ammo + 1)
            self._time_since_last_replenish = 0.0

    def shoot(self) -> None:
        """Fire one projectile where the ship is facing, if allowed."""
        player = self.player
        if (
            self._time_since_last_shot < self.reload_time
            or self._current_ammo < 1
            or player.is_mouse_on_player
        ):
            return

        texture = player.resources.projectile_texture
        if texture is None:
            raise RuntimeError("no projectile texture loaded")

        rotation = player.transform.rotation
        direction = direction_from_angle(rotation)
        center = player.transform.position + player.center_point
        spawn_position = center - texture.dimensions / 2.0 + direction * self.spawn_distance

        world = player.world
        projectile = Projectile(
            Transform(spawn_position, rotation),
            "Projectile",
            world=world,
            resources=player.resources,
            game_state=player.game_state,
        )
        projectile.movement_component.velocity = direction
        projectile.set_window_collisions(player.window_bounds)

        spawner = world.meteor_spawner
        if spawner is not None:
            for meteor in spawner.active_meteors:
                projectile.collider.listen_for_collisions(meteor)

        world.spawn_entity(projectile)
        self._shooting_sound.play()
        self._time_since_last_shot = 0.0
        self._update_ammo(self._current_ammo - 1)

    def _update_ammo(self, ammo: int) -> None:
        self._current_ammo = min(max(ammo, 0), self.max_ammo)
        self.player.hud.update_ammo(self._current_ammo)