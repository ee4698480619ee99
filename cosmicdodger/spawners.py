"""Timed spawning of meteors and pickups."""

from __future__ import annotations

from typing import Any, List, Optional, Tuple

from cosmicdodger.entity import BaseEntity
from cosmicdodger.meteor import Meteor
from cosmicdodger.pickup import Pickup
from cosmicdodger.transform import Transform
from cosmicdodger.vector import Vector2, random_range
from cosmicdodger.window import Window


def _require_player(world: Any) -> Any:
    if world.player is None:
        raise RuntimeError("the world has no player to spawn around")
    return world.player


class MeteorSpawner(BaseEntity):
    """Sends meteors at the player from just outside the window.

    Spawning gets faster and meteors get quicker with each difficulty level.
    One meteor is spawned as soon as the spawner is created.
    """

    spawn_decrement_rate = 0.1
    min_spawn_rate = 0.5
    max_spawn_rate = 1.5
    min_meteor_speed = 250.0
    speed_increment_rate = 20.0
    window_offset = 100.0

    def __init__(
        self,
        name: str = "Meteor Spawner",
        *,
        world: Any,
        resources: Any,
        game_state: Optional[Any] = None,
    ) -> None:
        super().__init__("", name, False, True)
        self.world = world
        self.resources = resources
        self.game_state = game_state
        self._spawn_rate = self.max_spawn_rate
        self._meteor_speed = self.min_meteor_speed
        self._time_since_last_spawn = 0.0
        self._active_meteors: List[Meteor] = []
        self._spawn_meteor()

    @property
    def active_meteors(self) -> Tuple[Meteor, ...]:
        return tuple(self._active_meteors)

    @property
    def spawn_rate(self) -> float:
        """Seconds between two spawns."""
        return self._spawn_rate

    @property
    def meteor_speed(self) -> float:
        return self._meteor_speed

    def reset(self) -> None:
        """Restore the starting rate and speed and destroy every active meteor."""
        self._time_since_last_spawn = 0.0
        self._set_spawn_rate(self.max_spawn_rate)
        self._set_meteor_speed(self.min_meteor_speed)
        for meteor in self._active_meteors:
            self.world.destroy_entity(meteor)
        self._active_meteors.clear()

    def update(self, delta_time: float) -> None:
        self._time_since_last_spawn += delta_time
        if self._time_since_last_spawn > self._spawn_rate:
            self._spawn_meteor()
            self._time_since_last_spawn = 0.0

    def increase_difficulty(self) -> None:
        """Spawn more often and send faster meteors."""
        self._set_spawn_rate(self._spawn_rate - self.spawn_decrement_rate)
        self._set_meteor_speed(self._meteor_speed + self.speed_increment_rate)

    def delete_meteor(self, meteor: Meteor) -> None:
        """Forget a meteor and queue it for destruction."""
        self._active_meteors = [m for m in self._active_meteors if m is not meteor]
        self.world.destroy_entity(meteor)

    def _set_spawn_rate(self, rate: float) -> None:
        self._spawn_rate = min(max(rate, self.min_spawn_rate), self.max_spawn_rate)

    def _set_meteor_speed(self, speed: float) -> None:
        self._meteor_speed = min(max(speed, self.min_meteor_speed), Meteor.max_speed)

    def _spawn_meteor(self) -> None:
        player = _require_player(self.world)
        spawn_position = self._random_spawn_point()
        velocity = (player.transform.position - spawn_position).normalized()
        meteor = Meteor(
            Transform(spawn_position),
            velocity,
            self._meteor_speed,
            world=self.world,
            resources=self.resources,
            game_state=self.game_state,
        )
        self._active_meteors.append(self.world.spawn_entity(meteor))

    def _random_spawn_point(self) -> Vector2:
        side = random_range(0, 3)
        x = float(random_range(0, Window.width))
        y = float(random_range(0, Window.height))
        offset = self.window_offset
        if side == 0:
            return Vector2(x, -offset)
        if side == 1:
            return Vector2(Window.width + offset, y)
        if side == 2:
            return Vector2(x, Window.height + offset)
        if side == 3:
            return Vector2(-offset, y)
        return Vector2.ZERO


class PickupSpawner(BaseEntity):
    """Places pickups inside the window, away from the player and each other."""

    spawn_rate = 1.5
    max_active_pickups = 5
    min_distance_to_next_pickup = 400.0
    min_distance_to_player = 200.0
    max_attempts = 20
    area_padding = 100

    def __init__(
        self,
        name: str = "Pickup Spawner",
        *,
        world: Any,
        resources: Any,
        game_state: Optional[Any] = None,
    ) -> None:
        super().__init__("", name, False, True)
        self.world = world
        self.resources = resources
        self.game_state = game_state
        self._time_since_last_spawn = 0.0
        self._active_pickups: List[Pickup] = []

    @property
    def active_pickups(self) -> Tuple[Pickup, ...]:
        return tuple(self._active_pickups)

    def update(self, delta_time: float) -> None:
        self._time_since_last_spawn += delta_time
        if (
            self._time_since_last_spawn > self.spawn_rate
            and len(self._active_pickups) < self.max_active_pickups
        ):
            self.spawn_pickup()
            self._time_since_last_spawn = 0.0

    def spawn_pickup(self) -> Pickup:
        """Spawn one pickup at a random point and return it."""
        pickup = Pickup(
            Transform(self._random_spawn_point()),
            world=self.world,
            resources=self.resources,
            game_state=self.game_state,
        )
        self._active_pickups.append(self.world.spawn_entity(pickup))
        return pickup

    def delete_pickup(self, pickup: Pickup) -> None:
        """Forget a pickup and queue it for destruction."""
        self._active_pickups = [p for p in self._active_pickups if p is not pickup]
        self.world.destroy_entity(pickup)

    def reset(self) -> None:
        """Restart the timer and destroy every active pickup."""
        self._time_since_last_spawn = 0.0
        for pickup in self._active_pickups:
            self.world.destroy_entity(pickup)
        self._active_pickups.clear()

    def _random_spawn_point(self) -> Vector2:
        """A point far enough from the last pickup and the player, within a few tries."""
        player = _require_player(self.world)
        padding = self.area_padding
        max_width = Window.width - padding
        max_height = Window.height - padding

        point = Vector2.ZERO
        for _ in range(self.max_attempts):
            point = Vector2(
                float(random_range(padding, max_width)),
                float(random_range(padding, max_height)),
            )
            if self._active_pickups:
                last = self._active_pickups[-1].transform.position
                distance_to_last = (last - point).length()
            else:
                distance_to_last = self.min_distance_to_next_pickup
            distance_to_player = (player.transform.position - point).length()
            is_origin = point.x == 0.0 and point.y == 0.0
            if (
                distance_to_last >= self.min_distance_to_next_pickup
                and distance_to_player >= self.min_distance_to_player
                and not is_origin
            ):
                break
        return point