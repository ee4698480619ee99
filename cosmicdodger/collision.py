"""Axis-aligned colliders and the component that owns them."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Tuple, Union

import pygame

from cosmicdodger.entity import BaseEntity, Component, GameObject
from cosmicdodger.transform import Transform
from cosmicdodger.vector import Vector2, degrees_to_radians

_log = logging.getLogger(__name__)


@dataclass
class _FRect:
    x: float
    y: float
    w: float
    h: float

    def intersects(self, other: _FRect) -> bool:
        if self.w <= 0 or self.h <= 0 or other.w <= 0 or other.h <= 0:
            return False
        overlap_x = min(self.x + self.w, other.x + other.w) > max(self.x, other.x)
        overlap_y = min(self.y + self.h, other.y + other.h) > max(self.y, other.y)
        return overlap_x and overlap_y


@dataclass
class HitInfo:
    """Details of a detected collision."""

    has_hit: bool = False
    hit_location: Vector2 = Vector2.ZERO
    hit_collider: Optional["Collider2D"] = None
    hit_game_object: Optional[GameObject] = None

    def __str__(self) -> str:
        collider = self.hit_collider.display_name if self.hit_collider else None
        target = self.hit_game_object.display_name if self.hit_game_object else None
        return (
            "HitInfo:\n"
            f"\tCollision: {str(self.has_hit).lower()}\n"
            f"\tLocation: ({self.hit_location.x},{self.hit_location.y})\n"
            f"\tCollider: {collider}\n"
            f"\tObject: {target}\n"
            "==========================================="
        )


class Collider2D(BaseEntity):
    """A rectangle that follows its component's parent and reports overlaps."""

    def __init__(
        self,
        dimensions: Vector2,
        parent_component: CollisionComponent,
        relative_pos: Vector2 = Vector2.ZERO,
        visible: bool = False,
        name: str = "NA_Collider",
    ) -> None:
        super().__init__("", name, visible, True)
        self.abs_transform = Transform()
        self.rel_transform = Transform(relative_pos, 0.0, 1.0)
        self.rect = _FRect(0.0, 0.0, dimensions.x, dimensions.y)
        self.parent_component = parent_component
        self._candidates: List[Collider2D] = []
        self._on_collision: Optional[Callable[[HitInfo], None]] = None
        self.last_hit_info = HitInfo()

    @property
    def candidates(self) -> Tuple[Collider2D, ...]:
        return tuple(self._candidates)

    def render(self, surface: pygame.Surface) -> None:
        super().render(surface)
        outline = pygame.Rect(
            round(self.rect.x), round(self.rect.y), round(self.rect.w), round(self.rect.h)
        )
        pygame.draw.rect(surface, (255, 255, 0), outline, 1)

    def update(self, delta_time: float) -> None:
        parent_transform = self.parent_component.transform
        self.abs_transform.rotation = parent_transform.rotation
        self.abs_transform.scale = parent_transform.scale

        absolute_center = (
            parent_transform.position + self.parent_component.parent.center_point
        )
        rotation = degrees_to_radians(parent_transform.rotation)
        relative = self.rel_transform.position.rotated_by(rotation)
        self.abs_transform.position = Vector2(
            absolute_center.x + relative.x - self.rect.w / 2.0,
            absolute_center.y + relative.y - self.rect.h / 2.0,
        )
        self.rect.x = self.abs_transform.position.x
        self.rect.y = self.abs_transform.position.y

        for candidate in list(self._candidates):
            hit = self.is_colliding(candidate)
            if hit is None:
                continue
            self.last_hit_info = hit
            if self.can_update and candidate.can_update and self._on_collision:
                self._on_collision(hit)
            elif not self.can_update or candidate.can_update or not self._on_collision:
                _log.warning("Unable to call collision delegate")

    def listen_for_collisions(
        self, candidate: Union[Collider2D, GameObject, Iterable[Collider2D]]
    ) -> None:
        """Watch a collider, every collider of a game object, or a collection of colliders."""
        if candidate is None:
            raise ValueError("collision candidate must not be None")
        if isinstance(candidate, Collider2D):
            self._candidates.append(candidate)
        elif isinstance(candidate, GameObject):
            component = candidate.get_component(CollisionComponent)
            if component is not None:
                self._candidates.extend(component.colliders)
        else:
            self._candidates.extend(candidate)

    def set_collision_delegate(self, delegate: Optional[Callable[[HitInfo], None]]) -> None:
        self._on_collision = delegate

    def is_colliding(self, other: Collider2D) -> Optional[HitInfo]:
        """Hit details if this collider overlaps ``other``, otherwise ``None``."""
        if not self.rect.intersects(other.rect):
            return None
        return HitInfo(
            has_hit=True,
            hit_location=self.parent_component.transform.position,
            hit_collider=other,
            hit_game_object=other.parent_component.parent,
        )


class CollisionComponent(Component):
    """Owns the colliders of a game object and keeps them in place."""

    def __init__(self, parent: GameObject, name: str = "NA_CollisionComponent") -> None:
        super().__init__(parent, name)
        self.transform = Transform()
        self._colliders: List[Collider2D] = []

    @property
    def colliders(self) -> List[Collider2D]:
        return list(self._colliders)

    def add_collider(
        self,
        dimensions: Vector2,
        relative_pos: Vector2 = Vector2.ZERO,
        visible: bool = False,
        name: str = "Collider2D",
    ) -> Collider2D:
        collider = Collider2D(dimensions, self, relative_pos, visible, name)
        self._colliders.append(collider)
        return collider

    def render(self, surface: pygame.Surface) -> None:
        super().render(surface)
        for collider in self._colliders:
            if collider.can_render:
                collider.render(surface)

    def update(self, delta_time: float) -> None:
        self.transform = self.parent.transform.copy()
        for collider in self._colliders:
            if collider.can_update:
                collider.update(delta_time)

    def _set_can_update(self, value: bool) -> None:
        super()._set_can_update(value)
        for collider in self._colliders:
            collider.can_update = value