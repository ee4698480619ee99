"""Base entities, components and textured game objects."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional, Type, TypeVar

import pygame

from cosmicdodger.transform import Transform
from cosmicdodger.vector import Vector2

C = TypeVar("C", bound="Component")


class BaseEntity(ABC):
    """Something that can be updated each frame and optionally drawn."""

    def __init__(
        self,
        id_name: str = "",
        display_name: str = "NA_BaseEntity",
        can_render: bool = False,
        can_update: bool = True,
    ) -> None:
        self.id_name = id_name
        self.display_name = display_name
        self._can_render = can_render
        self._can_update = can_update

    @property
    def can_render(self) -> bool:
        return self._can_render

    @can_render.setter
    def can_render(self, value: bool) -> None:
        self._set_can_render(bool(value))

    @property
    def can_update(self) -> bool:
        return self._can_update

    @can_update.setter
    def can_update(self, value: bool) -> None:
        self._set_can_update(bool(value))

    def _set_can_render(self, value: bool) -> None:
        self._can_render = value

    def _set_can_update(self, value: bool) -> None:
        self._can_update = value

    def disable(self) -> None:
        """Stop updating and rendering this entity."""
        self.can_update = False
        self.can_render = False

    def enable(self) -> None:
        """Resume updating and rendering this entity."""
        self.can_update = True
        self.can_render = True

    def render(self, surface: pygame.Surface) -> None:
        if surface is None:
            raise ValueError("render needs a target surface")

    @abstractmethod
    def update(self, delta_time: float) -> None:
        """Advance the entity by ``delta_time`` seconds."""


class Component(BaseEntity):
    """A piece of behaviour attached to a game object."""

    def __init__(
        self,
        parent: "GameObject",
        name: str = "NA_Component",
        can_render: bool = False,
        can_update: bool = True,
    ) -> None:
        super().__init__("", name, can_render, can_update)
        self.parent = parent


class GameObject(BaseEntity):
    """A textured entity with a transform that owns a list of components.

    The texture is any object with ``dimensions`` (a Vector2) and ``image``
    (a pygame surface or ``None``).
    """

    def __init__(self, transform: Transform, texture, name: str = "NA_GameObject") -> None:
        super().__init__("", name, True, True)
        self.transform = transform
        self.texture = texture
        self.center_point: Vector2 = texture.dimensions / 2.0
        self.components: List[Component] = []

    def add_component(self, component: C) -> C:
        if component is None:
            raise ValueError("component must not be None")
        self.components.append(component)
        return component

    def get_component(self, component_type: Type[C]) -> Optional[C]:
        """First attached component of the given type, or ``None``."""
        return next(
            (c for c in self.components if isinstance(c, component_type)), None
        )

    def disable(self) -> None:
        """Disable this object together with all of its components."""
        super().disable()
        for component in self.components:
            component.can_update = False
            component.can_render = False

    def render(self, surface: pygame.Surface) -> None:
        super().render(surface)
        image = self.texture.image
        if image is not None:
            width, height = self.texture.dimensions
            size = (round(width), round(height))
            if image.get_size() != size:
                image = pygame.transform.scale(image, size)
            rotated = pygame.transform.rotate(image, self.transform.rotation - 90.0)
            center = self.transform.position + self.texture.dimensions / 2.0
            surface.blit(rotated, rotated.get_rect(center=(center.x, center.y)))
        for component in self.components:
            if component.can_render:
                component.render(surface)

    def update(self, delta_time: float) -> None:
        for component in self.components:
            if component.can_update:
                component.update(delta_time)