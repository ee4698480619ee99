"""On-screen interface elements: text, images, buttons and progress icons."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, List, Optional, Tuple

import pygame

from cosmicdodger.color import Color
from cosmicdodger.entity import BaseEntity
from cosmicdodger.transform import Transform
from cosmicdodger.vector import Vector2

_LEFT_MOUSE_BUTTON = 1
_MOUSE_RECT_SIZE = 20.0

Rect = Tuple[float, float, float, float]


def _rects_intersect(a: Rect, b: Rect) -> bool:
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    if aw <= 0 or ah <= 0 or bw <= 0 or bh <= 0:
        return False
    overlap_x = min(ax + aw, bx + bw) > max(ax, bx)
    overlap_y = min(ay + ah, by + bh) > max(ay, by)
    return overlap_x and overlap_y


def _blit_texture(surface: pygame.Surface, texture, transform: Transform) -> None:
    image = texture.image
    size = (round(texture.dimensions.x), round(texture.dimensions.y))
    if image.get_size() != size:
        image = pygame.transform.scale(image, size)
    rotated = pygame.transform.rotate(image, transform.rotation - 90.0)
    center = transform.position + texture.dimensions / 2.0
    surface.blit(rotated, rotated.get_rect(center=(center.x, center.y)))


class UIElement(BaseEntity):
    """A node of the interface tree; children are drawn and updated after it."""

    def __init__(self, transform: Optional[Transform] = None, name: str = "NA_UIElement") -> None:
        super().__init__("", name, True, False)
        base = transform if transform is not None else Transform()
        self.transform = base.copy()
        self.relative_transform = base.copy()
        self.parent: Optional[UIElement] = None
        self._children: List[UIElement] = []

    @property
    def children(self) -> Tuple[UIElement, ...]:
        return tuple(self._children)

    def add_child(self, child: UIElement) -> None:
        self._children.append(child)
        child.parent = self

    def construct(self) -> None:
        """Offset every descendant by its parent's transform."""
        for child in self._children:
            child.transform += self.transform
            child.construct()

    def render(self, surface: pygame.Surface) -> None:
        super().render(surface)
        for child in self._children:
            if child.can_render:
                child.render(surface)

    def update(self, delta_time: float) -> None:
        for child in self._children:
            if child.can_update:
                child.update(delta_time)


class UITextureRect(UIElement):
    """An image drawn at the element's position."""

    def __init__(
        self, texture, transform: Optional[Transform] = None, name: str = "NA_TextureRect"
    ) -> None:
        super().__init__(transform, name)
        self.transform.rotation = 90.0
        self.texture = texture

    def render(self, surface: pygame.Surface) -> None:
        if surface is not None and self.texture is not None and self.texture.image is not None:
            _blit_texture(surface, self.texture, self.transform)
        super().render(surface)


class UIStaticText(UIElement):
    """A line of text drawn stretched to fixed dimensions."""

    def __init__(
        self,
        text: str,
        color: Color,
        transform: Optional[Transform] = None,
        dimensions: Vector2 = Vector2(10.0, 10.0),
        name: str = "NA_StaticText",
        font: Optional[pygame.font.Font] = None,
    ) -> None:
        super().__init__(transform, name)
        self.color = color
        self.dimensions = dimensions
        self.font = font
        self._text = ""
        self.rendered: Optional[pygame.Surface] = None
        self.set_text(text)

    @property
    def text(self) -> str:
        return self._text

    def set_text(self, text: str) -> None:
        """Replace the text and re-render it with the element's font."""
        self._text = text
        if self.font is not None:
            self.rendered = self.font.render(text, True, self.color.to_rgb())
        else:
            self.rendered = None

    def render(self, surface: pygame.Surface) -> None:
        BaseEntity.render(self, surface)
        if self.rendered is None:
            return
        size = (max(round(self.dimensions.x), 0), max(round(self.dimensions.y), 0))
        image = self.rendered
        if image.get_size() != size:
            image = pygame.transform.scale(image, size)
        position = self.transform.position
        surface.blit(image, (position.x, position.y))

    def update(self, delta_time: float) -> None:
        pass


class UIButton(UITextureRect):
    """A clickable image with a text label that changes look on hover.

    ``world`` supplies the frame's ``events`` and ``mouse_position``.
    """

    def __init__(
        self,
        label: str,
        texture,
        transform: Transform,
        name: str = "NA_UIButton",
        *,
        world: Optional[Any] = None,
        font: Optional[pygame.font.Font] = None,
    ) -> None:
        super().__init__(texture, transform, name)
        self.world = world
        self.normal_texture = texture
        self.hover_texture = texture
        self.label = UIStaticText(
            label, Color.black, Transform(Vector2(15.0, 10.0)), Vector2(170.0, 40.0), font=font
        )
        self.boundary: Rect = (0.0, 0.0, texture.dimensions.x, texture.dimensions.y)
        self.on_pressed: Optional[Callable[[], None]] = None
        self.add_child(self.label)
        self.can_update = True

    def construct(self) -> None:
        super().construct()
        _, _, width, height = self.boundary
        self.boundary = (self.transform.position.x, self.transform.position.y, width, height)

    def render(self, surface: pygame.Surface) -> None:
        super().render(surface)

    def update(self, delta_time: float) -> None:
        super().update(delta_time)
        if self.world is None:
            self.texture = self.normal_texture
            return
        mouse = self.world.mouse_position
        mouse_rect = (mouse.x, mouse.y, _MOUSE_RECT_SIZE, _MOUSE_RECT_SIZE)
        if not _rects_intersect(self.boundary, mouse_rect):
            self.texture = self.normal_texture
            return
        for event in self.world.events:
            if (
                event.type == pygame.MOUSEBUTTONDOWN
                and getattr(event, "button", None) == _LEFT_MOUSE_BUTTON
                and self.on_pressed is not None
            ):
                self.on_pressed()
        self.texture = self.hover_texture


class GrowDirection(Enum):
    LEFT = "left"
    RIGHT = "right"


class UIProgressTextures(UIElement):
    """A row of icons, one per unit of a value, laid out leftwards."""

    def __init__(
        self,
        transform: Transform,
        texture,
        max_value: int,
        name: str = "NA_UIProgressTextures",
    ) -> None:
        super().__init__(transform, name)
        self.max_value = max_value
        self.value = max_value
        self.padding = 5.0
        self.grow_direction = GrowDirection.LEFT
        self.texture = texture
        start = self.transform.position
        step = texture.dimensions.x + self.padding
        self.textures: List[UITextureRect] = [
            UITextureRect(texture, Transform(Vector2(start.x - index * step, start.y)))
            for index in range(max_value)
        ]

    def update_value(self, value: int) -> None:
        self.value = value

    def render(self, surface: pygame.Surface) -> None:
        """Draw as many icons as the current value; a negative value shows all."""
        shown = self.textures if self.value < 0 else self.textures[: self.value]
        for icon in shown:
            if icon.can_render:
                icon.render(surface)

    def update(self, delta_time: float) -> None:
        pass