"""The game window and its per-frame clear and present steps."""

from __future__ import annotations

from typing import ClassVar, Optional

import pygame

from cosmicdodger.resources import TextureResource

_CLEAR_COLOR = (48, 14, 65)


class Window:
    """An on-screen window of a fixed size with an optional background."""

    width: ClassVar[int] = 1280
    height: ClassVar[int] = 720

    def __init__(self, title: str, background: Optional[TextureResource] = None) -> None:
        if not pygame.display.get_init():
            pygame.display.init()
        self.surface = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption(title)
        self.background = background

    def clear(self) -> None:
        """Fill the window and draw the background, if there is one."""
        self.surface.fill(_CLEAR_COLOR)
        if self.background is None or self.background.image is None:
            return
        image = self.background.image
        size = (round(self.background.dimensions.x), round(self.background.dimensions.y))
        if image.get_size() != size:
            image = pygame.transform.scale(image, size)
        self.surface.blit(image, (0, 0))

    def display(self) -> None:
        """Present what has been drawn this frame."""
        pygame.display.flip()