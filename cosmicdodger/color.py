"""RGBA colours used for on-screen text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Tuple


@dataclass(frozen=True)
class Color:
    """An RGBA colour with integer channels."""

    r: int
    g: int
    b: int
    a: int = 1

    black: ClassVar["Color"]
    red: ClassVar["Color"]
    green: ClassVar["Color"]
    blue: ClassVar["Color"]
    aqua: ClassVar["Color"]

    def to_rgb(self) -> Tuple[int, int, int]:
        """The colour as an RGB tuple suitable for rendering text."""
        return (self.r, self.g, self.b)


Color.black = Color(0, 0, 0)
Color.red = Color(255, 0, 0)
Color.green = Color(0, 255, 0)
Color.blue = Color(0, 0, 255)
Color.aqua = Color(0, 255, 255)