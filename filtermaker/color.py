"""RGBA colours used for item label text, background and border."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels; the default is fully transparent black."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0

    def __post_init__(self) -> None:
        for channel, value in (("r", self.r), ("g", self.g), ("b", self.b), ("a", self.a)):
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"colour channel {channel} must be an integer")
            if not 0 <= value <= 255:
                raise ValueError(f"colour channel {channel} out of range 0..255: {value}")

    def __str__(self) -> str:
        return f"{self.r} {self.g} {self.b} {self.a}"


YELLOW = Color(255, 255, 0, 255)
RED = Color(255, 0, 0, 255)
GREEN = Color(0, 255, 0, 255)
PURPLE = Color(0, 255, 255, 255)
BLUE = Color(0, 0, 255, 255)
WHITE = Color(255, 255, 255, 255)
BLACK = Color(0, 0, 0, 255)
TRANSPARENT = Color(0, 0, 0, 0)