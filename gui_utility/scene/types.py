from enum import Enum
from typing import NamedTuple

import pygame


class ScaleType(Enum):
    STRETCH = "stretch"
    SLICE = "slice"


class Color3(NamedTuple):
    """Float RGB color, nominally 0..1 per channel. Not clamped."""
    r: float
    g: float
    b: float

    @classmethod
    def from_rgb(cls, r, g, b):
        return cls(r / 255, g / 255, b / 255)

    def lerp(self, other, alpha):
        return Color3(
            self.r + (other.r - self.r) * alpha,
            self.g + (other.g - self.g) * alpha,
            self.b + (other.b - self.b) * alpha,
        )

    def to_pygame(self, alpha=255):
        """Convert to a pygame.Color, clamping channels to 0-255."""
        channels = [max(0, min(255, round(c * 255))) for c in (self.r, self.g, self.b)]
        return pygame.Color(*channels, max(0, min(255, round(alpha))))
