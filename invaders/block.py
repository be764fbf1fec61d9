"""Axis-aligned rectangles and the small cells that obstacles are built from."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

BLOCK_COLOR = (243, 216, 63)
BLOCK_SIZE = 3


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle with a float position and size."""

    x: float
    y: float
    width: float
    height: float

    def collides(self, other: Rect) -> bool:
        """Return True when the two rectangles overlap; touching edges do not count."""
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )


@dataclass
class Block:
    """One square cell of an obstacle."""

    x: float
    y: float

    def rect(self) -> Rect:
        return Rect(self.x, self.y, BLOCK_SIZE, BLOCK_SIZE)

    def draw(self, surface: pygame.Surface) -> None:
        pygame.draw.rect(
            surface,
            BLOCK_COLOR,
            pygame.Rect(int(self.x), int(self.y), BLOCK_SIZE, BLOCK_SIZE),
        )