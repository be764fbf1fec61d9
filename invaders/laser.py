"""Laser shots fired by the player and by aliens."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

from invaders.block import Rect

LASER_COLOR = (243, 216, 63)
LASER_WIDTH = 4
LASER_HEIGHT = 15
TOP_LIMIT = 25
BOTTOM_MARGIN = 100


@dataclass
class Laser:
    """A laser moving vertically by ``speed`` pixels each frame."""

    x: float
    y: float
    speed: int
    active: bool = True

    def update(self, screen_height: int) -> None:
        """Move the laser and switch it off once it leaves the playfield."""
        self.y += self.speed
        if self.active and (self.y > screen_height - BOTTOM_MARGIN or self.y < TOP_LIMIT):
            self.active = False

    def rect(self) -> Rect:
        return Rect(self.x, self.y, LASER_WIDTH, LASER_HEIGHT)

    def draw(self, surface: pygame.Surface) -> None:
        if self.active:
            pygame.draw.rect(
                surface,
                LASER_COLOR,
                pygame.Rect(int(self.x), int(self.y), LASER_WIDTH, LASER_HEIGHT),
            )