"""The player's ship."""

from __future__ import annotations

from dataclasses import dataclass, field

import pygame

from invaders.block import Rect
from invaders.laser import Laser

MOVEMENT_SPEED = 7
EDGE = 25
BOTTOM_MARGIN = 100
FIRE_INTERVAL = 0.35
LASER_SPEED = -6


@dataclass
class Spaceship:
    """The player's ship at the bottom of the screen, with the lasers it has fired."""

    screen_width: int
    screen_height: int
    width: int
    height: int
    x: float = field(init=False)
    y: float = field(init=False)
    lasers: list[Laser] = field(default_factory=list)
    last_fire_time: float = 0.0

    def __post_init__(self) -> None:
        self.x = self.screen_width // 2 - self.width // 2
        self.y = self.screen_height - self.height - BOTTOM_MARGIN

    def move_left(self) -> None:
        self.x = max(self.x - MOVEMENT_SPEED, EDGE)

    def move_right(self) -> None:
        self.x = min(self.x + MOVEMENT_SPEED, self.screen_width - self.width - EDGE)

    def fire_laser(self, now: float) -> bool:
        """Fire a laser unless the last one was too recent; return whether one was fired."""
        if now - self.last_fire_time < FIRE_INTERVAL:
            return False
        self.lasers.append(Laser(self.x + self.width // 2 - 2, self.y, LASER_SPEED))
        self.last_fire_time = now
        return True

    def reset(self) -> None:
        """Centre the ship again and drop its lasers."""
        self.x = (self.screen_width - self.width) / 2.0
        self.y = self.screen_height - self.height - BOTTOM_MARGIN
        self.lasers.clear()

    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    def draw(self, surface: pygame.Surface, image: pygame.Surface) -> None:
        surface.blit(image, (self.x, self.y))