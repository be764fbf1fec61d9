"""The bonus ship that crosses the top of the screen."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

from invaders.block import Rect

SPAWN_Y = 90
EDGE = 25
SPEED = 3


@dataclass
class MysteryShip:
    """A ship that flies from one side of the screen to the other while alive."""

    screen_width: int
    width: int
    height: int
    x: float = 0.0
    y: float = 0.0
    speed: int = 0
    alive: bool = False

    def spawn(self, side: int) -> None:
        """Start a flight from the left (side 0) or the right (any other side)."""
        self.y = SPAWN_Y
        if side == 0:
            self.x = EDGE
            self.speed = SPEED
        else:
            self.x = self.screen_width - self.width - EDGE
            self.speed = -SPEED
        self.alive = True

    def update(self) -> None:
        if self.alive:
            self.x += self.speed
            if self.x > self.screen_width - self.width - EDGE or self.x < EDGE:
                self.alive = False

    def rect(self) -> Rect:
        if self.alive:
            return Rect(self.x, self.y, self.width, self.height)
        return Rect(self.x, self.y, 0, 0)

    def draw(self, surface: pygame.Surface, image: pygame.Surface) -> None:
        if self.alive:
            surface.blit(image, (self.x, self.y))