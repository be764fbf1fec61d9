"""Invading aliens arranged in rows."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

import pygame

from invaders.block import Rect

POINTS = {1: 100, 2: 200, 3: 300}


@dataclass
class Alien:
    """An alien of kind 1, 2 or 3 whose sprite has the given size."""

    kind: int
    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.kind not in POINTS:
            raise ValueError(f"unknown alien kind: {self.kind}")

    def update(self, direction: int) -> None:
        self.x += direction

    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    def points(self) -> int:
        """Score awarded for shooting this alien."""
        return POINTS[self.kind]

    def draw(self, surface: pygame.Surface, images: Mapping[int, pygame.Surface]) -> None:
        surface.blit(images[self.kind], (self.x, self.y))