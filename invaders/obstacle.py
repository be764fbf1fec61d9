"""Destructible shields made of small blocks."""

from __future__ import annotations

import pygame

from invaders.block import BLOCK_SIZE, Block, Rect

_COLUMNS = 23


def _dome_row(margin: int) -> str:
    return "." * margin + "#" * (_COLUMNS - 2 * margin) + "." * margin


def _arch_row(edge: int) -> str:
    return "#" * edge + "." * (_COLUMNS - 2 * edge) + "#" * edge


GRID: tuple[str, ...] = (
    *(_dome_row(margin) for margin in (4, 3, 2, 1)),
    *(_dome_row(0) for _ in range(6)),
    *(_arch_row(edge) for edge in (6, 5, 4)),
)
"""Shape of an obstacle: '#' marks a block, '.' a gap."""


class Obstacle:
    """A shield whose blocks are removed as they are hit."""

    def __init__(self, x: float, y: float) -> None:
        self.x = x
        self.y = y
        self.blocks: list[Block] = [
            Block(x + column * BLOCK_SIZE, y + row * BLOCK_SIZE)
            for row, line in enumerate(GRID)
            for column, cell in enumerate(line)
            if cell == "#"
        ]

    @classmethod
    def width(cls) -> int:
        """Width of an obstacle in pixels."""
        return len(GRID[0]) * BLOCK_SIZE

    def erase_colliding(self, rect: Rect) -> bool:
        """Remove every block overlapping ``rect``; return whether any was removed."""
        kept = [block for block in self.blocks if not block.rect().collides(rect)]
        hit = len(kept) != len(self.blocks)
        self.blocks = kept
        return hit

    def draw(self, surface: pygame.Surface) -> None:
        for block in self.blocks:
            block.draw(surface)