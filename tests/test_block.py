import pygame
import pytest

from invaders.block import BLOCK_COLOR, BLOCK_SIZE, Block, Rect


def test_overlapping_rects_collide():
    a = Rect(0, 0, 10, 10)
    b = Rect(5, 5, 10, 10)
    assert a.collides(b)
    assert b.collides(a)


def test_touching_edges_do_not_collide():
    a = Rect(0, 0, 3, 3)
    b = Rect(3, 0, 3, 3)
    assert not a.collides(b)
    assert not b.collides(a)


@pytest.mark.parametrize(
    "other",
    [Rect(100, 100, 5, 5), Rect(-20, 0, 5, 5), Rect(0, 50, 1, 1)],
)
def test_distant_rects_do_not_collide(other):
    assert not Rect(0, 0, 10, 10).collides(other)


def test_zero_size_rect_never_collides():
    assert not Rect(5, 5, 0, 0).collides(Rect(0, 0, 10, 10))


def test_contained_rect_collides():
    assert Rect(0, 0, 100, 100).collides(Rect(40, 40, 2, 2))


def test_block_rect_has_block_size():
    block = Block(10, 20)
    assert block.rect() == Rect(10, 20, BLOCK_SIZE, BLOCK_SIZE)


def test_block_draw_paints_its_cell():
    surface = pygame.Surface((10, 10))
    Block(2, 2).draw(surface)
    assert tuple(surface.get_at((2, 2)))[:3] == BLOCK_COLOR
    assert tuple(surface.get_at((2 + BLOCK_SIZE - 1, 2 + BLOCK_SIZE - 1)))[:3] == BLOCK_COLOR
    assert tuple(surface.get_at((2 + BLOCK_SIZE, 2)))[:3] == (0, 0, 0)