import pygame

from invaders.block import BLOCK_COLOR, Block, Rect
from invaders.obstacle import GRID, Obstacle


def test_grid_is_rectangular():
    obstacle = Obstacle(0, 0)
    assert len(GRID) == 13
    assert all(len(row) == len(GRID[0]) for row in GRID)
    assert Obstacle.width() == len(GRID[0]) * 3
    assert len(obstacle.blocks) == 240


def test_width():
    assert Obstacle.width() == 69


def test_grid_is_symmetric():
    obstacle = Obstacle(0, 0)
    positions = {(block.x, block.y) for block in obstacle.blocks}
    mirrored = {(Obstacle.width() - 3 - x, y) for x, y in positions}
    assert positions == mirrored


def test_blocks_lie_inside_obstacle_area():
    obstacle = Obstacle(100, 200)
    assert obstacle.blocks
    for block in obstacle.blocks:
        assert 100 <= block.x < 100 + Obstacle.width()
        assert 200 <= block.y < 200 + len(GRID) * 3
        assert (block.x - 100) % 3 == 0
        assert (block.y - 200) % 3 == 0


def test_corners_follow_grid_shape():
    obstacle = Obstacle(0, 0)
    assert Block(0, 0) not in obstacle.blocks
    assert Block(0, 12) in obstacle.blocks
    bottom_middle = Block((len(GRID[0]) // 2) * 3, (len(GRID) - 1) * 3)
    assert bottom_middle not in obstacle.blocks


def test_erase_colliding_removes_hit_blocks():
    obstacle = Obstacle(0, 0)
    before = len(obstacle.blocks)
    shot = Rect(30, 10, 4, 15)
    assert obstacle.erase_colliding(shot) is True
    assert len(obstacle.blocks) < before
    assert not any(block.rect().collides(shot) for block in obstacle.blocks)


def test_erase_colliding_misses():
    obstacle = Obstacle(0, 0)
    before = list(obstacle.blocks)
    assert obstacle.erase_colliding(Rect(500, 500, 4, 15)) is False
    assert obstacle.blocks == before


def test_draw_paints_blocks():
    surface = pygame.Surface((100, 60))
    Obstacle(10, 10).draw(surface)
    assert tuple(surface.get_at((10, 10 + 12)))[:3] == BLOCK_COLOR
    assert tuple(surface.get_at((10, 10)))[:3] == (0, 0, 0)