import pygame

from invaders.block import Rect
from invaders.mysteryship import MysteryShip


def make_ship():
    return MysteryShip(screen_width=800, width=80, height=35)


def test_starts_dead_with_empty_rect():
    ship = make_ship()
    assert not ship.alive
    rect = ship.rect()
    assert (rect.width, rect.height) == (0, 0)
    assert not rect.collides(Rect(-1000, -1000, 5000, 5000))


def test_spawn_from_left():
    ship = make_ship()
    ship.spawn(0)
    assert ship.alive
    assert (ship.x, ship.y, ship.speed) == (25, 90, 3)
    assert ship.rect() == Rect(25, 90, 80, 35)


def test_spawn_from_right():
    ship = make_ship()
    ship.spawn(1)
    assert ship.alive
    assert ship.x == ship.screen_width - ship.width - 25
    assert ship.speed == -3


def test_update_moves_while_alive():
    ship = make_ship()
    ship.spawn(0)
    start = ship.x
    ship.update()
    assert ship.x == start + ship.speed
    assert ship.alive


def test_ship_dies_after_crossing():
    for side in (0, 1):
        ship = make_ship()
        ship.spawn(side)
        steps = 0
        while ship.alive and steps < 1000:
            ship.update()
            steps += 1
        assert not ship.alive
        assert ship.x < 25 or ship.x > ship.screen_width - ship.width - 25


def test_update_does_nothing_when_dead():
    ship = make_ship()
    ship.update()
    assert (ship.x, ship.alive) == (0.0, False)


def test_draw_only_when_alive():
    surface = pygame.Surface((800, 200))
    image = pygame.Surface((80, 35))
    image.fill((255, 0, 0))
    ship = make_ship()
    ship.draw(surface, image)
    assert tuple(surface.get_at((30, 95)))[:3] == (0, 0, 0)
    ship.spawn(0)
    ship.draw(surface, image)
    assert tuple(surface.get_at((30, 95)))[:3] == (255, 0, 0)