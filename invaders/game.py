"""Game state: the alien fleet, the shields, the player and the rules between them."""

from __future__ import annotations

import random
import re
import sys
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path

import pygame

from invaders.alien import POINTS, Alien
from invaders.laser import Laser
from invaders.mysteryship import MysteryShip
from invaders.obstacle import Obstacle
from invaders.spaceship import Spaceship

ALIEN_LASER_INTERVAL = 0.35
ALIEN_LASER_SPEED = 6
ALIEN_DROP = 4
EDGE = 25
FLEET_ROWS = 5
FLEET_COLUMNS = 11
FLEET_X = 75
FLEET_Y = 110
ALIEN_SPACING = 55
OBSTACLE_COUNT = 4
OBSTACLE_RAISE = 200
MYSTERY_POINTS = 1000
MYSTERY_INTERVAL = (10, 20)
STARTING_LIVES = 3
DEFAULT_HIGHSCORE_PATH = Path("highscore.txt")

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class SpriteSizes:
    """Pixel sizes (width, height) of the sprites the game logic depends on."""

    spaceship: tuple[int, int]
    mystery: tuple[int, int]
    aliens: Mapping[int, tuple[int, int]]


def load_highscore(path: str | Path) -> int:
    """Read the stored high score, or 0 when the file is missing or unreadable."""
    try:
        text = Path(path).read_text()
    except OSError:
        print("Failed to load highscore from file.", file=sys.stderr)
        return 0
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def save_highscore(path: str | Path, highscore: int) -> None:
    """Store the high score; a failure is reported on stderr."""
    try:
        Path(path).write_text(str(highscore))
    except OSError:
        print("Failed to save highscore to file", file=sys.stderr)


class Game:
    """One game of Space Invaders, advanced frame by frame."""

    def __init__(
        self,
        screen_width: int,
        screen_height: int,
        sizes: SpriteSizes,
        highscore_path: str | Path = DEFAULT_HIGHSCORE_PATH,
        rng: random.Random | None = None,
        on_explosion: Callable[[], object] | None = None,
        on_laser: Callable[[], object] | None = None,
    ) -> None:
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.sizes = sizes
        self.highscore_path = Path(highscore_path)
        self.rng = rng if rng is not None else random.Random()
        self.on_explosion = on_explosion
        self.on_laser = on_laser
        self.spaceship = Spaceship(screen_width, screen_height, *sizes.spaceship)
        self.mystery_ship = MysteryShip(screen_width, *sizes.mystery)
        self.obstacles: list[Obstacle] = []
        self.aliens: list[Alien] = []
        self.alien_lasers: list[Laser] = []
        self._init_game()

    def _init_game(self) -> None:
        self.obstacles = self._create_obstacles()
        self.aliens = self._create_aliens()
        self.aliens_direction = 1
        self.time_last_alien_fired = 0.0
        self.time_last_mystery_spawn = 0.0
        self.mystery_spawn_interval = float(self.rng.randint(*MYSTERY_INTERVAL))
        self.lives = STARTING_LIVES
        self.run = True
        self.score = 0
        self.highscore = load_highscore(self.highscore_path)

    def _reset(self) -> None:
        self.spaceship.reset()
        self.aliens.clear()
        self.alien_lasers.clear()
        self.obstacles.clear()

    def _game_over(self) -> None:
        self.run = False

    def _create_obstacles(self) -> list[Obstacle]:
        width = Obstacle.width()
        gap = float((self.screen_width - OBSTACLE_COUNT * width) // (OBSTACLE_COUNT + 1))
        y = float(self.screen_height - OBSTACLE_RAISE)
        return [Obstacle((i + 1) * gap + i * width, y) for i in range(OBSTACLE_COUNT)]

    def _create_aliens(self) -> list[Alien]:
        aliens = []
        for row in range(FLEET_ROWS):
            if row == 0:
                kind = 3
            elif row in (1, 2):
                kind = 2
            else:
                kind = 1
            width, height = self.sizes.aliens[kind]
            for column in range(FLEET_COLUMNS):
                x = float(FLEET_X + column * ALIEN_SPACING)
                y = float(FLEET_Y + row * ALIEN_SPACING)
                aliens.append(Alien(kind, x, y, width, height))
        return aliens

    def handle_input(self, left: bool, right: bool, fire: bool, now: float) -> None:
        """Apply the player's controls for this frame."""
        if not self.run:
            return
        if left:
            self.spaceship.move_left()
        elif right:
            self.spaceship.move_right()
        if fire and self.spaceship.fire_laser(now) and self.on_laser is not None:
            self.on_laser()

    def update(self, now: float, restart: bool = False) -> None:
        """Advance the game one frame; when over, ``restart`` starts a new one."""
        if self.run:
            if now - self.time_last_mystery_spawn > self.mystery_spawn_interval:
                self.mystery_ship.spawn(self.rng.randint(0, 1))
                self.time_last_mystery_spawn = now
                self.mystery_spawn_interval = float(self.rng.randint(*MYSTERY_INTERVAL))
            self.mystery_ship.update()

            for laser in self.spaceship.lasers:
                laser.update(self.screen_height)
            self._alien_shoot_laser(now)
            self._move_aliens()
            for laser in self.alien_lasers:
                laser.update(self.screen_height)
            self._check_for_collisions()
            self._delete_inactive_lasers()
        elif restart:
            self._reset()
            self._init_game()

    def _delete_inactive_lasers(self) -> None:
        self.spaceship.lasers[:] = [laser for laser in self.spaceship.lasers if laser.active]
        self.alien_lasers[:] = [laser for laser in self.alien_lasers if laser.active]

    def _move_aliens(self) -> None:
        for alien in self.aliens:
            if alien.x + alien.width > self.screen_width - EDGE:
                self.aliens_direction = -1
                self._move_aliens_down(ALIEN_DROP)
            if alien.x < EDGE:
                self.aliens_direction = 1
                self._move_aliens_down(ALIEN_DROP)
            alien.update(self.aliens_direction)

    def _move_aliens_down(self, distance: int) -> None:
        for alien in self.aliens:
            alien.y += distance

    def _alien_shoot_laser(self, now: float) -> None:
        if now - self.time_last_alien_fired < ALIEN_LASER_INTERVAL or not self.aliens:
            return
        alien = self.aliens[self.rng.randint(0, len(self.aliens) - 1)]
        self.alien_lasers.append(
            Laser(alien.x + int(alien.width) // 2, alien.y + alien.height, ALIEN_LASER_SPEED)
        )
        self.time_last_alien_fired = now

    def _explode(self) -> None:
        if self.on_explosion is not None:
            self.on_explosion()

    def _award(self, points: int) -> None:
        self.score += points
        self._check_for_highscore()

    def _check_for_collisions(self) -> None:
        for laser in self.spaceship.lasers:
            survivors = []
            for alien in self.aliens:
                if alien.rect().collides(laser.rect()):
                    self._explode()
                    self._award(alien.points())
                    laser.active = False
                else:
                    survivors.append(alien)
            self.aliens = survivors

            for obstacle in self.obstacles:
                if obstacle.erase_colliding(laser.rect()):
                    laser.active = False

            if self.mystery_ship.rect().collides(laser.rect()):
                self.mystery_ship.alive = False
                laser.active = False
                self._award(MYSTERY_POINTS)
                self._explode()

        for laser in self.alien_lasers:
            if laser.rect().collides(self.spaceship.rect()):
                laser.active = False
                self.lives -= 1
                if self.lives == 0:
                    self._game_over()
            for obstacle in self.obstacles:
                if obstacle.erase_colliding(laser.rect()):
                    laser.active = False

        for alien in self.aliens:
            for obstacle in self.obstacles:
                obstacle.erase_colliding(alien.rect())
            if alien.rect().collides(self.spaceship.rect()):
                self._game_over()

    def _check_for_highscore(self) -> None:
        if self.score > self.highscore:
            self.highscore = self.score
            save_highscore(self.highscore_path, self.highscore)

    def draw(self, surface: pygame.Surface, images: Mapping[str, pygame.Surface]) -> None:
        """Draw everything; ``images`` holds 'spaceship', 'mystery' and 'alien_1'..'alien_3'."""
        self.spaceship.draw(surface, images["spaceship"])
        for laser in self.spaceship.lasers:
            laser.draw(surface)
        for obstacle in self.obstacles:
            obstacle.draw(surface)
        alien_images = {kind: images[f"alien_{kind}"] for kind in POINTS}
        for alien in self.aliens:
            alien.draw(surface, alien_images)
        for laser in self.alien_lasers:
            laser.draw(surface)
        self.mystery_ship.draw(surface, images["mystery"])