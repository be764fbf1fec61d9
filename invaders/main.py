"""The Space Invaders window: input, frame loop and the score board."""

from __future__ import annotations

import argparse
import time
from pathlib import Path

import pygame

from invaders.alien import POINTS
from invaders.game import DEFAULT_HIGHSCORE_PATH, Game, SpriteSizes

GREY = (29, 29, 27)
BLUE = (0, 121, 241)
RED = (230, 41, 55)
OFFSET = 50
WINDOW_WIDTH = 750
WINDOW_HEIGHT = 700
FPS = 60
FONT_SIZE = 34
SCORE_WIDTH = 5


def format_with_leading_zeros(number: int, width: int) -> str:
    """Pad ``number`` with zeros on the left to ``width`` characters."""
    text = str(number)
    return "0" * (width - len(text)) + text


def _load_images(assets: Path) -> dict[str, pygame.Surface]:
    names = {"spaceship": "spaceship.png", "mystery": "mystery.png"}
    names.update({f"alien_{kind}": f"alien_{kind}.png" for kind in POINTS})
    return {key: pygame.image.load(str(assets / name)).convert_alpha() for key, name in names.items()}


def _load_audio(assets: Path) -> tuple[pygame.mixer.Sound | None, pygame.mixer.Sound | None]:
    try:
        pygame.mixer.init()
        pygame.mixer.music.load(str(assets / "music.ogg"))
        pygame.mixer.music.play(-1)
        explosion = pygame.mixer.Sound(str(assets / "explosion.ogg"))
        laser = pygame.mixer.Sound(str(assets / "laser.ogg"))
    except pygame.error:
        return None, None
    return explosion, laser


def _draw_frame(screen: pygame.Surface, font: pygame.font.Font, game: Game,
                images: dict[str, pygame.Surface]) -> None:
    screen.fill(GREY)
    pygame.draw.rect(screen, BLUE, pygame.Rect(10, 10, 780, 780), width=4, border_radius=70)
    pygame.draw.line(screen, BLUE, (25, 730), (775, 730), 3)
    status = "Level 01" if game.run else "GAME OVER"
    screen.blit(font.render(status, True, RED), (570, 740))

    for life in range(game.lives):
        screen.blit(images["spaceship"], (50 + life * 50, 745))

    screen.blit(font.render("SCORE", True, RED), (50, 15))
    screen.blit(font.render(format_with_leading_zeros(game.score, SCORE_WIDTH), True, RED), (50, 40))
    screen.blit(font.render("HIGH-SCORE", True, RED), (570, 15))
    screen.blit(
        font.render(format_with_leading_zeros(game.highscore, SCORE_WIDTH), True, RED), (655, 40)
    )
    game.draw(screen, images)


def _run(assets: Path, highscore_path: Path) -> int:
    screen_size = (WINDOW_WIDTH + OFFSET, WINDOW_HEIGHT + 2 * OFFSET)
    screen = pygame.display.set_mode(screen_size)
    pygame.display.set_caption("Space Invaders")
    clock = pygame.time.Clock()
    font = pygame.font.Font(str(assets / "monogram.ttf"), FONT_SIZE)
    images = _load_images(assets)
    sizes = SpriteSizes(
        spaceship=images["spaceship"].get_size(),
        mystery=images["mystery"].get_size(),
        aliens={kind: images[f"alien_{kind}"].get_size() for kind in POINTS},
    )
    explosion, laser = _load_audio(assets)
    game = Game(
        *screen_size,
        sizes,
        highscore_path=highscore_path,
        on_explosion=explosion.play if explosion is not None else None,
        on_laser=laser.play if laser is not None else None,
    )

    start = time.monotonic()
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT or (
                event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
            ):
                return 0
        now = time.monotonic() - start
        keys = pygame.key.get_pressed()
        game.handle_input(keys[pygame.K_LEFT], keys[pygame.K_RIGHT], keys[pygame.K_SPACE], now)
        game.update(now, restart=keys[pygame.K_RETURN])
        _draw_frame(screen, font, game, images)
        pygame.display.flip()
        clock.tick(FPS)


def main(argv: list[str] | None = None) -> int:
    """Open the game window and play until it is closed."""
    parser = argparse.ArgumentParser(prog="invaders", description="Play Space Invaders.")
    parser.add_argument("--assets", type=Path, default=Path("assets"),
                        help="directory holding images, sounds and the font")
    parser.add_argument("--highscore", type=Path, default=DEFAULT_HIGHSCORE_PATH,
                        help="file the high score is kept in")
    args = parser.parse_args(argv)
    pygame.init()
    try:
        return _run(args.assets, args.highscore)
    finally:
        pygame.quit()


if __name__ == "__main__":
    raise SystemExit(main())