# invaders

A Space Invaders arcade game for the desktop, built on pygame.

Rows of aliens march from side to side across the screen. Each time the
formation reaches an edge, it drops a little lower. Shoot the aliens before
they reach your ship. Four shields stand between you and them. Every shot
that hits a shield wears part of it away, whether the shot is yours or
theirs. Aliens that run into a shield wear it away as well. Now and then a
mystery ship crosses the top of the screen. It is worth extra points.

## Installation

```
pip install .
```

## Playing

```
invaders
```

The game needs a directory of assets that holds the following files:

- `spaceship.png`, `mystery.png`, `alien_1.png`, `alien_2.png` and
  `alien_3.png` for the sprites
- `monogram.ttf` for the score board
- `music.ogg`, `explosion.ogg` and `laser.ogg` for sound

If the sound cannot be loaded, the game runs silently. The images and the
font must be present.

### Options

- `--assets DIR` sets the directory that holds the images, sounds and font.
  The default is `assets` in the current directory.
- `--highscore FILE` sets the file that holds the high score. The default is
  `highscore.txt` in the current directory.

### Controls

- The left and right arrow keys move the ship.
- Space fires. You can fire at most one shot every 0.35 seconds.
- Enter starts a new game after a game over.
- Escape, or closing the window, quits.

### Scoring

| Target | Points |
| --- | --- |
| Bottom two rows of aliens | 100 |
| Middle two rows of aliens | 200 |
| Top row of aliens | 300 |
| Mystery ship | 1000 |

You start with three lives, shown at the bottom of the window. Each alien
shot that hits your ship costs one life. The game ends when you have no lives
left, or when an alien reaches your ship.

The high score is written to the high-score file each time you beat it. It
is read back when a game starts. A missing or unreadable file counts as a
high score of 0.

### What the game does not have

There is a single wave of aliens. When you clear it, no new wave appears and
the game does not move on to a further level. The status line always reads
"Level 01" until the game is over.

## Using the game logic

The rules do not depend on a window, so they can be driven from code.
`invaders.game.Game` takes the screen size and a `SpriteSizes` with the
pixel sizes of the sprites. It also takes an optional high-score path, a
`random.Random`, and callbacks for explosions and laser shots. Call
`handle_input(left, right, fire, now)` and `update(now, restart)` once per
frame, with `now` in seconds. Call `draw(surface, images)` to render onto a
pygame surface. `load_highscore` and `save_highscore` read and write the
high-score file.

## Development

```
pip install -e ".[test]"
pytest
```