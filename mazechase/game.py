"""Screens, the main loop and the command that starts the game."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Collection, Iterable
from pathlib import Path

import pygame

from mazechase.character import (
    GHOST_STARTS,
    HEART_SPRITE,
    PACMAN_SPRITE,
    DATA_FONT_SIZE,
    SCORE_FONT_SIZE,
    Direction,
    Ghost,
    Outcome,
    Pacman,
)
from mazechase.food import Health, Poison
from mazechase.maze import Maze

CELL_SIZE = 16
MAP_W = 21
MAP_H = 21
HUD_HEIGHT = 40
SCREEN_RESIZE = 2
FRAME_RATE = 100

VIEW_SIZE = (CELL_SIZE * MAP_W, HUD_HEIGHT + CELL_SIZE * MAP_H)
WINDOW_SIZE = (VIEW_SIZE[0] * SCREEN_RESIZE, VIEW_SIZE[1] * SCREEN_RESIZE)
TITLE = "Pac-Man"

START_IMAGE = "new_start.jpg"
WIN_IMAGE = "win_screen.jpg"
LOSE_IMAGE = "lose_screen.jpg"
SCREEN_SCALE = (0.4, 0.4)
POISON_SPRITE = ("poison_sprite.png", (0.035, 0.035))
FONT_FILE = "ka1.ttf"
HEALTH_COLOR = (0, 255, 0)
BLACK = (0, 0, 0)
_FALLBACK_COLORS = {
    PACMAN_SPRITE[0]: (255, 255, 0),
    HEART_SPRITE[0]: (255, 0, 0),
    "mikaal_sprite.png": (255, 0, 0),
    "adeenah_sprite.png": (255, 105, 180),
    "afeera_sprite.png": (0, 255, 255),
}

_KEYS = {
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
}


def screen_clicked(pos: tuple[int, int]) -> bool:
    """True if a click at window position ``pos`` hits the start button."""
    x, y = pos
    return 270 <= x <= 560 and 260 <= y <= 630


def restart_clicked(pos: tuple[int, int]) -> bool:
    """True if a click at window position ``pos`` hits the restart button."""
    x, y = pos
    return 270 <= x <= 560 and 600 <= y <= 730


class Game:
    """One player, three ghosts, the maze and its items, and the screens around them."""

    def __init__(self, asset_dir: str | Path = ".") -> None:
        self.asset_dir = Path(asset_dir)
        self.pacman = Pacman()
        self.maze = Maze()
        self.health = Health()
        self.poison = Poison()
        self.ghosts: list[Ghost] = []
        self._last_direction: int = 5
        self._images: dict[tuple[str, tuple[float, float]], pygame.Surface] = {}
        self._fonts: dict[int, pygame.font.Font] = {}
        self.new_round()

    def new_round(self) -> None:
        """Lay out fresh items and ghosts for a round of play."""
        self.health = Health()
        self.poison = Poison()
        self.poison.sprite = self._images.get(POISON_SPRITE)
        self.maze.populate(self.health, self.poison)
        self.ghosts = [Ghost(ghost_id) for ghost_id in sorted(GHOST_STARTS)]
        self._last_direction = 5

    def step(self, pressed: Collection[Direction] = ()) -> Outcome:
        """Move the ghosts, then the player, by one frame; report the outcome."""
        for ghost in self.ghosts:
            self._last_direction = ghost.move(self.pacman, self.maze, self._last_direction)
        return self.pacman.movement(
            self.maze, self.health, self.poison, self.ghosts, pressed
        )

    def run(self) -> None:
        """Open the window and cycle through start, play and end screens until closed."""
        pygame.init()
        try:
            window = pygame.display.set_mode(WINDOW_SIZE)
            pygame.display.set_caption(TITLE)
            while self.start_screen(window):
                outcome = self.play(window)
                if outcome is None:
                    break
                if not self.end_screen(window, outcome == Outcome.WON):
                    break
        finally:
            pygame.quit()

    def start_screen(self, window: pygame.Surface) -> bool:
        """Show the title image; True once the start button is clicked, False if closed."""
        image = self._screen_image(START_IMAGE)
        if image is None:
            return False
        canvas = pygame.Surface(VIEW_SIZE)
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return False
                if event.type == pygame.MOUSEBUTTONDOWN and screen_clicked(event.pos):
                    return True
            canvas.fill(BLACK)
            canvas.blit(image, (0, 0))
            self._present(canvas, window)

    def end_screen(self, window: pygame.Surface, won: bool) -> bool:
        """Show the win or lose image with the score; True (after a reset) on restart."""
        image = self._screen_image(WIN_IMAGE if won else LOSE_IMAGE)
        if image is None:
            return False
        canvas = pygame.Surface(VIEW_SIZE)
        font = self._font(SCORE_FONT_SIZE)
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return False
                if event.type == pygame.MOUSEBUTTONDOWN and restart_clicked(event.pos):
                    self.pacman.reset()
                    return True
            canvas.fill(BLACK)
            canvas.blit(image, (0, 0))
            self.pacman.draw_score(canvas, font)
            self._present(canvas, window)

    def play(self, window: pygame.Surface) -> Outcome | None:
        """Run a round until it is won or lost; None if the window is closed."""
        self._load_sprites()
        self.new_round()
        canvas = pygame.Surface(VIEW_SIZE)
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return None
            keys = pygame.key.get_pressed()
            pressed = {direction for key, direction in _KEYS.items() if keys[key]}

            canvas.fill(BLACK)
            self.update(canvas)
            for ghost in self.ghosts:
                ghost.draw(canvas, self._image(*ghost.sprite))
            self.pacman.draw(canvas, self._image(*PACMAN_SPRITE))
            self.maze.draw(canvas)
            outcome = self.step(pressed)
            self._present(canvas, window)
            if outcome != Outcome.CONTINUE:
                return outcome
            clock.tick(FRAME_RATE)

    def update(self, window: pygame.Surface) -> None:
        """Draw the items and the score and lives panel onto the surface."""
        self.health.draw(window, HEALTH_COLOR)
        self.poison.draw(window)
        self.pacman.draw_data(window, self._font(DATA_FONT_SIZE), self._image(*HEART_SPRITE))

    @staticmethod
    def _present(canvas: pygame.Surface, window: pygame.Surface) -> None:
        pygame.transform.scale(canvas, window.get_size(), window)
        pygame.display.flip()

    def _load(self, name: str, scale: tuple[float, float]) -> pygame.Surface | None:
        try:
            image = pygame.image.load(str(self.asset_dir / name))
        except (pygame.error, OSError):
            return None
        width, height = image.get_size()
        size = (max(1, round(width * scale[0])), max(1, round(height * scale[1])))
        return pygame.transform.smoothscale(image, size)

    def _screen_image(self, name: str) -> pygame.Surface | None:
        image = self._load(name, SCREEN_SCALE)
        if image is None:
            print(f"Error: Could not load screen image {name}!", file=sys.stderr)
        return image

    def _image(self, name: str, scale: tuple[float, float]) -> pygame.Surface:
        key = (name, scale)
        if key not in self._images:
            image = self._load(name, scale)
            if image is None:
                image = pygame.Surface((CELL_SIZE, CELL_SIZE))
                image.fill(_FALLBACK_COLORS.get(name, (255, 255, 255)))
            self._images[key] = image
        return self._images[key]

    def _load_sprites(self) -> None:
        sprites: Iterable[tuple[str, tuple[float, float]]] = (
            PACMAN_SPRITE,
            HEART_SPRITE,
            *(ghost.sprite for ghost in self.ghosts),
        )
        for name, scale in sprites:
            self._image(name, scale)
        if POISON_SPRITE not in self._images:
            poison = self._load(*POISON_SPRITE)
            if poison is not None:
                self._images[POISON_SPRITE] = poison

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            try:
                font = pygame.font.Font(str(self.asset_dir / FONT_FILE), size)
            except (pygame.error, OSError):
                font = pygame.font.Font(None, size)
            self._fonts[size] = font
        return self._fonts[size]


def main(argv: list[str] | None = None) -> int:
    """Start the game."""
    parser = argparse.ArgumentParser(prog="mazechase", description="A maze chase game.")
    parser.add_argument(
        "--assets",
        default=".",
        help="directory holding the images and the font (default: current directory)",
    )
    args = parser.parse_args(argv)
    Game(args.assets).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())