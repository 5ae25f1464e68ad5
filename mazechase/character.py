"""The player and the ghosts: movement, collisions, scoring and lives."""

from __future__ import annotations

import math
from collections.abc import Collection, Sequence
from enum import IntEnum

import pygame

from mazechase.food import Health, Poison
from mazechase.maze import Maze

CELL_SIZE = 16
START_POSITION = (160.0, 176.0)
DEFAULT_SPRITE_SIZE = (CELL_SIZE, CELL_SIZE)
HITBOX_REDUCTION = 0.9

HEALTH_POINTS = 50
POISON_PENALTY = 20
MAX_LIVES = 3
START_LIVES = 2
DIRECTION_DELAY = 3

WHITE = (255, 255, 255)
DATA_FONT_SIZE = 15
SCORE_FONT_SIZE = 18
HEART_LOCATIONS = ((16, 337), (40, 337), (64, 337))

PACMAN_SPRITE = ("scroll_sprite.png", (0.035, 0.035))
HEART_SPRITE = ("heart_1.png", (0.05, 0.05))
GHOST_SPRITES = {
    0: ("mikaal_sprite.png", (0.03, 0.03)),
    1: ("adeenah_sprite.png", (0.028, 0.025)),
    2: ("afeera_sprite.png", (0.03, 0.03)),
}
GHOST_STARTS = {
    0: (180.0, 112.0),
    1: (160.0, 38.0),
    2: (160.0, 304.0),
}

Box = tuple[float, float, float, float]


class Direction(IntEnum):
    """A heading on the grid."""

    RIGHT = 0
    LEFT = 1
    UP = 2
    DOWN = 3

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @property
    def step(self) -> tuple[int, int]:
        return _STEPS[self]


_OPPOSITES = {
    Direction.RIGHT: Direction.LEFT,
    Direction.LEFT: Direction.RIGHT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}
_STEPS = {
    Direction.RIGHT: (1, 0),
    Direction.LEFT: (-1, 0),
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
}
_KEY_PRIORITY = (Direction.RIGHT, Direction.LEFT, Direction.UP, Direction.DOWN)


class Outcome(IntEnum):
    """What a frame of play led to."""

    CONTINUE = 0
    LOST = 1
    WON = 2


def _intersects(a: Box, b: Box) -> bool:
    a_left, a_top, a_w, a_h = a
    b_left, b_top, b_w, b_h = b
    left = max(min(a_left, a_left + a_w), min(b_left, b_left + b_w))
    right = min(max(a_left, a_left + a_w), max(b_left, b_left + b_w))
    top = max(min(a_top, a_top + a_h), min(b_top, b_top + b_h))
    bottom = min(max(a_top, a_top + a_h), max(b_top, b_top + b_h))
    return left < right and top < bottom


class Character:
    """Something that moves through the maze in pixel coordinates."""

    def __init__(self) -> None:
        self.position: tuple[float, float] = START_POSITION
        self.speed = 2
        self.direction = Direction.RIGHT
        self.size: tuple[float, float] = DEFAULT_SPRITE_SIZE

    def respawn(self) -> None:
        """Return to the starting position."""
        self.position = START_POSITION

    def set_position(self, x, y) -> None:
        self.position = (float(x), float(y))

    def _bounds(self) -> Box:
        x, y = self.position
        width, height = self.size
        return (x, y, float(width), float(height))

    def hitbox(self) -> Box:
        """The sprite bounds shrunk around their centre, as (left, top, width, height)."""
        left, top, width, height = self._bounds()
        dw = width * HITBOX_REDUCTION
        dh = height * HITBOX_REDUCTION
        return (left + dw / 2, top + dh / 2, width - dw, height - dh)

    def wall_collision(self, pos_x, pos_y, maze: Maze) -> bool:
        """True if a sprite at (pos_x, pos_y) would overlap any wall cell."""
        cell_x = int(pos_x) / CELL_SIZE
        cell_y = int(pos_y) / CELL_SIZE
        xs = {math.floor(cell_x), math.ceil(cell_x)}
        ys = {math.floor(cell_y), math.ceil(cell_y)}
        return any(maze.is_wall(x, y) for x in xs for y in ys)

    def _walls(self, maze: Maze, speed) -> dict[Direction, bool]:
        x, y = self.position
        return {
            d: self.wall_collision(x + d.step[0] * speed, y + d.step[1] * speed, maze)
            for d in Direction
        }

    def _advance(self, direction: Direction, speed) -> None:
        x, y = self.position
        dx, dy = direction.step
        self.position = (x + dx * speed, y + dy * speed)

    def draw(self, surface: pygame.Surface, image: pygame.Surface) -> None:
        """Blit the (already scaled) image at the position; its size becomes the bounds."""
        self.size = image.get_size()
        surface.blit(image, self.position)


class Pacman(Character):
    """The player: eats health, avoids poison and ghosts."""

    def __init__(self) -> None:
        super().__init__()
        self.lives = START_LIVES
        self.score = 0

    def increase_lives(self) -> None:
        if self.lives < MAX_LIVES:
            self.lives += 1

    def movement(
        self,
        maze: Maze,
        health: Health,
        poison: Poison,
        ghosts: Sequence[Ghost],
        pressed: Collection[Direction] = (),
    ) -> Outcome:
        """Advance one frame given the pressed direction keys and report the outcome."""
        outcome = Outcome.CONTINUE
        walls = self._walls(maze, self.speed)

        wanted = next((d for d in _KEY_PRIORITY if d in pressed), None)
        if wanted is not None and not walls[wanted]:
            self.direction = wanted

        if not walls[self.direction]:
            self._advance(self.direction, self.speed)

        x, y = self.position
        span = CELL_SIZE * maze.width
        if x < -CELL_SIZE:
            x = span - self.speed
        elif x >= span:
            x = self.speed - CELL_SIZE
        self.position = (x, y)

        cell = (int(x / CELL_SIZE), int(y / CELL_SIZE))
        if cell in health:
            self.score += HEALTH_POINTS
            health.remove(*cell)
            if health.is_empty():
                outcome = Outcome.WON
        if cell in poison:
            poison.remove(*cell)
            self.score -= POISON_PENALTY
            if self.score < 0:
                outcome = Outcome.LOST

        own = self._bounds()
        if any(_intersects(ghost.hitbox(), own) for ghost in ghosts):
            outcome = self.died()
        return outcome

    def died(self) -> Outcome:
        """Lose a life and respawn, or lose the game when none are left."""
        if self.lives == 0:
            return Outcome.LOST
        self.lives -= 1
        self.respawn()
        return Outcome.CONTINUE

    def reset(self) -> None:
        """Start afresh: no score, starting position and lives."""
        self.score = 0
        self.position = START_POSITION
        self.lives = START_LIVES

    def draw_data(self, surface: pygame.Surface, font, heart: pygame.Surface) -> None:
        """Draw the running score and one heart per remaining life."""
        surface.blit(font.render(str(self.score), True, WHITE), (220, 340))
        surface.blit(font.render("Score: ", True, WHITE), (150, 340))
        for location in HEART_LOCATIONS[: self.lives + 1]:
            surface.blit(heart, location)

    def draw_score(self, surface: pygame.Surface, font) -> None:
        """Draw the final score on an end screen."""
        surface.blit(font.render("Score:", True, WHITE), (95, 240))
        surface.blit(font.render(str(self.score), True, WHITE), (180, 240))


class Ghost(Character):
    """A chaser whose target depends on its id.

    The delay between changes of course is shared by all ghosts, so they
    take turns choosing a new heading.
    """

    direction_delay = 0

    def __init__(self, ghost_id: int) -> None:
        super().__init__()
        if ghost_id not in GHOST_STARTS:
            raise ValueError(f"unknown ghost id {ghost_id}")
        self.ghost_id = ghost_id
        self.position = GHOST_STARTS[ghost_id]
        self.target: tuple[float, float] = self.position
        self.speed = 1

    @property
    def sprite(self) -> tuple[str, tuple[float, float]]:
        """Image file name and scale for this ghost."""
        return GHOST_SPRITES[self.ghost_id]

    def find_target(self, pacman: Pacman) -> None:
        """Aim at the player, or a few cells off depending on its heading."""
        x, y = pacman.position
        if self.ghost_id != 0:
            reach = CELL_SIZE * (4 if self.ghost_id == 1 else 2)
            heading = pacman.direction
            if heading == Direction.RIGHT:
                x += reach
            elif heading == Direction.LEFT:
                y -= reach
            elif heading == Direction.UP:
                x -= reach
            elif heading == Direction.DOWN:
                y += reach
        self.target = (x, y)

    def move(self, pacman: Pacman, maze: Maze, last_direction) -> Direction:
        """Advance one frame toward the target and return the heading taken."""
        walls = self._walls(maze, self.speed)

        if Ghost.direction_delay > 0:
            Ghost.direction_delay -= 1
        else:
            try:
                opposite = Direction(last_direction).opposite
            except ValueError:
                opposite = None

            self.find_target(pacman)
            dx = int(self.target[0] - self.position[0])
            dy = int(self.target[1] - self.position[1])
            if abs(dx) >= abs(dy):
                if dx > 0 and not walls[Direction.RIGHT]:
                    self.direction = Direction.RIGHT
                elif dx < 0 and not walls[Direction.LEFT]:
                    self.direction = Direction.LEFT
            else:
                if dy > 0 and not walls[Direction.DOWN]:
                    self.direction = Direction.DOWN
                elif dy < 0 and not walls[Direction.UP]:
                    self.direction = Direction.UP

            if walls[self.direction] or self.direction == opposite:
                self.direction = next(
                    (d for d in Direction if not walls[d] and d != opposite),
                    self.direction,
                )
            Ghost.direction_delay = DIRECTION_DELAY

        if not walls[self.direction]:
            self._advance(self.direction, self.speed)
        return self.direction

    def draw(self, surface: pygame.Surface, image: pygame.Surface) -> None:
        """Blit this ghost's (already scaled) image at its position."""
        super().draw(surface, image)