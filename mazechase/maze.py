"""The maze layout, its walls and the items it starts with."""

from __future__ import annotations

from collections.abc import Sequence

import pygame

from mazechase.food import Health, Poison

CELL_SIZE = 16
WALL_COLOR = (32, 81, 190)

WALL = "#"
HEALTH = " "
POISON = "x"

DEFAULT_SKETCH: tuple[str, ...] = (
    ".###################.",
    ".#      #x       x #.",
    ".# ## ####  ### ## #.",
    ".#  x     x        #.",
    ".# ## #x#####x# ## #.",
    ".#    #   #   #    #.",
    ".#### ### # ### ####.",
    "....# #       # #....",
    "##### # ## ## # #####",
    "        #   #        ",
    "##### # ## ## # #####",
    "....# #       # #....",
    ".#### # ##### # ####.",
    ".#      #          #.",
    ".# ## ###x# ### ## #.",
    ".# #             # #.",
    ".## # # ##### # # ##.",
    ".#    #   #x  #    #.",
    ".# ###### # ###### #.",
    ".#      #          #.",
    ".###################.",
)


def draw_wall(surface: pygame.Surface, x: int, y: int) -> None:
    """Fill cell (x, y) with the wall colour."""
    rect = pygame.Rect(x * CELL_SIZE, y * CELL_SIZE, CELL_SIZE, CELL_SIZE)
    pygame.draw.rect(surface, WALL_COLOR, rect)


class Maze:
    """A rectangular grid of cells: '#' wall, ' ' health, 'x' poison, '.' empty."""

    def __init__(self, sketch: Sequence[str] = DEFAULT_SKETCH) -> None:
        rows = tuple(sketch)
        if not rows:
            raise ValueError("maze sketch is empty")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("maze sketch rows differ in length")
        self.sketch = rows

    @property
    def width(self) -> int:
        return len(self.sketch[0])

    @property
    def height(self) -> int:
        return len(self.sketch)

    def cell(self, x: int, y: int) -> str:
        """Return the character at column x, row y; IndexError outside the grid."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) is outside the maze")
        return self.sketch[y][x]

    def is_wall(self, x: int, y: int) -> bool:
        """True if (x, y) lies on the grid and holds a wall."""
        return 0 <= x < self.width and 0 <= y < self.height and self.sketch[y][x] == WALL

    def populate(self, health: Health, poison: Poison) -> None:
        """Add the starting health and poison items, column by column."""
        for x in range(self.width):
            for y in range(self.height):
                mark = self.sketch[y][x]
                if mark == HEALTH:
                    health.add(x, y)
                elif mark == POISON:
                    poison.add(x, y)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw every wall cell."""
        for y, row in enumerate(self.sketch):
            for x, mark in enumerate(row):
                if mark == WALL:
                    draw_wall(surface, x, y)