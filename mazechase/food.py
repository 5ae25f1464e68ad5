"""Collectable items laid out on maze cells: health pellets and poison."""

from __future__ import annotations

from collections.abc import Iterator

import pygame

CELL_SIZE = 16
PELLET_RADIUS = 2.5
PELLET_OFFSET = 5
POISON_FALLBACK_COLOR = (255, 0, 0)

Cell = tuple[int, int]


class Food:
    """An ordered collection of item locations, in maze cell coordinates."""

    def __init__(self) -> None:
        self._locations: list[Cell] = []

    def add(self, x: int, y: int) -> None:
        """Place an item on cell (x, y)."""
        self._locations.append((x, y))

    def remove(self, x: int, y: int) -> None:
        """Take the first item on cell (x, y) away; KeyError if there is none."""
        try:
            self._locations.remove((x, y))
        except ValueError:
            raise KeyError(f"no item at {{{x}, {y}}}") from None

    def __contains__(self, cell: object) -> bool:
        return cell in self._locations

    def __len__(self) -> int:
        return len(self._locations)

    def __iter__(self) -> Iterator[Cell]:
        return iter(list(self._locations))

    def is_empty(self) -> bool:
        """True when every item has been taken."""
        return not self._locations

    def draw(self, surface: pygame.Surface, color) -> None:
        """Draw every item as a small filled circle of the given colour."""
        for x, y in self._locations:
            center = (
                x * CELL_SIZE + PELLET_OFFSET + PELLET_RADIUS,
                y * CELL_SIZE + PELLET_OFFSET + PELLET_RADIUS,
            )
            pygame.draw.circle(surface, color, center, PELLET_RADIUS)


class Health(Food):
    """Pellets that raise the score when eaten."""


class Poison(Food):
    """Items that lower the score when eaten.

    ``sprite`` may be set to an already scaled image; without one a red
    pellet is drawn instead.
    """

    sprite: pygame.Surface | None = None

    def draw(self, surface: pygame.Surface) -> None:  # type: ignore[override]
        """Draw every poison item on its cell."""
        if self.sprite is None:
            super().draw(surface, POISON_FALLBACK_COLOR)
            return
        for x, y in self._locations:
            surface.blit(self.sprite, (x * CELL_SIZE, y * CELL_SIZE))