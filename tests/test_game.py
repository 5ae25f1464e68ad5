from pathlib import Path

import pygame
import pytest

from mazechase.character import (
    HEALTH_POINTS,
    START_LIVES,
    START_POSITION,
    Direction,
    Outcome,
)
from mazechase.food import Health, Poison
from mazechase.game import Game, restart_clicked, screen_clicked


@pytest.fixture
def game(tmp_path):
    return Game(tmp_path)


@pytest.mark.parametrize(
    "pos, expected",
    [
        ((270, 260), True),
        ((560, 630), True),
        ((400, 400), True),
        ((269, 400), False),
        ((561, 400), False),
        ((400, 259), False),
        ((400, 631), False),
    ],
)
def test_screen_clicked(pos, expected):
    assert screen_clicked(pos) is expected


@pytest.mark.parametrize(
    "pos, expected",
    [
        ((270, 600), True),
        ((560, 730), True),
        ((269, 650), False),
        ((400, 599), False),
        ((400, 731), False),
        ((561, 650), False),
    ],
)
def test_restart_clicked(pos, expected):
    assert restart_clicked(pos) is expected


def test_asset_dir_is_path(tmp_path):
    assert Game(str(tmp_path)).asset_dir == Path(tmp_path)


def test_new_round_places_items_on_matching_cells(game):
    assert len(game.health) > 0
    assert len(game.poison) > 0
    assert all(game.maze.cell(x, y) == " " for x, y in game.health)
    assert all(game.maze.cell(x, y) == "x" for x, y in game.poison)


def test_new_round_creates_three_ghosts(game):
    assert [ghost.ghost_id for ghost in game.ghosts] == [0, 1, 2]


def test_first_step_eats_pellet_under_player(game):
    assert (10, 11) in game.health
    outcome = game.step()
    assert outcome == Outcome.CONTINUE
    assert game.pacman.score == HEALTH_POINTS
    assert (10, 11) not in game.health


def test_new_round_restores_items(game):
    before = len(game.health)
    game.step()
    assert len(game.health) == before - 1
    game.new_round()
    assert len(game.health) == before


def test_eating_last_pellet_wins(game):
    game.health = Health()
    game.health.add(10, 11)
    assert game.step() == Outcome.WON
    assert game.health.is_empty()


def test_poison_with_no_score_loses(game):
    game.health = Health()
    game.health.add(2, 1)
    game.poison = Poison()
    game.poison.add(10, 11)
    assert game.step() == Outcome.LOST
    assert (10, 11) not in game.poison


def test_ghost_contact_costs_a_life(game):
    game.ghosts[0].set_position(*START_POSITION)
    assert game.step() == Outcome.CONTINUE
    assert game.pacman.lives == START_LIVES - 1
    assert game.pacman.position == START_POSITION


def test_step_respects_pressed_keys(game):
    game.step({Direction.LEFT})
    x, y = game.pacman.position
    assert x < START_POSITION[0]
    assert y == START_POSITION[1]


def test_start_screen_without_image_reports_error(game, capsys):
    window = pygame.Surface((10, 10))
    assert game.start_screen(window) is False
    assert "Could not load" in capsys.readouterr().err


def test_end_screen_without_image_reports_error(game, capsys):
    window = pygame.Surface((10, 10))
    assert game.end_screen(window, True) is False
    assert "win_screen.jpg" in capsys.readouterr().err