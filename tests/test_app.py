import random
from collections import defaultdict

import pygame
import pytest

from pacgame.app import (
    BLACK,
    DARKBLUE,
    GOLD,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    YELLOW,
    draw,
    input_offset,
)
from pacgame.game import Game, default_board, tile_center


def _keys(*pressed):
    state = defaultdict(bool)
    for key in pressed:
        state[key] = True
    return state


@pytest.fixture
def font():
    pygame.font.init()
    return pygame.font.Font(None, 20)


def _pixel(surface, pos):
    return tuple(surface.get_at((int(pos[0]), int(pos[1]))))[:3]


def test_no_keys_no_movement():
    assert input_offset(_keys(), 3.0) == (0.0, 0.0)


def test_single_keys():
    assert input_offset(_keys(pygame.K_RIGHT), 3.0) == (3.0, 0.0)
    assert input_offset(_keys(pygame.K_LEFT), 3.0) == (-3.0, 0.0)
    assert input_offset(_keys(pygame.K_UP), 3.0) == (0.0, -3.0)
    assert input_offset(_keys(pygame.K_DOWN), 3.0) == (0.0, 3.0)


def test_opposite_keys_cancel_and_diagonals_combine():
    assert input_offset(_keys(pygame.K_LEFT, pygame.K_RIGHT), 3.0) == (0.0, 0.0)
    assert input_offset(_keys(pygame.K_UP, pygame.K_DOWN), 3.0) == (0.0, 0.0)
    assert input_offset(_keys(pygame.K_RIGHT, pygame.K_DOWN), 2.5) == (2.5, 2.5)


def test_draw_renders_scene(font):
    game = Game(default_board(), random.Random(0))
    surface = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
    draw(surface, game, font)
    assert _pixel(surface, (2, 2)) == DARKBLUE
    assert _pixel(surface, game.pacman) == YELLOW
    for ghost in game.ghosts:
        assert _pixel(surface, ghost.pos) == ghost.color
    assert _pixel(surface, tile_center(3, 7)) == GOLD


def test_draw_leaves_eaten_cells_black(font):
    game = Game(default_board(), random.Random(0))
    game.board.eat(7, 3)
    surface = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
    surface.fill((255, 255, 255))
    draw(surface, game, font)
    assert _pixel(surface, tile_center(3, 7)) == BLACK