"""Game state and rules: the maze, Pac-Man and the ghosts that chase him."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Protocol

MAP_ROWS = 20
MAP_COLS = 35
TILE_SIZE = 40
NUM_GHOSTS = 3

WALL = "#"
DOT = "."
EMPTY = " "

SCORE_PER_DOT = 10
PACMAN_RADIUS = 20.0
SPEED = 3.0

_FAR_AWAY = 999999.0

Vector = tuple[float, float]
Color = tuple[int, int, int]

DEFAULT_LAYOUT = (
    "###############",
    "#.............#",
    "#.###.###.###.#",
    "#.............#",
    "#.###.#.#.###.#",
    "#.............#",
    "#.###.###.###.#",
    "#.............#",
    "#.###########.#",
    "###############",
)

CARDINAL_DIRECTIONS: tuple[Vector, ...] = (
    (1.0, 0.0),
    (-1.0, 0.0),
    (0.0, 1.0),
    (0.0, -1.0),
)

PACMAN_START = (1, 1)
GHOST_STARTS = ((7, 5), (7, 4), (6, 5))
GHOST_COLORS: tuple[Color, ...] = (
    (230, 41, 55),
    (0, 228, 48),
    (0, 121, 241),
)


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


def _tile_index(value: float) -> int:
    """Tile index of a pixel coordinate, truncating towards zero."""
    whole = int(value)
    if whole >= 0:
        return whole // TILE_SIZE
    return -(-whole // TILE_SIZE)


def _is_aligned(value: float) -> bool:
    return math.fmod(int(value), TILE_SIZE) == TILE_SIZE // 2


def cell_of(pos: Vector) -> tuple[int, int]:
    """Return the (col, row) of the tile holding a pixel position."""
    x, y = pos
    return _tile_index(x), _tile_index(y)


def tile_center(col: int, row: int) -> Vector:
    """Return the pixel position of the centre of a tile."""
    return (col * TILE_SIZE + TILE_SIZE / 2.0, row * TILE_SIZE + TILE_SIZE / 2.0)


def random_direction(rng: RandomSource) -> Vector:
    """Pick a random non-zero direction with components in -1..1."""
    while True:
        dx = rng.randint(-1, 1)
        dy = rng.randint(-1, 1)
        if dx or dy:
            return float(dx), float(dy)


class Board:
    """The maze grid, always MAP_ROWS by MAP_COLS; unused space is empty."""

    def __init__(self, rows: Iterable[str]) -> None:
        rows = list(rows)
        if len(rows) > MAP_ROWS:
            raise ValueError(f"board has {len(rows)} rows, at most {MAP_ROWS} allowed")
        grid: list[list[str]] = []
        for text in rows:
            if len(text) > MAP_COLS:
                raise ValueError(
                    f"board row has {len(text)} columns, at most {MAP_COLS} allowed"
                )
            grid.append(list(text.ljust(MAP_COLS, EMPTY)))
        grid.extend([EMPTY] * MAP_COLS for _ in range(MAP_ROWS - len(grid)))
        self._grid = grid

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < MAP_ROWS and 0 <= col < MAP_COLS

    def cell(self, row: int, col: int) -> str:
        if not self.in_bounds(row, col):
            raise IndexError(f"cell ({row}, {col}) is outside the board")
        return self._grid[row][col]

    def is_wall(self, row: int, col: int) -> bool:
        return self.in_bounds(row, col) and self._grid[row][col] == WALL

    def eat(self, row: int, col: int) -> bool:
        """Remove the dot at a cell; return whether there was one."""
        if self.cell(row, col) != DOT:
            return False
        self._grid[row][col] = EMPTY
        return True

    def is_direction_valid(self, pos: Vector, direction: Vector) -> bool:
        """Whether the tile one step away in a direction is on the board and open."""
        col = _tile_index(pos[0] + direction[0] * TILE_SIZE)
        row = _tile_index(pos[1] + direction[1] * TILE_SIZE)
        return self.in_bounds(row, col) and self._grid[row][col] != WALL

    def cells(self) -> Iterator[tuple[int, int, str]]:
        """Yield (row, col, content) for every cell, row by row."""
        for row, line in enumerate(self._grid):
            for col, content in enumerate(line):
                yield row, col, content


def default_board() -> Board:
    return Board(DEFAULT_LAYOUT)


@dataclass
class Ghost:
    pos: Vector
    direction: Vector
    color: Color


@dataclass
class Game:
    """One running game: maze, Pac-Man, ghosts and score."""

    board: Board = field(default_factory=default_board)
    rng: RandomSource = field(default_factory=random.Random)
    pacman: Vector = field(init=False)
    score: int = field(init=False, default=0)
    speed: float = field(init=False, default=SPEED)
    radius: float = field(init=False, default=PACMAN_RADIUS)
    ghosts: list[Ghost] = field(init=False)

    def __post_init__(self) -> None:
        self.pacman = tile_center(*PACMAN_START)
        self.ghosts = [
            Ghost(tile_center(col, row), random_direction(self.rng), color)
            for (col, row), color in zip(GHOST_STARTS, GHOST_COLORS)
        ]

    def move_pacman(self, dx: float, dy: float) -> bool:
        """Move Pac-Man by an offset unless it ends in a wall; eat any dot there."""
        target = (self.pacman[0] + dx, self.pacman[1] + dy)
        col, row = cell_of(target)
        if not self.board.in_bounds(row, col) or self.board.is_wall(row, col):
            return False
        self.pacman = target
        if self.board.eat(row, col):
            self.score += SCORE_PER_DOT
        return True

    def update_ghosts(self) -> None:
        """Advance every ghost one frame, steering towards Pac-Man at tile centres."""
        pac_x, pac_y = self.pacman
        for ghost in self.ghosts:
            x, y = ghost.pos
            if _is_aligned(x) and _is_aligned(y):
                reverse = (-ghost.direction[0], -ghost.direction[1])
                best = ghost.direction
                best_distance = _FAR_AWAY
                for candidate in CARDINAL_DIRECTIONS:
                    if candidate == reverse:
                        continue
                    if not self.board.is_direction_valid(ghost.pos, candidate):
                        continue
                    nx = x + candidate[0] * TILE_SIZE
                    ny = y + candidate[1] * TILE_SIZE
                    distance = (pac_x - nx) ** 2 + (pac_y - ny) ** 2
                    if distance < best_distance:
                        best_distance = distance
                        best = candidate
                ghost.direction = best

            dx, dy = ghost.direction
            target = (x + dx * self.speed, y + dy * self.speed)
            col, row = cell_of(target)
            if self.board.in_bounds(row, col) and not self.board.is_wall(row, col):
                ghost.pos = target
            else:
                ghost.direction = (-dx, -dy)

    def step(self, dx: float, dy: float) -> None:
        """Run one frame: move Pac-Man by an offset, then the ghosts."""
        self.move_pacman(dx, dy)
        self.update_ghosts()