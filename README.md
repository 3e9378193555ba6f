# pacgame

A small maze-chasing arcade game. You steer a yellow disc through a walled
maze and eat the gold dots for points. Three coloured ghosts steer towards
you whenever they are centred on a tile.

## Installing

```
pip install .
```

## Playing

```
pacgame
```

You can also start it with `python -m pacgame.app`.

A 600 × 400 window titled "Pacman" opens, and the game runs at 60 frames per second.

- Use the arrow keys to move, 3 pixels per frame. Hold two keys to move diagonally.
- Each dot you eat is worth 10 points. The score is shown in the top-left corner.
- You cannot move into a wall or off the board. If a move would end there, Pac-Man stays where he is.
- Press Esc or close the window to quit.

## The ghosts

There are three ghosts: red, green and blue. They start near the middle
of the maze, each moving in a random direction. That direction can be
diagonal, but it is never standing still.

When a ghost is centred on a tile, it looks at the four neighbouring tiles
(right, left, down, up) and skips the tile directly behind it and any wall.
Of the tiles that are left, it turns towards the one whose centre is closest
to Pac-Man. If no tile is open, the ghost keeps its direction. If the ghost's
next step would take it into a wall, it turns around instead.

## What the game does not do

There are no lives and there is no game over. A ghost can touch Pac-Man
and nothing happens. Eating every dot does not end the level or start a new one.
The ghosts only chase. There are no power pellets and no frightened mode.

## Using the game logic

You can drive the game state without a window, for example in experiments
or tests:

```python
import random
from pacgame.game import Game, default_board

game = Game(default_board(), random.Random(1))
game.step(3.0, 0.0)   # move Pac-Man right by 3 pixels, then move the ghosts
print(game.pacman, game.score)
```

- `pacgame.game.Board` holds the maze as a 20 × 35 grid of `"#"` (wall), `"."`
  (dot) and `" "` (empty). A layout that is smaller than the grid is padded
  with empty cells. A layout that is larger raises `ValueError`.
  - `cell(row, col)` returns the content of a cell and raises `IndexError`
    outside the board.
  - `is_wall`, `in_bounds` and `is_direction_valid(pos, direction)` check for
    walls and edges.
  - `eat(row, col)` removes a dot and says whether there was one.
  - `cells()` yields `(row, col, content)` for every cell, row by row.
- `pacgame.game.default_board()` returns the built-in 15 × 10 maze.
- `pacgame.game.Game` holds the board, Pac-Man's position (`pacman`), the
  `score` and the `ghosts`.
  - `move_pacman(dx, dy)` moves Pac-Man and returns whether the move happened.
  - `update_ghosts()` advances the ghosts by one frame.
  - `step(dx, dy)` moves Pac-Man and then advances the ghosts.
- `pacgame.game.cell_of(pos)` and `pacgame.game.tile_center(col, row)` convert
  between pixel positions and tiles.
- `pacgame.app.input_offset(pressed, speed)` turns arrow-key state into a movement offset.
- `pacgame.app.draw(surface, game, font)` draws a `Game` onto a pygame surface.

## Running the tests

```
pip install .[test]
pytest
```