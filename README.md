# snakegame

A classic snake game played on a 15 × 15 grid. The snake moves one cell
every 130 ms. Between steps it glides smoothly from cell to cell, and it
bends with rounded corners when it turns.

## Installing

```
pip install .
```

## Playing

Open the game window, which starts at 600 × 600 and can be resized:

```
snakegame
```

Controls:

| Key          | Action                           |
|--------------|----------------------------------|
| Arrow keys   | Change direction                 |
| R            | Restart (also after game over)   |

The snake starts with three cells in the middle of the board, heading up.
Each time it eats the red apple it grows by one cell and scores one point.
A new apple then appears on a random free cell. The game ends when the
snake runs into a wall or into itself. Moving into the cell that the tail
is just leaving is allowed. Up to two turns can be queued ahead. A turn
that reverses the snake, or that repeats the last queued direction, is
ignored. When the game is over, the window shows your score until you
press R.

## Using the game logic

The rules do not depend on the display, so you can drive them from code:

```python
import random

from snakegame.bodypart import Direction
from snakegame.game import Snake

snake = Snake(random.Random(0))
snake.queue_direction(Direction.LEFT)
snake.step()
print(snake.score, snake.game_over, snake.apple)
```

- `snakegame.bodypart` defines `Direction`, `Corner`, `CornerRadius` and
  `BodyPart`, the cells that make up the snake.
- `snakegame.game` defines `Snake`, which holds the board state and offers
  `step()`, `queue_direction()` and `generate_fruit()`. It also defines
  `bend_corner()`, which says which corner of a cell is rounded when the
  snake turns in it.
- `snakegame.render` turns a game state into plain shapes, namely
  `FilledRect` body cells and `Segment` border lines, through
  `body_shapes()`. You can inspect these shapes or draw them with any
  backend.
- `snakegame.app.SnakeApp` connects the game to a pygame surface. It has
  `handle_key()`, `update(now_ms)` and `draw(surface, now_ms)`.
  `snakegame.app.main()` runs the window loop.

## What it does not do

The game keeps no high scores, and it has no settings for grid size,
speed or colours. These are fixed in `snakegame.game`.

## Running the tests

```
pip install .[test]
pytest
```