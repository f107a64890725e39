"""Game state and rules: movement, collisions, fruit and growth."""

from __future__ import annotations

import random
from collections import deque

from snakegame.bodypart import BodyPart, Corner, Direction

GRID_SIZE = 15
FRAME_MS = 130
STROKE_WEIGHT = 1.0
APPLE_COLOR = (255, 0, 0)
BODY_COLOR = (255, 255, 0)
BACKGROUND_COLOR = (27, 27, 27)

MAX_QUEUED_DIRECTIONS = 2

_BENDS = {
    (Direction.UP, Direction.LEFT): Corner.TOP_RIGHT,
    (Direction.UP, Direction.RIGHT): Corner.TOP_LEFT,
    (Direction.DOWN, Direction.RIGHT): Corner.BOTTOM_LEFT,
    (Direction.DOWN, Direction.LEFT): Corner.BOTTOM_RIGHT,
    (Direction.LEFT, Direction.DOWN): Corner.TOP_LEFT,
    (Direction.LEFT, Direction.UP): Corner.BOTTOM_LEFT,
    (Direction.RIGHT, Direction.DOWN): Corner.TOP_RIGHT,
    (Direction.RIGHT, Direction.UP): Corner.BOTTOM_RIGHT,
}


def bend_corner(old: Direction, new: Direction) -> Corner:
    """Return the rounded corner of a cell entered heading *old* and left heading *new*."""
    return _BENDS.get((old, new), Corner.NONE)


class Snake:
    """The full state of one game."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.direction = Direction.UP
        self.directions_queue: deque[Direction] = deque()
        self.game_over = False
        self.score = 0
        self.growing = False
        self.apple = (0, 0)
        middle = GRID_SIZE // 2
        self.body: deque[BodyPart] = deque(
            BodyPart(middle, y, Direction.UP) for y in (middle - 1, middle, middle + 1)
        )
        self.generate_fruit()

    @property
    def head(self) -> BodyPart:
        return self.body[0]

    @property
    def tail(self) -> BodyPart:
        return self.body[-1]

    def generate_fruit(self) -> None:
        """Place the apple on a random cell not covered by the body."""
        occupied = {part.position() for part in self.body}
        if len(occupied) >= GRID_SIZE * GRID_SIZE:
            raise RuntimeError("no free cell left for the apple")
        while True:
            cell = (self.rng.randrange(GRID_SIZE), self.rng.randrange(GRID_SIZE))
            if cell not in occupied:
                self.apple = cell
                return

    def _next_cell(self, head: BodyPart) -> tuple[int, int] | None:
        x, y = head.x, head.y
        if self.direction is Direction.LEFT:
            x -= 1
        elif self.direction is Direction.RIGHT:
            x += 1
        elif self.direction is Direction.UP:
            y -= 1
        else:
            y += 1
        if 0 <= x < GRID_SIZE and 0 <= y < GRID_SIZE:
            return (x, y)
        return None

    def _new_head(self) -> BodyPart | None:
        old_head = self.head
        cell = self._next_cell(old_head)
        if cell is None:
            self.game_over = True
            return None
        old_head.corner = bend_corner(old_head.direction, self.direction)
        old_head.direction = self.direction
        return BodyPart(cell[0], cell[1], self.direction)

    def step(self) -> None:
        """Advance the game by one move."""
        if self.directions_queue:
            self.direction = self.directions_queue.popleft()

        new_head = self._new_head()
        if new_head is None:
            self.game_over = True
            return

        hits_body = any(part.position_eq(new_head) for part in self.body)
        if hits_body and not self.tail.position_eq(new_head):
            self.game_over = True
            return

        self.body.appendleft(new_head)

        if new_head.position() == self.apple:
            self.score += 1
            self.generate_fruit()
            self.growing = True
            self.body.pop()
        elif not self.growing:
            self.body.pop()
        else:
            self.growing = False

    def queue_direction(self, direction: Direction) -> None:
        """Queue a turn, ignoring reversals, repeats and overflow."""
        last = self.directions_queue[-1] if self.directions_queue else self.direction
        if (
            not last.is_opposite(direction)
            and last is not direction
            and len(self.directions_queue) < MAX_QUEUED_DIRECTIONS
        ):
            self.directions_queue.append(direction)