"""Grid cells that make up the snake, with their heading and bend shape."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

RADIUS = 10.0


class Direction(Enum):
    """A heading on the grid."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

    def is_vertical(self) -> bool:
        return self in (Direction.UP, Direction.DOWN)

    def is_opposite(self, other: Direction) -> bool:
        return _OPPOSITES[self] is other


_OPPOSITES = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}


@dataclass(frozen=True)
class CornerRadius:
    """Rounding of each corner of a rectangle."""

    nw: float = 0.0
    ne: float = 0.0
    sw: float = 0.0
    se: float = 0.0


class Corner(Enum):
    """Which corner of a cell is rounded where the snake bends."""

    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_RIGHT = "bottom_right"
    NONE = "none"

    def corner_radius(self) -> CornerRadius:
        if self is Corner.TOP_LEFT:
            return CornerRadius(nw=RADIUS)
        if self is Corner.TOP_RIGHT:
            return CornerRadius(ne=RADIUS)
        if self is Corner.BOTTOM_LEFT:
            return CornerRadius(sw=RADIUS)
        if self is Corner.BOTTOM_RIGHT:
            return CornerRadius(se=RADIUS)
        return CornerRadius()


@dataclass
class BodyPart:
    """One cell of the snake's body."""

    x: int
    y: int
    direction: Direction
    corner: Corner = Corner.NONE

    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    def position_eq(self, other: BodyPart) -> bool:
        return self.x == other.x and self.y == other.y

    def is_bend(self) -> bool:
        return self.corner is not Corner.NONE