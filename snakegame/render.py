"""Geometry of the snake's body on screen, independent of any drawing backend."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Union

from snakegame.bodypart import RADIUS, Corner, CornerRadius, Direction
from snakegame.game import BACKGROUND_COLOR, BODY_COLOR, FRAME_MS, STROKE_WEIGHT, Snake

Point = tuple[float, float]
Color = tuple[int, int, int]


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its minimum and maximum corners."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def width(self) -> float:
        return self.max_x - self.min_x

    def height(self) -> float:
        return self.max_y - self.min_y

    def center(self) -> Point:
        return ((self.min_x + self.max_x) / 2.0, (self.min_y + self.max_y) / 2.0)


@dataclass(frozen=True)
class Segment:
    """A straight line drawn with a given stroke."""

    start: Point
    end: Point
    width: float = STROKE_WEIGHT
    color: Color = BACKGROUND_COLOR


@dataclass(frozen=True)
class FilledRect:
    """A filled rectangle, possibly with rounded corners."""

    rect: Rect
    radius: CornerRadius = field(default_factory=CornerRadius)
    color: Color = BODY_COLOR


Shape = Union[FilledRect, Segment]


def cell_rect(x: int, y: int, cell_size: float, origin: Point) -> Rect:
    """Return the screen rectangle of grid cell (*x*, *y*)."""
    left = origin[0] + x * cell_size
    top = origin[1] + y * cell_size
    return Rect(left, top, left + cell_size, top + cell_size)


def shrink_front(rect: Rect, direction: Direction, offset: float) -> Rect:
    """Cut the head cell so it appears to slide in along *direction*."""
    if direction is Direction.UP:
        return replace(rect, min_y=rect.min_y + offset)
    if direction is Direction.DOWN:
        return replace(rect, max_y=rect.max_y - offset)
    if direction is Direction.LEFT:
        return replace(rect, min_x=rect.min_x + offset)
    return replace(rect, max_x=rect.max_x - offset)


def shrink_back(rect: Rect, direction: Direction, offset: float, growing: bool) -> Rect:
    """Cut the tail cell so it appears to slide out along *direction*."""
    if growing:
        return rect
    delta = offset - rect.width()
    if direction is Direction.UP:
        return replace(rect, max_y=rect.max_y + delta)
    if direction is Direction.DOWN:
        return replace(rect, min_y=rect.min_y - delta)
    if direction is Direction.LEFT:
        return replace(rect, max_x=rect.max_x + delta)
    return replace(rect, min_x=rect.min_x - delta)


def straight_border(rect: Rect, direction: Direction) -> list[Segment]:
    """Return the two edge lines along the sides of a straight body cell."""
    if direction.is_vertical():
        left = rect.min_x - 0.5
        right = rect.max_x + 0.5
        return [
            Segment((left, rect.min_y), (left, rect.max_y)),
            Segment((right, rect.min_y), (right, rect.max_y)),
        ]
    top = rect.min_y - 0.5
    bottom = rect.max_y + 0.5
    return [
        Segment((rect.min_x, top), (rect.max_x, top)),
        Segment((rect.min_x, bottom), (rect.max_x, bottom)),
    ]


def bend_border(rect: Rect, corner: Corner) -> list[Segment]:
    """Return the two edge lines on the outer sides of a bent body cell."""
    x0, y0, x1, y1 = rect.min_x, rect.min_y, rect.max_x, rect.max_y
    ro = RADIUS / 2.0
    hs = STROKE_WEIGHT / 2.0
    if corner is Corner.TOP_LEFT:
        lines = (((x0 + ro, y0 - hs), (x1, y0 - hs)), ((x0 - hs, y0 + ro), (x0 - hs, y1)))
    elif corner is Corner.BOTTOM_LEFT:
        lines = (((x0 + ro, y1 + hs), (x1, y1 + hs)), ((x0 - hs, y0), (x0 - hs, y1 - ro)))
    elif corner is Corner.TOP_RIGHT:
        lines = (((x0, y0 - hs), (x1 - ro, y0 - hs)), ((x1 + hs, y0 + ro), (x1 + hs, y1)))
    elif corner is Corner.BOTTOM_RIGHT:
        lines = (((x0, y1 + hs), (x1 - ro, y1 + hs)), ((x1 + hs, y0), (x1 + hs, y1 - ro)))
    else:
        raise ValueError("a cell without a bend has no bend border")
    return [Segment(start, end) for start, end in lines]


def animation_offset(cell_size: float, elapsed_ms: float) -> float:
    """Return how much of a cell the head has still to travel."""
    return cell_size - elapsed_ms * cell_size / FRAME_MS


def body_shapes(snake: Snake, cell_size: float, origin: Point, elapsed_ms: float) -> list[Shape]:
    """Return the shapes that draw the snake's body, in painting order."""
    front = snake.body[0]
    back = snake.body[-1]
    offset = animation_offset(cell_size, elapsed_ms)
    shapes: list[Shape] = []
    for part in snake.body:
        cell = cell_rect(part.x, part.y, cell_size, origin)
        if part == front:
            cell = shrink_front(cell, part.direction, offset)
            shapes.append(FilledRect(cell))
        elif part == back:
            cell = shrink_back(cell, part.direction, offset, snake.growing)
            shapes.append(FilledRect(cell))
        else:
            shapes.append(FilledRect(cell, part.corner.corner_radius()))

        if part.is_bend():
            shapes.extend(bend_border(cell, part.corner))
        else:
            shapes.extend(straight_border(cell, part.direction))
    return shapes