import random
from collections import deque

import pytest

from snakegame.bodypart import BodyPart, Corner, Direction
from snakegame.game import GRID_SIZE, Snake, bend_corner

MIDDLE = GRID_SIZE // 2


def make_snake(seed=0):
    return Snake(random.Random(seed))


def far_apple(snake):
    snake.apple = (0, GRID_SIZE - 1)


def test_initial_body():
    snake = make_snake()
    assert [p.position() for p in snake.body] == [
        (MIDDLE, MIDDLE - 1),
        (MIDDLE, MIDDLE),
        (MIDDLE, MIDDLE + 1),
    ]
    assert all(p.direction is Direction.UP for p in snake.body)
    assert snake.direction is Direction.UP
    assert snake.score == 0
    assert not snake.game_over
    assert not snake.growing


def test_initial_apple_off_body_and_in_grid():
    for seed in range(20):
        snake = make_snake(seed)
        x, y = snake.apple
        assert 0 <= x < GRID_SIZE and 0 <= y < GRID_SIZE
        assert snake.apple not in {p.position() for p in snake.body}


def test_apple_depends_only_on_seed():
    repeated = {make_snake(42).apple for _ in range(5)}
    assert len(repeated) == 1
    spread = {make_snake(seed).apple for seed in range(20)}
    assert len(spread) > 1


def test_generate_fruit_full_grid_raises():
    snake = make_snake()
    snake.body = deque(
        BodyPart(x, y, Direction.UP) for y in range(GRID_SIZE) for x in range(GRID_SIZE)
    )
    with pytest.raises(RuntimeError):
        snake.generate_fruit()


def test_step_moves_up_keeping_length():
    snake = make_snake()
    far_apple(snake)
    snake.step()
    assert [p.position() for p in snake.body] == [
        (MIDDLE, MIDDLE - 2),
        (MIDDLE, MIDDLE - 1),
        (MIDDLE, MIDDLE),
    ]
    assert not snake.game_over


def test_wall_ends_game():
    snake = make_snake()
    far_apple(snake)
    for _ in range(MIDDLE - 1):
        snake.step()
    assert not snake.game_over
    assert snake.head.position() == (MIDDLE, 0)
    snake.step()
    assert snake.game_over
    assert snake.head.position() == (MIDDLE, 0)


def test_eating_scores_and_grows_next_step():
    snake = make_snake()
    snake.apple = (MIDDLE, MIDDLE - 2)
    snake.step()
    assert snake.score == 1
    assert snake.growing
    assert len(snake.body) == 3
    assert snake.apple not in {p.position() for p in snake.body}
    far_apple(snake)
    snake.step()
    assert len(snake.body) == 4
    assert not snake.growing
    snake.step()
    assert len(snake.body) == 4


def test_queue_rejects_opposite_and_repeat():
    snake = make_snake()
    snake.queue_direction(Direction.DOWN)
    snake.queue_direction(Direction.UP)
    assert list(snake.directions_queue) == []


def test_queue_holds_at_most_two():
    snake = make_snake()
    snake.queue_direction(Direction.LEFT)
    snake.queue_direction(Direction.DOWN)
    snake.queue_direction(Direction.RIGHT)
    assert list(snake.directions_queue) == [Direction.LEFT, Direction.DOWN]


def test_queue_checks_against_last_queued():
    snake = make_snake()
    snake.queue_direction(Direction.LEFT)
    snake.queue_direction(Direction.RIGHT)
    snake.queue_direction(Direction.LEFT)
    assert list(snake.directions_queue) == [Direction.LEFT]


def test_turn_sets_bend_on_old_head():
    snake = make_snake()
    far_apple(snake)
    snake.queue_direction(Direction.LEFT)
    snake.step()
    assert snake.direction is Direction.LEFT
    assert list(snake.directions_queue) == []
    assert snake.head.position() == (MIDDLE - 1, MIDDLE - 1)
    assert snake.head.direction is Direction.LEFT
    bent = snake.body[1]
    assert bent.corner is Corner.TOP_RIGHT
    assert bent.direction is Direction.LEFT
    assert snake.body[2].corner is Corner.NONE


def _loop_snake(tail_positions):
    snake = make_snake()
    far_apple(snake)
    snake.body = deque(
        [BodyPart(5, 5, Direction.UP), BodyPart(5, 6, Direction.UP)]
        + [BodyPart(x, y, Direction.UP) for x, y in tail_positions]
    )
    snake.queue_direction(Direction.RIGHT)
    return snake


def test_hitting_body_ends_game():
    snake = _loop_snake([(6, 6), (6, 5), (6, 4)])
    snake.step()
    assert snake.game_over
    assert len(snake.body) == 5


def test_moving_into_tail_cell_is_allowed():
    snake = _loop_snake([(6, 6), (6, 5)])
    snake.step()
    assert not snake.game_over
    assert snake.head.position() == (6, 5)
    assert len(snake.body) == 4


@pytest.mark.parametrize(
    "old, new, expected",
    [
        (Direction.UP, Direction.LEFT, Corner.TOP_RIGHT),
        (Direction.UP, Direction.RIGHT, Corner.TOP_LEFT),
        (Direction.DOWN, Direction.RIGHT, Corner.BOTTOM_LEFT),
        (Direction.DOWN, Direction.LEFT, Corner.BOTTOM_RIGHT),
        (Direction.LEFT, Direction.DOWN, Corner.TOP_LEFT),
        (Direction.LEFT, Direction.UP, Corner.BOTTOM_LEFT),
        (Direction.RIGHT, Direction.DOWN, Corner.TOP_RIGHT),
        (Direction.RIGHT, Direction.UP, Corner.BOTTOM_RIGHT),
    ],
)
def test_bend_corner_table(old, new, expected):
    assert bend_corner(old, new) is expected


def test_bend_corner_straight_is_none():
    for d in Direction:
        assert bend_corner(d, d) is Corner.NONE
    assert bend_corner(Direction.UP, Direction.DOWN) is Corner.NONE