"""The playable window: input, timing and drawing."""

from __future__ import annotations

import argparse
import random

import pygame

from snakegame.bodypart import Direction
from snakegame.game import APPLE_COLOR, BACKGROUND_COLOR, FRAME_MS, GRID_SIZE, STROKE_WEIGHT, Snake
from snakegame.render import FilledRect, Segment, body_shapes, cell_rect

WINDOW_SIZE = (600, 600)
TITLE = "Snake"
FPS = 60
OUTLINE_COLOR = (0, 0, 0)
HEADING_COLOR = (220, 220, 220)
LABEL_COLOR = (160, 160, 160)

_DIRECTION_KEYS = {
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
}


class SnakeApp:
    """Drives a game of Snake from key presses and a millisecond clock."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.snake = Snake(self.rng)
        self.last_update: int | None = None

    def handle_key(self, key: int) -> None:
        """React to a pressed key: arrows turn, R restarts."""
        direction = _DIRECTION_KEYS.get(key)
        if direction is not None:
            self.snake.queue_direction(direction)
        elif key == pygame.K_r:
            self.snake = Snake(self.rng)
            self.last_update = None

    def update(self, now_ms: int) -> bool:
        """Advance the game if a frame has passed; return whether it moved."""
        if self.last_update is None:
            self.last_update = now_ms
            return False
        if not self.snake.game_over and now_ms - self.last_update >= FRAME_MS:
            self.snake.step()
            self.last_update = now_ms
            return True
        return False

    def draw(self, surface: pygame.Surface, now_ms: int) -> None:
        """Paint the current state onto *surface*."""
        surface.fill(BACKGROUND_COLOR)
        if self.snake.game_over:
            self._draw_game_over(surface)
            return

        width, height = surface.get_size()
        side = min(width, height)
        outline = round(STROKE_WEIGHT)
        pygame.draw.rect(
            surface,
            OUTLINE_COLOR,
            pygame.Rect(-outline, -outline, side + 2 * outline, side + 2 * outline),
            outline,
        )

        cell_size = side / GRID_SIZE
        elapsed = 0 if self.last_update is None else max(0, now_ms - self.last_update)
        for shape in body_shapes(self.snake, cell_size, (0.0, 0.0), elapsed):
            if isinstance(shape, FilledRect):
                _draw_filled_rect(surface, shape)
            else:
                _draw_segment(surface, shape)

        apple = cell_rect(self.snake.apple[0], self.snake.apple[1], cell_size, (0.0, 0.0))
        pygame.draw.circle(surface, APPLE_COLOR, apple.center(), cell_size / 2.0)

    def _draw_game_over(self, surface: pygame.Surface) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        heading = pygame.font.Font(None, 40)
        label = pygame.font.Font(None, 26)
        lines = [
            heading.render("Game Over", True, HEADING_COLOR),
            heading.render(f"Score: {self.snake.score}", True, HEADING_COLOR),
            label.render("Press R to restart", True, LABEL_COLOR),
        ]
        width, height = surface.get_size()
        top = (height - sum(line.get_height() for line in lines)) // 2
        for line in lines:
            surface.blit(line, ((width - line.get_width()) // 2, top))
            top += line.get_height()


def _draw_filled_rect(surface: pygame.Surface, shape: FilledRect) -> None:
    r = shape.rect
    left, top = round(r.min_x), round(r.min_y)
    w, h = round(r.max_x) - left, round(r.max_y) - top
    if w <= 0 or h <= 0:
        return
    radius = shape.radius
    pygame.draw.rect(
        surface,
        shape.color,
        pygame.Rect(left, top, w, h),
        0,
        0,
        round(radius.nw),
        round(radius.ne),
        round(radius.sw),
        round(radius.se),
    )


def _draw_segment(surface: pygame.Surface, segment: Segment) -> None:
    pygame.draw.line(surface, segment.color, segment.start, segment.end, max(1, round(segment.width)))


def main(argv: list[str] | None = None) -> int:
    """Open the game window and play until it is closed."""
    parser = argparse.ArgumentParser(prog="snakegame", description="Play Snake.")
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)
        pygame.display.set_caption(TITLE)
        clock = pygame.time.Clock()
        app = SnakeApp()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    app.handle_key(event.key)
            now = pygame.time.get_ticks()
            app.update(now)
            app.draw(screen, now)
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()
    return 0