"""Small helpers: time, rotation, angles, randomness and snake colours."""

from __future__ import annotations

import math
import random
import time

from minigames.geometry import Color, FPoint, SnakeGridRect, SnakeRectState

SNAKE_GRID_GRAY = Color(100, 100, 100)
SNAKE_GRID_APPLE_COLOR = Color(200, 100, 100)
SNAKE_COLOR = Color(0, 180, 40)
SNAKE_HEAD_COLOR = Color(0, 250, 40)

_SNAKE_COLORS = {
    SnakeRectState.GRID: SNAKE_GRID_GRAY,
    SnakeRectState.FOOD: SNAKE_GRID_APPLE_COLOR,
    SnakeRectState.SNAKE_SECTION: SNAKE_COLOR,
    SnakeRectState.SNAKE_HEAD: SNAKE_HEAD_COLOR,
}


def sleep(ms: int) -> None:
    """Block for the given number of milliseconds."""
    time.sleep(ms / 1000)


def time_ms() -> int:
    """Milliseconds since the Unix epoch."""
    return int(time.time() * 1000)


def rotate(p: FPoint, origin: FPoint, angle: float) -> FPoint:
    """Rotate ``p`` around ``origin`` by ``angle`` radians."""
    s, c = math.sin(angle), math.cos(angle)
    x = p.x - origin.x
    y = p.y - origin.y
    return FPoint(x * c - y * s + origin.x, y * c + x * s + origin.y)


def to_rad(angle: float) -> float:
    return math.pi / 180 * angle


def to_deg(angle: float) -> float:
    return 180 / math.pi * angle


def clock() -> float:
    """A monotonic timestamp in seconds."""
    return time.monotonic()


def clock_difference(clock1: float, clock2: float) -> float:
    """Return ``clock1 - clock2`` in seconds."""
    return clock1 - clock2


def random_int(maximum: int, minimum: int = 0) -> int:
    """A random integer in the inclusive range ``minimum..maximum``."""
    if maximum < minimum:
        raise ValueError(f"maximum {maximum} is below minimum {minimum}")
    return random.randint(int(minimum), int(maximum))


def snake_grid_rect_color(rect: SnakeGridRect) -> Color:
    """The colour a snake board cell is drawn with."""
    return _SNAKE_COLORS.get(rect.state, Color(0, 0, 0))