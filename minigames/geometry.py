"""Value types shared by the games: points, rectangles, colours and states."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


@dataclass(frozen=True)
class Point:
    """A point with integer coordinates."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class FPoint:
    """A point with floating-point coordinates."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: FPoint) -> FPoint:
        if not isinstance(other, FPoint):
            return NotImplemented
        return FPoint(self.x + other.x, self.y + other.y)

    def __sub__(self, other: FPoint) -> FPoint:
        if not isinstance(other, FPoint):
            return NotImplemented
        return FPoint(self.x - other.x, self.y - other.y)


@dataclass
class Rect:
    """An axis-aligned rectangle with integer position and size."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0


@dataclass
class FRect:
    """An axis-aligned rectangle with floating-point position and size."""

    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0


@dataclass(frozen=True)
class Color:
    """An RGBA colour; every channel is a byte and defaults to 255."""

    r: int = 255
    g: int = 255
    b: int = 255
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"colour channel {name}={value} is outside 0..255")

    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def rgba(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)


class CurrentGame(Enum):
    SNAKE = auto()
    PONG = auto()
    ASTEROID = auto()
    TICTACTOE = auto()
    NOGAME = auto()


class Direction2d(Enum):
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


class SnakeRectState(Enum):
    GRID = auto()
    FOOD = auto()
    SNAKE_SECTION = auto()
    SNAKE_HEAD = auto()


@dataclass
class SnakeGridRect:
    """One square cell of the snake board."""

    x: int
    y: int
    w: int
    state: SnakeRectState = SnakeRectState.GRID