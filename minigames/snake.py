"""The snake game: the snake, its food and the board they live on."""

from __future__ import annotations

from typing import Any, Callable

import pygame

from minigames import util
from minigames.geometry import (
    Color,
    Direction2d,
    Point,
    Rect,
    SnakeGridRect,
    SnakeRectState,
)
from minigames.gui import DeathMessage
from minigames.input import InputHandler
from minigames.renderer import Renderer

SNAKE_MOVEMENT_INTERVAL = 0.25
SNAKE_GAME_RECT_WIDTH = 40
DEATH_MESSAGE_COLOR = Color(30, 200, 30)
FOOD_PLACEMENT_TRIES = 10
INITIAL_SNAKE_LENGTH = 4

_OPPOSITE = {
    Direction2d.UP: Direction2d.DOWN,
    Direction2d.DOWN: Direction2d.UP,
    Direction2d.LEFT: Direction2d.RIGHT,
    Direction2d.RIGHT: Direction2d.LEFT,
}

_STEP = {
    Direction2d.UP: Point(0, -1),
    Direction2d.DOWN: Point(0, 1),
    Direction2d.LEFT: Point(-1, 0),
    Direction2d.RIGHT: Point(1, 0),
}

_KEYS = (
    (pygame.K_w, Direction2d.UP),
    (pygame.K_a, Direction2d.LEFT),
    (pygame.K_d, Direction2d.RIGHT),
    (pygame.K_s, Direction2d.DOWN),
)


class Snake:
    """A snake that moves one cell per interval, steered with W, A, S and D."""

    def __init__(
        self,
        input_handler: InputHandler,
        length: int,
        head_x: int,
        head_y: int,
        clock: Callable[[], float] = util.clock,
    ) -> None:
        self._input = input_handler
        self._clock = clock
        self.positions = [Point(head_x, head_y + i) for i in range(length)]
        self.direction = Direction2d.UP
        self.is_alive = True
        self._last_movement_update = clock()

    def grow(self, game: SnakeGame) -> None:
        """Append a segment on the side of the tail facing away from the body."""
        last = self.positions[-1]
        section = SnakeRectState.SNAKE_SECTION
        if game.get(last.x + 1, last.y) == section:
            new = Point(last.x - 1, last.y)
        elif game.get(last.x - 1, last.y) == section:
            new = Point(last.x + 1, last.y)
        elif game.get(last.x, last.y + 1) == section:
            new = Point(last.x, last.y - 1)
        elif game.get(last.x, last.y - 1) == section:
            new = Point(last.x, last.y + 1)
        else:
            new = last
        self.positions.append(new)

    def shrink(self) -> None:
        """Drop the tail; a snake of one segment dies instead."""
        if len(self.positions) > 1:
            self.positions.pop()
        else:
            self.is_alive = False

    def add_to_game(self, game: SnakeGame) -> None:
        """Mark the snake's cells on the board; leaving the board kills it."""
        head, *body = self.positions
        if not game.set(head.x, head.y, SnakeRectState.SNAKE_HEAD):
            self.is_alive = False
            return
        for segment in body:
            if not game.set(segment.x, segment.y, SnakeRectState.SNAKE_SECTION):
                self.is_alive = False
                break

    def update(self) -> None:
        for key, direction in _KEYS:
            if self._input.is_pressed(key) and self.direction != _OPPOSITE[direction]:
                self.direction = direction

        now = self._clock()
        if util.clock_difference(now, self._last_movement_update) < SNAKE_MOVEMENT_INTERVAL:
            return
        self._last_movement_update = now

        head = self.positions[0] + _STEP[self.direction]
        if head in self.positions[1:]:
            self.is_alive = False
        self.positions = [head, *self.positions[:-1]]


class SnakeFood:
    """A single piece of food placed on a free cell."""

    def __init__(self) -> None:
        self.position = Point(0, 0)

    def add_new_random_food(self, game: SnakeGame) -> None:
        """Move the food to a random empty cell, giving up after a few tries."""
        for _ in range(FOOD_PLACEMENT_TRIES):
            position = Point(
                util.random_int(game.index_width), util.random_int(game.index_height)
            )
            if game.get(position.x, position.y) == SnakeRectState.GRID:
                break
        self.position = position

    def add_to_game(self, game: SnakeGame) -> None:
        game.set(self.position.x, self.position.y, SnakeRectState.FOOD)

    def new_food_if_eaten(self, game: SnakeGame) -> bool:
        """Place new food if the old one is gone; return whether it was eaten."""
        if game.get(self.position.x, self.position.y) != SnakeRectState.FOOD:
            self.add_new_random_food(game)
            return True
        return False


class SnakeGame:
    """The snake board: a grid of square cells filling the window."""

    def __init__(
        self,
        renderer: Renderer,
        window: Any,
        input_handler: InputHandler,
        rect_width: int = 10,
    ) -> None:
        self._renderer = renderer
        self._input = input_handler
        self.rect_width = rect_width
        window_rect = window.rect
        self.grid = [
            [SnakeGridRect(ix, iy, rect_width) for ix in range(0, window_rect.w, rect_width)]
            for iy in range(0, window_rect.h, rect_width)
        ]
        self.snake = Snake(
            input_handler,
            INITIAL_SNAKE_LENGTH,
            self.index_width // 2,
            self.index_height // 2,
        )
        self.food = SnakeFood()
        self.death_message = DeathMessage(renderer, DEATH_MESSAGE_COLOR, window)

    @property
    def index_height(self) -> int:
        return len(self.grid)

    @property
    def index_width(self) -> int:
        return len(self.grid[0])

    def draw(self) -> None:
        self.clear_grid()
        self.food.add_to_game(self)
        self.snake.add_to_game(self)
        for row in self.grid:
            for cell in row:
                self._renderer.draw_rect(
                    Rect(cell.x, cell.y, cell.w, cell.w), util.snake_grid_rect_color(cell)
                )
        if not self.snake.is_alive:
            self.death_message.draw()

    def update(self) -> None:
        if self.snake.is_alive:
            self.snake.update()
            if self.food.new_food_if_eaten(self):
                self.snake.grow(self)

    def clear_grid(self) -> None:
        for row in self.grid:
            for cell in row:
                cell.state = SnakeRectState.GRID

    def set(self, x_index: int, y_index: int, state: SnakeRectState) -> bool:
        """Set a cell's state; return False if the cell is off the board."""
        if not self.pos_exists(x_index, y_index):
            return False
        self.grid[y_index][x_index].state = state
        return True

    def get(self, x_index: int, y_index: int) -> SnakeRectState:
        """A cell's state; cells off the board read as empty."""
        if self.pos_exists(x_index, y_index):
            return self.grid[y_index][x_index].state
        return SnakeRectState.GRID

    def pos_exists(self, x_index: int, y_index: int) -> bool:
        return 0 <= x_index < self.index_width and 0 <= y_index < self.index_height

    def x_to_index(self, x: int) -> int:
        return int(x / self.rect_width) - 1

    def y_to_index(self, y: int) -> int:
        return int(y / self.rect_width) - 1