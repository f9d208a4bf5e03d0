"""Two-player pong: paddles, the ball and the scoring game around them."""

from __future__ import annotations

from enum import IntEnum
from typing import Any

import pygame

from minigames import util
from minigames.geometry import Color, FRect, Point
from minigames.gui import GUIRect
from minigames.input import InputHandler
from minigames.renderer import Renderer

PONG_BALL_RADIUS = 10.0
PONG_BALL_VELOCITY = 5.0
PONG_BALL_FRICTION = 0.9

PONG_PLAYERS_WIDTH = 15.0
PONG_PLAYERS_HEIGHT = 200.0
PONG_PLAYERS_X = 80.0
PONG_PLAYERS_DRAG = 0.8
PONG_PLAYERS_SPEED = 500.0

PONG_GAME_BACKGROUND_COLOR = Color(20, 20, 20)
PONG_GAME_TEXT_COLOR = Color(255, 255, 255)
PONG_GAME_FONT_SIZE = 32
PONG_SCORE_Y = 60


class Scorer(IntEnum):
    """Who, if anyone, scored during a ball update."""

    NONE = 0
    PLAYER1 = 1
    PLAYER2 = 2


class PongPlayers:
    """The two paddles: left steered with W/S, right with the arrow keys."""

    def __init__(self, window: Any) -> None:
        self._window = window
        w = int(PONG_PLAYERS_WIDTH)
        h = int(PONG_PLAYERS_HEIGHT)
        middle_y = window.height // 2 - h // 2
        self.left = GUIRect(PONG_PLAYERS_X, middle_y, w, h)
        self.right = GUIRect(window.width - PONG_PLAYERS_X, middle_y, w, h)
        self.left_velocity = 0.0
        self.right_velocity = 0.0

    @property
    def left_rect(self) -> FRect:
        return self.left.rect

    @property
    def right_rect(self) -> FRect:
        return self.right.rect

    def update(self, input_handler: InputHandler, delta_time: float) -> None:
        speed = PONG_PLAYERS_SPEED * delta_time
        if input_handler.is_pressed(pygame.K_w):
            self.left_velocity -= speed
        if input_handler.is_pressed(pygame.K_s):
            self.left_velocity += speed
        if input_handler.is_pressed(pygame.K_UP):
            self.right_velocity -= speed
        if input_handler.is_pressed(pygame.K_DOWN):
            self.right_velocity += speed

        self.left_velocity *= PONG_PLAYERS_DRAG
        self.right_velocity *= PONG_PLAYERS_DRAG

        height = self._window.height
        left_y = self.left.y + self.left_velocity
        right_y = self.right.y + self.right_velocity
        h = self.left.h

        if left_y >= 0 and left_y + h <= height:
            self.left.y = left_y
        else:
            self.left_velocity = 0.0
        if right_y >= 0 and right_y + h <= height:
            self.right.y = right_y
        else:
            self.right_velocity = 0.0

    def draw(self, renderer: Renderer) -> None:
        self.left.draw(renderer)
        self.right.draw(renderer)


class PongBall:
    """The ball; it bounces off the walls and paddles and scores past them."""

    def __init__(self, window: Any) -> None:
        self._window = window
        self.radius = PONG_BALL_RADIUS
        self.x = 0.0
        self.y = 0.0
        self.dx = 0.0
        self.dy = 0.0
        self.center_and_add_random_velocity()

    def center(self) -> None:
        self.x = self._window.width // 2 - self.radius
        self.y = self._window.height // 2 - self.radius

    def center_and_add_random_velocity(self) -> None:
        self.center()
        self.dx = PONG_BALL_VELOCITY if util.random_int(1, 0) else -PONG_BALL_VELOCITY
        self.dy = float(
            util.random_int(int(PONG_BALL_VELOCITY), int(-PONG_BALL_VELOCITY))
        )

    def update(self, players: PongPlayers, delta_time: float) -> Scorer:
        """Move the ball one step; return who scored, if anyone."""
        left = players.left_rect
        right = players.right_rect
        step = PONG_BALL_VELOCITY * delta_time

        next_y = self.y + self.dy + step
        next_x = self.x + self.dx + step

        if next_y > self._window.height or next_y <= 0:
            self.dy = -self.dy * PONG_BALL_FRICTION

        touching_right = right.y <= next_y <= right.y + right.h
        touching_left = left.y <= next_y <= left.y + left.h
        at_right = next_x >= right.x
        at_left = next_x <= left.x + left.w

        if at_left:
            if not touching_left:
                return Scorer.PLAYER2
            self.dx = -self.dx
            self.dy += players.left_velocity / 2
        elif at_right:
            if not touching_right:
                return Scorer.PLAYER1
            self.dx = -self.dx
            self.dy += players.right_velocity / 2

        self.y += self.dy + step
        self.x += self.dx + step
        return Scorer.NONE

    def draw(self, renderer: Renderer) -> None:
        renderer.draw_circle(self.x, self.y, self.radius, Color(255, 255, 255))


class PongGame:
    """A game of pong with a score counter at the top."""

    def __init__(
        self, renderer: Renderer, window: Any, input_handler: InputHandler
    ) -> None:
        self._renderer = renderer
        self._window = window
        self._input = input_handler
        self.points1 = 0
        self.points2 = 0
        r = renderer.text_rect("0 | 0", PONG_GAME_FONT_SIZE)
        self.points_counter_size = Point(r.w, r.h)
        self.background_rect = GUIRect(
            0, 0, window.width, window.height, PONG_GAME_BACKGROUND_COLOR
        )
        self.ball = PongBall(window)
        self.players = PongPlayers(window)

    @property
    def score_text(self) -> str:
        return f"{self.points1} | {self.points2}"

    def update(self, delta_time: float) -> None:
        result = self.ball.update(self.players, delta_time)
        if result:
            if result == Scorer.PLAYER1:
                self.points1 += 1
            else:
                self.points2 += 1
            self.ball.center_and_add_random_velocity()
        self.players.update(self._input, delta_time)

    def draw(self) -> None:
        self.background_rect.draw(self._renderer)
        self.ball.draw(self._renderer)
        self.players.draw(self._renderer)

        points = self.score_text
        center_x = self._window.width // 2 - self.points_counter_size.x // 2
        self._renderer.draw_text(
            Point(center_x, PONG_SCORE_Y), points, PONG_GAME_FONT_SIZE, PONG_GAME_TEXT_COLOR
        )
        r = self._renderer.text_rect(points, PONG_GAME_FONT_SIZE)
        self.points_counter_size = Point(r.w, r.h)