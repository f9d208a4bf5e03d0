"""Asteroids: a ship that drifts, turns, wraps around and fires bullets."""

from __future__ import annotations

from typing import Any

import pygame

from minigames import util
from minigames.geometry import Color, FPoint
from minigames.gui import GUIImage, GUIRect
from minigames.input import InputHandler
from minigames.renderer import Renderer

ASTEROID_BULLET_SPEED = 350
ASTEROID_BULLET_WIDTH = 5

ASTEROID_PLAYER_COLOR = Color(255, 255, 255)
ASTEROID_PLAYER_DRAG = 0.9
ASTEROID_PLAYER_ANGLE_DRAG = 0.9
ASTEROID_PLAYER_VELOCITY = 10.0
ASTEROID_PLAYER_IMAGE = "./res/img/arrow.png"
ASTEROID_TURN_STEP = 0.5
ASTEROID_MIN_SPEED = 0.01
ASTEROID_WRAP_DISTANCE = 1.0

ASTEROID_BACKGROUND_COLOR = Color(30, 30, 30)


class Bullet:
    """A bullet flying in a fixed direction until it leaves the window."""

    def __init__(self, pos: FPoint, angle: float) -> None:
        self.pos = pos
        self.angle = angle
        self.should_delete = False

    def update(self, window: Any, delta_time: float) -> None:
        origin = self.pos
        moved = FPoint(self.pos.x + delta_time * ASTEROID_BULLET_SPEED, self.pos.y)
        self.pos = util.rotate(moved, origin, util.to_rad(self.angle))
        self.should_delete = not window.is_on_window(self.pos)

    def draw(self, renderer: Renderer) -> None:
        renderer.draw_circle(self.pos.x, self.pos.y, ASTEROID_BULLET_WIDTH)


class AsteroidBullets:
    """All bullets in flight."""

    def __init__(self, window: Any) -> None:
        self._window = window
        self.bullets: list[Bullet] = []

    def add_bullet(self, pos: FPoint, angle: float) -> None:
        self.bullets.append(Bullet(pos, angle))

    def update(self, delta_time: float) -> None:
        """Move every bullet and drop those that left the window."""
        for bullet in self.bullets:
            bullet.update(self._window, delta_time)
        self.bullets = [b for b in self.bullets if not b.should_delete]

    def draw(self, renderer: Renderer) -> None:
        for bullet in self.bullets:
            bullet.draw(renderer)

    def __len__(self) -> int:
        return len(self.bullets)


class AsteroidPlayer:
    """The ship: W/S thrust, A/D or arrows turn, space fires."""

    def __init__(self, renderer: Renderer, window: Any) -> None:
        self._window = window
        self.is_alive = True
        self.angle = 0.0
        self.dangle = 0.0
        self.dy = 0.0
        self.image = GUIImage(renderer, 0, 0, ASTEROID_PLAYER_IMAGE)
        self.image.x = window.width // 2 - self.image.width / 2
        self.image.y = window.height // 2 - self.image.height / 2
        self.bullets = AsteroidBullets(window)

    def update(self, input_handler: InputHandler, delta_time: float) -> None:
        pressed = input_handler.is_pressed
        if pressed(pygame.K_SPACE):
            self.bullets.add_bullet(FPoint(self.image.x, self.image.y), self.angle - 90.0)

        if pressed(pygame.K_w):
            self.dy -= 1
        if pressed(pygame.K_s):
            self.dy += 1
        if pressed(pygame.K_LEFT) or pressed(pygame.K_a):
            self.dangle -= ASTEROID_TURN_STEP
        if pressed(pygame.K_RIGHT) or pressed(pygame.K_d):
            self.dangle += ASTEROID_TURN_STEP

        self.dy *= ASTEROID_PLAYER_DRAG
        self.dangle *= ASTEROID_PLAYER_ANGLE_DRAG
        self.angle += self.dangle

        if abs(self.dy) > ASTEROID_MIN_SPEED:
            self._move(delta_time)

        if self.angle > 360.0:
            self.angle = 0.0
        elif self.angle <= 0.0:
            self.angle = 360.0

        self.bullets.update(delta_time)

    def _move(self, delta_time: float) -> None:
        here = FPoint(self.image.x, self.image.y)
        target = FPoint(
            here.x + ASTEROID_PLAYER_VELOCITY * delta_time,
            here.y + self.dy + ASTEROID_PLAYER_VELOCITY * delta_time,
        )
        p = util.rotate(target, here, util.to_rad(self.angle))

        win_w = self._window.width
        win_h = self._window.height
        if p.x > win_w:
            self.image.x = ASTEROID_WRAP_DISTANCE
        elif p.x + self.image.width < 0.0:
            self.image.x = win_w + ASTEROID_WRAP_DISTANCE
        else:
            self.image.x = p.x
        if p.y > win_h:
            self.image.y = ASTEROID_WRAP_DISTANCE
        elif p.y + self.image.height < 0.0:
            self.image.y = win_h - ASTEROID_WRAP_DISTANCE
        else:
            self.image.y = p.y

    def draw(self, renderer: Renderer) -> None:
        self.image.angle_draw(self.angle)
        self.bullets.draw(renderer)


class AsteroidGame:
    """The asteroid scene: a background and the player's ship."""

    def __init__(
        self, renderer: Renderer, window: Any, input_handler: InputHandler
    ) -> None:
        self._renderer = renderer
        self._window = window
        self._input = input_handler
        self.background_rect = GUIRect(
            0, 0, window.width, window.height, ASTEROID_BACKGROUND_COLOR
        )
        self.player = AsteroidPlayer(renderer, window)

    def update(self, delta_time: float) -> None:
        self.player.update(self._input, delta_time)

    def draw(self) -> None:
        self.background_rect.draw(self._renderer)
        self.player.draw(self._renderer)