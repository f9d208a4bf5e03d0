"""Basic widgets: filled rectangles, buttons, images and the death banner."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

import pygame

from minigames.geometry import Color, FRect, Point
from minigames.input import InputHandler
from minigames.renderer import Renderer

DEFAULT_PRESSED_COLOR = Color(150, 150, 150)
DEATH_MESSAGE = "You died :3"


@dataclass
class GUIRect:
    """A coloured rectangle that can be drawn and hit-tested."""

    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0
    color: Color = Color()

    @property
    def rect(self) -> FRect:
        return FRect(self.x, self.y, self.w, self.h)

    def draw(self, renderer: Renderer) -> None:
        renderer.draw_rect(self.rect, self.color)

    def is_ontop(self, pos: Point) -> bool:
        """Whether ``pos`` lies inside the rectangle, edges included."""
        return (
            self.x <= pos.x <= self.x + self.w
            and self.y <= pos.y <= self.y + self.h
        )


class GUIButton:
    """A rectangle that changes colour while held and reports releases."""

    def __init__(
        self,
        rect: GUIRect,
        normal_color: Color = Color(),
        pressed_color: Color = DEFAULT_PRESSED_COLOR,
    ) -> None:
        self.rect = replace(rect, color=normal_color)
        self.normal_color = normal_color
        self.pressed_color = pressed_color
        self.is_pressed = False
        self.was_released = False

    def update(self, input_handler: InputHandler) -> None:
        self.was_released = False
        held = input_handler.is_mouse_button_pressed(pygame.BUTTON_LEFT)
        if self.rect.is_ontop(input_handler.mouse_pos) and held:
            self.rect.color = self.pressed_color
            self.is_pressed = True
        else:
            self.rect.color = self.normal_color
            if self.is_pressed:
                self.was_released = True
            self.is_pressed = False

    def draw(self, renderer: Renderer) -> None:
        self.rect.draw(renderer)


class GUIImage:
    """An image loaded from disk, drawn at its own size.

    A file that cannot be loaded leaves an empty image of size zero.
    """

    def __init__(self, renderer: Renderer, x: float, y: float, path: str) -> None:
        self._renderer = renderer
        self.path = path
        try:
            image = pygame.image.load(path)
            self.loaded = True
        except (FileNotFoundError, pygame.error):
            image = pygame.Surface((0, 0))
            self.loaded = False
        self._image = image
        self._tinted = image
        self.rect = FRect(
            float(x), float(y), float(image.get_width()), float(image.get_height())
        )

    @property
    def x(self) -> float:
        return self.rect.x

    @x.setter
    def x(self, value: float) -> None:
        self.rect.x = value

    @property
    def y(self) -> float:
        return self.rect.y

    @y.setter
    def y(self, value: float) -> None:
        self.rect.y = value

    @property
    def width(self) -> float:
        return self.rect.w

    @property
    def height(self) -> float:
        return self.rect.h

    def _is_empty(self) -> bool:
        return self._image.get_width() == 0 or self._image.get_height() == 0

    def set_color(self, color: Color) -> None:
        """Multiply the image's colours by ``color``."""
        tinted = self._image.copy()
        if not self._is_empty():
            tinted.fill(color.rgb(), special_flags=pygame.BLEND_RGB_MULT)
        self._tinted = tinted

    def draw(self) -> None:
        if self._is_empty():
            return
        self._renderer.surface.blit(self._tinted, (round(self.x), round(self.y)))

    def angle_draw(self, angle: float) -> None:
        """Draw rotated clockwise by ``angle`` degrees around the image centre."""
        if self._is_empty():
            return
        rotated = pygame.transform.rotate(self._tinted, -angle)
        center = (round(self.x + self.width / 2), round(self.y + self.height / 2))
        self._renderer.surface.blit(rotated, rotated.get_rect(center=center))


class GameButton:
    """An image button with an outline that lights up under the mouse."""

    def __init__(
        self,
        renderer: Renderer,
        x: int,
        y: int,
        img_path: str,
        outline_width: int,
        background_color: Color,
        outline_color: Color,
    ) -> None:
        self._renderer = renderer
        self.image = GUIImage(renderer, x, y, img_path)
        w, h = int(self.image.width), int(self.image.height)
        self.button = GUIButton(
            GUIRect(x, y, w, h), background_color, background_color
        )
        self.outline_rect = GUIRect(
            x - outline_width,
            y - outline_width,
            w + outline_width * 2,
            h + outline_width * 2,
            background_color,
        )
        self.background_color = background_color
        self.outline_color = outline_color

    def update(self, input_handler: InputHandler) -> None:
        self.button.update(input_handler)
        if self.outline_rect.is_ontop(input_handler.mouse_pos):
            self.outline_rect.color = self.outline_color
        else:
            self.outline_rect.color = self.background_color

    def draw(self) -> None:
        self.outline_rect.draw(self._renderer)
        self.button.draw(self._renderer)
        self.image.draw()


class DeathMessage:
    """A centred banner telling the player they died."""

    def __init__(self, renderer: Renderer, background_color: Color, window: Any) -> None:
        self._renderer = renderer
        window_w = window.rect.w
        window_h = window.rect.h
        h = int(window_h * 0.3)
        w = int(window_w * 0.45)
        x = window_w // 2 - w // 2
        y = window_h // 2 - h // 2
        self.rect = GUIRect(x, y, w, h, background_color)
        text_rect = renderer.text_rect(DEATH_MESSAGE)
        self.text_size = Point(text_rect.w, text_rect.h)

    def draw(self) -> None:
        self._renderer.draw_rect(self.rect.rect, self.rect.color)
        x = int(self.rect.x + self.rect.w / 2 - self.text_size.x // 2)
        y = int(self.rect.y + self.rect.h / 2 - self.text_size.y // 2)
        self._renderer.draw_text(Point(x, y), DEATH_MESSAGE)