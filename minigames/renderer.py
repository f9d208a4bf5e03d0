"""Drawing onto a surface: rectangles, circles and cached text."""

from __future__ import annotations

import math
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

import pygame

from minigames.geometry import Color, Point, Rect

DEFAULT_FONT_PATH = "./res/fonts/default.ttf"
DEFAULT_FONT_SIZE = 28
TEXT_CACHE_LIMIT = 50

WHITE = Color()
BLACK = Color(0, 0, 0)


@lru_cache(maxsize=None)
def _load_font(path: str, size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    if Path(path).is_file():
        return pygame.font.Font(path, size)
    return pygame.font.Font(None, size)


def _to_pygame_rect(rect: Any) -> pygame.Rect:
    if isinstance(rect, (tuple, list)):
        x, y, w, h = rect
    else:
        x, y, w, h = rect.x, rect.y, rect.w, rect.h
    return pygame.Rect(round(x), round(y), round(w), round(h))


class Renderer:
    """Draws shapes and text onto a target surface."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self._color = BLACK
        self.text_cache: dict[tuple[str, int, Color], GUIText] = {}

    def start(self) -> None:
        """Clear the surface with the current draw colour."""
        self.surface.fill(self._color.rgba())

    def end(self) -> None:
        """Present the frame when drawing to the display."""
        if pygame.display.get_init() and pygame.display.get_surface() is self.surface:
            pygame.display.flip()

    def fill(self, color: Color, window: Any) -> None:
        self.draw_rect(window.rect, color)

    def set_color(self, color: Color) -> None:
        self._color = color

    def draw_rect(self, rect: Any, color: Color = WHITE) -> None:
        """Fill ``rect`` (a Rect, FRect or 4-tuple) with ``color``."""
        self.set_color(color)
        self.surface.fill(color.rgba(), _to_pygame_rect(rect))

    def draw_circle(self, x: float, y: float, radius: float, color: Color = WHITE) -> None:
        self.set_color(color)
        rgba = color.rgba()
        span = math.ceil(radius * 2)
        for w in range(span):
            dx = int(radius - w)
            for h in range(span):
                dy = int(radius - h)
                if dx * dx + dy * dy <= radius * radius:
                    self.surface.set_at((int(x + dx), int(y + dy)), rgba)

    def draw_text(
        self,
        pos: Point,
        text: str,
        font_size: int = DEFAULT_FONT_SIZE,
        color: Color = BLACK,
    ) -> None:
        """Draw ``text`` with its top-left corner at ``pos``, reusing cached renders."""
        key = (text, font_size, color)
        gui_text = self.text_cache.get(key)
        if gui_text is None:
            gui_text = GUIText(self, pos.x, pos.y, text, font_size=font_size, color=color)
            self.text_cache[key] = gui_text
        else:
            gui_text.rect.x = pos.x
            gui_text.rect.y = pos.y
        gui_text.draw()
        if len(self.text_cache) > TEXT_CACHE_LIMIT:
            self.text_cache.clear()

    def text_rect(self, text: str, font_size: int = DEFAULT_FONT_SIZE) -> Rect:
        """The size ``text`` takes when drawn, as a rect at the origin."""
        w, h = _load_font(DEFAULT_FONT_PATH, font_size).size(text)
        return Rect(0, 0, w, h)


class GUIText:
    """A piece of rendered text at a fixed position."""

    def __init__(
        self,
        renderer: Renderer,
        x: int,
        y: int,
        text: str,
        font_path: str = DEFAULT_FONT_PATH,
        font_size: int = DEFAULT_FONT_SIZE,
        color: Color = BLACK,
    ) -> None:
        self._renderer = renderer
        self._font = _load_font(font_path, font_size)
        self.color = color
        self.rect = Rect(x, y, 0, 0)
        self.text = ""
        self._image: Optional[pygame.Surface] = None
        self.set_text(text)

    @property
    def width(self) -> int:
        return self.rect.w

    @property
    def height(self) -> int:
        return self.rect.h

    def set_text(self, text: str) -> None:
        self.text = text
        self._image = self._font.render(text, False, self.color.rgb())
        self.rect.w, self.rect.h = self._font.size(text)

    def draw(self) -> None:
        if self._image is not None:
            self._renderer.surface.blit(self._image, (self.rect.x, self.rect.y))