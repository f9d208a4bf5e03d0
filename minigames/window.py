"""The game window and its event stream."""

from __future__ import annotations

from typing import Iterator, Union

import pygame

from minigames.geometry import FPoint, Point, Rect

WINDOW_ICON_PATH = "./res/icons/window-icon.png"
DEFAULT_WIDTH = 1280
DEFAULT_HEIGHT = 720


class Window:
    """A fixed-size display window."""

    def __init__(
        self, name: str, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT
    ) -> None:
        pygame.display.init()
        self.name = name
        self.width = width
        self.height = height
        self.surface = pygame.display.set_mode((width, height))
        pygame.display.set_caption(name)
        self.set_icon(WINDOW_ICON_PATH)
        self.is_open = True

    @property
    def rect(self) -> Rect:
        return Rect(0, 0, self.width, self.height)

    def close(self) -> None:
        self.is_open = False

    def events(self) -> Iterator[pygame.event.Event]:
        """Yield every pending event."""
        yield from pygame.event.get()

    def set_icon(self, path: str) -> bool:
        """Use the image at ``path`` as window icon; return whether it loaded."""
        try:
            icon = pygame.image.load(path)
        except (FileNotFoundError, pygame.error):
            return False
        pygame.display.set_icon(icon)
        return True

    def is_on_window(self, point: Union[Point, FPoint]) -> bool:
        return 0 <= point.x <= self.width and 0 <= point.y <= self.height