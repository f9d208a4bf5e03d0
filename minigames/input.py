"""Keyboard and mouse state tracking."""

from __future__ import annotations

import pygame

from minigames.geometry import Point


class InputHandler:
    """Remembers which keys and mouse buttons are held and where the mouse is."""

    def __init__(self) -> None:
        self._keys: dict[int, bool] = {}
        self._buttons: dict[int, bool] = {}
        self.mouse_pos = Point(0, 0)

    def press_key(self, key: int) -> None:
        self._keys[key] = True

    def release_key(self, key: int) -> None:
        self._keys[key] = False

    def press_mouse_button(self, button: int) -> None:
        self._buttons[button] = True

    def release_mouse_button(self, button: int) -> None:
        self._buttons[button] = False

    def is_pressed(self, key: int) -> bool:
        return self._keys.get(key, False)

    def is_released(self, key: int) -> bool:
        return not self.is_pressed(key)

    def is_mouse_button_pressed(self, button: int) -> bool:
        return self._buttons.get(button, False)

    def is_mouse_button_released(self, button: int) -> bool:
        return not self.is_mouse_button_pressed(button)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Update state from an input event; return whether it was one."""
        if event.type == pygame.KEYDOWN:
            self.press_key(event.key)
        elif event.type == pygame.KEYUP:
            self.release_key(event.key)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            self.press_mouse_button(event.button)
        elif event.type == pygame.MOUSEBUTTONUP:
            self.release_mouse_button(event.button)
        elif event.type == pygame.MOUSEMOTION:
            x, y = event.pos
            self.mouse_pos = Point(int(x), int(y))
        else:
            return False
        return True