from dataclasses import dataclass

import pygame
import pytest

from minigames.geometry import Color, Point, Rect
from minigames.gui import (
    DEFAULT_PRESSED_COLOR,
    DeathMessage,
    GameButton,
    GUIButton,
    GUIImage,
    GUIRect,
)
from minigames.input import InputHandler
from minigames.renderer import Renderer


@dataclass
class _FakeWindow:
    width: int
    height: int

    @property
    def rect(self):
        return Rect(0, 0, self.width, self.height)


@pytest.fixture
def renderer():
    return Renderer(pygame.Surface((200, 100)))


@pytest.fixture
def image_path(tmp_path):
    surface = pygame.Surface((8, 6))
    surface.fill((200, 100, 50))
    path = tmp_path / "img.bmp"
    pygame.image.save(surface, str(path))
    return str(path)


def _pixel(renderer, x, y):
    return tuple(renderer.surface.get_at((x, y)))[:3]


def test_rect_is_ontop_includes_edges():
    rect = GUIRect(10, 20, 30, 40)
    assert rect.is_ontop(Point(10, 20))
    assert rect.is_ontop(Point(40, 60))
    assert not rect.is_ontop(Point(9, 30))
    assert not rect.is_ontop(Point(20, 61))


def test_rect_draw_fills_with_color(renderer):
    GUIRect(5, 5, 10, 10, Color(10, 20, 30)).draw(renderer)
    assert _pixel(renderer, 7, 7) == (10, 20, 30)
    assert _pixel(renderer, 30, 30) == (0, 0, 0)


def test_button_press_and_release():
    handler = InputHandler()
    button = GUIButton(GUIRect(0, 0, 10, 10), Color(1, 2, 3), Color(4, 5, 6))
    assert button.rect.color == Color(1, 2, 3)

    handler.mouse_pos = Point(5, 5)
    handler.press_mouse_button(pygame.BUTTON_LEFT)
    button.update(handler)
    assert button.is_pressed
    assert not button.was_released
    assert button.rect.color == Color(4, 5, 6)

    handler.release_mouse_button(pygame.BUTTON_LEFT)
    button.update(handler)
    assert not button.is_pressed
    assert button.was_released
    assert button.rect.color == Color(1, 2, 3)

    button.update(handler)
    assert not button.was_released


def test_button_ignores_click_outside():
    handler = InputHandler()
    button = GUIButton(GUIRect(0, 0, 10, 10))
    handler.mouse_pos = Point(50, 50)
    handler.press_mouse_button(pygame.BUTTON_LEFT)
    button.update(handler)
    assert not button.is_pressed
    assert button.pressed_color == DEFAULT_PRESSED_COLOR


def test_button_copies_rect():
    original = GUIRect(0, 0, 10, 10, Color(9, 9, 9))
    button = GUIButton(original, Color(1, 1, 1))
    button.rect.x = 99
    assert original.x == 0
    assert original.color == Color(9, 9, 9)


def test_image_loads_size_and_draws(renderer, image_path):
    image = GUIImage(renderer, 20, 30, image_path)
    assert image.loaded
    assert (image.width, image.height) == (8, 6)
    image.draw()
    assert _pixel(renderer, 21, 31) == (200, 100, 50)
    assert _pixel(renderer, 19, 31) == (0, 0, 0)


def test_image_position_can_move(renderer, image_path):
    image = GUIImage(renderer, 0, 0, image_path)
    image.x = 50
    image.y = 40
    image.draw()
    assert _pixel(renderer, 52, 42) == (200, 100, 50)
    assert _pixel(renderer, 2, 2) == (0, 0, 0)


def test_image_set_color_multiplies(renderer, image_path):
    image = GUIImage(renderer, 0, 0, image_path)
    image.set_color(Color(0, 255, 0))
    image.draw()
    assert _pixel(renderer, 1, 1) == (0, 100, 0)


def test_image_angle_draw_zero_matches_draw(renderer, image_path):
    image = GUIImage(renderer, 10, 10, image_path)
    image.angle_draw(0)
    assert _pixel(renderer, 12, 12) == (200, 100, 50)


def test_missing_image_is_empty(renderer, tmp_path):
    image = GUIImage(renderer, 3, 4, str(tmp_path / "missing.png"))
    assert not image.loaded
    assert (image.width, image.height) == (0, 0)
    image.draw()
    assert _pixel(renderer, 3, 4) == (0, 0, 0)


def test_game_button_outline_follows_mouse(renderer, image_path):
    background = Color(50, 50, 50)
    outline = Color(80, 80, 80)
    button = GameButton(renderer, 20, 20, image_path, 5, background, outline)
    handler = InputHandler()

    handler.mouse_pos = Point(16, 16)
    button.update(handler)
    assert button.outline_rect.color == outline

    handler.mouse_pos = Point(100, 90)
    button.update(handler)
    assert button.outline_rect.color == background


def test_game_button_click_releases(renderer, image_path):
    button = GameButton(renderer, 20, 20, image_path, 5, Color(1, 1, 1), Color(2, 2, 2))
    handler = InputHandler()
    handler.mouse_pos = Point(22, 22)
    handler.press_mouse_button(pygame.BUTTON_LEFT)
    button.update(handler)
    handler.release_mouse_button(pygame.BUTTON_LEFT)
    button.update(handler)
    assert button.button.was_released


def test_game_button_draw_shows_outline_and_image(renderer, image_path):
    button = GameButton(renderer, 20, 20, image_path, 5, Color(1, 1, 1), Color(2, 2, 2))
    button.draw()
    assert _pixel(renderer, 16, 16) == (1, 1, 1)
    assert _pixel(renderer, 22, 22) == (200, 100, 50)


def test_death_message_is_centred(renderer):
    window = _FakeWindow(200, 100)
    message = DeathMessage(renderer, Color(30, 200, 30), window)
    centre_x = message.rect.x + message.rect.w / 2
    centre_y = message.rect.y + message.rect.h / 2
    assert abs(centre_x - window.width / 2) <= 1
    assert abs(centre_y - window.height / 2) <= 1
    assert message.rect.w < window.width
    assert message.text_size == Point(*renderer.text_rect("You died :3")[2:] if False else (renderer.text_rect("You died :3").w, renderer.text_rect("You died :3").h))


def test_death_message_draws_background(renderer):
    message = DeathMessage(renderer, Color(30, 200, 30), _FakeWindow(200, 100))
    message.draw()
    assert _pixel(renderer, int(message.rect.x) + 1, int(message.rect.y) + 1) == (30, 200, 30)
    assert _pixel(renderer, 0, 0) == (0, 0, 0)