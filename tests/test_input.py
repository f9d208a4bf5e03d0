import pygame

from minigames.geometry import Point
from minigames.input import InputHandler


def test_unknown_key_is_released():
    handler = InputHandler()
    assert handler.is_pressed(pygame.K_w) is False
    assert handler.is_released(pygame.K_w) is True


def test_press_and_release_key():
    handler = InputHandler()
    handler.press_key(pygame.K_SPACE)
    assert handler.is_pressed(pygame.K_SPACE)
    handler.release_key(pygame.K_SPACE)
    assert handler.is_released(pygame.K_SPACE)


def test_mouse_buttons_are_separate_from_keys():
    handler = InputHandler()
    handler.press_mouse_button(pygame.BUTTON_LEFT)
    assert handler.is_mouse_button_pressed(pygame.BUTTON_LEFT)
    assert handler.is_released(pygame.BUTTON_LEFT)
    handler.release_mouse_button(pygame.BUTTON_LEFT)
    assert handler.is_mouse_button_released(pygame.BUTTON_LEFT)


def test_handle_key_events():
    handler = InputHandler()
    assert handler.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a))
    assert handler.is_pressed(pygame.K_a)
    assert handler.handle_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_a))
    assert handler.is_released(pygame.K_a)


def test_handle_mouse_events():
    handler = InputHandler()
    handler.handle_event(
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=pygame.BUTTON_LEFT, pos=(1, 1))
    )
    assert handler.is_mouse_button_pressed(pygame.BUTTON_LEFT)
    handler.handle_event(
        pygame.event.Event(pygame.MOUSEBUTTONUP, button=pygame.BUTTON_LEFT, pos=(1, 1))
    )
    assert handler.is_mouse_button_released(pygame.BUTTON_LEFT)


def test_mouse_motion_updates_position():
    handler = InputHandler()
    assert handler.mouse_pos == Point(0, 0)
    handler.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(42, 17), rel=(0, 0)))
    assert handler.mouse_pos == Point(42, 17)


def test_other_events_are_ignored():
    handler = InputHandler()
    assert handler.handle_event(pygame.event.Event(pygame.QUIT)) is False
    assert handler.mouse_pos == Point(0, 0)