import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from minigames.geometry import FPoint, Point, Rect
from minigames.window import Window


@pytest.fixture
def window():
    win = Window("Test", 320, 240)
    yield win
    pygame.display.quit()


def test_window_size_and_rect(window):
    assert window.width == 320
    assert window.height == 240
    assert window.rect == Rect(0, 0, 320, 240)
    assert window.surface.get_size() == (320, 240)


def test_window_close(window):
    assert window.is_open
    window.close()
    assert not window.is_open


@pytest.mark.parametrize(
    "point, inside",
    [
        (Point(0, 0), True),
        (Point(320, 240), True),
        (FPoint(160.5, 120.5), True),
        (Point(-1, 10), False),
        (FPoint(320.5, 10.0), False),
        (Point(10, 241), False),
    ],
)
def test_is_on_window(window, point, inside):
    assert window.is_on_window(point) is inside


def test_events_yields_posted_events(window):
    pygame.event.clear()
    pygame.event.post(pygame.event.Event(pygame.USEREVENT, tag="ping"))
    events = list(window.events())
    assert any(e.type == pygame.USEREVENT and e.tag == "ping" for e in events)


def test_set_icon_missing_file(window, tmp_path):
    assert window.set_icon(str(tmp_path / "missing.png")) is False


def test_set_icon_existing_file(window, tmp_path):
    path = tmp_path / "icon.png"
    surface = pygame.Surface((8, 8))
    surface.fill((200, 10, 10))
    pygame.image.save(surface, str(path))
    assert window.set_icon(str(path)) is True