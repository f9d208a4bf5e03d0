"""Tic-tac-toe: the board, the turn buttons and the game scene."""

from __future__ import annotations

from enum import Enum
from typing import Any

import pygame

from minigames.geometry import Color, Point
from minigames.gui import GUIButton, GUIImage, GUIRect
from minigames.input import InputHandler
from minigames.renderer import Renderer

BOARD_WH = 3
BOARD_SPACING = 128
BOARD_LINE_WIDTH = 10
TIC_TAC_TOE_BOARD_COLOR = Color(101, 102, 104)
TIC_TAC_TOE_BACKGROUND_COLOR = Color(51, 52, 54)

TTTT_BUTTON_OUTLINE_WIDTH = 10
TTTT_BUTTON_OUTLINE_COLOR = Color(81, 82, 84)
TTTT_BUTTON_NORMAL_WIDTH = 128

ICON_DIR = "./res/icons/"
CHOOSE_PLAYER_TEXT = "Choose Player"
BUTTON_MARGIN_X = 100
BUTTON_TOP = 50
CHOOSE_PLAYER_TOP = 100


class TurnButton(Enum):
    CIRCLE = "O"
    X = "X"


def _icon_path(button_type: TurnButton) -> str:
    name = "turnO.png" if button_type is TurnButton.CIRCLE else "turnX.png"
    return ICON_DIR + name


class TictactoeBoard:
    """The 3x3 grid lines and the positions of its cells."""

    def __init__(self, window: Any, renderer: Renderer) -> None:
        width = BOARD_LINE_WIDTH
        length = BOARD_SPACING * BOARD_WH + width * 2
        spacing = BOARD_SPACING
        self.start_x = window.width // 2 - (length + 2 * width) // 2
        self.start_y = window.height // 2 - length // 2
        sx, sy = self.start_x, self.start_y

        self.rows = [
            GUIRect(sx + spacing, sy, width, length, TIC_TAC_TOE_BOARD_COLOR),
            GUIRect(sx + spacing * 2 + width, sy, width, length, TIC_TAC_TOE_BOARD_COLOR),
        ]
        self.columns = [
            GUIRect(sx, sy + spacing, length, width, TIC_TAC_TOE_BOARD_COLOR),
            GUIRect(sx, sy + spacing * 2 + width, length, width, TIC_TAC_TOE_BOARD_COLOR),
        ]
        self.positions = [
            Point(sx + (spacing + width) * j, sy + (spacing + width) * i)
            for i in range(BOARD_WH)
            for j in range(BOARD_WH)
        ]
        self.image_o = GUIImage(renderer, sx, sy, _icon_path(TurnButton.CIRCLE))
        self.image_x = GUIImage(renderer, sx, sy, _icon_path(TurnButton.X))
        self.clicked = False

    def update(self, input_handler: InputHandler) -> bool:
        """Record and return whether the left mouse button is held."""
        self.clicked = input_handler.is_mouse_button_pressed(pygame.BUTTON_LEFT)
        return self.clicked

    def draw(self, renderer: Renderer) -> None:
        for line in (*self.rows, *self.columns):
            line.draw(renderer)
        self.image_o.draw()
        for position in self.positions[1:4]:
            self.image_o.x = position.x
            self.image_o.y = position.y
            self.image_o.draw()
        self.image_o.x = self.positions[0].x
        self.image_o.y = self.positions[0].y


class TictactoeTurnButton:
    """A button choosing X or O; each click toggles its focus."""

    def __init__(
        self,
        x: int,
        y: int,
        button_type: TurnButton,
        renderer: Renderer,
        background_color: Color,
    ) -> None:
        self._renderer = renderer
        self.button_type = button_type
        self.image = GUIImage(renderer, x, y, _icon_path(button_type))
        self.background_rect = GUIRect(
            x, y, self.image.width, self.image.height, background_color
        )
        self.button = GUIButton(self.background_rect)
        self.outline_rect = GUIRect(
            x - TTTT_BUTTON_OUTLINE_WIDTH,
            y - TTTT_BUTTON_OUTLINE_WIDTH,
            self.image.width + TTTT_BUTTON_OUTLINE_WIDTH * 2,
            self.image.height + TTTT_BUTTON_OUTLINE_WIDTH * 2,
            TTTT_BUTTON_OUTLINE_COLOR,
        )
        self.focused = False

    def update(self, input_handler: InputHandler) -> None:
        self.button.update(input_handler)
        if self.button.was_released:
            self.focused = not self.focused

    def draw(self) -> None:
        if self.focused:
            self.outline_rect.draw(self._renderer)
        self.background_rect.draw(self._renderer)
        self.image.draw()


class TictactoeGame:
    """The tic-tac-toe scene: choose a side, then play on the board."""

    def __init__(
        self, renderer: Renderer, window: Any, input_handler: InputHandler
    ) -> None:
        self._renderer = renderer
        self._window = window
        self._input = input_handler
        self.turn = False
        self.game_started = False
        self.turn_x_button = TictactoeTurnButton(
            BUTTON_MARGIN_X, BUTTON_TOP, TurnButton.X, renderer, TIC_TAC_TOE_BACKGROUND_COLOR
        )
        self.turn_o_button = TictactoeTurnButton(
            window.width - BUTTON_MARGIN_X - TTTT_BUTTON_NORMAL_WIDTH,
            BUTTON_TOP,
            TurnButton.CIRCLE,
            renderer,
            TIC_TAC_TOE_BACKGROUND_COLOR,
        )
        self.background_rect = GUIRect(
            0, 0, window.width, window.height, TIC_TAC_TOE_BACKGROUND_COLOR
        )
        self.board = TictactoeBoard(window, renderer)

    def update(self, delta_time: float) -> None:
        if not self.game_started:
            self.turn_o_button.update(self._input)
            self.turn_x_button.update(self._input)
            if self.turn_o_button.focused or self.turn_x_button.focused:
                self.game_started = True
        else:
            self.board.update(self._input)

    def draw(self) -> None:
        self.background_rect.draw(self._renderer)
        self.board.draw(self._renderer)
        self.turn_o_button.draw()
        self.turn_x_button.draw()
        if not self.game_started:
            rect = self._renderer.text_rect(CHOOSE_PLAYER_TEXT)
            x = self._window.width // 2 - rect.w // 2
            self._renderer.draw_text(
                Point(x, CHOOSE_PLAYER_TOP), CHOOSE_PLAYER_TEXT, 28, Color()
            )