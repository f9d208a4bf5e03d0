"""The game menu: a row of game buttons and the game that is running."""

from __future__ import annotations

from typing import Any

import pygame

from minigames.asteroid import AsteroidGame
from minigames.geometry import Color, CurrentGame
from minigames.gui import GameButton, GUIRect
from minigames.input import InputHandler
from minigames.pong import PongGame
from minigames.renderer import Renderer
from minigames.snake import SNAKE_GAME_RECT_WIDTH, SnakeGame
from minigames.tictactoe import TictactoeGame
from minigames.timer import Timer

GAME_BUTTON_SPACING = 0.1
GAME_BUTTON_STARTX = 0.05
GAME_BUTTON_STARTY = 0.1
GAME_MENU_BACKGROUND_COLOR = Color(50, 50, 50)
GAME_BUTTON_OUTLINE_COLOR = Color(80, 80, 80)
GAME_BUTTON_OUTLINE_WIDTH = 5

SNAKE_ICON = "./res/icons/snake.png"
PONG_ICON = "./res/icons/pong.png"
ASTEROID_ICON = "./res/icons/asteroid.png"
TICTACTOE_ICON = "./res/icons/tic-tac-toe.png"


class GameMenu:
    """Shows the game buttons and runs the chosen game until Escape is pressed."""

    def __init__(
        self,
        window: Any,
        renderer: Renderer,
        input_handler: InputHandler,
        timer: Timer,
    ) -> None:
        self._window = window
        self._renderer = renderer
        self._input = input_handler
        self._timer = timer
        self.current_game = CurrentGame.NOGAME
        self.background_rect = GUIRect(
            0, 0, window.width, window.height, GAME_MENU_BACKGROUND_COLOR
        )
        self._init_buttons()
        self._init_games()

    def _init_buttons(self) -> None:
        x = int(self._window.width * GAME_BUTTON_STARTX)
        y = int(self._window.height * GAME_BUTTON_STARTY)
        spacing = int(self._window.width * GAME_BUTTON_SPACING)

        def button(index: int, icon: str) -> GameButton:
            return GameButton(
                self._renderer,
                x + spacing * index,
                y,
                icon,
                GAME_BUTTON_OUTLINE_WIDTH,
                GAME_MENU_BACKGROUND_COLOR,
                GAME_BUTTON_OUTLINE_COLOR,
            )

        self.snake_button = button(0, SNAKE_ICON)
        self.pong_button = button(1, PONG_ICON)
        self.asteroid_button = button(2, ASTEROID_ICON)
        self.tictactoe_button = button(3, TICTACTOE_ICON)

    def _init_games(self) -> None:
        window, renderer, input_handler = self._window, self._renderer, self._input
        self.snake_game = SnakeGame(renderer, window, input_handler, SNAKE_GAME_RECT_WIDTH)
        self.pong_game = PongGame(renderer, window, input_handler)
        self.asteroid_game = AsteroidGame(renderer, window, input_handler)
        self.tictactoe_game = TictactoeGame(renderer, window, input_handler)

    def game_active(self) -> bool:
        return self.current_game is not CurrentGame.NOGAME

    def draw(self) -> None:
        if self.game_active():
            self._draw_current_game()
        else:
            self._draw_game_menu()

    def update(self) -> None:
        if self.game_active():
            self._update_current_game()
        else:
            self._update_game_menu()

    def _update_current_game(self) -> None:
        if self._input.is_pressed(pygame.K_ESCAPE):
            self.current_game = CurrentGame.NOGAME
        game = self.current_game
        if game is CurrentGame.SNAKE:
            self.snake_game.update()
        elif game is CurrentGame.PONG:
            self.pong_game.update(self._timer.delta_time())
        elif game is CurrentGame.ASTEROID:
            # The asteroid scene also advances the tic-tac-toe scene.
            self.asteroid_game.update(self._timer.delta_time())
            self.tictactoe_game.update(self._timer.delta_time())
        elif game is CurrentGame.TICTACTOE:
            self.tictactoe_game.update(self._timer.delta_time())

    def _update_game_menu(self) -> None:
        for button, game in (
            (self.snake_button, CurrentGame.SNAKE),
            (self.pong_button, CurrentGame.PONG),
            (self.asteroid_button, CurrentGame.ASTEROID),
            (self.tictactoe_button, CurrentGame.TICTACTOE),
        ):
            button.update(self._input)
            if button.button.was_released:
                self.current_game = game

    def _draw_current_game(self) -> None:
        scenes = {
            CurrentGame.SNAKE: self.snake_game,
            CurrentGame.PONG: self.pong_game,
            CurrentGame.ASTEROID: self.asteroid_game,
            CurrentGame.TICTACTOE: self.tictactoe_game,
        }
        scene = scenes.get(self.current_game)
        if scene is not None:
            scene.draw()

    def _draw_game_menu(self) -> None:
        self.background_rect.draw(self._renderer)
        for button in (
            self.snake_button,
            self.pong_button,
            self.asteroid_button,
            self.tictactoe_button,
        ):
            button.draw()