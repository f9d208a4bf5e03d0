"""The application: window, renderer and main loop around the game menu."""

from __future__ import annotations

import argparse
import random
from typing import Optional, Sequence

import pygame

from minigames.geometry import Color
from minigames.input import InputHandler
from minigames.menu import GameMenu
from minigames.renderer import Renderer
from minigames.timer import Timer
from minigames.window import Window

PROGRAM_NAME = "Minigames"
FRAME_BACKGROUND = Color(100, 100, 100)


class Program:
    """Owns the window and the game menu and runs the frame loop."""

    def __init__(self, name: str) -> None:
        random.seed()
        pygame.init()
        pygame.font.init()
        self.window = Window(name)
        self.renderer = Renderer(self.window.surface)
        self.input = InputHandler()
        self.timer = Timer()
        self.game_menu = GameMenu(self.window, self.renderer, self.input, self.timer)

    def start(self) -> None:
        """Run frames until the window is closed, then shut down."""
        print("starting...")
        try:
            while self.window.is_open:
                self.timer.restart()
                self.renderer.start()
                self.renderer.fill(FRAME_BACKGROUND, self.window)
                self.game_menu.draw()
                self.renderer.end()
                self.handle_events()
                self.update()
        finally:
            print("exiting..")
            pygame.quit()

    def handle_events(self) -> None:
        for event in self.window.events():
            if event.type == pygame.QUIT:
                self.window.close()
            else:
                self.input.handle_event(event)

    def update(self) -> None:
        self.game_menu.update()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="minigames", description="Play a few small games.")
    parser.parse_args(argv)
    Program(PROGRAM_NAME).start()
    return 0