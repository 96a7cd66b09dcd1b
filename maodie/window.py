"""Top-level window that switches between the title and game screens."""

from __future__ import annotations

from typing import Optional, Union

import pygame

from maodie.core import Signal
from maodie.game import GameState, GameViewModel
from maodie.game_screen import GameScreen
from maodie.sprites import SpriteManager
from maodie.start_screen import SCREEN_SIZE, StartScreen

WINDOW_TITLE = "Maodie Adventure"
WINDOW_SIZE = SCREEN_SIZE
BACKGROUND_COLOR = (0, 0, 0)


class MainWindow:
    """Routes events to the screen on show and draws it."""

    def __init__(
        self,
        view_model: GameViewModel,
        start_screen: Optional[StartScreen] = None,
        game_screen: Optional[GameScreen] = None,
    ) -> None:
        self.view_model = view_model
        self.start_screen = start_screen if start_screen is not None else StartScreen(size=WINDOW_SIZE)
        self.game_screen = game_screen if game_screen is not None else GameScreen(view_model, SpriteManager())
        self.title = WINDOW_TITLE
        self.size = WINDOW_SIZE
        self.running = True
        self.quit_requested = Signal()

        self.start_screen.start_game_clicked.connect(self.on_start_game_requested)
        self.start_screen.exit_game_clicked.connect(self.on_exit_game_requested)

        self.current_screen: Union[StartScreen, GameScreen]
        if view_model.game_state is GameState.PLAYING:
            self.current_screen = self.game_screen
        else:
            self.current_screen = self.start_screen

    def on_start_game_requested(self) -> None:
        self.current_screen = self.game_screen
        self.view_model.start_game()

    def on_exit_game_requested(self) -> None:
        self.running = False
        self.quit_requested.emit()

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.on_exit_game_requested()
            return
        if self.current_screen is self.game_screen:
            if event.type in (pygame.KEYDOWN, pygame.KEYUP):
                self.game_screen.handle_key(event.key, event.type == pygame.KEYDOWN)
        elif self.current_screen is self.start_screen:
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.start_screen.handle_click(event.pos)
            elif event.type == pygame.MOUSEMOTION:
                self.start_screen.mouse_position = event.pos

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill(BACKGROUND_COLOR)
        self.current_screen.draw(surface)