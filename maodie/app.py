"""Application entry point: asset loading and the main loop."""

from __future__ import annotations

import argparse
import json
import logging
import os
import random
from pathlib import Path
from typing import List, Optional, Union

import pygame

from maodie.game import GameViewModel
from maodie.game_screen import GameScreen
from maodie.gamemap import GameMap, MapLoadError
from maodie.sprites import SpriteManager
from maodie.start_screen import StartScreen
from maodie.window import MainWindow

logger = logging.getLogger(__name__)

TARGET_FPS = 60
FRAME_INTERVAL_MS = 1000 // TARGET_FPS
DEFAULT_ASSET_DIR = Path("assets")
SPRITE_ATLAS = "sprite.json"
SPRITE_SHEET = "sprite.png"
MAP_FILE = "gamemap.json"
MAP_NAME = "map_1"
LAYOUT_NAME = "1"


def clamp_delta(current_ms: int, last_ms: int) -> float:
    """Seconds between two frame stamps, capped at one target frame."""
    return min((current_ms - last_ms) / 1000.0, 1.0 / TARGET_FPS)


class Application:
    """Loads the assets, builds the screens and drives the game loop."""

    def __init__(
        self,
        asset_dir: Optional[Union[str, os.PathLike]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        assets = Path(asset_dir) if asset_dir is not None else DEFAULT_ASSET_DIR

        self.sprites = SpriteManager()
        try:
            self.sprites.load_from_file(assets / SPRITE_ATLAS)
        except (OSError, ValueError) as exc:
            logger.warning("cannot load %s: %s", assets / SPRITE_ATLAS, exc)

        self.sprite_sheet: Optional[pygame.Surface] = None
        try:
            self.sprite_sheet = pygame.image.load(str(assets / SPRITE_SHEET))
        except (pygame.error, OSError) as exc:
            logger.warning("cannot load %s: %s", assets / SPRITE_SHEET, exc)

        self.game_map: Optional[GameMap] = GameMap()
        try:
            self.game_map.load_from_file(assets / MAP_FILE, MAP_NAME, LAYOUT_NAME)
        except MapLoadError as exc:
            logger.warning("map not loaded, it will not be drawn: %s", exc)
            self.game_map = None

        self.view_model = GameViewModel(rng)
        self.game_screen = GameScreen(self.view_model, self.sprites, self.sprite_sheet, self.game_map)
        self.start_screen = StartScreen(self.sprite_sheet)
        self.window = MainWindow(self.view_model, self.start_screen, self.game_screen)
        self._last_ms = 0

    def game_loop(self, current_ms: int) -> float:
        """Run one frame stamped at current_ms; returns the delta time used."""
        delta = clamp_delta(current_ms, self._last_ms)
        self._last_ms = current_ms
        self.game_screen.process_input()
        self.view_model.update_game(delta)
        self.game_screen.tick(delta)
        return delta

    def run(self) -> int:
        pygame.init()
        try:
            surface = pygame.display.set_mode(self.window.size)
            pygame.display.set_caption(self.window.title)
            clock = pygame.time.Clock()
            self._last_ms = pygame.time.get_ticks()
            while self.window.running:
                for event in pygame.event.get():
                    self.window.handle_event(event)
                self.game_loop(pygame.time.get_ticks())
                self.window.draw(surface)
                pygame.display.flip()
                clock.tick(TARGET_FPS)
        finally:
            pygame.quit()
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="maodie", description="Maodie Adventure")
    parser.add_argument(
        "--assets",
        default=str(DEFAULT_ASSET_DIR),
        help="directory holding sprite.json, sprite.png and gamemap.json",
    )
    args = parser.parse_args(argv)
    return Application(args.assets).run()


if __name__ == "__main__":
    raise SystemExit(main())