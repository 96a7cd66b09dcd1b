"""The title screen with its start and exit buttons."""

from __future__ import annotations

from typing import Optional, Tuple

import pygame

from maodie.core import Signal
from maodie.sprites import Rect

SCREEN_SIZE = (1550, 1390)
TITLE_SOURCE = Rect(0, 96, 94, 55)
SCALE_FACTOR = 10
BASE_FONT_SIZE = 6
FONT_PIXELS = BASE_FONT_SIZE * SCALE_FACTOR
MIN_BUTTON_HEIGHT = 50
BUTTON_HEIGHT = max(MIN_BUTTON_HEIGHT, FONT_PIXELS)
TITLE_SPACING = 20 * SCALE_FACTOR
START_TEXT = "开始游戏"
EXIT_TEXT = "退出游戏"

BACKGROUND_COLOR = (0, 0, 0)
TEXT_COLOR = (255, 255, 255)
HOVER_COLOR = (128, 128, 128)

_Point = Tuple[int, int]


def _title_image(sprite_sheet: Optional[pygame.Surface]) -> Optional[pygame.Surface]:
    if sprite_sheet is None:
        return None
    source = pygame.Rect(TITLE_SOURCE.x, TITLE_SOURCE.y, TITLE_SOURCE.w, TITLE_SOURCE.h)
    region = source.clip(sprite_sheet.get_rect())
    if region.width == 0 or region.height == 0:
        return None
    piece = sprite_sheet.subsurface(region).copy()
    return pygame.transform.scale(piece, (region.width * SCALE_FACTOR, region.height * SCALE_FACTOR))


class StartScreen:
    """Shows the title art and reports clicks on its two buttons."""

    def __init__(self, sprite_sheet: Optional[pygame.Surface] = None, size: Tuple[int, int] = SCREEN_SIZE) -> None:
        self.start_game_clicked = Signal()
        self.exit_game_clicked = Signal()
        self.size = size
        self.mouse_position: Optional[_Point] = None
        self._title = _title_image(sprite_sheet)
        self._font: Optional[pygame.font.Font] = None

    @property
    def title_size(self) -> Tuple[int, int]:
        if self._title is None:
            return (TITLE_SOURCE.w * SCALE_FACTOR, TITLE_SOURCE.h * SCALE_FACTOR)
        return self._title.get_size()

    def _layout(self) -> Tuple[pygame.Rect, pygame.Rect, pygame.Rect]:
        width, height = self.size
        title_w, title_h = self.title_size
        content = title_h + TITLE_SPACING + 2 * BUTTON_HEIGHT
        top = (height - content) // 2
        title = pygame.Rect((width - title_w) // 2, top, title_w, title_h)
        start = pygame.Rect(0, title.bottom + TITLE_SPACING, width, BUTTON_HEIGHT)
        exit_ = pygame.Rect(0, start.bottom, width, BUTTON_HEIGHT)
        return title, start, exit_

    @property
    def title_rect(self) -> pygame.Rect:
        return self._layout()[0]

    @property
    def start_button_rect(self) -> pygame.Rect:
        return self._layout()[1]

    @property
    def exit_button_rect(self) -> pygame.Rect:
        return self._layout()[2]

    def handle_click(self, position: _Point) -> bool:
        """Emit the signal of the button under the position; True if one was hit."""
        _, start, exit_ = self._layout()
        if start.collidepoint(position):
            self.start_game_clicked.emit()
            return True
        if exit_.collidepoint(position):
            self.exit_game_clicked.emit()
            return True
        return False

    def _button_font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, FONT_PIXELS)
            self._font.set_bold(True)
        return self._font

    def _draw_button(self, surface: pygame.Surface, rect: pygame.Rect, text: str) -> None:
        hovered = self.mouse_position is not None and rect.collidepoint(self.mouse_position)
        rendered = self._button_font().render(text, True, HOVER_COLOR if hovered else TEXT_COLOR)
        surface.blit(rendered, rendered.get_rect(center=rect.center))

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill(BACKGROUND_COLOR)
        title, start, exit_ = self._layout()
        if self._title is not None:
            surface.blit(self._title, title.topleft)
        self._draw_button(surface, start, START_TEXT)
        self._draw_button(surface, exit_, EXIT_TEXT)