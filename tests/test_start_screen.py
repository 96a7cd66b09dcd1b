import pygame
import pytest

from maodie.start_screen import (
    BACKGROUND_COLOR,
    SCALE_FACTOR,
    TITLE_SOURCE,
    StartScreen,
)


def _recorder(signal):
    calls = []
    signal.connect(lambda *args: calls.append(args))
    return calls


def test_click_on_start_button_emits_start():
    screen = StartScreen()
    starts = _recorder(screen.start_game_clicked)
    exits = _recorder(screen.exit_game_clicked)
    assert screen.handle_click(screen.start_button_rect.center) is True
    assert starts == [()]
    assert exits == []


def test_click_on_exit_button_emits_exit():
    screen = StartScreen()
    starts = _recorder(screen.start_game_clicked)
    exits = _recorder(screen.exit_game_clicked)
    assert screen.handle_click(screen.exit_button_rect.center) is True
    assert exits == [()]
    assert starts == []


def test_click_outside_buttons_does_nothing():
    screen = StartScreen()
    starts = _recorder(screen.start_game_clicked)
    exits = _recorder(screen.exit_game_clicked)
    assert screen.handle_click(screen.title_rect.center) is False
    assert starts == [] and exits == []


def test_layout_order_and_no_overlap():
    screen = StartScreen()
    title, start, exit_ = screen.title_rect, screen.start_button_rect, screen.exit_button_rect
    assert title.bottom < start.top
    assert start.bottom <= exit_.top
    assert not start.colliderect(exit_)
    assert start.width == screen.size[0]


def test_title_is_centered_and_scaled():
    screen = StartScreen()
    assert screen.title_size == (TITLE_SOURCE.w * SCALE_FACTOR, TITLE_SOURCE.h * SCALE_FACTOR)
    assert screen.title_rect.centerx == pytest.approx(screen.size[0] / 2, abs=1)


def test_draw_blits_title_from_sheet():
    sheet = pygame.Surface((100, 160))
    sheet.fill((0, 0, 0))
    sheet.fill((255, 0, 0), pygame.Rect(TITLE_SOURCE.x, TITLE_SOURCE.y, TITLE_SOURCE.w, TITLE_SOURCE.h))
    screen = StartScreen(sheet)
    surface = pygame.Surface(screen.size)
    screen.draw(surface)
    assert surface.get_at(screen.title_rect.center)[:3] == (255, 0, 0)
    assert surface.get_at((0, 0))[:3] == BACKGROUND_COLOR


def test_draw_renders_button_text():
    screen = StartScreen()
    surface = pygame.Surface(screen.size)
    screen.draw(surface)
    area = surface.subsurface(screen.start_button_rect)
    colors = {area.get_at((x, y))[:3] for x in range(0, area.get_width(), 2) for y in range(area.get_height())}
    assert len(colors) > 1