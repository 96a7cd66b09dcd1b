"""The in-game screen: input handling, entity syncing and drawing."""

from __future__ import annotations

import itertools
from typing import Dict, Iterator, Optional, Tuple

import pygame

from maodie.core import MAX_GAMETIME, Vec2
from maodie.entities import ANCHOR_OFFSET, SCALE, MonsterEntity, PlayerEntity, PlayerState
from maodie.game import GameViewModel
from maodie.gamemap import GameMap
from maodie.sprites import Rect, SpriteManager

UI_MARGIN = 3.0
MONEY_COUNT = 5
FONT_PIXELS = 28
BULLET_OFFSET = Vec2(10, 10)

DARK_CYAN = (0, 128, 128)
BAR_BACKGROUND_COLOR = (128, 128, 128)
BAR_FILL_COLOR = (0, 255, 0)
BAR_BORDER_COLOR = (0, 0, 0)
TEXT_COLOR = (255, 255, 255)

MOVE_KEYS = (
    (pygame.K_s, Vec2(0, 1)),
    (pygame.K_w, Vec2(0, -1)),
    (pygame.K_a, Vec2(-1, 0)),
    (pygame.K_d, Vec2(1, 0)),
)
SHOOT_KEYS = (
    (pygame.K_DOWN, Vec2(0, 1)),
    (pygame.K_UP, Vec2(0, -1)),
    (pygame.K_LEFT, Vec2(-1, 0)),
    (pygame.K_RIGHT, Vec2(1, 0)),
)

_Box = Tuple[float, float, float, float]


def _state_transitions(direction: Vec2, shoot: Vec2) -> Iterator[PlayerState]:
    """The player states set, in order, for one input frame."""
    moving = not direction.is_null()
    if direction.y == 1 and shoot.y == 0:
        yield PlayerState.WALK_DOWN
    elif direction.y == -1 and shoot.y == 0:
        yield PlayerState.WALK_UP
    elif direction.y == 0 and shoot.y == 1:
        yield PlayerState.SHOOT_DOWN
    elif direction.y == 0 and shoot.y == -1:
        yield PlayerState.SHOOT_UP
    if direction.x == 1 and shoot.x == 0:
        yield PlayerState.WALK_RIGHT
    elif direction.x == -1 and shoot.x == 0:
        yield PlayerState.WALK_LEFT
    elif direction.x == 0 and shoot.x == 1:
        yield PlayerState.SHOOT_RIGHT
    elif direction.x == 0 and shoot.x == -1:
        yield PlayerState.SHOOT_LEFT
    if shoot.y == 1 and moving:
        yield PlayerState.SHOOT_DOWN_WALK
    elif shoot.y == -1 and moving:
        yield PlayerState.SHOOT_UP_WALK
    if shoot.x == 1 and moving:
        yield PlayerState.SHOOT_RIGHT_WALK
    elif shoot.x == -1 and moving:
        yield PlayerState.SHOOT_LEFT_WALK
    if shoot.is_null() and not moving:
        yield PlayerState.IDLE


def player_state_for(direction: Vec2, shoot_direction: Vec2) -> Optional[PlayerState]:
    """The state the player sprite ends in for this input, or None if none applies."""
    states = list(_state_transitions(direction, shoot_direction))
    return states[-1] if states else None


def _blit_scaled(surface: pygame.Surface, sheet: pygame.Surface, source: Rect, dest: _Box) -> None:
    x, y, w, h = dest
    width, height = round(w), round(h)
    if source.is_null() or width <= 0 or height <= 0:
        return
    region = pygame.Rect(source.x, source.y, source.w, source.h).clip(sheet.get_rect())
    if region.width == 0 or region.height == 0:
        return
    piece = pygame.transform.scale(sheet.subsurface(region), (width, height))
    surface.blit(piece, (round(x), round(y)))


def _scaled_box(x: float, y: float, source: Rect) -> _Box:
    return (x, y, source.w * SCALE, source.h * SCALE)


class GameScreen:
    """Shows the running game and turns held keys into player commands."""

    def __init__(
        self,
        view_model: GameViewModel,
        sprites: SpriteManager,
        sprite_sheet: Optional[pygame.Surface] = None,
        game_map: Optional[GameMap] = None,
    ) -> None:
        self.view_model = view_model
        self.sprites = sprites
        self.sprite_sheet = sprite_sheet
        self.game_map = game_map
        self.player = PlayerEntity(sprites)
        self.monsters: Dict[int, MonsterEntity] = {}
        self.keys: Dict[int, bool] = {}
        self.max_time = MAX_GAMETIME
        self.current_time = MAX_GAMETIME
        self._font: Optional[pygame.font.Font] = None
        view_model.player_position_changed.connect(self._on_player_position_changed)

    def _on_player_position_changed(self, position: Vec2) -> None:
        self.player.position = position

    def handle_key(self, key: int, pressed: bool) -> None:
        self.keys[key] = pressed

    def _held(self, bindings) -> Vec2:
        return sum((vector for key, vector in bindings if self.keys.get(key)), Vec2())

    def process_input(self) -> None:
        """Apply the held keys to the player model and the player sprite."""
        model = self.view_model.player
        direction = self._held(MOVE_KEYS)
        model.set_moving_direction(direction)
        shoot = self._held(SHOOT_KEYS)
        model.shoot(shoot)
        for state in _state_transitions(direction, shoot):
            self.player.set_state(state)

    def sync_enemies(self) -> None:
        """Create, move and drop monster sprites to match the live enemies."""
        enemies = self.view_model.enemy_manager.enemies
        live_ids = {enemy.id for enemy in enemies}
        self.monsters = {eid: monster for eid, monster in self.monsters.items() if eid in live_ids}
        for enemy in enemies:
            monster = self.monsters.get(enemy.id)
            if monster is None:
                monster = MonsterEntity("orc", self.sprites)
                self.monsters[enemy.id] = monster
            monster.position = enemy.position
            monster.set_velocity(enemy.velocity)

    def tick(self, delta_time: float) -> None:
        self.sync_enemies()
        self.player.update(delta_time)
        self.current_time = MAX_GAMETIME - self.view_model.game_time
        for monster in self.monsters.values():
            monster.update(delta_time)

    def draw(self, surface: pygame.Surface) -> None:
        self._paint_map(surface)
        self._paint_ui(surface)
        self.player.paint(surface, self.sprite_sheet)
        for monster in self.monsters.values():
            monster.paint(surface, self.sprite_sheet)
        self._paint_bullets(surface)

    def _blit(self, surface: pygame.Surface, source: Rect, dest: _Box) -> None:
        if self.sprite_sheet is not None:
            _blit_scaled(surface, self.sprite_sheet, source, dest)

    def _paint_map(self, surface: pygame.Surface) -> None:
        game_map = self.game_map
        if game_map is None or game_map.width <= 0:
            surface.fill(DARK_CYAN)
            return
        for row, col in itertools.product(range(game_map.height), range(game_map.width)):
            name = game_map.tile_sprite_name(game_map.tile_id_at(row, col))
            source = self.sprites.sprite_rect(name)
            if source.is_null():
                continue
            x = (col * source.w + ANCHOR_OFFSET.x) * SCALE
            y = (row * source.h + ANCHOR_OFFSET.y) * SCALE
            self._blit(surface, source, _scaled_box(x, y, source))

    def _paint_bullets(self, surface: pygame.Surface) -> None:
        source = self.sprites.sprite_rect("player_bullet")
        if source.is_null():
            return
        half = Vec2(source.w / 2.0, source.h / 2.0)
        for bullet in self.view_model.player.active_bullets():
            top_left = (bullet.position - half + ANCHOR_OFFSET + BULLET_OFFSET) * SCALE
            self._blit(surface, source, _scaled_box(top_left.x, top_left.y, source))

    def _font_for_text(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, FONT_PIXELS)
        return self._font

    def _draw_counter(self, surface: pygame.Surface, icon: _Box, count: int) -> None:
        font = self._font_for_text()
        x, y, w, h = icon
        baseline = y + h / 2.0 + FONT_PIXELS * 0.75 / 2.0
        text = font.render(f"x{count}", True, TEXT_COLOR)
        surface.blit(text, (round(x + w + (UI_MARGIN - 1) * SCALE), round(baseline - font.get_ascent())))

    def _paint_ui(self, surface: pygame.Surface) -> None:
        sprites = self.sprites
        circle = sprites.sprite_rect("ui_circle")
        circle_box = _scaled_box(ANCHOR_OFFSET.x * SCALE, 0, circle)
        self._blit(surface, circle, circle_box)

        item = sprites.sprite_rect("ui_item_ground")
        item_box = _scaled_box(UI_MARGIN * SCALE, ANCHOR_OFFSET.y * SCALE, item)
        self._blit(surface, item, item_box)

        health = sprites.sprite_rect("ui_helth")
        health_box = _scaled_box(
            (UI_MARGIN - 2) * SCALE, item_box[1] + item_box[3] + UI_MARGIN * SCALE, health
        )
        self._blit(surface, health, health_box)

        money = sprites.sprite_rect("ui_money")
        money_box = _scaled_box(
            (UI_MARGIN - 2) * SCALE, health_box[1] + health_box[3] + UI_MARGIN * SCALE, money
        )
        self._blit(surface, money, money_box)

        if self.max_time > 0:
            bar_width = 15 * 16 * SCALE
            bar_height = 4 * SCALE
            left = circle_box[0] + circle_box[2] + (UI_MARGIN - 2) * SCALE
            top = circle_box[1] + circle_box[3] / 2.0 - bar_height / 2.0 + 3 * SCALE
            fill_width = bar_width * (self.current_time / self.max_time)
            background = pygame.Rect(round(left), round(top), round(bar_width), round(bar_height))
            surface.fill(BAR_BACKGROUND_COLOR, background)
            if fill_width > 0:
                fill = pygame.Rect(round(left), round(top), round(fill_width), round(bar_height))
                surface.fill(BAR_FILL_COLOR, fill)
            pygame.draw.rect(surface, BAR_BORDER_COLOR, background, 1)

        self._draw_counter(surface, health_box, self.view_model.player_lives)
        self._draw_counter(surface, money_box, MONEY_COUNT)