"""Drawable game entities: the player sprite and monsters."""

from __future__ import annotations

import enum
from typing import Dict, List, Optional, Tuple

import pygame

from maodie.animation import Animation
from maodie.core import Vec2
from maodie.sprites import Rect, SpriteManager

SCALE = 5.0
ANCHOR_OFFSET = Vec2(27, 16)
PLAYER_FRAME_RATE = 8.0

DestRect = Tuple[float, float, float, float]
Placement = Tuple[Rect, DestRect]


class PlayerState(enum.Enum):
    IDLE = enum.auto()
    WALK_DOWN = enum.auto()
    WALK_UP = enum.auto()
    WALK_LEFT = enum.auto()
    WALK_RIGHT = enum.auto()
    SHOOT_DOWN = enum.auto()
    SHOOT_UP = enum.auto()
    SHOOT_LEFT = enum.auto()
    SHOOT_RIGHT = enum.auto()
    SHOOT_DOWN_WALK = enum.auto()
    SHOOT_UP_WALK = enum.auto()
    SHOOT_LEFT_WALK = enum.auto()
    SHOOT_RIGHT_WALK = enum.auto()


_PLAYER_ANIMATIONS: Dict[PlayerState, str] = {
    PlayerState.IDLE: "player_idle",
    PlayerState.WALK_DOWN: "player_walk_down",
    PlayerState.WALK_UP: "player_walk_up",
    PlayerState.WALK_LEFT: "player_walk_left",
    PlayerState.WALK_RIGHT: "player_walk_right",
    PlayerState.SHOOT_DOWN: "player_shoot_down",
    PlayerState.SHOOT_UP: "player_shoot_up",
    PlayerState.SHOOT_LEFT: "player_shoot_left",
    PlayerState.SHOOT_RIGHT: "player_shoot_right",
    PlayerState.SHOOT_DOWN_WALK: "player_walk_down",
    PlayerState.SHOOT_UP_WALK: "player_walk_up",
    PlayerState.SHOOT_LEFT_WALK: "player_walk_left",
    PlayerState.SHOOT_RIGHT_WALK: "player_walk_right",
}


def _frame_placements(sprites: SpriteManager, frame_name: str, position: Vec2) -> List[Placement]:
    """Where each piece of a (possibly composite) frame goes on screen."""
    anchor = (position + ANCHOR_OFFSET) * SCALE
    parts = sprites.composite_parts(frame_name)
    if parts:
        placements = []
        for part in parts:
            source = sprites.sprite_rect(part.frame_name)
            origin = anchor + part.offset * SCALE
            placements.append((source, (origin.x, origin.y, source.w * SCALE, source.h * SCALE)))
        return placements
    source = sprites.sprite_rect(frame_name)
    if source.is_null():
        return []
    return [(source, (anchor.x, anchor.y, source.w * SCALE, source.h * SCALE))]


def _animation_placements(
    sprites: SpriteManager, animation: Optional[Animation], position: Vec2
) -> List[Placement]:
    if animation is None or not animation.frame_names:
        return []
    return _frame_placements(sprites, animation.current_frame_name(), position)


def _blit_scaled(surface: pygame.Surface, sheet: pygame.Surface, source: Rect, dest: DestRect) -> None:
    x, y, w, h = dest
    width, height = round(w), round(h)
    if source.is_null() or width <= 0 or height <= 0:
        return
    region = pygame.Rect(source.x, source.y, source.w, source.h).clip(sheet.get_rect())
    if region.width == 0 or region.height == 0:
        return
    piece = pygame.transform.scale(sheet.subsurface(region), (width, height))
    surface.blit(piece, (round(x), round(y)))


class Entity:
    """Something with a position that can be updated and drawn."""

    def __init__(self, position: Optional[Vec2] = None) -> None:
        self.position = position if position is not None else Vec2(0, 0)

    def update(self, delta_time: float) -> None:
        """Advance the entity; the base entity does nothing."""

    def placements(self) -> List[Placement]:
        """Source rectangles on the sprite sheet and their scaled screen rectangles."""
        return []

    def paint(self, surface: pygame.Surface, sprite_sheet: Optional[pygame.Surface]) -> None:
        if sprite_sheet is None:
            return
        for source, dest in self.placements():
            _blit_scaled(surface, sprite_sheet, source, dest)


class PlayerEntity(Entity):
    """The player's on-screen sprite with one animation per state."""

    def __init__(self, sprites: SpriteManager) -> None:
        super().__init__(Vec2(16 * 8, 16 * 8))
        self._sprites = sprites
        self._animations: Dict[PlayerState, Animation] = {
            state: Animation(sprites.animation_sequence(name), PLAYER_FRAME_RATE, True)
            for state, name in _PLAYER_ANIMATIONS.items()
        }
        self._state = PlayerState.IDLE
        self._animation: Optional[Animation] = self._animations.get(self._state)

    @property
    def state(self) -> PlayerState:
        return self._state

    @property
    def animation(self) -> Optional[Animation]:
        return self._animation

    def set_state(self, new_state: PlayerState) -> None:
        """Switch animation; the new one restarts from its first frame."""
        if self._state is new_state:
            return
        self._state = new_state
        self._animation = self._animations.get(new_state)
        if self._animation is not None:
            self._animation.reset()

    def update(self, delta_time: float) -> None:
        if self._animation is not None:
            self._animation.update(delta_time)

    def placements(self) -> List[Placement]:
        return _animation_placements(self._sprites, self._animation, self.position)


class MonsterEntity(Entity):
    """An enemy sprite that drifts with its velocity between model updates."""

    def __init__(self, monster_type: str, sprites: SpriteManager) -> None:
        super().__init__()
        self.monster_type = monster_type
        self._sprites = sprites
        self.velocity = Vec2(0, 0)
        self._animation: Optional[Animation] = None
        if monster_type == "orc":
            self._animation = Animation(sprites.animation_sequence("orc_walk"))

    @property
    def animation(self) -> Optional[Animation]:
        return self._animation

    def set_velocity(self, velocity: Vec2) -> None:
        self.velocity = velocity

    def update(self, delta_time: float) -> None:
        self.position = self.position + self.velocity * delta_time
        if self._animation is not None:
            self._animation.update(delta_time)

    def placements(self) -> List[Placement]:
        return _animation_placements(self._sprites, self._animation, self.position)