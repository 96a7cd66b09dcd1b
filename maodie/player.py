"""The player's state: movement, shooting and lives."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from maodie.bullets import BulletData, BulletManager
from maodie.core import MAP_HEIGHT, MAP_WIDTH, Signal, Vec2

BULLET_SPEED = 300.0


@dataclass
class PlayerStats:
    lives: int = 4
    position: Vec2 = field(default_factory=lambda: Vec2(128, 128))
    moving_direction: Vec2 = field(default_factory=Vec2)
    shooting_direction: Vec2 = field(default_factory=lambda: Vec2(1, 0))
    moving: bool = False
    move_speed: float = 100.0
    shoot_cooldown: float = 0.2


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


class Player:
    """Player model; emits signals when lives or position change."""

    def __init__(self) -> None:
        self.player_died = Signal()
        self.lives_changed = Signal()
        self.position_changed = Signal()
        self.stats = PlayerStats()
        self._current_cooldown = 0.0
        self._bullets = BulletManager()
        self.reset()

    @property
    def position(self) -> Vec2:
        return self.stats.position

    @property
    def lives(self) -> int:
        return self.stats.lives

    @property
    def shoot_cooldown(self) -> float:
        return self.stats.shoot_cooldown

    @property
    def move_speed(self) -> float:
        return self.stats.move_speed

    @property
    def shooting_direction(self) -> Vec2:
        return self.stats.shooting_direction

    def move(self, delta_time: float) -> None:
        stats = self.stats
        original = stats.position
        position = original
        if stats.moving:
            position = position + stats.moving_direction * stats.move_speed * delta_time
        position = Vec2(
            _clamp(position.x, 16.0, MAP_WIDTH - 32.0),
            _clamp(position.y, 16.0, MAP_HEIGHT - 32.0),
        )
        stats.position = position
        if position != original:
            self.position_changed.emit(position)

    def shoot(self, direction: Vec2) -> None:
        if self.can_shoot() and not direction.is_null():
            self.stats.shooting_direction = direction
            self._bullets.create_bullet(self.stats.position, direction, BULLET_SPEED)
            self._current_cooldown = self.stats.shoot_cooldown

    def add_life(self) -> None:
        self.stats.lives += 1
        self.lives_changed.emit()

    def take_damage(self) -> None:
        self.stats.lives -= 1
        self.lives_changed.emit()
        if self.stats.lives < 0:
            self.player_died.emit()

    def update(self, delta_time: float) -> None:
        self.move(delta_time)
        self._current_cooldown = max(self._current_cooldown - delta_time, 0.0)
        self._bullets.update_bullets(delta_time)

    def reset(self) -> None:
        stats = self.stats
        stats.lives = 4
        stats.position = Vec2(MAP_WIDTH // 2, MAP_HEIGHT // 2)
        stats.shooting_direction = Vec2(1, 0)
        stats.move_speed = 100.0
        stats.shoot_cooldown = 0.2
        self._bullets.clear_all_bullets()
        self._current_cooldown = 0.0

    def can_shoot(self) -> bool:
        return self._current_cooldown <= 0

    def active_bullets(self) -> List[BulletData]:
        return self._bullets.active_bullets()

    def set_moving_direction(self, direction: Vec2, is_moving: bool = True) -> None:
        length = direction.length()
        self.stats.moving_direction = direction / (length if length > 0 else 1.0)
        self.stats.moving = is_moving

    def remove_bullet(self, bullet_id: int) -> None:
        self._bullets.remove_bullet(bullet_id)

    def set_position(self, position: Vec2) -> None:
        self.stats.position = position
        self.position_changed.emit(position)