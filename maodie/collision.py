"""Circle-based collision checks between the player, enemies and bullets."""

from __future__ import annotations

import logging
from typing import Any, Iterable

from maodie.core import Signal, Vec2

logger = logging.getLogger(__name__)


class CollisionSystem:
    """Detects overlaps and reports them through signals."""

    def __init__(self) -> None:
        self.player_radius = 9.0
        self.enemy_radius = 9.0
        self.bullet_radius = 3.0
        self.player_hit_by_enemy = Signal()
        self.enemy_hit_by_bullet = Signal()

    def check_collisions(self, player: Any, enemies: Iterable[Any], bullets: Iterable[Any]) -> None:
        enemies = list(enemies)
        self.check_player_enemy_collisions(player, enemies)
        self.check_bullet_enemy_collisions(bullets, enemies)

    def check_player_enemy_collisions(self, player: Any, enemies: Iterable[Any]) -> None:
        """Report the first active enemy touching the player."""
        player_pos = player.stats.position
        for enemy in enemies:
            if enemy.is_active and self.check_player_enemy_collision(player_pos, enemy.position):
                self.player_hit_by_enemy.emit(enemy.id)
                self._log("Player-Enemy", -1, enemy.id)
                break

    def check_bullet_enemy_collisions(self, bullets: Iterable[Any], enemies: Iterable[Any]) -> None:
        """Report, for each active bullet, the first active enemy it hits."""
        enemies = list(enemies)
        for bullet in bullets:
            if not bullet.is_active:
                continue
            for enemy in enemies:
                if enemy.is_active and self.check_bullet_enemy_collision(bullet.position, enemy.position):
                    self.enemy_hit_by_bullet.emit(bullet.id, enemy.id)
                    self._log("Bullet-Enemy", bullet.id, enemy.id)
                    break

    def check_player_enemy_collision(self, player_pos: Vec2, enemy_pos: Vec2) -> bool:
        return self._overlaps(player_pos, enemy_pos, self.player_radius, self.enemy_radius)

    def check_bullet_enemy_collision(self, bullet_pos: Vec2, enemy_pos: Vec2) -> bool:
        return self._overlaps(bullet_pos, enemy_pos, self.bullet_radius, self.enemy_radius)

    def check_bullet_player_collision(self, bullet_pos: Vec2, player_pos: Vec2) -> bool:
        return self._overlaps(bullet_pos, player_pos, self.bullet_radius, self.player_radius)

    @staticmethod
    def _overlaps(a: Vec2, b: Vec2, radius_a: float, radius_b: float) -> bool:
        return (b - a).length() <= radius_a + radius_b

    @staticmethod
    def _log(kind: str, first_id: int, second_id: int) -> None:
        logger.debug("Collision detected: %s between %d and %d", kind, first_id, second_id)