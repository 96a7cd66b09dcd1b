"""Enemy spawning, movement towards the player and bookkeeping."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field, replace
from typing import List, Optional

from maodie.core import MAP_HEIGHT, MAP_WIDTH, Signal, Vec2

logger = logging.getLogger(__name__)

ENEMY_WIDTH = 15.0
_SPAWN_ATTEMPTS = 5


@dataclass
class EnemyData:
    id: int
    health: int = 1
    position: Vec2 = field(default_factory=Vec2)
    velocity: Vec2 = field(default_factory=Vec2)
    move_speed: float = 50.0
    is_active: bool = True


class EnemyManager:
    """Spawns enemies at the map edges and steers them towards the player."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._enemies: List[EnemyData] = []
        self._next_id = 0
        self._spawn_timer = 0.0
        self.spawn_interval = 2.0
        self.max_enemies = 10
        self.enemy_move_speed = 50.0

        self.enemy_spawned = Signal()
        self.enemy_destroyed = Signal()
        self.enemy_reached_player = Signal()
        self.enemy_damaged = Signal()
        self.enemy_count_changed = Signal()

    @property
    def enemies(self) -> List[EnemyData]:
        """The stored enemies, active or not, in spawn order."""
        return list(self._enemies)

    @property
    def enemy_count(self) -> int:
        return len(self._enemies)

    @property
    def has_enemies(self) -> bool:
        return bool(self._enemies)

    def active_enemy_count(self) -> int:
        return sum(1 for enemy in self._enemies if enemy.is_active)

    def spawn_enemies(self, delta_time: float) -> None:
        """Spawn a wave of one to three enemies once the spawn interval has elapsed."""
        self._spawn_timer += delta_time
        if self._spawn_timer >= self.spawn_interval and self.active_enemy_count() < self.max_enemies:
            for _ in range(self._rng.randint(1, 3)):
                self.spawn_enemy_at_random_position()
            self._spawn_timer = 0.0
            self.spawn_interval = max(0.9, self.spawn_interval * 0.95)

    def spawn_enemy(self, position: Vec2) -> Optional[EnemyData]:
        """Add an enemy at the position unless the active limit is reached."""
        if self.active_enemy_count() >= self.max_enemies:
            return None
        enemy = EnemyData(
            id=self._next_id,
            health=1,
            position=position,
            velocity=Vec2(0, 0),
            move_speed=self.enemy_move_speed,
            is_active=True,
        )
        self._next_id += 1
        self._enemies.append(enemy)
        self.enemy_spawned.emit(replace(enemy))
        self.enemy_count_changed.emit(self.active_enemy_count())
        logger.debug("Enemy spawned at position: %s ID: %d", position, enemy.id)
        return enemy

    def spawn_enemy_at_random_position(self) -> Optional[EnemyData]:
        position = self._random_spawn_position()
        if position is None:
            return None
        return self.spawn_enemy(position)

    def update_enemies(self, delta_time: float, player_pos: Vec2) -> None:
        for enemy in self._enemies:
            if not enemy.is_active:
                continue
            direction = self._direction_to_player(enemy.position, player_pos)
            enemy.velocity = direction * enemy.move_speed
            target = enemy.position + enemy.velocity * delta_time
            if not self._is_position_valid(target, enemy.id):
                continue
            enemy.position = target
        self.spawn_enemies(delta_time)
        self._enemies = [enemy for enemy in self._enemies if enemy.is_active]

    def damage_enemy(self, bullet_id: int, enemy_id: int) -> None:
        for enemy in self._enemies:
            if enemy.id == enemy_id and enemy.is_active:
                enemy.health -= 1
                if enemy.health <= 0:
                    enemy.is_active = False
                    self.enemy_count_changed.emit(self.active_enemy_count())
                    logger.debug("Enemy destroyed, ID: %d", enemy_id)
                break

    def remove_enemy(self, enemy_id: int) -> None:
        for index, enemy in enumerate(self._enemies):
            if enemy.id == enemy_id:
                del self._enemies[index]
                self.enemy_count_changed.emit(self.active_enemy_count())
                break

    def clear_all_enemies(self) -> None:
        self._enemies.clear()
        self.enemy_count_changed.emit(0)

    def _random_edge_position(self) -> Vec2:
        side = self._rng.randrange(4)
        if side == 0:
            return Vec2(self._rng.randrange(3) * 16 + 7 * 16 + 8, MAP_HEIGHT - 8)
        if side == 1:
            return Vec2(MAP_WIDTH - 8, self._rng.randrange(3) * 16 + 6 * 16 + 8)
        if side == 2:
            return Vec2(self._rng.randrange(3) * 16 + 7 * 16 + 8, 8)
        return Vec2(8, self._rng.randrange(3) * 16 + 6 * 16 + 8)

    def _random_spawn_position(self) -> Optional[Vec2]:
        """A free edge position, or None when several tries all hit another enemy."""
        for _ in range(_SPAWN_ATTEMPTS):
            position = self._random_edge_position()
            if self._is_position_valid(position):
                return position
        return None

    def _is_position_valid(self, position: Vec2, exclude_id: Optional[int] = None) -> bool:
        for enemy in self._enemies:
            if not enemy.is_active or enemy.id == exclude_id:
                continue
            if (
                enemy.position.x < position.x + ENEMY_WIDTH
                and enemy.position.x + ENEMY_WIDTH > position.x
                and enemy.position.y < position.y + ENEMY_WIDTH
                and enemy.position.y + ENEMY_WIDTH > position.y
            ):
                return False
        return True

    @staticmethod
    def _direction_to_player(enemy_pos: Vec2, player_pos: Vec2) -> Vec2:
        """Unit step along the dominant axis towards the player."""
        direction = (player_pos - enemy_pos).normalized()
        if abs(direction.x) > abs(direction.y):
            return Vec2(1 if direction.x > 0 else -1, 0)
        return Vec2(0, 1 if direction.y > 0 else -1)