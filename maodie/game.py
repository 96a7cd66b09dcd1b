"""Game state: ties the player, enemies and collisions together."""

from __future__ import annotations

import enum
import logging
import random
from typing import Optional

from maodie.collision import CollisionSystem
from maodie.core import MAP_HEIGHT, MAP_WIDTH, MAX_GAMETIME, Signal, Vec2
from maodie.enemies import EnemyManager
from maodie.player import Player

logger = logging.getLogger(__name__)


class GameState(enum.Enum):
    MENU = 0
    PLAYING = 1
    PAUSED = 2
    GAME_OVER = 3


class GameViewModel:
    """Runs one round of the game and reports state changes through signals."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.game_state_changed = Signal()
        self.player_died = Signal()
        self.player_lives_changed = Signal()
        self.player_position_changed = Signal()

        self._state = GameState.MENU
        self._game_time = 0.0
        self.player = Player()
        self.enemy_manager = EnemyManager(rng)
        self._collisions = CollisionSystem()

        self._collisions.player_hit_by_enemy.connect(self._handle_player_hit_by_enemy)
        self._collisions.enemy_hit_by_bullet.connect(self._handle_enemy_hit_by_bullet)
        self.player.player_died.connect(self._handle_player_death)
        self.player.lives_changed.connect(self.player_lives_changed.emit)
        self.player.position_changed.connect(self.player_position_changed.emit)

    @property
    def collision_system(self) -> CollisionSystem:
        return self._collisions

    @property
    def game_state(self) -> GameState:
        return self._state

    @property
    def is_game_active(self) -> bool:
        return self._state is GameState.PLAYING

    @property
    def game_time(self) -> float:
        return self._game_time

    @property
    def player_position(self) -> Vec2:
        return self.player.position

    @property
    def player_lives(self) -> int:
        return self.player.lives

    def _set_state(self, state: GameState) -> None:
        self._state = state
        self.game_state_changed.emit(state)

    def start_game(self) -> None:
        if self._state is not GameState.PLAYING:
            self._reset_game()
            self._set_state(GameState.PLAYING)
            logger.debug("Game started")

    def pause_game(self) -> None:
        if self._state is GameState.PLAYING:
            self._set_state(GameState.PAUSED)
            logger.debug("Game paused")

    def resume_game(self) -> None:
        if self._state is GameState.PAUSED:
            self._set_state(GameState.PLAYING)
            logger.debug("Game resumed")

    def end_game(self) -> None:
        if self._state is not GameState.GAME_OVER:
            self._set_state(GameState.GAME_OVER)
            logger.debug("Game over")

    def player_attack(self, direction: Vec2) -> None:
        if self._state is GameState.PLAYING:
            self.player.shoot(direction)
            logger.debug("Player attacked in direction: %s", direction)

    def set_player_move_direction(self, direction: Vec2, is_moving: bool) -> None:
        if self._state is GameState.PLAYING:
            self.player.set_moving_direction(direction, is_moving)

    def update_game(self, delta_time: float) -> None:
        if self._state is not GameState.PLAYING:
            return

        self._game_time += delta_time
        if self._game_time > MAX_GAMETIME:
            self._game_time = 0.0
            self.end_game()
            return

        self.player.update(delta_time)
        self.enemy_manager.update_enemies(delta_time, self.player.position)

        bullets = self.player.active_bullets()
        self._collisions.check_player_enemy_collisions(self.player, self.enemy_manager.enemies)
        # A player hit clears the enemies, so bullets are checked against what is left.
        self._collisions.check_bullet_enemy_collisions(bullets, self.enemy_manager.enemies)

        if self.player.lives <= 0:
            self._handle_player_death()

    def _handle_player_death(self) -> None:
        self.player_died.emit()
        self.end_game()

    def _reset_game(self) -> None:
        self._game_time = 0.0
        self.player.reset()
        self.enemy_manager.clear_all_enemies()

    def _handle_player_hit_by_enemy(self, enemy_id: int) -> None:
        self.player.take_damage()
        self.enemy_manager.remove_enemy(enemy_id)
        self.player.set_position(Vec2(MAP_WIDTH / 2.0, MAP_HEIGHT / 2.0))
        self.enemy_manager.clear_all_enemies()
        self._game_time = max(self._game_time - 5.0, 0.0)

    def _handle_enemy_hit_by_bullet(self, bullet_id: int, enemy_id: int) -> None:
        self.enemy_manager.damage_enemy(bullet_id, enemy_id)
        self.player.remove_bullet(bullet_id)