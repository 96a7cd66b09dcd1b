import random

from maodie.core import MAP_HEIGHT, MAP_WIDTH, MAX_GAMETIME, Vec2
from maodie.game import GameState, GameViewModel


def _playing():
    vm = GameViewModel(random.Random(5))
    vm.start_game()
    return vm


def test_initial_state_is_menu():
    vm = GameViewModel(random.Random(5))
    assert vm.game_state is GameState.MENU
    assert not vm.is_game_active
    assert vm.player_lives == 4


def test_start_emits_playing():
    vm = GameViewModel(random.Random(5))
    states = []
    vm.game_state_changed.connect(states.append)
    vm.start_game()
    vm.start_game()
    assert states == [GameState.PLAYING]
    assert vm.is_game_active


def test_pause_and_resume():
    vm = GameViewModel(random.Random(5))
    vm.pause_game()
    assert vm.game_state is GameState.MENU
    vm.start_game()
    vm.pause_game()
    assert vm.game_state is GameState.PAUSED
    vm.update_game(1.0)
    assert vm.game_time == 0.0
    vm.resume_game()
    assert vm.game_state is GameState.PLAYING


def test_update_ignored_outside_play():
    vm = GameViewModel(random.Random(5))
    vm.update_game(1.0)
    assert vm.game_time == 0.0


def test_update_accumulates_time():
    vm = _playing()
    vm.update_game(0.25)
    vm.update_game(0.25)
    assert vm.game_time == 0.5


def test_time_limit_ends_game():
    vm = _playing()
    states = []
    vm.game_state_changed.connect(states.append)
    vm.update_game(MAX_GAMETIME + 1)
    assert vm.game_state is GameState.GAME_OVER
    assert vm.game_time == 0.0
    assert states == [GameState.GAME_OVER]


def test_restart_resets_player():
    vm = _playing()
    vm.player.take_damage()
    vm.end_game()
    vm.start_game()
    assert vm.player_lives == 4
    assert vm.game_state is GameState.PLAYING


def test_player_hit_by_enemy():
    vm = _playing()
    lives_events = []
    vm.player_lives_changed.connect(lambda: lives_events.append(vm.player_lives))
    vm.player.set_position(Vec2(60, 60))
    vm.enemy_manager.spawn_enemy(Vec2(60, 60))

    vm.update_game(0.0)

    assert vm.player_lives == 3
    assert lives_events == [3]
    assert vm.enemy_manager.enemies == []
    assert vm.player_position == Vec2(MAP_WIDTH / 2.0, MAP_HEIGHT / 2.0)
    assert vm.game_time == 0.0
    assert vm.game_state is GameState.PLAYING


def test_losing_all_lives_ends_game():
    vm = _playing()
    died = []
    vm.player_died.connect(lambda: died.append(True))
    for _ in range(vm.player_lives):
        vm.enemy_manager.spawn_enemy(vm.player_position)
        vm.update_game(0.0)
    assert vm.player_lives == 0
    assert vm.game_state is GameState.GAME_OVER
    assert died == [True]


def test_bullet_destroys_enemy():
    vm = _playing()
    start = vm.player_position
    vm.player_attack(Vec2(1, 0))
    assert len(vm.player.active_bullets()) == 1
    vm.enemy_manager.spawn_enemy(start + Vec2(22, 0))

    vm.update_game(0.05)

    assert vm.enemy_manager.active_enemy_count() == 0
    assert vm.player.active_bullets() == []
    assert vm.player_lives == 4


def test_attack_ignored_when_not_playing():
    vm = GameViewModel(random.Random(5))
    vm.player_attack(Vec2(1, 0))
    assert vm.player.active_bullets() == []


def test_move_direction_only_while_playing():
    vm = GameViewModel(random.Random(5))
    vm.set_player_move_direction(Vec2(1, 0), True)
    assert not vm.player.stats.moving
    vm.start_game()
    vm.set_player_move_direction(Vec2(1, 0), True)
    assert vm.player.stats.moving
    assert vm.player.stats.moving_direction == Vec2(1, 0)


def test_position_change_is_forwarded():
    vm = _playing()
    positions = []
    vm.player_position_changed.connect(positions.append)
    vm.set_player_move_direction(Vec2(0, 1), True)
    vm.update_game(0.1)
    assert positions == [vm.player_position]
    assert vm.player_position.y > MAP_HEIGHT / 2