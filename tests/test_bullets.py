import math

from maodie.bullets import BulletManager
from maodie.core import MAP_WIDTH, Vec2


def test_ids_increase_from_zero():
    manager = BulletManager()
    for _ in range(3):
        manager.create_bullet(Vec2(10, 10), Vec2(1, 0), 300)
    assert [b.id for b in manager.active_bullets()] == [0, 1, 2]


def test_velocity_has_requested_speed_along_direction():
    manager = BulletManager()
    manager.create_bullet(Vec2(50, 50), Vec2(3, 4), 300)
    (bullet,) = manager.active_bullets()
    assert math.isclose(bullet.velocity.length(), 300)
    assert math.isclose(bullet.velocity.x * 4, bullet.velocity.y * 3)


def test_update_moves_by_velocity():
    manager = BulletManager()
    manager.create_bullet(Vec2(100, 100), Vec2(0, 1), 50)
    before = manager.active_bullets()[0]
    manager.update_bullets(0.1)
    after = manager.active_bullets()[0]
    expected = before.position + before.velocity * 0.1
    assert math.isclose(after.position.x, expected.x)
    assert math.isclose(after.position.y, expected.y)


def test_bullet_leaving_map_is_removed():
    manager = BulletManager()
    manager.create_bullet(Vec2(MAP_WIDTH - 1, 10), Vec2(1, 0), 300)
    manager.update_bullets(0.1)
    assert manager.count() == 0
    assert manager.active_bullets() == []


def test_bullet_on_edge_stays():
    manager = BulletManager()
    manager.create_bullet(Vec2(MAP_WIDTH, 0), Vec2(0, 0), 300)
    manager.update_bullets(1.0)
    assert manager.count() == 1


def test_remove_bullet_marks_inactive_then_purges():
    manager = BulletManager()
    first = manager.create_bullet(Vec2(10, 10), Vec2(1, 0), 1)
    manager.create_bullet(Vec2(20, 20), Vec2(1, 0), 1)
    manager.remove_bullet(first.id)
    assert [b.id for b in manager.active_bullets()] == [1]
    assert manager.count() == 2
    manager.remove_bullets()
    assert manager.count() == 1


def test_remove_unknown_bullet_changes_nothing():
    manager = BulletManager()
    manager.create_bullet(Vec2(10, 10), Vec2(1, 0), 1)
    manager.remove_bullet(99)
    assert len(manager.active_bullets()) == 1


def test_active_bullets_are_copies():
    manager = BulletManager()
    manager.create_bullet(Vec2(10, 10), Vec2(1, 0), 1)
    manager.active_bullets()[0].is_active = False
    assert len(manager.active_bullets()) == 1


def test_clear_all():
    manager = BulletManager()
    manager.create_bullet(Vec2(10, 10), Vec2(1, 0), 1)
    manager.create_bullet(Vec2(10, 10), Vec2(1, 0), 1)
    manager.clear_all_bullets()
    assert manager.count() == 0