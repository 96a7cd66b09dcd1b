"""Bullets fired by the player."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List

from maodie.core import MAP_HEIGHT, MAP_WIDTH, Vec2


@dataclass
class BulletData:
    id: int
    position: Vec2
    velocity: Vec2
    is_active: bool = True


class BulletManager:
    """Owns the live bullets and moves them each frame."""

    def __init__(self) -> None:
        self._bullets: List[BulletData] = []
        self._next_id = 0

    def create_bullet(self, position: Vec2, direction: Vec2, speed: float) -> BulletData:
        bullet = BulletData(
            id=self._next_id,
            position=position,
            velocity=direction.normalized() * speed,
        )
        self._next_id += 1
        self._bullets.append(bullet)
        return replace(bullet)

    def update_bullets(self, delta_time: float) -> None:
        for bullet in self._bullets:
            if not bullet.is_active:
                continue
            bullet.position = bullet.position + bullet.velocity * delta_time
            x, y = bullet.position
            if x < 0 or x > MAP_WIDTH or y < 0 or y > MAP_HEIGHT:
                bullet.is_active = False
        self.remove_bullets()

    def remove_bullet(self, bullet_id: int) -> None:
        """Mark the bullet with this id inactive."""
        for bullet in self._bullets:
            if bullet.id == bullet_id:
                bullet.is_active = False
                return

    def remove_bullets(self) -> None:
        """Drop every inactive bullet."""
        self._bullets = [b for b in self._bullets if b.is_active]

    def clear_all_bullets(self) -> None:
        self._bullets.clear()

    def active_bullets(self) -> List[BulletData]:
        """Copies of the bullets still in flight."""
        return [replace(b) for b in self._bullets if b.is_active]

    def count(self) -> int:
        """Number of stored bullets, active or not."""
        return len(self._bullets)