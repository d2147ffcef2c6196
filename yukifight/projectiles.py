"""Pools of straight-flying projectiles: player bullets, the blade, enemy and boss shots."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from yukifight.geometry import Circle, Vec2
from yukifight.texture import TextureIndex, TextureStore

SCREEN_WIDTH = 1024
PROJECTILE_WIDTH = 32
HIT_RADIUS = PROJECTILE_WIDTH * 0.8

BULLET_MAX = 128
BLADE_MAX = 1
ENEMY_BULLET_MAX = 1400
BOSS_BULLET_MAX = 1400

BLADE_DURABILITY = 10


@dataclass
class Projectile:
    x: float = 0.0
    y: float = 0.0
    move_x: float = 0.0
    move_y: float = 0.0
    rotation: float = 0.0
    collision: Circle = field(default_factory=Circle)
    frame: int = 0
    enabled: bool = False


class ProjectilePool:
    """A fixed number of projectile slots that fly in a straight line for a while."""

    def __init__(
        self,
        capacity: int,
        speed: float,
        visible_frames: int,
        textures: TextureStore | None = None,
    ) -> None:
        if capacity <= 0:
            raise ValueError("a pool needs at least one slot")
        self.projectiles = [Projectile() for _ in range(capacity)]
        self.speed = speed
        self.visible_frames = visible_frames
        self.textures = textures

    def __len__(self) -> int:
        return len(self.projectiles)

    def _slot(self, index: int) -> Projectile:
        if not 0 <= index < len(self.projectiles):
            raise IndexError(f"projectile index out of range: {index}")
        return self.projectiles[index]

    def _texture_width(self) -> int:
        return 0 if self.textures is None else self.textures.width(TextureIndex.BULLET)

    def create(self, x: float, y: float, direction: Vec2) -> None:
        """Fire from (x, y) along ``direction`` using the first free slot, if any."""
        slot = next((p for p in self.projectiles if not p.enabled), None)
        if slot is None:
            return
        unit = Vec2(direction.x, direction.y).normalized()
        slot.x = x
        slot.y = y
        slot.move_x = unit.x
        slot.move_y = unit.y
        slot.rotation = math.atan2(unit.y, unit.x) + math.pi / 2
        slot.collision = Circle(x, y, HIT_RADIUS)
        slot.frame = 0
        slot.enabled = True

    def update(self) -> None:
        """Move every live projectile and retire those off screen or too old."""
        half_width = self._texture_width() * 0.5
        for projectile in self.projectiles:
            if not projectile.enabled:
                continue
            projectile.x += projectile.move_x * self.speed
            projectile.y += projectile.move_y * self.speed
            projectile.collision.cx = projectile.x
            projectile.collision.cy = projectile.y
            if projectile.x - half_width > SCREEN_WIDTH:
                projectile.enabled = False
            projectile.frame += 1
            if projectile.frame > self.visible_frames:
                projectile.enabled = False

    def destroy(self, index: int) -> None:
        """Retire one projectile."""
        self._slot(index).enabled = False

    def is_enabled(self, index: int) -> bool:
        return self._slot(index).enabled

    def collision(self, index: int) -> Circle:
        """The hit circle of one slot."""
        return self._slot(index).collision

    def active(self) -> list[Projectile]:
        return [p for p in self.projectiles if p.enabled]

    def draw(self, renderer: Any) -> None:
        tw = renderer.textures.width(TextureIndex.BULLET)
        th = renderer.textures.height(TextureIndex.BULLET)
        for projectile in self.active():
            renderer.draw(
                TextureIndex.BULLET,
                projectile.x,
                projectile.y,
                0,
                0,
                tw,
                th,
                tw * 0.5,
                th * 0.5,
                1.0,
                1.0,
                projectile.rotation,
            )


class BladePool(ProjectilePool):
    """The player's blade; a hit wears it only once its durability is gone."""

    durability = BLADE_DURABILITY

    def destroy(self, index: int) -> None:
        blade = self._slot(index)
        if self.durability == 0:
            blade.enabled = False


def make_bullets() -> ProjectilePool:
    """Player shots: fast and short-lived."""
    return ProjectilePool(BULLET_MAX, 20.0, 10)


def make_blade() -> BladePool:
    """The single player blade."""
    return BladePool(BLADE_MAX, 5.0, 10)


def make_enemy_bullets() -> ProjectilePool:
    """Slow, long-lived enemy shots."""
    return ProjectilePool(ENEMY_BULLET_MAX, 3.0, 300)


def make_boss_bullets() -> ProjectilePool:
    """Slow, long-lived boss shots."""
    return ProjectilePool(BOSS_BULLET_MAX, 3.0, 300)