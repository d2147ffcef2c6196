"""Ground enemies that creep toward the player."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Protocol

from yukifight.geometry import Circle, Vec2
from yukifight.tables import anim_frame
from yukifight.texture import TextureIndex

ENEMY_COUNT = 3
ENEMY_WIDTH = 32
HIT_RADIUS = ENEMY_WIDTH * 0.8
ANIME_PATTERN_MAX = 3
ANIME_PATTERN_SKIPFRAME = 8
CHASE_SPEED = 0.4
SCROLL_FACTOR = 10
SPAWN_POSITIONS = (Vec2(1000.0, 400.0), Vec2(1500.0, 400.0), Vec2(2000.0, 400.0))


class _Target(Protocol):
    collision: Circle


class _State(enum.Enum):
    INIT = enum.auto()
    CHASE = enum.auto()
    DEAD = enum.auto()


@dataclass
class Enemy:
    enabled: bool = False
    pos: Vec2 = field(default_factory=Vec2)
    rot: float = 0.0
    muki: int = 0
    anime_pattern: int = 0
    anime_frame: int = 0
    collision: Circle = field(default_factory=Circle)
    frame: int = 0
    state: _State = _State.INIT


class EnemyGroup:
    """The three enemies of a stage, chasing a target horizontally."""

    def __init__(self, target: _Target) -> None:
        self.target = target
        self.enemies = [Enemy() for _ in range(ENEMY_COUNT)]
        for index in range(ENEMY_COUNT):
            self._spawn(index)
            self.enemies[index].state = _State.CHASE

    def _slot(self, index: int) -> Enemy:
        if not 0 <= index < len(self.enemies):
            raise IndexError(f"enemy index out of range: {index}")
        return self.enemies[index]

    def _spawn(self, index: int) -> None:
        enemy = self.enemies[index]
        enemy.rot = 0.0
        enemy.muki = 0
        enemy.enabled = True
        enemy.frame = 0
        for other, start in zip(self.enemies, SPAWN_POSITIONS):
            other.pos = start
        enemy.collision = Circle(enemy.pos.x, enemy.pos.y, HIT_RADIUS)

    def _chase(self, enemy: Enemy) -> None:
        enemy.frame += 1
        target = Vec2(self.target.collision.cx, self.target.collision.cy)
        step = (target - enemy.pos).normalized() * CHASE_SPEED
        enemy.pos = Vec2(enemy.pos.x + step.x, enemy.pos.y)

    def update(self, scroll_dir: float) -> None:
        """Animate every enemy, follow the scrolling and chase the target."""
        for index, enemy in enumerate(self.enemies):
            enemy.collision.cx = enemy.pos.x
            enemy.collision.cy = enemy.pos.y

            enemy.anime_frame += 1
            if enemy.anime_frame > ANIME_PATTERN_SKIPFRAME:
                enemy.anime_pattern += 1
                if enemy.anime_pattern >= ANIME_PATTERN_MAX:
                    enemy.anime_pattern = 0
                enemy.anime_frame = 0
                enemy.pos = Vec2(enemy.pos.x - scroll_dir * SCROLL_FACTOR, enemy.pos.y)

            if enemy.state is _State.INIT:
                self._spawn(index)
            elif enemy.state is _State.CHASE:
                self._chase(enemy)

    def draw(self, renderer: Any) -> None:
        for enemy in self.enemies:
            if not enemy.enabled:
                continue
            frame = anim_frame(enemy.muki, enemy.anime_pattern)
            renderer.draw(
                TextureIndex.YUKIDARUMA,
                enemy.pos.x,
                enemy.pos.y,
                frame.x * 256,
                frame.y * 256,
                32,
                32,
                16,
                16,
                2.0,
                2.0,
                enemy.rot,
            )

    def destroy(self, index: int) -> None:
        enemy = self._slot(index)
        enemy.state = _State.DEAD
        enemy.enabled = False

    def is_enabled(self, index: int) -> bool:
        return self._slot(index).enabled

    def collision(self, index: int) -> Circle:
        """The hit circle of one enemy."""
        return self._slot(index).collision