"""Lasers: a capsule hit area drawn as a stream of moving segments."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from yukifight.geometry import Capsule, Vec2
from yukifight.texture import TextureIndex

LASER_SEGMENT_MAX = 100
LASER_WIDTH = 32
LASER_SPEED = 32
LASER_VISIBLE_FRAMES = 100
SEGMENT_VISIBLE_FRAMES = 40
LASER_REACH = 1000
ENEMY_LASER_MAX = 10
BOSS_LASER_MAX = 10


@dataclass
class LaserSegment:
    x: float = 0.0
    y: float = 0.0
    move_x: float = 0.0
    move_y: float = 0.0
    rotation: float = 0.0
    frame: int = 0
    enabled: bool = False


@dataclass
class Laser:
    x: float = 0.0
    y: float = 0.0
    move_x: float = 0.0
    move_y: float = 0.0
    rotation: float = 0.0
    collision: Capsule = field(default_factory=Capsule)
    segments: list[LaserSegment] = field(
        default_factory=lambda: [LaserSegment() for _ in range(LASER_SEGMENT_MAX)]
    )
    frame: int = 0
    enabled: bool = False

    def live_segments(self) -> list[LaserSegment]:
        return [s for s in self.segments if s.enabled]


class LaserPool:
    """A fixed number of laser slots."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("a pool needs at least one slot")
        self.lasers = [Laser() for _ in range(capacity)]

    def __len__(self) -> int:
        return len(self.lasers)

    def _slot(self, index: int) -> Laser:
        if not 0 <= index < len(self.lasers):
            raise IndexError(f"laser index out of range: {index}")
        return self.lasers[index]

    def create(self, x: float, y: float, direction: Vec2) -> None:
        """Fire a laser from (x, y) along ``direction`` in the first free slot, if any."""
        laser = next((l for l in self.lasers if not l.enabled), None)
        if laser is None:
            return
        unit = Vec2(direction.x, direction.y).normalized()
        laser.x = x
        laser.y = y
        laser.move_x = unit.x
        laser.move_y = unit.y
        laser.rotation = math.atan2(unit.y, unit.x) + math.pi / 2
        laser.collision = Capsule(
            x, y, unit.x * LASER_REACH, unit.y * LASER_REACH, LASER_WIDTH * 0.8
        )
        laser.frame = 0
        for segment in laser.segments:
            segment.enabled = False
        laser.enabled = True

    def update(self) -> None:
        """Move segments, emit one new segment per laser, and retire old lasers."""
        for laser in self.lasers:
            if not laser.enabled:
                continue
            for segment in laser.live_segments():
                segment.x += segment.move_x * LASER_SPEED
                segment.y += segment.move_y * LASER_SPEED
                segment.frame += 1
                if segment.frame > SEGMENT_VISIBLE_FRAMES:
                    segment.enabled = False

            free = next((s for s in laser.segments if not s.enabled), None)
            if free is not None:
                free.x = laser.x
                free.y = laser.y
                free.move_x = laser.move_x
                free.move_y = laser.move_y
                free.rotation = laser.rotation
                free.frame = 0
                free.enabled = True

            laser.frame += 1
            if laser.frame > LASER_VISIBLE_FRAMES:
                laser.enabled = False

    def destroy(self, index: int) -> None:
        self._slot(index).enabled = False

    def is_enabled(self, index: int) -> bool:
        return self._slot(index).enabled

    def collision(self, index: int) -> Capsule:
        """The hit capsule of one slot."""
        return self._slot(index).collision

    def active(self) -> list[Laser]:
        return [l for l in self.lasers if l.enabled]

    def draw(self, renderer: Any) -> None:
        tw = renderer.textures.width(TextureIndex.BULLET)
        th = renderer.textures.height(TextureIndex.BULLET)
        for laser in self.active():
            for segment in laser.live_segments():
                renderer.draw(
                    TextureIndex.LASER,
                    segment.x,
                    segment.y,
                    0,
                    0,
                    tw,
                    th,
                    tw * 0.5,
                    th * 0.5,
                    1.0,
                    1.0,
                    segment.rotation,
                )


def make_enemy_lasers() -> LaserPool:
    return LaserPool(ENEMY_LASER_MAX)


def make_boss_lasers() -> LaserPool:
    return LaserPool(BOSS_LASER_MAX)