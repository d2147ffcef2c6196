"""The boss snowman: search, chase, shoot and return."""

from __future__ import annotations

import enum
import math
import random
from typing import Any, Protocol

from yukifight.explosion import ExplosionPool
from yukifight.geometry import Circle, Vec2
from yukifight.lasers import LaserPool
from yukifight.projectiles import ProjectilePool
from yukifight.tables import anim_frame
from yukifight.texture import TextureIndex

SCREEN_WIDTH = 1024
SCREEN_HEIGHT = 576
BOSS_WIDTH = 32
HIT_RADIUS = BOSS_WIDTH * 0.8
ANIME_PATTERN_MAX = 3
ANIME_PATTERN_SKIPFRAME = 8
SEARCH_RADIUS = 200.0
SEARCH_ANGLE = 0.85
CHASE_SPEED = 3.0
START_HITPOINT = 10000
DRAW_SCALE = 8.0

SEARCH_TURN_FRAMES = 60
FIND_FRAMES = 20
CHASE_FRAMES = 120
SHOT_FRAMES = 90
LASER_FRAMES = 90
COOLDOWN_FRAMES = 30
SHOT_SPREAD_STEPS = 20

FACE_DOWN = 0
FACE_LEFT = 1
FACE_RIGHT = 2
FACE_UP = 3

_FACING_VECTORS = {
    FACE_DOWN: Vec2(0.0, 1.0),
    FACE_LEFT: Vec2(-1.0, 0.0),
    FACE_RIGHT: Vec2(1.0, 0.0),
    FACE_UP: Vec2(0.0, -1.0),
}


class _Target(Protocol):
    collision: Circle


class BossState(enum.Enum):
    INIT = enum.auto()
    SEARCH = enum.auto()
    FIND = enum.auto()
    CHASE = enum.auto()
    SHOT = enum.auto()
    LASER = enum.auto()
    COOLDOWN = enum.auto()
    RETURN = enum.auto()
    DEAD = enum.auto()


def facing_from_direction(direction: Vec2) -> int:
    """Facing for a movement direction; a near-zero direction faces down."""
    if direction.length() <= 0.01:
        return FACE_DOWN
    if abs(direction.x) > abs(direction.y):
        return FACE_LEFT if direction.x < 0.0 else FACE_RIGHT
    return FACE_UP if direction.y < 0.0 else FACE_DOWN


class Boss:
    """A boss that looks around, charges at the target and fires at it."""

    def __init__(
        self,
        target: _Target,
        bullets: ProjectilePool,
        lasers: LaserPool,
        explosions: ExplosionPool,
        rng: random.Random | None = None,
    ) -> None:
        self.target = target
        self.bullets = bullets
        self.lasers = lasers
        self.explosions = explosions
        self.rng = rng or random.Random()
        self.enabled = False
        self.pos = Vec2()
        self.rot = 0.0
        self.color = 0
        self.muki = FACE_DOWN
        self.anime_pattern = 0
        self.anime_frame = 0
        self.collision = Circle()
        self.frame = 0
        self.state = BossState.SEARCH
        self.dir_shot = Vec2()
        self.pos_return = Vec2()
        self.hitpoint = START_HITPOINT

    def _target_pos(self) -> Vec2:
        return Vec2(self.target.collision.cx, self.target.collision.cy)

    def spawn(self) -> None:
        """Appear at a random place on screen, facing a random way, and start searching."""
        self.pos = Vec2(self.rng.random() * SCREEN_WIDTH, self.rng.random() * SCREEN_HEIGHT)
        self.rot = 0.0
        self.color = 1
        self.muki = self.rng.randrange(4)
        self.enabled = True
        self.collision = Circle(self.pos.x, self.pos.y, HIT_RADIUS)
        self.frame = 0
        self.state = BossState.SEARCH

    def update(self) -> None:
        """Animate and run one frame of the current state."""
        self.collision.cx = self.pos.x
        self.collision.cy = self.pos.y

        self.anime_frame += 1
        if self.anime_frame > ANIME_PATTERN_SKIPFRAME:
            self.anime_pattern += 1
            if self.anime_pattern >= ANIME_PATTERN_MAX:
                self.anime_pattern = 0
            self.anime_frame = 0

        handler = {
            BossState.INIT: self.spawn,
            BossState.SEARCH: self._search,
            BossState.FIND: self._find,
            BossState.CHASE: self._chase,
            BossState.SHOT: self._shot,
            BossState.LASER: self._laser,
            BossState.COOLDOWN: self._cooldown,
            BossState.RETURN: self._return,
        }.get(self.state)
        if handler is not None:
            handler()

    def _search(self) -> None:
        self.frame += 1
        facing = _FACING_VECTORS.get(self.muki, Vec2())
        target = self._target_pos()
        if (self.pos - target).length() < SEARCH_RADIUS:
            to_target = (target - self.pos).normalized()
            if facing.dot(to_target) > SEARCH_ANGLE:
                self.explosions.create(self.pos.x, self.pos.y)
                self.state = BossState.FIND
                self.frame = 0
                self.pos_return = self.pos
        if self.frame > SEARCH_TURN_FRAMES:
            self.muki = (self.muki + 1) % 4
            self.frame = 0

    def _find(self) -> None:
        self.frame += 1
        if self.frame > FIND_FRAMES:
            self.frame = 0
            self.state = BossState.CHASE

    def _chase(self) -> None:
        self.frame += 1
        step = (self._target_pos() - self.pos).normalized() * CHASE_SPEED
        self.pos = self.pos + step
        self.muki = facing_from_direction(step)
        if self.frame > CHASE_FRAMES:
            self.frame = 0
            self.dir_shot = step
            self.state = BossState.SHOT if self.rng.randrange(2) else BossState.LASER

    def _shot(self) -> None:
        self.frame += 1
        angle = (math.pi * 2 / SHOT_SPREAD_STEPS) * self.frame
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        shot_dir = Vec2(
            self.dir_shot.x * cos_a - self.dir_shot.y * sin_a,
            self.dir_shot.x * sin_a + self.dir_shot.y * cos_a,
        )
        self.bullets.create(self.pos.x, self.pos.y, shot_dir)
        if self.frame > SHOT_FRAMES:
            self.frame = 0
            self.state = BossState.COOLDOWN

    def _laser(self) -> None:
        if self.frame == 0:
            self.lasers.create(self.pos.x, self.pos.y, self.dir_shot)
        self.frame += 1
        if self.frame > LASER_FRAMES:
            self.frame = 0
            self.state = BossState.COOLDOWN

    def _cooldown(self) -> None:
        self.frame += 1
        if self.frame > COOLDOWN_FRAMES:
            self.frame = 0
            self.state = BossState.RETURN

    def _return(self) -> None:
        self.frame += 1
        offset = self.pos_return - self.pos
        length = offset.length()
        step = offset.normalized() * CHASE_SPEED
        self.pos = self.pos + step
        self.muki = facing_from_direction(step)
        if length <= CHASE_SPEED:
            self.frame = 0
            self.state = BossState.SEARCH

    def draw(self, renderer: Any) -> None:
        if not self.enabled:
            return
        frame = anim_frame(self.muki, self.anime_pattern)
        renderer.draw(
            TextureIndex.YUKIDARUMA,
            self.pos.x,
            self.pos.y,
            frame.x * 256,
            frame.y * 256,
            32,
            32,
            16,
            16,
            DRAW_SCALE,
            DRAW_SCALE,
            self.rot,
        )

    def destroy(self) -> None:
        """Kill the boss."""
        self.state = BossState.DEAD
        self.enabled = False

    def is_enabled(self) -> bool:
        return self.enabled

    def add_damage(self, damage: int) -> int:
        """Lose hit points and return what is left; it may go below zero."""
        self.hitpoint -= damage
        return self.hitpoint