"""The player's snowman: movement, shooting and the blade."""

from __future__ import annotations

import math
import random
from typing import Any

import pygame

from yukifight.controls import Button, GamePad, Keyboard
from yukifight.geometry import Circle, Vec2
from yukifight.projectiles import ProjectilePool
from yukifight.tables import anim_frame
from yukifight.texture import TextureIndex

SCREEN_WIDTH = 1024
SCREEN_HEIGHT = 576
PLAYER_WIDTH = 32
HIT_RADIUS = PLAYER_WIDTH * 0.8
ANIME_PATTERN_MAX = 3
ANIME_PATTERN_SKIPFRAME = 8
START_HITPOINT = 10000
DASH_FACTOR = 10.0
DASH_SPIN = 0.1

KEY_UP = pygame.K_UP
KEY_DOWN = pygame.K_DOWN
KEY_LEFT = pygame.K_LEFT
KEY_RIGHT = pygame.K_RIGHT
KEY_DASH = pygame.K_a
KEY_SHOOT = pygame.K_z
KEY_BLADE = pygame.K_x

# key, pad bit, step, facing; checked in this order so the last one held sets the facing
_MOVES = (
    (KEY_UP, Button.UP, 0.0, -1.0, 3),
    (KEY_DOWN, Button.DOWN, 0.0, 1.0, 0),
    (KEY_LEFT, Button.LEFT, -1.0, 0.0, 1),
    (KEY_RIGHT, Button.RIGHT, 1.0, 0.0, 2),
)

_FACING = {0: Vec2(0.0, 1.0), 1: Vec2(-1.0, 0.0), 2: Vec2(1.0, 0.0), 3: Vec2(0.0, -1.0)}


class Player:
    """The player character."""

    def __init__(
        self,
        bullets: ProjectilePool,
        blade: ProjectilePool,
        rng: random.Random | None = None,
    ) -> None:
        rng = rng or random.Random()
        self.bullets = bullets
        self.blade = blade
        self.pos = Vec2(SCREEN_WIDTH / 2, SCREEN_HEIGHT / 2)
        self.color = 0
        self.muki = 0
        self.anime_pattern = 0
        self.anime_frame = 0
        self.collision = Circle(self.pos.x, self.pos.y, HIT_RADIUS)
        self.rotate = float(rng.randrange(361))
        self.hitpoint = START_HITPOINT

    def _aim(self, dx: float, dy: float) -> Vec2:
        if math.hypot(dx, dy) < 0.01:
            return _FACING.get(self.muki, Vec2(dx, dy))
        return Vec2(dx, dy)

    def update(self, keyboard: Keyboard, gamepad: GamePad) -> None:
        """Move, fire and animate for one frame."""
        dx = dy = 0.0
        for key, button, step_x, step_y, muki in _MOVES:
            held = keyboard.is_press(key)
            pad_held = gamepad.is_press(0, button)
            if held or pad_held:
                dx += step_x
                dy += step_y
                self.muki = muki
            if (held and keyboard.is_press(KEY_DASH)) or (
                pad_held and gamepad.is_press(0, Button.Y)
            ):
                dx += step_x * DASH_FACTOR
                dy += step_y * DASH_FACTOR
                self.muki = muki
                self.rotate += DASH_SPIN

        if keyboard.is_trigger(KEY_SHOOT) or (
            gamepad.is_press(0, Button.Y) and gamepad.is_trigger(0, Button.A)
        ):
            self.bullets.create(self.pos.x, self.pos.y, self._aim(dx, dy))
            dx = dy = 0.0

        if keyboard.is_trigger(KEY_BLADE) or (
            gamepad.is_press(0, Button.Y) and gamepad.is_trigger(0, Button.B)
        ):
            self.blade.create(self.pos.x, self.pos.y, self._aim(dx, dy))
            dx = dy = 0.0

        self.pos = self.pos + Vec2(dx, dy)
        self.collision.cx = self.pos.x
        self.collision.cy = self.pos.y

        self.anime_frame += 1
        if self.anime_frame > ANIME_PATTERN_SKIPFRAME:
            self.anime_pattern += 1
            if self.anime_pattern >= ANIME_PATTERN_MAX:
                self.anime_pattern = 0
            self.anime_frame = 0

    def draw(self, renderer: Any) -> None:
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
            4.0,
            6.0,
            self.rotate,
        )

    def add_damage(self, damage: int) -> None:
        """Lose hit points, never going below zero."""
        self.hitpoint = max(self.hitpoint - damage, 0)