"""Short-lived explosion animations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from yukifight.texture import TextureIndex

EXPLOSION_MAX = 128
FRAME_SIZE = 32
PATTERN_FRAMES = 1
PATTERN_COUNT = 16
PATTERN_COLUMNS = 4
DRAW_SCALE = 3.0


@dataclass
class Explosion:
    x: float = 0.0
    y: float = 0.0
    enabled: bool = False
    create_frame: int = 0
    pattern: int = 0


class ExplosionPool:
    """Fixed pool of explosions that play through a 4x4 sprite sheet."""

    def __init__(self, capacity: int = EXPLOSION_MAX) -> None:
        self.explosions = [Explosion() for _ in range(capacity)]
        self.frame_count = 0

    def create(self, x: float, y: float) -> None:
        """Start an explosion in the first free slot; ignored if none is free."""
        slot = next((e for e in self.explosions if not e.enabled), None)
        if slot is None:
            return
        slot.x = x
        slot.y = y
        slot.create_frame = self.frame_count
        slot.pattern = 0
        slot.enabled = True

    def update(self) -> None:
        """Advance every explosion's animation by one frame."""
        for explosion in self.explosions:
            if not explosion.enabled:
                continue
            age = self.frame_count - explosion.create_frame
            explosion.pattern = age // PATTERN_FRAMES
            if explosion.pattern >= PATTERN_COUNT:
                explosion.enabled = False
        self.frame_count += 1

    def active(self) -> list[Explosion]:
        """The explosions currently playing."""
        return [e for e in self.explosions if e.enabled]

    def draw(self, renderer: Any) -> None:
        for explosion in self.active():
            tx = FRAME_SIZE * (explosion.pattern % PATTERN_COLUMNS)
            ty = FRAME_SIZE * (explosion.pattern // PATTERN_COLUMNS)
            renderer.draw(
                TextureIndex.EXPLOSION,
                explosion.x,
                explosion.y,
                tx,
                ty,
                FRAME_SIZE,
                FRAME_SIZE,
                FRAME_SIZE // 2,
                FRAME_SIZE // 2,
                DRAW_SCALE,
                DRAW_SCALE,
                0.0,
            )