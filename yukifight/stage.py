"""Two background fields that scroll down one after the other to the goal."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any

from yukifight.texture import TextureIndex

BGNUM = 5
UI_SIZE = 270
MAX_COUNT = 3
FIELD_HEIGHT = 1080
SCROLL_SPEED = 5.0
START_DELAY = 100
GOAL_TYPE = 4

_TEXTURES = {
    0: TextureIndex.STAGE_START,
    1: TextureIndex.STAGE1,
    2: TextureIndex.STAGE2,
    3: TextureIndex.STAGE3,
    GOAL_TYPE: TextureIndex.STAGE_END,
}


@dataclass
class Field:
    """One scrolling background: 0 start, 1 to 3 ordinary, 4 goal."""

    x: float = 0.0
    y: float = 0.0
    speed: float = SCROLL_SPEED
    type: int = 0
    moving: bool = True
    changing: bool = False


class Stage:
    """Alternates two fields; after enough of them the goal field stops the scroll."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()
        self.fields = [
            Field(y=-UI_SIZE, type=0, changing=False),
            Field(
                y=-FIELD_HEIGHT - UI_SIZE,
                type=self.rng.randrange(BGNUM) - 2 + 1,
                changing=True,
            ),
        ]
        self.field_count = 0
        self.stop_scroll = True
        self.count = 0

    def update(self) -> None:
        """Count frames, pick new backgrounds for recycled fields and set the goal."""
        self.count += 1
        if self.count == START_DELAY:
            self.stop_scroll = False
        for field in self.fields:
            if field.changing:
                field.type = self.rng.randrange(BGNUM - 2) + 1
                field.changing = False
                self.field_count += 1
        if self.field_count == MAX_COUNT:
            self.fields[1].type = GOAL_TYPE

    def scroll(self) -> list[tuple[TextureIndex, float]]:
        """Move the fields one frame; return each texture to show and its y position."""
        first, second = self.fields
        shown = []
        for index, (field, other) in enumerate(((first, second), (second, first))):
            if not field.moving:
                continue
            if not self.stop_scroll:
                field.y += field.speed
            texture = _TEXTURES.get(field.type)
            if texture is not None:
                shown.append((texture, field.y))
            if field.y > -UI_SIZE:
                other.moving = True
            if field.y > FIELD_HEIGHT - UI_SIZE:
                if index == 0:
                    field.y = -FIELD_HEIGHT + field.speed - UI_SIZE
                else:
                    field.y = -FIELD_HEIGHT
                field.changing = True
                field.moving = False
            if field.type == GOAL_TYPE and field.y > 0:
                field.y = 0.0
                self.stop_scroll = True
        return shown

    def draw(self, renderer: Any) -> None:
        """Scroll one frame and draw the visible fields."""
        for texture, y in self.scroll():
            renderer.draw(texture, 0, y)

    def is_goal(self) -> bool:
        """True while the scroll is stopped (before the start and at the goal)."""
        return self.stop_scroll