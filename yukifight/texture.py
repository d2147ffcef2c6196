"""Texture table and loaded images."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path

import pygame


class TextureIndex(enum.IntEnum):
    YUKIDARUMA = 0
    BULLET = enum.auto()
    LASER = enum.auto()
    EXPLOSION = enum.auto()
    NUMBER = enum.auto()
    TILEMAP = enum.auto()
    TITLE = enum.auto()
    RESULT = enum.auto()
    TEN = enum.auto()
    GAMEOVER = enum.auto()
    GAMECLEAR = enum.auto()
    STAGE_START = enum.auto()
    STAGE1 = enum.auto()
    STAGE2 = enum.auto()
    STAGE3 = enum.auto()
    STAGE_END = enum.auto()


@dataclass(frozen=True)
class TextureInfo:
    """File and nominal size of a texture; a size of 0 means the image's own."""

    filename: str
    width: int
    height: int


_KNOWN_FILES = {
    TextureIndex.YUKIDARUMA: TextureInfo("asset/texture/yukidaruma.tga", 256, 256),
    TextureIndex.TILEMAP: TextureInfo("data/TEXTURE/kokosozai.png", 512, 512),
}


def texture_info(index: int) -> TextureInfo:
    """Describe a texture; raises ValueError for an unknown index."""
    index = TextureIndex(index)
    known = _KNOWN_FILES.get(index)
    if known is not None:
        return known
    return TextureInfo(f"asset/texture/{index.name.lower()}.png", 0, 0)


def _lookup(index: int) -> TextureIndex | None:
    try:
        return TextureIndex(index)
    except ValueError:
        return None


class TextureStore:
    """Holds loaded texture surfaces by index."""

    def __init__(self) -> None:
        self._surfaces: dict[TextureIndex, pygame.Surface] = {}

    def load(self, base_dir: str | Path = ".") -> int:
        """Load every texture under ``base_dir``; return how many failed."""
        base = Path(base_dir)
        failed = 0
        for index in TextureIndex:
            path = base / texture_info(index).filename
            try:
                self._surfaces[index] = pygame.image.load(str(path))
            except (pygame.error, OSError):
                failed += 1
        return failed

    def release(self) -> None:
        """Drop every loaded surface."""
        self._surfaces.clear()

    def get(self, index: int) -> pygame.Surface | None:
        """The loaded surface, or None if it is missing or the index is unknown."""
        key = _lookup(index)
        return None if key is None else self._surfaces.get(key)

    def _size(self, index: int, attr: str) -> int:
        key = _lookup(index)
        if key is None:
            return 0
        nominal = getattr(texture_info(key), attr)
        if nominal:
            return nominal
        surface = self._surfaces.get(key)
        if surface is None:
            return 0
        return surface.get_width() if attr == "width" else surface.get_height()

    def width(self, index: int) -> int:
        """Texture width in texture units; 0 for an unknown index."""
        return self._size(index, "width")

    def height(self, index: int) -> int:
        """Texture height in texture units; 0 for an unknown index."""
        return self._size(index, "height")