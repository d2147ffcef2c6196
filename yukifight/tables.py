"""Animation frame table and the walkable tile map."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from yukifight.geometry import Vec2
from yukifight.texture import TextureIndex

_ANIME_TABLE = (
    (Vec2(0.0, 0.0), Vec2(0.125, 0.0), Vec2(0.25, 0.0)),  # facing down
    (Vec2(0.0, 0.125), Vec2(0.125, 0.125), Vec2(0.25, 0.125)),  # facing left
    (Vec2(0.0, 0.25), Vec2(0.125, 0.25), Vec2(0.25, 0.25)),  # facing right
    (Vec2(0.0, 0.375), Vec2(0.125, 0.375), Vec2(0.25, 0.375)),  # facing up
)


def anim_frame(muki: int, anim: int) -> Vec2:
    """Texture coordinate (0 to 1) of a facing's animation frame."""
    if not 0 <= muki < len(_ANIME_TABLE):
        raise IndexError(f"facing out of range: {muki}")
    row = _ANIME_TABLE[muki]
    if not 0 <= anim < len(row):
        raise IndexError(f"animation pattern out of range: {anim}")
    return row[anim]


@dataclass(frozen=True)
class TileData:
    u: float
    v: float
    walkable: bool


TILE_TABLE = (
    TileData(0.375, 0.3125, True),  # ground
    TileData(0.0, 0.3125, False),  # wall
    TileData(0.0625, 0.3125, True),  # ladder
    TileData(0.125, 0.3125, False),  # chest
    TileData(0.3125, 0.3125, False),  # open chest
)

TILEMAP_TEXTURE_SIZE = 512
TILEMAP_DIVIDE = 16
TILE_SIZE = TILEMAP_TEXTURE_SIZE // TILEMAP_DIVIDE
MAP_WIDTH = 32
MAP_HEIGHT = 18

GROUND = 0
WALL = 1


def _initial_map() -> list[list[int]]:
    edge = [WALL] * MAP_WIDTH
    inner = [WALL] + [GROUND] * (MAP_WIDTH - 2) + [WALL]
    return [list(edge)] + [list(inner) for _ in range(MAP_HEIGHT - 2)] + [list(edge)]


class TileMap:
    """A walled room of tiles."""

    def __init__(self) -> None:
        self.grid = _initial_map()

    def _cell(self, tile_x: int, tile_y: int) -> int:
        if not (0 <= tile_x < MAP_WIDTH and 0 <= tile_y < MAP_HEIGHT):
            raise IndexError(f"tile ({tile_x}, {tile_y}) is outside the map")
        return self.grid[tile_y][tile_x]

    def tile_at(self, x: float, y: float) -> TileData:
        """Tile under the screen position (x, y)."""
        return TILE_TABLE[self._cell(int(x / TILE_SIZE), int(y / TILE_SIZE))]

    def set_tile_type(self, x: int, y: int, tile_type: int) -> None:
        """Change a tile; unknown tile types are ignored."""
        if not 0 <= tile_type < len(TILE_TABLE):
            return
        self._cell(x, y)
        self.grid[y][x] = tile_type

    def draw(self, renderer: Any) -> None:
        for row, cells in enumerate(self.grid):
            for column, cell in enumerate(cells):
                tile = TILE_TABLE[cell]
                renderer.draw(
                    TextureIndex.TILEMAP,
                    column * TILE_SIZE,
                    row * TILE_SIZE,
                    tile.u * TILEMAP_TEXTURE_SIZE,
                    tile.v * TILEMAP_TEXTURE_SIZE,
                    TILE_SIZE,
                    TILE_SIZE,
                )