"""Textured sprite drawing onto a pygame surface."""

from __future__ import annotations

import math
from typing import Sequence

import pygame

from yukifight.texture import TextureStore

_WHITE = (255, 255, 255, 255)


def quad_corners(
    dx: float,
    dy: float,
    tw: float,
    th: float,
    cx: float,
    cy: float,
    sx: float,
    sy: float,
    rotation: float,
) -> list[tuple[float, float]]:
    """Screen corners of a sprite quad: top-left, top-right, bottom-left, bottom-right.

    The quad is ``tw`` by ``th`` with its pivot at (``cx``, ``cy``); it is scaled,
    rotated about the pivot and placed with the pivot at (``dx``, ``dy``).
    """
    cos_r = math.cos(rotation)
    sin_r = math.sin(rotation)
    offsets = [(-cx, -cy), (tw - cx, -cy), (-cx, th - cy), (tw - cx, th - cy)]
    corners = []
    for ox, oy in offsets:
        x = ox * sx
        y = oy * sy
        corners.append((x * cos_r - y * sin_r + dx, x * sin_r + y * cos_r + dy))
    return corners


def _rgba(color: Sequence[int]) -> tuple[int, int, int, int]:
    values = tuple(int(c) for c in color)
    if len(values) == 3:
        return (*values, 255)
    return values[:4]  # type: ignore[return-value]


class SpriteRenderer:
    """Draws texture regions onto a target surface."""

    def __init__(self, target: pygame.Surface, textures: TextureStore) -> None:
        self.target = target
        self.textures = textures
        self.color = _WHITE

    def set_color(self, color: Sequence[int]) -> None:
        """Set the colour that multiplies every sprite drawn afterwards."""
        self.color = _rgba(color)

    def draw(
        self,
        index: int,
        dx: float,
        dy: float,
        tx: float | None = None,
        ty: float | None = None,
        tw: float | None = None,
        th: float | None = None,
        cx: float | None = None,
        cy: float | None = None,
        sx: float = 1.0,
        sy: float = 1.0,
        rotation: float = 0.0,
    ) -> None:
        """Draw a texture, or a region of it, optionally pivoted, scaled and rotated.

        Without a region the whole texture is drawn at its nominal size with its
        top-left at (dx, dy). Without a pivot the region is drawn unscaled with
        its top-left at (dx, dy).
        """
        image = self.textures.get(index)
        width = self.textures.width(index)
        height = self.textures.height(index)
        if image is None or width <= 0 or height <= 0:
            return
        if tx is None or ty is None or tw is None or th is None:
            tx, ty, tw, th = 0, 0, width, height
        if cx is None or cy is None:
            cx, cy = 0.0, 0.0

        kx = image.get_width() / width
        ky = image.get_height() / height
        region = pygame.Rect(
            round(tx * kx),
            round(ty * ky),
            max(1, round(tw * kx)),
            max(1, round(th * ky)),
        )
        region = region.clip(image.get_rect())
        out_w = round(abs(tw * sx))
        out_h = round(abs(th * sy))
        if region.width == 0 or region.height == 0 or out_w == 0 or out_h == 0:
            return

        piece = pygame.transform.scale(image.subsurface(region), (out_w, out_h))
        if sx < 0 or sy < 0:
            piece = pygame.transform.flip(piece, sx < 0, sy < 0)
        if self.color != _WHITE:
            tinted = pygame.Surface(piece.get_size(), pygame.SRCALPHA)
            tinted.blit(piece, (0, 0))
            tinted.fill(self.color, special_flags=pygame.BLEND_RGBA_MULT)
            piece = tinted
        if rotation:
            piece = pygame.transform.rotate(piece, -math.degrees(rotation))

        corners = quad_corners(dx, dy, tw, th, cx, cy, sx, sy, rotation)
        left = min(x for x, _ in corners)
        top = min(y for _, y in corners)
        self.target.blit(piece, (round(left), round(top)))

    def fill(self, color: Sequence[int], alpha: float) -> None:
        """Blend a colour over the whole target at the given alpha (0 to 1)."""
        level = round(min(max(alpha, 0.0), 1.0) * 255)
        overlay = pygame.Surface(self.target.get_size(), pygame.SRCALPHA)
        r, g, b = (int(c) for c in color[:3])
        overlay.fill((r, g, b, level))
        self.target.blit(overlay, (0, 0))