"""Fixed-width score display made of digit sprites."""

from __future__ import annotations

from typing import Any

from yukifight.texture import TextureIndex

NUMBER_WIDTH = 32
NUMBER_HEIGHT = 32


def score_digits(score: int, fig: int) -> list[int]:
    """Digits of ``score`` in ``fig`` places, most significant first.

    Scores that do not fit are capped at all nines. Digits of a negative score
    come out negative, as truncating division gives them.
    """
    cap = 10**fig if fig > 0 else 1
    if score >= cap:
        score = cap - 1
    sign = -1 if score < 0 else 1
    magnitude = abs(score)
    digits = []
    for _ in range(max(fig, 0)):
        digits.append(sign * (magnitude % 10))
        magnitude //= 10
    digits.reverse()
    return digits


def digit_positions(x: float, y: float, score: int, fig: int) -> list[tuple[float, float, int]]:
    """Screen position and value of each drawable digit, left to right."""
    return [
        (x + NUMBER_WIDTH * place, y, digit)
        for place, digit in enumerate(score_digits(score, fig))
        if 0 <= digit <= 9
    ]


def draw_number(renderer: Any, x: float, y: float, n: int) -> None:
    """Draw one digit; anything outside 0 to 9 is skipped."""
    if not 0 <= n <= 9:
        return
    renderer.draw(TextureIndex.NUMBER, x, y, NUMBER_WIDTH * n, 0, NUMBER_WIDTH, NUMBER_HEIGHT)


def draw_score(renderer: Any, x: float, y: float, score: int, fig: int) -> None:
    """Draw a score as ``fig`` digits starting at (x, y)."""
    for px, py, digit in digit_positions(x, y, score, fig):
        draw_number(renderer, px, py, digit)