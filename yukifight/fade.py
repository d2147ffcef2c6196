"""Full-screen fade in and fade out."""

from __future__ import annotations

from typing import Protocol, Sequence


class _Filler(Protocol):
    def fill(self, color: Sequence[int], alpha: float) -> None: ...


class Fade:
    """Alpha ramp over a number of frames, drawn as a coloured overlay."""

    def __init__(self) -> None:
        self.color: tuple[int, int, int] = (0, 0, 0)
        self.alpha = 0.0
        self.step = 0.0
        self.fade_out = False
        self._fading = False

    def start(self, fade_out: bool, frames: int, color: Sequence[int]) -> None:
        """Begin fading out (to the colour) or in (from it) over ``frames``."""
        if frames <= 0:
            raise ValueError("fade length must be a positive number of frames")
        self.fade_out = fade_out
        self.color = (int(color[0]), int(color[1]), int(color[2]))
        self._fading = True
        if fade_out:
            self.alpha = 0.0
            self.step = 1.0 / frames
        else:
            self.alpha = 1.0
            self.step = -1.0 / frames

    def update(self) -> None:
        """Advance one frame."""
        if not self._fading:
            return
        self.alpha += self.step
        if self.fade_out:
            if self.alpha >= 1.0:
                self.alpha = 1.0
                self._fading = False
        elif self.alpha <= 0.0:
            self.alpha = 0.0
            self._fading = False

    def is_fading(self) -> bool:
        """True while the ramp is still running."""
        return self._fading

    def draw(self, renderer: _Filler) -> None:
        """Cover the screen with the fade colour at the current alpha."""
        if self.alpha == 0.0:
            return
        renderer.fill(self.color, self.alpha)