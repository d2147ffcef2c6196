"""Keyboard and game pad state with press, trigger and release queries."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, Sequence

GAMEPAD_MAX = 4
AXIS_DEADZONE = 0.25


class Button(enum.IntFlag):
    """Game pad state bits."""

    UP = 0x00000001
    DOWN = 0x00000002
    LEFT = 0x00000004
    RIGHT = 0x00000008
    A = 0x00000010
    B = 0x00000020
    C = 0x00000040
    X = 0x00000080
    Y = 0x00000100
    Z = 0x00000200
    L = 0x00000400
    R = 0x00000800
    START = 0x00001000
    M = 0x00002000


_FACE_BUTTONS = (
    Button.A,
    Button.B,
    Button.C,
    Button.X,
    Button.Y,
    Button.Z,
    Button.L,
    Button.R,
    Button.START,
    Button.M,
)


@dataclass(frozen=True)
class PadReading:
    """One poll of a pad: stick axes from -1 to 1 and the pressed buttons in order."""

    x: float = 0.0
    y: float = 0.0
    buttons: tuple[bool, ...] = ()


def pad_bits(reading: PadReading) -> Button:
    """Turn a pad reading into state bits; small stick movements are ignored."""
    bits = Button(0)
    x = reading.x if abs(reading.x) > AXIS_DEADZONE else 0.0
    y = reading.y if abs(reading.y) > AXIS_DEADZONE else 0.0
    if y < 0:
        bits |= Button.UP
    if y > 0:
        bits |= Button.DOWN
    if x < 0:
        bits |= Button.LEFT
    if x > 0:
        bits |= Button.RIGHT
    for flag, pressed in zip(_FACE_BUTTONS, reading.buttons):
        if pressed:
            bits |= flag
    return bits


class Keyboard:
    """Tracks which keys are held, newly pressed and newly released."""

    def __init__(self) -> None:
        self._held: frozenset[int] = frozenset()
        self._triggered: frozenset[int] = frozenset()
        self._released: frozenset[int] = frozenset()

    def update(self, pressed: Iterable[int]) -> None:
        """Record the keys held down this frame."""
        current = frozenset(pressed)
        self._triggered = current - self._held
        self._released = self._held - current
        self._held = current

    def is_press(self, key: int) -> bool:
        return key in self._held

    def is_trigger(self, key: int) -> bool:
        """True only on the frame the key went down."""
        return key in self._triggered

    def is_release(self, key: int) -> bool:
        """True only on the frame the key came up."""
        return key in self._released


class GamePad:
    """State bits of up to four pads."""

    def __init__(self) -> None:
        self._state = [Button(0)] * GAMEPAD_MAX
        self._trigger = [Button(0)] * GAMEPAD_MAX

    def update(self, readings: Sequence[PadReading]) -> None:
        """Record this frame's reading for each connected pad, in pad order."""
        readings = list(readings)
        if len(readings) > GAMEPAD_MAX:
            raise ValueError(f"at most {GAMEPAD_MAX} pads are supported")
        for pad, reading in enumerate(readings):
            last = self._state[pad]
            current = pad_bits(reading)
            self._trigger[pad] = (last ^ current) & current
            self._state[pad] = current

    @staticmethod
    def _check(pad: int) -> None:
        if not 0 <= pad < GAMEPAD_MAX:
            raise IndexError(f"pad number out of range: {pad}")

    def is_press(self, pad: int, button: int) -> bool:
        self._check(pad)
        return bool(self._state[pad] & button)

    def is_trigger(self, pad: int, button: int) -> bool:
        """True only on the frame the button went down."""
        self._check(pad)
        return bool(self._trigger[pad] & button)