"""The game window, its frame loop and the command that starts it."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

import pygame

from yukifight.controls import GAMEPAD_MAX, GamePad, Keyboard, PadReading
from yukifight.fade import Fade
from yukifight.scenes import SceneIndex, SceneManager
from yukifight.sprite import SpriteRenderer
from yukifight.texture import TextureStore

SCREEN_WIDTH = 1024
SCREEN_HEIGHT = 576
CLEAR_COLOR = (50, 50, 50)
FRAME_RATE = 60
CAPTION = "Yuki Fight"
PAD_BUTTONS = 10


class Game:
    """Input, scenes and fade for one drawing surface, advanced a frame at a time."""

    def __init__(self, surface: pygame.Surface, textures: TextureStore | None = None) -> None:
        self.surface = surface
        self.textures = textures if textures is not None else TextureStore()
        self.keyboard = Keyboard()
        self.gamepad = GamePad()
        self.fade = Fade()
        self.renderer = SpriteRenderer(surface, self.textures)
        self.pressed_keys: set[int] = set()
        self.pad_readings: list[PadReading] = []
        self.scenes = SceneManager(self.fade, self.keyboard, self.gamepad, SceneIndex.TITLE)

    def update(self) -> None:
        """Read this frame's input, then run the scene and the fade."""
        self.keyboard.update(self.pressed_keys)
        self.gamepad.update(self.pad_readings)
        self.scenes.update()
        self.fade.update()

    def draw(self) -> None:
        """Clear, draw the scene and the fade, then carry out any scene switch."""
        self.surface.fill(CLEAR_COLOR)
        self.scenes.draw(self.renderer)
        self.fade.draw(self.renderer)
        self.scenes.check()


def _handle_event(game: Game, event: pygame.event.Event) -> bool:
    """Apply one window event; False means the game should close."""
    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.KEYDOWN:
        if event.key == pygame.K_ESCAPE:
            return False
        game.pressed_keys.add(event.key)
    elif event.type == pygame.KEYUP:
        game.pressed_keys.discard(event.key)
    return True


def _read_pads(joysticks: Sequence[pygame.joystick.JoystickType]) -> list[PadReading]:
    readings = []
    for joystick in joysticks:
        axes = joystick.get_numaxes()
        x = joystick.get_axis(0) if axes > 0 else 0.0
        y = joystick.get_axis(1) if axes > 1 else 0.0
        count = min(joystick.get_numbuttons(), PAD_BUTTONS)
        buttons = tuple(bool(joystick.get_button(b)) for b in range(count))
        readings.append(PadReading(x, y, buttons))
    return readings


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="yukifight", description="Snowman action game.")
    parser.add_argument("--assets", default=".", help="directory holding the asset files")
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        try:
            screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        except pygame.error as exc:
            print(f"cannot open the game window: {exc}", file=sys.stderr)
            return -1
        pygame.display.set_caption(CAPTION)

        textures = TextureStore()
        textures.load(args.assets)
        game = Game(screen, textures)

        joysticks = []
        for number in range(min(pygame.joystick.get_count(), GAMEPAD_MAX)):
            joystick = pygame.joystick.Joystick(number)
            joystick.init()
            joysticks.append(joystick)

        clock = pygame.time.Clock()
        frame = 0
        running = True
        while running and (args.frames is None or frame < args.frames):
            for event in pygame.event.get():
                if not _handle_event(game, event):
                    running = False
            if not running:
                break
            game.pad_readings = _read_pads(joysticks)
            game.update()
            game.draw()
            pygame.display.flip()
            clock.tick(FRAME_RATE)
            frame += 1

        textures.release()
        return 0
    finally:
        pygame.quit()