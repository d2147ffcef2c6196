"""Scenes of the game and the manager that switches between them."""

from __future__ import annotations

import enum
from typing import Any

import pygame

from yukifight.controls import Button, GamePad, Keyboard
from yukifight.fade import Fade
from yukifight.texture import TextureIndex

BLACK = (0, 0, 0)
KEY_CONFIRM = pygame.K_SPACE
FADE_IN_FRAMES = 90
FADE_OUT_FRAMES = 30
GAME_FADE_FRAMES = 30
RESULT_MARKS = ((900.0, 100.0), (900.0, 200.0), (900.0, 400.0))


class SceneIndex(enum.IntEnum):
    TITLE = 0
    GAME = 1
    RESULT = 2
    GAMEOVER = 3
    GAMECLEAR = 4


class GamePhase(enum.Enum):
    FADE = enum.auto()
    STAGE_CLEAR = enum.auto()
    END = enum.auto()


class Scene:
    """A screen of the game; the hooks do nothing unless a scene overrides them."""

    def __init__(self, manager: SceneManager) -> None:
        self.manager = manager

    def initialize(self) -> None:
        """Called when the scene becomes current."""

    def finalize(self) -> None:
        """Called when the scene is left."""

    def update(self) -> None:
        """Run one frame."""

    def draw(self, renderer: Any) -> None:
        """Draw the scene."""


class _ConfirmScene(Scene):
    """Waits for the confirm key or pad button, fades out, then moves on."""

    next_scene = SceneIndex.RESULT
    texture = TextureIndex.TITLE
    fade_in = True

    def __init__(self, manager: SceneManager) -> None:
        super().__init__(manager)
        self.ended = False

    def initialize(self) -> None:
        if self.fade_in:
            self.manager.fade.start(False, FADE_IN_FRAMES, BLACK)
        self.ended = False

    def update(self) -> None:
        manager = self.manager
        if not self.ended:
            if manager.keyboard.is_trigger(KEY_CONFIRM) or manager.gamepad.is_press(0, Button.C):
                manager.fade.start(True, FADE_OUT_FRAMES, BLACK)
                self.ended = True
        elif not manager.fade.is_fading():
            manager.change(self.next_scene)

    def draw(self, renderer: Any) -> None:
        renderer.draw(self.texture, 0.0, 0.0)


class TitleScene(_ConfirmScene):
    next_scene = SceneIndex.GAME
    texture = TextureIndex.TITLE
    fade_in = False


class GameoverScene(_ConfirmScene):
    next_scene = SceneIndex.RESULT
    texture = TextureIndex.GAMEOVER


class GameclearScene(_ConfirmScene):
    next_scene = SceneIndex.RESULT
    texture = TextureIndex.GAMECLEAR

    def draw(self, renderer: Any) -> None:
        renderer.draw(self.texture, 0.0, 0.0)
        renderer.draw(self.texture, 0.0, 0.0)


class GameScene(Scene):
    """The play scene; once the stage is cleared and the fade ends it shows the result."""

    def __init__(self, manager: SceneManager) -> None:
        super().__init__(manager)
        self.phase = GamePhase.FADE
        self.frame_count = 0

    def _reset(self) -> None:
        self.phase = GamePhase.FADE
        self.frame_count = 0
        self.manager.fade.start(False, GAME_FADE_FRAMES, BLACK)

    def initialize(self) -> None:
        self._reset()

    def finalize(self) -> None:
        self._reset()

    def update(self) -> None:
        if self.phase is GamePhase.STAGE_CLEAR and not self.manager.fade.is_fading():
            self.manager.change(SceneIndex.RESULT)
            self.phase = GamePhase.END


class ResultScene(Scene):
    """The result screen with its three marks."""

    def initialize(self) -> None:
        self.manager.fade.start(False, FADE_IN_FRAMES, BLACK)

    def draw(self, renderer: Any) -> None:
        renderer.draw(TextureIndex.RESULT, 0.0, 0.0)
        for x, y in RESULT_MARKS:
            renderer.draw(TextureIndex.TEN, x, y)


_SCENES: dict[SceneIndex, type[Scene]] = {
    SceneIndex.TITLE: TitleScene,
    SceneIndex.GAME: GameScene,
    SceneIndex.RESULT: ResultScene,
    SceneIndex.GAMEOVER: GameoverScene,
    SceneIndex.GAMECLEAR: GameclearScene,
}


class SceneManager:
    """Holds the current scene and switches to a requested one between frames."""

    def __init__(
        self,
        fade: Fade,
        keyboard: Keyboard,
        gamepad: GamePad,
        initial: SceneIndex = SceneIndex.TITLE,
    ) -> None:
        self.fade = fade
        self.keyboard = keyboard
        self.gamepad = gamepad
        self.index = SceneIndex(initial)
        self.next_index = self.index
        self.scene = self._enter(self.index)

    def _enter(self, index: SceneIndex) -> Scene:
        scene = _SCENES[index](self)
        scene.initialize()
        return scene

    def change(self, index: int) -> None:
        """Request a switch; it happens at the next ``check``."""
        self.next_index = SceneIndex(index)

    def check(self) -> None:
        """Carry out a requested switch."""
        if self.index != self.next_index:
            self.scene.finalize()
            self.index = self.next_index
            self.scene = self._enter(self.index)

    def update(self) -> None:
        self.scene.update()

    def draw(self, renderer: Any) -> None:
        self.scene.draw(renderer)