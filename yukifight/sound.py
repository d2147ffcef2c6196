"""Wave file loading and playback of the game's music and effects."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable

import pygame


class SoundLabel(enum.IntEnum):
    BGM000 = 0
    BGM001 = enum.auto()
    BGM002 = enum.auto()
    SE_SHOT = enum.auto()
    SE_HIT = enum.auto()
    SE_EXPLOSION = enum.auto()


LOOP_FOREVER = -1
PLAY_ONCE = 0

# file name and loop count of every sound
SOUND_PARAMS: dict[SoundLabel, tuple[str, int]] = {
    SoundLabel.BGM000: ("asset/BGM/bgm000.wav", LOOP_FOREVER),
    SoundLabel.BGM001: ("asset/BGM/bgm001.wav", LOOP_FOREVER),
    SoundLabel.BGM002: ("asset/BGM/bgm002.wav", LOOP_FOREVER),
    SoundLabel.SE_SHOT: ("asset/SE/shot000.wav", PLAY_ONCE),
    SoundLabel.SE_HIT: ("asset/SE/hit000.wav", PLAY_ONCE),
    SoundLabel.SE_EXPLOSION: ("asset/SE/explosion000.wav", PLAY_ONCE),
}

_FMT_LAYOUT = struct.Struct("<HHIIHH")


@dataclass(frozen=True)
class WaveData:
    """The format block and sample bytes of a wave file."""

    format_tag: int
    channels: int
    sample_rate: int
    byte_rate: int
    block_align: int
    bits_per_sample: int
    data: bytes


def find_chunk(data: bytes, fourcc: bytes | str) -> tuple[int, int]:
    """Find a RIFF chunk; return its data size and the offset of its data.

    The RIFF chunk itself counts as holding only its 4-byte form type, so the
    chunks inside it are walked in turn. Raises ValueError if the chunk is absent.
    """
    tag = fourcc.encode("ascii") if isinstance(fourcc, str) else bytes(fourcc)
    if len(tag) != 4:
        raise ValueError(f"a chunk id is four bytes, not {len(tag)}")
    offset = 0
    while offset + 8 <= len(data):
        chunk_type = data[offset : offset + 4]
        (size,) = struct.unpack_from("<I", data, offset + 4)
        if chunk_type == b"RIFF":
            size = 4
        offset += 8
        if chunk_type == tag:
            return size, offset
        offset += size
    raise ValueError(f"chunk {tag!r} not found")


def read_wave(path: str | Path) -> WaveData:
    """Read a wave file; raises ValueError if it is not a usable wave file."""
    data = Path(path).read_bytes()
    _, position = find_chunk(data, b"RIFF")
    if data[position : position + 4] != b"WAVE":
        raise ValueError(f"{path} is not a WAVE file")
    size, position = find_chunk(data, b"fmt ")
    if size < _FMT_LAYOUT.size or position + _FMT_LAYOUT.size > len(data):
        raise ValueError(f"{path} has a short format chunk")
    fields = _FMT_LAYOUT.unpack_from(data, position)
    size, position = find_chunk(data, b"data")
    return WaveData(*fields, data=data[position : position + size])


class SoundPlayer:
    """Loads every labelled sound and plays, restarts and stops them."""

    def __init__(
        self,
        base_dir: str | Path = ".",
        sound_factory: Callable[[Path], Any] | None = None,
    ) -> None:
        self._owns_mixer = False
        self._closed = False
        factory = sound_factory or self._mixer_sound
        base = Path(base_dir)
        self.waves: dict[SoundLabel, WaveData] = {}
        self._sounds: dict[SoundLabel, Any] = {}
        for label in SoundLabel:
            path = base / SOUND_PARAMS[label][0]
            self.waves[label] = read_wave(path)
            self._sounds[label] = factory(path)

    def _mixer_sound(self, path: Path) -> Any:
        if not pygame.mixer.get_init():
            pygame.mixer.init()
            self._owns_mixer = True
        return pygame.mixer.Sound(str(path))

    def _sound(self, label: int) -> Any:
        if self._closed:
            raise RuntimeError("the sound player is closed")
        return self._sounds[SoundLabel(label)]

    def play(self, label: int) -> None:
        """Play a sound from the start, stopping it first if it is playing."""
        sound = self._sound(label)
        if sound.get_num_channels() > 0:
            sound.stop()
        sound.play(loops=SOUND_PARAMS[SoundLabel(label)][1])

    def stop(self, label: int) -> None:
        """Stop one sound if it is playing."""
        sound = self._sound(label)
        if sound.get_num_channels() > 0:
            sound.stop()

    def stop_all(self) -> None:
        """Stop every sound."""
        if self._closed:
            raise RuntimeError("the sound player is closed")
        for sound in self._sounds.values():
            sound.stop()

    def close(self) -> None:
        """Stop and release every sound."""
        if self._closed:
            return
        for sound in self._sounds.values():
            sound.stop()
        self._sounds.clear()
        self._closed = True
        if self._owns_mixer:
            pygame.mixer.quit()
            self._owns_mixer = False

    def __enter__(self) -> SoundPlayer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()