import struct
import wave

import pytest

from yukifight.sound import (
    SOUND_PARAMS,
    SoundLabel,
    SoundPlayer,
    find_chunk,
    read_wave,
)

SAMPLES = bytes(range(16))


def _write_wav(path, frames=SAMPLES, rate=22050, channels=1, width=2):
    path.parent.mkdir(parents=True, exist_ok=True)
    with wave.open(str(path), "wb") as out:
        out.setnchannels(channels)
        out.setsampwidth(width)
        out.setframerate(rate)
        out.writeframes(frames)
    return path


def _raw_wave(form=b"WAVE", with_data=True):
    body = form
    body += b"junk" + struct.pack("<I", 4) + b"abcd"
    body += b"fmt " + struct.pack("<I", 16) + struct.pack("<HHIIHH", 1, 1, 8000, 8000, 1, 8)
    if with_data:
        body += b"data" + struct.pack("<I", 3) + b"\x01\x02\x03"
    return b"RIFF" + struct.pack("<I", len(body)) + body


class FakeSound:
    def __init__(self, path):
        self.path = path
        self.plays = []
        self.stops = 0
        self.playing = False

    def play(self, loops=0):
        self.plays.append(loops)
        self.playing = True

    def stop(self):
        self.stops += 1
        self.playing = False

    def get_num_channels(self):
        return 1 if self.playing else 0


@pytest.fixture
def assets(tmp_path):
    for filename, _ in SOUND_PARAMS.values():
        _write_wav(tmp_path / filename)
    return tmp_path


@pytest.fixture
def player(assets):
    created = []

    def factory(path):
        created.append(FakeSound(path))
        return created[-1]

    sound_player = SoundPlayer(assets, factory)
    return sound_player, created


def test_riff_chunk_holds_form_type(tmp_path):
    data = _write_wav(tmp_path / "a.wav").read_bytes()
    assert find_chunk(data, b"RIFF") == (4, 8)
    assert data[8:12] == b"WAVE"


def test_fmt_chunk_follows_form_type(tmp_path):
    data = _write_wav(tmp_path / "a.wav").read_bytes()
    assert find_chunk(data, "fmt ") == (16, 20)


def test_missing_chunk_raises():
    with pytest.raises(ValueError):
        find_chunk(_raw_wave(with_data=False), b"data")


def test_bad_fourcc_length_raises():
    with pytest.raises(ValueError):
        find_chunk(_raw_wave(), b"dat")


def test_read_wave_round_trip(tmp_path):
    path = _write_wav(tmp_path / "a.wav", rate=11025, channels=2)
    result = read_wave(path)
    assert result.data == SAMPLES
    assert result.sample_rate == 11025
    assert result.channels == 2
    assert result.bits_per_sample == 16


def test_read_wave_skips_other_chunks(tmp_path):
    path = tmp_path / "raw.wav"
    path.write_bytes(_raw_wave())
    result = read_wave(path)
    assert result.data == b"\x01\x02\x03"
    assert result.sample_rate == 8000
    assert result.bits_per_sample == 8


def test_read_wave_rejects_other_forms(tmp_path):
    path = tmp_path / "raw.avi"
    path.write_bytes(_raw_wave(form=b"AVI "))
    with pytest.raises(ValueError):
        read_wave(path)


def test_read_wave_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_wave(tmp_path / "none.wav")


def test_music_loops_and_effects_play_once(player):
    sound_player, created = player
    sound_player.play(SoundLabel.BGM000)
    sound_player.play(SoundLabel.SE_SHOT)
    assert created[SoundLabel.BGM000].plays == [-1]
    assert created[SoundLabel.SE_SHOT].plays == [0]


def test_play_restarts_a_playing_sound(player):
    sound_player, created = player
    sound_player.play(SoundLabel.SE_HIT)
    sound_player.play(SoundLabel.SE_HIT)
    hit = created[SoundLabel.SE_HIT]
    assert hit.stops == 1
    assert len(hit.plays) == 2


def test_stop_only_stops_playing_sound(player):
    sound_player, created = player
    sound_player.stop(SoundLabel.BGM001)
    assert created[SoundLabel.BGM001].stops == 0
    sound_player.play(SoundLabel.BGM001)
    sound_player.stop(SoundLabel.BGM001)
    assert created[SoundLabel.BGM001].stops == 1
    assert created[SoundLabel.BGM001].get_num_channels() == 0


def test_stop_all_stops_every_sound(player):
    sound_player, created = player
    sound_player.stop_all()
    assert [sound.stops for sound in created] == [1] * len(SoundLabel)


def test_waves_are_loaded_for_every_label(player):
    sound_player, created = player
    assert set(sound_player.waves) == set(SoundLabel)
    assert all(w.data == SAMPLES for w in sound_player.waves.values())
    assert len(created) == len(SoundLabel)


def test_closed_player_refuses_to_play(player):
    sound_player, _ = player
    sound_player.close()
    with pytest.raises(RuntimeError):
        sound_player.play(SoundLabel.SE_SHOT)


def test_context_manager_closes(assets):
    with SoundPlayer(assets, FakeSound) as sound_player:
        sound_player.play(SoundLabel.BGM002)
    with pytest.raises(RuntimeError):
        sound_player.stop(SoundLabel.BGM002)


def test_missing_sound_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        SoundPlayer(tmp_path, FakeSound)


def test_broken_sound_file_raises(assets):
    (assets / SOUND_PARAMS[SoundLabel.SE_HIT][0]).write_bytes(b"not a wave file")
    with pytest.raises(ValueError):
        SoundPlayer(assets, FakeSound)