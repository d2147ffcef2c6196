import pytest

from yukifight.controls import Button, GamePad, Keyboard, PadReading, pad_bits


def test_neutral_reading_has_no_bits():
    assert pad_bits(PadReading()) == Button(0)


def test_stick_directions():
    assert pad_bits(PadReading(y=-1.0)) == Button.UP
    assert pad_bits(PadReading(y=1.0)) == Button.DOWN
    assert pad_bits(PadReading(x=-1.0)) == Button.LEFT
    assert pad_bits(PadReading(x=1.0)) == Button.RIGHT


def test_small_stick_movement_is_ignored():
    assert pad_bits(PadReading(x=0.1, y=-0.2)) == Button(0)


def test_face_buttons_follow_order():
    pressed = (False, False, True)
    assert pad_bits(PadReading(buttons=pressed)) == Button.C
    everything = pad_bits(PadReading(buttons=(True,) * 10))
    assert Button.A in everything and Button.M in everything
    assert Button.UP not in everything


def test_button_values_match_bit_layout():
    assert pad_bits(PadReading(buttons=(False, False, True))) == 0x40
    start_only = (False,) * 8 + (True,)
    assert pad_bits(PadReading(buttons=start_only)) == 0x1000


def test_keyboard_press_trigger_release():
    kb = Keyboard()
    kb.update({32})
    assert kb.is_press(32)
    assert kb.is_trigger(32)
    assert not kb.is_release(32)
    kb.update({32})
    assert kb.is_press(32)
    assert not kb.is_trigger(32)
    kb.update(set())
    assert not kb.is_press(32)
    assert kb.is_release(32)
    kb.update(set())
    assert not kb.is_release(32)


def test_gamepad_trigger_only_on_first_frame():
    pad = GamePad()
    reading = PadReading(buttons=(True,))
    pad.update([reading])
    assert pad.is_press(0, Button.A)
    assert pad.is_trigger(0, Button.A)
    pad.update([reading])
    assert pad.is_press(0, Button.A)
    assert not pad.is_trigger(0, Button.A)
    pad.update([PadReading()])
    assert not pad.is_press(0, Button.A)


def test_unconnected_pad_is_idle():
    pad = GamePad()
    pad.update([PadReading(buttons=(True,))])
    assert not pad.is_press(1, Button.A)


def test_pad_number_out_of_range():
    pad = GamePad()
    with pytest.raises(IndexError):
        pad.is_press(4, Button.A)
    with pytest.raises(IndexError):
        pad.is_trigger(-1, Button.A)


def test_too_many_pads():
    with pytest.raises(ValueError):
        GamePad().update([PadReading()] * 5)