import math

import pytest

from voicepad.voices import SineOscillator, Voice, midi_to_freq


def test_midi_a4_is_440():
    assert midi_to_freq(69) == pytest.approx(440.0)


@pytest.mark.parametrize("note", [0, 30, 60, 69, 100])
def test_midi_octave_doubles(note):
    assert midi_to_freq(note + 12) == pytest.approx(2 * midi_to_freq(note))


def test_midi_fractional_note_truncated():
    assert midi_to_freq(60.9) == midi_to_freq(60)


def test_voice_defaults():
    voice = Voice(44100, 32, 3)
    assert voice.frequency == [200.0, 200.0, 200.0]
    assert voice.amp == [0.2, 0.2, 0.2]
    assert voice.max_amp == 1
    assert voice.gen_value() == 0


def test_voice_16_bit_max_amp():
    assert Voice(44100, 16, 1).max_amp == 32767


def test_voice_bad_bit_depth():
    with pytest.raises(ValueError):
        Voice(44100, 24, 1)


def test_set_frequency_and_midi():
    voice = Voice(44100, 32, 2)
    voice.set_frequency(330.0, 1)
    voice.set_frequency_midi(69, 0)
    assert voice.frequency == [pytest.approx(440.0), 330.0]


@pytest.mark.parametrize("index", [2, 5, -1])
def test_voice_out_of_range(index):
    voice = Voice(44100, 32, 2)
    with pytest.raises(IndexError):
        voice.set_frequency(100.0, index)
    with pytest.raises(IndexError):
        voice.set_frequency_midi(60, index)
    assert voice.frequency == [200.0, 200.0]


def test_update_params_sets_increment():
    osc = SineOscillator(44100, 32, 2)
    osc.set_frequency(441.0, 0)
    osc.update_params()
    assert osc.incr == [pytest.approx(441.0 / 44100), pytest.approx(200.0 / 44100)]


def test_quarter_rate_sine_cycle():
    osc = SineOscillator(44100, 32, 1)
    osc.set_frequency(44100 / 4, 0)
    osc.update_params()
    values = [osc.gen_value() for _ in range(8)]
    expected = [0.0, 0.2, 0.0, -0.2] * 2
    assert values == [pytest.approx(v, abs=1e-9) for v in expected]
    assert osc.offset[0] < 1.0


def test_output_bounded_by_amplitudes():
    osc = SineOscillator(44100, 32, 3)
    for i, note in enumerate((60, 64, 67)):
        osc.set_frequency_midi(note, i)
    osc.update_params()
    limit = sum(osc.amp)
    values = [osc.gen_value() for _ in range(2000)]
    assert all(abs(v) <= limit + 1e-9 for v in values)
    assert all(0.0 <= off < 1.0 for off in osc.offset)


def test_freq_change_applies_immediately():
    osc = SineOscillator(44100, 32, 2)
    osc.freq_change(69, 1)
    assert osc.frequency[1] == pytest.approx(440.0)
    assert osc.incr[1] == pytest.approx(440.0 / 44100)


def test_freq_change_out_of_range():
    osc = SineOscillator(44100, 32, 1)
    with pytest.raises(IndexError):
        osc.freq_change(60, 1)


def test_sine_matches_phase():
    osc = SineOscillator(1000, 32, 1)
    osc.set_frequency(10.0, 0)
    osc.update_params()
    values = [osc.gen_value() for _ in range(5)]
    for n, value in enumerate(values):
        assert value == pytest.approx(0.2 * math.sin(2 * math.pi * n * 0.01))