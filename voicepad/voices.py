"""Voices: multi-voice oscillators driven by frequency or MIDI note."""

from __future__ import annotations

import math

SAMPLE_RATE = 44100
BIT_DEPTH = 32
FRAMES_PER_BUFFER = 64
MAX_SAMPLES_PER_UPDATE = 4096

DEFAULT_FREQUENCY = 200.0
DEFAULT_AMP = 0.2


def midi_to_freq(note):
    """Return the frequency in Hz of a MIDI note number (A4 = 69 = 440 Hz)."""
    return 440.0 * math.exp((math.log(2) * (int(note) - 69)) / 12)


class Voice:
    """A bank of voices, each with its own frequency and amplitude."""

    def __init__(self, sample_rate, bit_depth, num_voices):
        if bit_depth == 16:
            self.max_amp = 2 ** (bit_depth - 1) - 1
        elif bit_depth == 32:
            self.max_amp = 1
        else:
            raise ValueError(f"unsupported bit depth: {bit_depth}")
        self.sample_rate = sample_rate
        self.bit_depth = bit_depth
        self.num_voices = num_voices
        self.frequency = [DEFAULT_FREQUENCY] * num_voices
        self.amp = [DEFAULT_AMP] * num_voices

    def gen_value(self):
        """Produce the next output sample; a bare voice is silent."""
        return 0.0

    def update_params(self):
        """Recompute derived parameters after a change."""

    def _check_voice(self, voice):
        if not 0 <= voice < self.num_voices:
            raise IndexError(f"voice number '{voice}' out of range")

    def set_frequency(self, frequency, voice):
        """Set the frequency of one voice in Hz."""
        self._check_voice(voice)
        self.frequency[voice] = float(frequency)

    def set_frequency_midi(self, note, voice):
        """Set the frequency of one voice from a MIDI note number."""
        self._check_voice(voice)
        self.frequency[voice] = midi_to_freq(note)


class SineOscillator(Voice):
    """Sum of sine waves, one per voice."""

    def __init__(self, sample_rate, bit_depth, num_voices):
        super().__init__(sample_rate, bit_depth, num_voices)
        self.offset = [0.0] * num_voices
        self.incr = [0.0] * num_voices

    def update_params(self):
        """Recompute each voice's phase increment from its frequency."""
        self.incr = [freq / self.sample_rate for freq in self.frequency]

    def gen_value(self):
        """Return the mixed sample and advance every voice's phase."""
        out = 0.0
        for i, (amp, incr) in enumerate(zip(self.amp, self.incr)):
            out += amp * math.sin(2 * math.pi * self.offset[i])
            phase = self.offset[i] + incr
            self.offset[i] = 0.0 if phase >= 1.0 else phase
        return out

    def freq_change(self, note, voice):
        """Retune a voice to a MIDI note and apply it immediately."""
        self.set_frequency_midi(note, voice)
        self.update_params()