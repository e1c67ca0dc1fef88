"""Command line entry: renders the three-voice chord demo to a WAV file."""

from __future__ import annotations

import argparse

from voicepad.audio import Audio
from voicepad.events import EventQueue
from voicepad.voices import BIT_DEPTH, FRAMES_PER_BUFFER, SAMPLE_RATE, SineOscillator

NUM_VOICES = 3

_INITIAL_CHORD = (60.0, 64.0, 67.0)

_QUEUED_CHANGES = (
    (55.0, 0), (59.0, 1), (62.0, 2),
    (63.0, 2),
    (55.0, 0), (60.0, 1), (64.0, 2),
    (57.0, 0), (61.0, 1),
    (59.0, 0), (62.0, 1),
    (63.0, 1),
)

# (milliseconds to play, events to trigger afterwards)
_SCHEDULE = ((1000, 1), (1000, 2), (1000, 2), (1000, 3), (1000, 1), (1000, 3), (3000, 0))


def render_demo(path):
    """Play the demo chord progression into a WAV file; return frames written."""
    osc = SineOscillator(SAMPLE_RATE, BIT_DEPTH, NUM_VOICES)
    for voice, note in enumerate(_INITIAL_CHORD):
        osc.set_frequency_midi(note, voice)
    osc.update_params()

    events = EventQueue()
    events.add_possible_event("freq", osc.freq_change)
    for note, voice in _QUEUED_CHANGES:
        events.add_to_queue("freq", note, voice)

    audio = Audio(SAMPLE_RATE, FRAMES_PER_BUFFER)
    audio.set_callback(osc.gen_value)
    for duration_ms, triggers in _SCHEDULE:
        audio.run(duration_ms)
        for _ in range(triggers):
            events.trigger_event()
    return audio.write_wav(path)


def main(argv=None):
    parser = argparse.ArgumentParser(prog="voicepad", description=__doc__)
    parser.add_argument("output", nargs="?", default="voicepad.wav", help="WAV file to write")
    args = parser.parse_args(argv)
    frames = render_demo(args.output)
    print(f"wrote {frames} frames to {args.output}")
    return 0