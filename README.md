# voicepad

voicepad is a small synthesizer made of polyphonic sine voices. Voices are
tuned by MIDI note number. An event queue lets parameter changes be registered
under a name, queued with their values, and applied one at a time. The rendered
audio can be written to a WAV file.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
voicepad [OUTPUT]
```

This renders the built-in demo. It starts with a C major chord (MIDI notes
60, 64, 67) on three voices at 44100 Hz, then changes notes through the event
queue once a second, and writes the result as a WAV file to `OUTPUT`
(default `voicepad.wav`). It prints how many frames were written. Run
`voicepad --help` to see the options.

## Library use

```python
from voicepad.voices import SineOscillator, midi_to_freq
from voicepad.events import EventQueue
from voicepad.audio import Audio

osc = SineOscillator(44100, 32, 3)
for voice, note in enumerate((60, 64, 67)):
    osc.set_frequency_midi(note, voice)
osc.update_params()

events = EventQueue()
events.add_possible_event("freq", osc.freq_change)
events.add_to_queue("freq", 55.0, 0)

audio = Audio(44100, 64)
audio.set_callback(osc.gen_value)
audio.run(1000)          # render one second
events.trigger_event()   # apply the most recently queued change
audio.run(1000)
audio.write_wav("demo.wav")
```

### `voicepad.voices`

- `midi_to_freq(note)` converts a MIDI note to a frequency in Hz. Note 69 is 440 Hz.
- `Voice(sample_rate, bit_depth, num_voices)` holds one frequency (default
  200 Hz) and one amplitude (default 0.2) per voice. `bit_depth` must be 16 or
  32; any other value raises `ValueError`. A bare `Voice` is silent:
  `gen_value()` returns 0.0.
- `set_frequency(frequency, voice)` and `set_frequency_midi(note, voice)` retune
  one voice; a voice number out of range raises `IndexError`.
- `SineOscillator` sums one sine wave per voice. Call `update_params()` after
  changing frequencies so the phase increments follow. `freq_change(note, voice)`
  does both steps at once. `gen_value()` returns the next mixed sample.

### `voicepad.events`

- `EventQueue.add_possible_event(event_id, setter)` registers a callable taking
  `(new_val, voice)` under a name.
- `add_to_queue(event_id, new_val, voice)` queues a call; an unknown name raises
  `KeyError`.
- `trigger_event()` applies the change that was queued most recently, so the
  queue is taken last-in, first-out. With nothing queued it raises
  `EmptyQueueError` (a `LookupError`). `len()` of the queue is the number of
  pending events.

### `voicepad.audio`

- `Audio(sample_rate, frames_per_buffer)` pulls samples from a no-argument
  callback set with `set_callback(callback)`; by default it produces silence.
- `fill_buffer(frames)` returns one buffer of samples from the callback.
- `run(duration_ms)` renders that many milliseconds in buffers of
  `frames_per_buffer`, adds them to the recording and returns them;
  `samples` holds everything recorded so far.
- `write_wav(path)` saves the recording as a mono 16-bit PCM WAV file, clipping
  samples to [-1, 1], and returns the number of frames written.

### `voicepad.cli`

- `render_demo(path)` writes the demo sequence to `path` and returns the number
  of frames written.

## What it does not do

voicepad renders audio offline only. It does not open a sound device or play
anything in real time; the output is a WAV file to be played with another tool.