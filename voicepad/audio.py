"""Offline audio output: pulls samples from a callback into buffers."""

from __future__ import annotations

import struct
import wave


def _silence():
    return 0.0


class Audio:
    """Mono float stream fed one sample at a time by a callback."""

    def __init__(self, sample_rate, frames_per_buffer):
        if sample_rate <= 0 or frames_per_buffer <= 0:
            raise ValueError("sample rate and frames per buffer must be positive")
        self.sample_rate = sample_rate
        self.frames_per_buffer = frames_per_buffer
        self.callback = _silence
        self._samples = []

    @property
    def samples(self):
        """All samples produced so far by run()."""
        return tuple(self._samples)

    def set_callback(self, callback):
        """Use a no-argument callable returning a float as the sample source."""
        self.callback = callback

    def fill_buffer(self, frames):
        """Return a buffer of `frames` samples taken from the callback."""
        return [float(self.callback()) for _ in range(frames)]

    def run(self, duration_ms):
        """Stream for duration_ms milliseconds, recording and returning the samples."""
        if duration_ms < 0:
            raise ValueError("duration must not be negative")
        remaining = self.sample_rate * duration_ms // 1000
        produced = []
        while remaining > 0:
            chunk = min(remaining, self.frames_per_buffer)
            produced.extend(self.fill_buffer(chunk))
            remaining -= chunk
        self._samples.extend(produced)
        return produced

    def write_wav(self, path):
        """Write the recorded samples as 16-bit mono PCM; return frames written."""
        pcm = [round(max(-1.0, min(1.0, s)) * 32767) for s in self._samples]
        with wave.open(str(path), "wb") as out:
            out.setnchannels(1)
            out.setsampwidth(2)
            out.setframerate(self.sample_rate)
            out.writeframes(struct.pack(f"<{len(pcm)}h", *pcm))
        return len(pcm)