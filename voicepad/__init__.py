"""Polyphonic sine-voice synthesis with queued parameter events, rendered to WAV."""

__version__ = "0.1.0"
__all__ = ["voices", "events", "audio", "cli"]