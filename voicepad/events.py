"""Named parameter-change events queued and fired last-in, first-out."""

from __future__ import annotations


class EmptyQueueError(LookupError):
    """Raised when an event is triggered with nothing queued."""


class EventQueue:
    """Registry of named setters and a stack of pending calls to them."""

    def __init__(self):
        self.glossary = {}
        self.possible_events = []
        self._queue = []

    def __len__(self):
        return len(self._queue)

    def add_possible_event(self, event_id, setter):
        """Register a setter taking (new_val, voice) under an id."""
        self.possible_events.append(setter)
        self.glossary[event_id] = len(self.possible_events) - 1

    def add_to_queue(self, event_id, new_val, voice):
        """Queue a call of the setter registered under event_id."""
        setter = self.possible_events[self.glossary[event_id]]
        self._queue.append((setter, float(new_val), voice))

    def trigger_event(self):
        """Fire the most recently queued event and remove it."""
        if not self._queue:
            raise EmptyQueueError("nothing added to queue")
        setter, new_val, voice = self._queue.pop()
        setter(new_val, voice)