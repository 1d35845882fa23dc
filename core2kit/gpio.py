"""Queue of pending edge interrupts for one input pin."""

from __future__ import annotations

import queue

QUEUE_LENGTH = 10


class InterruptLine:
    """Counts rising-edge interrupts on a pin until they are consumed."""

    def __init__(self, pin: int, capacity: int = QUEUE_LENGTH) -> None:
        self.pin = pin
        self._enabled = False
        self._queue: "queue.Queue[int]" = queue.Queue(maxsize=capacity)

    def __len__(self) -> int:
        return self._queue.qsize()

    def enable(self, enabled: bool) -> bool:
        """Turn interrupt recording on or off; returns the previous state."""
        previous = self._enabled
        self._enabled = bool(enabled)
        return previous

    def set(self) -> bool:
        """Record one interrupt, waiting for room if the queue is full."""
        self._queue.put(1)
        return True

    def get(self) -> bool:
        """Wait for and consume one recorded interrupt."""
        self._queue.get()
        return True

    def clear(self) -> None:
        """Drop every pending interrupt."""
        while True:
            try:
                self._queue.get_nowait()
            except queue.Empty:
                return

    def handle(self, pin: int) -> None:
        """Interrupt handler: record an edge on this line's pin when enabled.

        Never waits; an edge arriving while the queue is full is dropped.
        """
        if pin == self.pin and self._enabled:
            try:
                self._queue.put_nowait(1)
            except queue.Full:
                pass