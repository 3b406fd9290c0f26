"""A fixed-capacity circular FIFO queue of integers."""

from __future__ import annotations


class QueueOverflow(Exception):
    """Raised when enqueueing into a full queue."""


class QueueUnderflow(Exception):
    """Raised when dequeueing from an empty queue."""


class CircularQueue:
    """Ring buffer queue; vacated slots are reset to 0."""

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self._slots = [0] * capacity
        self._front = 0
        self._rear = 0
        self._count = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def enqueue(self, value: int) -> None:
        """Append ``value`` at the rear."""
        if self._count == self.capacity:
            raise QueueOverflow("queue is full")
        self._slots[self._rear] = value
        self._rear = (self._rear + 1) % self.capacity
        self._count += 1

    def dequeue(self) -> int:
        """Remove and return the value at the front."""
        if self._count == 0:
            raise QueueUnderflow("queue is empty")
        value = self._slots[self._front]
        self._slots[self._front] = 0
        self._front = (self._front + 1) % self.capacity
        self._count -= 1
        return value

    def __len__(self) -> int:
        return self._count

    def slots(self) -> list[int]:
        """Raw contents of the underlying buffer, in storage order."""
        return list(self._slots)