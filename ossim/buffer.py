"""A bounded buffer shared by a producer and a consumer thread."""

from __future__ import annotations

import threading
import time
from typing import Any, Callable, Iterable, NamedTuple

BUFFER_SIZE = 5


class Slot(NamedTuple):
    index: int
    item: Any


class BoundedBuffer:
    """A fixed-size circular buffer guarded by two semaphores and a lock."""

    def __init__(self, capacity: int = BUFFER_SIZE) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._in = 0
        self._out = 0
        self._count = 0
        self._empty = threading.Semaphore(capacity)
        self._full = threading.Semaphore(0)
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return self._count

    def put(self, item: Any) -> int:
        """Store an item, waiting for a free slot; return the slot index used."""
        self._empty.acquire()
        with self._lock:
            index = self._in
            self._slots[index] = item
            self._in = (index + 1) % self.capacity
            self._count += 1
        self._full.release()
        return index

    def get(self) -> Slot:
        """Take the oldest item, waiting for one to arrive."""
        self._full.acquire()
        with self._lock:
            index = self._out
            item = self._slots[index]
            self._slots[index] = None
            self._out = (index + 1) % self.capacity
            self._count -= 1
        self._empty.release()
        return Slot(index, item)


def produce_consume(
    items: Iterable[Any],
    capacity: int = BUFFER_SIZE,
    delay: float = 0.5,
    emit: Callable[[str], Any] = print,
) -> list[Any]:
    """Pass items from a producer thread to a consumer thread through a buffer.

    Each step is reported through ``emit``; the consumed items are returned.
    """
    values = list(items)
    buffer = BoundedBuffer(capacity)
    consumed: list[Any] = []
    emit_lock = threading.Lock()

    def say(message: str) -> None:
        with emit_lock:
            emit(message)

    def producer() -> None:
        for value in values:
            index = buffer.put(value)
            say(f"Producer: Produced item {value} at index {index}")
            time.sleep(delay)
        say(f"Producer finished producing {len(values)} items")

    def consumer() -> None:
        for _ in values:
            slot = buffer.get()
            say(f"Consumer: Consumed item {slot.item} from index {slot.index}")
            consumed.append(slot.item)
            time.sleep(delay)
        say(f"Consumer finished consuming {len(values)} items")

    threads = [threading.Thread(target=producer), threading.Thread(target=consumer)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return consumed