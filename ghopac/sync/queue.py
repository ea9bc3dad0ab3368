# ghopac Work Queue
# Closable many-producer, many-consumer queue of sync targets

import queue
import threading
from collections.abc import Iterator
from typing import Optional

from ghopac.sync.target import SyncTarget

DEFAULT_BUFFER_SIZE = 1000

_CLOSED = object()


class QueueClosedError(RuntimeError):
    """Raised when a target is pushed after the queue was closed."""


class WorkQueue:
    """
    Buffered queue that consumers drain until it is closed.

    Closing enqueues a single marker behind all pending targets. A
    consumer that takes the marker puts it back so every other consumer
    sees it too, which means consumers stop only once the queue is both
    closed and empty.
    """

    def __init__(self, maxsize: int = DEFAULT_BUFFER_SIZE):
        self._queue: queue.Queue = queue.Queue(maxsize)
        self._lock = threading.Condition()
        self._closed = False
        self._in_flight = 0
        self._put_count = 0

    @property
    def put_count(self) -> int:
        """Number of targets pushed so far."""
        return self._put_count

    def put(self, target: SyncTarget) -> None:
        """
        Push a target, blocking while the buffer is full.

        Raises:
            QueueClosedError: If the queue was already closed.
        """
        with self._lock:
            if self._closed:
                raise QueueClosedError(f"Cannot queue {target.path}: work queue is closed")
            self._in_flight += 1
        try:
            self._queue.put(target)
        finally:
            with self._lock:
                self._in_flight -= 1
                self._put_count += 1
                self._lock.notify_all()

    def close(self) -> None:
        """
        Signal that no more targets will arrive. Idempotent.

        Waits for puts already in progress so the close marker always
        lands behind them.
        """
        with self._lock:
            if self._closed:
                return
            self._closed = True
            while self._in_flight:
                self._lock.wait()
        self._queue.put(_CLOSED)

    def get(self) -> Optional[SyncTarget]:
        """
        Take the next target, blocking while the queue is empty and open.

        Returns:
            The next target, or None once the queue is closed and drained.
        """
        item = self._queue.get()
        if item is _CLOSED:
            self._queue.put(_CLOSED)
            return None
        return item

    def __iter__(self) -> Iterator[SyncTarget]:
        while True:
            target = self.get()
            if target is None:
                return
            yield target
