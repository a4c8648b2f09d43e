import threading
from collections.abc import Iterator
from contextlib import contextmanager


class ReadWriteLock:
    """
    In-process readers/writer lock.

    Any number of readers may hold the lock at once; a writer holds it alone.
    Writers are preferred: once a writer is waiting, new readers block until it
    has finished, so a steady stream of reads cannot starve mutations.

    The lock is not reentrant. Acquiring `write()` while holding `read()` (or
    either while holding `write()`) on the same thread deadlocks.
    """

    def __init__(self) -> None:
        self._condition = threading.Condition(threading.Lock())
        self._active_readers = 0
        self._waiting_writers = 0
        self._writer_active = False

    @property
    def active_readers(self) -> int:
        with self._condition:
            return self._active_readers

    @property
    def writer_active(self) -> bool:
        with self._condition:
            return self._writer_active

    def acquire_read(self) -> None:
        with self._condition:
            while self._writer_active or self._waiting_writers:
                self._condition.wait()
            self._active_readers += 1

    def release_read(self) -> None:
        with self._condition:
            if self._active_readers == 0:
                raise RuntimeError("release_read called without a matching acquire")
            self._active_readers -= 1
            if self._active_readers == 0:
                self._condition.notify_all()

    def acquire_write(self) -> None:
        with self._condition:
            self._waiting_writers += 1
            acquired = False
            try:
                while self._writer_active or self._active_readers:
                    self._condition.wait()
                acquired = True
            finally:
                self._waiting_writers -= 1
                if not acquired:
                    # Wake readers held back by this writer
                    self._condition.notify_all()
            self._writer_active = True

    def release_write(self) -> None:
        with self._condition:
            if not self._writer_active:
                raise RuntimeError("release_write called without a matching acquire")
            self._writer_active = False
            self._condition.notify_all()

    @contextmanager
    def read(self) -> Iterator[None]:
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write(self) -> Iterator[None]:
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()
