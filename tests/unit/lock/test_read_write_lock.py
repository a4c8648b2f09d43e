import threading
import time
import pytest
from pytest_mock import MockerFixture

from todo_service.lock.service import ReadWriteLock

TIMEOUT = 5


@pytest.fixture
def lock() -> ReadWriteLock:
    return ReadWriteLock()


def test_readers_share_the_lock(lock: ReadWriteLock) -> None:
    with lock.read():
        with lock.read():
            assert lock.active_readers == 2
    assert lock.active_readers == 0


def test_write_sets_writer_active(lock: ReadWriteLock) -> None:
    with lock.write():
        assert lock.writer_active is True
    assert lock.writer_active is False


def test_write_released_after_exception(lock: ReadWriteLock) -> None:
    with pytest.raises(ValueError):
        with lock.write():
            raise ValueError("boom")

    assert lock.writer_active is False
    with lock.read():
        assert lock.active_readers == 1


def test_release_without_acquire(lock: ReadWriteLock) -> None:
    with pytest.raises(RuntimeError):
        lock.release_read()
    with pytest.raises(RuntimeError):
        lock.release_write()


def test_writer_waits_for_readers(lock: ReadWriteLock) -> None:
    writer_done = threading.Event()

    def write() -> None:
        with lock.write():
            writer_done.set()

    lock.acquire_read()
    writer = threading.Thread(target=write)
    writer.start()

    assert not writer_done.wait(0.1)

    lock.release_read()
    writer.join(TIMEOUT)
    assert writer_done.is_set()


def test_reader_waits_for_writer(lock: ReadWriteLock) -> None:
    reader_done = threading.Event()

    def read() -> None:
        with lock.read():
            reader_done.set()

    lock.acquire_write()
    reader = threading.Thread(target=read)
    reader.start()

    assert not reader_done.wait(0.1)

    lock.release_write()
    reader.join(TIMEOUT)
    assert reader_done.is_set()


def test_waiting_writer_blocks_new_readers(lock: ReadWriteLock) -> None:
    order: list[str] = []
    writer_waiting = threading.Event()

    def write() -> None:
        writer_waiting.set()
        with lock.write():
            order.append("writer")

    def read() -> None:
        with lock.read():
            order.append("reader")

    lock.acquire_read()
    writer = threading.Thread(target=write)
    writer.start()
    writer_waiting.wait(TIMEOUT)
    while not lock._waiting_writers:
        time.sleep(0.001)

    reader = threading.Thread(target=read)
    reader.start()
    reader.join(0.1)
    assert order == []

    lock.release_read()
    writer.join(TIMEOUT)
    reader.join(TIMEOUT)

    assert order == ["writer", "reader"]


def test_interrupted_writer_wakes_readers(
    lock: ReadWriteLock, mocker: MockerFixture
) -> None:
    mocker.patch.object(lock._condition, "wait", side_effect=KeyboardInterrupt)
    notify_all = mocker.spy(lock._condition, "notify_all")

    lock.acquire_read()
    with pytest.raises(KeyboardInterrupt):
        lock.acquire_write()

    notify_all.assert_called_once_with()
    assert lock._waiting_writers == 0
    assert lock.writer_active is False
    lock.release_read()
