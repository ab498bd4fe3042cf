import threading

import pytest

from counter_service.core.errors import CounterPoisonedError
from counter_service.services import counter as counter_module
from counter_service.services.counter import COUNTER_MAX, CounterStore


def test_starts_at_zero():
    assert CounterStore().read() == 0


def test_increment_returns_new_value():
    store = CounterStore()
    assert store.increment(5) == 5
    assert store.increment(0) == 5
    assert store.read() == 5


def test_increment_saturates_at_maximum():
    store = CounterStore(maximum=10)
    assert store.increment(7) == 7
    assert store.increment(7) == 10
    assert store.read() == 10


def test_default_maximum_is_u32():
    store = CounterStore(initial=COUNTER_MAX - 1)
    assert store.maximum == 2**32 - 1
    assert store.increment(COUNTER_MAX) == COUNTER_MAX


def test_negative_increment_rejected():
    store = CounterStore()
    with pytest.raises(ValueError):
        store.increment(-1)
    assert store.read() == 0
    assert not store.poisoned


@pytest.mark.parametrize("initial", [-1, 11])
def test_initial_value_out_of_range(initial):
    with pytest.raises(ValueError):
        CounterStore(initial=initial, maximum=10)


def test_failed_critical_section_poisons_store():
    store = CounterStore()
    store.increment(3)

    with pytest.raises(KeyError):
        with store._guard():
            raise KeyError("boom")

    assert store.poisoned
    with pytest.raises(CounterPoisonedError):
        store.read()
    with pytest.raises(CounterPoisonedError):
        store.increment(1)


def test_lock_released_after_poisoning():
    store = CounterStore()
    with pytest.raises(RuntimeError):
        with store._guard():
            raise RuntimeError("boom")

    # A second failure must raise instead of blocking on a held lock
    with pytest.raises(CounterPoisonedError):
        store.read()
    assert not store._lock.locked()


def test_concurrent_increments_are_not_lost():
    store = CounterStore()
    threads_count = 16
    per_thread = 500
    start = threading.Barrier(threads_count)

    def worker():
        start.wait()
        for _ in range(per_thread):
            store.increment(1)

    threads = [threading.Thread(target=worker) for _ in range(threads_count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert store.read() == threads_count * per_thread


def test_interrupted_increment_poisons_store(monkeypatch):
    store = CounterStore()
    store.increment(2)

    def interrupted(*args):
        raise KeyboardInterrupt

    # Shadow the builtin used inside the increment critical section
    monkeypatch.setattr(counter_module, "min", interrupted, raising=False)
    with pytest.raises(KeyboardInterrupt):
        store.increment(1)
    monkeypatch.undo()

    assert store.poisoned
    assert not store._lock.locked()
    with pytest.raises(CounterPoisonedError):
        store.read()
