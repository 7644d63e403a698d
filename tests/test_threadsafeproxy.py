import threading
from types import SimpleNamespace

import pytest

from ymcommon.threadsafeproxy import ThreadSafeProxy


def test_context_gives_wrapped_object():
    a = SimpleNamespace(i=9)
    tsp = ThreadSafeProxy(a)
    with tsp as obj:
        obj.i = 7
    assert tsp.call(lambda o: o.i) == 7
    assert a.i == 7


def test_lock_held_only_inside_context():
    lock = threading.Lock()
    tsp = ThreadSafeProxy([], lock)
    with tsp:
        assert lock.locked()
    assert not lock.locked()


def test_lock_held_during_call():
    lock = threading.Lock()
    tsp = ThreadSafeProxy(object(), lock)
    assert tsp.call(lambda _o: lock.locked()) is True
    assert not lock.locked()


def test_lock_released_on_exception():
    lock = threading.Lock()
    tsp = ThreadSafeProxy({}, lock)
    with pytest.raises(KeyError):
        tsp.call(lambda o: o["missing"])
    assert not lock.locked()


def test_concurrent_increments_are_not_lost():
    counter = SimpleNamespace(n=0)
    tsp = ThreadSafeProxy(counter)
    n_threads, n_iters = 8, 500

    def bump(o):
        current = o.n
        o.n = current + 1

    def work():
        for _ in range(n_iters):
            tsp.call(bump)

    threads = [threading.Thread(target=work) for _ in range(n_threads)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert counter.n == n_threads * n_iters