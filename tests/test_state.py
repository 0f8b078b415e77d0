import threading

from talker import config as C
from talker.core import SharedState


def test_initial_value_is_default(shared):
    assert shared.read() == C.DEFAULT_MESSAGE


def test_write_replaces_value(shared):
    shared.write("hello")
    assert shared.read() == "hello"
    shared.write("")
    assert shared.read() == ""


def test_states_are_independent():
    a, b = SharedState(), SharedState()
    a.write("only a")
    assert b.read() == C.DEFAULT_MESSAGE


def test_concurrent_writes_leave_one_of_the_written_values(shared):
    values = [f"value-{i}-" + "x" * (i * 37) for i in range(32)]
    barrier = threading.Barrier(len(values))

    def writer(v):
        barrier.wait()
        shared.write(v)

    threads = [threading.Thread(target=writer, args=(v,)) for v in values]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert shared.read() in values


def test_reads_never_see_values_that_were_not_written(shared):
    values = [c * 4096 for c in "abcdefgh"]
    allowed = set(values) | {C.DEFAULT_MESSAGE}
    stop = threading.Event()
    seen = []

    def reader():
        while not stop.is_set():
            seen.append(shared.read())

    def writer(v):
        for _ in range(200):
            shared.write(v)

    readers = [threading.Thread(target=reader) for _ in range(4)]
    writers = [threading.Thread(target=writer, args=(v,)) for v in values]
    for t in readers + writers:
        t.start()
    for t in writers:
        t.join()
    stop.set()
    for t in readers:
        t.join()

    assert seen
    assert set(seen) <= allowed
