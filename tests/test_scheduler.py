import logging
import threading
import time

import pytest

from beginner_tutorials.message_state import MessageState
from beginner_tutorials.scheduler import OutgoingMessage, TalkerScheduler, TalkerState
from beginner_tutorials.transform import TransformBroadcaster

LOGGER = 'test.scheduler'


class Recorder:
    def __init__(self):
        self.published = []
        self.transforms = []


def make_scheduler(frequency=10, message='Written By Aman Virmani', clock=None):
    recorder = Recorder()
    state = MessageState(message)
    scheduler = TalkerScheduler(
        state,
        recorder.published.append,
        TransformBroadcaster(recorder.transforms.append),
        requested_frequency=frequency,
        log=logging.getLogger(LOGGER),
        clock=clock or (lambda: 42.0),
    )
    return scheduler, state, recorder


def test_lifecycle():
    scheduler, _, _ = make_scheduler()
    assert scheduler.state is TalkerState.INITIALIZING

    scheduler.start()
    assert scheduler.state is TalkerState.RUNNING
    assert scheduler.count == 0

    scheduler.stop()
    assert scheduler.state is TalkerState.STOPPED


def test_no_ticks_before_start():
    scheduler, _, recorder = make_scheduler()
    assert scheduler.tick() is None
    assert recorder.published == []


def test_first_tick_and_mutation():
    scheduler, state, recorder = make_scheduler()
    scheduler.start()

    first = scheduler.tick()
    assert first == OutgoingMessage(0, 'Written By Aman Virmani')
    assert first.data == '0 Written By Aman Virmani'

    state.write('hello')
    second = scheduler.tick()
    assert second.data == '1 hello'
    assert recorder.published == [first, second]


def test_sequence_is_contiguous():
    scheduler, _, recorder = make_scheduler()
    scheduler.start()
    for _ in range(100):
        scheduler.tick()

    assert [m.sequence for m in recorder.published] == list(range(100))
    assert scheduler.count == 100


def test_transform_per_tick_ignores_message():
    times = iter([1.0, 2.0, 3.0])
    scheduler, state, recorder = make_scheduler(clock=lambda: next(times))
    scheduler.start()
    for text in ('a', '', 'x' * 1000):
        state.write(text)
        scheduler.tick()

    assert [t.timestamp for t in recorder.transforms] == [1.0, 2.0, 3.0]
    assert {(t.translation, t.parent_frame, t.child_frame) for t in recorder.transforms} == {
        ((0.0, 2.0, 0.0), 'world', 'talk')
    }


def test_stopped_is_terminal():
    scheduler, _, recorder = make_scheduler()
    scheduler.start()
    scheduler.tick()
    scheduler.stop()

    assert scheduler.tick() is None
    scheduler.start()
    assert scheduler.state is TalkerState.STOPPED
    assert len(recorder.published) == 1
    assert scheduler.count == 1


@pytest.mark.parametrize('requested, effective', [(25, 25), (0, 10), (-5, 10)])
def test_start_resolves_frequency(requested, effective):
    scheduler, _, _ = make_scheduler(frequency=requested)
    assert scheduler.start().effective == effective
    assert scheduler.frequency == effective


def test_negative_frequency_notices_precede_first_tick(caplog):
    caplog.set_level(logging.DEBUG, logger=LOGGER)
    scheduler, _, recorder = make_scheduler(frequency=-5)

    shutdown = threading.Event()
    shutdown.set()
    scheduler.run(shutdown)

    levels = [r.levelno for r in caplog.records]
    messages = [r.getMessage() for r in caplog.records]
    assert levels[:3] == [logging.CRITICAL, logging.WARNING, logging.INFO]
    assert messages[2] == '0 Written By Aman Virmani'
    assert scheduler.frequency == 10
    assert len(recorder.published) == 1
    assert scheduler.state is TalkerState.STOPPED


def test_run_until_shutdown():
    scheduler, state, recorder = make_scheduler(frequency=200)
    shutdown = threading.Event()

    thread = threading.Thread(target=scheduler.run, args=(shutdown,))
    thread.start()
    deadline = time.monotonic() + 2.0
    while len(recorder.published) < 3 and time.monotonic() < deadline:
        shutdown.wait(0.005)
    state.write('changed')
    while not (recorder.published and recorder.published[-1].text == 'changed') and time.monotonic() < deadline:
        shutdown.wait(0.005)
    shutdown.set()
    thread.join(timeout=2.0)

    assert not thread.is_alive()
    assert scheduler.state is TalkerState.STOPPED
    sequences = [m.sequence for m in recorder.published]
    assert sequences == list(range(len(sequences)))
    assert len(recorder.transforms) == len(recorder.published)
    assert recorder.published[-1].text == 'changed'

    count = scheduler.count
    shutdown.wait(0.05)
    assert scheduler.count == count


def test_run_after_stop_returns_without_ticking():
    scheduler, _, recorder = make_scheduler()
    scheduler.stop()

    scheduler.run(threading.Event())

    assert scheduler.state is TalkerState.STOPPED
    assert scheduler.policy is None
    assert recorder.published == []
    assert recorder.transforms == []
