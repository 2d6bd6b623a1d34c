import logging
import random

import pytest

from gridiron_chase.scheduler import ActorScheduler
from tests.test_utils import ManualLoop


def make_scheduler(act, delays=(1.0, 1.5), seed=0):
    loop = ManualLoop()
    scheduler = ActorScheduler(loop, act, delays, random.Random(seed))
    return loop, scheduler


def test_start_schedules_one_wake_per_actor() -> None:
    loop, scheduler = make_scheduler(lambda i: True)
    scheduler.start(4)
    assert scheduler.pending == 4
    assert len(loop.pending) == 4
    assert all(h.when in (1.0, 1.5) for h in loop.pending)


def test_actors_renew_themselves_independently() -> None:
    wakes: list[tuple[float, int]] = []
    loop, scheduler = make_scheduler(lambda i: True)
    scheduler._act = lambda i: wakes.append((loop.time, i)) or True
    scheduler.start(3)

    loop.advance(10.0)

    for index in range(3):
        times = [t for t, i in wakes if i == index]
        gaps = {round(b - a, 6) for a, b in zip([0.0] + times, times)}
        assert gaps <= {1.0, 1.5}
        assert len(times) >= 6
    assert scheduler.pending == 3


def test_delays_are_drawn_per_actor() -> None:
    loop, scheduler = make_scheduler(lambda i: True, seed=3)
    scheduler.start(40)
    assert {h.when for h in loop.pending} == {1.0, 1.5}


def test_returning_false_stops_actor() -> None:
    calls: list[int] = []

    def act(index: int) -> bool:
        calls.append(index)
        return index != 1

    loop, scheduler = make_scheduler(act)
    scheduler.start(2)
    loop.advance(1.5)
    assert sorted(calls) == [0, 1]
    assert scheduler.is_active(0)
    assert not scheduler.is_active(1)


def test_cancel_all_prevents_every_wake() -> None:
    calls: list[int] = []
    loop, scheduler = make_scheduler(lambda i: calls.append(i) or True)
    scheduler.start(5)
    handles = list(loop.pending)

    scheduler.cancel_all()
    loop.advance(5.0)

    assert calls == []
    assert scheduler.pending == 0
    assert all(h.cancelled for h in handles)
    assert loop.fired == 0


def test_stale_generation_wake_is_dropped() -> None:
    calls: list[int] = []
    loop, scheduler = make_scheduler(lambda i: calls.append(i) or True)
    scheduler.start(1)
    (handle,) = loop.pending
    scheduler.cancel_all()

    # Fire the old callback anyway, as if cancellation raced it
    handle.callback(*handle.args)
    assert calls == []
    assert scheduler.pending == 0


def test_failing_actor_is_logged_and_stopped(caplog: pytest.LogCaptureFixture) -> None:
    def act(index: int) -> bool:
        if index == 0:
            raise RuntimeError("boom")
        return True

    loop, scheduler = make_scheduler(act)
    scheduler.start(2)
    with caplog.at_level(logging.ERROR, logger="gridiron_chase.scheduler"):
        loop.advance(1.5)

    assert "Actor 0 failed" in caplog.text
    assert not scheduler.is_active(0)
    assert scheduler.is_active(1)


def test_restart_from_inside_a_wake_does_not_duplicate() -> None:
    loop, scheduler = make_scheduler(lambda i: True)

    def act(index: int) -> bool:
        scheduler.cancel_all()
        scheduler.start(2)
        return True

    scheduler._act = act
    scheduler.start(2)
    loop.advance(1.0)
    assert scheduler.pending == 2
    assert len(loop.pending) == 2


def test_empty_delays_rejected() -> None:
    with pytest.raises(ValueError):
        ActorScheduler(ManualLoop(), lambda i: True, ())
