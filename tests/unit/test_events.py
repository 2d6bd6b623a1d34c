import logging
from dataclasses import replace

import pytest

from gridiron_chase.components import Position
from gridiron_chase.events import EventBus, GameEvent, transition_events
from gridiron_chase.types import GameStatus
from tests.test_utils import make_state


def test_move_only_emits_moved() -> None:
    prev = make_state(player=(2, 0))
    nxt = replace(prev, player=Position(2, 1))
    assert transition_events(prev, nxt) == [(GameEvent.MOVED, Position(2, 1))]


def test_no_events_without_change() -> None:
    state = make_state()
    assert transition_events(state, state) == []


def test_tackle_emits_tackled_and_collision_once() -> None:
    prev = make_state(player=(2, 1), defenders=[(2, 2)])
    nxt = replace(
        prev,
        player=Position(2, 2),
        status=GameStatus.TACKLED,
        collision=Position(2, 2),
    )
    events = transition_events(prev, nxt)
    assert [e for e, _ in events] == [
        GameEvent.MOVED,
        GameEvent.TACKLED,
        GameEvent.COLLISION,
    ]
    assert events[-1][1] == Position(2, 2)
    # Already terminal: nothing new
    assert transition_events(nxt, nxt) == []


def test_touchdown_emits_touchdown() -> None:
    prev = make_state(player=(3, 8))
    nxt = replace(prev, player=Position(3, 9), status=GameStatus.TOUCHDOWN)
    assert [e for e, _ in transition_events(prev, nxt)] == [
        GameEvent.MOVED,
        GameEvent.TOUCHDOWN,
    ]


def test_bus_swallows_listener_failures(caplog: pytest.LogCaptureFixture) -> None:
    bus = EventBus()
    received: list[tuple[GameEvent, object]] = []

    def broken(event: GameEvent, payload: object) -> None:
        raise RuntimeError("speaker unplugged")

    bus.subscribe(GameEvent.TACKLED, broken)
    bus.subscribe(GameEvent.TACKLED, lambda e, p: received.append((e, p)))

    with caplog.at_level(logging.ERROR, logger="gridiron_chase.events"):
        bus.publish(GameEvent.TACKLED, "payload")

    assert received == [(GameEvent.TACKLED, "payload")]
    assert "failed" in caplog.text


def test_unsubscribe() -> None:
    bus = EventBus()
    received: list[GameEvent] = []

    def listener(event: GameEvent, payload: object) -> None:
        received.append(event)

    bus.subscribe(GameEvent.MOVED, listener)
    bus.unsubscribe(GameEvent.MOVED, listener)
    bus.unsubscribe(GameEvent.MOVED, listener)  # unknown: ignored
    bus.publish(GameEvent.MOVED)
    assert received == []
