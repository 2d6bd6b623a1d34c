"""Feedback events and the observer bus.

Presentation layers (sound effects, flashing the tackle cell, status banners)
subscribe to :class:`EventBus`. Events are derived from a pair of consecutive
states by :func:`transition_events`, so the state machine never depends on
its observers: notifications flow one way, and a subscriber that raises is
logged and ignored.
"""

import logging
from collections import defaultdict
from enum import StrEnum, auto
from typing import Any, Callable, DefaultDict, List, Tuple

from gridiron_chase.state import State
from gridiron_chase.types import GameStatus

logger = logging.getLogger(__name__)


class GameEvent(StrEnum):
    """Fire-and-forget notifications emitted by a session."""

    MOVED = auto()
    TOUCHDOWN = auto()
    TACKLED = auto()
    COLLISION = auto()
    RESET = auto()


Listener = Callable[[GameEvent, Any], None]


def transition_events(prev: State, new: State) -> List[Tuple[GameEvent, Any]]:
    """Events implied by the transition ``prev -> new``.

    * ``MOVED`` (payload: new player cell) when the player changed cell.
    * ``TOUCHDOWN`` / ``TACKLED`` (payload: the new ``State``) on entering that
        status.
    * ``COLLISION`` (payload: tackle cell) once, alongside ``TACKLED``.
    """
    events: List[Tuple[GameEvent, Any]] = []
    if new.player != prev.player:
        events.append((GameEvent.MOVED, new.player))
    if new.status != prev.status:
        if new.status == GameStatus.TOUCHDOWN:
            events.append((GameEvent.TOUCHDOWN, new))
        elif new.status == GameStatus.TACKLED:
            events.append((GameEvent.TACKLED, new))
            events.append((GameEvent.COLLISION, new.collision))
    return events


class EventBus:
    """Minimal synchronous publish/subscribe hub."""

    def __init__(self) -> None:
        self._listeners: DefaultDict[GameEvent, List[Listener]] = defaultdict(list)

    def subscribe(self, event: GameEvent, listener: Listener) -> None:
        self._listeners[event].append(listener)

    def unsubscribe(self, event: GameEvent, listener: Listener) -> None:
        """Remove ``listener``; unknown listeners are ignored."""
        try:
            self._listeners[event].remove(listener)
        except ValueError:
            pass

    def publish(self, event: GameEvent, payload: Any = None) -> None:
        """Deliver ``event`` to every subscriber.

        Subscriber failures never propagate: they are logged and the remaining
        subscribers still run.
        """
        for listener in list(self._listeners[event]):
            try:
                listener(event, payload)
            except Exception:
                logger.exception(f"Listener for {event} failed (ignored)")
