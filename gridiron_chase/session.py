"""Session controller.

A :class:`Session` owns the current :class:`~gridiron_chase.state.State`, the
random source, the :class:`~gridiron_chase.scheduler.ActorScheduler` driving
the defenders, and the :class:`~gridiron_chase.events.EventBus` feeding the
presentation layer.

All state changes go through the pure reducers in :mod:`gridiron_chase.step`.
Defender wakes read ``self.state`` at wake time, never a copy captured at
scheduling time. Since the event loop runs each callback to completion, the
read-modify-write of the state inside one callback cannot interleave with
another.

Typical use inside a running asyncio loop::

    session = Session(seed=7)
    session.subscribe(GameEvent.TACKLED, play_whistle)
    session.handle(Action.RIGHT)
    ...
    session.close()
"""

import asyncio
import logging
import random
from typing import Any, Optional

from gridiron_chase.actions import MOVE_ACTIONS, Action
from gridiron_chase.config import DEFAULT_CONFIG, GameConfig
from gridiron_chase.events import EventBus, GameEvent, Listener, transition_events
from gridiron_chase.levels.spawn import new_state
from gridiron_chase.scheduler import ActorScheduler, TimerLoop
from gridiron_chase.state import Snapshot, State
from gridiron_chase.step import defender_step, step
from gridiron_chase.systems.defender import defender_policy
from gridiron_chase.types import DefenderIndex, GameStatus, PolicyFn
from gridiron_chase.utils.terminal import is_playing, is_terminal_state

logger = logging.getLogger(__name__)


class Session:
    """One game at a time, with reset and teardown.

    Args:
        config (GameConfig | None): Session parameters; defaults to
            :data:`~gridiron_chase.config.DEFAULT_CONFIG`.
        loop (TimerLoop | None): Timer source. Defaults to the running asyncio
            loop, so constructing a session without one requires being inside
            a coroutine.
        rng (random.Random | None): Shared random source for spawning, chase
            decisions and wake delays.
        seed (int | None): Seed for a new ``random.Random`` when ``rng`` is
            not given.
        policy (PolicyFn): Defender decision function.

    The first session starts immediately: defenders are spawned and their
    wakes scheduled on construction.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        loop: Optional[TimerLoop] = None,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        policy: PolicyFn = defender_policy,
    ) -> None:
        self.config = config if config is not None else DEFAULT_CONFIG
        self._loop: TimerLoop = loop if loop is not None else asyncio.get_running_loop()
        self._rng = rng if rng is not None else random.Random(seed)
        self._policy = policy
        self.events = EventBus()
        self.scheduler = ActorScheduler(
            self._loop, self._defender_wake, self.config.defender_delays, self._rng
        )
        self.closed = False
        self.state: State = self._start()

    @property
    def status(self) -> GameStatus:
        return self.state.status

    def snapshot(self) -> Snapshot:
        return self.state.snapshot()

    def subscribe(self, event: GameEvent, listener: Listener) -> None:
        self.events.subscribe(event, listener)

    def unsubscribe(self, event: GameEvent, listener: Listener) -> None:
        self.events.unsubscribe(event, listener)

    def _start(self) -> State:
        self.scheduler.cancel_all()
        state = new_state(self.config, self._rng)
        self.state = state
        self.scheduler.start(len(state.defenders))
        logger.info(
            f"New session: player at {state.player}, "
            f"{len(state.defenders)} defenders"
        )
        return state

    def reset(self) -> None:
        """Replace the current session wholesale.

        Pending wakes of the previous session are cancelled before any new
        entity exists, so none of them can touch the new state.
        """
        self.closed = False
        self._start()
        self.events.publish(GameEvent.RESET, self.state)

    def close(self) -> None:
        """Tear down: cancel every pending wake. Idempotent."""
        self.scheduler.cancel_all()
        self.closed = True

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def handle(self, action: Action) -> bool:
        """Apply one boundary command.

        Movement is accepted only while ``PLAYING``; ``RESET`` only once the
        session is terminal. Everything is rejected after :meth:`close`.

        Returns:
            bool: Whether the command was accepted.
        """
        if self.closed:
            return False
        if action == Action.RESET:
            if not is_terminal_state(self.state):
                return False
            self.reset()
            return True
        if action not in MOVE_ACTIONS or not is_playing(self.state):
            logger.debug(f"Ignoring {action} while {self.state.status}")
            return False

        self._apply(step(self.state, action))
        return True

    def _defender_wake(self, index: DefenderIndex) -> bool:
        """Scheduler callback; returns whether defender ``index`` keeps going."""
        if not is_playing(self.state) or index >= len(self.state.defenders):
            return False
        self._apply(defender_step(self.state, index, self._rng, self._policy))
        return is_playing(self.state)

    def _apply(self, next_state: State) -> None:
        prev, self.state = self.state, next_state
        if is_terminal_state(next_state) and not is_terminal_state(prev):
            logger.info(f"Session over: {next_state.status} at {next_state.player}")
            self.scheduler.cancel_all()
        for event, payload in transition_events(prev, next_state):
            # A listener may have reset the session
            if self.state is not next_state:
                break
            self.events.publish(event, payload)
