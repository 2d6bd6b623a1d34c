"""Independent per-defender wake scheduling.

Every defender owns a self-renewing timer: wait a randomly drawn delay, act,
then schedule its own next wake. Timers are never aligned to a shared tick, so
the order in which defenders act drifts from wake to wake.

Timers are created with ``loop.call_later`` (an asyncio event loop in
production). The handle table maps each defender index to its pending
``TimerHandle``; :meth:`ActorScheduler.cancel_all` cancels every handle and
drains the table, so no callback from a torn down session can fire.
"""

import logging
import random
from typing import Any, Callable, Dict, Optional, Protocol, Sequence

from gridiron_chase.types import DefenderIndex

logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class TimerLoop(Protocol):
    """The subset of ``asyncio.AbstractEventLoop`` the scheduler relies on."""

    def call_later(
        self, delay: float, callback: Callable[..., Any], *args: Any
    ) -> TimerHandle: ...


ActFn = Callable[[DefenderIndex], bool]
"""Wake callback. Returns True to keep the actor scheduled."""


class ActorScheduler:
    """Recurring, individually delayed wakes keyed by defender index.

    Attributes:
        generation (int): Incremented by every :meth:`cancel_all`. Wakes
            carry the generation they were scheduled in and are dropped if it
            no longer matches.
    """

    def __init__(
        self,
        loop: TimerLoop,
        act: ActFn,
        delays: Sequence[float],
        rng: Optional[random.Random] = None,
    ) -> None:
        if not delays:
            raise ValueError("At least one delay is required")
        self._loop = loop
        self._act = act
        self._delays = tuple(delays)
        self._rng = rng if rng is not None else random.Random()
        self._handles: Dict[DefenderIndex, TimerHandle] = {}
        self.generation = 0

    @property
    def pending(self) -> int:
        """Number of wakes currently scheduled."""
        return len(self._handles)

    def is_active(self, index: DefenderIndex) -> bool:
        return index in self._handles

    def start(self, count: int) -> None:
        """Schedule the first wake of actors ``0 .. count - 1``."""
        for index in range(count):
            self.schedule(index)

    def schedule(self, index: DefenderIndex) -> None:
        """(Re)schedule ``index`` after a freshly drawn delay."""
        previous = self._handles.pop(index, None)
        if previous is not None:
            previous.cancel()
        delay = self._rng.choice(self._delays)
        self._handles[index] = self._loop.call_later(
            delay, self._wake, index, self.generation
        )
        logger.debug(f"Actor {index} wakes in {delay:.2f}s")

    def cancel_all(self) -> None:
        """Cancel every pending wake and forget all handles."""
        for handle in self._handles.values():
            handle.cancel()
        if self._handles:
            logger.debug(f"Cancelled {len(self._handles)} pending wakes")
        self._handles.clear()
        self.generation += 1

    def _wake(self, index: DefenderIndex, generation: int) -> None:
        if generation != self.generation:
            return
        self._handles.pop(index, None)

        try:
            keep_going = self._act(index)
        except Exception:
            logger.exception(f"Actor {index} failed; it will not be rescheduled")
            return

        # act() may have torn down the session (e.g. a listener calling reset)
        if keep_going and generation == self.generation:
            self.schedule(index)
