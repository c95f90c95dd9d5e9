from __future__ import annotations

from abc import abstractmethod
from datetime import datetime
from typing import Any, Callable, Generic, TypeVar

import reactivex
from reactivex import operators as ops

from railclock.motion import HandBehaviors
from railclock.state import ClockState

T = TypeVar("T")


class ObservableProvider(Generic[T]):
    @abstractmethod
    def observable(self) -> reactivex.Observable[T]:
        raise NotImplementedError("")


class StaticStateProvider(ObservableProvider[T]):
    def __init__(self, state: T) -> None:
        self._state = state

    @property
    def state(self) -> T:
        return self._state

    def observable(self) -> reactivex.Observable[T]:
        return reactivex.just(self._state).pipe(ops.share())


class ClockStateProvider(ObservableProvider[ClockState]):
    """Publish a fresh :class:`ClockState` for every frame tick.

    Each state is computed from ``now()`` at the moment of the tick, so late or
    dropped ticks never accumulate error.
    """

    def __init__(
        self,
        behaviors: HandBehaviors,
        ticks: reactivex.Observable[Any],
        now: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._behaviors = behaviors
        self._ticks = ticks
        self._now = now

    def state_at(self, moment: datetime) -> ClockState:
        return ClockState.at(moment, self._behaviors)

    def observable(self) -> reactivex.Observable[ClockState]:
        return self._ticks.pipe(
            ops.map(lambda _: self.state_at(self._now())),
            ops.share(),
        )
