from __future__ import annotations

import time
from typing import Generic, TypeVar

import pygame
from reactivex.disposable import Disposable

from railclock.providers import ObservableProvider, StaticStateProvider
from railclock.utilities.logging import get_logger

logger = get_logger(__name__)

StateT = TypeVar("StateT")


class StatefulBaseRenderer(Generic[StateT]):
    """Renderer drawing from the latest state published by a provider."""

    def __init__(
        self,
        builder: ObservableProvider[StateT] | None = None,
        state: StateT | None = None,
    ) -> None:
        if builder is not None and state is not None:
            raise ValueError("StatefulBaseRenderer accepts a builder or state, not both")

        if builder is None and state is not None:
            builder = StaticStateProvider(state)

        self.builder = builder
        self.initialized = False
        self._state: StateT | None = None
        self._subscription: Disposable | None = None

    @property
    def name(self) -> str:
        return self.__class__.__name__

    def is_initialized(self) -> bool:
        return self.initialized

    @property
    def state(self) -> StateT:
        assert self._state is not None, f"{self.name} has no state yet"
        return self._state

    def has_state(self) -> bool:
        return self._state is not None

    def set_state(self, state: StateT) -> None:
        self._state = state

    def initialize(self, window: pygame.Surface) -> None:
        if self.builder is None:
            raise ValueError(f"{self.name} requires a builder or an initial state")
        self._subscription = self.builder.observable().subscribe(
            on_next=self.set_state
        )
        self.initialized = True

    def process(self, window: pygame.Surface) -> None:
        if not self.is_initialized():
            self.initialize(window)
        if not self.has_state():
            logger.debug("renderer.skip", extra={"renderer": self.name})
            return

        start_ns = time.perf_counter_ns()
        self.real_process(window)
        duration_ms = (time.perf_counter_ns() - start_ns) / 1_000_000
        logger.debug(
            "renderer.frame",
            extra={
                "renderer": self.name,
                "duration_ms": duration_ms,
            },
        )

    def real_process(self, window: pygame.Surface) -> None:
        raise NotImplementedError("Please implement")

    def reset(self) -> None:
        if self._subscription is not None:
            self._subscription.dispose()
            self._subscription = None
        self._state = None
        self.initialized = False
