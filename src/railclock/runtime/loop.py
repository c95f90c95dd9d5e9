from __future__ import annotations

from datetime import datetime
from typing import Callable

import pygame
from reactivex.subject import Subject

from railclock.config import ClockOptions, parse_color
from railclock.providers import ClockStateProvider
from railclock.renderers import ClockRenderer
from railclock.runtime.event_handler import PygameEventHandler
from railclock.utilities.logging import get_logger

logger = get_logger(__name__)

WINDOW_CAPTION = "railclock"


class ClockLoop:
    """Owns the display and drives the clock renderer once per frame.

    Every iteration publishes a tick; the state provider answers it with the
    hand positions for the current wall-clock time.
    """

    def __init__(
        self,
        options: ClockOptions | None = None,
        renderer: ClockRenderer | None = None,
        now: Callable[[], datetime] = datetime.now,
        event_handler: PygameEventHandler | None = None,
    ) -> None:
        self.options = options or ClockOptions()
        self.frame_tick: Subject[int] = Subject()
        self.renderer = renderer or ClockRenderer(
            options=self.options,
            builder=ClockStateProvider(
                self.options.behavior, ticks=self.frame_tick, now=now
            ),
        )
        self.event_handler = event_handler or PygameEventHandler()
        self.fill_color = parse_color(self.options.style.background)
        self.screen: pygame.Surface | None = None
        self.clock: pygame.time.Clock | None = None
        self.frame = 0
        self.running = False

    def initialize(self, screen: pygame.Surface | None = None) -> None:
        """Set up the drawing surface.

        Without ``screen`` a window of ``options.size`` pixels is opened.
        """
        pygame.init()
        if screen is None:
            screen = pygame.display.set_mode((self.options.size, self.options.size))
            pygame.display.set_caption(WINDOW_CAPTION)
        self.screen = screen
        self.clock = pygame.time.Clock()
        self.renderer.initialize(screen)

    def render_frame(self) -> pygame.Surface:
        if self.screen is None:
            raise RuntimeError("ClockLoop screen is not initialized")
        self.frame_tick.on_next(self.frame)
        self.frame += 1
        self.screen.fill(self.fill_color)
        self.renderer.process(self.screen)
        return self.screen

    def run(self, max_frames: int | None = None) -> None:
        logger.info("Starting clock at %d fps", self.options.fps)
        if self.screen is None:
            self.initialize()
        if self.clock is None:
            raise RuntimeError("ClockLoop failed to initialize the frame clock")

        self.running = True
        try:
            while self.running:
                self.running = self.event_handler.handle_events()
                if not self.running:
                    break
                self.render_frame()
                if pygame.display.get_surface() is self.screen:
                    pygame.display.flip()
                if max_frames is not None and self.frame >= max_frames:
                    break
                self.clock.tick(self.options.fps)
        finally:
            logger.info("Stopping clock after %d frames", self.frame)
            self.renderer.reset()
            pygame.quit()
