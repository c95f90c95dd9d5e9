"""Swiss railway clock face.

The dial and its markers never move, so they are painted once per window size
into a cached surface. Each frame blits that surface and draws the three hands
on top, with a soft drop shadow underneath.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import pygame

from railclock.config import ClockOptions, parse_color
from railclock.config.options import ShapeOptions
from railclock.geometry import (BASE_SIZE, FaceTransform, Point, Quad,
                                make_quad, rotate)
from railclock.providers import ObservableProvider
from railclock.renderers.base import StatefulBaseRenderer
from railclock.state import ClockState
from railclock.utilities.env import Configuration
from railclock.utilities.logging import get_logger

logger = get_logger(__name__)

HOUR_MARKER_STEP = math.pi / 6
MINUTE_MARKER_STEP = math.pi / 30
MINUTE_MARKERS_PER_HOUR = 4


@dataclass(frozen=True, slots=True)
class ClockQuads:
    hour_marker: Quad
    minute_marker: Quad
    hour_hand: Quad
    minute_hand: Quad
    second_hand: Quad


def compute_quads(shape: ShapeOptions) -> ClockQuads:
    # Markers hang inwards from the rim: their "top" sits at marker_radius and
    # their "base" is pulled back above the centre by the marker height.
    return ClockQuads(
        hour_marker=make_quad(
            shape.hour_marker.width,
            shape.marker_radius,
            shape.hour_marker.width,
            shape.hour_marker.height - shape.marker_radius,
        ),
        minute_marker=make_quad(
            shape.minute_marker.width,
            shape.marker_radius,
            shape.minute_marker.width,
            shape.minute_marker.height - shape.marker_radius,
        ),
        hour_hand=make_quad(
            shape.hour_hand.top.width,
            shape.hour_hand.top.height,
            shape.hour_hand.base.width,
            shape.hour_hand.base.height,
        ),
        minute_hand=make_quad(
            shape.minute_hand.top.width,
            shape.minute_hand.top.height,
            shape.minute_hand.base.width,
            shape.minute_hand.base.height,
        ),
        second_hand=make_quad(
            shape.second_hand.width,
            shape.second_hand.top_height,
            shape.second_hand.width,
            shape.second_hand.base_height,
        ),
    )


@dataclass(frozen=True, slots=True)
class Palette:
    background: pygame.Color
    border: pygame.Color
    hour_marker: pygame.Color
    minute_marker: pygame.Color
    hour_hand: pygame.Color
    minute_hand: pygame.Color
    second_hand: pygame.Color
    shadow: pygame.Color

    @classmethod
    def from_options(cls, options: ClockOptions) -> "Palette":
        style = options.style
        return cls(
            background=parse_color(style.background),
            border=parse_color(style.border),
            hour_marker=parse_color(style.hour_marker),
            minute_marker=parse_color(style.minute_marker),
            hour_hand=parse_color(style.hour_hand),
            minute_hand=parse_color(style.minute_hand),
            second_hand=parse_color(style.second_hand),
            shadow=parse_color(style.shadow.color),
        )


def soften(surface: pygame.Surface, radius: float) -> pygame.Surface:
    """Cheap blur: shrink by roughly ``radius`` and scale back up."""
    if radius < 1:
        return surface
    width, height = surface.get_size()
    factor = 1.0 / (1.0 + radius)
    small = pygame.transform.smoothscale(
        surface, (max(1, int(width * factor)), max(1, int(height * factor)))
    )
    return pygame.transform.smoothscale(small, (width, height))


class ClockRenderer(StatefulBaseRenderer[ClockState]):
    def __init__(
        self,
        options: ClockOptions | None = None,
        builder: ObservableProvider[ClockState] | None = None,
        state: ClockState | None = None,
        shadows: bool | None = None,
    ) -> None:
        super().__init__(builder=builder, state=state)
        self.options = options or ClockOptions()
        self.palette = Palette.from_options(self.options)
        self.quads = compute_quads(self.options.shape)
        self.shadows = Configuration.shadows_enabled() if shadows is None else shadows
        self._transform: FaceTransform | None = None
        self._background: pygame.Surface | None = None

    @property
    def transform(self) -> FaceTransform:
        assert self._transform is not None, "background has not been prepared"
        return self._transform

    def initialize(self, window: pygame.Surface) -> None:
        self.prepare_background(window.get_size())
        super().initialize(window)

    def prepare_background(self, size: tuple[int, int]) -> pygame.Surface:
        width, height = size
        if (
            self._background is not None
            and self._transform is not None
            and (self._transform.width, self._transform.height) == (width, height)
        ):
            return self._background

        logger.info("Preparing clock background for %dx%d", width, height)
        self._transform = FaceTransform(
            width=width, height=height, margin=self.options.margin
        )
        self._background = self._render_background(self._transform)
        return self._background

    def _render_background(self, transform: FaceTransform) -> pygame.Surface:
        surface = pygame.Surface((transform.width, transform.height), pygame.SRCALPHA)
        center = transform.center
        radius = transform.length(BASE_SIZE / 2)
        border_width = max(1, round(transform.scale))
        pygame.draw.circle(surface, self.palette.background, center, radius)
        pygame.draw.circle(surface, self.palette.border, center, radius, border_width)

        for hour in range(12):
            angle = hour * HOUR_MARKER_STEP
            self._fill_quad(surface, self.quads.hour_marker, angle, self.palette.hour_marker)
            for step in range(1, MINUTE_MARKERS_PER_HOUR + 1):
                self._fill_quad(
                    surface,
                    self.quads.minute_marker,
                    angle + step * MINUTE_MARKER_STEP,
                    self.palette.minute_marker,
                )
        return surface

    def _fill_quad(
        self,
        surface: pygame.Surface,
        quad: Quad,
        angle: float,
        color: pygame.Color,
    ) -> None:
        pygame.draw.polygon(surface, color, self.transform.to_screen(quad.polygon(angle)))

    def _draw_hands(
        self,
        surface: pygame.Surface,
        state: ClockState,
        colors: tuple[pygame.Color, pygame.Color, pygame.Color],
    ) -> None:
        hour_color, minute_color, second_color = colors
        angles = state.angles
        self._fill_quad(surface, self.quads.hour_hand, angles.hours, hour_color)
        self._fill_quad(surface, self.quads.minute_hand, angles.minutes, minute_color)
        self._fill_quad(surface, self.quads.second_hand, angles.seconds, second_color)

        second_hand = self.options.shape.second_hand
        tip = rotate(Point(0.0, -second_hand.top_height), angles.seconds)
        pygame.draw.circle(
            surface,
            second_color,
            self.transform.point_to_screen(tip),
            self.transform.length(second_hand.top_radius),
        )

    def _draw_shadow(self, window: pygame.Surface, state: ClockState) -> None:
        shadow_style = self.options.style.shadow
        layer = pygame.Surface(window.get_size(), pygame.SRCALPHA)
        shadow = self.palette.shadow
        self._draw_hands(layer, state, (shadow, shadow, shadow))
        layer = soften(layer, shadow_style.blur)
        window.blit(layer, (shadow_style.offset_x, shadow_style.offset_y))

    def real_process(self, window: pygame.Surface) -> None:
        background = self.prepare_background(window.get_size())
        window.blit(background, (0, 0))

        state = self.state
        if self.shadows:
            self._draw_shadow(window, state)
        self._draw_hands(
            window,
            state,
            (self.palette.hour_hand, self.palette.minute_hand, self.palette.second_hand),
        )
