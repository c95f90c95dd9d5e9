"""Face-space geometry shared by the renderer.

Face space has its origin at the centre of the dial, y pointing down, and a
dial diameter of :data:`BASE_SIZE` units.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple

import numpy as np

BASE_SIZE = 100.0


class Point(NamedTuple):
    x: float
    y: float


def rotate(point: Point | tuple[float, float], angle: float) -> Point:
    x, y = point
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return Point(x * cos_a - y * sin_a, x * sin_a + y * cos_a)


def rotate_points(points: np.ndarray, angle: float) -> np.ndarray:
    """Rotate an ``(N, 2)`` array of points about the origin."""
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    matrix = np.array([[cos_a, sin_a], [-sin_a, cos_a]])
    return np.asarray(points, dtype=float) @ matrix


@dataclass(frozen=True, slots=True)
class Quad:
    """Trapezoid pointing at 12 o'clock, symmetric about the y axis."""

    top_left: Point
    bottom_right: Point

    def corners(self) -> np.ndarray:
        left, top = self.top_left
        right, bottom = self.bottom_right
        return np.array(
            [
                [left, top],
                [-left, top],
                [right, bottom],
                [-right, bottom],
            ],
            dtype=float,
        )

    def polygon(self, angle: float) -> np.ndarray:
        return rotate_points(self.corners(), angle)


def make_quad(
    top_width: float, top_height: float, base_width: float, base_height: float
) -> Quad:
    """Build a hand or marker outline.

    The narrow end is ``top_width`` wide and reaches ``top_height`` above the
    centre; the wide end is ``base_width`` wide and reaches ``base_height``
    below it. Negative heights move an edge to the other side of the centre,
    which is how the dial markers are placed out at the rim.
    """
    return Quad(
        top_left=Point(-top_width / 2, -top_height),
        bottom_right=Point(base_width / 2, base_height),
    )


@dataclass(frozen=True, slots=True)
class FaceTransform:
    """Maps face units onto a ``width`` x ``height`` pixel surface."""

    width: int
    height: int
    margin: float

    @property
    def scale(self) -> float:
        return min(self.width, self.height) / (BASE_SIZE / (1 - 2 * self.margin))

    @property
    def center(self) -> Point:
        return Point(self.width / 2, self.height / 2)

    def to_screen(self, points: np.ndarray) -> list[tuple[float, float]]:
        pixels = np.asarray(points, dtype=float) * self.scale + np.array(self.center)
        return [(float(x), float(y)) for x, y in pixels]

    def point_to_screen(self, point: Point | tuple[float, float]) -> tuple[float, float]:
        cx, cy = self.center
        return (cx + point[0] * self.scale, cy + point[1] * self.scale)

    def length(self, units: float) -> float:
        return units * self.scale
