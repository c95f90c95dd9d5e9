"""Closed-form hand positions.

All angles are in radians, measured clockwise from 12 o'clock (screen
coordinates, y pointing down). Each function depends only on its arguments, so
callers recompute from the absolute time on every frame.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from railclock.motion.behavior import (HandBehaviors, HourHandBehavior,
                                       MinuteHandBehavior, SecondHandBehavior)
from railclock.motion.time_sample import TimeSample

MINUTE_STEP = math.pi / 30
HOUR_STEP = math.pi / 360  # one minute's worth of hour hand travel


@dataclass(frozen=True, slots=True)
class HandAngles:
    hours: float
    minutes: float
    seconds: float


def decay_rate(decay: float, decay_seconds: float) -> float:
    """Return ``λ`` such that ``exp(λ * decay_seconds) == decay``."""
    return math.log(decay) / decay_seconds


def seconds_angle(t: float, behavior: SecondHandBehavior) -> float:
    cycle = behavior.cycle
    v = 2 * math.pi / cycle
    rate = decay_rate(behavior.decay, behavior.decay_seconds)
    if t >= cycle:
        # Resting on the mark. The sweep branch does not reach exactly 2π at
        # ``cycle``, so the hand snaps onto the mark here.
        x = t - cycle
        return v * x * math.exp(rate * x)
    return v * t * (1 - math.exp(rate * t))


def minutes_angle(t: float, behavior: MinuteHandBehavior, minute: int) -> float:
    rate = decay_rate(behavior.decay, behavior.decay_seconds)
    omega = 2 * math.pi * behavior.frequency
    wt = omega * t
    wobble = math.exp(rate * t) * ((rate / omega) * math.sin(wt) - math.cos(wt))
    return MINUTE_STEP * minute + MINUTE_STEP * wobble


def hours_angle(
    t: float, behavior: HourHandBehavior, minute: int, hour: int
) -> float:
    rate = decay_rate(behavior.decay, behavior.decay_seconds)
    angle0 = HOUR_STEP * (minute + 60 * hour)
    return angle0 + HOUR_STEP * (rate * t - 1) * math.exp(rate * t)


def hand_angles(sample: TimeSample, behaviors: HandBehaviors) -> HandAngles:
    t = sample.seconds
    return HandAngles(
        hours=hours_angle(t, behaviors.hour_hand, sample.minute, sample.hour),
        minutes=minutes_angle(t, behaviors.minute_hand, sample.minute),
        seconds=seconds_angle(t, behaviors.second_hand),
    )
