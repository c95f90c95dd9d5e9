from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from railclock.motion import HandAngles, HandBehaviors, TimeSample, hand_angles


@dataclass(frozen=True, slots=True)
class ClockState:
    sample: TimeSample
    angles: HandAngles

    @classmethod
    def at(cls, moment: datetime, behaviors: HandBehaviors) -> "ClockState":
        sample = TimeSample.from_datetime(moment)
        return cls(sample=sample, angles=hand_angles(sample, behaviors))
