"""Tests for clock state providers."""

from __future__ import annotations

import math
from datetime import datetime

import pytest
from reactivex.subject import Subject

from railclock.motion import HandBehaviors, TimeSample, hand_angles
from railclock.providers import ClockStateProvider, StaticStateProvider
from railclock.state import ClockState


class TestClockStateProvider:
    """Group provider tests so every frame reflects the absolute wall-clock time."""

    def test_each_tick_samples_the_clock(self, fixed_now) -> None:
        """Verify every tick produces the state for the current time."""
        ticks: Subject[int] = Subject()
        behaviors = HandBehaviors()
        moments = (
            datetime(2024, 1, 1, 10, 8, 0, 100000),
            datetime(2024, 1, 1, 10, 8, 42, 0),
        )
        provider = ClockStateProvider(behaviors, ticks=ticks, now=fixed_now(*moments))
        states: list[ClockState] = []
        provider.observable().subscribe(on_next=states.append)

        ticks.on_next(0)
        ticks.on_next(1)

        assert [state.sample for state in states] == [
            TimeSample(seconds=0.1, minute=8, hour=10),
            TimeSample(seconds=42.0, minute=8, hour=10),
        ]
        assert states[1].angles == hand_angles(states[1].sample, behaviors)

    def test_skipped_frames_do_not_drift(self, fixed_now) -> None:
        """Ensure a late tick lands on the same angles as an on-time evaluation."""
        ticks: Subject[int] = Subject()
        behaviors = HandBehaviors()
        late = datetime(2024, 1, 1, 3, 15, 30, 500000)
        provider = ClockStateProvider(behaviors, ticks=ticks, now=fixed_now(late))
        states: list[ClockState] = []
        provider.observable().subscribe(on_next=states.append)

        ticks.on_next(0)

        assert states == [provider.state_at(late)]

    def test_no_state_before_first_tick(self, fixed_now) -> None:
        """Check nothing is published until the render loop ticks."""
        ticks: Subject[int] = Subject()
        provider = ClockStateProvider(
            HandBehaviors(), ticks=ticks, now=fixed_now(datetime(2024, 1, 1))
        )
        states: list[ClockState] = []
        provider.observable().subscribe(on_next=states.append)

        assert states == []


def test_static_state_provider_replays_its_state(midnight_state: ClockState) -> None:
    """Verify the static provider emits its fixed state on subscription."""
    provider = StaticStateProvider(midnight_state)
    states: list[ClockState] = []

    provider.observable().subscribe(on_next=states.append)

    assert provider.state is midnight_state
    assert states == [midnight_state]


def test_clock_state_at_midnight(midnight_state: ClockState) -> None:
    """Ensure midnight puts every hand at, or just behind, 12 o'clock."""
    assert midnight_state.angles.seconds == 0.0
    assert midnight_state.angles.minutes < 0
    assert midnight_state.angles.hours < 0
    assert midnight_state.angles.hours == pytest.approx(-math.pi / 360)
