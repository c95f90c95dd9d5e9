"""Tests for hand behavior validation."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from railclock.exceptions import ConfigurationError
from railclock.motion import (HandBehaviors, HourHandBehavior,
                              MinuteHandBehavior, SecondHandBehavior)


class TestHandBehaviors:
    """Reject impossible oscillators at construction so angles are always defined."""

    def test_defaults_match_the_railway_clock(self) -> None:
        """Verify the defaults reproduce the classic hand motion."""
        behaviors = HandBehaviors()

        assert behaviors.second_hand == SecondHandBehavior(1.5, 0.1, 0.5)
        assert behaviors.second_hand.cycle == 58.5
        assert behaviors.minute_hand == MinuteHandBehavior(0.1, 0.3, 6)
        assert behaviors.hour_hand == HourHandBehavior(0.1, 1.0)

    @pytest.mark.parametrize("decay", [0.0, -0.5, 1.0, 1.5])
    @pytest.mark.parametrize(
        "factory", [SecondHandBehavior, MinuteHandBehavior, HourHandBehavior]
    )
    def test_decay_must_be_a_fraction(self, factory, decay: float) -> None:
        """Ensure decay outside (0, 1) is refused before any angle is computed."""
        with pytest.raises(ConfigurationError, match="decay"):
            factory(decay=decay)

    @pytest.mark.parametrize("decay_seconds", [0.0, -1.0])
    @pytest.mark.parametrize(
        "factory", [SecondHandBehavior, MinuteHandBehavior, HourHandBehavior]
    )
    def test_decay_seconds_must_be_positive(self, factory, decay_seconds: float) -> None:
        """Ensure a non-positive decay horizon is refused."""
        with pytest.raises(ConfigurationError, match="decay_seconds"):
            factory(decay_seconds=decay_seconds)

    @pytest.mark.parametrize("pause_seconds", [-0.1, 60.0, 75.0])
    def test_pause_must_leave_time_to_sweep(self, pause_seconds: float) -> None:
        """Verify the pause stays within [0, 60) so the sweep cycle is positive."""
        with pytest.raises(ConfigurationError, match="pause_seconds"):
            SecondHandBehavior(pause_seconds=pause_seconds)

    @pytest.mark.parametrize("frequency", [0.0, -6.0])
    def test_frequency_must_be_positive(self, frequency: float) -> None:
        """Ensure the minute hand oscillates at a positive frequency."""
        with pytest.raises(ConfigurationError, match="frequency"):
            MinuteHandBehavior(frequency=frequency)

    def test_configuration_error_is_a_value_error(self) -> None:
        """Keep ConfigurationError catchable as a plain ValueError."""
        with pytest.raises(ValueError):
            HourHandBehavior(decay=2)

    def test_behaviors_are_immutable(self) -> None:
        """Check behaviors cannot change once the clock is configured."""
        behavior = MinuteHandBehavior()

        with pytest.raises(FrozenInstanceError):
            behavior.frequency = 3  # type: ignore[misc]
