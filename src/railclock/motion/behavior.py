"""Tunable parameters for each hand of the clock.

Every hand relaxes towards its target with an exponential envelope described
by ``decay`` (the fraction of the initial displacement left) after
``decay_seconds``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from railclock.exceptions import ConfigurationError


def _check_decay(hand: str, decay: float, decay_seconds: float) -> None:
    if not 0 < decay < 1:
        raise ConfigurationError(
            f"{hand}.decay must be strictly between 0 and 1, got {decay!r}"
        )
    if decay_seconds <= 0:
        raise ConfigurationError(
            f"{hand}.decay_seconds must be positive, got {decay_seconds!r}"
        )


@dataclass(frozen=True, slots=True)
class SecondHandBehavior:
    pause_seconds: float = 1.5
    decay: float = 0.1
    decay_seconds: float = 0.5

    def __post_init__(self) -> None:
        _check_decay("second_hand", self.decay, self.decay_seconds)
        if not 0 <= self.pause_seconds < 60:
            raise ConfigurationError(
                "second_hand.pause_seconds must be in [0, 60), "
                f"got {self.pause_seconds!r}"
            )

    @property
    def cycle(self) -> float:
        """Seconds the hand takes to sweep a full turn."""
        return 60 - self.pause_seconds


@dataclass(frozen=True, slots=True)
class MinuteHandBehavior:
    decay: float = 0.1
    decay_seconds: float = 0.3
    frequency: float = 6

    def __post_init__(self) -> None:
        _check_decay("minute_hand", self.decay, self.decay_seconds)
        if self.frequency <= 0:
            raise ConfigurationError(
                f"minute_hand.frequency must be positive, got {self.frequency!r}"
            )


@dataclass(frozen=True, slots=True)
class HourHandBehavior:
    decay: float = 0.1
    decay_seconds: float = 1.0

    def __post_init__(self) -> None:
        _check_decay("hour_hand", self.decay, self.decay_seconds)


@dataclass(frozen=True, slots=True)
class HandBehaviors:
    second_hand: SecondHandBehavior = field(default_factory=SecondHandBehavior)
    minute_hand: MinuteHandBehavior = field(default_factory=MinuteHandBehavior)
    hour_hand: HourHandBehavior = field(default_factory=HourHandBehavior)
