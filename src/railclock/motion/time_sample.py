from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, tzinfo


@dataclass(frozen=True, slots=True)
class TimeSample:
    """Wall-clock reading used to position the hands.

    ``seconds`` is the fractional second within the current minute, in
    ``[0, 60)``. ``minute`` and ``hour`` are the integer minute of the hour and
    hour of the day.
    """

    seconds: float
    minute: int
    hour: int

    @classmethod
    def from_datetime(cls, moment: datetime) -> "TimeSample":
        return cls(
            seconds=moment.second + moment.microsecond / 1_000_000,
            minute=moment.minute,
            hour=moment.hour,
        )

    @classmethod
    def from_timestamp(cls, timestamp: float, tz: tzinfo | None = None) -> "TimeSample":
        return cls.from_datetime(datetime.fromtimestamp(timestamp, tz=tz))
