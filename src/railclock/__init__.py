"""Swiss railway clock with inertial hand motion."""

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from railclock.config import ClockOptions as ClockOptions
from railclock.exceptions import ConfigurationError as ConfigurationError
from railclock.motion import HandAngles as HandAngles
from railclock.motion import HandBehaviors as HandBehaviors
from railclock.motion import TimeSample as TimeSample
from railclock.motion import hand_angles as hand_angles
