"""Damped hand motion for the railway clock."""

from railclock.motion.angles import HandAngles as HandAngles
from railclock.motion.angles import decay_rate as decay_rate
from railclock.motion.angles import hand_angles as hand_angles
from railclock.motion.angles import hours_angle as hours_angle
from railclock.motion.angles import minutes_angle as minutes_angle
from railclock.motion.angles import seconds_angle as seconds_angle
from railclock.motion.behavior import HandBehaviors as HandBehaviors
from railclock.motion.behavior import HourHandBehavior as HourHandBehavior
from railclock.motion.behavior import MinuteHandBehavior as MinuteHandBehavior
from railclock.motion.behavior import SecondHandBehavior as SecondHandBehavior
from railclock.motion.time_sample import TimeSample as TimeSample
