from railclock.renderers.base import StatefulBaseRenderer as StatefulBaseRenderer
from railclock.renderers.clock import ClockRenderer as ClockRenderer
