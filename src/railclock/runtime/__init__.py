from railclock.runtime.exporter import FrameExporter as FrameExporter
from railclock.runtime.loop import ClockLoop as ClockLoop
