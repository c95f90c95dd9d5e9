from railclock.config.colors import parse_color as parse_color
from railclock.config.loader import load_options as load_options
from railclock.config.options import ClockOptions as ClockOptions
from railclock.config.options import ShadowStyle as ShadowStyle
from railclock.config.options import ShapeOptions as ShapeOptions
from railclock.config.options import StyleOptions as StyleOptions
