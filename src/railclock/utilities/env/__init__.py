"""Environment configuration helpers."""

from railclock.utilities.env.config import Configuration as Configuration
from railclock.utilities.env.enums import \
    FrameExportStrategy as FrameExportStrategy
