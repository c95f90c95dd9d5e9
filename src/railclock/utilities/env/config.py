import os
from pathlib import Path

from railclock.exceptions import ConfigurationError
from railclock.utilities.env.enums import FrameExportStrategy
from railclock.utilities.env.parsing import (_env_flag, _env_optional_float,
                                             _env_optional_int)


class Configuration:
    """Environment overrides for the clock runtime."""

    @classmethod
    def options_path(cls) -> Path | None:
        path = os.environ.get("RAILCLOCK_CONFIG")
        if not path:
            return None
        return Path(path).expanduser()

    @classmethod
    def size(cls) -> int | None:
        return _env_optional_int("RAILCLOCK_SIZE", minimum=1)

    @classmethod
    def fps(cls) -> int | None:
        return _env_optional_int("RAILCLOCK_FPS", minimum=1)

    @classmethod
    def margin(cls) -> float | None:
        return _env_optional_float("RAILCLOCK_MARGIN")

    @classmethod
    def shadows_enabled(cls) -> bool:
        return _env_flag("RAILCLOCK_SHADOWS", default=True)

    @classmethod
    def frame_export_strategy(cls) -> FrameExportStrategy:
        strategy = os.environ.get(
            "RAILCLOCK_FRAME_EXPORT_STRATEGY", "buffer"
        ).strip().lower()
        try:
            return FrameExportStrategy(strategy)
        except ValueError as exc:
            raise ConfigurationError(
                "RAILCLOCK_FRAME_EXPORT_STRATEGY must be 'buffer' or 'array'"
            ) from exc
