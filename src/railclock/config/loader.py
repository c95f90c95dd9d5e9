from __future__ import annotations

from pathlib import Path

from railclock.config.options import ClockOptions
from railclock.utilities.env import Configuration
from railclock.utilities.logging import get_logger

logger = get_logger(__name__)


def load_options(
    path: str | Path | None = None,
    *,
    size: int | None = None,
    fps: int | None = None,
    margin: float | None = None,
) -> ClockOptions:
    """Resolve clock options.

    Precedence, lowest first: built-in defaults, the JSON file (``path`` or
    ``RAILCLOCK_CONFIG``), ``RAILCLOCK_SIZE``/``FPS``/``MARGIN``, then the
    keyword arguments.
    """
    source = Path(path) if path is not None else Configuration.options_path()
    if source is not None:
        logger.info("Loading clock options from %s", source)
        options = ClockOptions.from_file(source)
    else:
        options = ClockOptions()

    options = options.with_overrides(
        size=Configuration.size(),
        fps=Configuration.fps(),
        margin=Configuration.margin(),
    )
    return options.with_overrides(size=size, fps=fps, margin=margin)
