from __future__ import annotations

from contextlib import contextmanager
from datetime import date, datetime, time
from pathlib import Path
from typing import Iterator

import typer

from railclock.config import ClockOptions, load_options
from railclock.exceptions import ConfigurationError
from railclock.utilities.logging import get_logger

logger = get_logger(__name__)

CONFIGURATION_ERROR_EXIT_CODE = 2


def parse_moment(value: str | None) -> datetime:
    """Parse ``--at``: a full ISO datetime or a bare ``HH:MM[:SS[.ffffff]]``."""
    if value is None:
        return datetime.now()
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        pass
    try:
        return datetime.combine(date.today(), time.fromisoformat(value))
    except ValueError as exc:
        raise typer.BadParameter(
            f"{value!r} is neither an ISO datetime nor HH:MM:SS"
        ) from exc


@contextmanager
def configuration_errors() -> Iterator[None]:
    try:
        yield
    except ConfigurationError as exc:
        logger.error("Invalid clock configuration: %s", exc)
        typer.echo(f"Invalid clock configuration: {exc}", err=True)
        raise typer.Exit(code=CONFIGURATION_ERROR_EXIT_CODE) from exc


def resolve_options(
    config: Path | None,
    *,
    size: int | None = None,
    fps: int | None = None,
) -> ClockOptions:
    with configuration_errors():
        return load_options(config, size=size, fps=fps)
