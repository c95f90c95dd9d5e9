from pathlib import Path
from typing import Annotated

import pygame
import typer

from railclock.cli.commands.common import (configuration_errors, parse_moment,
                                           resolve_options)
from railclock.renderers import ClockRenderer
from railclock.runtime import FrameExporter
from railclock.state import ClockState
from railclock.utilities.env import Configuration
from railclock.utilities.logging import get_logger

logger = get_logger(__name__)


def snapshot_command(
    output: Annotated[Path, typer.Argument(help="PNG file to write")],
    at: Annotated[
        str | None,
        typer.Option("--at", help="Time to draw, e.g. 10:08:42 (default: now)"),
    ] = None,
    config: Annotated[
        Path | None, typer.Option("--config", help="JSON options file")
    ] = None,
    size: Annotated[
        int | None, typer.Option("--size", min=1, help="Image size in pixels")
    ] = None,
) -> None:
    """Render a single frame without opening a window."""
    options = resolve_options(config, size=size)
    moment = parse_moment(at)
    with configuration_errors():
        strategy = Configuration.frame_export_strategy()
        renderer = ClockRenderer(
            options=options, state=ClockState.at(moment, options.behavior)
        )

    surface = pygame.Surface((options.size, options.size), pygame.SRCALPHA)
    renderer.process(surface)
    FrameExporter(lambda: strategy).export(surface).save(output)
    logger.info("Wrote snapshot of %s to %s", moment.isoformat(), output)
    typer.echo(str(output))
