from pathlib import Path
from typing import Annotated

import typer

from railclock.cli.commands.common import configuration_errors, resolve_options
from railclock.runtime import ClockLoop


def run_command(
    config: Annotated[
        Path | None, typer.Option("--config", help="JSON options file")
    ] = None,
    size: Annotated[
        int | None, typer.Option("--size", min=1, help="Window size in pixels")
    ] = None,
    fps: Annotated[
        int | None, typer.Option("--fps", min=1, help="Frames per second")
    ] = None,
) -> None:
    """Open a window and run the clock until it is closed."""
    options = resolve_options(config, size=size, fps=fps)
    with configuration_errors():
        loop = ClockLoop(options=options)
    loop.run()
