from pathlib import Path
from typing import Annotated

import typer

from railclock.cli.commands.common import parse_moment, resolve_options
from railclock.state import ClockState


def angles_command(
    at: Annotated[
        str | None,
        typer.Option("--at", help="Time to evaluate, e.g. 12:34:56.5 (default: now)"),
    ] = None,
    config: Annotated[
        Path | None, typer.Option("--config", help="JSON options file")
    ] = None,
) -> None:
    """Print the hand angles, in radians, for a moment in time."""
    options = resolve_options(config)
    moment = parse_moment(at)
    state = ClockState.at(moment, options.behavior)

    typer.echo(f"time     {moment.time().isoformat()}")
    typer.echo(f"hours    {state.angles.hours:.6f}")
    typer.echo(f"minutes  {state.angles.minutes:.6f}")
    typer.echo(f"seconds  {state.angles.seconds:.6f}")
