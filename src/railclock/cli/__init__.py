import typer

from railclock.cli.commands.angles import angles_command
from railclock.cli.commands.run import run_command
from railclock.cli.commands.snapshot import snapshot_command

app = typer.Typer(help="Swiss railway clock with damped hand motion.")

app.command(name="run")(run_command)
app.command(name="angles")(angles_command)
app.command(name="snapshot")(snapshot_command)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
