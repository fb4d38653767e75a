"""Main CLI application for pokebattle."""

import typer
from rich.console import Console

from pokebattle import __version__
from pokebattle.cli.commands import battle
from pokebattle.cli.ui.displays import display_roster, display_strategies, display_teams
from pokebattle.data.roster import SAMPLE_POKEMON, SAMPLE_TEAMS
from pokebattle.utils.log import configure_logging

# Create main app
app = typer.Typer(
    name="pokebattle",
    help="pokebattle - simulate Pokemon battles between AI-controlled trainers",
    no_args_is_help=True,
)

# Register sub-commands
app.add_typer(battle.app, name="battle", help="Run single, team and batch battles")

console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Simulate Pokemon battles from the command line."""
    configure_logging(verbose=verbose)


@app.command("roster")
def show_roster() -> None:
    """List the built-in Pokemon."""
    display_roster(list(SAMPLE_POKEMON.values()))


@app.command("teams")
def show_teams() -> None:
    """List the built-in teams."""
    display_teams(list(SAMPLE_TEAMS.values()))


@app.command("strategies")
def show_strategies() -> None:
    """List the AI strategies available to battles."""
    display_strategies()


@app.command("version")
def show_version() -> None:
    """Show version information."""
    console.print(f"pokebattle v{__version__}")


if __name__ == "__main__":
    app()
