"""Rich display components for the CLI."""

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from pokebattle.core.battle import TurnEvent
from pokebattle.core.pokemon import Pokemon
from pokebattle.core.strategies import MoveStrategyName, TeamStrategyName
from pokebattle.core.team import PokemonTeam
from pokebattle.core.types import PokemonType

console = Console()


# Color mappings
TYPE_COLORS = {
    PokemonType.NORMAL: "white",
    PokemonType.FIRE: "red",
    PokemonType.WATER: "blue",
    PokemonType.ELECTRIC: "yellow",
    PokemonType.GRASS: "green",
    PokemonType.ICE: "cyan",
    PokemonType.FIGHTING: "red",
    PokemonType.POISON: "magenta",
    PokemonType.GROUND: "yellow",
    PokemonType.FLYING: "cyan",
    PokemonType.PSYCHIC: "magenta",
    PokemonType.BUG: "green",
    PokemonType.ROCK: "yellow",
    PokemonType.GHOST: "magenta",
    PokemonType.DRAGON: "blue",
    PokemonType.DARK: "white",
    PokemonType.STEEL: "white",
    PokemonType.FAIRY: "magenta",
}

EVENT_STYLES = {
    "send_out": "bold cyan",
    "turn": "dim",
    "attack": "white",
    "miss": "yellow",
    "damage": "white",
    "faint": "red",
    "battle_end": "bold green",
    "team_defeated": "bold magenta",
}


def format_types(types: list[PokemonType]) -> str:
    return "/".join(f"[{TYPE_COLORS.get(t, 'white')}]{t.value.capitalize()}[/]" for t in types)


def display_event(event: TurnEvent) -> None:
    """Print one battle event. Usable directly as an engine event sink."""
    style = EVENT_STYLES.get(event.event_type, "white")
    if event.event_type == "turn":
        console.print()
    if event.event_type == "damage" and event.effectiveness > 1.0:
        style = "bold red"
    console.print(f"[{style}]{event.message}[/{style}]")


def display_roster(pokemon: list[Pokemon], title: str = "Pokemon") -> None:
    """Display a table of Pokemon definitions."""
    table = Table(title=title, box=box.ROUNDED)
    table.add_column("Name", min_width=10)
    table.add_column("Type", width=16)
    table.add_column("Lv", justify="right", width=3)
    table.add_column("HP", justify="right")
    table.add_column("Atk", justify="right")
    table.add_column("Def", justify="right")
    table.add_column("SpA", justify="right")
    table.add_column("SpD", justify="right")
    table.add_column("Spe", justify="right")
    table.add_column("Moves")

    for p in pokemon:
        moves = ", ".join(m.display_name for m in p.moves if m is not None)
        table.add_row(
            p.display_name,
            format_types(p.types),
            str(p.level),
            str(p.hp),
            str(p.atk),
            str(p.defense),
            str(p.spa),
            str(p.spd),
            str(p.spe),
            moves,
        )

    console.print(table)


def display_teams(teams: list[PokemonTeam]) -> None:
    """Display a table of team definitions."""
    table = Table(title="Teams", box=box.ROUNDED)
    table.add_column("Name", style="bold")
    table.add_column("Size", justify="right", width=4)
    table.add_column("Members")

    for team in teams:
        members = ", ".join(p.display_name for p in team.members if p is not None)
        table.add_row(team.name, str(team.size), members)

    console.print(table)


def display_strategies() -> None:
    """List the registered AI strategies."""
    table = Table(title="AI Strategies", box=box.ROUNDED)
    table.add_column("Kind", style="dim")
    table.add_column("Name", style="bold")

    for name in MoveStrategyName:
        table.add_row("move", name.value)
    for name in TeamStrategyName:
        table.add_row("team", name.value)

    console.print(table)


def display_batch_results(first_name: str, second_name: str, first_wins: int, second_wins: int) -> None:
    """Display win counts and rates for a batch of battles."""
    total = first_wins + second_wins

    table = Table(box=box.SIMPLE)
    table.add_column("Side")
    table.add_column("Wins", justify="right")
    table.add_column("Win rate", justify="right")

    for name, wins in ((first_name, first_wins), (second_name, second_wins)):
        rate = (wins / total * 100) if total else 0.0
        table.add_row(name, str(wins), f"{rate:.1f}%")

    console.print(
        Panel(
            table,
            title=f"After {total} battles",
            border_style="green",
        )
    )
