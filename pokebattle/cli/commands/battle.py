"""CLI commands for running battles.

Every choice comes in as an argument or option; nothing here prompts.
"""

import random
from typing import NoReturn, Optional

import typer
from rich.console import Console

from pokebattle.cli.ui.displays import display_batch_results, display_event
from pokebattle.core.battle import BattleEngine, BattleResult
from pokebattle.core.batch import simulate_many_battles, simulate_many_team_battles
from pokebattle.core.errors import BattleError
from pokebattle.core.pokemon import BattlePokemon, create_battle_pokemon
from pokebattle.core.strategies import (
    MoveStrategyName,
    TeamStrategyName,
    get_move_strategy,
    get_team_strategy,
)
from pokebattle.core.team import BattleTeam, create_battle_team
from pokebattle.data.roster import get_pokemon, get_team
from pokebattle.utils.config import config

app = typer.Typer(name="battle", help="Simulate battles")
console = Console()


def _prepare_pokemon(name: str, strategy: MoveStrategyName) -> BattlePokemon:
    return create_battle_pokemon(get_pokemon(name), get_move_strategy(strategy))


def _prepare_team(name: str, strategy: MoveStrategyName, team_strategy: TeamStrategyName) -> BattleTeam:
    return create_battle_team(get_team(name), get_move_strategy(strategy), get_team_strategy(team_strategy))


def _fail(error: BattleError) -> NoReturn:
    console.print(f"[red]Error:[/red] {error}")
    raise typer.Exit(1)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command("single")
def single_battle(
    first: str = typer.Argument(..., help="First Pokemon"),
    second: str = typer.Argument(..., help="Second Pokemon"),
    strategy: MoveStrategyName = typer.Option(
        MoveStrategyName.BEST_OVERALL, "--strategy", "-s", help="Move strategy for the first Pokemon"
    ),
    opponent_strategy: MoveStrategyName = typer.Option(
        MoveStrategyName.BEST_OVERALL, "--opponent-strategy", "-o", help="Move strategy for the second Pokemon"
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for a reproducible battle"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only show the result"),
) -> None:
    """Run one narrated battle between two Pokemon."""
    try:
        first_mon = _prepare_pokemon(first, strategy)
        second_mon = _prepare_pokemon(second, opponent_strategy)
        engine = BattleEngine(rng=random.Random(seed), sink=None if quiet else display_event)
        result = engine.simulate_battle(first_mon, second_mon)
    except BattleError as e:
        _fail(e)

    winner = first_mon if result == BattleResult.FIRST_WIN else second_mon
    console.print(
        f"\n[bold green]{winner.display_name}[/bold green] wins with "
        f"{winner.current_hp}/{winner.max_hp} HP left!"
    )


@app.command("many")
def many_battles(
    first: str = typer.Argument(..., help="First Pokemon"),
    second: str = typer.Argument(..., help="Second Pokemon"),
    count: int = typer.Option(1000, "--count", "-n", min=1, max=config.max_battle_count, help="Number of battles"),
    strategy: MoveStrategyName = typer.Option(
        MoveStrategyName.BEST_OVERALL, "--strategy", "-s", help="Move strategy for the first Pokemon"
    ),
    opponent_strategy: MoveStrategyName = typer.Option(
        MoveStrategyName.BEST_OVERALL, "--opponent-strategy", "-o", help="Move strategy for the second Pokemon"
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for reproducible totals"),
    workers: Optional[int] = typer.Option(None, "--workers", "-w", min=1, help="Worker threads"),
) -> None:
    """Simulate many 1v1 battles and show the win rates."""
    try:
        first_mon = _prepare_pokemon(first, strategy)
        second_mon = _prepare_pokemon(second, opponent_strategy)
        console.print(f"Simulating {count} battles: {first_mon.display_name} vs {second_mon.display_name}...")
        first_wins, second_wins = simulate_many_battles(
            first_mon, second_mon, count, seed=seed, max_workers=workers
        )
    except BattleError as e:
        _fail(e)

    display_batch_results(first_mon.display_name, second_mon.display_name, first_wins, second_wins)


@app.command("team")
def team_battle(
    first: str = typer.Argument(..., help="First team"),
    second: str = typer.Argument(..., help="Second team"),
    strategy: MoveStrategyName = typer.Option(
        MoveStrategyName.BEST_OVERALL, "--strategy", "-s", help="Move strategy for the first team"
    ),
    opponent_strategy: MoveStrategyName = typer.Option(
        MoveStrategyName.BEST_OVERALL, "--opponent-strategy", "-o", help="Move strategy for the second team"
    ),
    team_strategy: TeamStrategyName = typer.Option(
        TeamStrategyName.FIRST_AVAILABLE, "--team-strategy", "-t", help="Switch-in strategy for the first team"
    ),
    opponent_team_strategy: TeamStrategyName = typer.Option(
        TeamStrategyName.FIRST_AVAILABLE, "--opponent-team-strategy", help="Switch-in strategy for the second team"
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for a reproducible battle"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only show the result"),
) -> None:
    """Run one narrated team battle."""
    try:
        first_team = _prepare_team(first, strategy, team_strategy)
        second_team = _prepare_team(second, opponent_strategy, opponent_team_strategy)
        engine = BattleEngine(rng=random.Random(seed), sink=None if quiet else display_event)
        result = engine.simulate_team_battle(first_team, second_team)
    except BattleError as e:
        _fail(e)

    winner = first_team if result == BattleResult.FIRST_WIN else second_team
    console.print(
        f"\n[bold green]Team {winner.name}[/bold green] wins with "
        f"{winner.alive_count} Pokemon standing!"
    )


@app.command("team-many")
def many_team_battles(
    first: str = typer.Argument(..., help="First team"),
    second: str = typer.Argument(..., help="Second team"),
    count: int = typer.Option(1000, "--count", "-n", min=1, max=config.max_battle_count, help="Number of battles"),
    strategy: MoveStrategyName = typer.Option(
        MoveStrategyName.BEST_OVERALL, "--strategy", "-s", help="Move strategy for the first team"
    ),
    opponent_strategy: MoveStrategyName = typer.Option(
        MoveStrategyName.BEST_OVERALL, "--opponent-strategy", "-o", help="Move strategy for the second team"
    ),
    team_strategy: TeamStrategyName = typer.Option(
        TeamStrategyName.FIRST_AVAILABLE, "--team-strategy", "-t", help="Switch-in strategy for the first team"
    ),
    opponent_team_strategy: TeamStrategyName = typer.Option(
        TeamStrategyName.FIRST_AVAILABLE, "--opponent-team-strategy", help="Switch-in strategy for the second team"
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for reproducible totals"),
    workers: Optional[int] = typer.Option(None, "--workers", "-w", min=1, help="Worker threads"),
) -> None:
    """Simulate many team battles and show the win rates."""
    try:
        first_team = _prepare_team(first, strategy, team_strategy)
        second_team = _prepare_team(second, opponent_strategy, opponent_team_strategy)
        console.print(f"Simulating {count} team battles: {first_team.name} vs {second_team.name}...")
        first_wins, second_wins = simulate_many_team_battles(
            first_team, second_team, count, seed=seed, max_workers=workers
        )
    except BattleError as e:
        _fail(e)

    display_batch_results(first_team.name, second_team.name, first_wins, second_wins)
