"""AI strategies for choosing moves and choosing who to send out.

Move strategies are called as ``strategy(own, opponent, rng)`` and return
one of ``own.move_states``. Team strategies are called as
``strategy(own_team, opponent, rng)`` and return one of ``own_team.members``.
Both are looked up by name through the registries at the bottom of this
module; the battle engine only ever sees the resolved callables.
"""

from __future__ import annotations

import random
from enum import Enum
from typing import TYPE_CHECKING, Callable

from pokebattle.core.errors import InvalidArgumentError, InvalidStateError
from pokebattle.core.moves import Move, MoveState
from pokebattle.core.types import get_type_effectiveness

if TYPE_CHECKING:
    from pokebattle.core.pokemon import BattlePokemon, MoveStrategy
    from pokebattle.core.team import BattleTeam, TeamStrategy


class MoveStrategyName(str, Enum):
    """Registered move strategies."""

    FIRST_VALID = "first_valid"
    RANDOM = "random"
    MOST_EFFECTIVE = "most_effective"
    MOST_POWERFUL = "most_powerful"
    MOST_ACCURATE = "most_accurate"
    BEST_OVERALL = "best_overall"


class TeamStrategyName(str, Enum):
    """Registered team (switch-in) strategies."""

    FIRST_AVAILABLE = "first_available"
    RANDOM_AVAILABLE = "random_available"
    BEST_OVERALL = "best_overall"


# ---------------------------------------------------------------------------
# Scoring helpers
# ---------------------------------------------------------------------------

def move_effectiveness(move: Move, opponent: BattlePokemon) -> float:
    return get_type_effectiveness(move.type, opponent.type1, opponent.type2)


def best_overall_score(move: Move, opponent: BattlePokemon) -> float:
    """Expected-damage proxy: effectiveness * power * hit chance."""
    return move_effectiveness(move, opponent) * move.power * (move.accuracy / 100)


def _check_participants(own, opponent, own_label: str = "Own Pokemon") -> None:
    if own is None:
        raise InvalidArgumentError(f"{own_label} cannot be None.")
    if opponent is None:
        raise InvalidArgumentError("Opponent Pokemon cannot be None.")


def _eligible_moves(own: BattlePokemon) -> list[MoveState]:
    eligible = [state for state in own.move_states if state.is_usable]
    if not eligible:
        raise InvalidStateError(f"{own.display_name} has no moves with PP left.")
    return eligible


def _pick_highest(candidates: list[MoveState], score: Callable[[Move], float]) -> MoveState:
    # max() keeps the first of equal scores, so ties go to slot order
    return max(candidates, key=lambda state: score(state.move))


# ---------------------------------------------------------------------------
# Move strategies
# ---------------------------------------------------------------------------

def first_valid_move(own: BattlePokemon, opponent: BattlePokemon, rng: random.Random) -> MoveState:
    """Always use the first move that still has PP."""
    _check_participants(own, opponent)
    return _eligible_moves(own)[0]


def random_move(own: BattlePokemon, opponent: BattlePokemon, rng: random.Random) -> MoveState:
    """Pick uniformly among moves that still have PP."""
    _check_participants(own, opponent)
    return rng.choice(_eligible_moves(own))


def most_effective_move(own: BattlePokemon, opponent: BattlePokemon, rng: random.Random) -> MoveState:
    """Pick the move with the best type matchup against the opponent."""
    _check_participants(own, opponent)
    return _pick_highest(_eligible_moves(own), lambda move: move_effectiveness(move, opponent))


def most_powerful_move(own: BattlePokemon, opponent: BattlePokemon, rng: random.Random) -> MoveState:
    """Pick the move with the highest base power."""
    _check_participants(own, opponent)
    return _pick_highest(_eligible_moves(own), lambda move: move.power)


def most_accurate_move(own: BattlePokemon, opponent: BattlePokemon, rng: random.Random) -> MoveState:
    """Pick the move least likely to miss."""
    _check_participants(own, opponent)
    return _pick_highest(_eligible_moves(own), lambda move: move.accuracy)


def best_overall_move(own: BattlePokemon, opponent: BattlePokemon, rng: random.Random) -> MoveState:
    """Weigh effectiveness, power and accuracy together."""
    _check_participants(own, opponent)
    return _pick_highest(_eligible_moves(own), lambda move: best_overall_score(move, opponent))


# ---------------------------------------------------------------------------
# Team strategies
# ---------------------------------------------------------------------------

def _available_members(own_team: BattleTeam) -> list[BattlePokemon]:
    available = own_team.available
    if not available:
        raise InvalidStateError(f"Team {own_team.name} has no Pokemon left to send out.")
    return available


def first_available_pokemon(
    own_team: BattleTeam, opponent: BattlePokemon, rng: random.Random
) -> BattlePokemon:
    """Send out the first member that has not fainted."""
    _check_participants(own_team, opponent, "Own team")
    return _available_members(own_team)[0]


def random_available_pokemon(
    own_team: BattleTeam, opponent: BattlePokemon, rng: random.Random
) -> BattlePokemon:
    """Send out a random member that has not fainted."""
    _check_participants(own_team, opponent, "Own team")
    return rng.choice(_available_members(own_team))


def best_overall_pokemon(
    own_team: BattleTeam, opponent: BattlePokemon, rng: random.Random
) -> BattlePokemon:
    """Send out the member whose chosen move scores best against the opponent.

    Each candidate picks its move exactly as it would in battle, so its own
    move strategy (or Struggle, when out of PP) decides what gets scored.
    """
    _check_participants(own_team, opponent, "Own team")
    best: BattlePokemon | None = None
    best_score = float("-inf")
    for member in _available_members(own_team):
        state = member.get_next_move(opponent, rng)
        score = best_overall_score(state.move, opponent)
        if score > best_score:
            best, best_score = member, score
    return best


# ---------------------------------------------------------------------------
# Registries
# ---------------------------------------------------------------------------

MOVE_STRATEGIES: dict[MoveStrategyName, MoveStrategy] = {
    MoveStrategyName.FIRST_VALID: first_valid_move,
    MoveStrategyName.RANDOM: random_move,
    MoveStrategyName.MOST_EFFECTIVE: most_effective_move,
    MoveStrategyName.MOST_POWERFUL: most_powerful_move,
    MoveStrategyName.MOST_ACCURATE: most_accurate_move,
    MoveStrategyName.BEST_OVERALL: best_overall_move,
}

TEAM_STRATEGIES: dict[TeamStrategyName, TeamStrategy] = {
    TeamStrategyName.FIRST_AVAILABLE: first_available_pokemon,
    TeamStrategyName.RANDOM_AVAILABLE: random_available_pokemon,
    TeamStrategyName.BEST_OVERALL: best_overall_pokemon,
}


def get_move_strategy(name: MoveStrategyName | str) -> MoveStrategy:
    """Resolve a move strategy by name."""
    try:
        return MOVE_STRATEGIES[MoveStrategyName(name)]
    except ValueError:
        valid = ", ".join(s.value for s in MoveStrategyName)
        raise InvalidArgumentError(f"Unknown move strategy '{name}'. Choose from: {valid}") from None


def get_team_strategy(name: TeamStrategyName | str) -> TeamStrategy:
    """Resolve a team strategy by name."""
    try:
        return TEAM_STRATEGIES[TeamStrategyName(name)]
    except ValueError:
        valid = ", ".join(s.value for s in TeamStrategyName)
        raise InvalidArgumentError(f"Unknown team strategy '{name}'. Choose from: {valid}") from None
