"""Team definitions and their per-battle wrapper."""

from __future__ import annotations

import random
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pokebattle.core.errors import InvalidArgumentError
from pokebattle.core.pokemon import BattlePokemon, MoveStrategy, Pokemon
from pokebattle.utils.config import config

# (own_team, opponent_active, rng) -> BattlePokemon to send out
TeamStrategy = Callable[..., BattlePokemon]


class PokemonTeam(BaseModel):
    """A named roster of up to six Pokemon. The lead slot is required."""

    model_config = ConfigDict(frozen=True)

    name: str
    members: tuple[Pokemon | None, ...]

    @field_validator("members", mode="before")
    @classmethod
    def _pad_members(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)) and len(value) < config.team_size:
            value = list(value) + [None] * (config.team_size - len(value))
        return value

    @field_validator("members")
    @classmethod
    def _check_members(cls, value: tuple[Pokemon | None, ...]) -> tuple[Pokemon | None, ...]:
        if len(value) != config.team_size:
            raise ValueError(f"a team has exactly {config.team_size} slots, got {len(value)}")
        if value[0] is None:
            raise ValueError("the lead slot cannot be empty")
        return value

    @property
    def size(self) -> int:
        return sum(1 for p in self.members if p is not None)


class BattleTeam(BaseModel):
    """One side of a team battle.

    Every member shares the team's move strategy; the team strategy picks
    who goes out after a faint.
    """

    team: PokemonTeam
    move_strategy: MoveStrategy
    team_strategy: TeamStrategy
    members: list[BattlePokemon | None] = Field(default_factory=list)

    def model_post_init(self, __context) -> None:
        if not self.members:
            self.members = [
                BattlePokemon(pokemon=p, strategy=self.move_strategy) if p is not None else None
                for p in self.team.members
            ]

    @property
    def name(self) -> str:
        return self.team.name

    @property
    def lead(self) -> BattlePokemon:
        return self.members[0]

    @property
    def available(self) -> list[BattlePokemon]:
        """Members that can still battle, in slot order."""
        return [p for p in self.members if p is not None and not p.is_fainted]

    @property
    def all_fainted(self) -> bool:
        return all(p is None or p.is_fainted for p in self.members)

    @property
    def alive_count(self) -> int:
        return len(self.available)

    def pick_next(self, opponent: BattlePokemon | None, rng: random.Random) -> BattlePokemon:
        """Ask the team strategy who faces ``opponent`` next."""
        if opponent is None:
            raise InvalidArgumentError("Opponent cannot be None.")
        return self.team_strategy(self, opponent, rng)

    def clone(self) -> BattleTeam:
        """Copy every member's battle state; definitions and strategies stay shared."""
        return self.model_copy(
            update={"members": [p.clone() if p is not None else None for p in self.members]}
        )


def create_battle_team(
    team: PokemonTeam,
    move_strategy: MoveStrategy,
    team_strategy: TeamStrategy,
) -> BattleTeam:
    """Create a fresh battle team with every member at full HP and PP."""
    if team is None:
        raise InvalidArgumentError("Team cannot be None.")
    if move_strategy is None or team_strategy is None:
        raise InvalidArgumentError("Team strategies cannot be None.")
    return BattleTeam(team=team, move_strategy=move_strategy, team_strategy=team_strategy)
