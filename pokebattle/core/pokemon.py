"""Pokemon definitions and their per-battle combatant wrapper."""

from __future__ import annotations

import random
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from pokebattle.core.errors import InvalidArgumentError
from pokebattle.core.moves import FALLBACK_MOVE, Move, MoveState
from pokebattle.core.types import PokemonType
from pokebattle.utils.config import config

# (own, opponent, rng) -> chosen MoveState
MoveStrategy = Callable[..., MoveState]


class Pokemon(BaseModel):
    """A species entry: stats, types and up to four moves.

    Built once and shared by every battle it takes part in.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    level: int = Field(default=50, ge=1, le=100)

    # Stats
    hp: int = Field(ge=1)
    atk: int = Field(ge=0)
    defense: int = Field(ge=0)  # 'def' is a Python keyword
    spa: int = Field(ge=0)
    spd: int = Field(ge=0)
    spe: int = Field(ge=0)

    # Types
    type1: PokemonType
    type2: PokemonType | None = None

    # Exactly four slots; slot 0 always holds a move
    moves: tuple[Move | None, ...]

    @field_validator("moves", mode="before")
    @classmethod
    def _pad_moves(cls, value: Any) -> Any:
        if isinstance(value, Move):
            value = [value]
        if isinstance(value, (list, tuple)) and len(value) < config.move_slots:
            value = list(value) + [None] * (config.move_slots - len(value))
        return value

    @field_validator("moves")
    @classmethod
    def _check_moves(cls, value: tuple[Move | None, ...]) -> tuple[Move | None, ...]:
        if len(value) != config.move_slots:
            raise ValueError(f"a Pokemon has exactly {config.move_slots} move slots, got {len(value)}")
        if value[0] is None:
            raise ValueError("the first move slot cannot be empty")
        return value

    @property
    def display_name(self) -> str:
        return self.name.capitalize()

    @property
    def types(self) -> list[PokemonType]:
        t = [self.type1]
        if self.type2:
            t.append(self.type2)
        return t


class BattlePokemon(BaseModel):
    """A Pokemon prepared for battle with runtime HP and move PP tracking.

    This is a snapshot -- changes here do NOT propagate back to the
    species definition, which stays shared and untouched.
    """

    pokemon: Pokemon
    strategy: MoveStrategy

    current_hp: int | None = None  # Defaults to the species' max HP
    is_fainted: bool = False
    move_states: list[MoveState] = Field(default_factory=list)

    @model_validator(mode="after")
    def _fill_and_check_state(self) -> BattlePokemon:
        """Default to full HP and PP, then hold the battle-state invariants."""
        if self.current_hp is None:
            self.current_hp = self.pokemon.hp
        if not self.move_states:
            self.move_states = [MoveState(move=m) for m in self.pokemon.moves]

        if not 0 <= self.current_hp <= self.max_hp:
            raise ValueError(f"current_hp must be between 0 and {self.max_hp}, got {self.current_hp}")
        if self.is_fainted != (self.current_hp == 0):
            raise ValueError("is_fainted must be set exactly when current_hp is 0")
        if len(self.move_states) != config.move_slots:
            raise ValueError(f"expected {config.move_slots} move states, got {len(self.move_states)}")
        if any(state.move != move for state, move in zip(self.move_states, self.pokemon.moves)):
            raise ValueError("move states must mirror the species' move slots")
        return self

    # References to the species definition
    @property
    def name(self) -> str:
        return self.pokemon.name

    @property
    def display_name(self) -> str:
        return self.pokemon.display_name

    @property
    def level(self) -> int:
        return self.pokemon.level

    @property
    def type1(self) -> PokemonType:
        return self.pokemon.type1

    @property
    def type2(self) -> PokemonType | None:
        return self.pokemon.type2

    @property
    def types(self) -> list[PokemonType]:
        return self.pokemon.types

    @property
    def max_hp(self) -> int:
        return self.pokemon.hp

    @property
    def atk(self) -> int:
        return self.pokemon.atk

    @property
    def defense(self) -> int:
        return self.pokemon.defense

    @property
    def spa(self) -> int:
        return self.pokemon.spa

    @property
    def spd(self) -> int:
        return self.pokemon.spd

    @property
    def spe(self) -> int:
        return self.pokemon.spe

    @property
    def hp_percent(self) -> float:
        return (self.current_hp / self.max_hp) * 100

    @property
    def has_usable_moves(self) -> bool:
        return any(state.is_usable for state in self.move_states)

    def take_damage(self, amount: int) -> int:
        """Apply damage, return actual amount dealt. Clamps to 0."""
        if amount < 0:
            raise InvalidArgumentError(f"Damage cannot be negative (got {amount}).")
        actual = min(amount, self.current_hp)
        self.current_hp -= actual
        if self.current_hp <= 0:
            self.current_hp = 0
            self.is_fainted = True
        return actual

    def get_next_move(self, opponent: BattlePokemon | None, rng: random.Random) -> MoveState:
        """Pick the move to use against ``opponent``.

        Falls back to Struggle without consulting the strategy once every
        owned move is out of PP. Never spends PP itself.
        """
        if opponent is None:
            raise InvalidArgumentError("Opponent cannot be None.")
        if not self.has_usable_moves:
            return FALLBACK_MOVE
        return self.strategy(self, opponent, rng)

    def clone(self) -> BattlePokemon:
        """Copy all battle state; the species and strategy stay shared."""
        return self.model_copy(
            update={"move_states": [state.model_copy() for state in self.move_states]}
        )


def create_battle_pokemon(pokemon: Pokemon, strategy: MoveStrategy) -> BattlePokemon:
    """Create a fresh combatant at full HP and full PP."""
    if pokemon is None:
        raise InvalidArgumentError("Pokemon cannot be None.")
    if strategy is None:
        raise InvalidArgumentError("Move strategy cannot be None.")
    return BattlePokemon(pokemon=pokemon, strategy=strategy)
