"""Move model, per-battle PP tracking, and damage calculation."""

from __future__ import annotations

import random
from enum import Enum
from typing import TYPE_CHECKING, Any, NamedTuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from pokebattle.core.errors import InvalidArgumentError, InvalidStateError
from pokebattle.core.types import PokemonType, get_type_effectiveness
from pokebattle.utils.config import config

if TYPE_CHECKING:
    from pokebattle.core.pokemon import BattlePokemon, Pokemon


class MoveCategory(str, Enum):
    """Move damage classification."""

    PHYSICAL = "physical"
    SPECIAL = "special"


# ---------------------------------------------------------------------------
# Move model
# ---------------------------------------------------------------------------

class Move(BaseModel):
    """A Pokemon move. Shared between battles and never mutated."""

    model_config = ConfigDict(frozen=True)

    name: str
    display_name: str = ""  # Human-friendly (computed from name if blank)
    type: PokemonType
    category: MoveCategory = MoveCategory.PHYSICAL
    power: int = Field(default=40, ge=0)
    accuracy: int = Field(default=100, ge=0, le=100)  # 0 never hits
    pp: int = Field(default=20, ge=1, le=40)  # Base power points

    @model_validator(mode="before")
    @classmethod
    def _default_display_name(cls, data: Any) -> Any:
        """Set display_name from name if not provided."""
        if isinstance(data, dict) and not data.get("display_name") and data.get("name"):
            data = {**data, "display_name": str(data["name"]).replace("-", " ").title()}
        return data


class MoveState(BaseModel):
    """Remaining uses of one move slot during a single battle.

    An empty slot (``move is None``) always has zero uses. The count starts
    at the move's PP and only ever goes down.
    """

    move: Move | None = None
    remaining_uses: int = Field(default=0, ge=0)

    @model_validator(mode="before")
    @classmethod
    def _default_remaining_uses(cls, data: Any) -> Any:
        """Start a filled slot at full PP unless a count is given."""
        if isinstance(data, dict) and data.get("remaining_uses") is None:
            move = data.get("move")
            pp = Move.model_validate(move).pp if move is not None else 0
            data = {**data, "remaining_uses": pp}
        return data

    @model_validator(mode="after")
    def _check_empty_slot(self) -> MoveState:
        if self.move is None and self.remaining_uses != 0:
            raise ValueError("an empty move slot cannot have remaining uses")
        return self

    @property
    def is_usable(self) -> bool:
        return self.move is not None and self.remaining_uses > 0

    def use(self) -> None:
        """Spend one use of this move."""
        if not self.is_usable:
            name = self.move.display_name if self.move else "empty slot"
            raise InvalidStateError(f"Cannot use {name}: no PP left.")
        self.remaining_uses -= 1


class FallbackMoveState(MoveState):
    """Move used once every other move is out of PP. Never runs out.

    Frozen, since a single instance is shared by every combatant and thread.
    """

    model_config = ConfigDict(frozen=True)

    def use(self) -> None:
        pass


STRUGGLE = Move(
    name="struggle",
    type=PokemonType.NORMAL,
    category=MoveCategory.PHYSICAL,
    power=50,
    accuracy=100,
    pp=1,
)

# Shared by every combatant
FALLBACK_MOVE = FallbackMoveState(move=STRUGGLE)


# ---------------------------------------------------------------------------
# Damage calculation
# ---------------------------------------------------------------------------

class DamageRoll(NamedTuple):
    """Outcome of one damage roll."""

    damage: int
    effectiveness: float
    critical: bool


def roll_damage(
    attacker: Pokemon | BattlePokemon | None,
    defender: Pokemon | BattlePokemon | None,
    move: Move | None,
    rng: random.Random,
) -> DamageRoll:
    """Roll damage using the standard single-generation damage formula.

    Formula:
        base = (((2 * level / 5 + 2) * power * A / D) / 50) + 2
        damage = base * critical * random(0.85..1.0) * STAB * type_effectiveness

    A/D are Attack/Defense for physical moves and Sp. Atk/Sp. Def for
    special ones. The critical roll is drawn before the spread roll.
    Damage is floored and never below 1.
    """
    if attacker is None:
        raise InvalidArgumentError("Attacker cannot be None.")
    if defender is None:
        raise InvalidArgumentError("Defender cannot be None.")
    if move is None:
        raise InvalidArgumentError("Move cannot be None.")

    if move.category == MoveCategory.PHYSICAL:
        attack_stat = attacker.atk
        defense_stat = defender.defense
    else:
        attack_stat = attacker.spa
        defense_stat = defender.spd

    base = (((2 * attacker.level / 5 + 2) * move.power * attack_stat / max(1, defense_stat)) / 50) + 2

    is_crit = rng.random() < config.critical_hit_chance
    crit_mult = config.critical_hit_multiplier if is_crit else 1.0

    rand_factor = rng.uniform(config.damage_spread_min, config.damage_spread_max)

    stab = config.stab_multiplier if move.type in (attacker.type1, attacker.type2) else 1.0

    effectiveness = get_type_effectiveness(move.type, defender.type1, defender.type2)

    damage = max(1, int(base * crit_mult * rand_factor * stab * effectiveness))
    return DamageRoll(damage, effectiveness, is_crit)


def calculate_damage(
    attacker: Pokemon | BattlePokemon | None,
    defender: Pokemon | BattlePokemon | None,
    move: Move | None,
    rng: random.Random,
) -> int:
    """Return the damage ``attacker`` deals to ``defender`` with ``move``."""
    return roll_damage(attacker, defender, move, rng).damage
