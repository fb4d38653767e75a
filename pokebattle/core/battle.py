"""Turn resolution and battle orchestration.

A battle runs synchronously from the first turn to the last faint:
    order by speed -> faster attacks -> slower attacks (if still standing)

Everything random (speed ties, accuracy, critical hits, damage spread and
random strategies) draws from the engine's own ``random.Random``, so a
seeded engine replays the same battle.
"""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Callable

from pydantic import BaseModel

from pokebattle.core.errors import InvalidArgumentError, SimultaneousFaintError
from pokebattle.core.moves import roll_damage
from pokebattle.core.pokemon import BattlePokemon
from pokebattle.core.team import BattleTeam

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Results and events
# ---------------------------------------------------------------------------

class TurnResult(str, Enum):
    """Outcome of a single turn."""

    ONGOING = "ongoing"  # Both Pokemon still standing
    FAINTED = "fainted"  # A Pokemon fainted this turn


class BattleResult(str, Enum):
    """Outcome of a whole battle."""

    FIRST_WIN = "first_win"
    SECOND_WIN = "second_win"


class TurnEvent(BaseModel):
    """A single thing that happened during a battle.

    Callers use these to narrate the battle; the engine itself never prints.
    """

    event_type: str  # "send_out", "turn", "attack", "miss", "damage", "faint", "battle_end", "team_defeated"
    turn: int = 0
    pokemon_name: str = ""
    target_name: str = ""
    team_name: str = ""
    move_name: str = ""
    damage: int = 0
    effectiveness: float = 1.0
    critical: bool = False
    message: str = ""


EventSink = Callable[[TurnEvent], None]


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------

class BattleEngine:
    """Resolves turns and runs battles to completion.

    Holds only the random source and the event sink; all battle state lives
    on the combatants and teams passed in, which are mutated in place.
    """

    def __init__(self, rng: random.Random | None = None, sink: EventSink | None = None) -> None:
        self.rng = rng or random.Random()
        self.sink = sink
        self._turn = 0

    def _emit(self, event_type: str, **fields) -> None:
        if self.sink is not None:
            self.sink(TurnEvent(event_type=event_type, turn=self._turn, **fields))

    # -- single turn -------------------------------------------------------

    def _order_by_speed(
        self, first: BattlePokemon, second: BattlePokemon
    ) -> tuple[BattlePokemon, BattlePokemon]:
        if first.spe > second.spe:
            return first, second
        if first.spe < second.spe:
            return second, first
        # Speed tie -- coin flip
        if self.rng.randrange(2) == 0:
            return first, second
        return second, first

    def _execute_attack(self, attacker: BattlePokemon, defender: BattlePokemon) -> None:
        """Pick, spend and (maybe) land one move."""
        state = attacker.get_next_move(defender, self.rng)
        state.use()
        move = state.move

        self._emit(
            "attack",
            pokemon_name=attacker.display_name,
            target_name=defender.display_name,
            move_name=move.display_name,
            message=f"{attacker.display_name} used {move.display_name}.",
        )

        if self.rng.random() >= move.accuracy / 100:
            self._emit(
                "miss",
                pokemon_name=attacker.display_name,
                move_name=move.display_name,
                message=f"{attacker.display_name} missed.",
            )
            return

        roll = roll_damage(attacker, defender, move, self.rng)
        dealt = defender.take_damage(roll.damage)

        eff_msg = ""
        if roll.effectiveness > 1.0:
            eff_msg = "It's super effective!"
        elif roll.effectiveness < 1.0:
            eff_msg = "It's not very effective..."
        crit_msg = " A critical hit!" if roll.critical else ""

        self._emit(
            "damage",
            pokemon_name=defender.display_name,
            move_name=move.display_name,
            damage=dealt,
            effectiveness=roll.effectiveness,
            critical=roll.critical,
            message=f"{defender.display_name} took {dealt} damage.{crit_msg} {eff_msg}".strip(),
        )

    def simulate_turn(self, first: BattlePokemon | None, second: BattlePokemon | None) -> TurnResult:
        """Resolve one exchange between two Pokemon.

        The faster Pokemon attacks first. If that knocks the slower one out,
        the turn ends there and the slower one never acts.
        """
        if first is None:
            raise InvalidArgumentError("First Pokemon cannot be None.")
        if second is None:
            raise InvalidArgumentError("Second Pokemon cannot be None.")

        faster, slower = self._order_by_speed(first, second)

        self._execute_attack(faster, slower)
        if slower.is_fainted:
            return TurnResult.FAINTED

        self._execute_attack(slower, faster)
        if faster.is_fainted:
            return TurnResult.FAINTED

        return TurnResult.ONGOING

    # -- 1v1 battle --------------------------------------------------------

    def simulate_battle(self, first: BattlePokemon | None, second: BattlePokemon | None) -> BattleResult:
        """Fight until one Pokemon faints."""
        if first is None:
            raise InvalidArgumentError("First Pokemon cannot be None.")
        if second is None:
            raise InvalidArgumentError("Second Pokemon cannot be None.")

        self._turn = 0
        result = TurnResult.ONGOING
        while result == TurnResult.ONGOING:
            self._turn += 1
            self._emit(
                "turn",
                message=(
                    f"Turn {self._turn}: {first.display_name} {first.current_hp}/{first.max_hp} HP, "
                    f"{second.display_name} {second.current_hp}/{second.max_hp} HP"
                ),
            )
            result = self.simulate_turn(first, second)

        if first.is_fainted and second.is_fainted:
            raise SimultaneousFaintError(first.display_name, second.display_name)

        if first.is_fainted:
            loser, winner, outcome = first, second, BattleResult.SECOND_WIN
        else:
            loser, winner, outcome = second, first, BattleResult.FIRST_WIN

        self._emit("faint", pokemon_name=loser.display_name, message=f"{loser.display_name} fainted!")
        self._emit("battle_end", pokemon_name=winner.display_name, message=f"{winner.display_name} won the battle!")
        logger.debug(
            "%s beat %s in %d turns (%d HP left)",
            winner.display_name, loser.display_name, self._turn, winner.current_hp,
        )
        return outcome

    # -- team battle -------------------------------------------------------

    def _send_out(self, team: BattleTeam, pokemon: BattlePokemon) -> None:
        self._emit(
            "send_out",
            team_name=team.name,
            pokemon_name=pokemon.display_name,
            message=f"Team {team.name} sent out {pokemon.display_name}!",
        )

    def simulate_team_battle(self, first_team: BattleTeam | None, second_team: BattleTeam | None) -> BattleResult:
        """Fight until every Pokemon on one team has fainted.

        Leads fight first. After each knockout only the losing side sends in
        a replacement (chosen by its team strategy); the winner stays in.
        """
        if first_team is None:
            raise InvalidArgumentError("First team cannot be None.")
        if second_team is None:
            raise InvalidArgumentError("Second team cannot be None.")

        first_active = first_team.lead
        second_active = second_team.lead
        if first_active is None or second_active is None:
            raise InvalidArgumentError("Both teams need a lead Pokemon.")

        self._send_out(first_team, first_active)
        self._send_out(second_team, second_active)
        result = self.simulate_battle(first_active, second_active)

        while not first_team.all_fainted and not second_team.all_fainted:
            if result == BattleResult.FIRST_WIN:
                second_active = second_team.pick_next(first_active, self.rng)
                self._send_out(second_team, second_active)
            else:
                first_active = first_team.pick_next(second_active, self.rng)
                self._send_out(first_team, first_active)
            result = self.simulate_battle(first_active, second_active)

        if first_team.all_fainted and second_team.all_fainted:
            raise SimultaneousFaintError(first_team.name, second_team.name)

        if first_team.all_fainted:
            loser, winner, outcome = first_team, second_team, BattleResult.SECOND_WIN
        else:
            loser, winner, outcome = second_team, first_team, BattleResult.FIRST_WIN

        self._emit(
            "team_defeated",
            team_name=loser.name,
            message=f"Team {loser.name} has no Pokemon left! Team {winner.name} wins!",
        )
        logger.debug("Team %s beat team %s with %d Pokemon left", winner.name, loser.name, winner.alive_count)
        return outcome
