"""Tests for team definitions and BattleTeam."""

import random

import pytest
from pydantic import ValidationError

from pokebattle.core.errors import InvalidArgumentError
from pokebattle.core.moves import Move
from pokebattle.core.pokemon import Pokemon, create_battle_pokemon
from pokebattle.core.strategies import first_available_pokemon, first_valid_move
from pokebattle.core.team import BattleTeam, PokemonTeam, create_battle_team
from pokebattle.core.types import PokemonType


def _make_pokemon(name="pikachu", hp=100) -> Pokemon:
    return Pokemon(
        name=name,
        hp=hp,
        atk=55,
        defense=40,
        spa=50,
        spd=50,
        spe=90,
        type1=PokemonType.ELECTRIC,
        moves=[Move(name="tackle", type=PokemonType.NORMAL, pp=10)],
    )


def _make_team(names=("a", "b", "c"), name="red") -> PokemonTeam:
    return PokemonTeam(name=name, members=[_make_pokemon(n) for n in names])


def _make_battle_team(names=("a", "b", "c")) -> BattleTeam:
    return create_battle_team(_make_team(names), first_valid_move, first_available_pokemon)


class TestPokemonTeam:
    """Tests for the immutable team definition."""

    def test_padded_to_six(self):
        team = _make_team()
        assert len(team.members) == 6
        assert team.members[3:] == (None, None, None)
        assert team.size == 3

    def test_empty_lead_rejected(self):
        with pytest.raises(ValidationError):
            PokemonTeam(name="red", members=[None, _make_pokemon()])

    def test_seven_members_rejected(self):
        with pytest.raises(ValidationError):
            _make_team(names=[str(i) for i in range(7)])

    def test_gaps_allowed(self):
        team = PokemonTeam(name="red", members=[_make_pokemon("a"), None, _make_pokemon("b")])
        assert team.size == 2


class TestBattleTeam:
    """Tests for the per-battle team."""

    def test_members_built_with_team_strategy(self):
        team = _make_battle_team()
        assert len(team.members) == 6
        assert all(m.strategy is first_valid_move for m in team.members[:3])
        assert team.members[3:] == [None, None, None]

    def test_lead(self):
        team = _make_battle_team()
        assert team.lead.name == "a"

    def test_name(self):
        assert _make_battle_team().name == "red"

    def test_available_skips_fainted_and_empty(self):
        team = _make_battle_team()
        team.members[0].take_damage(1000)
        assert [p.name for p in team.available] == ["b", "c"]
        assert team.alive_count == 2

    def test_all_fainted(self):
        team = _make_battle_team()
        assert team.all_fainted is False
        for member in team.available:
            member.take_damage(1000)
        assert team.all_fainted is True
        assert team.alive_count == 0

    def test_pick_next_uses_team_strategy(self):
        team = _make_battle_team()
        team.members[0].take_damage(1000)
        opponent = create_battle_pokemon(_make_pokemon("opp"), first_valid_move)
        assert team.pick_next(opponent, random.Random(0)) is team.members[1]

    def test_pick_next_none_opponent_raises(self):
        with pytest.raises(InvalidArgumentError):
            _make_battle_team().pick_next(None, random.Random(0))

    def test_clone_is_independent(self):
        team = _make_battle_team()
        clone = team.clone()
        clone.members[0].take_damage(1000)
        clone.members[1].move_states[0].use()
        assert team.members[0].is_fainted is False
        assert team.members[1].move_states[0].remaining_uses == 10
        assert clone.team is team.team
        assert clone.members[3] is None

    def test_create_none_team_raises(self):
        with pytest.raises(InvalidArgumentError):
            create_battle_team(None, first_valid_move, first_available_pokemon)

    def test_create_none_strategy_raises(self):
        with pytest.raises(InvalidArgumentError):
            create_battle_team(_make_team(), first_valid_move, None)
