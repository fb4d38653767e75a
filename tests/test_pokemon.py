"""Tests for Pokemon definitions and the BattlePokemon combatant."""

import random

import pytest
from pydantic import ValidationError

from pokebattle.core.errors import InvalidArgumentError
from pokebattle.core.moves import FALLBACK_MOVE, Move, MoveCategory, MoveState
from pokebattle.core.pokemon import BattlePokemon, Pokemon, create_battle_pokemon
from pokebattle.core.strategies import first_valid_move
from pokebattle.core.types import PokemonType


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_move(name="tackle", type_=PokemonType.NORMAL, power=40, accuracy=100, pp=35) -> Move:
    return Move(name=name, type=type_, category=MoveCategory.PHYSICAL, power=power, accuracy=accuracy, pp=pp)


def _make_pokemon(name="pikachu", type1=PokemonType.ELECTRIC, type2=None, hp=100, moves=None) -> Pokemon:
    return Pokemon(
        name=name,
        hp=hp,
        atk=55,
        defense=40,
        spa=50,
        spd=50,
        spe=90,
        type1=type1,
        type2=type2,
        moves=moves if moves is not None else [_make_move()],
    )


def _make_battle_pokemon(hp=100, moves=None, strategy=first_valid_move, **kwargs) -> BattlePokemon:
    return create_battle_pokemon(_make_pokemon(hp=hp, moves=moves, **kwargs), strategy)


# ---------------------------------------------------------------------------
# Pokemon
# ---------------------------------------------------------------------------


class TestPokemon:
    """Tests for the immutable species definition."""

    def test_moves_padded_to_four(self):
        p = _make_pokemon()
        assert len(p.moves) == 4
        assert p.moves[0] is not None
        assert p.moves[1:] == (None, None, None)

    def test_single_move_accepted(self):
        move = _make_move()
        p = _make_pokemon(moves=move)
        assert p.moves[0] == move

    def test_empty_first_slot_rejected(self):
        with pytest.raises(ValidationError):
            _make_pokemon(moves=[None, _make_move()])

    def test_no_moves_rejected(self):
        with pytest.raises(ValidationError):
            _make_pokemon(moves=[])

    def test_more_than_four_moves_rejected(self):
        with pytest.raises(ValidationError):
            _make_pokemon(moves=[_make_move(name=f"m{i}") for i in range(5)])

    def test_level_bounds(self):
        with pytest.raises(ValidationError):
            Pokemon(name="x", level=0, hp=10, atk=1, defense=1, spa=1, spd=1, spe=1,
                    type1=PokemonType.NORMAL, moves=[_make_move()])

    def test_zero_hp_rejected(self):
        with pytest.raises(ValidationError):
            _make_pokemon(hp=0)

    def test_frozen(self):
        p = _make_pokemon()
        with pytest.raises(ValidationError):
            p.hp = 500

    def test_display_name(self):
        assert _make_pokemon(name="bulbasaur").display_name == "Bulbasaur"

    def test_types_single(self):
        assert _make_pokemon(type1=PokemonType.FIRE).types == [PokemonType.FIRE]

    def test_types_dual(self):
        p = _make_pokemon(type1=PokemonType.FIRE, type2=PokemonType.FLYING)
        assert p.types == [PokemonType.FIRE, PokemonType.FLYING]


# ---------------------------------------------------------------------------
# BattlePokemon
# ---------------------------------------------------------------------------


class TestBattlePokemon:
    """Tests for the per-battle combatant."""

    def test_starts_at_full_hp(self):
        bp = _make_battle_pokemon(hp=80)
        assert bp.current_hp == 80
        assert bp.max_hp == 80
        assert bp.is_fainted is False

    def test_move_states_mirror_slots(self):
        move = _make_move(pp=12)
        bp = _make_battle_pokemon(moves=[move])
        assert len(bp.move_states) == 4
        assert bp.move_states[0].move is move
        assert bp.move_states[0].remaining_uses == 12
        assert all(s.move is None and s.remaining_uses == 0 for s in bp.move_states[1:])

    def test_stats_delegate_to_species(self):
        bp = _make_battle_pokemon()
        assert (bp.atk, bp.defense, bp.spa, bp.spd, bp.spe) == (55, 40, 50, 50, 90)
        assert bp.level == 50
        assert bp.type1 == PokemonType.ELECTRIC
        assert bp.display_name == "Pikachu"

    def test_hp_percent(self):
        bp = _make_battle_pokemon(hp=200)
        bp.take_damage(100)
        assert bp.hp_percent == 50.0

    def test_take_damage(self):
        bp = _make_battle_pokemon(hp=100)
        actual = bp.take_damage(30)
        assert actual == 30
        assert bp.current_hp == 70
        assert bp.is_fainted is False

    def test_take_damage_overkill(self):
        bp = _make_battle_pokemon(hp=100)
        bp.take_damage(80)
        actual = bp.take_damage(50)
        assert actual == 20
        assert bp.current_hp == 0
        assert bp.is_fainted is True

    def test_take_exact_lethal_damage(self):
        bp = _make_battle_pokemon(hp=100)
        bp.take_damage(100)
        assert bp.current_hp == 0
        assert bp.is_fainted is True

    def test_take_zero_damage(self):
        bp = _make_battle_pokemon(hp=100)
        assert bp.take_damage(0) == 0
        assert bp.current_hp == 100

    def test_negative_damage_raises(self):
        bp = _make_battle_pokemon(hp=100)
        with pytest.raises(InvalidArgumentError):
            bp.take_damage(-1)
        assert bp.current_hp == 100

    def test_fainting_is_permanent(self):
        bp = _make_battle_pokemon(hp=10)
        bp.take_damage(10)
        bp.take_damage(0)
        assert bp.is_fainted is True

    def test_species_untouched_by_damage(self):
        bp = _make_battle_pokemon(hp=100)
        bp.take_damage(40)
        assert bp.pokemon.hp == 100


class TestBattleStateValidation:
    """Tests for rejecting inconsistent combatant state."""

    def test_negative_hp_rejected(self):
        with pytest.raises(ValidationError):
            BattlePokemon(pokemon=_make_pokemon(), strategy=first_valid_move, current_hp=-5)

    def test_hp_above_max_rejected(self):
        with pytest.raises(ValidationError):
            BattlePokemon(pokemon=_make_pokemon(hp=100), strategy=first_valid_move, current_hp=101)

    def test_zero_hp_without_fainting_rejected(self):
        with pytest.raises(ValidationError):
            BattlePokemon(pokemon=_make_pokemon(), strategy=first_valid_move, current_hp=0)

    def test_fainted_with_hp_rejected(self):
        with pytest.raises(ValidationError):
            BattlePokemon(pokemon=_make_pokemon(), strategy=first_valid_move, current_hp=10, is_fainted=True)

    def test_fainted_at_zero_hp_accepted(self):
        bp = BattlePokemon(pokemon=_make_pokemon(), strategy=first_valid_move, current_hp=0, is_fainted=True)
        assert bp.is_fainted is True
        assert bp.current_hp == 0

    def test_partial_hp_accepted(self):
        bp = BattlePokemon(pokemon=_make_pokemon(hp=100), strategy=first_valid_move, current_hp=40)
        assert bp.hp_percent == 40.0

    def test_wrong_number_of_move_states_rejected(self):
        move = _make_move()
        with pytest.raises(ValidationError):
            BattlePokemon(pokemon=_make_pokemon(moves=[move]), strategy=first_valid_move,
                          move_states=[MoveState(move=move)])

    def test_move_states_for_other_moves_rejected(self):
        pokemon = _make_pokemon(moves=[_make_move()])
        states = [MoveState(move=_make_move(name="ember"))] + [MoveState() for _ in range(3)]
        with pytest.raises(ValidationError):
            BattlePokemon(pokemon=pokemon, strategy=first_valid_move, move_states=states)

    def test_matching_move_states_kept(self):
        move = _make_move(pp=10)
        states = [MoveState(move=move, remaining_uses=3)] + [MoveState() for _ in range(3)]
        bp = BattlePokemon(pokemon=_make_pokemon(moves=[move]), strategy=first_valid_move, move_states=states)
        assert bp.move_states[0].remaining_uses == 3


class TestGetNextMove:
    """Tests for move selection on the combatant."""

    def test_delegates_to_strategy(self):
        calls = []

        def strategy(own, opponent, rng):
            calls.append((own, opponent, rng))
            return own.move_states[0]

        bp = _make_battle_pokemon(strategy=strategy)
        opponent = _make_battle_pokemon()
        rng = random.Random(1)
        state = bp.get_next_move(opponent, rng)
        assert state is bp.move_states[0]
        assert calls == [(bp, opponent, rng)]

    def test_does_not_spend_pp(self):
        bp = _make_battle_pokemon(moves=[_make_move(pp=5)])
        opponent = _make_battle_pokemon()
        for _ in range(10):
            bp.get_next_move(opponent, random.Random(0))
        assert bp.move_states[0].remaining_uses == 5

    def test_fallback_when_exhausted(self):
        bp = _make_battle_pokemon(moves=[_make_move(pp=1)])
        opponent = _make_battle_pokemon()
        bp.get_next_move(opponent, random.Random(0)).use()
        assert bp.has_usable_moves is False
        for _ in range(5):
            state = bp.get_next_move(opponent, random.Random(0))
            assert state is FALLBACK_MOVE
            state.use()
        assert bp.get_next_move(opponent, random.Random(0)) is FALLBACK_MOVE

    def test_fallback_skips_strategy(self):
        def strategy(own, opponent, rng):
            raise AssertionError("strategy should not be consulted")

        bp = _make_battle_pokemon(moves=[_make_move(pp=1)], strategy=strategy)
        bp.move_states[0].use()
        assert bp.get_next_move(_make_battle_pokemon(), random.Random(0)) is FALLBACK_MOVE

    def test_none_opponent_raises(self):
        with pytest.raises(InvalidArgumentError):
            _make_battle_pokemon().get_next_move(None, random.Random(0))


class TestClone:
    """Tests for per-battle copies."""

    def test_clone_copies_state(self):
        bp = _make_battle_pokemon(hp=100)
        bp.take_damage(25)
        bp.move_states[0].use()
        clone = bp.clone()
        assert clone.current_hp == 75
        assert clone.move_states[0].remaining_uses == bp.move_states[0].remaining_uses

    def test_clone_is_independent(self):
        bp = _make_battle_pokemon(hp=100)
        clone = bp.clone()
        clone.take_damage(100)
        clone.move_states[0].use()
        assert bp.current_hp == 100
        assert bp.is_fainted is False
        assert bp.move_states[0].remaining_uses == 35

    def test_clone_shares_definitions(self):
        bp = _make_battle_pokemon()
        clone = bp.clone()
        assert clone.pokemon is bp.pokemon
        assert clone.strategy is bp.strategy
        assert clone.move_states[0].move is bp.move_states[0].move


class TestCreateBattlePokemon:
    """Tests for the factory."""

    def test_none_pokemon_raises(self):
        with pytest.raises(InvalidArgumentError):
            create_battle_pokemon(None, first_valid_move)

    def test_none_strategy_raises(self):
        with pytest.raises(InvalidArgumentError):
            create_battle_pokemon(_make_pokemon(), None)
