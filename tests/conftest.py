"""Shared fixtures for pokebattle tests."""

import random

import pytest
from typer.testing import CliRunner

from pokebattle.core.moves import Move, MoveCategory
from pokebattle.core.pokemon import BattlePokemon, Pokemon, create_battle_pokemon
from pokebattle.core.strategies import first_valid_move
from pokebattle.core.types import PokemonType


class ScriptedRandom(random.Random):
    """A ``random.Random`` whose ``random()`` replays a fixed script.

    Once the script runs out every draw returns ``default``. ``randrange``
    (the speed-tie coin flip) always returns ``coin``.
    """

    def __init__(self, values=(), default=0.5, coin=0):
        super().__init__(0)
        self._values = list(values)
        self.default = default
        self.coin = coin

    def random(self):
        if self._values:
            return self._values.pop(0)
        return self.default

    def randrange(self, *args, **kwargs):
        return self.coin


# Move fixtures
@pytest.fixture
def tackle() -> Move:
    return Move(name="tackle", type=PokemonType.NORMAL, category=MoveCategory.PHYSICAL, power=40, accuracy=100, pp=35)


@pytest.fixture
def ember() -> Move:
    return Move(name="ember", type=PokemonType.FIRE, category=MoveCategory.SPECIAL, power=40, accuracy=100, pp=25)


@pytest.fixture
def never_hits() -> Move:
    """A move with zero accuracy."""
    return Move(name="whiff", type=PokemonType.NORMAL, power=200, accuracy=0, pp=40)


# Pokemon fixtures
@pytest.fixture
def bulbasaur(tackle) -> Pokemon:
    """A pure grass Pokemon with a single move."""
    return Pokemon(
        name="bulbasaur",
        level=50,
        hp=120,
        atk=100,
        defense=100,
        spa=100,
        spd=100,
        spe=45,
        type1=PokemonType.GRASS,
        moves=[tackle],
    )


@pytest.fixture
def charmander(tackle, ember) -> Pokemon:
    """A pure fire Pokemon, faster than bulbasaur."""
    return Pokemon(
        name="charmander",
        level=50,
        hp=110,
        atk=100,
        defense=100,
        spa=100,
        spd=100,
        spe=65,
        type1=PokemonType.FIRE,
        moves=[tackle, ember],
    )


@pytest.fixture
def battle_bulbasaur(bulbasaur) -> BattlePokemon:
    return create_battle_pokemon(bulbasaur, first_valid_move)


@pytest.fixture
def battle_charmander(charmander) -> BattlePokemon:
    return create_battle_pokemon(charmander, first_valid_move)


# Utility fixtures
@pytest.fixture
def scripted_rng():
    """Factory for random sources with scripted draws."""
    return ScriptedRandom


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Typer CLI runner for command tests."""
    return CliRunner()
