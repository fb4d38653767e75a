"""Built-in sample moves, Pokemon and teams.

Enough data to run battles from the command line without building a
roster first. Stats are level 50 values with neutral natures.
"""

from pokebattle.core.errors import InvalidArgumentError
from pokebattle.core.moves import Move, MoveCategory
from pokebattle.core.pokemon import Pokemon
from pokebattle.core.team import PokemonTeam
from pokebattle.core.types import PokemonType

# (name, type, category, power, accuracy, pp)
# fmt: off
_MOVE_DATA: list[tuple[str, str, str, int, int, int]] = [
    ("tackle", "normal", "physical", 40, 100, 35),
    ("quick-attack", "normal", "physical", 40, 100, 30),
    ("body-slam", "normal", "physical", 85, 100, 15),
    ("hyper-beam", "normal", "special", 150, 90, 5),
    ("ember", "fire", "special", 40, 100, 25),
    ("flamethrower", "fire", "special", 90, 100, 15),
    ("fire-blast", "fire", "special", 110, 85, 5),
    ("water-gun", "water", "special", 40, 100, 25),
    ("surf", "water", "special", 90, 100, 15),
    ("hydro-pump", "water", "special", 110, 80, 5),
    ("vine-whip", "grass", "physical", 45, 100, 25),
    ("razor-leaf", "grass", "physical", 55, 95, 25),
    ("energy-ball", "grass", "special", 90, 100, 10),
    ("thunder-shock", "electric", "special", 40, 100, 30),
    ("thunderbolt", "electric", "special", 90, 100, 15),
    ("thunder", "electric", "special", 110, 70, 10),
    ("ice-beam", "ice", "special", 90, 100, 10),
    ("brick-break", "fighting", "physical", 75, 100, 15),
    ("sludge-bomb", "poison", "special", 90, 100, 10),
    ("earthquake", "ground", "physical", 100, 100, 10),
    ("wing-attack", "flying", "physical", 60, 100, 35),
    ("psychic", "psychic", "special", 90, 100, 10),
    ("rock-slide", "rock", "physical", 75, 90, 10),
    ("shadow-ball", "ghost", "special", 80, 100, 15),
    ("dragon-claw", "dragon", "physical", 80, 100, 15),
    ("crunch", "dark", "physical", 80, 100, 15),
    ("iron-tail", "steel", "physical", 100, 75, 15),
    ("moonblast", "fairy", "special", 95, 100, 15),
]
# fmt: on


def _move_from_tuple(data: tuple[str, str, str, int, int, int]) -> Move:
    """Create a Move from a sample-data tuple."""
    name, mtype, category, power, accuracy, pp = data
    return Move(
        name=name,
        type=PokemonType(mtype),
        category=MoveCategory(category),
        power=power,
        accuracy=accuracy,
        pp=pp,
    )


SAMPLE_MOVES: dict[str, Move] = {data[0]: _move_from_tuple(data) for data in _MOVE_DATA}


def _moves(*names: str) -> list[Move]:
    return [SAMPLE_MOVES[n] for n in names]


# name -> (type1, type2, (hp, atk, def, spa, spd, spe), moves)
# fmt: off
_POKEMON_DATA: dict[str, tuple[str, str | None, tuple[int, int, int, int, int, int], list[str]]] = {
    "pikachu": ("electric", None, (95, 75, 50, 70, 60, 110), ["thunderbolt", "quick-attack", "iron-tail", "thunder"]),
    "charizard": ("fire", "flying", (138, 104, 98, 129, 105, 120), ["flamethrower", "wing-attack", "dragon-claw", "fire-blast"]),
    "blastoise": ("water", None, (139, 103, 120, 105, 125, 98), ["surf", "ice-beam", "hydro-pump", "crunch"]),
    "venusaur": ("grass", "poison", (140, 102, 103, 120, 120, 100), ["energy-ball", "sludge-bomb", "razor-leaf", "body-slam"]),
    "gengar": ("ghost", "poison", (120, 85, 80, 150, 95, 130), ["shadow-ball", "sludge-bomb", "thunderbolt", "psychic"]),
    "snorlax": ("normal", None, (220, 130, 85, 85, 130, 50), ["body-slam", "earthquake", "crunch", "hyper-beam"]),
    "golem": ("rock", "ground", (140, 130, 150, 75, 85, 65), ["earthquake", "rock-slide", "body-slam", "brick-break"]),
    "alakazam": ("psychic", None, (115, 70, 65, 155, 115, 140), ["psychic", "shadow-ball", "energy-ball"]),
    "dragonite": ("dragon", "flying", (151, 154, 115, 120, 120, 100), ["dragon-claw", "wing-attack", "earthquake", "thunderbolt"]),
    "machamp": ("fighting", None, (150, 150, 100, 85, 105, 75), ["brick-break", "rock-slide", "earthquake", "body-slam"]),
    "clefable": ("fairy", None, (155, 90, 93, 115, 110, 80), ["moonblast", "ice-beam", "body-slam"]),
    "rattata": ("normal", None, (85, 76, 55, 45, 55, 92), ["tackle"]),
}
# fmt: on


def _pokemon_from_data(name: str) -> Pokemon:
    type1, type2, (hp, atk, defense, spa, spd, spe), moves = _POKEMON_DATA[name]
    return Pokemon(
        name=name,
        level=50,
        hp=hp,
        atk=atk,
        defense=defense,
        spa=spa,
        spd=spd,
        spe=spe,
        type1=PokemonType(type1),
        type2=PokemonType(type2) if type2 else None,
        moves=_moves(*moves),
    )


SAMPLE_POKEMON: dict[str, Pokemon] = {name: _pokemon_from_data(name) for name in _POKEMON_DATA}


SAMPLE_TEAMS: dict[str, PokemonTeam] = {
    "kanto-starters": PokemonTeam(
        name="kanto-starters",
        members=[SAMPLE_POKEMON[n] for n in ("charizard", "blastoise", "venusaur", "pikachu")],
    ),
    "heavy-hitters": PokemonTeam(
        name="heavy-hitters",
        members=[SAMPLE_POKEMON[n] for n in ("snorlax", "golem", "machamp", "dragonite")],
    ),
    "specialists": PokemonTeam(
        name="specialists",
        members=[SAMPLE_POKEMON[n] for n in ("alakazam", "gengar", "clefable")],
    ),
}


def get_pokemon(name: str) -> Pokemon:
    """Look up a sample Pokemon by (case-insensitive) name."""
    try:
        return SAMPLE_POKEMON[name.lower()]
    except KeyError:
        raise InvalidArgumentError(f"Unknown Pokemon '{name}'.") from None


def get_team(name: str) -> PokemonTeam:
    """Look up a sample team by (case-insensitive) name."""
    try:
        return SAMPLE_TEAMS[name.lower()]
    except KeyError:
        raise InvalidArgumentError(f"Unknown team '{name}'.") from None
