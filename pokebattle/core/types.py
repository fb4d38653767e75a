"""Pokemon types and the type effectiveness chart."""

from enum import Enum


class PokemonType(str, Enum):
    """All 18 Pokemon types."""

    NORMAL = "normal"
    FIRE = "fire"
    WATER = "water"
    GRASS = "grass"
    ELECTRIC = "electric"
    ICE = "ice"
    FIGHTING = "fighting"
    POISON = "poison"
    GROUND = "ground"
    FLYING = "flying"
    PSYCHIC = "psychic"
    BUG = "bug"
    ROCK = "rock"
    GHOST = "ghost"
    DRAGON = "dragon"
    DARK = "dark"
    STEEL = "steel"
    FAIRY = "fairy"


NORMALLY_EFFECTIVE = 1.0
SUPER_EFFECTIVE = 2.0
NOT_VERY_EFFECTIVE = 0.5
NO_EFFECT = 0.0


# ---------------------------------------------------------------------------
# Type effectiveness chart
# ---------------------------------------------------------------------------
# Encoded as: TYPE_CHART[attacking_type][defending_type] = multiplier
# Every ordered pair is present; unlisted pairs are neutral (1.0).
# ---------------------------------------------------------------------------

T = PokemonType

# fmt: off
# attacking type -> (super effective against, not very effective against, no effect on)
_MATCHUPS: dict[PokemonType, tuple[list[PokemonType], list[PokemonType], list[PokemonType]]] = {
    T.NORMAL: ([], [T.ROCK, T.STEEL], [T.GHOST]),
    T.FIRE: ([T.GRASS, T.ICE, T.BUG, T.STEEL], [T.FIRE, T.WATER, T.ROCK, T.DRAGON], []),
    T.WATER: ([T.FIRE, T.GROUND, T.ROCK], [T.WATER, T.GRASS, T.DRAGON], []),
    T.GRASS: (
        [T.WATER, T.GROUND, T.ROCK],
        [T.FIRE, T.GRASS, T.POISON, T.FLYING, T.BUG, T.DRAGON, T.STEEL],
        [],
    ),
    T.ELECTRIC: ([T.WATER, T.FLYING], [T.GRASS, T.ELECTRIC, T.DRAGON], [T.GROUND]),
    T.ICE: ([T.GRASS, T.GROUND, T.FLYING, T.DRAGON], [T.FIRE, T.WATER, T.ICE, T.STEEL], []),
    T.FIGHTING: (
        [T.NORMAL, T.ICE, T.ROCK, T.DARK, T.STEEL],
        [T.POISON, T.FLYING, T.PSYCHIC, T.BUG, T.FAIRY],
        [T.GHOST],
    ),
    T.POISON: ([T.GRASS, T.FAIRY], [T.POISON, T.GROUND, T.ROCK, T.GHOST], []),
    T.GROUND: (
        [T.FIRE, T.ELECTRIC, T.POISON, T.ROCK, T.STEEL],
        [T.GRASS, T.BUG],
        [T.FLYING],
    ),
    T.FLYING: ([T.GRASS, T.FIGHTING, T.BUG], [T.ELECTRIC, T.ROCK, T.STEEL], []),
    T.PSYCHIC: ([T.FIGHTING, T.POISON], [T.PSYCHIC, T.STEEL], [T.DARK]),
    T.BUG: (
        [T.GRASS, T.PSYCHIC, T.DARK],
        [T.FIRE, T.FIGHTING, T.POISON, T.FLYING, T.GHOST, T.STEEL, T.FAIRY],
        [],
    ),
    T.ROCK: ([T.FIRE, T.ICE, T.FLYING, T.BUG], [T.FIGHTING, T.GROUND, T.STEEL], []),
    T.GHOST: ([T.PSYCHIC, T.GHOST], [T.DARK], [T.NORMAL]),
    T.DRAGON: ([T.DRAGON], [T.STEEL], [T.FAIRY]),
    T.DARK: ([T.PSYCHIC, T.GHOST], [T.FIGHTING, T.DARK, T.FAIRY], []),
    T.STEEL: ([T.ICE, T.ROCK, T.FAIRY], [T.FIRE, T.WATER, T.ELECTRIC, T.STEEL], []),
    T.FAIRY: ([T.FIGHTING, T.DRAGON, T.DARK], [T.FIRE, T.POISON, T.STEEL], []),
}
# fmt: on


def _build_chart() -> dict[PokemonType, dict[PokemonType, float]]:
    chart = {atk: {dfn: NORMALLY_EFFECTIVE for dfn in PokemonType} for atk in PokemonType}
    for atk, (strong, weak, immune) in _MATCHUPS.items():
        for dfn in strong:
            chart[atk][dfn] = SUPER_EFFECTIVE
        for dfn in weak:
            chart[atk][dfn] = NOT_VERY_EFFECTIVE
        for dfn in immune:
            chart[atk][dfn] = NO_EFFECT
    return chart


TYPE_CHART: dict[PokemonType, dict[PokemonType, float]] = _build_chart()


def get_type_effectiveness(
    move_type: PokemonType | str,
    defender_type1: PokemonType | str,
    defender_type2: PokemonType | str | None = None,
) -> float:
    """Calculate combined type effectiveness multiplier.

    Takes into account both defender types. Results can be:
    0x, 0.25x, 0.5x, 1x, 2x, or 4x.
    """
    attacking = TYPE_CHART[PokemonType(move_type)]
    mult = attacking[PokemonType(defender_type1)]
    if defender_type2 is not None:
        mult *= attacking[PokemonType(defender_type2)]
    return mult
