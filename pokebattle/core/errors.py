"""Exceptions raised by the battle engine."""


class BattleError(Exception):
    """Base for all battle engine errors."""


class InvalidArgumentError(BattleError, ValueError):
    """A missing, negative or out-of-range input was passed in."""


class InvalidStateError(BattleError, RuntimeError):
    """An operation was attempted that the current battle state forbids.

    Raised for exhausted moves and for strategies invoked with nothing
    left to choose from. Callers guard against both, so seeing one means
    a programming error upstream.
    """


class SimultaneousFaintError(BattleError, RuntimeError):
    """Both sides fainted in the same battle.

    There is no tie-break rule for this, so the battle aborts.
    """

    def __init__(self, first_name: str, second_name: str):
        super().__init__(
            f"{first_name} and {second_name} fainted at the same time; "
            "simultaneous knockouts are not supported"
        )
        self.first_name = first_name
        self.second_name = second_name
