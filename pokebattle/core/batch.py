"""Run many independent battles concurrently and count the wins.

Every trial gets its own clones of the combatants (or teams) and its own
seeded random stream, so trials share nothing but the win counter. The
trial seeds are all drawn from one batch seed before any worker starts,
which makes a seeded batch reproducible however the threads interleave.
"""

from __future__ import annotations

import logging
import os
import random
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Callable

from pokebattle.core.battle import BattleEngine, BattleResult
from pokebattle.core.errors import InvalidArgumentError
from pokebattle.core.pokemon import BattlePokemon
from pokebattle.core.team import BattleTeam
from pokebattle.utils.config import config

logger = logging.getLogger(__name__)


class WinCounter:
    """Thread-safe tally of first/second side wins."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.first_wins = 0
        self.second_wins = 0

    def record(self, result: BattleResult) -> None:
        with self._lock:
            if result == BattleResult.FIRST_WIN:
                self.first_wins += 1
            else:
                self.second_wins += 1

    @property
    def totals(self) -> tuple[int, int]:
        with self._lock:
            return self.first_wins, self.second_wins


def _check_battle_count(battle_count: int) -> None:
    if battle_count <= 0:
        raise InvalidArgumentError(f"Battle count must be greater than zero (got {battle_count}).")
    if battle_count > config.max_battle_count:
        raise InvalidArgumentError(
            f"Battle count must be at most {config.max_battle_count} (got {battle_count})."
        )


def _resolve_workers(max_workers: int | None, battle_count: int) -> int:
    if max_workers is None:
        max_workers = config.batch_max_workers
    if max_workers is None:
        # Same default as ThreadPoolExecutor
        max_workers = min(32, (os.cpu_count() or 1) + 4)
    if max_workers <= 0:
        raise InvalidArgumentError(f"Worker count must be greater than zero (got {max_workers}).")
    return min(max_workers, battle_count)


def _chunk(seeds: list[int], parts: int) -> list[list[int]]:
    """Split seeds into ``parts`` contiguous, nearly equal chunks."""
    size, extra = divmod(len(seeds), parts)
    chunks = []
    start = 0
    for i in range(parts):
        end = start + size + (1 if i < extra else 0)
        chunks.append(seeds[start:end])
        start = end
    return chunks


def _run_batch(
    trial: Callable[[random.Random], BattleResult],
    battle_count: int,
    seed: int | None,
    max_workers: int | None,
) -> tuple[int, int]:
    batch_rng = random.Random(seed)
    seeds = [batch_rng.getrandbits(64) for _ in range(battle_count)]
    workers = _resolve_workers(max_workers, battle_count)
    counter = WinCounter()

    def run_chunk(chunk: list[int]) -> None:
        for trial_seed in chunk:
            counter.record(trial(random.Random(trial_seed)))

    logger.info("Simulating %d battles on %d workers (seed=%s)", battle_count, workers, seed)
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="battle") as executor:
        futures = [executor.submit(run_chunk, chunk) for chunk in _chunk(seeds, workers)]
        for future in futures:
            # Re-raises the first failing trial; the batch has no partial result
            future.result()

    first_wins, second_wins = counter.totals
    logger.info("Batch finished: %d - %d", first_wins, second_wins)
    return first_wins, second_wins


def simulate_many_battles(
    first: BattlePokemon | None,
    second: BattlePokemon | None,
    battle_count: int,
    seed: int | None = None,
    max_workers: int | None = None,
) -> tuple[int, int]:
    """Simulate ``battle_count`` 1v1 battles and return (first_wins, second_wins).

    The prototypes passed in are never touched; each trial battles clones.
    """
    if first is None:
        raise InvalidArgumentError("First Pokemon cannot be None.")
    if second is None:
        raise InvalidArgumentError("Second Pokemon cannot be None.")
    _check_battle_count(battle_count)

    def trial(rng: random.Random) -> BattleResult:
        return BattleEngine(rng=rng).simulate_battle(first.clone(), second.clone())

    return _run_batch(trial, battle_count, seed, max_workers)


def simulate_many_team_battles(
    first_team: BattleTeam | None,
    second_team: BattleTeam | None,
    battle_count: int,
    seed: int | None = None,
    max_workers: int | None = None,
) -> tuple[int, int]:
    """Simulate ``battle_count`` team battles and return (first_wins, second_wins)."""
    if first_team is None:
        raise InvalidArgumentError("First team cannot be None.")
    if second_team is None:
        raise InvalidArgumentError("Second team cannot be None.")
    _check_battle_count(battle_count)

    def trial(rng: random.Random) -> BattleResult:
        return BattleEngine(rng=rng).simulate_team_battle(first_team.clone(), second_team.clone())

    return _run_batch(trial, battle_count, seed, max_workers)
