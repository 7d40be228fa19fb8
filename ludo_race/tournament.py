from __future__ import annotations

import asyncio
import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

import numpy as np
from loguru import logger

from .board import PLAYER_NAMES, standard_layout
from .dice import Die
from .match import Match
from .runner import MatchRunner
from .snapshot import describe
from .strategy.manual import ManualStrategy
from .strategy.registry import create, resolve_name
from .types import PlyResult


def series_rng(seed: int | None) -> random.Random:
    """Source of every per-game seed (strategies and die) in a series."""
    return random.Random(seed)


@dataclass
class GameRecord:
    index: int
    seats: Dict[str, str]  # player id -> strategy name
    winner: Optional[str]  # player id
    plies: int
    captures: int
    idle_plies: int  # plies without a legal move

    @property
    def winner_strategy(self) -> Optional[str]:
        return self.seats.get(self.winner) if self.winner is not None else None


@dataclass
class SeriesSummary:
    games: int
    wins: Dict[str, int]
    appearances: Dict[str, int]
    draws: int
    mean_plies: float
    std_plies: float
    max_plies: int
    mean_captures: float
    win_rates: Dict[str, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.win_rates:
            self.win_rates = {
                name: (self.wins.get(name, 0) / count if count else 0.0)
                for name, count in self.appearances.items()
            }


def play_game(
    index: int,
    strategy_names: Sequence[str],
    rng: random.Random,
    ring_size: int | None = None,
    max_plies: int | None = None,
) -> GameRecord:
    """Play one match on the standard board, seats rotated by ``index``."""
    players = list(PLAYER_NAMES)[: len(strategy_names)]
    shift = index % len(strategy_names)
    rotated = list(strategy_names[shift:]) + list(strategy_names[:shift])
    seats = dict(zip(players, rotated))
    strategies = {
        player: create(name, player=player, rng=random.Random(rng.random()))
        for player, name in seats.items()
    }
    match = Match(
        players=players,
        strategies=strategies,
        paths=standard_layout(players, ring_size),
        die=Die(rng=random.Random(rng.random())),
    )

    counters = {"captures": 0, "idle": 0}

    def _on_ply(result: PlyResult) -> None:
        if result.capture is not None:
            counters["captures"] += 1
        if not result.moved:
            counters["idle"] += 1
        logger.opt(lazy=True).debug(
            "board after {} rolled {}:\n{}",
            lambda: result.player,
            lambda: result.roll,
            lambda: describe(match),
        )

    runner = MatchRunner(match, ply_delay=0, max_plies=max_plies, on_ply=_on_ply)
    winner = asyncio.run(runner.start())
    return GameRecord(
        index=index,
        seats=seats,
        winner=winner,
        plies=runner.plies,
        captures=counters["captures"],
        idle_plies=counters["idle"],
    )


def run_series(
    strategy_names: Sequence[str],
    games: int,
    seed: int | None = None,
    ring_size: int | None = None,
    max_plies: int | None = None,
) -> List[GameRecord]:
    names = [resolve_name(name) for name in strategy_names]
    if not 2 <= len(names) <= 4:
        raise ValueError("A series needs 2 to 4 strategies")
    if ManualStrategy.name in names:
        raise ValueError("The manual strategy cannot play an unattended series")
    if games < 1:
        raise ValueError("games must be positive")
    rng = series_rng(seed)
    records: List[GameRecord] = []
    for index in range(games):
        record = play_game(index, names, rng, ring_size=ring_size, max_plies=max_plies)
        logger.debug(
            f"game {index}: winner={record.winner_strategy} plies={record.plies}"
        )
        records.append(record)
    return records


def summarise(records: Sequence[GameRecord]) -> SeriesSummary:
    if not records:
        raise ValueError("Nothing to summarise")
    plies = np.asarray([r.plies for r in records], dtype=np.int64)
    captures = np.asarray([r.captures for r in records], dtype=np.float64)
    wins: Dict[str, int] = {}
    appearances: Dict[str, int] = {}
    for record in records:
        for name in set(record.seats.values()):
            appearances[name] = appearances.get(name, 0) + 1
        if record.winner_strategy is not None:
            wins[record.winner_strategy] = wins.get(record.winner_strategy, 0) + 1
    return SeriesSummary(
        games=len(records),
        wins=wins,
        appearances=appearances,
        draws=sum(1 for r in records if r.winner is None),
        mean_plies=float(plies.mean()),
        std_plies=float(plies.std()),
        max_plies=int(plies.max()),
        mean_captures=float(captures.mean()),
    )
