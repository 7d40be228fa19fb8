from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from loguru import logger

from .config import config
from .strategy.registry import available
from .tournament import SeriesSummary, run_series, summarise


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Simulate Ludo race matches between built-in strategies"
    )
    parser.add_argument(
        "--strategies",
        type=str,
        default=",".join(config.DEFAULT_STRATEGIES),
        help=(
            "Comma-separated strategy names, one per seat (2 to 4). "
            f"Available: {', '.join(sorted(available()))}"
        ),
    )
    parser.add_argument(
        "--games",
        type=int,
        default=config.GAMES,
        help="Number of matches to play",
    )
    parser.add_argument("--seed", type=int, default=None, help="Optional RNG seed")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every roll, move and capture",
    )
    return parser.parse_args(argv)


def format_summary(summary: SeriesSummary) -> str:
    lines = [
        f"Games: {summary.games}  draws: {summary.draws}",
        f"Plies: mean {summary.mean_plies:.1f}  std {summary.std_plies:.1f}  max {summary.max_plies}",
        f"Captures per game: {summary.mean_captures:.2f}",
        "",
        f"{'strategy':<12}{'wins':>6}{'played':>8}{'win rate':>10}",
    ]
    ranking = sorted(summary.win_rates.items(), key=lambda kv: kv[1], reverse=True)
    for name, rate in ranking:
        lines.append(
            f"{name:<12}{summary.wins.get(name, 0):>6}{summary.appearances[name]:>8}{rate:>10.1%}"
        )
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else config.LOG_LEVEL)

    names = [name.strip() for name in args.strategies.split(",") if name.strip()]
    records = run_series(names, args.games, seed=args.seed)
    print(format_summary(summarise(records)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
