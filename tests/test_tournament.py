from __future__ import annotations

import io
import random
import unittest
from contextlib import redirect_stdout

import numpy as np
from loguru import logger

from ludo_race.cli import main, parse_args
from ludo_race.config import config
from ludo_race.errors import UnknownStrategyError
from ludo_race.tournament import GameRecord, play_game, run_series, series_rng, summarise


class RunSeriesTests(unittest.TestCase):
    def test_seeded_series_is_reproducible(self) -> None:
        first = run_series(["random", "laggard"], 3, seed=7, ring_size=12)
        second = run_series(["random", "laggard"], 3, seed=7, ring_size=12)
        self.assertEqual(
            [(r.winner, r.plies, r.captures) for r in first],
            [(r.winner, r.plies, r.captures) for r in second],
        )

    def test_seats_rotate_each_game(self) -> None:
        records = run_series(["random", "laggard", "eager"], 4, seed=1, ring_size=12)
        self.assertEqual(records[0].seats, {"y": "random", "g": "laggard", "r": "vanguard"})
        self.assertEqual(records[1].seats, {"y": "laggard", "g": "vanguard", "r": "random"})
        self.assertEqual(records[3].seats, records[0].seats)
        for record in records:
            self.assertIsNotNone(record.winner)
            self.assertGreaterEqual(record.plies, record.idle_plies)

    def test_ply_limit_counts_as_draw(self) -> None:
        records = run_series(["random", "random"], 2, seed=3, ring_size=12, max_plies=5)
        summary = summarise(records)
        self.assertEqual(summary.draws, 2)
        self.assertEqual(summary.wins, {})
        self.assertEqual(summary.max_plies, 5)

    def test_series_rng_only_touches_its_own_generator(self) -> None:
        before = np.random.get_state()[1].copy()
        first = series_rng(11)
        second = series_rng(11)
        self.assertEqual(first.random(), second.random())
        np.testing.assert_array_equal(np.random.get_state()[1], before)

    def test_board_is_logged_after_each_ply(self) -> None:
        messages: list = []
        handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
        try:
            record = play_game(0, ["random", "laggard"], random.Random(2), ring_size=12, max_plies=3)
        finally:
            logger.remove(handler_id)
        boards = [m for m in messages if m.startswith("board after")]
        self.assertEqual(len(boards), record.plies)
        self.assertIn("  y: ", boards[0])
        self.assertIn("turn: ", boards[0])

    def test_invalid_series(self) -> None:
        with self.assertRaises(UnknownStrategyError):
            run_series(["random", "killer"], 1)
        with self.assertRaises(ValueError):
            run_series(["random"], 1)
        with self.assertRaises(ValueError):
            run_series(["random", "manual"], 1)
        with self.assertRaises(ValueError):
            run_series(["random", "laggard"], 0)


class SummariseTests(unittest.TestCase):
    def test_statistics(self) -> None:
        records = [
            GameRecord(0, {"y": "random", "g": "laggard"}, "y", 100, 2, 10),
            GameRecord(1, {"y": "laggard", "g": "random"}, "y", 300, 4, 30),
            GameRecord(2, {"y": "random", "g": "laggard"}, None, 200, 0, 5),
        ]
        summary = summarise(records)
        self.assertEqual(summary.games, 3)
        self.assertEqual(summary.wins, {"random": 1, "laggard": 1})
        self.assertEqual(summary.appearances, {"random": 3, "laggard": 3})
        self.assertEqual(summary.draws, 1)
        self.assertAlmostEqual(summary.mean_plies, 200.0)
        self.assertAlmostEqual(summary.std_plies, (20000 / 3) ** 0.5)
        self.assertEqual(summary.max_plies, 300)
        self.assertAlmostEqual(summary.mean_captures, 2.0)
        self.assertAlmostEqual(summary.win_rates["random"], 1 / 3)

    def test_nothing_to_summarise(self) -> None:
        with self.assertRaises(ValueError):
            summarise([])


class CliTests(unittest.TestCase):
    def test_parse_args(self) -> None:
        args = parse_args(["--strategies", "random,vanguard", "--games", "3", "--seed", "5"])
        self.assertEqual(args.strategies, "random,vanguard")
        self.assertEqual(args.games, 3)
        self.assertEqual(args.seed, 5)
        self.assertFalse(args.verbose)

    def test_games_default_comes_from_config(self) -> None:
        self.assertEqual(parse_args([]).games, config.GAMES)

    def test_main_prints_summary(self) -> None:
        out = io.StringIO()
        with redirect_stdout(out):
            code = main(["--strategies", "random, eager", "--games", "2", "--seed", "1"])
        self.assertEqual(code, 0)
        text = out.getvalue()
        self.assertIn("Games: 2", text)
        self.assertIn("vanguard", text)
        self.assertIn("random", text)


if __name__ == "__main__":
    unittest.main()
