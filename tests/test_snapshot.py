from __future__ import annotations

import unittest
from types import SimpleNamespace

from ludo_race.board import standard_layout
from ludo_race.dice import ScriptedDie
from ludo_race.errors import UnknownCompartmentError
from ludo_race.match import Match
from ludo_race.snapshot import describe, match_snapshot, token_snapshot
from ludo_race.strategy import RandomStrategy
from ludo_race.types import Compartment, TokenPosition


def make_match() -> Match:
    players = ["y", "g"]
    return Match(
        players=players,
        strategies={p: RandomStrategy() for p in players},
        paths=standard_layout(players, ring_size=12),
        die=ScriptedDie([]),
    )


class SnapshotTests(unittest.TestCase):
    def test_token_snapshot(self) -> None:
        self.assertEqual(
            token_snapshot(TokenPosition(7, Compartment.PATH)),
            {"compartment": "path", "index": 7},
        )
        self.assertEqual(
            token_snapshot(TokenPosition(2)), {"compartment": "reserve", "index": 2}
        )

    def test_unknown_compartment(self) -> None:
        with self.assertRaises(UnknownCompartmentError):
            token_snapshot(SimpleNamespace(index=1, compartment="board"))
        with self.assertRaises(UnknownCompartmentError):
            token_snapshot(SimpleNamespace(index=1))

    def test_match_snapshot(self) -> None:
        match = make_match()
        match.tokens["g"][1] = TokenPosition(3, Compartment.HOME)
        snap = match_snapshot(match)
        self.assertEqual(snap["players"], ["y", "g"])
        self.assertEqual(snap["current_player"], "y")
        self.assertEqual(snap["turn_state"], "normal")
        self.assertIsNone(snap["winner"])
        self.assertEqual(snap["tokens"]["g"][1], {"compartment": "home", "index": 3})
        self.assertEqual(len(snap["tokens"]["y"]), 4)

    def test_describe(self) -> None:
        match = make_match()
        match.tokens["y"][0] = TokenPosition(5, Compartment.PATH)
        text = describe(match)
        self.assertTrue(text.startswith("turn: y (normal)"))
        self.assertIn("y: path[5], reserve[1], reserve[2], reserve[3]", text)


if __name__ == "__main__":
    unittest.main()
