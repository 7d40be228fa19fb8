from __future__ import annotations

import unittest

from ludo_race.board import (
    PLAYER_NAMES,
    derive_paths,
    standard_layout,
    standard_ring,
)
from ludo_race.errors import MatchSetupError


class DerivePathsTests(unittest.TestCase):
    def test_paths_wrap_around_the_ring(self) -> None:
        cells = ["a", None, None, "b_goal", "b", None, None, "a_goal"]
        paths = derive_paths(cells)
        self.assertEqual(list(paths), ["a", "b"])
        self.assertEqual(paths["a"], list(range(8)))
        self.assertEqual(paths["b"], [4, 5, 6, 7, 0, 1, 2, 3])

    def test_short_path_closes_early(self) -> None:
        self.assertEqual(derive_paths(["a", "a_goal", None, None]), {"a": [0, 1]})

    def test_board_without_start(self) -> None:
        with self.assertRaises(MatchSetupError):
            derive_paths([None, None, None])
        with self.assertRaises(MatchSetupError):
            derive_paths([])

    def test_path_without_goal(self) -> None:
        with self.assertRaises(MatchSetupError):
            derive_paths(["a", None, "b", "b_goal"])


class StandardLayoutTests(unittest.TestCase):
    def test_four_players_one_lap_each(self) -> None:
        paths = standard_layout(ring_size=52)
        self.assertEqual(list(paths), list(PLAYER_NAMES))
        for seat, player in enumerate(PLAYER_NAMES):
            path = paths[player]
            self.assertEqual(len(path), 52)
            self.assertEqual(len(set(path)), 52)
            self.assertEqual(path[0], seat * 13)
            self.assertEqual(path[-1], (seat * 13 - 1) % 52)

    def test_two_players_sit_opposite(self) -> None:
        paths = standard_layout(["y", "r"], ring_size=20)
        self.assertEqual(paths["y"][0], 0)
        self.assertEqual(paths["r"][0], 10)
        self.assertEqual(paths["r"][-1], 9)

    def test_ring_tags(self) -> None:
        cells = standard_ring(["p", "q"], ring_size=6)
        self.assertEqual(cells, ["p", None, "q_goal", "q", None, "p_goal"])

    def test_invalid_seating(self) -> None:
        with self.assertRaises(MatchSetupError):
            standard_ring(["y"])
        with self.assertRaises(MatchSetupError):
            standard_ring(["y", "g", "r", "b", "x"])
        with self.assertRaises(MatchSetupError):
            standard_ring(["y", "y"])
        with self.assertRaises(MatchSetupError):
            standard_ring(["y", "g", "r"], ring_size=5)
        with self.assertRaises(MatchSetupError):
            standard_ring(["y", "g_goal"], ring_size=8)


if __name__ == "__main__":
    unittest.main()
