"""Strategies ordering moves by how far the moving token has travelled."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Sequence

from ..types import Move, PlayerName
from .base import BaseStrategy

if TYPE_CHECKING:
    from ..match import Match


def origin_progress(match: "Match", player: PlayerName, move: Move) -> int:
    """Index of the moving token along the player's path, -1 when off the path."""
    return match.path_index(player, move.token)


class LaggardStrategy(BaseStrategy):
    """Moves the token furthest behind, keeping tokens clustered."""

    name: ClassVar[str] = "laggard"

    def select_move(
        self, match: "Match", player: PlayerName, roll: int, moves: Sequence[Move]
    ) -> Move:
        # min() keeps the first of equal keys, so ties follow the offered order
        return min(moves, key=lambda mv: origin_progress(match, player, mv))


class VanguardStrategy(BaseStrategy):
    """Moves the most advanced token first."""

    name: ClassVar[str] = "vanguard"

    def select_move(
        self, match: "Match", player: PlayerName, roll: int, moves: Sequence[Move]
    ) -> Move:
        return max(moves, key=lambda mv: origin_progress(match, player, mv))
