from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Sequence

from ..types import Move, PlayerName
from .base import BaseStrategy

if TYPE_CHECKING:
    from ..match import Match


class RandomStrategy(BaseStrategy):
    """Picks uniformly among the legal moves."""

    name: ClassVar[str] = "random"

    def select_move(
        self, match: "Match", player: PlayerName, roll: int, moves: Sequence[Move]
    ) -> Move:
        return self.rng.choice(list(moves))
