from __future__ import annotations

import random
from typing import TYPE_CHECKING, Awaitable, ClassVar, Optional, Sequence, Union

from ..errors import StrategyBindingError
from ..types import Move, PlayerName

if TYPE_CHECKING:
    from ..match import Match


class BaseStrategy:
    """Base class for decision strategies.

    ``decide`` receives the acting player explicitly. A strategy may also be
    bound to one player at construction, in which case deciding for anybody
    else is a caller error.
    """

    name: ClassVar[str] = "base"

    def __init__(
        self, player: Optional[PlayerName] = None, rng: random.Random | None = None
    ) -> None:
        self.player = player
        self.rng = rng or random.Random()

    def decide(
        self,
        match: "Match",
        player: PlayerName,
        roll: int,
        moves: Sequence[Move],
    ) -> Union[Move, Awaitable[Move]]:
        self._check_player(player)
        if not moves:
            raise ValueError("decide() needs at least one legal move")
        return self.select_move(match, player, roll, moves)

    def select_move(
        self,
        match: "Match",
        player: PlayerName,
        roll: int,
        moves: Sequence[Move],
    ) -> Move:  # pragma: no cover - abstract
        raise NotImplementedError

    def _check_player(self, player: PlayerName) -> None:
        if self.player is not None and self.player != player:
            raise StrategyBindingError(
                f"{type(self).__name__} is bound to player '{self.player}', "
                f"asked to decide for '{player}'"
            )

    def __repr__(self) -> str:
        bound = f" player={self.player!r}" if self.player is not None else ""
        return f"<{type(self).__name__}{bound}>"
