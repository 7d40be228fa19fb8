from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, ClassVar, Optional, Sequence

from loguru import logger

from ..types import Compartment, Move, PlayerName
from .base import BaseStrategy

if TYPE_CHECKING:
    from ..match import Match


class ManualStrategy(BaseStrategy):
    """Waits for an external pick (a click, a prompt answer, ...).

    ``decide`` returns a future resolved by the first of ``choose`` or
    ``choose_token`` that matches a pending move. Once resolved, the other
    pending moves are discarded; picks arriving with nothing pending are
    ignored.
    """

    name: ClassVar[str] = "manual"

    def __init__(self, player: Optional[PlayerName] = None, rng=None) -> None:
        super().__init__(player=player, rng=rng)
        self._future: Optional[asyncio.Future] = None
        self._pending: list[Move] = []

    @property
    def pending(self) -> list[Move]:
        return list(self._pending)

    def is_waiting(self) -> bool:
        return self._future is not None and not self._future.done()

    def decide(
        self, match: "Match", player: PlayerName, roll: int, moves: Sequence[Move]
    ) -> asyncio.Future:
        self._check_player(player)
        if not moves:
            raise ValueError("decide() needs at least one legal move")
        # A new decision supersedes whatever was still waiting
        self.abandon()
        future = asyncio.get_running_loop().create_future()
        future.add_done_callback(self._on_done)
        self._future = future
        self._pending = list(moves)
        return future

    def choose(self, move: Move) -> bool:
        """Resolve the pending decision with ``move``; False if it was ignored."""
        if not self.is_waiting() or move not in self._pending:
            logger.warning(f"Ignoring manual choice {move}: not a pending move")
            return False
        self._future.set_result(move)
        self._pending.clear()
        return True

    def choose_token(self, compartment: Compartment, index: int) -> bool:
        """Resolve with the first pending move whose token sits at the picked spot.

        Reserve tokens are interchangeable, so picking any reserve slot
        selects the pending reserve escape.
        """
        for move in self._pending:
            token = move.token
            if token.compartment is not compartment:
                continue
            if compartment is Compartment.RESERVE or token.index == index:
                return self.choose(move)
        logger.warning(
            f"Ignoring manual pick {compartment.value}[{index}]: no pending move there"
        )
        return False

    def abandon(self) -> None:
        """Drop the pending decision, if any."""
        if self.is_waiting():
            self._future.cancel()
        self._future = None
        self._pending.clear()

    def _on_done(self, future: asyncio.Future) -> None:
        if future is self._future:
            self._pending.clear()
