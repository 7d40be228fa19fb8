from __future__ import annotations

import asyncio
from typing import Callable, Optional

from loguru import logger

from .config import config
from .match import Match
from .strategy.manual import ManualStrategy
from .types import PlayerName, PlyResult


class MatchRunner:
    """Drives a match ply by ply until somebody wins.

    Only one ply is in flight at a time. ``abandon`` cancels a ply that is
    still waiting for a decision; the match must not be stepped afterwards.
    """

    def __init__(
        self,
        match: Match,
        ply_delay: float | None = None,
        max_plies: int | None = None,
        on_ply: Optional[Callable[[PlyResult], None]] = None,
    ):
        self.match = match
        self.ply_delay = config.PLY_DELAY if ply_delay is None else ply_delay
        self.max_plies = config.MAX_PLIES if max_plies is None else max_plies
        self.on_ply = on_ply
        self._winner: Optional[PlayerName] = match.winner()
        self._running = False
        self._abandoned = False
        self._plies = 0
        self._ply_task: Optional[asyncio.Task] = None

    @property
    def winner(self) -> Optional[PlayerName]:
        return self._winner

    @property
    def plies(self) -> int:
        return self._plies

    @property
    def running(self) -> bool:
        return self._running

    async def step(self) -> Optional[PlyResult]:
        """Play one ply; None once the match is decided or abandoned."""
        if self._winner is None:
            # the match may have been advanced without this runner
            self._winner = self.match.winner()
        if self._winner is not None or self._abandoned:
            return None
        self._ply_task = asyncio.ensure_future(self.match.next_ply())
        try:
            result = await self._ply_task
        except asyncio.CancelledError:
            if not self._abandoned:
                raise
            logger.debug("Discarded the decision of an abandoned ply")
            return None
        finally:
            self._ply_task = None

        self._plies += 1
        self._winner = result.winner
        if self.on_ply is not None:
            self.on_ply(result)
        return result

    async def start(self) -> Optional[PlayerName]:
        if self._running:
            return self._winner
        self._running = True
        if self._plies == 0 and self._winner is None:
            logger.info(f"Starting match: {', '.join(self.match.players)}")
        try:
            while self._running and self._winner is None and not self._abandoned:
                if self._plies >= self.max_plies:
                    logger.warning(
                        f"No winner after {self._plies} plies, stopping the match"
                    )
                    break
                await self.step()
                if self._winner is None and self.ply_delay > 0:
                    await asyncio.sleep(self.ply_delay)
        finally:
            self._running = False
        if self._winner is not None:
            logger.info(f"Match won by {self._winner} after {self._plies} plies")
        return self._winner

    def stop(self) -> None:
        """Stop looping once the current ply is done."""
        self._running = False

    def abandon(self) -> None:
        """Stop and discard any decision still pending."""
        self.stop()
        self._abandoned = True
        if self._ply_task is not None and not self._ply_task.done():
            self._ply_task.cancel()
        for strategy in self.match.strategies.values():
            if isinstance(strategy, ManualStrategy):
                strategy.abandon()


def play(match: Match, max_plies: int | None = None) -> Optional[PlayerName]:
    """Run ``match`` to completion without delays and return the winner."""
    runner = MatchRunner(match, ply_delay=0, max_plies=max_plies)
    return asyncio.run(runner.start())
