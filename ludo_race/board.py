"""
Board layout helpers.
Turns a tagged ring of cells into the per-player paths a match is built from.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from .config import config
from .errors import MatchSetupError
from .types import PlayerName

GOAL_SUFFIX = "_goal"

# Colour ids used by the standard layout and their display names
PLAYER_NAMES: Dict[PlayerName, str] = {
    "y": "Yellow",
    "g": "Green",
    "r": "Red",
    "b": "Black",
}


def derive_paths(cells: Sequence[Optional[str]]) -> Dict[PlayerName, List[int]]:
    """
    Walk the ring of cells and collect each player's path.

    Args:
        cells: One tag per ring cell: None, a player id marking that player's
            start cell, or "<player>_goal" marking the player's last cell
            before its home lane.

    Returns:
        Dict[PlayerName, List[int]]: Cell indices per player, in discovery
        order. A path starts at the player's start cell and ends at its goal
        cell, wrapping around the ring when needed.
    """
    size = len(cells)
    if size == 0:
        raise MatchSetupError("Cannot derive paths from an empty board")

    paths: Dict[PlayerName, List[int]] = {}
    open_paths: Dict[PlayerName, None] = {}  # insertion-ordered set
    # A path may start late in the first lap and close in the second one
    for step in range(2 * size):
        idx = step % size
        tag = cells[idx]
        closing = None
        if tag:
            if tag.endswith(GOAL_SUFFIX):
                closing = tag[: -len(GOAL_SUFFIX)]
            elif tag not in paths:
                paths[tag] = []
                open_paths[tag] = None

        for player in open_paths:
            paths[player].append(idx)

        if closing is not None:
            open_paths.pop(closing, None)
        if paths and not open_paths and step >= size - 1:
            break
    else:
        if not paths:
            raise MatchSetupError("No start cell found on the board")
        raise MatchSetupError(
            f"Paths never reach their goal cell: {sorted(open_paths)}"
        )
    return paths


def standard_ring(
    players: Sequence[PlayerName], ring_size: int | None = None
) -> List[Optional[str]]:
    """Tagged ring with evenly spaced start cells, each goal just before its start."""
    ring_size = config.RING_SIZE if ring_size is None else ring_size
    if not 2 <= len(players) <= 4:
        raise MatchSetupError("The standard layout seats 2 to 4 players")
    if len(set(players)) != len(players):
        raise MatchSetupError(f"Duplicate player ids in {list(players)}")
    if ring_size < 2 * len(players):
        raise MatchSetupError(f"Ring of {ring_size} cells is too small for {len(players)} players")

    spacing = ring_size // len(players)
    cells: List[Optional[str]] = [None] * ring_size
    for seat, player in enumerate(players):
        if player.endswith(GOAL_SUFFIX):
            raise MatchSetupError(f"Player id '{player}' cannot end with '{GOAL_SUFFIX}'")
        start = seat * spacing
        cells[start] = player
        cells[(start - 1) % ring_size] = f"{player}{GOAL_SUFFIX}"
    return cells


def standard_layout(
    players: Sequence[PlayerName] = tuple(PLAYER_NAMES), ring_size: int | None = None
) -> Dict[PlayerName, List[int]]:
    """Paths for the standard board, one full lap per player."""
    return derive_paths(standard_ring(players, ring_size))
