from __future__ import annotations

from enum import IntEnum

from .config import config


class TurnState(IntEnum):
    NORMAL = 0
    CONTINUING = 1  # rolled the exit roll, or granted a bonus attempt
    STALLED = 2  # nothing on the path, one more attempt to leave the reserve


def advance_turn_state(previous: TurnState, roll: int, has_token_on_path: bool) -> TurnState:
    """Derive the turn state for a fresh roll.

    ``has_token_on_path`` describes the acting player before the roll is
    played. A player with nothing on the path who keeps missing the exit
    roll goes STALLED -> CONTINUING -> NORMAL and so throws three times
    before the turn passes.
    """
    if roll == config.EXIT_ROLL:
        return TurnState.CONTINUING
    if previous is TurnState.CONTINUING:
        return TurnState.NORMAL
    if previous is TurnState.STALLED:
        return TurnState.CONTINUING
    if not has_token_on_path:
        return TurnState.STALLED
    return TurnState.NORMAL


def keeps_turn(state: TurnState) -> bool:
    return state is not TurnState.NORMAL
