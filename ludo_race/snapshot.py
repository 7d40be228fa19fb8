"""Plain-dict views of a match for presentation layers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict

from .errors import UnknownCompartmentError
from .types import Compartment, TokenPosition

if TYPE_CHECKING:
    from .match import Match


def token_snapshot(position: TokenPosition) -> Dict:
    compartment = getattr(position, "compartment", None)
    if not isinstance(compartment, Compartment):
        raise UnknownCompartmentError(f"Unknown token position: {position!r}")
    return {"compartment": compartment.value, "index": int(position.index)}


def match_snapshot(match: "Match") -> Dict:
    """Current players, turn and token placement as JSON-friendly data."""
    return {
        "players": list(match.players),
        "current_player": match.current_player,
        "turn_state": match.turn_state.name.lower(),
        "tokens": {
            player: [token_snapshot(token) for token in match.tokens[player]]
            for player in match.players
        },
        "winner": match.winner(),
    }


def describe(match: "Match") -> str:
    snap = match_snapshot(match)
    lines = [f"turn: {snap['current_player']} ({snap['turn_state']})"]
    for player, tokens in snap["tokens"].items():
        placed = ", ".join(f"{t['compartment']}[{t['index']}]" for t in tokens)
        lines.append(f"  {player}: {placed}")
    return "\n".join(lines)
