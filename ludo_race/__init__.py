"""
Ludo Race rules engine.
Four tokens per player race from a reserve, along a path over a shared
board, into a home lane; landing on an opponent captures it.
"""

from ludo_race.board import PLAYER_NAMES, derive_paths, standard_layout
from ludo_race.config import config
from ludo_race.dice import Die, ScriptedDie
from ludo_race.errors import (
    DieExhaustedError,
    IllegalMoveError,
    LudoError,
    MatchFinishedError,
    MatchSetupError,
    PlyInProgressError,
    StrategyBindingError,
    UnknownCompartmentError,
    UnknownStrategyError,
)
from ludo_race.match import Match
from ludo_race.runner import MatchRunner, play
from ludo_race.snapshot import describe, match_snapshot, token_snapshot
from ludo_race.strategy import (
    BaseStrategy,
    LaggardStrategy,
    ManualStrategy,
    RandomStrategy,
    VanguardStrategy,
)
from ludo_race.turn import TurnState, advance_turn_state
from ludo_race.types import Capture, Compartment, Move, PlyResult, TokenPosition

__all__ = [
    "Match",
    "MatchRunner",
    "play",
    "Die",
    "ScriptedDie",
    "TurnState",
    "advance_turn_state",
    "Compartment",
    "TokenPosition",
    "Move",
    "Capture",
    "PlyResult",
    "BaseStrategy",
    "RandomStrategy",
    "LaggardStrategy",
    "VanguardStrategy",
    "ManualStrategy",
    "derive_paths",
    "standard_layout",
    "PLAYER_NAMES",
    "token_snapshot",
    "match_snapshot",
    "describe",
    "config",
    "LudoError",
    "MatchSetupError",
    "IllegalMoveError",
    "StrategyBindingError",
    "PlyInProgressError",
    "MatchFinishedError",
    "DieExhaustedError",
    "UnknownCompartmentError",
    "UnknownStrategyError",
]
