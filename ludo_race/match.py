from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Mapping, Optional, Sequence

from loguru import logger

from .config import config
from .dice import Die
from .errors import (
    IllegalMoveError,
    MatchFinishedError,
    MatchSetupError,
    PlyInProgressError,
)
from .strategy.base import BaseStrategy
from .turn import TurnState, advance_turn_state, keeps_turn
from .types import Capture, Compartment, Move, PlayerName, PlyResult, TokenPosition

RollListener = Callable[[int, PlayerName], None]


@dataclass(slots=True)
class Match:
    """Rules engine for one match.

    Owns the turn order, each player's path and tokens and the turn state.
    Only ``next_ply`` advances the match; ``legal_moves`` and ``apply_move``
    are the rule steps it is built from.
    """

    players: Sequence[PlayerName]
    strategies: Mapping[PlayerName, BaseStrategy]
    paths: Mapping[PlayerName, Sequence[int]]
    die: Die = field(default_factory=Die)
    tokens: Dict[PlayerName, List[TokenPosition]] = field(init=False)
    turn_state: TurnState = field(default=TurnState.NORMAL, init=False)
    current_index: int = field(default=0, init=False)
    _path_lookup: Dict[PlayerName, Dict[int, int]] = field(init=False, repr=False)
    _roll_listeners: List[RollListener] = field(
        default_factory=list, init=False, repr=False
    )
    _ply_in_flight: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        self.players = tuple(self.players)
        if not self.players:
            raise MatchSetupError("A match needs at least one player")
        if len(set(self.players)) != len(self.players):
            raise MatchSetupError(f"Duplicate player ids in {list(self.players)}")
        self.strategies = dict(self.strategies)
        given_paths = dict(self.paths)
        self.paths = {}
        self._path_lookup = {}
        for player in self.players:
            if player not in self.strategies:
                raise MatchSetupError(f"No strategy given for player '{player}'")
            path = tuple(given_paths.get(player) or ())
            if not path:
                raise MatchSetupError(f"No path given for player '{player}'")
            lookup = {cell: idx for idx, cell in enumerate(path)}
            if len(lookup) != len(path):
                raise MatchSetupError(f"Path of player '{player}' visits a cell twice")
            self.paths[player] = path
            self._path_lookup[player] = lookup
        self.tokens = {
            player: [
                TokenPosition(slot, Compartment.RESERVE)
                for slot in range(config.TOKENS_PER_PLAYER)
            ]
            for player in self.players
        }

    # --- Queries ---
    @property
    def current_player(self) -> PlayerName:
        return self.players[self.current_index]

    def path_index(self, player: PlayerName, position: TokenPosition) -> int:
        """Index of ``position`` along the player's path, -1 when not on the path."""
        if not position.is_on_path():
            return -1
        return self._path_lookup[player].get(position.index, -1)

    def winner(self) -> Optional[PlayerName]:
        for player in self.players:
            if all(token.is_home() for token in self.tokens[player]):
                return player
        return None

    # --- Hooks ---
    def on_roll(self, callback: RollListener) -> RollListener:
        """Register ``callback(roll, player)``, called before every decision."""
        self._roll_listeners.append(callback)
        return callback

    # --- Rules ---
    def legal_moves(self, player: PlayerName, roll: int) -> List[Move]:
        path = self.paths[player]
        tokens = self.tokens[player]
        own_cells = {t.index for t in tokens if t.is_on_path()}
        own_home = {t.index for t in tokens if t.is_home()}
        moves: List[Move] = []

        if roll == config.EXIT_ROLL and path[0] not in own_cells:
            for token_id, token in enumerate(tokens):
                if token.is_in_reserve():
                    moves.append(
                        Move(token_id, token, TokenPosition(path[0], Compartment.PATH))
                    )
                    break

        for token_id, token in enumerate(tokens):
            if not token.is_on_path():
                continue
            target = self.path_index(player, token) + roll
            if target < len(path):
                if path[target] not in own_cells:
                    moves.append(
                        Move(token_id, token, TokenPosition(path[target], Compartment.PATH))
                    )
            else:
                slot = target - len(path)
                if slot < config.HOME_SLOTS and slot not in own_home:
                    moves.append(
                        Move(token_id, token, TokenPosition(slot, Compartment.HOME))
                    )

        for token_id, token in enumerate(tokens):
            if not token.is_home():
                continue
            slot = token.index + roll
            if slot < config.HOME_SLOTS and slot not in own_home:
                moves.append(Move(token_id, token, TokenPosition(slot, Compartment.HOME)))

        return moves

    def apply_move(self, player: PlayerName, move: Move) -> Optional[Capture]:
        """Put the moving token at its destination and resolve a capture."""
        tokens = self.tokens[player]
        if not 0 <= move.token_id < len(tokens) or tokens[move.token_id] is not move.token:
            raise IllegalMoveError(f"{move} does not match player '{player}' tokens")
        tokens[move.token_id] = move.destination
        logger.debug(f"player {player} moved {move}")

        if not move.destination.is_on_path():
            return None

        cell = move.destination.index
        start = self.players.index(player)
        for offset in range(1, len(self.players)):
            other = self.players[(start + offset) % len(self.players)]
            victims = self.tokens[other]
            for token_id, token in enumerate(victims):
                if token.is_on_path() and token.index == cell:
                    slot = self._free_reserve_slot(other)
                    victims[token_id] = TokenPosition(slot, Compartment.RESERVE)
                    logger.debug(
                        f"player {player} captured {other} token {token_id} at cell {cell}"
                    )
                    return Capture(other, token_id, cell, slot)
        return None

    def _free_reserve_slot(self, player: PlayerName) -> int:
        taken = {t.index for t in self.tokens[player] if t.is_in_reserve()}
        return next(slot for slot in range(config.RESERVE_SLOTS) if slot not in taken)

    # --- Ply ---
    async def next_ply(self) -> PlyResult:
        """Roll, pick a legal move through the player's strategy and play it.

        The roll and the turn change are committed before the strategy is
        awaited. A ply cancelled while waiting for a decision has used up its
        roll and may have passed the turn without moving anything, so a match
        stepped directly should be discarded after a cancelled ply.
        """
        if self._ply_in_flight:
            raise PlyInProgressError("A ply is already awaiting a decision")
        winner = self.winner()
        if winner is not None:
            raise MatchFinishedError(f"Player '{winner}' has already won")
        self._ply_in_flight = True
        try:
            return await self._play_ply()
        finally:
            self._ply_in_flight = False

    async def _play_ply(self) -> PlyResult:
        player = self.current_player
        tokens = self.tokens[player]
        has_token_on_path = any(token.is_on_path() for token in tokens)

        roll = self.die.roll()
        self.turn_state = advance_turn_state(self.turn_state, roll, has_token_on_path)
        if not keeps_turn(self.turn_state):
            self.current_index = (self.current_index + 1) % len(self.players)
        turn_state = self.turn_state

        logger.debug(f"player {player} rolled {roll}")
        for callback in self._roll_listeners:
            callback(roll, player)

        moves = self.legal_moves(player, roll)
        if not moves:
            return PlyResult(player, roll, turn_state, winner=self.winner())

        move = await self._ask_strategy(player, roll, moves)
        capture = self.apply_move(player, move)
        winner = self.winner()
        if winner is not None:
            logger.info(f"player {winner} wins")
        return PlyResult(player, roll, turn_state, move, capture, winner)

    async def _ask_strategy(
        self, player: PlayerName, roll: int, moves: List[Move]
    ) -> Move:
        choice = self.strategies[player].decide(self, player, roll, list(moves))
        if inspect.isawaitable(choice):
            choice = await choice
        if choice not in moves:
            raise IllegalMoveError(
                f"Strategy for player '{player}' returned {choice}, not an offered move"
            )
        return choice
