from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .turn import TurnState

PlayerName = str


class Compartment(Enum):
    """Where a token sits."""

    RESERVE = "reserve"  # starting area, slots 0..3
    PATH = "path"  # shared board, index is an absolute cell id
    HOME = "home"  # private finishing lane, slots 0..3


@dataclass(frozen=True, eq=False, slots=True)
class TokenPosition:
    """Where one token sits.

    Positions are replaced, never mutated. Equality is identity: the same
    token is the same stored object, two tokens may share compartment and
    index (e.g. one in reserve and the other on the path at cell 0).
    """

    index: int
    compartment: Compartment = Compartment.RESERVE

    def same_place(self, other: "TokenPosition") -> bool:
        return self.compartment is other.compartment and self.index == other.index

    def is_in_reserve(self) -> bool:
        return self.compartment is Compartment.RESERVE

    def is_on_path(self) -> bool:
        return self.compartment is Compartment.PATH

    def is_home(self) -> bool:
        return self.compartment is Compartment.HOME

    def __str__(self) -> str:
        return f"{self.compartment.value}[{self.index}]"


@dataclass(frozen=True, slots=True)
class Move:
    token_id: int  # slot in the owner's token list
    token: TokenPosition  # the exact stored position being moved
    destination: TokenPosition

    def __str__(self) -> str:
        return f"token {self.token_id}: {self.token} -> {self.destination}"


@dataclass(frozen=True, slots=True)
class Capture:
    player: PlayerName
    token_id: int
    cell: int
    reserve_slot: int


@dataclass(frozen=True, slots=True)
class PlyResult:
    player: PlayerName  # who rolled
    roll: int
    turn_state: TurnState  # state after this roll
    move: Optional[Move] = None  # None when no legal move existed
    capture: Optional[Capture] = None
    winner: Optional[PlayerName] = None

    @property
    def moved(self) -> bool:
        return self.move is not None
